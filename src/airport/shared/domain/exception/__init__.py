from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    InvalidStateException,
    OptimisticLockException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "BusinessRuleViolationException",
    "ResourceNotFoundException",
    "InvalidStateException",
    "DuplicateResourceException",
    "OptimisticLockException",
]
