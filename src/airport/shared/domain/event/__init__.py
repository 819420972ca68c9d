from .domain_event import DomainEvent as DomainEvent
from .event_publisher import EventPublisher as EventPublisher
