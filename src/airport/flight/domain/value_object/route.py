from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Route:
    """路線（出発地 + 到着地）"""

    origin: str
    destination: str

    MIN_LENGTH: ClassVar[int] = 3
    MAX_LENGTH: ClassVar[int] = 50

    def __post_init__(self) -> None:
        self._validate("Origin", self.origin)
        self._validate("Destination", self.destination)

    def _validate(self, label: str, location: str) -> None:
        if not isinstance(location, str) or not location.strip():
            raise ValueError(f"{label} is required")
        if not self.MIN_LENGTH <= len(location) <= self.MAX_LENGTH:
            raise ValueError(f"{label} must be between 3 and 50 characters")

    def __str__(self) -> str:
        return f"{self.origin}->{self.destination}"
