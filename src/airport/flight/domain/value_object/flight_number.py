from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class FlightNumber:
    """フライト番号（業務キー）

    例: UA101, AA303
    作成後は変更されない。
    """

    value: str

    MIN_LENGTH: ClassVar[int] = 2
    MAX_LENGTH: ClassVar[int] = 10

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Flight number is required")
        if not self.MIN_LENGTH <= len(self.value) <= self.MAX_LENGTH:
            raise ValueError(
                f"Invalid flight number: {self.value}. "
                "Flight number must be between 2 and 10 characters"
            )

    def __str__(self) -> str:
        return self.value
