from __future__ import annotations

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class PassengerId:
    """乗客ID（Value Object）

    不変で、値が同じなら同一とみなされる。
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("PassengerId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> PassengerId:
        return cls(value=str(uuid.uuid4()))
