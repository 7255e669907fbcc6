"""DNA strand orientation."""

from __future__ import annotations

from enum import Enum


class Strand(Enum):
    """Orientation of a feature on the genome."""

    FORWARD = "+"
    REVERSE = "-"

    @classmethod
    def parse(cls, text: str) -> "Strand":
        """Parse ``"+"`` or ``"-"`` into a strand."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Invalid strand: {text}") from None

    def __str__(self) -> str:
        return self.value