"""Contigs, regions and the interval behaviour they share."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Contig:
    """A named sequence (chromosome, scaffold) with optional aliases."""

    name: str
    aliases: list[str] = field(default_factory=list, compare=False)

    def alias(self, name: str) -> None:
        """Register another name for this contig."""
        if name != self.name and name not in self.aliases:
            self.aliases.append(name)

    def __hash__(self) -> int:
        return hash(self.name)


class GenomeInterval:
    """Mixin for objects with ``contig``, ``start`` and ``end`` (1-based, inclusive)."""

    contig: Contig
    start: int
    end: int

    def length(self) -> int:
        return self.end - self.start + 1

    def covers(self, position: int) -> bool:
        return self.start <= position <= self.end

    def overlaps(self, other: "GenomeInterval") -> bool:
        return (
            self.contig == other.contig
            and self.start <= other.end
            and self.end >= other.start
        )

    def contains(self, other: "GenomeInterval") -> bool:
        return (
            self.contig == other.contig
            and self.start <= other.start
            and self.end >= other.end
        )

    def is_properly_bounded(self, end: int | None) -> bool:
        """Whether start <= end and, if given, the interval ends no later than ``end``."""
        if end is None:
            return self.start <= self.end
        return self.start <= self.end <= end

    def middle(self) -> int:
        """Middle coordinate, rounding up."""
        return -(-(self.start + self.end) // 2)


@dataclass
class Region(GenomeInterval):
    """A span on a contig. 1-based, inclusive on both ends."""

    contig: Contig
    start: int
    end: int