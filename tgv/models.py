"""Genome references and the features shown on gene tracks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tgv.interval import Contig, GenomeInterval
from tgv.strand import Strand


class ReferenceKind(Enum):
    """The family a reference genome belongs to."""

    HG19 = "hg19"
    HG38 = "hg38"
    UCSC_GENOME = "ucsc_genome"
    UCSC_ACCESSION = "ucsc_accession"


@dataclass(frozen=True)
class Reference:
    """A reference genome: a human build, a UCSC assembly or a GenArk accession."""

    kind: ReferenceKind
    name: str

    @classmethod
    def hg19(cls) -> "Reference":
        return cls(ReferenceKind.HG19, "hg19")

    @classmethod
    def hg38(cls) -> "Reference":
        return cls(ReferenceKind.HG38, "hg38")

    @classmethod
    def ucsc_genome(cls, name: str) -> "Reference":
        return cls(ReferenceKind.UCSC_GENOME, name)

    @classmethod
    def ucsc_accession(cls, name: str) -> "Reference":
        return cls(ReferenceKind.UCSC_ACCESSION, name)

    def __str__(self) -> str:
        return self.name


@dataclass
class SubGeneFeature(GenomeInterval):
    """A part of a gene, such as an exon. 1-based, inclusive."""

    contig: Contig
    start: int
    end: int


@dataclass
class Gene(GenomeInterval):
    """A gene (transcript) with its exons. Coordinates are 1-based, inclusive."""

    id: str
    name: str
    strand: Strand
    contig: Contig
    transcription_start: int
    transcription_end: int
    cds_start: int
    cds_end: int
    exon_starts: list[int] = field(default_factory=list)
    exon_ends: list[int] = field(default_factory=list)
    has_exons: bool = True

    @property
    def start(self) -> int:  # type: ignore[override]
        return self.transcription_start

    @property
    def end(self) -> int:  # type: ignore[override]
        return self.transcription_end

    def n_exons(self) -> int:
        return len(self.exon_starts)

    def get_exon(self, index: int) -> SubGeneFeature:
        """Return exon number ``index`` (0-based); raise IndexError if absent."""
        if not 0 <= index < self.n_exons():
            raise IndexError(f"Exon index {index} out of range for gene {self.name}")
        return SubGeneFeature(
            self.contig, self.exon_starts[index], self.exon_ends[index]
        )


@dataclass
class CytobandSegment(GenomeInterval):
    """One band of a chromosome ideogram. 1-based, inclusive."""

    contig: Contig
    start: int
    end: int
    name: str
    stain: str


@dataclass
class Cytoband:
    """All bands of one contig."""

    reference: Reference | None
    contig: Contig
    segments: list[CytobandSegment] = field(default_factory=list)