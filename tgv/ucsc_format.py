"""Parsing of UCSC table rows and API records into genes, bands and track names."""

from __future__ import annotations

import re
from collections.abc import Mapping
from functools import cmp_to_key
from typing import Any, Iterable

from tgv.interval import Contig
from tgv.models import CytobandSegment, Gene
from tgv.strand import Strand

_PREFERRED_TRACKS = (
    "ncbiRefSeqSelect",
    "ncbiRefSeqCurated",
    "ncbiRefSeq",
    "ncbiGene",
    "refGenes",
)

_UNSIGNED = re.compile(r"\+?[0-9]+")

# Field shapes of the gene records the UCSC API returns, tried in order.
_FULL_GENE_FIELDS = {
    "name": str,
    "name2": str,
    "strand": str,
    "txStart": int,
    "txEnd": int,
    "cdsStart": int,
    "cdsEnd": int,
    "exonStarts": str,
    "exonEnds": str,
}
_UNNAMED_GENE_FIELDS = {
    key: kind for key, kind in _FULL_GENE_FIELDS.items() if key != "name2"
}
_BED_GENE_FIELDS = {
    "chromStart": int,
    "chromEnd": int,
    "name": str,
    "strand": str,
    "thickStart": int,
    "thickEnd": int,
}


def parse_blob_to_coords(blob: bytes | str) -> list[int]:
    """Parse a comma-separated coordinate blob, skipping entries that are not numbers."""
    text = blob.decode("utf-8", errors="replace") if isinstance(blob, bytes) else blob
    return [
        int(part)
        for part in text.rstrip(",").split(",")
        if _UNSIGNED.fullmatch(part)
    ]


def parse_comma_separated_list(text: str) -> list[int]:
    """Parse a comma-separated list of non-negative integers; raise ValueError on junk."""
    values = []
    for part in text.rstrip(",").split(","):
        if not part:
            continue
        if not _UNSIGNED.fullmatch(part):
            raise ValueError(f"Failed to parse {part}")
        values.append(int(part))
    return values


def all_track_names(content: Any) -> list[str]:
    """Collect track names from a track listing, descending into composite tracks."""
    if not isinstance(content, Mapping):
        raise ValueError("Failed to get genome from UCSC API")
    names: list[str] = []
    for key in sorted(content):
        value = content[key]
        if isinstance(value, Mapping) and "compositeContainer" in value:
            names.extend(all_track_names(value))
        else:
            names.append(str(key))
    return names


def preferred_track_name(names: Iterable[str]) -> str | None:
    """The most preferred gene track among ``names``, or None."""
    available = set(names)
    return next((pref for pref in _PREFERRED_TRACKS if pref in available), None)


def _contig_key(name: str) -> tuple[int, int, str]:
    rest = name[3:] if name.startswith("chr") else name
    if rest.isascii() and rest.isdigit():
        return (0, int(rest), "")
    return (1, 0, rest)


def _compare_contigs(a: tuple[Contig, int], b: tuple[Contig, int]) -> int:
    (contig_a, length_a), (contig_b, length_b) = a, b
    if contig_a.name.startswith("chr") or contig_b.name.startswith("chr"):
        key_a, key_b = _contig_key(contig_a.name), _contig_key(contig_b.name)
        return (key_a > key_b) - (key_a < key_b)
    return (length_a < length_b) - (length_a > length_b)


def sort_contigs(contigs: Iterable[tuple[Contig, int]]) -> list[tuple[Contig, int]]:
    """Order contigs: chromosome names by name, others by length, longest first."""
    return sorted(contigs, key=cmp_to_key(_compare_contigs))


def _has_fields(record: Mapping[str, Any], spec: Mapping[str, type]) -> bool:
    for key, kind in spec.items():
        value = record.get(key)
        if kind is int:
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                return False
        elif not isinstance(value, kind):
            return False
    return True


def gene_from_api_record(record: Mapping[str, Any], contig: Contig) -> Gene:
    """Build a gene from one record of a UCSC API track response."""
    if not isinstance(record, Mapping):
        raise ValueError(f"Gene record is not an object: {record!r}")
    if _has_fields(record, _FULL_GENE_FIELDS) or _has_fields(
        record, _UNNAMED_GENE_FIELDS
    ):
        name = record["name"]
        return Gene(
            id=name,
            name=record.get("name2", name) if "name2" in _present(record) else name,
            strand=Strand.parse(record["strand"]),
            contig=contig,
            transcription_start=record["txStart"],
            transcription_end=record["txEnd"],
            cds_start=record["cdsStart"],
            cds_end=record["cdsEnd"],
            exon_starts=parse_comma_separated_list(record["exonStarts"]),
            exon_ends=parse_comma_separated_list(record["exonEnds"]),
            has_exons=True,
        )
    if _has_fields(record, _BED_GENE_FIELDS):
        return Gene(
            id=record["name"],
            name=record["name"],
            strand=Strand.parse(record["strand"]),
            contig=contig,
            transcription_start=record["chromStart"],
            transcription_end=record["chromEnd"],
            cds_start=record["thickStart"],
            cds_end=record["thickEnd"],
            exon_starts=[],
            exon_ends=[],
            has_exons=False,
        )
    raise ValueError(f"Unrecognised gene record: {record!r}")


def _present(record: Mapping[str, Any]) -> set[str]:
    return {key for key, value in record.items() if isinstance(value, str)}


def gene_from_db_row(row: Mapping[str, Any]) -> Gene:
    """Build a gene from a row of a UCSC gene table (0-based, half-open)."""
    name = row["name"]
    name2 = row.get("name2")
    if isinstance(name2, bytes):
        name2 = name2.decode("utf-8", errors="replace")
    return Gene(
        id=name,
        name=name2 if isinstance(name2, str) else name,
        strand=Strand.parse(row["strand"]),
        contig=Contig(row["chrom"]),
        transcription_start=int(row["txStart"]) + 1,
        transcription_end=int(row["txEnd"]),
        cds_start=int(row["cdsStart"]) + 1,
        cds_end=int(row["cdsEnd"]),
        exon_starts=[v + 1 for v in parse_blob_to_coords(row["exonStarts"])],
        exon_ends=parse_blob_to_coords(row["exonEnds"]),
        has_exons=True,
    )


def cytoband_segment_from_record(
    record: Mapping[str, Any], contig: Contig
) -> CytobandSegment:
    """Build a band from a ``cytoBandIdeo`` row or record (0-based, half-open)."""
    try:
        return CytobandSegment(
            contig=contig,
            start=int(record["chromStart"]) + 1,
            end=int(record["chromEnd"]),
            name=str(record["name"]),
            stain=str(record["gieStain"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise ValueError(f"Invalid cytoband record: {record!r}") from exc