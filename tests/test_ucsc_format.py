import pytest

from tgv.interval import Contig
from tgv.strand import Strand
from tgv.ucsc_format import (
    all_track_names,
    cytoband_segment_from_record,
    gene_from_api_record,
    gene_from_db_row,
    parse_blob_to_coords,
    parse_comma_separated_list,
    preferred_track_name,
    sort_contigs,
)


def test_parse_blob_to_coords_trailing_comma():
    assert parse_blob_to_coords(b"100,200,300,") == [100, 200, 300]


def test_parse_blob_to_coords_skips_junk():
    assert parse_blob_to_coords(b"100,abc,,300") == [100, 300]


def test_parse_blob_to_coords_empty():
    assert parse_blob_to_coords(b"") == []


def test_parse_comma_separated_list():
    assert parse_comma_separated_list("65,124,76,") == [65, 124, 76]


def test_parse_comma_separated_list_empty():
    assert parse_comma_separated_list("") == []


def test_parse_comma_separated_list_rejects_junk():
    with pytest.raises(ValueError, match="Failed to parse x"):
        parse_comma_separated_list("1,x,3")


def test_preferred_track_name_order():
    names = ["ncbiGene", "knownGene", "ncbiRefSeqCurated"]
    assert preferred_track_name(names) == "ncbiRefSeqCurated"


def test_preferred_track_name_select_wins():
    names = ["refGenes", "ncbiRefSeq", "ncbiRefSeqSelect"]
    assert preferred_track_name(names) == "ncbiRefSeqSelect"


def test_preferred_track_name_none():
    assert preferred_track_name(["knownGene", "gc5Base"]) is None


def test_all_track_names_recurses_into_composites():
    content = {
        "gc5Base": {"shortLabel": "GC"},
        "refSeqComposite": {
            "compositeContainer": "TRUE",
            "ncbiRefSeq": {"shortLabel": "all"},
            "ncbiRefSeqSelect": {"shortLabel": "select"},
        },
    }
    names = all_track_names(content)
    assert set(names) == {"gc5Base", "compositeContainer", "ncbiRefSeq", "ncbiRefSeqSelect"}
    assert "refSeqComposite" not in names
    assert preferred_track_name(names) == "ncbiRefSeqSelect"


def test_all_track_names_rejects_non_object():
    with pytest.raises(ValueError, match="Failed to get genome"):
        all_track_names(["not", "an", "object"])


def test_sort_contigs_by_length_when_unnamed():
    contigs = [(Contig("scafA"), 10), (Contig("scafB"), 300), (Contig("scafC"), 42)]
    result = sort_contigs(contigs)
    assert [c.name for c, _ in result] == ["scafB", "scafC", "scafA"]


def test_sort_contigs_is_permutation():
    contigs = [(Contig("chr2"), 5), (Contig("chr1"), 9), (Contig("chrX"), 7)]
    result = sort_contigs(contigs)
    assert sorted(c.name for c, _ in result) == ["chr1", "chr2", "chrX"]
    assert sort_contigs(result) == result


def _db_row(**overrides):
    row = {
        "name": "NM_000546",
        "name2": "TP53",
        "chrom": "chr17",
        "strand": "-",
        "txStart": 7661778,
        "txEnd": 7687538,
        "cdsStart": 7668401,
        "cdsEnd": 7687490,
        "exonStarts": b"7661778,7687376,",
        "exonEnds": b"7669690,7687538,",
    }
    row.update(overrides)
    return row


def test_gene_from_db_row_converts_coordinates():
    row = _db_row()
    gene = gene_from_db_row(row)
    assert gene.id == "NM_000546"
    assert gene.name == "TP53"
    assert gene.strand is Strand.REVERSE
    assert gene.contig == Contig("chr17")
    assert gene.start == row["txStart"] + 1
    assert gene.end == row["txEnd"]
    assert gene.exon_ends == [7669690, 7687538]
    assert [s - 1 for s in gene.exon_starts] == [7661778, 7687376]
    assert gene.has_exons


def test_gene_from_db_row_without_name2_uses_name():
    row = _db_row()
    del row["name2"]
    assert gene_from_db_row(row).name == "NM_000546"


def test_gene_from_db_row_bad_strand():
    with pytest.raises(ValueError, match="Invalid strand"):
        gene_from_db_row(_db_row(strand="?"))


def test_gene_from_api_record_full():
    record = {
        "name": "NM_1",
        "name2": "ABC",
        "strand": "+",
        "txStart": 100,
        "txEnd": 500,
        "cdsStart": 120,
        "cdsEnd": 480,
        "exonStarts": "100,300,",
        "exonEnds": "200,500,",
    }
    contig = Contig("chr1")
    gene = gene_from_api_record(record, contig)
    assert gene.id == "NM_1"
    assert gene.name == "ABC"
    assert gene.start == 100
    assert gene.end == 500
    assert gene.exon_starts == [100, 300]
    assert gene.exon_ends == [200, 500]
    assert gene.contig == contig


def test_gene_from_api_record_without_name2():
    record = {
        "name": "geneX",
        "strand": "-",
        "txStart": 1,
        "txEnd": 9,
        "cdsStart": 2,
        "cdsEnd": 8,
        "exonStarts": "1,",
        "exonEnds": "9,",
    }
    gene = gene_from_api_record(record, Contig("chr2"))
    assert gene.id == "geneX"
    assert gene.name == "geneX"
    assert gene.strand is Strand.REVERSE


def test_gene_from_api_record_bed_like():
    record = {
        "chrom": "NC_072398.2",
        "chromStart": 130929426,
        "chromEnd": 130985030,
        "name": "NM_001142759.1",
        "strand": "+",
        "thickStart": 130929440,
        "thickEnd": 130982945,
    }
    gene = gene_from_api_record(record, Contig("NC_072398.2"))
    assert gene.start == 130929426
    assert gene.end == 130985030
    assert gene.cds_start == 130929440
    assert gene.cds_end == 130982945
    assert gene.has_exons is False
    assert gene.n_exons() == 0


def test_gene_from_api_record_unrecognised():
    with pytest.raises(ValueError):
        gene_from_api_record({"name": "x"}, Contig("chr1"))


def test_gene_from_api_record_bad_exon_list():
    record = {
        "name": "a",
        "name2": "b",
        "strand": "+",
        "txStart": 1,
        "txEnd": 2,
        "cdsStart": 1,
        "cdsEnd": 2,
        "exonStarts": "1,z,",
        "exonEnds": "2,",
    }
    with pytest.raises(ValueError, match="Failed to parse z"):
        gene_from_api_record(record, Contig("chr1"))


def test_cytoband_segment_from_record():
    record = {"chromStart": 0, "chromEnd": 2300000, "name": "p36.33", "gieStain": "gneg"}
    contig = Contig("chr1")
    segment = cytoband_segment_from_record(record, contig)
    assert segment.start == record["chromStart"] + 1
    assert segment.end == 2300000
    assert segment.name == "p36.33"
    assert segment.stain == "gneg"
    assert segment.contig == contig


def test_cytoband_segment_missing_field():
    with pytest.raises(ValueError, match="Invalid cytoband record"):
        cytoband_segment_from_record({"chromStart": 0}, Contig("chr1"))