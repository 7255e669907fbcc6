# tgv

Building blocks for exploring genome annotations: contigs and regions,
genes with their exons, gene tracks that answer "which gene is here" and
"what is the next exon" quickly, a cache for fetched tracks, and parsers
for the rows and records that the UCSC Genome Browser hands out.

The package has no runtime dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Coordinates

All genome coordinates are 1-based and inclusive. The UCSC parsers in
`tgv.ucsc_format` convert 0-based, half-open table rows on the way in.

## Contigs and regions

```python
from tgv.interval import Contig, Region

chr1 = Contig("chr1")
chr1.alias("1")                      # another name for the same contig

region = Region(chr1, 100, 200)
region.length()                      # 101
region.covers(150)                   # True
region.contains(Region(chr1, 120, 130))  # True
region.middle()                      # 150
```

`Strand.parse("+")` and `Strand.parse("-")` in `tgv.strand` give the two
strand orientations; anything else raises `ValueError`.

## Genes and references

`tgv.models` holds the data types: `Gene`, `SubGeneFeature` (an exon),
`CytobandSegment`, `Cytoband` and `Reference`, with
`Reference.hg19()`, `Reference.hg38()`, `Reference.ucsc_genome(name)` and
`Reference.ucsc_accession(name)`. `Gene.get_exon(i)` returns exon `i` as a
`SubGeneFeature` and raises `IndexError` if there is no such exon.

## Gene tracks

```python
from tgv.interval import Contig
from tgv.models import Gene
from tgv.strand import Strand
from tgv.track import Track

genes = [
    Gene(id="gene1", name="gene1", strand=Strand.FORWARD, contig=Contig("chr1"),
         transcription_start=2, transcription_end=10, cds_start=2, cds_end=10,
         exon_starts=[2, 8], exon_ends=[5, 10]),
    Gene(id="gene2", name="gene2", strand=Strand.FORWARD, contig=Contig("chr1"),
         transcription_start=41, transcription_end=50, cds_start=45, cds_end=50,
         exon_starts=[41], exon_ends=[50]),
]
track = Track.from_genes(genes, Contig("chr1"))

track.feature_at(5).name            # "gene1"
track.k_features_after(2, 1).name   # "gene2": the next gene starting after 2
track.k_exons_before(51, 2).start   # 8: the second exon ending at or before 51
track.features_between(1, 20)       # genes lying entirely within [1, 20]
```

With `k=0` the `k_*` lookups return the feature or exon covering the
position. The `saturating_k_*` variants fall back to the last (or first)
feature or exon when there are fewer than `k` in that direction.
`Track.from_features` builds a track of any interval type; exon lookups
need a track built with `from_genes`.

## Track cache

`tgv.track_cache.TrackCache` stores one track per contig, found by the
contig's name or any alias, and indexes every gene of an added track by
name:

```python
from tgv.track_cache import TrackCache

cache = TrackCache()
cache.add_track(Contig("chr1"), track)
cache.includes_contig(Contig("chr1"))   # True
cache.get_gene("gene2").start           # 41
```

A contig queried without result can be stored as `None`. `get_track` and
`get_gene` raise `KeyError` for names never seen.

## UCSC data parsing

`tgv.ucsc_format` turns UCSC data into the package's types:

- `gene_from_db_row(row)` – a gene table row (0-based) into a `Gene`
- `gene_from_api_record(record, contig)` – a track record in any of the
  gene record shapes the REST API returns
- `cytoband_segment_from_record(record, contig)` – a `cytoBandIdeo` row
- `parse_blob_to_coords` and `parse_comma_separated_list` – exon
  coordinate lists such as `"1,2,3,"`
- `all_track_names(content)` and `preferred_track_name(names)` – pick the
  gene track to use from a track listing, preferring `ncbiRefSeqSelect`,
  then `ncbiRefSeqCurated`, `ncbiRefSeq`, `ncbiGene`, `refGenes`
- `sort_contigs(contigs)` – order `(Contig, length)` pairs: chromosome
  names numerically, other contigs longest first

`tgv.ucsc.UcscHost` names the US and EU public database mirrors;
`UcscHost.auto()` picks one from the local time zone and `url()` gives
its host name.

## What this package does not do

It does not fetch anything itself: there is no HTTP or database client for
the UCSC services, so callers load the rows and records and hand them to
the parsers. There is no on-screen viewing window, no terminal display and
no command-line program.