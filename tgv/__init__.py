"""Contigs and regions, genes and gene tracks, a track cache and UCSC data parsers."""

__version__ = "0.0.5"