"""Cache of gene tracks and genes fetched from a track service."""

from __future__ import annotations

from tgv.interval import Contig
from tgv.models import Gene
from tgv.track import Track


class TrackCache:
    """Holds the results of track service queries so they are not repeated.

    Tracks are stored per contig and found by the contig's name or any of its
    aliases. A contig that was queried but had no track data is stored as
    ``None``. Every gene of an added track is also indexed by its name.

    ``preferred_track_known`` tells whether the preferred gene track has been
    looked up; ``preferred_track_name`` then holds the result, which may be
    ``None`` when no suitable track exists. ``hub_url`` is the hub URL of a
    GenArk accession once it has been resolved.
    """

    def __init__(self) -> None:
        self._tracks: list[Track[Gene] | None] = []
        self._tracks_by_contig: dict[str, int] = {}
        self._genes_by_name: dict[str, Gene | None] = {}
        self.preferred_track_known: bool = False
        self.preferred_track_name: str | None = None
        self.hub_url: str | None = None

    def track_index(self, contig: Contig) -> int | None:
        """Index of the cached track for ``contig``, matching its name or aliases."""
        index = self._tracks_by_contig.get(contig.name)
        if index is not None:
            return index
        return next(
            (
                self._tracks_by_contig[alias]
                for alias in contig.aliases
                if alias in self._tracks_by_contig
            ),
            None,
        )

    def includes_contig(self, contig: Contig) -> bool:
        """Whether ``contig`` has been queried."""
        return self.track_index(contig) is not None

    def get_track(self, contig: Contig) -> Track[Gene] | None:
        """The cached track for ``contig``; None if it was queried but has no data.

        Raises KeyError if the contig has not been queried.
        """
        index = self.track_index(contig)
        if index is None:
            raise KeyError(contig.name)
        return self._tracks[index]

    def includes_gene(self, gene_name: str) -> bool:
        """Whether a gene of this name is known to the cache."""
        return gene_name in self._genes_by_name

    def get_gene(self, gene_name: str) -> Gene | None:
        """The cached gene named ``gene_name``; None if it is known to be absent.

        Raises KeyError if the name has not been seen.
        """
        return self._genes_by_name[gene_name]

    def add_track(self, contig: Contig, track: Track[Gene] | None) -> None:
        """Store ``track`` (or None for a contig without data) under ``contig``."""
        if track is not None:
            for gene in track.features:
                self._genes_by_name[gene.name] = gene
        self._tracks.append(track)
        index = len(self._tracks) - 1
        self._tracks_by_contig[contig.name] = index
        for alias in contig.aliases:
            self._tracks_by_contig[alias] = index