"""A track: the features of one contig, indexed for positional lookups."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Generic, Iterable, TypeVar

from tgv.interval import Contig, GenomeInterval, Region
from tgv.models import Gene, SubGeneFeature

_USIZE_MAX = 2**64 - 1

T = TypeVar("T", bound=GenomeInterval)
V = TypeVar("V")


class _SortedIndex(Generic[V]):
    """An ordered key -> value map; a later value for the same key wins."""

    def __init__(self, pairs: Iterable[tuple[int, V]]) -> None:
        mapping: dict[int, V] = {}
        for key, value in pairs:
            mapping[key] = value
        self._keys = sorted(mapping)
        self._values = [mapping[key] for key in self._keys]

    def __len__(self) -> int:
        return len(self._keys)

    def first(self) -> V | None:
        return self._values[0] if self._values else None

    def last(self) -> V | None:
        return self._values[-1] if self._values else None

    def first_at_or_after(self, key: int) -> V | None:
        i = bisect_left(self._keys, key)
        return self._values[i] if i < len(self._values) else None

    def last_at_or_before(self, key: int) -> V | None:
        i = bisect_right(self._keys, key) - 1
        return self._values[i] if i >= 0 else None

    def nth_after(self, key: int, n: int) -> V | None:
        """The n-th (0-based) value whose key is strictly greater than ``key``."""
        i = bisect_right(self._keys, key) + n
        return self._values[i] if i < len(self._values) else None

    def nth_before(self, key: int, n: int, *, inclusive: bool) -> V | None:
        """The n-th (0-based) value counting back from ``key``."""
        bound = bisect_right if inclusive else bisect_left
        i = bound(self._keys, key) - 1 - n
        return self._values[i] if i >= 0 else None

    def values_between(self, low: int, high: int, *, high_inclusive: bool) -> list[V]:
        lo = bisect_left(self._keys, low)
        hi = (bisect_right if high_inclusive else bisect_left)(self._keys, high)
        return self._values[lo:hi]


class Track(GenomeInterval, Generic[T]):
    """Non-overlapping features on a single contig, sorted by start.

    The track spans from its leftmost feature start to its rightmost feature
    end (1-based, inclusive).
    """

    def __init__(
        self, features: Iterable[T], contig: Contig, *, index_exons: bool = False
    ) -> None:
        self.features: list[T] = sorted(features, key=lambda f: f.start)
        self.contig = contig

        self._by_start: _SortedIndex[int] = _SortedIndex(
            (f.start, i) for i, f in enumerate(self.features)
        )
        self._by_end: _SortedIndex[int] = _SortedIndex(
            (f.end, i) for i, f in enumerate(self.features)
        )
        self._left = min((f.start for f in self.features), default=_USIZE_MAX)
        self._right = max((f.end for f in self.features), default=0)

        self._exons_by_start: _SortedIndex[tuple[int, int]] | None = None
        self._exons_by_end: _SortedIndex[tuple[int, int]] | None = None
        if index_exons:
            starts: list[tuple[int, tuple[int, int]]] = []
            ends: list[tuple[int, tuple[int, int]]] = []
            for i_gene, gene in enumerate(self.features):
                for i_exon in range(gene.n_exons()):
                    starts.append((gene.exon_starts[i_exon], (i_gene, i_exon)))
                    ends.append((gene.exon_ends[i_exon], (i_gene, i_exon)))
            self._exons_by_start = _SortedIndex(starts)
            self._exons_by_end = _SortedIndex(ends)

    @classmethod
    def from_features(cls, features: Iterable[T], contig: Contig) -> "Track[T]":
        """Build a track from features assumed not to overlap."""
        return cls(features, contig)

    @classmethod
    def from_genes(cls, genes: Iterable[Gene], contig: Contig) -> "Track[Gene]":
        """Build a gene track, also indexing the exons."""
        return cls(genes, contig, index_exons=True)

    @property
    def start(self) -> int:  # type: ignore[override]
        return self._left

    @property
    def end(self) -> int:  # type: ignore[override]
        return self._right

    def is_empty(self) -> bool:
        return not self.features

    def has_complete_data(self, region: Region) -> bool:
        """Whether the track spans all of ``region``."""
        return self.contains(region)

    # Features

    def feature_at(self, position: int) -> T | None:
        """The feature covering ``position`` (1-based), if any."""
        if not self.covers(position):
            return None
        end_index = self._by_end.first_at_or_after(position)
        start_index = self._by_start.last_at_or_before(position)
        if start_index is None or end_index is None or start_index != end_index:
            return None
        return self.features[start_index]

    def features_overlapping(self, region: Region) -> list[T]:
        found = [
            self.features[i]
            for i in self._by_end.values_between(
                region.start, region.end, high_inclusive=False
            )
        ]
        at_end = self.feature_at(region.end)
        if at_end is not None:
            found.append(at_end)
        return found

    def k_features_before(self, position: int, k: int) -> T | None:
        """The k-th feature ending before ``position``; k=0 is the one covering it."""
        if k == 0:
            return self.feature_at(position)
        if not self.features or position < self._left:
            return None
        index = self._by_end.nth_before(position, k - 1, inclusive=False)
        return None if index is None else self.features[index]

    def k_features_after(self, position: int, k: int) -> T | None:
        """The k-th feature starting after ``position``; k=0 is the one covering it."""
        if k == 0:
            return self.feature_at(position)
        if not self.features or position > self._right:
            return None
        index = self._by_start.nth_after(position, k - 1)
        return None if index is None else self.features[index]

    def saturating_k_features_after(self, position: int, k: int) -> T | None:
        """Like k_features_after, falling back to the last feature."""
        if k == 0 or not self.features:
            return None
        found = self.k_features_after(position, k)
        return found if found is not None else self.features[-1]

    def saturating_k_features_before(self, position: int, k: int) -> T | None:
        """Like k_features_before, falling back to the first feature."""
        if k == 0 or not self.features:
            return None
        found = self.k_features_before(position, k)
        return found if found is not None else self.features[0]

    def features_between(self, start: int, end: int) -> list[T]:
        """Features lying entirely within [start, end]."""
        return [
            self.features[i]
            for i in self._by_start.values_between(start, end, high_inclusive=True)
            if self.features[i].end <= end
        ]

    # Exons

    def _exon_indexes(
        self,
    ) -> tuple[_SortedIndex[tuple[int, int]], _SortedIndex[tuple[int, int]]]:
        if self._exons_by_start is None or self._exons_by_end is None:
            raise TypeError("Exon lookups need a track built with from_genes")
        return self._exons_by_start, self._exons_by_end

    def _exon(self, key: tuple[int, int]) -> SubGeneFeature:
        i_gene, i_exon = key
        return self.features[i_gene].get_exon(i_exon)

    def exon_at(self, position: int) -> SubGeneFeature | None:
        """The exon covering ``position`` (1-based), if any."""
        by_start, by_end = self._exon_indexes()
        end_key = by_end.first_at_or_after(position)
        start_key = by_start.last_at_or_before(position)
        if start_key is None or end_key is None or start_key != end_key:
            return None
        return self._exon(start_key)

    def k_exons_before(self, position: int, k: int) -> SubGeneFeature | None:
        if k == 0:
            return self.exon_at(position)
        _, by_end = self._exon_indexes()
        if not self.features or position < self._left:
            return None
        key = by_end.nth_before(position, k - 1, inclusive=True)
        return None if key is None else self._exon(key)

    def k_exons_after(self, position: int, k: int) -> SubGeneFeature | None:
        if k == 0:
            return self.exon_at(position)
        by_start, _ = self._exon_indexes()
        if not self.features or position > self._right:
            return None
        key = by_start.nth_after(position, k - 1)
        return None if key is None else self._exon(key)

    def saturating_k_exons_after(self, position: int, k: int) -> SubGeneFeature | None:
        """Like k_exons_after, falling back to the last exon."""
        by_start, _ = self._exon_indexes()
        if k == 0 or not len(by_start):
            return None
        found = self.k_exons_after(position, k)
        if found is not None:
            return found
        return self._exon(by_start.last())

    def saturating_k_exons_before(self, position: int, k: int) -> SubGeneFeature | None:
        """Like k_exons_before, falling back to the first exon."""
        by_start, _ = self._exon_indexes()
        if k == 0 or not len(by_start):
            return None
        found = self.k_exons_before(position, k)
        if found is not None:
            return found
        return self._exon(by_start.first())