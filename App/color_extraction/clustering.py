"""Greedy online clustering of weighted color samples.

AIDEV-NOTE: Samples are merged one at a time, in the order the sampler emits
them, into the closest existing bucket within SIMILARITY_THRESHOLD. This is
not a global optimum: a bucket's representative drifts as samples merge, so a
later sample may miss a bucket it would have matched earlier. That order
dependence is part of the contract and must be kept.
"""

import math
from dataclasses import dataclass
from typing import Iterable

from models import ColorEntry, Sample

# Squared RGB distance under which a sample joins an existing bucket.
# 30 ** 2 lets solid regions with ~10-17 units of per-channel noise merge
# while keeping distinct hues apart. Not configurable.
SIMILARITY_THRESHOLD = 30**2


def color_distance_sq(
    a: "tuple[float, float, float]", b: "tuple[float, float, float]"
) -> float:
    """Squared Euclidean distance between two RGB colors."""
    dr = a[0] - b[0]
    dg = a[1] - b[1]
    db = a[2] - b[2]
    return dr * dr + dg * dg + db * db


@dataclass
class Bucket:
    """A running cluster: real-valued weighted-average color plus total weight."""

    red: float
    green: float
    blue: float
    weight: float = 0.0

    @classmethod
    def from_sample(cls, sample: Sample) -> "Bucket":
        r, g, b = sample.rgb
        return cls(float(r), float(g), float(b), sample.weight)

    @property
    def color(self) -> "tuple[float, float, float]":
        return (self.red, self.green, self.blue)

    def merge(self, sample: Sample) -> None:
        """Fold a sample into the running weighted average.

        A zero-weight sample into a bucket with positive weight leaves the
        color untouched. When both weights are zero the color is replaced by
        the sample's.
        """
        total = self.weight + sample.weight
        r, g, b = sample.rgb
        if total == 0:
            self.red, self.green, self.blue = float(r), float(g), float(b)
        elif sample.weight:
            self.red = (self.red * self.weight + r * sample.weight) / total
            self.green = (self.green * self.weight + g * sample.weight) / total
            self.blue = (self.blue * self.weight + b * sample.weight) / total
        self.weight = total

    def to_entry(self) -> ColorEntry:
        return ColorEntry(
            (_to_channel(self.red), _to_channel(self.green), _to_channel(self.blue)),
            self.weight,
        )


def find_closest_bucket(
    buckets: "list[Bucket]", rgb: "tuple[int, int, int]"
) -> "tuple[int, float]":
    """Return (index, squared distance) of the bucket nearest to ``rgb``.

    The earliest bucket wins on equal distances. Returns (-1, inf) when there
    are no buckets.
    """
    best_index = -1
    best_distance = math.inf
    for index, bucket in enumerate(buckets):
        distance = color_distance_sq(bucket.color, rgb)
        if distance < best_distance:
            best_index = index
            best_distance = distance
    return best_index, best_distance


def cluster_samples(samples: Iterable[Sample]) -> "list[ColorEntry]":
    """Cluster samples into a ranked list of representative colors.

    Args:
        samples: Weighted samples, consumed once in order

    Returns:
        One ColorEntry per bucket, sorted by descending weight. Buckets with
        equal weight keep the order in which they were created.
    """
    buckets: "list[Bucket]" = []

    for sample in samples:
        index, distance = find_closest_bucket(buckets, sample.rgb)
        if index >= 0 and distance <= SIMILARITY_THRESHOLD:
            buckets[index].merge(sample)
        else:
            buckets.append(Bucket.from_sample(sample))

    entries = [bucket.to_entry() for bucket in buckets]
    # sorted() is stable, so creation order breaks ties
    return sorted(entries, key=lambda entry: entry.weight, reverse=True)


def _to_channel(value: float) -> int:
    """Round half up to the nearest integer and clamp to 0-255."""
    return max(0, min(255, int(math.floor(value + 0.5))))
