"""Labelled image samples loaded from CSV files in MNIST layout."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Sequence

PIXELS_PER_SAMPLE = 784
MAX_PIXEL_VALUE = 255.0


class Dataset:
    """In-memory collection of (label, pixels) samples."""

    def __init__(
        self,
        labels: Iterable[int],
        samples: Iterable[Sequence[float]],
    ) -> None:
        self._labels = list(labels)
        self._samples = [tuple(sample) for sample in samples]
        if len(self._labels) != len(self._samples):
            raise ValueError("Number of labels does not match number of samples")

    def __len__(self) -> int:
        return len(self._labels)

    def __iter__(self) -> Iterator[tuple[int, tuple[float, ...]]]:
        return zip(self._labels, self._samples)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._labels):
            raise IndexError("Index out of range")

    def label(self, index: int) -> int:
        """Return the label of the sample at ``index``."""
        self._check_index(index)
        return self._labels[index]

    def sample(self, index: int) -> tuple[float, ...]:
        """Return the normalised pixels of the sample at ``index``."""
        self._check_index(index)
        return self._samples[index]


def parse_line(line: str) -> tuple[int, list[float]]:
    """Parse ``label,p0,...,p783`` into a label and pixels scaled to [0, 1]."""
    if not line:
        raise ValueError(f"Invalid line in file: {line}")
    tokens = line.split(",")
    # A trailing separator does not introduce an extra empty field.
    if len(tokens) > 1 and tokens[-1] == "":
        tokens.pop()
    label = int(tokens[0])
    pixels = [float(token) / MAX_PIXEL_VALUE for token in tokens[1:]]
    if len(pixels) != PIXELS_PER_SAMPLE:
        raise ValueError(f"Expected {PIXELS_PER_SAMPLE} pixels, got {len(pixels)}")
    return label, pixels


def load_dataset(path: str | os.PathLike[str]) -> Dataset:
    """Read every line of the CSV file at ``path`` into a :class:`Dataset`."""
    labels: list[int] = []
    samples: list[list[float]] = []
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            label, pixels = parse_line(raw.rstrip("\n"))
            labels.append(label)
            samples.append(pixels)
    return Dataset(labels, samples)