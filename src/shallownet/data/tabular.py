"""Comma-separated feature/label files."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence, Tuple

import numpy as np

from ..core.matrix import Matrix


def load_dataset(
    path: str | Path,
    *,
    num_features: int = 4,
    num_labels: int = 3,
    has_header: bool = True,
) -> Tuple[Matrix, Matrix]:
    """Return ``(features, labels)`` parsed from a numeric CSV file.

    Each record holds ``num_features`` feature columns followed by
    ``num_labels`` one-hot label columns.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dataset file not found: {path}")
    expected = num_features + num_labels
    lines = path.read_text(encoding="utf-8").splitlines()
    first = 1 if has_header else 0
    records = []
    for lineno, line in enumerate(lines[first:], start=first + 1):
        if not line.strip():
            continue
        fields = line.split(",")
        if len(fields) != expected:
            raise ValueError(f"{path}: line {lineno} has {len(fields)} fields, expected {expected}")
        records.append(line)
    if not records:
        raise ValueError(f"no records in {path}")

    data = np.loadtxt(records, delimiter=",", dtype=np.float64, ndmin=2)
    return Matrix.from_array(data[:, :num_features]), Matrix.from_array(data[:, num_features:])


def one_hot(classes: Sequence[int], num_classes: int) -> Matrix:
    """Encode integer class indices as a one-hot label matrix."""

    indices = np.asarray(classes, dtype=np.int64)
    if indices.size and (indices.min() < 0 or indices.max() >= num_classes):
        raise ValueError(f"class indices must lie in [0, {num_classes})")
    encoded = np.zeros((indices.size, num_classes), dtype=np.float64)
    encoded[np.arange(indices.size), indices] = 1.0
    return Matrix.from_array(encoded)


__all__ = ["load_dataset", "one_hot"]
