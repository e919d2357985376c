"""Data loading helpers producing feature and label matrices."""

from .tabular import load_dataset, one_hot

__all__ = ["load_dataset", "one_hot"]
