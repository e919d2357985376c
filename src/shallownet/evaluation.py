"""Scoring helpers for classifier outputs."""
from __future__ import annotations

import numpy as np


def predicted_classes(output) -> np.ndarray:
    """Index of the maximum column in each row."""

    return np.argmax(np.asarray(output, dtype=np.float64), axis=1)


def accuracy(predictions, labels) -> float:
    """Fraction of rows whose labelled class holds the row maximum.

    ``labels`` is one-hot; a row counts as correct when the prediction at the
    labelled column equals the largest prediction in that row, so ties are
    scored in the model's favour.
    """

    preds = np.asarray(predictions, dtype=np.float64)
    truth = np.asarray(labels, dtype=np.float64)
    if preds.shape[0] != truth.shape[0]:
        raise ValueError(f"predictions have {preds.shape[0]} rows but labels have {truth.shape[0]}")
    if preds.shape[0] == 0:
        return 0.0
    true_class = np.argmax(truth == 1.0, axis=1)
    hits = preds[np.arange(preds.shape[0]), true_class] == preds.max(axis=1)
    return float(np.count_nonzero(hits)) / preds.shape[0]


__all__ = ["accuracy", "predicted_classes"]
