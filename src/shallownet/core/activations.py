"""Element-wise activation functions over ``numpy`` arrays."""
from __future__ import annotations

import numpy as np


def sigmoid(v: np.ndarray) -> np.ndarray:
    return 1.0 / (1.0 + np.exp(-v))


def sigmoid_prime(v: np.ndarray) -> np.ndarray:
    """Derivative of the sigmoid expressed through its output ``v = sigmoid(x)``."""

    return v * (1.0 - v)


def relu(v: np.ndarray) -> np.ndarray:
    return np.where(v < 0.0, 0.0, v)


__all__ = ["relu", "sigmoid", "sigmoid_prime"]
