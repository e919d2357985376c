"""Numerical core: matrices, activations and the network engine."""

from .activations import relu, sigmoid, sigmoid_prime
from .matrix import Matrix, as_matrix
from .network import NeuralNetwork

__all__ = ["Matrix", "NeuralNetwork", "as_matrix", "relu", "sigmoid", "sigmoid_prime"]
