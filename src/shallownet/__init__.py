"""From-scratch one-hidden-layer network for tabular multi-class classification."""

from .config import DEFAULT_CONFIG, NetworkConfig, load_config
from .core import Matrix, NeuralNetwork
from .data import load_dataset, one_hot
from .errors import ShapeError, UninitializedModelError
from .evaluation import accuracy, predicted_classes

__all__ = [
    "DEFAULT_CONFIG",
    "Matrix",
    "NetworkConfig",
    "NeuralNetwork",
    "ShapeError",
    "UninitializedModelError",
    "accuracy",
    "load_config",
    "load_dataset",
    "one_hot",
    "predicted_classes",
]
