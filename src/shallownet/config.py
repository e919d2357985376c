"""Configuration dataclass for the feed-forward network."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class NetworkConfig:
    """Architecture and training hyperparameters.

    Parameters
    ----------
    input_neurons:
        Number of feature columns fed to the network.
    hidden_neurons:
        Width of the single hidden layer.
    output_neurons:
        Number of classes, i.e. columns of the one-hot label matrix.
    num_epochs:
        Number of full-batch gradient steps performed by ``train``.
    learning_rate:
        Step size applied to every gradient update.
    exact_gradients:
        Use the analytically exact backward pass with a sigmoid hidden layer
        at prediction time. When ``False`` (the default) the network keeps
        the historical formulas: the sigmoid derivative is taken on the raw
        output for both layers and prediction uses a ReLU hidden layer.
    seed:
        Optional seed for weight initialisation when no generator is passed
        to the network explicitly.

    Values are not validated; out-of-range widths surface as shape errors
    from the matrix operations.
    """

    input_neurons: int
    hidden_neurons: int
    output_neurons: int
    num_epochs: int
    learning_rate: float
    exact_gradients: bool = False
    seed: int | None = None

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "NetworkConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"unknown configuration keys: {', '.join(unknown)}")
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# Iris classifier defaults: four measurements, three species.
DEFAULT_CONFIG = NetworkConfig(
    input_neurons=4,
    hidden_neurons=3,
    output_neurons=3,
    num_epochs=5000,
    learning_rate=0.3,
)


def load_config(path: str | Path) -> NetworkConfig:
    """Read a :class:`NetworkConfig` from a JSON object on disk."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    values = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(values, dict):
        raise ValueError(f"config file must contain a JSON object: {path}")
    return NetworkConfig.from_dict(values)


__all__ = ["DEFAULT_CONFIG", "NetworkConfig", "load_config"]
