"""Single hidden layer feed-forward network with hand-derived gradients."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from ..config import NetworkConfig
from ..errors import ShapeError, UninitializedModelError
from .activations import relu, sigmoid, sigmoid_prime
from .matrix import Matrix, as_matrix

RandomSource = Union[np.random.Generator, int, None]


def make_rng(source: RandomSource) -> np.random.Generator:
    if isinstance(source, np.random.Generator):
        return source
    return np.random.default_rng(source)


class NeuralNetwork:
    """Input -> hidden -> output classifier trained by full-batch gradient steps.

    The network owns two weight matrices: ``input x hidden`` and
    ``hidden x output``. There are no biases and no activation on the output
    layer. Two gradient modes are available:

    * **Default**: the historical formulas. The sigmoid derivative is taken
      on the raw network output for both layers, gradients are ``n x width``
      rather than weight-shaped, and :meth:`predict` uses a ReLU hidden
      layer while training uses a sigmoid one.
    * **Exact** (``config.exact_gradients``): weight-shaped gradients of the
      squared error with the sigmoid hidden layer used everywhere.

    In both modes :meth:`update` adds ``learning_rate * gradient`` because
    the gradients are derived from ``labels - output``.
    """

    def __init__(self, config: NetworkConfig, rng: RandomSource = None, *, initialize: bool = True) -> None:
        self.config = config
        self.rng = make_rng(rng if rng is not None else config.seed)
        self._weights: Optional[List[Matrix]] = None
        if initialize:
            self.initialize_weights()

    def __repr__(self) -> str:
        cfg = self.config
        return (
            f"<NeuralNetwork {cfg.input_neurons}-{cfg.hidden_neurons}-{cfg.output_neurons} "
            f"exact_gradients={cfg.exact_gradients}>"
        )

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------
    def initialize_weights(self) -> None:
        """Allocate both weight matrices with uniform draws from ``[0, 1)``."""

        cfg = self.config
        self._weights = [
            Matrix.uniform(cfg.input_neurons, cfg.hidden_neurons, self.rng),
            Matrix.uniform(cfg.hidden_neurons, cfg.output_neurons, self.rng),
        ]

    @property
    def is_initialized(self) -> bool:
        return self._weights is not None

    @property
    def weights(self) -> Tuple[Matrix, Matrix]:
        """Copies of the current weight matrices."""

        w0, w1 = self._require_weights()
        return w0.copy(), w1.copy()

    def set_weights(self, w0, w1) -> None:
        cfg = self.config
        expected = [(cfg.input_neurons, cfg.hidden_neurons), (cfg.hidden_neurons, cfg.output_neurons)]
        weights = [as_matrix(w0), as_matrix(w1)]
        for index, (weight, shape) in enumerate(zip(weights, expected)):
            if weight.shape != shape:
                raise ShapeError(f"weight {index} must have shape {shape}, got {weight.shape}")
        self._weights = weights

    def _require_weights(self) -> List[Matrix]:
        if self._weights is None:
            raise UninitializedModelError("the network weights have not been initialised")
        return self._weights

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def forward(self, features) -> Matrix:
        """Sigmoid hidden layer followed by a linear output layer."""

        w0, w1 = self._require_weights()
        hidden = as_matrix(features).matmul(w0).apply(sigmoid)
        return hidden.matmul(w1)

    def backward(self, features, output, label_error) -> List[Matrix]:
        """Return ``[gradient0, gradient1]`` for ``label_error = labels - output``."""

        w0, w1 = self._require_weights()
        output = as_matrix(output)
        label_error = as_matrix(label_error)

        if self.config.exact_gradients:
            x = as_matrix(features)
            hidden = x.matmul(w0).apply(sigmoid)
            gradient1 = hidden.transpose().matmul(label_error)
            delta0 = label_error.matmul(w1.transpose()).combine(hidden.apply(sigmoid_prime), np.multiply)
            gradient0 = x.transpose().matmul(delta0)
            return [gradient0, gradient1]

        gradient1 = label_error.combine(output.apply(sigmoid_prime), np.multiply)
        # The hidden term also differentiates the output, not the hidden activation.
        hidden_term = output.apply(sigmoid_prime)
        propagated = gradient1.matmul(w1.transpose())
        gradient0 = propagated.combine(hidden_term, np.multiply)
        return [gradient0, gradient1]

    def update(self, gradients: Sequence[Matrix]) -> None:
        """Add ``learning_rate * gradient`` to each weight matrix in place.

        Gradients are indexed by weight coordinates. Weight entries outside
        a gradient's extent are left unchanged.
        """

        weights = self._require_weights()
        if len(gradients) != len(weights):
            raise ValueError(f"expected {len(weights)} gradients, got {len(gradients)}")
        lr = self.config.learning_rate
        for weight, gradient in zip(weights, gradients):
            aligned = _align(as_matrix(gradient), weight.shape)
            weight.combine_(aligned, lambda w, g: w + lr * g)

    def train_epoch(self, features, labels) -> None:
        """Forward pass, label error, backward pass and weight update."""

        x = as_matrix(features)
        y = as_matrix(labels)
        output = self.forward(x)
        label_error = y.combine(output, np.subtract)
        gradients = self.backward(x, output, label_error)
        self.update(gradients)

    def train(self, features, labels) -> None:
        """Run exactly ``config.num_epochs`` epochs over the full batch."""

        x = as_matrix(features)
        y = as_matrix(labels)
        for _ in range(self.config.num_epochs):
            self.train_epoch(x, y)

    # ------------------------------------------------------------------
    # Inference
    # ------------------------------------------------------------------
    def predict(self, features) -> Matrix:
        """Raw output scores, one row per sample and one column per class."""

        w0, w1 = self._require_weights()
        activation = sigmoid if self.config.exact_gradients else relu
        hidden = as_matrix(features).matmul(w0).apply(activation)
        return hidden.matmul(w1)


def _align(gradient: Matrix, shape: Tuple[int, int]) -> Matrix:
    if gradient.shape == shape:
        return gradient
    rows = min(gradient.rows, shape[0])
    cols = min(gradient.cols, shape[1])
    block = np.zeros(shape, dtype=np.float64)
    block[:rows, :cols] = gradient.to_numpy()[:rows, :cols]
    return Matrix.from_array(block)


__all__ = ["NeuralNetwork", "make_rng"]
