"""
MedInfer — Classifier weights

Dense layer kernels/biases and the flat float32 blob they are shipped in.

Blob layout (little-endian float32, no header):
    kernel_1 [in_1, out_1] row-major, bias_1 [out_1],
    kernel_2 [in_2, out_2],           bias_2 [out_2],
    ...
"""

import numpy as np
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from medinfer.exceptions import ShapeMismatchError


@dataclass(frozen=True)
class DenseLayer:
    kernel: np.ndarray    # [in, out]
    bias: np.ndarray      # [out]

    @property
    def input_dim(self) -> int:
        return int(self.kernel.shape[0])

    @property
    def output_dim(self) -> int:
        return int(self.kernel.shape[1])

    @property
    def parameter_count(self) -> int:
        return int(self.kernel.size + self.bias.size)


def parameter_count(layer_dims: Sequence[int]) -> int:
    """Number of float32 values a blob for these dims must hold"""
    return sum(i * o + o for i, o in zip(layer_dims[:-1], layer_dims[1:]))


class ClassifierWeights:
    """
    Read-only set of dense layers whose shapes chain.

    Example:
        weights = ClassifierWeights.from_buffer(blob, [377, 512, 256, 773])
        weights.layer_dims      # [377, 512, 256, 773]
    """

    def __init__(self, layers: Sequence[DenseLayer]):
        if not layers:
            raise ShapeMismatchError("No layers")

        for k, layer in enumerate(layers):
            if layer.kernel.ndim != 2 or layer.bias.ndim != 1:
                raise ShapeMismatchError(
                    f"Layer {k}: kernel must be 2-D and bias 1-D, "
                    f"got {layer.kernel.shape} and {layer.bias.shape}"
                )
            if layer.bias.shape[0] != layer.output_dim:
                raise ShapeMismatchError(
                    f"Layer {k}: bias {layer.bias.shape} does not match kernel {layer.kernel.shape}"
                )

        for k, (layer, following) in enumerate(zip(layers[:-1], layers[1:])):
            if layer.output_dim != following.input_dim:
                raise ShapeMismatchError(
                    f"Layer {k} outputs {layer.output_dim} but layer {k + 1} expects {following.input_dim}"
                )

        self._layers = tuple(
            DenseLayer(
                kernel=_readonly(layer.kernel),
                bias=_readonly(layer.bias),
            )
            for layer in layers
        )

    @classmethod
    def from_arrays(cls, arrays: Sequence[np.ndarray]) -> "ClassifierWeights":
        """[kernel_1, bias_1, kernel_2, bias_2, ...]"""
        if len(arrays) % 2 != 0:
            raise ShapeMismatchError(f"Expected kernel/bias pairs, got {len(arrays)} arrays")
        return cls([
            DenseLayer(kernel=np.asarray(arrays[i]), bias=np.asarray(arrays[i + 1]))
            for i in range(0, len(arrays), 2)
        ])

    @classmethod
    def from_buffer(
        cls,
        buffer: Union[bytes, bytearray, memoryview, np.ndarray],
        layer_dims: Sequence[int]
    ) -> "ClassifierWeights":
        """
        Slice a flat float32 blob into layers.

        Raises:
            ShapeMismatchError: blob size does not match layer_dims
        """
        if isinstance(buffer, np.ndarray):
            data = buffer.astype("<f4", copy=False).ravel()
        else:
            if len(buffer) % 4 != 0:
                raise ShapeMismatchError(f"Weights blob of {len(buffer)} bytes is not float32 aligned")
            data = np.frombuffer(buffer, dtype="<f4")

        expected = parameter_count(layer_dims)
        if data.size != expected:
            raise ShapeMismatchError(
                f"Weights blob holds {data.size} values, topology {list(layer_dims)} needs {expected}"
            )

        layers = []
        offset = 0
        for in_dim, out_dim in zip(layer_dims[:-1], layer_dims[1:]):
            kernel = data[offset:offset + in_dim * out_dim].reshape(in_dim, out_dim)
            offset += in_dim * out_dim
            bias = data[offset:offset + out_dim]
            offset += out_dim
            layers.append(DenseLayer(kernel=kernel, bias=bias))

        return cls(layers)

    @classmethod
    def random(
        cls,
        layer_dims: Sequence[int],
        seed: Optional[int] = None,
        scale: float = 1.0
    ) -> "ClassifierWeights":
        """Glorot-uniform kernels, zero biases. For demos and tests."""
        rng = np.random.default_rng(seed)
        layers = []
        for in_dim, out_dim in zip(layer_dims[:-1], layer_dims[1:]):
            limit = scale * np.sqrt(6.0 / (in_dim + out_dim))
            layers.append(DenseLayer(
                kernel=rng.uniform(-limit, limit, size=(in_dim, out_dim)).astype(np.float32),
                bias=np.zeros(out_dim, dtype=np.float32),
            ))
        return cls(layers)

    def to_buffer(self) -> bytes:
        """Inverse of from_buffer"""
        parts = []
        for layer in self._layers:
            parts.append(layer.kernel.astype("<f4").ravel())
            parts.append(layer.bias.astype("<f4").ravel())
        return np.concatenate(parts).tobytes()

    @property
    def layers(self) -> List[DenseLayer]:
        return list(self._layers)

    @property
    def layer_dims(self) -> List[int]:
        return [self._layers[0].input_dim] + [layer.output_dim for layer in self._layers]

    @property
    def input_dim(self) -> int:
        return self._layers[0].input_dim

    @property
    def output_dim(self) -> int:
        return self._layers[-1].output_dim

    @property
    def parameter_count(self) -> int:
        return sum(layer.parameter_count for layer in self._layers)

    def __repr__(self) -> str:
        return f"ClassifierWeights(layers={self.layer_dims}, params={self.parameter_count:,})"


def _readonly(array: np.ndarray) -> np.ndarray:
    array = np.array(array, dtype=np.float32, copy=True)
    array.flags.writeable = False
    return array
