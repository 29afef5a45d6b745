"""
MedInfer — Network architecture

Feed-forward classifier over the binary symptom vector:

    Dense(N -> 512, ReLU) -> Dense(512 -> 256, ReLU) -> Dense(256 -> M)

The network returns raw logits; softmax is applied by the Classifier.
Weights are never trained here, only loaded.
"""

import torch
import torch.nn as nn
import torch.nn.functional as F
from typing import List

from .weights import ClassifierWeights


class TriageNN(nn.Module):
    """
    Dense ReLU network with an identity output layer.

    Example:
        model = TriageNN([377, 512, 256, 773])

        x = torch.zeros(1, 377)
        logits = model(x)       # shape (1, 773)
    """

    def __init__(self, layer_dims: List[int]):
        """
        Args:
            layer_dims: [input, hidden..., output]
        """
        super().__init__()

        if len(layer_dims) < 2:
            raise ValueError("Need at least input and output dims")

        self.layer_dims = list(layer_dims)
        self.layers = nn.ModuleList(
            nn.Linear(in_dim, out_dim)
            for in_dim, out_dim in zip(layer_dims[:-1], layer_dims[1:])
        )

    @classmethod
    def from_weights(cls, weights: ClassifierWeights) -> "TriageNN":
        """
        Build the network and copy the loaded weights in.

        Kernels arrive as [in, out]; nn.Linear stores [out, in].
        """
        model = cls(weights.layer_dims)

        with torch.no_grad():
            for linear, layer in zip(model.layers, weights.layers):
                linear.weight.copy_(torch.from_numpy(layer.kernel.T.copy()))
                linear.bias.copy_(torch.from_numpy(layer.bias.copy()))

        model.eval()
        model.requires_grad_(False)
        return model

    @property
    def input_dim(self) -> int:
        return self.layer_dims[0]

    @property
    def output_dim(self) -> int:
        return self.layer_dims[-1]

    def forward(self, symptoms: torch.Tensor) -> torch.Tensor:
        """
        Args:
            symptoms: shape (batch, N)

        Returns:
            Logits shape (batch, M)
        """
        h = symptoms
        for linear in self.layers[:-1]:
            h = F.relu(linear(h))
        return self.layers[-1](h)

    def count_parameters(self) -> int:
        return sum(p.numel() for p in self.parameters())

    def __repr__(self) -> str:
        return (
            f"TriageNN(\n"
            f"  layers={self.layer_dims},\n"
            f"  params={self.count_parameters():,}\n"
            f")"
        )
