"""
MedInfer — Vector encoder

Turns a symptom selection into the fixed-length binary feature vector the
classifier consumes.
"""

import logging
import numpy as np
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .symptom_index import SymptomIndex


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EncodingResult:
    """Vector plus what happened to each id"""
    vector: np.ndarray
    encoded: Tuple[str, ...]
    dropped: Tuple[str, ...]

    @property
    def active_count(self) -> int:
        return len(self.encoded)


class VectorEncoder:
    """
    Binary symptom encoder.

    Ids with a slot in the index table set that slot to 1.0; every other id
    is dropped without raising.

    Example:
        encoder = VectorEncoder(SymptomIndex.from_convention(377))

        vector = encoder.encode({"symptom_1", "symptom_5"})
        vector.shape        # (377,)
        vector[[0, 4]]      # [1., 1.]
    """

    def __init__(self, index: SymptomIndex):
        self.index = index

    @property
    def vector_dim(self) -> int:
        return self.index.size

    def encode_with_report(self, selection: Iterable[str]) -> EncodingResult:
        """
        Encode and report which ids were used and which were dropped.

        Both id lists are sorted, so the report is deterministic.
        """
        vector = np.zeros(self.vector_dim, dtype=np.float32)
        encoded: List[str] = []
        dropped: List[str] = []

        for symptom_id in sorted(set(selection)):
            idx = self.index.index_of(symptom_id)
            if idx is None:
                dropped.append(symptom_id)
                continue
            vector[idx] = 1.0
            encoded.append(symptom_id)

        if dropped:
            logger.debug(
                "Dropped %d symptom id(s) without a slot in index %s: %s",
                len(dropped), self.index.version, dropped
            )

        return EncodingResult(vector=vector, encoded=tuple(encoded), dropped=tuple(dropped))

    def encode(self, selection: Iterable[str]) -> np.ndarray:
        """
        Encode a selection into a vector of shape (N,), dtype float32.
        """
        return self.encode_with_report(selection).vector

    def decode(self, vector: np.ndarray, threshold: float = 0.5) -> List[str]:
        """Ids whose slot is >= threshold"""
        return [
            self.index.id_at(int(idx))
            for idx in np.flatnonzero(np.asarray(vector) >= threshold)
        ]

    def __repr__(self) -> str:
        return f"VectorEncoder(vector_dim={self.vector_dim}, index={self.index.version!r})"
