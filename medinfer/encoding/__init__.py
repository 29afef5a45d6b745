"""
MedInfer — Encoding module

Vectorization of symptom selections for the neural classifier.

Components:
- SymptomIndex: versioned symptom id <-> vector index table
- VectorEncoder: selection -> binary feature vector

Example:
    from medinfer.encoding import SymptomIndex, VectorEncoder

    index = SymptomIndex.from_convention(377)
    encoder = VectorEncoder(index)

    result = encoder.encode_with_report(["symptom_3", "runny_nose"])
    result.vector.shape     # (377,)
    result.dropped          # ("runny_nose",)
"""

from .symptom_index import SymptomIndex, parse_convention_id
from .vector_encoder import VectorEncoder, EncodingResult


__all__ = [
    "SymptomIndex",
    "parse_convention_id",
    "VectorEncoder",
    "EncodingResult",
]
