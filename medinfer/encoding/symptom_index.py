"""
MedInfer — Symptom index table

Versioned mapping symptom id <-> position in the feature vector.
The table is data, not code: build it from the symptom_<n> convention, from an
explicit id list, or load it from JSON.
"""

import json
import re
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from medinfer.exceptions import InvalidSymptomError, SymptomOutOfRangeError


def parse_convention_id(symptom_id: str, prefix: str = "symptom_") -> Optional[int]:
    """
    Parse "symptom_<n>" into n (1-based).

    Returns None if the id does not follow the convention.
    """
    match = re.fullmatch(re.escape(prefix) + r"(\d+)", symptom_id)
    if match is None:
        return None
    return int(match.group(1))


class SymptomIndex:
    """
    Symptom id <-> vector index table.

    Example:
        index = SymptomIndex.from_convention(377)

        index.index_of("symptom_1")     # 0
        index.index_of("symptom_377")   # 376
        index.index_of("symptom_378")   # None
        index.size                      # 377
    """

    def __init__(
        self,
        symptom_ids: Iterable[str],
        version: str = "v1",
        names: Optional[List[str]] = None,
        prefix: str = "symptom_"
    ):
        self._id_to_idx: Dict[str, int] = {}
        self._idx_to_id: List[str] = []

        for symptom_id in symptom_ids:
            if symptom_id in self._id_to_idx:
                raise ValueError(f"Duplicate symptom id in index table: {symptom_id}")
            self._id_to_idx[symptom_id] = len(self._idx_to_id)
            self._idx_to_id.append(symptom_id)

        if names is not None and len(names) != len(self._idx_to_id):
            raise ValueError(
                f"Symptom name table has {len(names)} entries, index has {len(self._idx_to_id)}"
            )

        self.version = version
        self.prefix = prefix
        self._names = list(names) if names is not None else None

    @classmethod
    def from_convention(
        cls,
        size: int,
        prefix: str = "symptom_",
        version: str = "v1",
        names: Optional[List[str]] = None
    ) -> "SymptomIndex":
        """symptom_1 -> 0, ..., symptom_<size> -> size - 1"""
        if size < 1:
            raise ValueError("Index size must be positive")
        return cls(
            (f"{prefix}{i}" for i in range(1, size + 1)),
            version=version,
            names=names,
            prefix=prefix,
        )

    @classmethod
    def load(cls, path: str) -> "SymptomIndex":
        """
        Load from JSON:
            {"version": "v1", "symptom_to_index": {"fever": 0, ...}, "names": [...]}
        """
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        mapping = data["symptom_to_index"]
        ordered = sorted(mapping.items(), key=lambda item: int(item[1]))

        for position, (symptom_id, idx) in enumerate(ordered):
            if int(idx) != position:
                raise ValueError(f"Index table is not contiguous at {symptom_id}={idx}")

        return cls(
            (symptom_id for symptom_id, _ in ordered),
            version=data.get("version", "v1"),
            names=data.get("names"),
            prefix=data.get("prefix", "symptom_"),
        )

    def save(self, path: str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "version": self.version,
            "prefix": self.prefix,
            "size": self.size,
            "symptom_to_index": self._id_to_idx,
        }
        if self._names is not None:
            data["names"] = self._names

        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    def with_names(self, names: List[str]) -> "SymptomIndex":
        """Same table with display names attached"""
        return SymptomIndex(self._idx_to_id, version=self.version, names=names, prefix=self.prefix)

    def index_of(self, symptom_id: str) -> Optional[int]:
        """0-based slot, None if the id has no slot"""
        return self._id_to_idx.get(symptom_id)

    def id_at(self, index: int) -> Optional[str]:
        if 0 <= index < len(self._idx_to_id):
            return self._idx_to_id[index]
        return None

    def name_of(self, symptom_id: str) -> Optional[str]:
        idx = self.index_of(symptom_id)
        if idx is None:
            return None
        return self._names[idx] if self._names is not None else symptom_id

    def check_range(self, symptom_id: str) -> None:
        """
        Reject convention ids whose number falls outside [1, size].

        Ids that do not follow the convention pass through; the encoder
        drops them if they have no slot.

        Raises:
            SymptomOutOfRangeError
        """
        n = parse_convention_id(symptom_id, self.prefix)
        if n is not None and not 1 <= n <= self.size:
            raise SymptomOutOfRangeError(
                f"Symptom index out of range: {symptom_id} (valid 1..{self.size})"
            )

    def validate_convention(self, symptom_id) -> int:
        """
        Strict check used at the remote API boundary: the id must be a string
        following the convention with 1 <= n <= size.

        Returns:
            n (1-based)
        """
        if not isinstance(symptom_id, str):
            raise InvalidSymptomError(f"Symptom ID must be a string: {symptom_id!r}")

        n = parse_convention_id(symptom_id, self.prefix)
        if n is None:
            raise InvalidSymptomError(f"Invalid symptom ID format: {symptom_id}")

        self.check_range(symptom_id)
        return n

    @property
    def size(self) -> int:
        return len(self._idx_to_id)

    @property
    def symptom_ids(self) -> List[str]:
        return list(self._idx_to_id)

    @property
    def names(self) -> List[str]:
        return list(self._names) if self._names is not None else self.symptom_ids

    def __len__(self) -> int:
        return self.size

    def __contains__(self, symptom_id: str) -> bool:
        return symptom_id in self._id_to_idx

    def __repr__(self) -> str:
        return f"SymptomIndex(size={self.size}, version={self.version!r})"
