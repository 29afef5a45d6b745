"""
MedInfer — Symptom selection

One call's input: the deduplicated set of symptom ids the user picked.
"""

import hashlib
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Tuple

from medinfer.exceptions import EmptySelectionError, InvalidSymptomError


@dataclass(frozen=True)
class SymptomSelection:
    """
    Non-empty set of symptom ids.

    Example:
        selection = SymptomSelection.from_iterable(["cough", "fever", "cough"])
        selection.sorted_ids      # ("cough", "fever")
        selection.fingerprint     # "5f2b0c9e41d7"
    """
    ids: FrozenSet[str]

    @classmethod
    def from_iterable(cls, symptom_ids: Iterable[str]) -> "SymptomSelection":
        """
        Validate and deduplicate.

        Raises:
            InvalidSymptomError: not a collection, or an id is not a string
            EmptySelectionError: nothing selected
        """
        if isinstance(symptom_ids, SymptomSelection):
            return symptom_ids

        if symptom_ids is None or isinstance(symptom_ids, (str, bytes)):
            raise InvalidSymptomError("Symptoms must be a collection of ids")

        try:
            ids = list(symptom_ids)
        except TypeError as e:
            raise InvalidSymptomError("Symptoms must be a collection of ids") from e

        for symptom_id in ids:
            if not isinstance(symptom_id, str):
                raise InvalidSymptomError(f"Symptom ID must be a string: {symptom_id!r}")

        if not ids:
            raise EmptySelectionError()

        return cls(ids=frozenset(ids))

    @property
    def sorted_ids(self) -> Tuple[str, ...]:
        return tuple(sorted(self.ids))

    @property
    def fingerprint(self) -> str:
        """Short stable hash of the sorted ids, for logs"""
        digest = hashlib.sha1("\n".join(self.sorted_ids).encode("utf-8"))
        return digest.hexdigest()[:12]

    def __len__(self) -> int:
        return len(self.ids)

    def __iter__(self):
        return iter(self.sorted_ids)

    def __contains__(self, symptom_id: str) -> bool:
        return symptom_id in self.ids
