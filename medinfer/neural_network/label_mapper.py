"""
MedInfer — Label mapper

Disease name -> specialist and triage labels, from the two dictionaries in
disease_mappings.json.

A miss is not an error: it maps to UNKNOWN_SPECIALIST / UNKNOWN_TRIAGE so a
partial label table never blocks a response.
"""

from dataclasses import dataclass
from typing import Dict, Mapping, Optional

from medinfer.exceptions import MissingAssetError


UNKNOWN_SPECIALIST = "Unknown Specialist"
UNKNOWN_TRIAGE = "Unknown Triage"
UNKNOWN_DISEASE = "Unknown Disease"


@dataclass(frozen=True)
class LabelInfo:
    specialist: str
    triage: str


class LabelMapper:
    """
    Example:
        mapper = LabelMapper(
            disease_to_specialist={"Influenza": "General Practitioner"},
            disease_to_triage={"Influenza": "MEDIUM"},
        )

        mapper.map("Influenza")     # LabelInfo("General Practitioner", "MEDIUM")
        mapper.map("Gout")          # LabelInfo("Unknown Specialist", "Unknown Triage")
    """

    def __init__(
        self,
        disease_to_specialist: Optional[Mapping[str, str]] = None,
        disease_to_triage: Optional[Mapping[str, str]] = None
    ):
        self._specialist: Dict[str, str] = dict(disease_to_specialist or {})
        self._triage: Dict[str, str] = dict(disease_to_triage or {})

    @classmethod
    def from_mappings(cls, mappings: Mapping) -> "LabelMapper":
        """
        Build from the disease_mappings payload.

        Raises:
            MissingAssetError: either dictionary is absent or not an object
        """
        for key in ("disease_to_specialist", "disease_to_triage"):
            if not isinstance(mappings.get(key), Mapping):
                raise MissingAssetError(f"disease_mappings.{key}")

        return cls(mappings["disease_to_specialist"], mappings["disease_to_triage"])

    def map(self, disease_name: str) -> LabelInfo:
        return LabelInfo(
            specialist=self._specialist.get(disease_name) or UNKNOWN_SPECIALIST,
            triage=self._triage.get(disease_name) or UNKNOWN_TRIAGE,
        )

    def specialist_for(self, disease_name: str) -> str:
        return self.map(disease_name).specialist

    def triage_for(self, disease_name: str) -> str:
        return self.map(disease_name).triage

    def to_mappings(self) -> Dict[str, Dict[str, str]]:
        return {
            "disease_to_specialist": dict(self._specialist),
            "disease_to_triage": dict(self._triage),
        }

    def __repr__(self) -> str:
        return f"LabelMapper(specialists={len(self._specialist)}, triage={len(self._triage)})"
