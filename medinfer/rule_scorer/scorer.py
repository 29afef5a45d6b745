"""
MedInfer — Rule scorer

Deterministic weighted-overlap scoring of a symptom selection against every
disease in the knowledge base:

    score = (|common ∩ S| * w_common + |rare ∩ S| * w_rare)
            / (|common| * w_common + |rare| * w_rare)

    probability = min(round(score * 100), cap)     # integer percent

Diseases sharing no symptom with the selection are left out. The result is
sorted by descending probability; equal probabilities keep knowledge base order.
"""

import math
from dataclasses import dataclass
from typing import AbstractSet, FrozenSet, List, Optional, Tuple

from medinfer.config import RuleScorerConfig
from medinfer.knowledge import KnowledgeBase
from medinfer.schemas import Disease


@dataclass(frozen=True)
class RuleMatch:
    """One scored disease"""
    disease: Disease
    probability: int          # percent, 0..cap
    score: float              # raw weighted ratio, 0..1
    common_matches: FrozenSet[str]
    rare_matches: FrozenSet[str]

    @property
    def matching_symptoms(self) -> FrozenSet[str]:
        return self.common_matches | self.rare_matches

    @property
    def match_count(self) -> int:
        return len(self.matching_symptoms)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positive values (not banker's rounding)"""
    return int(math.floor(value + 0.5))


class RuleScorer:
    """
    Weighted symptom overlap scorer.

    Example:
        scorer = RuleScorer(KnowledgeBase.default())

        for match in scorer.score({"runny_nose", "cough"})[:5]:
            print(match.disease.name, match.probability)
    """

    def __init__(
        self,
        knowledge_base: KnowledgeBase,
        config: Optional[RuleScorerConfig] = None
    ):
        self.knowledge_base = knowledge_base
        self.config = config or RuleScorerConfig()

        if self.config.common_weight <= 0 or self.config.rare_weight <= 0:
            raise ValueError("Rule weights must be positive")

    def disease_score(self, disease: Disease, selection: AbstractSet[str]) -> Tuple[float, FrozenSet[str], FrozenSet[str]]:
        """Raw score of one disease: (score, common_matches, rare_matches)"""
        common_matches = frozenset(disease.common_symptoms & selection)
        rare_matches = frozenset(disease.rare_symptoms & selection)

        w_common = self.config.common_weight
        w_rare = self.config.rare_weight

        numerator = len(common_matches) * w_common + len(rare_matches) * w_rare
        denominator = len(disease.common_symptoms) * w_common + len(disease.rare_symptoms) * w_rare

        return numerator / denominator, common_matches, rare_matches

    def to_probability(self, score: float) -> int:
        return min(round_half_up(score * 100), self.config.probability_cap)

    def score(self, selection: AbstractSet[str]) -> List[RuleMatch]:
        """
        Score every disease against the selection.

        Args:
            selection: Symptom ids; unknown ids simply never match

        Returns:
            Matches sorted by descending probability (stable)
        """
        selection = frozenset(selection)
        matches = []

        for disease in self.knowledge_base:
            score, common_matches, rare_matches = self.disease_score(disease, selection)

            if not common_matches and not rare_matches:
                continue

            matches.append(RuleMatch(
                disease=disease,
                probability=self.to_probability(score),
                score=score,
                common_matches=common_matches,
                rare_matches=rare_matches,
            ))

        # sorted() is stable: ties keep knowledge base order
        return sorted(matches, key=lambda m: m.probability, reverse=True)

    def __repr__(self) -> str:
        return (
            f"RuleScorer(diseases={len(self.knowledge_base)}, "
            f"weights=({self.config.common_weight}, {self.config.rare_weight}), "
            f"cap={self.config.probability_cap})"
        )
