"""
MedInfer — Rule scorer module

Baseline strategy: weighted overlap between the selection and each disease's
common/rare symptoms.

Example:
    from medinfer.knowledge import KnowledgeBase
    from medinfer.rule_scorer import RuleScorer

    scorer = RuleScorer(KnowledgeBase.default())
    matches = scorer.score({"runny_nose", "cough"})

    print(matches[0].disease.name, matches[0].probability)  # Common Cold 30
"""

from .scorer import RuleScorer, RuleMatch, round_half_up


__all__ = [
    "RuleScorer",
    "RuleMatch",
    "round_half_up",
]
