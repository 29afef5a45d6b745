#!/usr/bin/env python3
"""
MedInfer — Command-line diagnosis

Usage:
    python scripts/diagnose.py runny_nose cough --strategy rule
    python scripts/diagnose.py symptom_12 symptom_40 --assets models
    python scripts/diagnose.py --list-symptoms
"""

import sys
import argparse
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from medinfer.config import Strategy, get_default_config, load_config
from medinfer.exceptions import LoadError, MedInferError
from medinfer.inference import (
    InferenceEngine,
    calculate_risk_score,
    format_symptom_name,
    generate_health_summary,
)
from medinfer.logging_config import setup_logging


def main():
    parser = argparse.ArgumentParser(description="MedInfer diagnosis")
    parser.add_argument("symptoms", nargs="*", help="Symptom ids")
    parser.add_argument("--strategy", choices=[s.value for s in Strategy], default=None)
    parser.add_argument("--assets", help="Model assets directory (model strategy)")
    parser.add_argument("--config", help="MedInfer YAML config")
    parser.add_argument("--age", type=int, help="Patient age for the risk score")
    parser.add_argument("--list-symptoms", action="store_true", help="Print the symptom catalog")

    args = parser.parse_args()

    config = load_config(args.config) if args.config else get_default_config()
    setup_logging(config.logging)
    engine = InferenceEngine.from_config(config)

    if args.list_symptoms:
        for symptom in engine.catalog:
            print(f"  {symptom.id:<24} {symptom.name} ({symptom.category.value})")
        return 0

    if not args.symptoms:
        parser.error("no symptoms given")

    strategy = Strategy(args.strategy) if args.strategy else config.inference.default_strategy

    if strategy == Strategy.MODEL:
        try:
            engine.load_model(args.assets)
        except LoadError as e:
            print(f"Model not available: {e}")
            return 1

    try:
        ranking = engine.infer(args.symptoms, strategy)
    except MedInferError as e:
        print(f"Error: {e}")
        return 1

    print("=" * 60)
    print(f"Symptoms: {', '.join(format_symptom_name(s) for s in ranking.selected_symptoms)}")
    if ranking.dropped_symptoms:
        print(f"Ignored:  {', '.join(ranking.dropped_symptoms)}")
    print(f"Strategy: {ranking.strategy.value}")
    print("=" * 60)

    for i, p in enumerate(ranking.top_predictions, 1):
        print(f"  {i}. {p.disease_name:<30} {p.probability:6.1%}  {p.triage:<10} {p.specialist}")

    print()
    print(generate_health_summary(ranking))
    print(f"Risk score: {calculate_risk_score(ranking.selected_symptoms, args.age)}/10")
    return 0


if __name__ == "__main__":
    sys.exit(main())
