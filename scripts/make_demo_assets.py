#!/usr/bin/env python3
"""
MedInfer — Generate demo model assets

Writes a complete asset directory (model.json, weights blob, label table,
mappings, symptom names) with random weights, so the model strategy and the
API can run without a trained model. Predictions are meaningless.

Usage:
    python scripts/make_demo_assets.py --output models
    python scripts/make_demo_assets.py --output demo --symptoms 40 --diseases 16 --hidden 32 16
"""

import sys
import argparse
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from medinfer.config import MedInferConfig, save_config
from medinfer.knowledge import KnowledgeBase
from medinfer.neural_network import ClassifierWeights, LabelMapper, ModelAssets


def build_labels(kb: KnowledgeBase, n_diseases: int):
    """Knowledge base diseases first, then numbered placeholders"""
    labels = kb.disease_names[:n_diseases]
    labels += [f"Disease {i}" for i in range(len(labels) + 1, n_diseases + 1)]

    mapper = LabelMapper(
        disease_to_specialist={d.name: d.specialist_type for d in kb},
        disease_to_triage={d.name: d.urgency.triage_label for d in kb},
    )
    return labels, mapper.to_mappings()


def main():
    parser = argparse.ArgumentParser(description="Generate random MedInfer model assets")
    parser.add_argument("--output", default="models", help="Output directory")
    parser.add_argument("--symptoms", type=int, default=377, help="Input dimension")
    parser.add_argument("--diseases", type=int, default=773, help="Output dimension")
    parser.add_argument("--hidden", type=int, nargs="+", default=[512, 256], help="Hidden layer sizes")
    parser.add_argument("--seed", type=int, default=42)

    args = parser.parse_args()

    config = MedInferConfig.for_dimensions(args.symptoms, args.diseases, args.hidden)
    layer_dims = config.classifier.layer_dims

    print("=" * 60)
    print("MedInfer — Demo assets")
    print("=" * 60)
    print(f"   Layers: {layer_dims}")

    weights = ClassifierWeights.random(layer_dims, seed=args.seed)
    labels, mappings = build_labels(KnowledgeBase.default(), args.diseases)
    symptom_names = [f"Symptom {i}" for i in range(1, args.symptoms + 1)]

    assets = ModelAssets.from_weights(weights, labels, mappings, symptom_names)
    output = assets.save(args.output, config.classifier)

    config.classifier.assets_dir = str(output)
    save_config(config, str(output / "medinfer.yaml"))

    print(f"   Parameters: {weights.parameter_count:,}")
    print(f"   Saved to: {output}")
    print(f"   Config: {output / 'medinfer.yaml'}")


if __name__ == "__main__":
    main()
