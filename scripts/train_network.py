#!/usr/bin/env python3
"""Train the feed-forward classifier on a CSV file and report test accuracy."""
from __future__ import annotations

import argparse
import json
from dataclasses import replace
from pathlib import Path

from tqdm.auto import tqdm

from shallownet import DEFAULT_CONFIG, NetworkConfig, NeuralNetwork, accuracy, load_config, load_dataset


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--train-path", type=Path, default=Path("data/training_data.csv"))
    p.add_argument("--test-path", type=Path, default=Path("data/test_data.csv"))
    p.add_argument("--config", type=Path, default=None, help="JSON file with NetworkConfig fields")
    p.add_argument("--hidden-neurons", type=int, default=None)
    p.add_argument("--epochs", type=int, default=None)
    p.add_argument("--learning-rate", type=float, default=None)
    p.add_argument("--exact-gradients", action="store_true")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--no-progress", action="store_true", help="Disable the epoch progress bar")
    p.add_argument("--out", type=Path, default=None, help="Optional JSON summary path")
    return p.parse_args()


def build_config(args: argparse.Namespace) -> NetworkConfig:
    config = load_config(args.config) if args.config else DEFAULT_CONFIG
    overrides = {
        "hidden_neurons": args.hidden_neurons,
        "num_epochs": args.epochs,
        "learning_rate": args.learning_rate,
        "seed": args.seed,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if args.exact_gradients:
        overrides["exact_gradients"] = True
    return replace(config, **overrides)


def main() -> None:
    args = parse_args()
    config = build_config(args)

    inputs, labels = load_dataset(
        args.train_path, num_features=config.input_neurons, num_labels=config.output_neurons
    )
    print(f"Loaded {inputs.rows} training samples from {args.train_path}")

    network = NeuralNetwork(config)
    for _ in tqdm(range(config.num_epochs), desc="Training", disable=args.no_progress):
        network.train_epoch(inputs, labels)

    test_inputs, test_labels = load_dataset(
        args.test_path, num_features=config.input_neurons, num_labels=config.output_neurons
    )
    predictions = network.predict(test_inputs)
    score = accuracy(predictions, test_labels)
    print(f"\nAccuracy {score * 100:0.2f}\n")

    if args.out:
        summary = {
            "config": config.to_dict(),
            "train_samples": inputs.rows,
            "test_samples": test_inputs.rows,
            "accuracy": score,
        }
        args.out.write_text(json.dumps(summary, indent=2))
        print(f"Wrote summary to {args.out.resolve()}")


if __name__ == "__main__":
    main()
