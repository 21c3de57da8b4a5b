# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from .config import DataPaths, TrainingConfig, get_bool_env
from .console import MLConsole
from .errors import SentimentAIError
from .evaluation.evaluate import evaluate_saved_model
from .inference.predictor import SentimentPredictor, predict
from .training.trainer import train_and_export

SINGLE_SAMPLE = "This is a very rude movie"
BATCH_SAMPLES = [
    "I'm so happy",
    "This is a very rude movie",
    "He is a good person but have troubles sometimes.",
    "This is an awesome movie and you should see it.",
    "This is an awesome",
    "This is an awesome movie",
]
HELP_FLAGS = {"-h", "--help"}


def _common_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--no-color", action="store_true", help="Plain output instead of rich formatting")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return common


def _paths_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--train", type=Path, default=None, help="Training TSV (Label, SentimentText)")
    parser.add_argument("--test", type=Path, default=None, help="Test TSV (Label, SentimentText)")
    parser.add_argument("--model", type=Path, default=None, help="Model artifact path")
    return parser


def _hyper_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument("--num-leaves", type=int, default=None)
    parser.add_argument("--num-trees", type=int, default=None)
    parser.add_argument("--min-leaf", type=int, default=None, help="Minimum datapoints per leaf")
    parser.add_argument("--learning-rate", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--threshold", type=float, default=None, help="Decision threshold on probability")
    return parser


def build_parser() -> argparse.ArgumentParser:
    common = _common_parser()
    paths = _paths_parser()
    hyper = _hyper_parser()
    parser = argparse.ArgumentParser(prog="sentimentai", description="Train and use a binary text sentiment classifier.")
    sub = parser.add_subparsers(dest="command")
    sub.add_parser("run", parents=[common, paths, hyper], help="Train, evaluate, save, reload and predict samples")
    sub.add_parser("train", parents=[common, paths, hyper], help="Train, evaluate and save a model")
    evaluate = sub.add_parser("evaluate", parents=[common, paths], help="Evaluate a saved model on a TSV file")
    evaluate.add_argument("--json", action="store_true", help="Print metrics as JSON")
    predict_cmd = sub.add_parser("predict", parents=[common, paths], help="Predict sentiment for texts")
    predict_cmd.add_argument("texts", nargs="+", help="Texts to classify")
    return parser


def _resolve_paths(args: argparse.Namespace) -> DataPaths:
    defaults = DataPaths.from_env()
    return DataPaths(
        train=args.train or defaults.train,
        test=args.test or defaults.test,
        model=args.model or defaults.model,
    )


def _resolve_config(args: argparse.Namespace) -> TrainingConfig:
    config = TrainingConfig.from_env()
    overrides = {
        "num_leaves": args.num_leaves,
        "num_trees": args.num_trees,
        "min_datapoints_per_leaf": args.min_leaf,
        "learning_rate": args.learning_rate,
        "seed": args.seed,
        "threshold": args.threshold,
    }
    return replace(config, **{key: value for key, value in overrides.items() if value is not None}).validate()


def _cmd_train(args: argparse.Namespace, console: MLConsole) -> dict:
    paths = _resolve_paths(args)
    return train_and_export(
        train_path=paths.train,
        test_path=paths.test,
        model_path=paths.model,
        config=_resolve_config(args),
        console=console,
    )


def _cmd_run(args: argparse.Namespace, console: MLConsole) -> int:
    paths = _resolve_paths(args)
    console.banner()
    summary = _cmd_train(args, console)

    console.section("Prediction Test of model with a single sample")
    console.predictions([predict(summary["model"], SINGLE_SAMPLE)])

    console.section("Prediction Test of loaded model with multiple samples")
    console.predictions(SentimentPredictor(model_path=paths.model).predict_batch(BATCH_SAMPLES))
    console.section("End of process")
    return 0


def _cmd_evaluate(args: argparse.Namespace, console: MLConsole) -> int:
    paths = _resolve_paths(args)
    metrics = evaluate_saved_model(model_path=paths.model, eval_dataset_path=paths.test)
    if args.json:
        print(json.dumps(metrics.as_dict(), ensure_ascii=False, indent=2))
    else:
        console.metrics_table(metrics, title=f"Metrics for {paths.model}")
    return 0


def _cmd_predict(args: argparse.Namespace, console: MLConsole) -> int:
    paths = _resolve_paths(args)
    predictor = SentimentPredictor(model_path=paths.model)
    console.info(f"model version {predictor.model_version}")
    console.predictions(predictor.predict_batch(args.texts))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    raw = list(sys.argv[1:] if argv is None else argv)
    # no subcommand (possibly only options) means the default "run" flow
    if not raw or (raw[0].startswith("-") and raw[0] not in HELP_FLAGS):
        raw = ["run", *raw]
    args = parser.parse_args(raw)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    console = MLConsole(enabled=not args.no_color and get_bool_env("SENTIMENTAI_COLOR", True))
    try:
        if args.command == "run":
            return _cmd_run(args, console)
        if args.command == "train":
            _cmd_train(args, console)
            return 0
        if args.command == "evaluate":
            return _cmd_evaluate(args, console)
        return _cmd_predict(args, console)
    except SentimentAIError as exc:
        console.error(str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
