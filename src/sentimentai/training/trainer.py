# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from sklearn.ensemble import GradientBoostingClassifier
from sklearn.pipeline import Pipeline

from ..config import TrainingConfig
from ..console import MLConsole
from ..errors import TrainingError
from ..evaluation.evaluate import evaluate
from ..features import build_featurizer
from ..model import SentimentModel
from ..persistence import save_model, write_metadata
from ..schemas import LabeledExample
from .dataset import load_dataset, to_dataframe

log = logging.getLogger(__name__)


def _timestamp_key() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")


def _build_classifier(config: TrainingConfig) -> GradientBoostingClassifier:
    return GradientBoostingClassifier(
        n_estimators=config.num_trees,
        max_leaf_nodes=config.num_leaves,
        min_samples_leaf=config.min_datapoints_per_leaf,
        learning_rate=config.learning_rate,
        max_depth=None,
        random_state=config.seed,
    )


def build_pipeline(config: TrainingConfig) -> Pipeline:
    return Pipeline(
        steps=[
            ("features", build_featurizer()),
            ("clf", _build_classifier(config)),
        ]
    )


class SentimentPipeline:
    """Unfitted featurize + classify pipeline; ``fit`` yields a :class:`SentimentModel`."""

    def __init__(self, config: TrainingConfig | None = None) -> None:
        self.config = (config or TrainingConfig()).validate()

    def fit(self, examples: Sequence[LabeledExample]) -> SentimentModel:
        frame = to_dataframe(examples)
        if frame.empty:
            raise TrainingError("Training dataset is empty")
        if frame["label"].nunique() < 2:
            raise TrainingError("Training dataset must contain both positive and negative examples")

        pipeline = build_pipeline(self.config)
        try:
            pipeline.fit(frame["text"].tolist(), frame["label"].to_numpy())
        except ValueError as exc:
            # e.g. every document is empty after normalization
            raise TrainingError(f"Training failed: {exc}") from exc

        metadata = {
            "model_version": _timestamp_key(),
            "created_at_utc": datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z"),
            "train_rows": int(len(frame)),
            "labels_positive": int(frame["label"].sum()),
            "labels_negative": int((~frame["label"]).sum()),
            "threshold": float(self.config.threshold),
            "hyperparameters": self.config.as_dict(),
        }
        log.debug("fitted model %s on %d rows", metadata["model_version"], len(frame))
        return SentimentModel(pipeline=pipeline, metadata=metadata)


def train(examples: Sequence[LabeledExample], config: TrainingConfig | None = None) -> SentimentModel:
    return SentimentPipeline(config).fit(examples)


def train_and_export(
    *,
    train_path: Path,
    test_path: Path,
    model_path: Path,
    config: TrainingConfig | None = None,
    console: MLConsole | None = None,
) -> dict[str, Any]:
    console = console or MLConsole(enabled=False)
    train_rows = load_dataset(train_path)
    test_rows = load_dataset(test_path)

    console.section("Create and Train the Model")
    model = train(train_rows, config)
    console.section("End of training")

    console.section("Evaluating Model accuracy with Test data")
    metrics = evaluate(model, test_rows)
    model.metadata["test_rows"] = len(test_rows)
    console.metrics_table(metrics, title="Model quality metrics evaluation")

    save_model(model, model_path)
    metadata_path, metrics_path = write_metadata(model, metrics, model_path)
    console.success(f"The model is saved to {model_path}")

    return {
        "model": model,
        "metrics": metrics.as_dict(),
        "metadata": dict(model.metadata),
        "paths": {
            "train_dataset": str(train_path),
            "eval_dataset": str(test_path),
            "model": str(model_path),
            "metadata": str(metadata_path),
            "metrics": str(metrics_path),
        },
    }
