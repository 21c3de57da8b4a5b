# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from sklearn.metrics import accuracy_score, confusion_matrix, f1_score, precision_score, recall_score, roc_auc_score

from ..errors import EmptyDatasetError
from ..model import SentimentModel
from ..persistence import load_model
from ..schemas import EvaluationMetrics, LabeledExample
from ..training.dataset import load_dataset

__all__ = ["compute_metrics", "evaluate", "evaluate_saved_model", "threshold_report"]


def _safe_auc(y_true: Sequence[bool], y_prob: Sequence[float]) -> float:
    # ROC AUC is undefined with a single class present
    if len(set(y_true)) < 2:
        return 0.0
    return float(roc_auc_score(y_true, y_prob))


def compute_metrics(y_true: Sequence[bool], y_prob: Sequence[float], threshold: float = 0.5) -> EvaluationMetrics:
    if len(y_true) == 0:
        raise EmptyDatasetError("Cannot compute metrics on an empty dataset")
    if len(y_true) != len(y_prob):
        raise ValueError(f"label/probability length mismatch: {len(y_true)} != {len(y_prob)}")
    labels = [bool(value) for value in y_true]
    y_pred = [bool(score >= threshold) for score in y_prob]
    tn, fp, fn, tp = confusion_matrix(labels, y_pred, labels=[False, True]).ravel()
    return EvaluationMetrics(
        accuracy=float(accuracy_score(labels, y_pred)),
        auc=_safe_auc(labels, y_prob),
        f1=float(f1_score(labels, y_pred, zero_division=0)),
        precision=float(precision_score(labels, y_pred, zero_division=0)),
        recall=float(recall_score(labels, y_pred, zero_division=0)),
        tp=int(tp),
        tn=int(tn),
        fp=int(fp),
        fn=int(fn),
        threshold=float(threshold),
    )


def evaluate(model: SentimentModel, examples: Sequence[LabeledExample]) -> EvaluationMetrics:
    if not examples:
        raise EmptyDatasetError("Test dataset has no rows")
    probs = model.probabilities([row.text for row in examples]).tolist()
    return compute_metrics([row.label for row in examples], probs, threshold=model.threshold)


def evaluate_saved_model(*, model_path: Path, eval_dataset_path: Path) -> EvaluationMetrics:
    model = load_model(model_path)
    return evaluate(model, load_dataset(eval_dataset_path))


def threshold_report(y_true: Sequence[bool], y_prob: Sequence[float]) -> list[dict[str, float]]:
    if len(y_true) == 0:
        raise EmptyDatasetError("Cannot sweep thresholds on an empty dataset")
    labels = [bool(value) for value in y_true]
    report: list[dict[str, float]] = []
    for raw in range(5, 96, 5):
        thr = raw / 100.0
        y_pred = [bool(score >= thr) for score in y_prob]
        report.append(
            {
                "threshold": thr,
                "precision": float(precision_score(labels, y_pred, zero_division=0)),
                "recall": float(recall_score(labels, y_pred, zero_division=0)),
                "f1": float(f1_score(labels, y_pred, zero_division=0)),
            }
        )
    return report
