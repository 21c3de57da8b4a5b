# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from sklearn.pipeline import Pipeline

from .schemas import PredictionResult


@dataclass
class SentimentModel:
    """Fitted featurizer + tree ensemble, plus the metadata written at training time."""

    pipeline: Pipeline
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def threshold(self) -> float:
        return float(self.metadata.get("threshold", 0.5))

    @property
    def version(self) -> str:
        return str(self.metadata.get("model_version") or "unknown")

    def _positive_column(self) -> int:
        classes = list(self.pipeline.classes_)
        return classes.index(True)

    def probabilities(self, texts: Sequence[str]) -> np.ndarray:
        if not texts:
            return np.empty(0, dtype=float)
        return self.pipeline.predict_proba(list(texts))[:, self._positive_column()]

    def scores(self, texts: Sequence[str]) -> np.ndarray:
        if not texts:
            return np.empty(0, dtype=float)
        raw = self.pipeline.decision_function(list(texts))
        # decision_function is signed toward classes_[1]
        return raw if self._positive_column() == 1 else -raw

    def transform(self, texts: Sequence[str]) -> list[PredictionResult]:
        items = [str(text) for text in texts]
        probs = self.probabilities(items)
        scores = self.scores(items)
        threshold = self.threshold
        return [
            PredictionResult(
                predicted_label=bool(prob >= threshold),
                probability=float(prob),
                score=float(score),
                text=text,
            )
            for text, prob, score in zip(items, probs, scores)
        ]
