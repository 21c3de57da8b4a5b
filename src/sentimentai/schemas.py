# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True, slots=True)
class LabeledExample:
    label: bool
    text: str


@dataclass(slots=True)
class EvaluationMetrics:
    accuracy: float
    auc: float
    f1: float
    precision: float = 0.0
    recall: float = 0.0
    tp: int = 0
    tn: int = 0
    fp: int = 0
    fn: int = 0
    threshold: float = 0.5

    def as_dict(self) -> dict[str, float]:
        return {key: float(value) for key, value in asdict(self).items()}


@dataclass(slots=True)
class PredictionResult:
    predicted_label: bool
    probability: float
    score: float
    text: str = ""

    @property
    def verdict(self) -> str:
        return "Toxic" if self.predicted_label else "Not Toxic"
