# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..model import SentimentModel
from ..persistence import load_model
from ..schemas import PredictionResult


def predict(model: SentimentModel, text: str) -> PredictionResult:
    return model.transform([text])[0]


def predict_batch(model: SentimentModel, texts: Sequence[str]) -> list[PredictionResult]:
    return model.transform(texts)


class SentimentPredictor:
    def __init__(self, *, model_path: Path) -> None:
        self.model_path = Path(model_path)
        self.model = load_model(self.model_path)

    @property
    def model_version(self) -> str:
        return self.model.version

    def predict(self, text: str) -> PredictionResult:
        return predict(self.model, text)

    def predict_batch(self, texts: Sequence[str]) -> list[PredictionResult]:
        return predict_batch(self.model, texts)
