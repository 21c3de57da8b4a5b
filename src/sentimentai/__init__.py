# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Sentiment AI package."""

from .config import DataPaths, TrainingConfig
from .evaluation.evaluate import evaluate
from .inference.predictor import SentimentPredictor, predict, predict_batch
from .model import SentimentModel
from .persistence import load_model, save_model
from .schemas import EvaluationMetrics, LabeledExample, PredictionResult
from .training.dataset import load_dataset
from .training.trainer import SentimentPipeline, train

__all__ = [
    "DataPaths",
    "TrainingConfig",
    "LabeledExample",
    "EvaluationMetrics",
    "PredictionResult",
    "SentimentModel",
    "SentimentPipeline",
    "SentimentPredictor",
    "load_dataset",
    "train",
    "evaluate",
    "save_model",
    "load_model",
    "predict",
    "predict_batch",
]
