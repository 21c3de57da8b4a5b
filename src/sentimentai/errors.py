# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from pathlib import Path


class SentimentAIError(Exception):
    """Base class for every error raised by sentimentai."""


class ConfigError(SentimentAIError):
    """Invalid hyperparameter or environment setting."""


class DatasetIOError(SentimentAIError):
    """Dataset file is missing or unreadable."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot read dataset {self.path}: {reason}")


class DatasetParseError(SentimentAIError):
    """A dataset row has the wrong column count or an unparsable label."""

    def __init__(self, path: Path | str, line: int, reason: str) -> None:
        self.path = Path(path)
        self.line = line
        super().__init__(f"{self.path}:{line}: {reason}")


class EmptyDatasetError(SentimentAIError):
    pass


class TrainingError(SentimentAIError):
    pass


class ArtifactNotFoundError(SentimentAIError):
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Model artifact not found: {self.path}")


class CorruptArtifactError(SentimentAIError):
    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Model artifact {self.path} is unusable: {reason}")
