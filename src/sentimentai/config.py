# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from .errors import ConfigError

ENV_PREFIX = "SENTIMENTAI_"
TRUE_WORDS = {"1", "true", "yes", "on"}
FALSE_WORDS = {"0", "false", "no", "off"}


def get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def get_int_env(name: str, default: int) -> int:
    raw = get_env(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from exc


def get_float_env(name: str, default: float) -> float:
    raw = get_env(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc


def get_bool_env(name: str, default: bool) -> bool:
    raw = get_env(name)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in TRUE_WORDS:
        return True
    if lowered in FALSE_WORDS:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class TrainingConfig:
    num_leaves: int = 50
    num_trees: int = 50
    min_datapoints_per_leaf: int = 20
    learning_rate: float = 0.2
    seed: int = 0
    threshold: float = 0.5

    def validate(self) -> "TrainingConfig":
        # scikit-learn requires max_leaf_nodes > 1
        if self.num_leaves < 2:
            raise ConfigError(f"num_leaves must be >= 2, got {self.num_leaves}")
        if self.num_trees < 1:
            raise ConfigError(f"num_trees must be >= 1, got {self.num_trees}")
        if self.min_datapoints_per_leaf < 1:
            raise ConfigError(f"min_datapoints_per_leaf must be >= 1, got {self.min_datapoints_per_leaf}")
        if not 0.0 < self.learning_rate <= 1.0:
            raise ConfigError(f"learning_rate must be in (0, 1], got {self.learning_rate}")
        if self.seed < 0:
            raise ConfigError(f"seed must be >= 0, got {self.seed}")
        if not 0.0 <= self.threshold <= 1.0:
            raise ConfigError(f"threshold must be in [0, 1], got {self.threshold}")
        return self

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_env(cls) -> "TrainingConfig":
        return cls(
            num_leaves=get_int_env(f"{ENV_PREFIX}NUM_LEAVES", cls.num_leaves),
            num_trees=get_int_env(f"{ENV_PREFIX}NUM_TREES", cls.num_trees),
            min_datapoints_per_leaf=get_int_env(f"{ENV_PREFIX}MIN_LEAF", cls.min_datapoints_per_leaf),
            learning_rate=get_float_env(f"{ENV_PREFIX}LEARNING_RATE", cls.learning_rate),
            seed=get_int_env(f"{ENV_PREFIX}SEED", cls.seed),
            threshold=get_float_env(f"{ENV_PREFIX}THRESHOLD", cls.threshold),
        )


@dataclass(frozen=True)
class DataPaths:
    train: Path
    test: Path
    model: Path

    @classmethod
    def in_dir(cls, data_dir: Path) -> "DataPaths":
        return cls(
            train=data_dir / "sentiment-train.tsv",
            test=data_dir / "sentiment-test.tsv",
            model=data_dir / "Model.joblib",
        )

    @classmethod
    def from_env(cls) -> "DataPaths":
        return cls.in_dir(Path(get_env(f"{ENV_PREFIX}DATA_DIR", "Data") or "Data"))
