# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

import joblib
from sklearn.pipeline import Pipeline

from .errors import ArtifactNotFoundError, CorruptArtifactError
from .model import SentimentModel
from .schemas import EvaluationMetrics

log = logging.getLogger(__name__)

ARTIFACT_FORMAT = "sentimentai/1"


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def save_model(model: SentimentModel, path: Path | str) -> Path:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = {"format": ARTIFACT_FORMAT, "pipeline": model.pipeline, "metadata": dict(model.metadata)}
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as handle:
            joblib.dump(payload, handle)
        # mkstemp creates 0600; give the artifact the usual umask-based mode
        os.chmod(tmp_path, 0o666 & ~_current_umask())
        os.replace(tmp_path, target)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    log.debug("saved model %s to %s", model.version, target)
    return target


def load_model(path: Path | str) -> SentimentModel:
    source = Path(path)
    if not source.is_file():
        raise ArtifactNotFoundError(source)
    try:
        with source.open("rb") as handle:
            payload = joblib.load(handle)
    except FileNotFoundError as exc:
        raise ArtifactNotFoundError(source) from exc
    except Exception as exc:
        # joblib surfaces truncation/garbage as EOFError, UnpicklingError, ValueError, KeyError...
        raise CorruptArtifactError(source, f"{type(exc).__name__}: {exc}") from exc

    if not isinstance(payload, dict) or payload.get("format") != ARTIFACT_FORMAT:
        raise CorruptArtifactError(source, "not a sentimentai model artifact")
    pipeline = payload.get("pipeline")
    metadata = payload.get("metadata")
    if not isinstance(pipeline, Pipeline) or not isinstance(metadata, dict):
        raise CorruptArtifactError(source, "artifact is missing the fitted pipeline")
    if not hasattr(pipeline, "classes_"):
        raise CorruptArtifactError(source, "pipeline is not fitted")
    log.debug("loaded model %s from %s", metadata.get("model_version"), source)
    return SentimentModel(pipeline=pipeline, metadata=metadata)


def write_metadata(model: SentimentModel, metrics: EvaluationMetrics | None, model_path: Path | str) -> tuple[Path, Path]:
    latest_dir = Path(model_path).parent
    latest_dir.mkdir(parents=True, exist_ok=True)
    metadata_path = latest_dir / "metadata.json"
    metrics_path = latest_dir / "metrics.json"
    metadata_path.write_text(json.dumps(model.metadata, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    payload = metrics.as_dict() if metrics is not None else {}
    metrics_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    return metadata_path, metrics_path
