"""
Tests for saving and loading model artifacts.
"""

import json
import os
import stat
import sys

import joblib
import numpy as np
import pytest

from sentimentai.errors import ArtifactNotFoundError, CorruptArtifactError
from sentimentai.evaluation.evaluate import compute_metrics
from sentimentai.inference.predictor import predict, predict_batch
from sentimentai.persistence import load_model, save_model, write_metadata


class TestRoundTrip:
    def test_predictions_survive_round_trip(self, trained_model, tmp_path):
        texts = ["rude movie", "happy day", "", "This is an awesome movie"]
        path = save_model(trained_model, tmp_path / "Model.joblib")

        loaded = load_model(path)

        before = predict_batch(trained_model, texts)
        after = predict_batch(loaded, texts)
        for left, right in zip(before, after):
            assert left.predicted_label == right.predicted_label
            assert left.probability == pytest.approx(right.probability)
            assert left.score == pytest.approx(right.score)
        assert loaded.metadata == trained_model.metadata

    def test_single_predict_round_trip(self, trained_model, tmp_path):
        path = save_model(trained_model, tmp_path / "nested" / "dir" / "Model.joblib")

        assert predict(load_model(path), "rude movie").probability == pytest.approx(
            predict(trained_model, "rude movie").probability
        )

    def test_overwrites_existing_file(self, trained_model, tmp_path):
        path = tmp_path / "Model.joblib"
        path.write_bytes(b"old contents")

        save_model(trained_model, path)

        assert load_model(path).version == trained_model.version
        assert [item.name for item in tmp_path.iterdir()] == ["Model.joblib"]

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
    def test_artifact_mode_follows_umask(self, trained_model, tmp_path):
        reference = tmp_path / "reference.bin"
        reference.write_bytes(b"x")

        path = save_model(trained_model, tmp_path / "Model.joblib")

        assert stat.S_IMODE(os.stat(path).st_mode) == stat.S_IMODE(os.stat(reference).st_mode)


class TestLoadFailures:
    def test_missing(self, tmp_path):
        with pytest.raises(ArtifactNotFoundError):
            load_model(tmp_path / "missing.joblib")

    def test_truncated(self, trained_model, tmp_path):
        path = save_model(trained_model, tmp_path / "Model.joblib")
        data = path.read_bytes()
        path.write_bytes(data[: len(data) // 3])

        with pytest.raises(CorruptArtifactError):
            load_model(path)

    def test_garbage(self, tmp_path):
        path = tmp_path / "Model.joblib"
        path.write_bytes(b"this is not a model at all")

        with pytest.raises(CorruptArtifactError):
            load_model(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "Model.joblib"
        path.write_bytes(b"")

        with pytest.raises(CorruptArtifactError):
            load_model(path)

    def test_foreign_joblib_payload(self, tmp_path):
        path = tmp_path / "Model.joblib"
        joblib.dump({"weights": np.zeros(3)}, path)

        with pytest.raises(CorruptArtifactError, match="not a sentimentai model"):
            load_model(path)


class TestWriteMetadata:
    def test_sidecars(self, trained_model, tmp_path):
        metrics = compute_metrics([True, False], [0.8, 0.3])

        metadata_path, metrics_path = write_metadata(trained_model, metrics, tmp_path / "Model.joblib")

        assert json.loads(metadata_path.read_text(encoding="utf-8"))["train_rows"] == trained_model.metadata["train_rows"]
        assert json.loads(metrics_path.read_text(encoding="utf-8"))["accuracy"] == 1.0
