"""
Tests for model training.
"""

import json

import numpy as np
import pytest

from sentimentai.config import TrainingConfig
from sentimentai.errors import ConfigError, DatasetIOError, TrainingError
from sentimentai.inference.predictor import predict
from sentimentai.model import SentimentModel
from sentimentai.persistence import load_model
from sentimentai.schemas import LabeledExample
from sentimentai.training.trainer import SentimentPipeline, build_pipeline, train, train_and_export


class TestBuildPipeline:
    def test_hyperparameters_are_mapped(self):
        config = TrainingConfig(num_leaves=31, num_trees=7, min_datapoints_per_leaf=3, seed=4)

        clf = build_pipeline(config).named_steps["clf"]

        assert clf.max_leaf_nodes == 31
        assert clf.n_estimators == 7
        assert clf.min_samples_leaf == 3
        assert clf.random_state == 4


class TestTrain:
    def test_returns_fitted_model(self, trained_model, corpus):
        assert isinstance(trained_model, SentimentModel)
        assert trained_model.metadata["train_rows"] == len(corpus)
        assert trained_model.metadata["labels_positive"] == len(corpus) // 2
        assert trained_model.metadata["hyperparameters"]["num_trees"] == 50
        assert trained_model.threshold == 0.5

    def test_rude_leans_toxic_compared_to_happy(self, trained_model):
        rude = predict(trained_model, "rude movie")
        happy = predict(trained_model, "happy day")

        assert rude.probability > happy.probability
        assert rude.predicted_label is True
        assert happy.predicted_label is False

    def test_deterministic_with_same_seed(self, corpus):
        texts = ["rude movie", "happy day", "something else entirely"]

        first = train(corpus, TrainingConfig(num_trees=10)).probabilities(texts)
        second = train(corpus, TrainingConfig(num_trees=10)).probabilities(texts)

        np.testing.assert_array_equal(first, second)

    def test_pipeline_interface(self, corpus):
        model = SentimentPipeline(TrainingConfig(num_trees=5)).fit(corpus)

        results = model.transform(["rude", "happy"])

        assert len(results) == 2
        assert model.metadata["hyperparameters"]["num_trees"] == 5

    def test_two_row_dataset_never_splits_and_ties_go_positive(self):
        """Below min_datapoints_per_leaf no tree splits, so every text sits at the prior."""
        rows = [LabeledExample(label=True, text="This is rude"), LabeledExample(label=False, text="I am happy")]

        model = train(rows)

        rude = predict(model, "rude movie")
        happy = predict(model, "happy day")

        assert rude.probability == pytest.approx(0.5)
        assert happy.probability == pytest.approx(rude.probability)
        assert rude.score == pytest.approx(0.0)
        assert happy.score == pytest.approx(0.0)
        assert rude.predicted_label is True
        assert happy.predicted_label is True

    def test_empty_dataset(self):
        with pytest.raises(TrainingError, match="empty"):
            train([])

    def test_single_class(self):
        rows = [LabeledExample(label=True, text="rude"), LabeledExample(label=True, text="so rude")]

        with pytest.raises(TrainingError, match="both"):
            train(rows)

    def test_no_usable_text(self):
        rows = [LabeledExample(label=True, text=""), LabeledExample(label=False, text="")]

        with pytest.raises(TrainingError):
            train(rows)

    def test_invalid_config(self, corpus):
        with pytest.raises(ConfigError):
            train(corpus, TrainingConfig(num_trees=-5))


class TestTrainAndExport:
    def test_writes_model_and_sidecars(self, tmp_path, tsv_files):
        train_path, test_path = tsv_files
        model_path = tmp_path / "out" / "Model.joblib"

        summary = train_and_export(
            train_path=train_path,
            test_path=test_path,
            model_path=model_path,
            config=TrainingConfig(num_trees=10),
        )

        assert model_path.is_file()
        assert summary["metrics"]["accuracy"] == 1.0
        assert summary["metadata"]["test_rows"] == 4
        metrics = json.loads((tmp_path / "out" / "metrics.json").read_text(encoding="utf-8"))
        assert metrics["f1"] == 1.0
        metadata = json.loads((tmp_path / "out" / "metadata.json").read_text(encoding="utf-8"))
        assert metadata["model_version"] == load_model(model_path).version

    def test_no_model_written_when_test_missing(self, tmp_path, tsv_files):
        train_path, _ = tsv_files
        model_path = tmp_path / "Model.joblib"

        with pytest.raises(DatasetIOError):
            train_and_export(train_path=train_path, test_path=tmp_path / "nope.tsv", model_path=model_path)

        assert not model_path.exists()
