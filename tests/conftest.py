from __future__ import annotations

from pathlib import Path

import pytest

from sentimentai.schemas import LabeledExample
from sentimentai.training.trainer import train

TOXIC_TEXTS = [
    "This is rude",
    "You are so rude",
    "rude and stupid comment",
    "what a rude idiot",
    "rude people everywhere",
    "stop being rude",
]
NICE_TEXTS = [
    "I am happy",
    "so happy today",
    "happy and grateful",
    "what a happy family",
    "happy people everywhere",
    "keep being happy",
]


def make_corpus(repeat: int = 10) -> list[LabeledExample]:
    rows: list[LabeledExample] = []
    for _ in range(repeat):
        rows.extend(LabeledExample(label=True, text=text) for text in TOXIC_TEXTS)
        rows.extend(LabeledExample(label=False, text=text) for text in NICE_TEXTS)
    return rows


def _write_tsv(path: Path, rows: list[LabeledExample]) -> Path:
    lines = ["Label\tSentimentText"]
    lines.extend(f"{'1' if row.label else '0'}\t{row.text}" for row in rows)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def write_tsv():
    return _write_tsv


@pytest.fixture(scope="session")
def corpus() -> list[LabeledExample]:
    return make_corpus()


@pytest.fixture(scope="session")
def trained_model(corpus):
    return train(corpus)


@pytest.fixture
def tsv_files(tmp_path: Path, corpus) -> tuple[Path, Path]:
    train_path = _write_tsv(tmp_path / "train.tsv", corpus)
    test_path = _write_tsv(
        tmp_path / "test.tsv",
        [
            LabeledExample(label=True, text="so rude"),
            LabeledExample(label=False, text="very happy"),
            LabeledExample(label=True, text="rude comment"),
            LabeledExample(label=False, text="happy family"),
        ],
    )
    return train_path, test_path
