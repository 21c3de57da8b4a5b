# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import pandas as pd

from ..errors import ConfigError, DatasetIOError, DatasetParseError
from ..schemas import LabeledExample

log = logging.getLogger(__name__)

LABEL_COLUMN = "Label"
TEXT_COLUMN = "SentimentText"
TRUE_LABELS = {"1", "true"}
FALSE_LABELS = {"0", "false"}


def parse_label(raw: str) -> bool | None:
    lowered = raw.strip().lower()
    if lowered in TRUE_LABELS:
        return True
    if lowered in FALSE_LABELS:
        return False
    return None


def _parse_row(path: Path, line_no: int, line: str, separator: str) -> LabeledExample:
    fields = line.split(separator)
    if len(fields) != 2:
        raise DatasetParseError(path, line_no, f"expected 2 columns, found {len(fields)}")
    raw_label, text = fields
    label = parse_label(raw_label)
    if label is None:
        raise DatasetParseError(path, line_no, f"label must be one of 0/1/true/false, got {raw_label!r}")
    return LabeledExample(label=label, text=text)


def load_dataset(path: Path | str, *, has_header: bool = True, separator: str = "\t") -> list[LabeledExample]:
    source = Path(path)
    if not separator:
        raise ConfigError("separator must not be empty")
    rows: list[LabeledExample] = []
    try:
        with source.open("r", encoding="utf-8", newline="\n") as handle:
            # only LF ends a row; a bare CR belongs to the text
            for line_no, raw in enumerate(handle, 1):
                line = raw.rstrip("\r\n")
                if has_header and line_no == 1:
                    continue
                if not line.strip():
                    continue
                rows.append(_parse_row(source, line_no, line, separator))
    except FileNotFoundError as exc:
        raise DatasetIOError(source, "no such file") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetIOError(source, str(exc)) from exc
    log.debug("loaded %d rows from %s", len(rows), source)
    return rows


def to_dataframe(rows: Iterable[LabeledExample]) -> pd.DataFrame:
    data = [{"label": bool(row.label), "text": row.text} for row in rows]
    return pd.DataFrame(data, columns=["label", "text"])
