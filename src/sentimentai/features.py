# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re
import unicodedata

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.pipeline import FeatureUnion

URL_RE = re.compile(r"https?://[^\s<>\"']+|www\.[^\s<>\"']+", flags=re.IGNORECASE)
REPEATED_CHAR_RE = re.compile(r"(.)\1{3,}")
WHITESPACE_RE = re.compile(r"\s+")

URL_TOKEN = " urltoken "


def normalize_text(value: object) -> str:
    text = unicodedata.normalize("NFKC", str(value or "")).lower()
    text = URL_RE.sub(URL_TOKEN, text)
    # "soooooo" and "sooo" share features
    text = REPEATED_CHAR_RE.sub(r"\1\1\1", text)
    return WHITESPACE_RE.sub(" ", text).strip()


def build_featurizer() -> FeatureUnion:
    return FeatureUnion(
        transformer_list=[
            (
                "word_tfidf",
                TfidfVectorizer(
                    analyzer="word",
                    preprocessor=normalize_text,
                    ngram_range=(1, 2),
                    max_features=60000,
                    sublinear_tf=True,
                ),
            ),
            (
                "char_tfidf",
                TfidfVectorizer(
                    analyzer="char_wb",
                    preprocessor=normalize_text,
                    ngram_range=(3, 5),
                    max_features=40000,
                    sublinear_tf=True,
                ),
            ),
        ]
    )
