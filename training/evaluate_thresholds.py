#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from pathlib import Path

from sentimentai.evaluation.evaluate import threshold_report
from sentimentai.persistence import load_model
from sentimentai.training.dataset import load_dataset


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sweep precision/recall/F1 over decision thresholds.")
    parser.add_argument("--model", default="Data/Model.joblib", help="Model artifact (joblib)")
    parser.add_argument("--eval", default="Data/sentiment-test.tsv", help="Evaluation TSV")
    parser.add_argument("--output", default="Data/threshold_eval.json", help="JSON report output")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    output_path = Path(args.output)

    model = load_model(Path(args.model))
    rows = load_dataset(Path(args.eval))
    probs = model.probabilities([row.text for row in rows]).tolist()
    report = threshold_report([row.label for row in rows], probs)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(report, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")

    print(f"[OK] report: {output_path}")
    for row in report:
        print(
            f"thr={row['threshold']:.2f} "
            f"prec={row['precision']:.3f} rec={row['recall']:.3f} f1={row['f1']:.3f}"
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
