# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .schemas import EvaluationMetrics, PredictionResult

BANNER = "Sentiment analysis: train, evaluate, persist, predict"


@dataclass
class MLConsole:
    enabled: bool = True

    def __post_init__(self) -> None:
        self._console = Console(color_system="auto", soft_wrap=True) if self.enabled else None

    def banner(self) -> None:
        if self._console:
            self._console.print(Panel.fit(BANNER, title="sentimentai", border_style="cyan"))
            return
        print(BANNER)

    def section(self, title: str) -> None:
        if self._console:
            self._console.rule(f"[bold]{title}[/bold]")
        else:
            print(f"=============== {title} ===============")

    def info(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold cyan]INFO[/bold cyan] {text}")
        else:
            print(f"[INFO] {text}")

    def success(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold green]OK[/bold green] {text}")
        else:
            print(f"[OK] {text}")

    def error(self, text: str) -> None:
        if self._console:
            self._console.print(f"[bold red]ERROR[/bold red] {text}")
        else:
            print(f"[ERROR] {text}")

    def metrics_table(self, metrics: EvaluationMetrics, *, title: str) -> None:
        rows = [("Accuracy", metrics.accuracy), ("Auc", metrics.auc), ("F1Score", metrics.f1)]
        if self._console:
            table = Table(title=title, show_lines=True)
            table.add_column("Metric", style="bold")
            table.add_column("Value", justify="right")
            for name, value in rows:
                table.add_row(name, f"{value:.2%}")
            self._console.print(table)
            return

        print(title)
        for name, value in rows:
            print(f"{name}: {value:.2%}")

    def predictions(self, results: Iterable[PredictionResult]) -> None:
        for result in results:
            line = f"Sentiment: {result.text} | Prediction: {result.verdict} | Probability: {result.probability:.4f}"
            if self._console:
                # markup off: sample text may contain square brackets
                self._console.print(line, markup=False)
            else:
                print(line)
