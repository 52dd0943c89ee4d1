#!/usr/bin/env python3
"""Run the detection pipeline on a saved screenshot and show every region's score."""

from __future__ import annotations

import argparse
import sys

from PIL import Image
from rich.console import Console
from rich.table import Table

from autoaccept.detection import iter_region_results
from autoaccept.ocr import OcrUnavailableError, get_ocr_engine


console = Console()


def build_table(results) -> Table:
    table = Table(title="Regions", border_style="dim")
    table.add_column("Region", style="cyan")
    table.add_column("Action")
    table.add_column("Score", justify="right")
    table.add_column("Snippet", style="dim", overflow="fold")
    for result in results:
        style = "green" if result.actionable else ""
        table.add_row(result.source, result.action.value, str(result.score), result.snippet, style=style)
    return table


def main() -> int:
    parser = argparse.ArgumentParser(description="Score a saved VS Code screenshot.")
    parser.add_argument("image", help="Path to the image file")
    args = parser.parse_args()

    try:
        recognizer = get_ocr_engine()
    except OcrUnavailableError as e:
        console.print(f"[red]{e}[/red]")
        return 1

    image = Image.open(args.image).convert("RGB")
    results = list(iter_region_results(image, recognizer))
    if not results:
        console.print("[yellow]No text recognized in any region.[/yellow]")
        return 0

    console.print(build_table(results))
    best = max(results, key=lambda r: r.score)
    console.print(f"Best: [bold]{best.action.value}[/bold] score={best.score} src={best.source}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
