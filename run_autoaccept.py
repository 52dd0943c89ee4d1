#!/usr/bin/env python3
"""
Codex Auto Accept - Main Entry Point

Watches the VS Code window, reads it with OCR and answers Codex/ChatGPT
approval prompts (Enter) and "next step" suggestions ("pode seguir").

Usage:
    python run_autoaccept.py
"""

import sys

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from autoaccept.config import config
from autoaccept.loop import AutoAcceptLoop
from autoaccept.ocr import OcrUnavailableError, get_ocr_engine, get_ocr_engine_kind
from autoaccept.utils import format_duration


console = Console()


def print_banner():
    """Print the startup banner."""
    banner = """
+===========================================================+
|                                                           |
|      CODEX AUTO ACCEPT                                    |
|                                                           |
|      Multi-region OCR + 2-cycle confirmation              |
|      Press Ctrl+C to stop                                 |
|                                                           |
+===========================================================+
"""
    console.print(banner, style="bold cyan")


def print_status():
    """Print current settings."""
    table = Table(title="Settings", show_header=False, border_style="dim")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("OCR Engine", get_ocr_engine_kind() or config.ocr_engine)
    table.add_row("OCR Language", config.ocr_language)
    table.add_row("Target Processes", ", ".join(config.target_process_names))
    table.add_row("Poll Interval", format_duration(config.poll_interval))
    table.add_row("Approval Cooldown", format_duration(config.approval_cooldown))
    table.add_row("Continue Cooldown", format_duration(config.continue_cooldown))
    table.add_row("Confirmations", str(config.min_confirmations))
    table.add_row("Continue Text", config.continue_text)

    console.print(table)
    console.print()


def main():
    try:
        config.validate()
    except ValueError as e:
        console.print(Panel(str(e), title="CONFIGURATION ERROR", border_style="red"))
        sys.exit(1)

    print_banner()

    if sys.platform != "win32":
        console.print("[yellow]Window discovery needs Windows; the editor will never be found here.[/yellow]")

    try:
        recognizer = get_ocr_engine()
    except OcrUnavailableError as e:
        console.print(Panel(str(e), title="OCR UNAVAILABLE", border_style="red"))
        sys.exit(1)

    print_status()

    loop = AutoAcceptLoop(recognizer=recognizer)
    cycles = loop.run()
    console.print(f"[dim]Stopped after {cycles} cycles.[/dim]")


if __name__ == "__main__":
    main()
