"""
Poll loop - watches the editor window and answers prompts.
Each cycle captures the window, scores every OCR region, debounces the
verdict across cycles, checks the cooldown and then sends the keys.
"""

import time
from datetime import datetime
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from .config import AutoAcceptConfig, config as default_config
from .confirmation import PendingConfirmation
from .cooldown import CooldownTracker
from .detection import DetectionResult, Enhancer, ScreenAction, analyze_screen
from .imaging import enhance_for_ocr
from .ocr import Recognizer
from .utils import find_target_window, focus_window, format_duration


console = Console()


class CycleOutcome(Enum):
    """How a single poll cycle ended."""
    WINDOW_NOT_FOUND = "window_not_found"
    CAPTURE_FAILED = "capture_failed"
    NO_TRIGGER = "no_trigger"
    PENDING = "pending"
    COOLDOWN = "cooldown"
    DISPATCHED = "dispatched"
    ERROR = "error"


@dataclass
class CycleReport:
    """Result of one poll cycle."""
    outcome: CycleOutcome
    detection: DetectionResult
    message: str


class AutoAcceptLoop:
    """
    Main loop that keeps the editor moving.

    The loop:
    1. Finds the editor window and captures it
    2. OCRs every target region and keeps the best detection
    3. Requires the same detection on consecutive cycles
    4. Checks the per-action cooldown
    5. Focuses the window and sends Enter or the continue text
    6. Sleeps and repeats until interrupted

    All cross-cycle state (confirmation and cooldowns) lives on the
    instance; collaborators default to the real Windows adapters.
    """

    def __init__(
        self,
        recognizer: Optional[Recognizer] = None,
        capture=None,
        keyboard=None,
        window_finder: Optional[Callable[[], Optional[int]]] = None,
        focuser: Optional[Callable[[int], bool]] = None,
        enhancer: Enhancer = enhance_for_ocr,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        config: AutoAcceptConfig = default_config,
        output: Optional[Console] = None,
    ):
        if recognizer is None:
            from .ocr import get_ocr_engine
            recognizer = get_ocr_engine()
        if capture is None:
            from .screenshot import get_screen_capture
            capture = get_screen_capture()
        if keyboard is None:
            from .executors import get_keyboard
            keyboard = get_keyboard()

        self.recognizer = recognizer
        self.capture = capture
        self.keyboard = keyboard
        self.window_finder = window_finder or partial(find_target_window, config.target_process_names)
        self.focuser = focuser or focus_window
        self.enhancer = enhancer
        self.clock = clock
        self.sleep = sleep
        self.config = config
        self.console = output or console

        self.pending = PendingConfirmation(required=config.min_confirmations)
        self.cooldowns = CooldownTracker(config)
        self.cycles = 0
        self._stop_requested = False

    def run(self, max_cycles: Optional[int] = None) -> int:
        """
        Poll until stopped (Ctrl+C, stop() or max_cycles).

        Returns:
            Number of cycles run
        """
        self._stop_requested = False

        while not self._stop_requested:
            if max_cycles is not None and self.cycles >= max_cycles:
                break
            try:
                self.run_cycle()
                self.sleep(self.config.poll_interval)
            except KeyboardInterrupt:
                self.console.print("\n[yellow]Auto accept stopped by user[/yellow]")
                break

        return self.cycles

    def stop(self):
        """Request the loop to stop after the current cycle."""
        self._stop_requested = True

    def run_cycle(self) -> CycleReport:
        """Run one cycle; failures are logged and reset the confirmation."""
        self.cycles += 1
        try:
            report = self._execute_cycle()
        except Exception as e:
            self.pending.reset()
            report = CycleReport(CycleOutcome.ERROR, DetectionResult.none(), f"Error: {e}")
            self._log(escape(report.message), "red")
        return report

    def _execute_cycle(self) -> CycleReport:
        hwnd = self.window_finder()
        if not hwnd:
            return self._abort(CycleOutcome.WINDOW_NOT_FOUND, "VS Code window not found.")

        screenshot = self.capture.capture_window(hwnd)
        if screenshot is None:
            return self._abort(CycleOutcome.CAPTURE_FAILED, "Failed to capture the VS Code window.")

        detection = analyze_screen(screenshot, self.recognizer, self.enhancer, self.config)
        if not detection.actionable:
            return self._abort(
                CycleOutcome.NO_TRIGGER,
                f"No trigger. Best score={detection.score} ({detection.source}).",
                detection,
            )

        confirmed = self.pending.register(detection.action)
        self._log(
            f"Detected {detection.action.value} score={detection.score} src={detection.source} "
            f"conf={self.pending.progress} txt=\"{detection.snippet}\"",
            "yellow",
        )
        if not confirmed:
            return CycleReport(CycleOutcome.PENDING, detection, "Waiting for confirmation.")

        now = self.clock()
        if not self.cooldowns.is_ready(detection.action, now):
            left = format_duration(self.cooldowns.remaining(detection.action, now))
            if detection.action is ScreenAction.ACCEPT_APPROVAL:
                message = f"Approval prompt detected, waiting for cooldown ({left} left)."
            else:
                message = f"Next step detected, waiting for cooldown ({left} left)."
            self._log(message, "yellow")
            return CycleReport(CycleOutcome.COOLDOWN, detection, message)

        if not self.focuser(hwnd):
            self._log("Could not bring VS Code to the foreground, sending input anyway.", "dim")
        self.sleep(self.config.focus_settle_delay)

        result = self._dispatch(detection.action)
        self.pending.reset()
        if not result.success:
            self._log(escape(result.message), "red")
            return CycleReport(CycleOutcome.ERROR, detection, result.message)

        self.cooldowns.record(detection.action, self.clock())
        if detection.action is ScreenAction.ACCEPT_APPROVAL:
            message = "Enter sent to VS Code."
        else:
            message = f"'{self.config.continue_text}' sent."
        self._log(message, "green")
        return CycleReport(CycleOutcome.DISPATCHED, detection, message)

    def _dispatch(self, action: ScreenAction):
        if action is ScreenAction.ACCEPT_APPROVAL:
            return self.keyboard.press_key("enter")
        if action is ScreenAction.SEND_CONTINUE:
            return self.keyboard.send_text_and_enter(self.config.continue_text)
        raise ValueError(f"Cannot dispatch action: {action}")

    def _abort(
        self,
        outcome: CycleOutcome,
        message: str,
        detection: Optional[DetectionResult] = None,
    ) -> CycleReport:
        self.pending.reset()
        self._log(message, "dim")
        return CycleReport(outcome, detection or DetectionResult.none(), message)

    def _log(self, message: str, style: str):
        stamp = escape(f"[{datetime.now():%H:%M:%S}]")
        self.console.print(f"[{style}]{stamp} {message}[/{style}]")
