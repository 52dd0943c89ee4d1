"""
Configuration for Codex Auto Accept.
Thresholds are compiled in; only the OCR backend can be switched through
environment variables or a .env file in the project root.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Tuple

# Load .env file if it exists
def load_env():
    env_path = Path(__file__).parent.parent / ".env"
    if env_path.exists():
        raw = env_path.read_bytes()
        text = None
        for encoding in ("utf-8", "cp1252"):
            try:
                text = raw.decode(encoding)
                break
            except UnicodeDecodeError:
                continue
        if text is None:
            text = raw.decode("utf-8", errors="ignore")
        for line in text.splitlines():
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, value = line.split("=", 1)
                os.environ.setdefault(key.strip(), value.strip().strip('"').strip("'"))

load_env()


@dataclass
class AutoAcceptConfig:
    """Configuration for the auto accept loop."""

    # Poll loop settings
    poll_interval: float = 5.0  # Seconds slept after every cycle
    focus_settle_delay: float = 0.12  # Wait after focusing the window before typing

    # Cooldowns per action kind
    approval_cooldown: float = 15.0
    continue_cooldown: float = 30.0

    # Detection settings
    min_confirmations: int = 2  # Consecutive identical detections before acting
    action_threshold: int = 7  # Minimum total score for an actionable result
    implicit_topic_threshold: int = 6  # Intent score that stands in for a missing topic word
    snippet_length: int = 120

    # Enhancement applied to flagged regions before OCR
    enhance_scale: int = 2
    enhance_contrast: float = 1.35

    # What gets typed for a continuation suggestion
    continue_text: str = "pode seguir"

    # Editor process names (psutil reports "Code.exe" on Windows)
    target_process_names: Tuple[str, ...] = ("Code", "Code.exe")

    # OCR settings
    ocr_engine: str = field(default_factory=lambda: os.getenv("OCR_ENGINE", "tesseract"))
    ocr_language: str = field(default_factory=lambda: os.getenv("OCR_LANGUAGE", "por+eng"))
    tesseract_cmd: Optional[str] = field(default_factory=lambda: os.getenv("TESSERACT_CMD") or None)
    easyocr_gpu: str = field(default_factory=lambda: os.getenv("EASYOCR_GPU", "auto"))

    # Keyboard settings
    type_delay: float = 0.02  # Delay between typed characters
    key_delay: float = 0.05  # Delay after a key press

    def validate(self) -> bool:
        """Validate the configuration."""
        for name in ("poll_interval", "approval_cooldown", "continue_cooldown"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.min_confirmations < 1:
            raise ValueError("min_confirmations must be at least 1")
        if self.action_threshold < 1 or self.implicit_topic_threshold < 1:
            raise ValueError("Score thresholds must be at least 1")
        if self.enhance_scale < 1:
            raise ValueError("enhance_scale must be at least 1")
        if not self.target_process_names:
            raise ValueError("At least one target process name is required")
        return True


# Global config instance
config = AutoAcceptConfig()
