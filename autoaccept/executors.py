"""
Keyboard executor that answers the editor prompts.
Input is fire-and-forget: nothing reads back whether the keys landed.
"""

import time
from typing import Optional
from dataclasses import dataclass

import pyautogui
import pyperclip

from .config import config


# Disable pyautogui failsafe (the loop never moves the mouse)
pyautogui.FAILSAFE = False
pyautogui.PAUSE = 0.05


@dataclass
class ActionResult:
    """Result of an input action."""
    success: bool
    message: str


class KeyboardExecutor:
    """Handles keyboard input actions."""

    SPECIAL_KEYS = {
        "enter": "enter",
        "return": "enter",
        "tab": "tab",
        "escape": "escape",
        "esc": "escape",
    }

    def press_key(self, key: str) -> ActionResult:
        """Press a single key."""
        try:
            actual_key = self.SPECIAL_KEYS.get(key.lower(), key)
            pyautogui.press(actual_key)
            time.sleep(config.key_delay)
            return ActionResult(True, f"Pressed key: {key}")
        except pyautogui.PyAutoGUIException as e:
            return ActionResult(False, f"Failed to press key {key}: {e}")

    def type_text(self, text: str, interval: Optional[float] = None) -> ActionResult:
        """Type a string of text; non-ASCII text goes through the clipboard."""
        if not text.isascii():
            return self.type_text_safe(text)
        try:
            interval = interval or config.type_delay
            pyautogui.write(text, interval=interval)
            time.sleep(config.key_delay)
            return ActionResult(True, f"Typed text: {text[:50]}")
        except pyautogui.PyAutoGUIException as e:
            return ActionResult(False, f"Failed to type text: {e}")

    def type_text_safe(self, text: str) -> ActionResult:
        """
        Type text using clipboard (handles special characters better).
        Uses Ctrl+V to paste from clipboard.
        """
        try:
            # Save current clipboard
            try:
                old_clipboard = pyperclip.paste()
            except pyperclip.PyperclipException:
                old_clipboard = ""

            pyperclip.copy(text)
            pyautogui.hotkey("ctrl", "v")
            time.sleep(config.key_delay)

            # Restore clipboard
            try:
                pyperclip.copy(old_clipboard)
            except pyperclip.PyperclipException:
                pass

            return ActionResult(True, f"Typed text via clipboard: {text[:50]}")
        except (pyperclip.PyperclipException, pyautogui.PyAutoGUIException) as e:
            return ActionResult(False, f"Failed to type text: {e}")

    def send_text_and_enter(self, text: str) -> ActionResult:
        result = self.type_text(text)
        if not result.success:
            return result
        enter = self.press_key("enter")
        if not enter.success:
            return enter
        return ActionResult(True, f"Typed '{text}' and pressed Enter")


# Singleton instance
_keyboard: Optional[KeyboardExecutor] = None


def get_keyboard() -> KeyboardExecutor:
    global _keyboard
    if _keyboard is None:
        _keyboard = KeyboardExecutor()
    return _keyboard
