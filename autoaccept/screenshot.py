"""
Screenshot capture of the editor window with DPI awareness.
"""

import ctypes
from typing import Optional, Tuple
from dataclasses import dataclass

import mss
from mss.exception import ScreenShotError
from PIL import Image


@dataclass(frozen=True)
class ScreenRegion:
    """Represents a rectangle in pixels."""
    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """(left, top, right, bottom) as expected by PIL's crop."""
        return (self.left, self.top, self.right, self.bottom)

    def clamp_to(self, width: int, height: int) -> "ScreenRegion":
        """Intersect with a width x height image anchored at (0, 0)."""
        left = min(max(0, self.left), width)
        top = min(max(0, self.top), height)
        right = max(left, min(self.right, width))
        bottom = max(top, min(self.bottom, height))
        return ScreenRegion(left, top, right - left, bottom - top)


def crop_region(image: Image.Image, region: ScreenRegion) -> Image.Image:
    """Crop a region out of an image, clamped to the image bounds."""
    safe = region.clamp_to(*image.size)
    return image.crop(safe.box)


class ScreenCapture:
    """Handles window capture with DPI awareness."""

    def __init__(self):
        self.sct = mss.mss()
        self._setup_dpi_awareness()

    def _setup_dpi_awareness(self):
        """Set DPI awareness on Windows for accurate coordinates."""
        try:
            # Set DPI awareness to per-monitor aware
            ctypes.windll.shcore.SetProcessDpiAwareness(2)
        except (AttributeError, OSError):
            try:
                # Fallback to system DPI aware
                ctypes.windll.user32.SetProcessDPIAware()
            except (AttributeError, OSError):
                pass  # Not on Windows or already set

    def capture_region(self, region: ScreenRegion) -> Image.Image:
        """Capture a specific region of the screen."""
        monitor = {
            "left": region.left,
            "top": region.top,
            "width": region.width,
            "height": region.height
        }
        screenshot = self.sct.grab(monitor)
        return Image.frombytes("RGB", screenshot.size, screenshot.bgra, "raw", "BGRX")

    def window_region(self, hwnd: int) -> Optional[ScreenRegion]:
        """Screen rectangle of a window, or None when it has no area."""
        import win32gui

        try:
            left, top, right, bottom = win32gui.GetWindowRect(hwnd)
        except win32gui.error:
            return None
        if right - left <= 0 or bottom - top <= 0:
            return None
        return ScreenRegion(left=left, top=top, width=right - left, height=bottom - top)

    def capture_window(self, hwnd: int) -> Optional[Image.Image]:
        """Capture a window's screen rectangle, or None on failure."""
        region = self.window_region(hwnd)
        if region is None:
            return None
        try:
            return self.capture_region(region)
        except ScreenShotError:
            return None


# Singleton instance
_capture_instance: Optional[ScreenCapture] = None


def get_screen_capture() -> ScreenCapture:
    """Get or create the screen capture singleton."""
    global _capture_instance
    if _capture_instance is None:
        _capture_instance = ScreenCapture()
    return _capture_instance
