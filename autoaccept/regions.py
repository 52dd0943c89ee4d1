"""
Named sub-regions of a captured window that are OCR'd independently.
Approval prompts and continuation suggestions render in different panels
(modal center, side panel, bottom input strip), so each layout area gets
its own sample.
"""

from typing import Iterator, NamedTuple, Tuple

from .screenshot import ScreenRegion


class OcrTarget(NamedTuple):
    name: str
    region: ScreenRegion
    enhanced: bool


# name, (x, y, w, h) as fractions of the frame, enhanced
TARGET_LAYOUT = (
    ("full_raw", (0.00, 0.00, 1.00, 1.00), False),
    ("full_enh", (0.00, 0.00, 1.00, 1.00), True),
    ("center_enh", (0.18, 0.12, 0.64, 0.70), True),
    ("right_enh", (0.52, 0.00, 0.48, 1.00), True),
    ("lower_enh", (0.00, 0.45, 1.00, 0.55), True),
    ("lower_right_enh", (0.45, 0.40, 0.55, 0.60), True),
    ("bottom_input_enh", (0.35, 0.72, 0.65, 0.26), True),
)


def percent_rect(size: Tuple[int, int], x: float, y: float, w: float, h: float) -> ScreenRegion:
    """
    Rectangle from fractional offsets of a frame.

    The result always lies inside the frame and is at least 1x1.
    """
    width, height = size
    left = max(0, int(width * x))
    top = max(0, int(height * y))
    rect_width = max(1, min(width - left, int(width * w)))
    rect_height = max(1, min(height - top, int(height * h)))
    return ScreenRegion(left=left, top=top, width=rect_width, height=rect_height)


def enumerate_ocr_targets(size: Tuple[int, int]) -> Iterator[OcrTarget]:
    """Yield the fixed OCR targets for a frame of the given (width, height)."""
    for name, fractions, enhanced in TARGET_LAYOUT:
        yield OcrTarget(name, percent_rect(size, *fractions), enhanced)
