"""
Detection of approval prompts and continuation suggestions in OCR text.
Every region of a frame is scored against both intents and the best
region wins.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterator

from PIL import Image

from .config import AutoAcceptConfig, config as default_config
from .lexicon import (
    TOPIC_WORDS,
    APPROVAL_STRONG_PHRASES,
    APPROVAL_WORDS,
    NEXT_STEP_PHRASES,
    CONTINUE_SUGGESTION_PHRASES,
    PROMPT_MARKERS,
    SUGGESTION_MARKERS,
)
from .imaging import enhance_for_ocr, identity_copy
from .regions import enumerate_ocr_targets
from .screenshot import crop_region
from .text import normalize_for_match, count_contains, contains_any, build_snippet

if TYPE_CHECKING:
    from .ocr import Recognizer


# Takes (image, scale, contrast)
Enhancer = Callable[[Image.Image, int, float], Image.Image]


class ScreenAction(Enum):
    """What the screen is asking for."""
    NONE = "none"
    ACCEPT_APPROVAL = "accept_approval"
    SEND_CONTINUE = "send_continue"


@dataclass(frozen=True)
class DetectionResult:
    """Best guess for one region (or one frame)."""
    action: ScreenAction
    score: int
    source: str
    snippet: str

    @classmethod
    def none(cls) -> "DetectionResult":
        return cls(ScreenAction.NONE, 0, "-", "")

    @property
    def actionable(self) -> bool:
        return self.action is not ScreenAction.NONE


def score_detection(
    raw_text: str,
    source: str,
    enhanced: bool,
    config: AutoAcceptConfig = default_config,
) -> DetectionResult:
    """
    Score one region's OCR text against the approval and continue intents.

    A topic word ("codex", "chatgpt") is worth 4 plus one per hit. Strong
    approval phrases weigh 3, next-step phrases 2, everything else 1. A
    non-zero intent gets +1 when the text carries one of its marker words
    and +1 when the region was enhanced. An intent score at or above
    ``implicit_topic_threshold`` counts as 1 point of topic evidence when
    no topic word was read.
    """
    normalized = normalize_for_match(raw_text)
    if not normalized:
        return DetectionResult.none()

    topic_hits = count_contains(normalized, TOPIC_WORDS)
    topic_score = 4 + topic_hits if topic_hits > 0 else 0

    approval_score = (
        3 * count_contains(normalized, APPROVAL_STRONG_PHRASES)
        + count_contains(normalized, APPROVAL_WORDS)
    )
    next_score = (
        2 * count_contains(normalized, NEXT_STEP_PHRASES)
        + count_contains(normalized, CONTINUE_SUGGESTION_PHRASES)
    )

    if approval_score > 0:
        approval_score += 1 if contains_any(normalized, PROMPT_MARKERS) else 0
        approval_score += 1 if enhanced else 0

    if next_score > 0:
        next_score += 1 if contains_any(normalized, SUGGESTION_MARKERS) else 0
        next_score += 1 if enhanced else 0

    if topic_score == 0 and max(approval_score, next_score) >= config.implicit_topic_threshold:
        topic_score = 1

    total_approval = topic_score + approval_score
    total_next = topic_score + next_score
    snippet = build_snippet(normalized, config.snippet_length)

    if total_approval >= config.action_threshold and total_approval >= total_next:
        return DetectionResult(ScreenAction.ACCEPT_APPROVAL, total_approval, source, snippet)

    if total_next >= config.action_threshold:
        return DetectionResult(ScreenAction.SEND_CONTINUE, total_next, source, snippet)

    return DetectionResult(ScreenAction.NONE, max(total_approval, total_next), source, snippet)


def iter_region_results(
    screenshot: Image.Image,
    recognizer: "Recognizer",
    enhancer: Enhancer = enhance_for_ocr,
    config: AutoAcceptConfig = default_config,
) -> Iterator[DetectionResult]:
    """Score each target region of a frame that has recognized text."""
    for name, region, enhanced in enumerate_ocr_targets(screenshot.size):
        cropped = crop_region(screenshot, region)
        if enhanced:
            prepared = enhancer(cropped, config.enhance_scale, config.enhance_contrast)
        else:
            prepared = identity_copy(cropped)

        raw_text = recognizer.recognize_text(prepared)
        if not raw_text or not raw_text.strip():
            continue

        yield score_detection(raw_text, name, enhanced, config)


def analyze_screen(
    screenshot: Image.Image,
    recognizer: "Recognizer",
    enhancer: Enhancer = enhance_for_ocr,
    config: AutoAcceptConfig = default_config,
) -> DetectionResult:
    """
    OCR every target region of a frame and return the highest-scoring result.

    Regions are processed one at a time in enumeration order; on equal
    scores the earlier region is kept. Regions with no recognized text
    are skipped.
    """
    best = DetectionResult.none()
    for candidate in iter_region_results(screenshot, recognizer, enhancer, config):
        if candidate.score > best.score:
            best = candidate
    return best
