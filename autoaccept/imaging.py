"""
Image preparation applied to screen regions before they reach OCR.
"""

from typing import Optional

from PIL import Image

from .config import config


def enhance_for_ocr(
    image: Image.Image,
    scale: Optional[int] = None,
    contrast: Optional[float] = None,
) -> Image.Image:
    """
    Upscale and convert to high-contrast grayscale for small UI text.

    Luma uses Rec. 709 weights; contrast is stretched around mid-gray.
    The result is RGB so every backend accepts it. Factors left as None
    come from the global config.
    """
    if scale is None:
        scale = config.enhance_scale
    if contrast is None:
        contrast = config.enhance_contrast

    rgb = image.convert("RGB")
    w, h = rgb.size
    upscaled = rgb.resize((max(1, w * scale), max(1, h * scale)), Image.Resampling.BICUBIC)

    offset = 0.5 * (1.0 - contrast) * 255.0
    matrix = (0.2126 * contrast, 0.7152 * contrast, 0.0722 * contrast, offset)
    gray = upscaled.convert("L", matrix)
    return gray.convert("RGB")


def identity_copy(image: Image.Image) -> Image.Image:
    return image.copy()
