import importlib
import sys
from unittest.mock import patch

from PIL import Image

from autoaccept.config import AutoAcceptConfig
from autoaccept.imaging import enhance_for_ocr, identity_copy


class TestEnhanceForOcr:
    """Upscale and contrast filter"""

    def test_doubles_size_and_keeps_rgb(self):
        image = Image.new("RGB", (10, 6), (30, 120, 200))
        enhanced = enhance_for_ocr(image)
        assert enhanced.size == (20, 12)
        assert enhanced.mode == "RGB"

    def test_output_is_gray(self):
        enhanced = enhance_for_ocr(Image.new("RGB", (4, 4), (200, 40, 90)))
        r, g, b = enhanced.getpixel((1, 1))
        assert r == g == b

    def test_contrast_pushes_extremes_to_limits(self):
        white = enhance_for_ocr(Image.new("RGB", (2, 2), "white"))
        black = enhance_for_ocr(Image.new("RGB", (2, 2), "black"))
        assert white.getpixel((0, 0)) == (255, 255, 255)
        assert black.getpixel((0, 0)) == (0, 0, 0)

    def test_mid_gray_is_kept(self):
        gray = enhance_for_ocr(Image.new("RGB", (2, 2), (128, 128, 128)))
        value = gray.getpixel((0, 0))[0]
        assert abs(value - 128) <= 1

    def test_accepts_rgba_input(self):
        enhanced = enhance_for_ocr(Image.new("RGBA", (3, 3), (0, 0, 0, 0)))
        assert enhanced.mode == "RGB"
        assert enhanced.size == (6, 6)

    def test_explicit_factors_override_global_config(self):
        with patch("autoaccept.imaging.config", AutoAcceptConfig(enhance_scale=5)):
            enhanced = enhance_for_ocr(Image.new("RGB", (5, 5)), scale=3, contrast=1.0)
        assert enhanced.size == (15, 15)

    def test_unity_contrast_keeps_luma(self):
        enhanced = enhance_for_ocr(Image.new("RGB", (2, 2), (100, 100, 100)), scale=1, contrast=1.0)
        assert enhanced.getpixel((0, 0)) == (100, 100, 100)


def test_identity_copy_is_a_new_image():
    image = Image.new("RGB", (3, 3), "red")
    copy = identity_copy(image)
    assert copy is not image
    assert copy.tobytes() == image.tobytes()


def test_detection_does_not_need_an_ocr_backend():
    with patch.dict(sys.modules, {"pytesseract": None}):
        for name in ("autoaccept.detection", "autoaccept.imaging", "autoaccept.ocr"):
            sys.modules.pop(name, None)
        detection = importlib.import_module("autoaccept.detection")
        assert detection.score_detection("Codex: allow once", "full_raw", enhanced=False).actionable
        assert "autoaccept.ocr" not in sys.modules
