"""
OCR backends for reading the editor's prompts.
Uses Tesseract by default; EasyOCR can be selected with OCR_ENGINE=easyocr.
"""

import os
from typing import List, Optional, Protocol

from PIL import Image
import pytesseract

from .config import config


# Tesseract language code -> EasyOCR language code
EASYOCR_LANGUAGES = {
    "por": "pt",
    "eng": "en",
}

# Prompts are read in Portuguese and English
DEFAULT_EASYOCR_LANGUAGES = ["pt", "en"]

_GPU_ON = ("1", "true", "yes", "on")
_GPU_OFF = ("0", "false", "no", "off")


class OcrUnavailableError(RuntimeError):
    """The OCR backend could not be initialized."""


class Recognizer(Protocol):
    def recognize_text(self, image: Image.Image) -> str:
        ...


def split_languages(language: Optional[str]) -> List[str]:
    """Split a "por+eng" style setting into unique codes, keeping order."""
    codes: List[str] = []
    for part in (language or "").replace(",", "+").split("+"):
        code = part.strip().lower()
        if code and code not in codes:
            codes.append(code)
    return codes


def easyocr_languages(language: Optional[str]) -> List[str]:
    """Translate the Tesseract-style language setting for EasyOCR."""
    codes: List[str] = []
    for code in split_languages(language):
        mapped = EASYOCR_LANGUAGES.get(code, code)
        if mapped not in codes:
            codes.append(mapped)
    return codes or list(DEFAULT_EASYOCR_LANGUAGES)


def resolve_gpu(setting: Optional[str]) -> bool:
    """EASYOCR_GPU on/off, or "auto" to use CUDA when torch reports it."""
    value = (setting or "").strip().lower()
    if value in _GPU_ON:
        return True
    if value in _GPU_OFF:
        return False
    try:
        import torch
    except ImportError:
        return False
    return bool(torch.cuda.is_available())


class TesseractEngine:
    """Tesseract-based OCR engine."""

    def __init__(self):
        self.language = config.ocr_language
        self._verify_tesseract()
        self.lang_to_use = self._select_language()

    def _verify_tesseract(self):
        """Verify Tesseract is installed and accessible."""
        # Try common installation paths on Windows
        possible_paths = [
            r"C:\Program Files\Tesseract-OCR\tesseract.exe",
            r"C:\Program Files (x86)\Tesseract-OCR\tesseract.exe",
            r"C:\Tesseract-OCR\tesseract.exe",
        ]
        if config.tesseract_cmd:
            possible_paths.insert(0, config.tesseract_cmd)

        for path in possible_paths:
            if os.path.exists(path):
                pytesseract.pytesseract.tesseract_cmd = path
                break

        try:
            pytesseract.get_tesseract_version()
        except (pytesseract.TesseractNotFoundError, OSError) as e:
            raise OcrUnavailableError(
                "Tesseract OCR is not installed or not found.\n"
                "Please install Tesseract:\n"
                "  Windows: Download from https://github.com/UB-Mannheim/tesseract/wiki\n"
                "  Or point TESSERACT_CMD at the tesseract executable."
            ) from e

    def _select_language(self) -> str:
        """Pick the best available language combo for OCR."""
        lang_to_use = (self.language or "").strip()
        try:
            available = set(pytesseract.get_languages(config=""))
        except (pytesseract.TesseractError, OSError):
            return lang_to_use or "eng"
        usable = [p for p in split_languages(lang_to_use) if p in available]
        if usable:
            return "+".join(usable)
        if "eng" in available:
            return "eng"
        raise OcrUnavailableError(
            f"None of the OCR languages {lang_to_use!r} are installed for Tesseract."
        )

    def recognize_text(self, image: Image.Image) -> str:
        """Recognize all text in an image; empty string on failure."""
        try:
            return pytesseract.image_to_string(
                image.convert("RGB"),
                lang=self.lang_to_use,
                config="--oem 3 --psm 6",
            ) or ""
        except (pytesseract.TesseractError, RuntimeError, OSError):
            return ""


class EasyOCREngine:
    """EasyOCR-based OCR engine (no Tesseract dependency)."""

    def __init__(self):
        # Avoid Unicode progress bar issues on Windows consoles.
        os.environ.setdefault("PYTHONIOENCODING", "utf-8")
        os.environ.setdefault("PYTHONUTF8", "1")
        self.languages = easyocr_languages(config.ocr_language)
        self.gpu = resolve_gpu(config.easyocr_gpu)
        self._reader = self._init_reader()

    def _init_reader(self):
        try:
            import easyocr
        except ImportError as exc:
            raise OcrUnavailableError(
                "EasyOCR is not installed. Install with: pip install 'codex-autoaccept[easyocr]'"
            ) from exc
        try:
            return easyocr.Reader(self.languages, gpu=self.gpu, verbose=False)
        except (ValueError, RuntimeError, OSError) as exc:
            raise OcrUnavailableError(f"EasyOCR failed to initialize: {exc}") from exc

    def recognize_text(self, image: Image.Image) -> str:
        import numpy as np

        try:
            lines = self._reader.readtext(np.array(image.convert("RGB")), detail=0)
        except (ValueError, RuntimeError):
            return ""
        return "\n".join(line for line in lines if line)


# Singleton instance
_ocr_instance: Optional[Recognizer] = None
_ocr_instance_kind: Optional[str] = None


def get_ocr_engine() -> Recognizer:
    """
    Get or create the OCR engine singleton.

    Raises OcrUnavailableError when no backend can be initialized.
    """
    global _ocr_instance, _ocr_instance_kind
    engine_name = (config.ocr_engine or "").strip().lower()
    if engine_name in ("easyocr", "easy", "easy_ocr"):
        if _ocr_instance is None:
            try:
                _ocr_instance = EasyOCREngine()
                _ocr_instance_kind = "easyocr"
            except OcrUnavailableError:
                _ocr_instance = TesseractEngine()
                _ocr_instance_kind = "tesseract"
        return _ocr_instance

    if _ocr_instance is None or _ocr_instance_kind != "tesseract":
        _ocr_instance = TesseractEngine()
        _ocr_instance_kind = "tesseract"
    return _ocr_instance


def get_ocr_engine_kind() -> Optional[str]:
    return _ocr_instance_kind
