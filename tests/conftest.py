import io
from types import SimpleNamespace

import pytest
from PIL import Image
from rich.console import Console

from autoaccept.config import AutoAcceptConfig
from autoaccept.regions import TARGET_LAYOUT


REGION_NAMES = [name for name, _, _ in TARGET_LAYOUT]

APPROVAL_TEXT = "Codex wants permission. Allow once?"
CONTINUE_TEXT = "Posso continuar com o próximo passo?"


class ScriptedRecognizer:
    """Returns scripted text per region, in enumeration order."""

    def __init__(self, texts=None):
        self.texts = dict(texts or {})
        self.calls = 0
        self.images = []
        self.error = None

    def recognize_text(self, image):
        if self.error is not None:
            raise self.error
        name = REGION_NAMES[self.calls % len(REGION_NAMES)]
        self.calls += 1
        self.images.append(image)
        return self.texts.get(name, "")


class FakeCapture:
    def __init__(self, size=(200, 100)):
        self.size = size
        self.fail = False
        self.handles = []

    def capture_window(self, hwnd):
        self.handles.append(hwnd)
        if self.fail:
            return None
        return Image.new("RGB", self.size, "white")


class RecordingKeyboard:
    def __init__(self):
        self.calls = []
        self.success = True

    def press_key(self, key):
        self.calls.append(("press_key", key))
        return SimpleNamespace(success=self.success, message=f"Pressed key: {key}")

    def send_text_and_enter(self, text):
        self.calls.append(("send_text_and_enter", text))
        return SimpleNamespace(success=self.success, message=f"Typed '{text}' and pressed Enter")


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def frame():
    return Image.new("RGB", (200, 100), "white")


@pytest.fixture
def recognizer():
    return ScriptedRecognizer()


@pytest.fixture
def capture():
    return FakeCapture()


@pytest.fixture
def keyboard():
    return RecordingKeyboard()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def log_console():
    return Console(file=io.StringIO(), width=500, color_system=None)


@pytest.fixture
def test_config():
    return AutoAcceptConfig(ocr_engine="tesseract", ocr_language="eng", tesseract_cmd=None)
