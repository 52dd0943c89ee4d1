"""
Debounce for detections: an action only counts once the same action has
won several consecutive polling cycles.
"""

from dataclasses import dataclass

from .detection import ScreenAction


@dataclass
class PendingConfirmation:
    """The action being confirmed and how many cycles in a row it won."""
    action: ScreenAction = ScreenAction.NONE
    hits: int = 0
    required: int = 2

    def register(self, action: ScreenAction) -> bool:
        """Fold one cycle's winning action in; True once it is confirmed."""
        if action is ScreenAction.NONE:
            self.reset()
            return False

        if action is not self.action:
            self.action = action
            self.hits = 1
            return self.hits >= self.required

        self.hits += 1
        return self.hits >= self.required

    def reset(self):
        self.action = ScreenAction.NONE
        self.hits = 0

    @property
    def progress(self) -> str:
        return f"{self.hits}/{self.required}"
