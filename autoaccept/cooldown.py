"""
Per-action cooldown after a dispatch.
"""

from typing import Dict, Optional

from .config import AutoAcceptConfig, config as default_config
from .detection import ScreenAction


class CooldownTracker:
    """Remembers when each action kind last fired."""

    def __init__(self, config: AutoAcceptConfig = default_config):
        self.cooldowns: Dict[ScreenAction, float] = {
            ScreenAction.ACCEPT_APPROVAL: config.approval_cooldown,
            ScreenAction.SEND_CONTINUE: config.continue_cooldown,
        }
        self.last_fired: Dict[ScreenAction, Optional[float]] = {
            action: None for action in self.cooldowns
        }

    def _cooldown(self, action: ScreenAction) -> float:
        try:
            return self.cooldowns[action]
        except KeyError:
            raise ValueError(f"No cooldown for action: {action}") from None

    def remaining(self, action: ScreenAction, now: float) -> float:
        """Seconds until the action may fire again (0 when ready)."""
        cooldown = self._cooldown(action)
        last = self.last_fired[action]
        if last is None:
            return 0.0
        return max(0.0, cooldown - (now - last))

    def is_ready(self, action: ScreenAction, now: float) -> bool:
        return self.remaining(action, now) <= 0.0

    def record(self, action: ScreenAction, now: float):
        self._cooldown(action)
        self.last_fired[action] = now
