from autoaccept.confirmation import PendingConfirmation
from autoaccept.detection import ScreenAction


ACCEPT = ScreenAction.ACCEPT_APPROVAL
CONTINUE = ScreenAction.SEND_CONTINUE


class TestPendingConfirmation:
    """Confirmation across consecutive cycles"""

    def test_single_detection_is_not_confirmed(self):
        pending = PendingConfirmation()
        assert pending.register(ACCEPT) is False
        assert pending.action is ACCEPT
        assert pending.hits == 1

    def test_second_identical_detection_confirms(self):
        pending = PendingConfirmation()
        pending.register(ACCEPT)
        assert pending.register(ACCEPT) is True
        assert pending.hits == 2

    def test_clean_cycle_resets(self):
        pending = PendingConfirmation()
        pending.register(ACCEPT)
        assert pending.register(ScreenAction.NONE) is False
        assert pending.action is ScreenAction.NONE
        assert pending.hits == 0
        assert pending.register(ACCEPT) is False

    def test_different_action_restarts_count(self):
        pending = PendingConfirmation()
        pending.register(ACCEPT)
        assert pending.register(CONTINUE) is False
        assert pending.action is CONTINUE
        assert pending.hits == 1
        assert pending.register(CONTINUE) is True

    def test_stays_confirmed_while_action_repeats(self):
        pending = PendingConfirmation()
        results = [pending.register(ACCEPT) for _ in range(4)]
        assert results == [False, True, True, True]
        assert pending.hits == 4

    def test_custom_threshold(self):
        pending = PendingConfirmation(required=3)
        assert [pending.register(CONTINUE) for _ in range(3)] == [False, False, True]
        assert pending.progress == "3/3"

    def test_reset_from_arbitrary_state(self):
        pending = PendingConfirmation(action=CONTINUE, hits=5)
        pending.reset()
        assert pending.action is ScreenAction.NONE
        assert pending.hits == 0
        assert pending.progress == "0/2"
