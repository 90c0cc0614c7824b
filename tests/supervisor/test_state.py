"""
Tests for owl/state.py.
"""

import threading

import pytest

from owl.exceptions import StateError
from owl.state import SupervisorState


@pytest.mark.unit
class TestSupervisorState:
    """Test shared state transitions."""

    def test_initial_values(self):
        state = SupervisorState()

        assert state.child_pid == 0
        assert state.last_signal == 0
        assert state.wait_for_child(timeout=0) is False

    def test_publish_child(self):
        state = SupervisorState()
        state.publish_child(1234)

        assert state.child_pid == 1234
        assert state.wait_for_child(timeout=0) is True

    def test_child_pid_is_never_reset(self):
        state = SupervisorState()
        state.publish_child(1234)

        with pytest.raises(StateError, match="already published"):
            state.publish_child(5678)
        with pytest.raises(StateError):
            state.publish_child(0)

        assert state.child_pid == 1234

    @pytest.mark.parametrize("pid", [0, -1])
    def test_rejects_non_positive_pid(self, pid):
        state = SupervisorState()

        with pytest.raises(StateError, match="positive"):
            state.publish_child(pid)
        assert state.child_pid == 0

    def test_record_signal_keeps_latest(self):
        state = SupervisorState()
        state.record_signal(15)
        state.record_signal(2)

        assert state.last_signal == 2

    def test_wait_for_child_wakes_waiter(self):
        state = SupervisorState()
        seen = []

        def waiter():
            if state.wait_for_child(timeout=5):
                seen.append(state.child_pid)

        t = threading.Thread(target=waiter)
        t.start()
        state.publish_child(42)
        t.join(timeout=5)

        assert seen == [42]

    def test_repr(self):
        state = SupervisorState()
        state.record_signal(1)

        assert repr(state) == "SupervisorState(child_pid=0, last_signal=1)"
