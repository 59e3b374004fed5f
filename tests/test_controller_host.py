"""Tests for the ControllerHost."""

import pytest

from snake_controller.config import ControllerConfig
from snake_controller.server.controller_host import ControllerHost


@pytest.fixture()
def host():
    return ControllerHost(ControllerConfig(clock_hz=2, ticks_per_second=2))


class TestHeldInputs:
    def test_press_and_release(self, host):
        host.press("down")
        assert host.held.down
        host.release("down")
        assert not host.held.any

    def test_levels_accumulate(self, host):
        host.press("up")
        host.press("left")
        assert host.held.up and host.held.left

    def test_unknown_line(self, host):
        with pytest.raises(ValueError, match="Unknown direction"):
            host.press("jump")


class TestStepping:
    def test_run_cycles_uses_held_inputs(self, host):
        host.press("right")
        state = host.run_cycles(3)
        assert state["state"] == "playing"
        assert state["head"] == [12, 10]

    def test_reset(self, host):
        host.press("right")
        host.run_cycles(3)
        state = host.reset()
        assert state["state"] == "idle"
        assert state["head"] == [10, 10]

    def test_summary(self, host):
        summary = host.summary()
        assert summary.state == "idle"
        assert summary.clock_running is False


class TestClock:
    @pytest.mark.asyncio
    async def test_run_cycles_refused_while_clocked(self, host):
        host.start_clock()
        assert host.clock_running
        with pytest.raises(RuntimeError, match="Clock is running"):
            host.run_cycles(1)
        await host.cleanup()
        assert not host.clock_running

    @pytest.mark.asyncio
    async def test_stop_without_start(self, host):
        await host.stop_clock()
        assert not host.clock_running
