"""
Game clock tests: speed multipliers, tick ordering and the async runner.
"""

import asyncio

import pytest

from airline_tycoon.models import GameSpeed
from airline_tycoon.services import GameClock


class TestTick:
    """Test synchronous stepping."""

    def test_paused_tick_is_noop(self):
        calls = []
        clock = GameClock(handlers=[calls.append])

        assert clock.tick() is False
        assert clock.total_minutes == 0
        assert calls == []
        assert clock.is_paused

    @pytest.mark.parametrize("speed,expected", [
        (GameSpeed.SLOW, 0.1),
        (GameSpeed.NORMAL, 1.0),
        (GameSpeed.FAST, 6.0),
    ])
    def test_speed_multipliers(self, speed, expected):
        clock = GameClock(speed=speed)
        clock.tick()
        assert clock.total_minutes == pytest.approx(expected)

    def test_handlers_run_in_order_with_new_total(self):
        calls = []
        clock = GameClock(
            handlers=[
                lambda t: calls.append(("flights", t)),
                lambda t: calls.append(("bookings", t)),
                lambda t: calls.append(("company", t)),
            ],
            speed=GameSpeed.FAST,
        )

        clock.tick()

        assert calls == [("flights", 6.0), ("bookings", 6.0), ("company", 6.0)]

    def test_advance(self):
        clock = GameClock(speed=GameSpeed.FAST)
        assert clock.advance(240) == 240
        assert clock.total_minutes == 1440
        assert clock.time.day == 2

    def test_slow_speed_reaches_day_boundary_exactly(self):
        """Ten slow ticks make one minute with no floating-point drift."""
        seen = []
        clock = GameClock(handlers=[seen.append], speed=GameSpeed.SLOW)

        clock.advance(14400)

        assert clock.total_minutes == 1440
        assert seen[9] == 1.0
        assert clock.time.day == 2
        assert clock.time.hour == 0
        assert clock.time.minute == 0

    def test_pause_keeps_time(self):
        clock = GameClock(speed=GameSpeed.NORMAL)
        clock.advance(90)
        clock.pause()
        clock.advance(10)

        assert clock.total_minutes == 90
        assert clock.time.hour == 1
        assert clock.time.minute == 30

    def test_set_speed_accepts_int(self):
        clock = GameClock()
        clock.set_speed(3)
        assert clock.speed is GameSpeed.FAST
        assert not clock.is_paused


class TestRunner:
    """Test the background asyncio runner."""

    @pytest.mark.asyncio
    async def test_start_and_stop(self):
        clock = GameClock(tick_interval_seconds=0.001, speed=GameSpeed.NORMAL)

        clock.start()
        assert clock.is_running
        await asyncio.sleep(0.05)
        await clock.stop()

        assert not clock.is_running
        assert clock.total_minutes > 0
        assert clock.total_minutes == int(clock.total_minutes)

    @pytest.mark.asyncio
    async def test_stop_preserves_minutes(self):
        """Stopping halts ticks without resetting accumulated time."""
        clock = GameClock(tick_interval_seconds=0.001, speed=GameSpeed.FAST)
        clock.start()
        await asyncio.sleep(0.03)
        await clock.stop()

        stopped_at = clock.total_minutes
        await asyncio.sleep(0.02)
        assert clock.total_minutes == stopped_at

        clock.start()
        await asyncio.sleep(0.03)
        await clock.stop()
        assert clock.total_minutes > stopped_at

    @pytest.mark.asyncio
    async def test_start_twice_reuses_task(self):
        clock = GameClock(tick_interval_seconds=0.001)
        first = clock.start()
        assert clock.start() is first
        await clock.stop()

    @pytest.mark.asyncio
    async def test_stop_when_not_running(self):
        clock = GameClock()
        await clock.stop()
        assert not clock.is_running

    @pytest.mark.asyncio
    async def test_runner_respects_pause(self):
        clock = GameClock(tick_interval_seconds=0.001, speed=GameSpeed.PAUSED)
        clock.start()
        await asyncio.sleep(0.02)
        await clock.stop()
        assert clock.total_minutes == 0
