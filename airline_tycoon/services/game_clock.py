"""
Game clock: simulated time and per-tick orchestration.

Each real-time step advances simulated minutes by the speed multiplier and
runs the flight lifecycle, booking engine and company ledger, in that
order. Ticks are synchronous; the asyncio runner only awaits between them,
so stopping can never interrupt a tick halfway.
"""

import asyncio
import logging
from typing import Callable, List, Optional

from ..models.enums import GameSpeed
from ..models.game import SPEED_MULTIPLIERS, GameTimeModel

logger = logging.getLogger(__name__)

TickHandler = Callable[[float], object]

# Elapsed time is counted in whole tenths of a minute
STEPS_PER_MINUTE = 10


class GameClock:
    """
    Discrete-event stepper over simulated minutes.

    Features:
    - Speed selector with fixed multipliers (paused, slow, normal, fast)
    - Synchronous ``tick``/``advance`` for deterministic stepping
    - Background asyncio runner with start/stop that keeps accumulated time
    """

    def __init__(
        self,
        handlers: Optional[List[TickHandler]] = None,
        tick_interval_seconds: float = 0.1,
        speed: GameSpeed = GameSpeed.PAUSED,
    ):
        """
        Initialize game clock.

        Args:
            handlers: Per-tick callbacks, invoked in order with the new total
            tick_interval_seconds: Real-time cadence of the background runner
            speed: Initial speed
        """
        self.handlers: List[TickHandler] = list(handlers or [])
        self.tick_interval_seconds = tick_interval_seconds
        self.speed = GameSpeed(speed)
        self._elapsed_steps = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def total_minutes(self) -> float:
        return self._elapsed_steps / STEPS_PER_MINUTE

    @property
    def time(self) -> GameTimeModel:
        return GameTimeModel.from_minutes(self.total_minutes)

    @property
    def is_paused(self) -> bool:
        return self.speed == GameSpeed.PAUSED

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def set_speed(self, speed: GameSpeed) -> None:
        self.speed = GameSpeed(speed)
        logger.info(f"Game speed set to {self.speed.name.lower()}")

    def pause(self) -> None:
        self.set_speed(GameSpeed.PAUSED)

    def tick(self) -> bool:
        """
        Run one step.

        Returns:
            bool: False if paused (nothing happened), True otherwise
        """
        delta = round(SPEED_MULTIPLIERS[self.speed] * STEPS_PER_MINUTE)
        if delta == 0:
            return False

        self._elapsed_steps += delta
        for handler in self.handlers:
            handler(self.total_minutes)
        return True

    def advance(self, steps: int) -> int:
        """
        Run ``steps`` ticks synchronously.

        Returns:
            int: Number of ticks that advanced time
        """
        return sum(1 for _ in range(steps) if self.tick())

    async def run(self) -> None:
        """Tick at the configured real-time cadence until cancelled."""
        while True:
            self.tick()
            await asyncio.sleep(self.tick_interval_seconds)

    def start(self) -> asyncio.Task:
        """
        Start the background runner on the current event loop.

        Returns:
            asyncio.Task: The runner task (the existing one if already running)
        """
        if self.is_running:
            return self._task
        self._task = asyncio.get_running_loop().create_task(self.run())
        logger.info("Game clock started")
        return self._task

    async def stop(self) -> None:
        """Stop the runner between ticks; accumulated minutes are kept."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info(f"Game clock stopped at minute {self.total_minutes:.1f}")
