# snakeloop/core/scheduler.py  (fixed timestep accumulator, no pygame)
from __future__ import annotations
import logging
from fractions import Fraction
from typing import Optional, Tuple

log = logging.getLogger(__name__)

NS_PER_SEC = 1_000_000_000


class FixedStepScheduler:
    """Accumulates wall-clock time and hands out whole fixed logic steps.

    Elapsed samples are taken to the nanosecond; after that everything is
    integer arithmetic scaled by the step rate, so over a run the number of
    steps emitted is ``floor(total_ns * steps_per_second / 1e9)`` however the
    samples were split across ticks. Leftover time is exposed as an
    interpolation factor in [0, 1).

    ``max_steps_per_frame`` caps catch-up after a stall; whole steps owed past
    the cap are dropped and only the fractional remainder is kept.
    """

    def __init__(self, steps_per_second: float = 60, max_steps_per_frame: Optional[int] = None):
        if steps_per_second <= 0:
            raise ValueError(f"steps_per_second must be positive, got {steps_per_second}")
        if max_steps_per_frame is not None and max_steps_per_frame < 1:
            raise ValueError(f"max_steps_per_frame must be >= 1, got {max_steps_per_frame}")
        self.steps_per_second = steps_per_second
        self.max_steps_per_frame = max_steps_per_frame
        rate = Fraction(steps_per_second)
        # accumulator unit: ns * rate numerator; one step = NS_PER_SEC * rate denominator units
        self._rate_num = rate.numerator
        self._step_units = NS_PER_SEC * rate.denominator
        self._accum = 0
        self.total_steps = 0
        self.dropped_steps = 0

    @property
    def step_ns(self) -> Fraction:
        return Fraction(self._step_units, self._rate_num)

    @property
    def step_duration(self) -> float:
        return float(self.step_ns) / NS_PER_SEC

    @property
    def accumulator(self) -> float:
        return self._accum / (self._rate_num * NS_PER_SEC)

    @property
    def alpha(self) -> float:
        return self._accum / self._step_units

    def reset(self) -> None:
        self._accum = 0

    def tick(self, elapsed: float) -> Tuple[int, float]:
        """Add ``elapsed`` seconds; return (logic steps due, interpolation alpha)."""
        if elapsed < 0:
            raise ValueError(f"elapsed time must be non-negative, got {elapsed}")
        self._accum += round(elapsed * NS_PER_SEC) * self._rate_num

        steps = 0
        while self._accum >= self._step_units:
            if self.max_steps_per_frame is not None and steps >= self.max_steps_per_frame:
                owed = self._accum // self._step_units
                self._accum %= self._step_units
                self.dropped_steps += owed
                log.warning("catch-up capped at %d steps, dropped %d", steps, owed)
                break
            self._accum -= self._step_units
            steps += 1

        self.total_steps += steps
        return steps, self.alpha
