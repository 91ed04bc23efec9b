# snakeloop/core/loop.py
from __future__ import annotations
import logging
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from .direction_guard import DirectionGuard
from .input_buffer import InputBuffer
from .interfaces import Action, FrameStats, GameMap, GameState, Renderer, Snake
from .keymap import KeyMap
from .scheduler import FixedStepScheduler
from .state_machine import GameStateMachine

log = logging.getLogger(__name__)

FrameHook = Callable[[FrameStats], None]

_OVERLAYS = {
    GameState.PLAYING: "",
    GameState.PAUSED: "PAUSED",
    GameState.OVER: "GAME OVER",
}


@dataclass
class GameContext:
    """Everything one session of the loop owns."""
    game_map: GameMap
    snake: Snake
    renderer: Renderer
    states: GameStateMachine = field(default_factory=GameStateMachine)
    inputs: InputBuffer = field(default_factory=InputBuffer)
    scheduler: FixedStepScheduler = field(default_factory=FixedStepScheduler)
    guard: DirectionGuard = field(default_factory=DirectionGuard)
    keymap: KeyMap = field(default_factory=KeyMap)
    frame_id: int = 0


class GameLoop:
    """Input, fixed logic steps, one render per iteration.

    Logic only advances while Playing; rendering happens every frame. Errors
    raised by the map, snake or renderer are not caught here.
    """

    def __init__(
        self,
        ctx: GameContext,
        clock: Callable[[], float] = time.perf_counter,
        poll_input: Optional[Callable[[], None]] = None,
        on_frame: Iterable[FrameHook] = (),
    ):
        self.ctx = ctx
        self.clock = clock
        self.poll_input = poll_input
        self._hooks: List[FrameHook] = list(on_frame)
        self._stop = threading.Event()
        self._draw_alpha = 0.0
        ctx.states.add_listener(self._on_state_change)

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def stop(self) -> None:
        self._stop.set()

    def add_frame_hook(self, fn: FrameHook) -> None:
        self._hooks.append(fn)

    def run(self, max_frames: Optional[int] = None) -> int:
        """Loop until ``stop()`` (or ``max_frames``); returns frames run."""
        self._check_surface()
        frames = 0
        previous = self.clock()
        while not self._stop.is_set():
            if max_frames is not None and frames >= max_frames:
                break
            current = self.clock()
            elapsed, previous = current - previous, current
            self.run_frame(elapsed)
            frames += 1
        log.info("loop finished after %d frames", frames)
        return frames

    def run_frame(self, elapsed: float) -> FrameStats:
        ctx = self.ctx
        steps, alpha = ctx.scheduler.tick(elapsed)
        keys = self._process_input()

        log.debug("frame %d: %d logic steps", ctx.frame_id, steps)
        for _ in range(steps):
            if ctx.states.allows_logic:
                self._logic_step()

        ctx.renderer.clear()
        # hold the blend still while logic is frozen
        if ctx.states.allows_logic:
            self._draw_alpha = alpha
        ctx.renderer.draw(ctx.game_map, self._draw_alpha)

        stats = FrameStats(
            frame_id=ctx.frame_id,
            dt=elapsed,
            steps=steps,
            alpha=alpha,
            state=ctx.states.state,
            keys=keys,
        )
        ctx.frame_id += 1
        for fn in self._hooks:
            fn(stats)
        return stats

    # internals
    def _process_input(self) -> int:
        ctx = self.ctx
        if self.poll_input is not None:
            self.poll_input()
        keys = ctx.inputs.drain_all()
        for key in keys:
            action = ctx.keymap.resolve(key)
            if action is None:
                continue
            self._dispatch(action)
        return len(keys)

    def _dispatch(self, action: Action) -> None:
        ctx = self.ctx
        if action is Action.PAUSE:
            ctx.states.toggle_pause()
            return
        if not ctx.states.accepts_direction:
            log.debug("%s ignored, game over", action.name)
            return
        ctx.guard.apply(ctx.snake, action.direction)

    def _logic_step(self) -> None:
        ctx = self.ctx
        ctx.snake.update(ctx.game_map)
        ctx.game_map.refresh_food()
        if ctx.snake.is_dead():
            ctx.states.lose()

    def _on_state_change(self, old: GameState, new: GameState) -> None:
        set_overlay = getattr(self.ctx.renderer, "set_overlay", None)
        if callable(set_overlay):
            set_overlay(_OVERLAYS[new])

    def _check_surface(self) -> None:
        w, h = self.ctx.game_map.get_dimensions()
        tile = self.ctx.game_map.get_tile_size()
        if w <= 0 or h <= 0:
            raise ValueError(f"map dimensions must be positive, got {w}x{h}")
        if tile <= 0:
            raise ValueError(f"tile size must be positive, got {tile}")
