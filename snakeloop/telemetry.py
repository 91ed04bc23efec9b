from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable

from snakeloop.core.interfaces import FrameStats
from snakeloop.metrics import FrameRate, WindowedStat

ALL_KEYS = [
    "frame",
    "loop/fps", "loop/dt_max",
    "loop/steps_mean", "loop/steps_max", "loop/steps_total",
    "loop/alpha", "loop/keys", "game/state",
]

class Logger(Protocol):
    def log(self, frame: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, frame: int, scalars: Dict[str, Any]) -> None:
        scalars = {"frame": frame, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # <-- don't crash on unseen keys
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

def make_frame_logger(logger: Logger, every_frames: int = 60) -> Callable[[FrameStats], None]:
    """
    Returns a function(stats: FrameStats) -> None that summarizes loop timing
    over windows of `every_frames` frames and writes one row per window.
    """
    fps = FrameRate()
    dts = WindowedStat(every_frames)
    steps = WindowedStat(every_frames)
    keys = WindowedStat(every_frames)

    def _on_frame(stats: FrameStats) -> None:
        fps.update(stats.dt)
        dts.add(stats.dt); steps.add(stats.steps); keys.add(stats.keys)
        if (stats.frame_id + 1) % every_frames != 0:
            return
        ws = steps.summary()
        logger.log(stats.frame_id, {
            "loop/fps": fps.fps,
            "loop/dt_max": dts.summary()["max"],
            "loop/steps_mean": ws["mean"],
            "loop/steps_max": ws["max"],
            "loop/steps_total": ws["total"],
            "loop/alpha": stats.alpha,
            "loop/keys": keys.summary()["total"],
            "game/state": stats.state.value,
        })
        logger.flush()
    return _on_frame
