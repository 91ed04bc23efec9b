from __future__ import annotations
from collections import deque
from typing import Deque, Dict, Optional

class EMA:
    """Exponential moving average."""
    def __init__(self, alpha: float):
        if not 0.0 < alpha <= 1.0:
            raise ValueError(f"alpha must be in (0, 1], got {alpha}")
        self.alpha = alpha
        self.value: Optional[float] = None
    def update(self, x: float) -> float:
        self.value = x if self.value is None else (self.alpha * x + (1 - self.alpha) * self.value)
        return self.value

class FrameRate:
    """Smoothed frames-per-second from per-frame deltas."""
    def __init__(self, alpha: float = 0.1):
        self._dt = EMA(alpha)
    def update(self, dt: float) -> float:
        return self.fps if dt <= 0 else 1.0 / max(1e-9, self._dt.update(dt))
    @property
    def fps(self) -> float:
        return 0.0 if not self._dt.value else 1.0 / self._dt.value

class WindowedStat:
    """Fixed-window mean/min/max/total."""
    def __init__(self, window: int):
        self.window = window
        self.buf: Deque[float] = deque(maxlen=window)
    def add(self, x: float) -> None:
        self.buf.append(float(x))
    def summary(self) -> Dict[str, float]:
        if not self.buf:
            return {"mean": 0.0, "min": 0.0, "max": 0.0, "total": 0.0}
        b = list(self.buf)
        return {"mean": sum(b) / len(b), "min": min(b), "max": max(b), "total": sum(b)}
