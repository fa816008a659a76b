"""Fixed-window moving average."""
import numpy as np


class MovingAverage:
    """Arithmetic mean over the last ``window`` values added.

    Sized to the number of samples, the window never slides and ``avg`` is the
    plain mean of every sample.
    """

    def __init__(self, window: int):
        if window < 1:
            raise ValueError(f"Moving average window must be positive, got {window}")
        self.window = window
        self._values = np.zeros(window, dtype=np.float64)
        self._next = 0
        self.count = 0

    def add(self, *values: float) -> None:
        for value in values:
            self._values[self._next] = value
            self._next = (self._next + 1) % self.window
            self.count += 1

    def avg(self) -> float:
        filled = min(self.count, self.window)
        if filled == 0:
            return 0.0
        return float(np.mean(self._values[:filled]))
