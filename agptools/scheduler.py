"""Run a task after a delay, optionally repeating."""

from __future__ import annotations

from typing import Callable, Optional


class Scheduler:
    """Runs ``task`` once ``delay_seconds`` of simulated time have passed.

    After firing, the task is rescheduled ``loop`` more times; a negative
    ``loop`` repeats forever.
    """

    def __init__(
        self,
        delay_seconds: float = 0.0,
        task: Optional[Callable[[], None]] = None,
        loop: int = 0,
    ) -> None:
        self._task = task if task is not None else (lambda: None)
        self._delay = delay_seconds
        self._remaining = delay_seconds
        self._loop = loop

    def update(self, dt: float) -> None:
        """Advance time by ``dt`` seconds, firing the task when due."""
        if not self.on():
            return
        self._remaining -= dt
        if self._remaining <= 0:
            self._task()
            if self._loop != 0:
                self._remaining = self._delay
                self._loop -= 1

    def on(self) -> bool:
        """True while the task is still pending."""
        return self._remaining > 0