"""
Deferred calls for the computer's move.

The controller never sleeps or spawns threads: it asks a scheduler to call
it back later and keeps the returned task so a reset can cancel it.
"""

import logging
from typing import Callable, List, Optional, Protocol


logger = logging.getLogger(__name__)


class ScheduledTask:
    """
    Handle for a pending callback.

    Cancelling is idempotent, and cancelling a task that already ran does
    nothing.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        delay_ms: int,
        on_cancel: Optional[Callable[[], None]] = None
    ):
        """
        Args:
            callback: Function to run when the delay is over.
            delay_ms: Requested delay, kept for logging and tests.
            on_cancel: Hook telling the underlying event loop to drop the call.
        """
        self.callback = callback
        self.delay_ms = delay_ms
        self.cancelled = False
        self.done = False
        self._on_cancel = on_cancel

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.done)

    def cancel(self):
        """Stop the callback from running."""
        if not self.pending:
            return

        self.cancelled = True
        if self._on_cancel is not None:
            self._on_cancel()
        logger.debug("Cancelled task after %d ms delay", self.delay_ms)

    def run(self):
        """Run the callback once, unless cancelled."""
        if not self.pending:
            return

        self.done = True
        self.callback()


class Scheduler(Protocol):
    """Anything that can run a callback after a delay."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        ...


class QueueScheduler:
    """
    Scheduler without a clock.

    Tasks wait in a queue until run_pending() is called. The console
    front-end drains it after each human move; tests drain it by hand.
    """

    def __init__(self):
        self.tasks: List[ScheduledTask] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        task = ScheduledTask(callback, delay_ms)
        self.tasks.append(task)
        return task

    @property
    def pending_count(self) -> int:
        return sum(1 for task in self.tasks if task.pending)

    def run_pending(self) -> int:
        """
        Run every pending task in scheduling order.

        Tasks scheduled while draining run in the same call.

        Returns:
            Number of callbacks that actually ran.
        """
        ran = 0
        while self.tasks:
            task = self.tasks.pop(0)
            if task.pending:
                task.run()
                ran += 1
        return ran


class TkScheduler:
    """
    Scheduler on top of a Tk widget's event loop (widget.after).
    """

    def __init__(self, widget):
        """
        Args:
            widget: Any Tk widget, usually the root window.
        """
        self.widget = widget

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        after_id = None
        task = ScheduledTask(
            callback,
            delay_ms,
            on_cancel=lambda: self.widget.after_cancel(after_id),
        )
        after_id = self.widget.after(delay_ms, task.run)
        return task
