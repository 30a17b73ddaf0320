# SPDX-License-Identifier: MIT

import threading
from typing import Callable, Optional


class DebouncedAction:
    """
    Run an action once a burst of schedule() calls has gone quiet.

    Every schedule() cancels the pending run and re-arms the timer, so only
    the last call of a burst leads to a run. A timer that has been superseded
    or cancelled never runs the action, even if it already woke up. Runs never
    overlap, and flush() waits for a run already in progress.
    """

    def __init__(self, action: Callable[[], None], delay: float) -> None:
        self._action = action
        self.delay = delay
        self._lock = threading.Lock()
        self._running = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def schedule(self) -> None:
        with self._lock:
            self.__cancel_locked()
            generation = self._generation
            timer = threading.Timer(self.delay, self.__fire, args=(generation,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> bool:
        with self._lock:
            return self.__cancel_locked()

    def flush(self) -> bool:
        """
        Run a pending action now. Returns False if nothing was pending.

        A run started by the timer is waited for either way.
        """
        with self._lock:
            was_pending = self.__cancel_locked()
        with self._running:
            if was_pending:
                self._action()
        return was_pending

    def __cancel_locked(self) -> bool:
        self._generation += 1
        if self._timer is None:
            return False
        self._timer.cancel()
        self._timer = None
        return True

    def __fire(self, generation: int) -> None:
        # _running is taken first so a flush() racing this run waits for it
        with self._running:
            with self._lock:
                if generation != self._generation:
                    return
                self._timer = None
            self._action()
