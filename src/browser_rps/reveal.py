import threading
from typing import Callable


class RevealSchedule:
    """
    Staged reveal of a round: both choices after `choice_delay`, then the
    result after a further `result_delay`. The two callbacks run on
    independent timers and `cancel()` stops whichever has not fired yet.
    The result stage never runs before the choices stage.
    """

    def __init__(self, on_choices: Callable[[], None], on_result: Callable[[], None],
                 choice_delay: float = 0.6, result_delay: float = 0.3,
                 timer_factory=threading.Timer):
        self.on_choices = on_choices
        self.on_result = on_result
        self.choice_delay = choice_delay
        self.result_delay = result_delay
        self._timer_factory = timer_factory
        self._timers = []
        self._shown = threading.Event()
        self._done = threading.Event()
        self.cancelled = False

    def start(self):
        self._timers = [
            self._timer_factory(self.choice_delay, self._fire_choices),
            self._timer_factory(self.choice_delay + self.result_delay, self._fire_result),
        ]
        for t in self._timers:
            t.daemon = True
            t.start()
        return self

    def _fire_choices(self):
        try:
            if not self.cancelled:
                self.on_choices()
        finally:
            self._shown.set()

    def _fire_result(self):
        self._shown.wait()
        try:
            if not self.cancelled:
                self.on_result()
        finally:
            self._done.set()

    def cancel(self):
        self.cancelled = True
        for t in self._timers:
            t.cancel()
        self._shown.set()
        self._done.set()

    def wait(self, timeout=None) -> bool:
        return self._done.wait(timeout)
