"""
Schedulers for the deferred half of a shot.

The engine only needs ``schedule(delay_seconds, callback)``. The Socket.IO
server plugs in a background-task version (see ``app.py``); the CLI resolves
immediately; tests hold callbacks until they choose to run them.
"""


def immediate_schedule(delay, callback):
    callback()


class ManualScheduler:
    """Queues continuations until ``run_pending`` is called."""

    def __init__(self):
        self.pending = []

    def __call__(self, delay, callback):
        self.pending.append((delay, callback))

    def run_pending(self):
        ran = 0
        while self.pending:
            _, callback = self.pending.pop(0)
            callback()
            ran += 1
        return ran
