import time

def now_nanos():
    return time.time_ns()


class Context:
    """
    Snapshot of the host environment for a single call: who is calling, when,
    and how much value they attached. Audit messages emitted during the call
    are collected in ``logs`` and only published if the call commits.
    """
    def __init__(self, caller, now=None, attached_deposit=0):
        self._state = {
            'caller': caller,
            'now': now_nanos() if now is None else now,
            'attached_deposit': attached_deposit,
        }
        self.logs = []

    @property
    def caller(self):
        return self._state['caller']

    @property
    def now(self):
        return self._state['now']

    @property
    def attached_deposit(self):
        return self._state['attached_deposit']

    def log(self, message):
        self.logs.append(message)

    def __repr__(self):
        return 'Context(caller={caller!r}, now={now}, attached_deposit={attached_deposit})'.format(**self._state)
