import datetime
import logging
import time


class DeltaTimeFormatter(logging.Formatter):
    """Add an attribute `delta` to each :class:`.logging.LogRecord`, which
    holds the time elapsed since :attr:`reference_time`. :class:`.ClauseForm`
    resets the reference time at the start of each computation.

    >>> formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    >>> formatter.set_reference_time(1000.0)
    >>> record = logging.makeLogRecord({'msg': '4 clauses', 'created': 1002.5})
    >>> formatter.format(record)
    '0:00:02.500: 4 clauses'
    """

    reference_time: float = time.time()

    def format(self, record: logging.LogRecord) -> str:
        elapsed = datetime.timedelta(seconds=record.created - self.reference_time)
        record.delta = str(elapsed)[:-3] if elapsed.microseconds else f'{elapsed}.000'
        return super().format(record)

    def set_reference_time(self, reference_time: float) -> None:
        self.reference_time = reference_time


class RateFilter(logging.Filter):
    """Pass at most one record per :attr:`rate` seconds. The distribution
    loops of :mod:`clausal.bnf` may log millions of times.

    >>> rate_filter = RateFilter()
    >>> record = logging.makeLogRecord({'msg': 'fold'})
    >>> rate_filter.filter(record)
    True
    >>> rate_filter.set_rate(3600.0)
    >>> rate_filter.filter(record)
    False
    """

    def __init__(self, rate: float = 0.0) -> None:
        super().__init__()
        self.rate = rate
        self.last_pass = 0.0

    def filter(self, record: logging.LogRecord) -> bool:
        if record.created - self.last_pass < self.rate:
            return False
        self.last_pass = record.created
        return True

    def set_rate(self, rate: float) -> None:
        self.rate = rate


class Timer:
    """Wall time in seconds since creation.

    >>> Timer().get() >= 0.0
    True
    """

    def __init__(self) -> None:
        self.start = time.time()

    def get(self) -> float:
        return time.time() - self.start
