"""Report a :class:`NoTraceException` reaching the top level of a Python or
IPython session as a one-line message on `stderr`, without a traceback. Both
hooks are installed at import.
"""

import sys
from types import TracebackType
from typing import Any, Optional

import IPython


class NoTraceException(Exception):
    """Base class for errors caused by the input rather than by a bug, e.g.,
    predicate trees handed over by a parser that contain node kinds the
    normal form computations do not know.
    """
    pass


def report(exc: NoTraceException) -> None:
    print(exc, file=sys.stderr, flush=True)


def excepthook(exc_type: type[BaseException], exc: BaseException,
               tb: Optional[TracebackType]) -> None:
    if isinstance(exc, NoTraceException):
        report(exc)
    else:
        python_excepthook(exc_type, exc, tb)


def ipython_excepthook(shell: Any, exc_type: type[NoTraceException], exc: NoTraceException,
                       tb: TracebackType, tb_offset: Optional[int] = None) -> None:
    report(exc)


python_excepthook = sys.excepthook
sys.excepthook = excepthook

shell = IPython.get_ipython()
if shell is not None:
    shell.set_custom_exc((NoTraceException,), ipython_excepthook)
