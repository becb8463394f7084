"""Concrete atomic predicates. Parsers and rule engines typically bring their
own subclasses of :class:`.AtomicPredicate`; the ones here cover boolean
variables and comparisons of numeric variables with constants.
"""

from .variables import Var  # noqa

from .compare import Compare  # noqa

__all__ = ['Var', 'Compare']
