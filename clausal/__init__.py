__version__ = 0.1

___status__ = 'Prototype'

from . import predicates

from .predicates import (Predicate, AtomicPredicate, BooleanPredicate,  # noqa
                         And, Or, Not, T, F, UnsupportedPredicateKind)

from . import atoms

from .atoms import Var, Compare  # noqa

from .bnf import (Options, ClauseForm, to_dnf, to_cnf,  # noqa
                  dnf_to_predicate, cnf_to_predicate)

from .abstraction import BooleanAbstraction  # noqa

__all__ = predicates.__all__ + atoms.__all__ + [
    'Options', 'ClauseForm', 'to_dnf', 'to_cnf', 'dnf_to_predicate',
    'cnf_to_predicate', 'BooleanAbstraction'
]
