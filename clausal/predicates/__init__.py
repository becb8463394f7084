r"""Boolean conditions over opaque atomic predicates.

An abstract base class :class:`Predicate` implements representations of and
methods on boolean conditions recursively built using the following
operators, which are mapped to classes as follows:

+--------------+--------------+---------------+---------------+--------------+
| :math:`\top` | :math:`\bot` | :math:`\lnot` | :math:`\land` | :math:`\lor` |
+--------------+--------------+---------------+---------------+--------------+
| :class:`_T`  | :class:`_F`  | :class:`Not`  | :class:`And`  | :class:`Or`  |
+--------------+--------------+---------------+---------------+--------------+

The truth values are operators of arity 0. They are implemented as singleton
classes :class:`_T` and :class:`_F` with unique instances :data:`T` and
:data:`F`, respectively:

>>> T is _T()
True

The leaves of the trees are instances of subclasses of
:class:`AtomicPredicate`, which are provided by a theory or by a parser. The
only thing the normal form computations in :mod:`clausal.bnf` need to know
about an atomic predicate is how to negate it. Some atomic predicates are
provided in :mod:`clausal.atoms`:

>>> from clausal.atoms import Var
>>> a, b = Var.get('a', 'b')
>>> f = Not(And(a, Or(Not(b), F)))
>>> f
Not(And(a, Or(Not(b), F)))
>>> f.to_nnf()
Or(!a, And(b, T))

The set of operators is closed. Any other node occurring in a tree leads to
:exc:`UnsupportedPredicateKind`:

>>> Not(Or(a, 'b')).to_nnf()
Traceback (most recent call last):
...
clausal.predicates.formula.UnsupportedPredicateKind: unsupported predicate kind str: 'b'
"""

from .formula import Predicate, UnsupportedPredicateKind  # noqa

from .atomic import AtomicPredicate  # noqa

from .boolean import BooleanPredicate, And, Or, Not, _T, T, _F, F  # noqa


__all__ = [
    'Predicate', 'AtomicPredicate', 'BooleanPredicate',

    'And', 'Or', 'Not', 'T', 'F',

    'UnsupportedPredicateKind'
]
