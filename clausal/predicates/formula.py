from __future__ import annotations

from abc import abstractmethod
from typing import Any, Final, Generic, Iterator, Optional, Self, TypeVar
from typing_extensions import TypeIs

from IPython.lib import pretty

from ..support.excepthook import NoTraceException


α = TypeVar('α', bound='AtomicPredicate')
"""A type variable denoting a type of atomic predicates with upper bound
:class:`clausal.predicates.atomic.AtomicPredicate`.
"""


class UnsupportedPredicateKind(NoTraceException):
    """Raised when a predicate tree contains a node that is not one of
    :data:`T <.boolean.T>`, :data:`F <.boolean.F>`, an
    :class:`AtomicPredicate <.atomic.AtomicPredicate>`, :class:`Not
    <.boolean.Not>`, :class:`And <.boolean.And>`, or :class:`Or
    <.boolean.Or>`. The offending node is available as :attr:`node`.

    >>> from clausal.predicates import And, T
    >>> exc = UnsupportedPredicateKind([T])
    >>> exc.node
    [T]
    >>> str(exc)
    'unsupported predicate kind list: [T]'
    """

    def __init__(self, node: object) -> None:
        super().__init__(f'unsupported predicate kind {type(node).__name__}: {node!r}')
        self.node = node


class Predicate(Generic[α]):
    r"""This abstract base class implements representations of and methods on
    boolean conditions recursively built from atomic predicates using the
    operators :math:`\top`, :math:`\bot`, :math:`\lnot`, :math:`\land`, and
    :math:`\lor`.

    Predicates are immutable. Equality is structural, and hashes are
    computed once and cached, so that predicates can be elements of
    :class:`frozenset` clauses.
    """

    _hash: Optional[int]

    @property
    def op(self) -> type[Self]:
        """Operator. This property yields the respective subclass.
        """
        return type(self)

    @property
    def args(self) -> tuple[Any, ...]:
        """The arguments of a predicate as a tuple.

        .. seealso::
            * :attr:`Not.arg <.boolean.Not.arg>` \
                -- argument predicate of a logical :math:`\\neg`
        """
        return self._args

    @args.setter
    def args(self, args: tuple[Any, ...]) -> None:
        self._args = args

    def __and__(self, other: Predicate[α]) -> Predicate[α]:
        """Override the :obj:`& <object.__and__>` operator to apply
        :class:`.boolean.And`.

        >>> from clausal.atoms import Var
        >>> a, b = Var.get('a', 'b')
        >>> a & b
        And(a, b)
        """
        return And(self, other)

    def __eq__(self, other: object) -> bool:
        """A recursive test for structural equality of `self` and `other`.

        >>> from clausal.atoms import Var
        >>> Var('a') & Var('b') == Var('a') & Var('b')
        True
        >>> Var('a') & Var('b') == Var('b') & Var('a')
        False
        """
        if self is other:
            return True
        if not isinstance(other, Predicate):
            return False
        if self.op is not other.op:
            return False
        if hash(self) != hash(other):
            return False
        return self.args == other.args

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((tuple(str(cls) for cls in self.op.mro()), self.args))
        return self._hash

    @abstractmethod
    def __init__(self, *args: object) -> None:
        """This abstract base class is not supposed to have instances itself.
        Technically this is enforced via this abstract initializer.
        """
        self._hash = None

    def __invert__(self) -> Predicate[α]:
        """Override the :obj:`~ <object.__invert__>` operator to apply
        :class:`.boolean.Not`.

        >>> from clausal.atoms import Var
        >>> ~ Var('a')
        Not(a)
        """
        return Not(self)

    def __or__(self, other: Predicate[α]) -> Predicate[α]:
        """Override the :obj:`| <object.__or__>` operator to apply
        :class:`.boolean.Or`.

        >>> from clausal.atoms import Var
        >>> a, b, c = Var.get('a', 'b', 'c')
        >>> a | b | c
        Or(Or(a, b), c)
        """
        return Or(self, other)

    def __repr__(self) -> str:
        """A representation of `self` that is suitable for use as an input.
        """
        args = ', '.join(repr(arg) for arg in self.args)
        return f'{self.op.__name__}({args})'

    def __str__(self) -> str:
        """Representation used in printing.

        >>> from clausal.atoms import Var
        >>> a, b, c = Var.get('a', 'b', 'c')
        >>> print(Not(And(a, Or(b, Not(c)), T)))
        not (a and (b or not c) and T)
        """
        SYMBOL: Final = {And: 'and', Or: 'or', Not: 'not', _F: 'F', _T: 'T'}
        SPACING: Final = ' '
        match self:
            case And() | Or():
                L = []
                for arg in self.args:
                    arg_as_str = str(arg)
                    if Predicate.is_and(arg) or Predicate.is_or(arg):
                        arg_as_str = f'({arg_as_str})'
                    L.append(arg_as_str)
                return f'{SPACING}{SYMBOL[self.op]}{SPACING}'.join(L)
            case Not():
                arg_as_str = str(self.arg)
                if Predicate.is_and(self.arg) or Predicate.is_or(self.arg):
                    arg_as_str = f'({arg_as_str})'
                return f'{SYMBOL[Not]}{SPACING}{arg_as_str}'
            case _F() | _T():
                return SYMBOL[self.op]
            case _:
                # Atomic predicates are caught by the implementation of the
                # abstract method AtomicPredicate.__str__.
                raise UnsupportedPredicateKind(self)

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        op = self.__class__.__name__
        with p.group(len(op) + 1, op + '(', ')'):
            for idx, arg in enumerate(self.args):
                if idx:
                    p.text(',')
                    p.breakable()
                p.pretty(arg)

    def atoms(self) -> Iterator[α]:
        """An iterator over all occurrences of atomic predicates in `self`.
        Recall that :data:`T <.boolean.T>` and :data:`F <.boolean.F>` are not
        atoms:

        >>> from clausal.atoms import Var
        >>> a, b = Var.get('a', 'b')
        >>> list(Or(And(a, b, T), Not(a)).atoms())
        [a, b, a]
        """
        match self:
            case And() | Or() | Not() | _F() | _T():
                for arg in self.args:
                    yield from arg.atoms()
            case _:
                # Atomic predicates are caught by the final method
                # AtomicPredicate.atoms.
                raise UnsupportedPredicateKind(self)

    def depth(self) -> int:
        """The maximal length of a path from the root to a truth value or an
        atomic predicate. This bounds the recursion depth of the normal form
        computations in :mod:`clausal.bnf`.

        >>> from clausal.atoms import Var
        >>> a, b = Var.get('a', 'b')
        >>> Not(And(a, Or(b, Not(a)))).depth()
        4
        >>> And().depth()
        1
        """
        match self:
            case And() | Or() | Not():
                return max((arg.depth() for arg in self.args), default=0) + 1
            case _F() | _T() | AtomicPredicate():
                return 0
            case _:
                raise UnsupportedPredicateKind(self)

    @staticmethod
    def is_and(f: object) -> TypeIs[And[α]]:
        """Test for a conjunction, narrowing the type of `f` accordingly.

        >>> Predicate.is_and(And())
        True
        >>> Predicate.is_and(Or(And()))
        False
        """
        return isinstance(f, And)

    @staticmethod
    def is_or(f: object) -> TypeIs[Or[α]]:
        """
        >>> Predicate.is_or(Or(T)), Predicate.is_or(T)
        (True, False)
        """
        return isinstance(f, Or)

    def to_nnf(self, negated: bool = False) -> Predicate[α]:
        """Push all negations down to the atoms.

        The result is equivalent to `self`, or to ``Not(self)`` if `negated`
        is :obj:`True`, and does not contain any :class:`Not`. Negations of
        atomic predicates are replaced with their :meth:`negate()
        <.atomic.AtomicPredicate.negate>`, negations of truth values with the
        dual truth value, and negations of :class:`And` and :class:`Or`
        follow De Morgan's laws. The argument order is preserved, and nothing
        is flattened.

        >>> from clausal.atoms import Var
        >>> a, b, c = Var.get('a', 'b', 'c')
        >>> Not(And(a, Not(Or(b, F)), c)).to_nnf()
        Or(!a, Or(b, F), !c)
        >>> Not(Not(a)).to_nnf() == a
        True
        >>> And(a, T).to_nnf(negated=True)
        Or(!a, F)
        """
        return _to_nnf(self, negated)


def _to_nnf(f: object, negated: bool) -> Predicate:
    match f:
        case Not():
            return _to_nnf(f.arg, not negated)
        case And() | Or():
            nnf_op: type[And | Or] = f.dual() if negated else f.op
            return nnf_op(*(_to_nnf(arg, negated) for arg in f.args))
        case _F() | _T():
            return f.dual()() if negated else f
        case AtomicPredicate():
            return f.negate() if negated else f
        case _:
            raise UnsupportedPredicateKind(f)


# The following imports are intentionally late to avoid circularity.
from .atomic import AtomicPredicate
from .boolean import And, Not, Or, _F, _T
from .boolean import T, F  # noqa, used in doctests only
