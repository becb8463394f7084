"""We introduce predicates with Boolean toplevel operators as subclasses of
:class:`.Predicate`.
"""
from __future__ import annotations

from typing import final, Optional

from .atomic import AtomicPredicate
from .formula import α, Predicate


class BooleanPredicate(Predicate[α]):
    r"""A class whose instances are Boolean predicates in the sense that their
    toplevel operator is one of the Boolean operators :math:`\top`,
    :math:`\bot`, :math:`\lnot`, :math:`\wedge`, :math:`\vee`.
    """
    pass


@final
class And(BooleanPredicate[α]):
    """A class whose instances are conjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\\wedge`.

    The arguments are kept exactly as given. In particular, nested
    conjunctions are not flattened, and there may be zero or one arguments:

    >>> from clausal.atoms import Var
    >>> a, b, c = Var.get('a', 'b', 'c')
    >>> And()
    And()
    >>> And(a)
    And(a)
    >>> And(a, And(b, c))
    And(a, And(b, c))

    .. seealso::
        * :meth:`&, __and__() <.formula.Predicate.__and__>` -- \
            infix notation of :class:`And`
    """

    def __init__(self, *args: Predicate[α]) -> None:
        super().__init__()
        self.args = args

    @classmethod
    def dual(cls) -> type[Or[α]]:
        r"""A class method yielding the class :class:`Or`, which implements
        the dual operator :math:`\vee` of :math:`\wedge`.
        """
        return Or

    @classmethod
    def definite_element(cls) -> _F[α]:
        r"""A class method yielding :data:`F`. A conjunction with an argument
        :data:`F` is equivalent to :data:`F`.
        """
        return _F()

    @classmethod
    def neutral_element(cls) -> _T[α]:
        r"""A class method yielding :data:`T`. Arguments :data:`T` of a
        conjunction can be dropped, and ``And()`` is equivalent to :data:`T`.
        """
        return _T()


@final
class Or(BooleanPredicate[α]):
    """A class whose instances are disjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\\vee`.

    >>> from clausal.atoms import Var
    >>> a, b = Var.get('a', 'b')
    >>> Or()
    Or()
    >>> Or(a, Not(b))
    Or(a, Not(b))

    .. seealso::
        * :meth:`|, __or__() <.formula.Predicate.__or__>` -- \
            infix notation of :class:`Or`
    """

    def __init__(self, *args: Predicate[α]) -> None:
        super().__init__()
        self.args = args

    @classmethod
    def dual(cls) -> type[And[α]]:
        r"""A class method yielding the class :class:`And`, which implements
        the dual operator :math:`\wedge` of :math:`\vee`.
        """
        return And

    @classmethod
    def definite_element(cls) -> _T[α]:
        return _T()

    @classmethod
    def neutral_element(cls) -> _F[α]:
        return _F()


@final
class Not(BooleanPredicate[α]):
    """A class whose instances are negated predicates in the sense that their
    toplevel operator is the Boolean operator :math:`\\neg`.

    >>> from clausal.atoms import Var
    >>> Not(Var('a'))
    Not(a)

    .. seealso::
        * :meth:`~, __invert__() <.formula.Predicate.__invert__>` -- \
            short notation of :class:`Not`
    """

    def __init__(self, arg: Predicate[α]) -> None:
        super().__init__()
        self.args = (arg, )

    @property
    def arg(self) -> Predicate[α]:
        """The one argument of the operator :math:`\\neg`.
        """
        return self.args[0]


@final
class _T(BooleanPredicate[α]):
    """A singleton class whose sole instance represents the constant
    predicate that is always true.

    >>> _T()
    T
    >>> _T() is _T()
    True
    """

    # This is a quite basic implementation of a singleton class. It does not
    # support subclassing. We do not use a module because we need _T to be a
    # subclass itself.

    _instance: Optional[_T[AtomicPredicate]] = None

    def __init__(self) -> None:
        super().__init__()
        self.args = ()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'T'

    @classmethod
    def dual(cls) -> type[_F[α]]:
        return _F


T: _T[AtomicPredicate] = _T()
"""Support use as a constant without parentheses.

>>> T is _T()
True
"""


@final
class _F(BooleanPredicate[α]):
    """A singleton class whose sole instance represents the constant
    predicate that is always false.

    >>> _F()
    F
    >>> _F() is _F()
    True
    """

    _instance: Optional[_F[AtomicPredicate]] = None

    def __init__(self) -> None:
        super().__init__()
        self.args = ()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'F'

    @classmethod
    def dual(cls) -> type[_T[α]]:
        return _T


F: _F[AtomicPredicate] = _F()
"""Support use as a constant without parentheses.

>>> F is _F()
True
"""
