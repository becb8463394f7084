"""The abstract class :class:`AtomicPredicate` specifies the interface that
concrete atomic predicates have to provide to the normal form computations.
Atoms are otherwise opaque: :mod:`clausal.bnf` never looks into their
arguments and never evaluates them.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import final, Iterator

from IPython.lib import pretty

from .formula import α, Predicate


class AtomicPredicate(Predicate[α]):
    """This abstract class specifies an interface via the definition of
    abstract methods on atomic predicates.

    Subclasses store their data in :attr:`args <.formula.Predicate.args>`,
    which must be hashable, because equality and hashing of predicates are
    structural.

    .. seealso::
      Derived classes in :mod:`clausal.atoms`: :class:`.Var` for boolean
      variables and :class:`.Compare` for comparisons.
    """

    @abstractmethod
    def __str__(self) -> str:
        """Representation of this atomic predicate used in printing.
        """
        #  Overloading here breaks an infinite recursion in the inherited
        #  method.
        ...

    def __repr__(self) -> str:
        return str(self)

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        p.text(str(self))

    @final
    def atoms(self: α) -> Iterator[α]:
        yield self

    @abstractmethod
    def negate(self) -> α:
        """An atomic predicate equivalent to ``Not(self)``. This must be an
        involution, i.e., ``self.negate().negate() == self``.
        """
        ...
