from __future__ import annotations

from typing import final

from ..predicates import AtomicPredicate


@final
class Var(AtomicPredicate['Var']):
    """A boolean variable, possibly negated. The negation of a variable is
    another instance of :class:`Var`, so that normal forms over variables
    are clause forms in the usual sense of propositional logic.

    >>> a = Var('a')
    >>> a
    a
    >>> a.negate()
    !a
    >>> a.negate().negate() == a
    True
    >>> Var('a', negated=True) == a.negate()
    True
    """

    def __init__(self, name: str, negated: bool = False) -> None:
        if not isinstance(name, str) or not name:
            raise ValueError(f'expecting non-empty string as name; {name!r} is {type(name)}')
        super().__init__()
        self.args = (name, bool(negated))

    def __str__(self) -> str:
        return f'!{self.name}' if self.negated else self.name

    @classmethod
    def get(cls, *names: str) -> tuple[Var, ...]:
        """Obtain several positive variables simultaneously by their names.

        >>> a, b = Var.get('a', 'b')
        >>> b
        b
        """
        return tuple(cls(name) for name in names)

    @property
    def name(self) -> str:
        return self.args[0]

    @property
    def negated(self) -> bool:
        return self.args[1]

    def negate(self) -> Var:
        return Var(self.name, negated=not self.negated)
