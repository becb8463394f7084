from __future__ import annotations

from typing import Final, final, TypeAlias

import sympy

from ..predicates import AtomicPredicate

Term: TypeAlias = sympy.Expr
Variable: TypeAlias = sympy.Symbol


@final
class Compare(AtomicPredicate['Compare']):
    """A comparison of a variable with a constant. Which outcomes of the
    comparison are accepted is specified by three flags, one for each of
    less, equal, and greater. For instance, ``<=`` accepts less and equal.
    Negation inverts all three flags, so that the negation of a comparison
    is again a comparison.

    >>> x = sympy.Symbol('x')
    >>> c = Compare.from_relation(x, '<', 3)
    >>> c
    x < 3
    >>> c.negate()
    x >= 3
    >>> Compare.from_relation('y', '=', 0).negate()
    y != 0

    At least one flag must be set and at least one must be unset. Otherwise
    the comparison is a truth value, for which :data:`T <.predicates.T>` and
    :data:`F <.predicates.F>` should be used.
    """

    RELATIONS: Final[dict[str, tuple[bool, bool, bool]]] = {
        '<': (True, False, False),
        '<=': (True, True, False),
        '==': (False, True, False),
        '=': (False, True, False),
        '!=': (True, False, True),
        '>': (False, False, True),
        '>=': (False, True, True)}

    SYMPY: Final = {
        '<': sympy.Lt, '<=': sympy.Le, '==': sympy.Eq, '!=': sympy.Ne,
        '>': sympy.Gt, '>=': sympy.Ge}

    def __init__(self, variable: Variable | str, value: Term | int | float,
                 accept_less: bool, accept_equal: bool, accept_greater: bool) -> None:
        if isinstance(variable, str):
            variable = sympy.Symbol(variable)
        if not isinstance(variable, Variable):
            raise ValueError(f'{variable!r} is not a variable')
        value_ = sympy.sympify(value)
        if not isinstance(value_, Term) or not value_.is_number:
            raise ValueError(f'{value!r} is not a number')
        flags = (bool(accept_less), bool(accept_equal), bool(accept_greater))
        if all(flags) or not any(flags):
            raise ValueError(f'comparison accepting {flags} is a truth value')
        super().__init__()
        self.args = (variable, value_, *flags)

    def __str__(self) -> str:
        return f'{self.variable} {self.relation} {self.value}'

    @classmethod
    def from_relation(cls, variable: Variable | str, relation: str,
                      value: Term | int | float) -> Compare:
        """Construct a comparison from one of the relation symbols ``<``,
        ``<=``, ``==``, ``=``, ``!=``, ``>``, ``>=``.

        >>> Compare.from_relation('x', '~', 1)
        Traceback (most recent call last):
        ...
        ValueError: unknown relation '~'
        """
        try:
            flags = cls.RELATIONS[relation]
        except KeyError:
            raise ValueError(f'unknown relation {relation!r}') from None
        return cls(variable, value, *flags)

    @property
    def variable(self) -> Variable:
        return self.args[0]

    @property
    def value(self) -> Term:
        return self.args[1]

    @property
    def accept_less(self) -> bool:
        return self.args[2]

    @property
    def accept_equal(self) -> bool:
        return self.args[3]

    @property
    def accept_greater(self) -> bool:
        return self.args[4]

    @property
    def relation(self) -> str:
        """The relation symbol.

        >>> Compare('x', 0, True, False, True).relation
        '!='
        """
        flags = self.args[2:]
        for relation, accepted in self.RELATIONS.items():
            if accepted == flags:
                return relation
        assert False, flags

    def negate(self) -> Compare:
        return Compare(self.variable, self.value, not self.accept_less,
                       not self.accept_equal, not self.accept_greater)

    def to_sympy(self) -> sympy.core.relational.Relational:
        """The equivalent sympy relation.

        >>> Compare.from_relation('x', '>', 2).negate().to_sympy()
        x <= 2
        """
        return self.SYMPY[self.relation](self.variable, self.value)
