"""This module :mod:`clausal.abstraction` maps predicates and normal forms to
boolean expressions of the python package `PyEDA
<https://pyeda.readthedocs.io/en/latest/index.html>`_ and back. Atomic
predicates are replaced with boolean variables, where an atom and its
:meth:`negate() <.predicates.atomic.AtomicPredicate.negate>` are mapped to
complementary literals of the same variable. This is the usual *boolean
abstraction*: it forgets everything about the atoms except their negation.

>>> from clausal.atoms import Var
>>> from clausal.bnf import to_cnf
>>> a, b = Var.get('a', 'b')
>>> f = Not(And(a, Not(b)))
>>> abstraction = BooleanAbstraction()
>>> g = abstraction.clauses_to_pyeda(to_cnf(f), Or)
>>> g.equivalent(abstraction.to_pyeda(f))
True
>>> abstraction.from_pyeda(abstraction.to_pyeda(b.negate()))
!b
"""

from dataclasses import dataclass, field
from pyeda.boolalg import expr  # type: ignore
from typing import Callable, ClassVar, Generic, Iterable

from .predicates import And, AtomicPredicate, _F, Not, Or, Predicate, _T, UnsupportedPredicateKind
from .predicates.formula import α


@dataclass
class BooleanAbstraction(Generic[α]):
    """Boolean abstraction of predicates. One instance keeps one mapping
    between atoms and PyEDA variables, so that predicates converted with the
    same instance share their variables.
    """

    _to_pyeda_op: ClassVar[dict[type[Predicate], Callable[..., expr.Expression]]] = {
        And: expr.And,
        Or: expr.Or}

    _index: int = 0
    _atoms_to_pyeda: dict[AtomicPredicate, expr.Variable] = field(default_factory=dict)
    _pyeda_to_atoms: dict[expr.Variable, AtomicPredicate] = field(default_factory=dict)

    def clauses_to_pyeda(self, clauses: Iterable[frozenset[Predicate[α]]],
                         gand: type[And[α] | Or[α]]) -> expr.Expression:
        """Convert a normal form in clause form, where the atoms of each
        clause are combined with `gand`. For `gand` == :class:`And` this
        converts a DNF, and for `gand` == :class:`Or` a CNF.
        """
        return self._apply(gand.dual(), [self._apply(gand, [self.to_pyeda(atom) for atom in clause])
                                         for clause in clauses])

    def _apply(self, op: type[And[α] | Or[α]], args: list[expr.Expression]) -> expr.Expression:
        if not args:
            return self.to_pyeda(op.neutral_element())
        return self._to_pyeda_op[op](*args)

    def from_pyeda(self, f: expr.Expression) -> Predicate[α]:
        """Convert back a PyEDA expression all of whose variables have been
        introduced by :meth:`to_pyeda` of this instance.
        """
        match f:
            case expr.Variable():
                return self._pyeda_to_atoms[f]
            case expr.Complement():
                # Complement of a variable is different from logical Not, and
                # it is not covered by our dictionary
                return self._pyeda_to_atoms[~ f].negate()
            case expr.NotOp(x=x):
                return Not(self.from_pyeda(x))
            case expr.AndOp(xs=xs):
                return And(*(self.from_pyeda(x) for x in xs))
            case expr.OrOp(xs=xs):
                return Or(*(self.from_pyeda(x) for x in xs))
            case expr._Zero():
                return _F()
            case expr._One():
                return _T()
            case _:
                raise ValueError(f'unexpected PyEDA expression {f!r}')

    def to_pyeda(self, f: object) -> expr.Expression:
        """Convert a predicate.
        """
        match f:
            case AtomicPredicate():
                if f in self._atoms_to_pyeda:
                    return self._atoms_to_pyeda[f]
                nf = f.negate()
                if nf in self._atoms_to_pyeda:
                    return expr.Not(self._atoms_to_pyeda[nf])
                new_exprvar = expr.exprvar('a', self._index)
                self._index += 1
                self._atoms_to_pyeda[f] = new_exprvar
                self._pyeda_to_atoms[new_exprvar] = f
                return new_exprvar
            case And() | Or():
                return self._apply(f.op, [self.to_pyeda(arg) for arg in f.args])
            case Not():
                return expr.Not(self.to_pyeda(f.arg))
            case _T():
                return expr.expr(1)
            case _F():
                return expr.expr(0)
            case _:
                raise UnsupportedPredicateKind(f)
