"""This module :mod:`clausal.bnf` computes boolean normal forms in clause
form. A clause is a :class:`frozenset` of atomic predicates and truth values,
and a normal form is a :class:`set` of clauses:

* In a disjunctive normal form (DNF) the clauses are conjunctions, which are
  combined by a disjunction.

* In a conjunctive normal form (CNF) the clauses are disjunctions, which are
  combined by a conjunction.

>>> from clausal.atoms import Var
>>> a, b, c, d, e, f = Var.get('a', 'b', 'c', 'd', 'e', 'f')
>>> dnf = to_dnf(Or(And(a, b, c), And(Not(d), e), f))
>>> dnf_to_predicate(dnf)
Or(And(!d, e), And(a, b, c), And(f))
>>> cnf = to_cnf(Or(And(a, b), And(c, d)))
>>> cnf_to_predicate(cnf)
And(Or(a, c), Or(a, d), Or(b, c), Or(b, d))

Negations are pushed down to the atoms first, using :meth:`negate()
<.predicates.atomic.AtomicPredicate.negate>`:

>>> dnf_to_predicate(to_dnf(Not(And(a, Not(b)))))
Or(And(!a), And(b))

Truth values are absorbed where possible:

>>> to_cnf(And(Or(a, b), T)) == {frozenset({a, b})}
True
>>> to_dnf(And(Or(a, b), F))
set()

An empty :class:`set` of clauses is the neutral element of the outer
operator, i.e., :data:`F <.predicates.F>` for a DNF and :data:`T
<.predicates.T>` for a CNF. Clauses are never empty.

The distribution of :class:`And` over :class:`Or` (or vice versa) can
produce exponentially many clauses. This is inherent to exact normal forms,
and no truncation takes place. Optionally, clauses that are proper supersets
of other clauses can be pruned:

>>> to_dnf(Or(And(a, b), And(a, b, c))) == {frozenset({a, b}), frozenset({a, b, c})}
True
>>> to_dnf(Or(And(a, b), And(a, b, c)), subsumption=True) == {frozenset({a, b})}
True
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import time
from typing import Generic, Iterable, Optional, TypeAlias

from .predicates import (
    And, AtomicPredicate, _F, Not, Or, Predicate, _T, UnsupportedPredicateKind)
from .predicates import T, F  # noqa, used in doctests only
from .predicates.formula import α
from .support.containers import ClauseAccumulator
from .support.logging import DeltaTimeFormatter, RateFilter, Timer

# Create logger
delta_time_formatter = DeltaTimeFormatter(
    '%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s')

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(delta_time_formatter)

logger = logging.getLogger(__name__)
logger.propagate = False
logger.addHandler(stream_handler)
logger.setLevel(logging.WARNING)

# Create logger for the distribution loops, which inherits level and handler
rate_filter = RateFilter()

fold_logger = logging.getLogger(f'{__name__}.fold')
fold_logger.addFilter(rate_filter)

Clause: TypeAlias = frozenset[Predicate]
"""A clause is a set of atomic predicates and truth values. Whether it
is a conjunction or a disjunction depends on the normal form it belongs to.
"""


@dataclass
class Options:
    """This class holds options that can be provided to :func:`.to_dnf`,
    :func:`.to_cnf`, or :class:`.ClauseForm`.
    """

    subsumption: bool = False
    """Omit clauses that are proper supersets of other clauses. A clause
    that is a superset of another one is redundant in both a DNF and a CNF.
    """

    log_level: Optional[int] = None
    """If not :obj:`None`, the `log_level` of :data:`.logger` during the
    computation. The level is restored afterwards.
    """

    log_rate: float = 0.5
    """The minimal timespan (in s) between two log outputs of
    :data:`.fold_logger` within the distribution loops.
    """


@dataclass
class ClauseForm(Generic[α]):
    """Clause form computation.

    >>> from clausal.atoms import Var
    >>> a, b = Var.get('a', 'b')
    >>> clause_form: ClauseForm = ClauseForm(Options(subsumption=True))
    >>> clause_form.cnf(Not(Or(a, Not(b)))) == {frozenset({a.negate()}), frozenset({b})}
    True
    >>> clause_form.time_total is not None
    True
    """

    options: Options = field(default_factory=Options)

    time_total: Optional[float] = None
    """The total time spent in the last call of :meth:`.__call__`.
    """

    def __call__(self, f: Predicate[α], gand: type[And[α] | Or[α]]) -> set[Clause]:
        """Compute a normal form of `f`, where `gand` is the operator
        combining the atoms of each clause. For `gand` == :class:`And` the
        result is a DNF, and for `gand` == :class:`Or` it is a CNF.
        """
        timer = Timer()
        delta_time_formatter.set_reference_time(time.time())
        rate_filter.set_rate(self.options.log_rate)
        save_level = logger.level
        if self.options.log_level is not None:
            logger.setLevel(self.options.log_level)
        try:
            logger.info(f'{self.options}')
            clauses = self._clause_form(f, gand)
            logger.info(f'{_name(gand)} has {len(clauses)} clauses')
        finally:
            if self.options.log_level is not None:
                logger.setLevel(save_level)
        self.time_total = timer.get()
        return clauses

    def cnf(self, f: Predicate[α]) -> set[Clause]:
        """Compute a conjunctive normal form.
        """
        return self(f, Or)

    def dnf(self, f: Predicate[α]) -> set[Clause]:
        """Compute a disjunctive normal form.
        """
        return self(f, And)

    def _clause_form(self, f: object, gand: type[And[α] | Or[α]]) -> set[Clause]:
        match f:
            case Not():
                return self._clause_form(push_negations_to_atoms(f.arg, True), gand)
            case And() | Or() if f.op is not gand:
                # The outer operator: join the clauses of the arguments.
                result: ClauseAccumulator[Predicate] = ClauseAccumulator()
                for arg in f.args:
                    for clause in self._clause_form(arg, gand):
                        append_clause(result, clause, gand, self.options.subsumption)
                return result.to_set()
            case And() | Or():
                # The clause operator: distribute over the outer operator.
                if not f.args:
                    return {frozenset({gand.neutral_element()})}
                prev = self._clause_form(f.args[0], gand)
                for arg in f.args[1:]:
                    next_ = self._clause_form(arg, gand)
                    result = ClauseAccumulator()
                    for clause1 in prev:
                        for clause2 in next_:
                            append_clause(result, merge_clauses(clause1, clause2, gand),
                                          gand, self.options.subsumption)
                    if fold_logger.isEnabledFor(logging.DEBUG):
                        fold_logger.debug(f'{_name(gand)}: {len(prev)} x {len(next_)} '
                                          f'clauses merged into {len(result)}')
                    prev = result.to_set()
                return prev
            case AtomicPredicate() | _T() | _F():
                return {frozenset({f})}
            case _:
                raise UnsupportedPredicateKind(f)


def _name(gand: type[And | Or]) -> str:
    return 'DNF' if gand is And else 'CNF'


def push_negations_to_atoms(f: object, negated: bool = False) -> Predicate:
    """Push negations down to the atoms of `f`. If `negated` is :obj:`True`,
    the result is equivalent to ``Not(f)``, else to `f`. The result does not
    contain :class:`Not`.

    >>> from clausal.atoms import Var
    >>> a, b = Var.get('a', 'b')
    >>> push_negations_to_atoms(Or(a, Not(b)), True)
    And(!a, b)
    >>> push_negations_to_atoms(None)
    Traceback (most recent call last):
    ...
    clausal.predicates.formula.UnsupportedPredicateKind: unsupported predicate kind NoneType: None

    .. seealso::
        :meth:`.Predicate.to_nnf` -- the underlying method
    """
    if not isinstance(f, Predicate):
        raise UnsupportedPredicateKind(f)
    return f.to_nnf(negated)


def merge_clauses(clause1: Clause, clause2: Clause, gand: type[And | Or]) -> Clause:
    """Combine two clauses with `gand`. The result contains only the definite
    element of `gand` if that occurs in either clause. Otherwise, occurrences
    of the neutral element are dropped unless nothing else remains.
    """
    clause = clause1 | clause2
    definite = gand.definite_element()
    if definite in clause:
        return frozenset({definite})
    neutral = gand.neutral_element()
    if neutral in clause and len(clause) > 1:
        clause = clause - {neutral}
    return clause


def append_clause(result: ClauseAccumulator[Predicate], clause: Clause,
                  gand: type[And | Or], subsumption: bool = False) -> None:
    """Add `clause`, whose atoms are combined with `gand`, to `result`,
    where clauses are combined with the dual of `gand`. Clauses that are
    equivalent to the neutral element of the dual are dropped. With
    `subsumption`, `clause` is dropped if `result` contains a proper subset
    of it, and proper supersets of `clause` are removed from `result`.
    """
    definite = gand.definite_element()
    if clause and all(atom is definite for atom in clause):
        return
    if subsumption:
        if result.has_subset_of(clause):
            return
        result.remove_supersets_of(clause)
    result.add(clause)


def merge_and_clean_dnf_conjunctions(conjunction1: Clause, conjunction2: Clause) -> Clause:
    """Combine two conjunctions with :class:`And`.

    >>> from clausal.atoms import Var
    >>> a, b = Var.get('a', 'b')
    >>> merge_and_clean_dnf_conjunctions(frozenset({a, T}), frozenset({b})) == frozenset({a, b})
    True
    >>> merge_and_clean_dnf_conjunctions(frozenset({a}), frozenset({F}))
    frozenset({F})
    >>> merge_and_clean_dnf_conjunctions(frozenset({T}), frozenset({T}))
    frozenset({T})
    """
    return merge_clauses(conjunction1, conjunction2, And)


def merge_and_clean_cnf_disjunctions(disjunction1: Clause, disjunction2: Clause) -> Clause:
    """Combine two disjunctions with :class:`Or`.

    >>> from clausal.atoms import Var
    >>> a, b = Var.get('a', 'b')
    >>> merge_and_clean_cnf_disjunctions(frozenset({a, F}), frozenset({b})) == frozenset({a, b})
    True
    >>> merge_and_clean_cnf_disjunctions(frozenset({a}), frozenset({T}))
    frozenset({T})
    """
    return merge_clauses(disjunction1, disjunction2, Or)


def append_dnf_conjunction(result: ClauseAccumulator[Predicate], conjunction: Clause,
                           subsumption: bool = False) -> None:
    """Add a conjunction to the DNF `result`, dropping conjunctions
    consisting of :data:`F <.predicates.F>` only.

    >>> from clausal.atoms import Var
    >>> a, b = Var.get('a', 'b')
    >>> result: ClauseAccumulator[Predicate] = ClauseAccumulator()
    >>> append_dnf_conjunction(result, frozenset({F}))
    >>> append_dnf_conjunction(result, frozenset({a, b}), subsumption=True)
    >>> append_dnf_conjunction(result, frozenset({a}), subsumption=True)
    >>> result.to_set()
    {frozenset({a})}
    """
    append_clause(result, conjunction, And, subsumption)


def append_cnf_disjunction(result: ClauseAccumulator[Predicate], disjunction: Clause,
                           subsumption: bool = False) -> None:
    """Add a disjunction to the CNF `result`, dropping disjunctions
    consisting of :data:`T <.predicates.T>` only.

    >>> from clausal.atoms import Var
    >>> result: ClauseAccumulator[Predicate] = ClauseAccumulator()
    >>> append_cnf_disjunction(result, frozenset({T}))
    >>> len(result)
    0
    """
    append_clause(result, disjunction, Or, subsumption)


def to_dnf(f: Predicate[α], **options) -> set[Clause]:
    """Compute a disjunctive normal form of `f` in clause form.

    :param f:
      The input predicate.

    :param `**options`:
      Keyword arguments with keywords corresponding to attributes of
      :class:`.Options`.

    :returns:
      A set of conjunctions, which are combined with :class:`Or`.

    >>> from clausal.atoms import Var
    >>> a, = Var.get('a')
    >>> to_dnf(a)
    {frozenset({a})}
    >>> to_dnf(And())
    {frozenset({T})}
    """
    clause_form: ClauseForm[α] = ClauseForm(Options(**options))
    return clause_form.dnf(f)


def to_cnf(f: Predicate[α], **options) -> set[Clause]:
    """Compute a conjunctive normal form of `f` in clause form.

    :param f:
      The input predicate.

    :param `**options`:
      Keyword arguments with keywords corresponding to attributes of
      :class:`.Options`.

    :returns:
      A set of disjunctions, which are combined with :class:`And`.

    >>> from clausal.atoms import Var
    >>> to_cnf(Not(Var('a')))
    {frozenset({!a})}
    >>> to_cnf(Or())
    {frozenset({F})}
    """
    clause_form: ClauseForm[α] = ClauseForm(Options(**options))
    return clause_form.cnf(f)


def clauses_to_predicate(clauses: Iterable[Clause], gand: type[And | Or]) -> Predicate:
    """Reconstruct a predicate from clauses whose atoms are combined with
    `gand`. Clauses and their atoms are sorted by their string
    representations, so that the result does not depend on the iteration
    order of the sets.
    """
    args = (gand(*sorted(clause, key=str))
            for clause in sorted(clauses, key=lambda clause: sorted(map(str, clause))))
    return gand.dual()(*args)


def dnf_to_predicate(clauses: Iterable[Clause]) -> Predicate:
    """A disjunction of conjunctions equivalent to the DNF `clauses`.

    >>> dnf_to_predicate(set())
    Or()
    """
    return clauses_to_predicate(clauses, And)


def cnf_to_predicate(clauses: Iterable[Clause]) -> Predicate:
    """A conjunction of disjunctions equivalent to the CNF `clauses`.
    """
    return clauses_to_predicate(clauses, Or)
