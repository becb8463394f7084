import io
import logging

import pytest

from clausal.bnf import (
    ClauseForm, Options, append_cnf_disjunction, append_dnf_conjunction,
    cnf_to_predicate, dnf_to_predicate, logger, merge_and_clean_cnf_disjunctions,
    merge_and_clean_dnf_conjunctions, push_negations_to_atoms, stream_handler, to_cnf,
    to_dnf)
from clausal.predicates import (
    And, F, Not, Or, Predicate, T, UnsupportedPredicateKind)
from clausal.support.containers import ClauseAccumulator


def clauses(*literal_sets):
    return {frozenset(literals) for literals in literal_sets}


@pytest.fixture
def log_stream():
    stream = io.StringIO()
    previous = stream_handler.setStream(stream)
    yield stream
    stream_handler.setStream(previous)


class Opaque(Predicate):
    """A predicate outside the closed set of node kinds."""

    def __init__(self) -> None:
        super().__init__()
        self.args = ()


class TestScenarios:

    def test_dnf_of_disjunction_of_conjunctions(self, variables):
        a, b, c, d, e, f = variables
        result = to_dnf(Or(And(a, b, c), And(Not(d), e), f))
        assert result == clauses({a, b, c}, {d.negate(), e}, {f})

    def test_cnf_distributes_or_over_and(self, variables):
        a, b, c, d, _, _ = variables
        result = to_cnf(Or(And(a, b), And(c, d)))
        assert result == clauses({a, c}, {a, d}, {b, c}, {b, d})

    def test_dnf_of_negated_conjunction(self, variables):
        a, b, *_ = variables
        assert to_dnf(Not(And(a, Not(b)))) == clauses({a.negate()}, {b})

    def test_cnf_absorbs_true(self, variables):
        a, b, *_ = variables
        assert to_cnf(And(Or(a, b), T)) == clauses({a, b})

    def test_dnf_absorbs_false(self, variables):
        a, b, *_ = variables
        assert to_dnf(And(Or(a, b), F)) == set()

    def test_unsupported_kind(self):
        with pytest.raises(UnsupportedPredicateKind):
            to_dnf(Opaque())


class TestConstants:

    def test_dnf_of_constants(self):
        assert to_dnf(T) == clauses({T})
        assert to_dnf(F) == clauses({F})

    def test_cnf_of_constants(self):
        assert to_cnf(T) == clauses({T})
        assert to_cnf(F) == clauses({F})

    def test_cnf_or_with_true_is_dropped(self, variables):
        a, *_ = variables
        assert to_cnf(Or(a, T)) == set()

    def test_dnf_or_with_true(self, variables):
        a, *_ = variables
        assert to_dnf(Or(a, T)) == clauses({a}, {T})

    def test_conjunction_of_trues_is_not_empty(self):
        # Dropping all T from {T} must not turn the conjunction into F.
        assert to_dnf(And(T, T)) == clauses({T})
        assert to_cnf(Or(F, F)) == clauses({F})
        assert to_dnf(Or(F, F)) == set()

    def test_disjunction_with_false(self, variables):
        a, b, *_ = variables
        assert to_cnf(Or(And(a, b), F)) == clauses({a}, {b})
        assert to_dnf(Or(And(a, b), F)) == clauses({a, b})

    def test_disjunction_with_true(self, variables):
        a, b, *_ = variables
        assert to_cnf(Or(And(a, b), T)) == set()
        assert to_dnf(Or(And(a, b), T)) == clauses({a, b}, {T})

    def test_empty_operators(self):
        assert to_dnf(And()) == clauses({T})
        assert to_cnf(Or()) == clauses({F})
        assert to_dnf(Or()) == set()
        assert to_cnf(And()) == set()

    def test_negated_constants(self, variables):
        a, *_ = variables
        assert to_dnf(Not(T)) == clauses({F})
        assert to_cnf(Not(F)) == clauses({T})
        assert to_dnf(Or(a, Not(T))) == clauses({a})
        assert to_dnf(Not(F)) == clauses({T})


class TestNegation:

    def test_double_negation(self, variables):
        a, *_ = variables
        assert to_dnf(Not(Not(a))) == to_dnf(a)
        assert push_negations_to_atoms(Not(Not(a))) == a

    def test_de_morgan(self, variables):
        a, b, *_ = variables
        assert push_negations_to_atoms(Not(And(a, b))) == Or(a.negate(), b.negate())
        assert push_negations_to_atoms(Not(Or(a, b))) == And(a.negate(), b.negate())

    def test_negated_flag(self, variables):
        a, b, *_ = variables
        assert push_negations_to_atoms(And(a, Not(b)), negated=True) == Or(a.negate(), b)

    def test_no_not_remains(self, variables):
        a, b, c, *_ = variables
        f = Not(And(Or(a, Not(b)), Not(Or(c, T))))
        assert 'Not' not in repr(push_negations_to_atoms(f))

    def test_input_is_not_mutated(self, variables):
        a, b, *_ = variables
        f = Not(And(a, Or(b, F)))
        g = Not(And(a, Or(b, F)))
        to_cnf(f)
        to_dnf(f)
        assert f == g


class TestUnsupported:

    def test_nested_node(self, variables):
        a, *_ = variables
        node = Opaque()
        with pytest.raises(UnsupportedPredicateKind) as exc_info:
            to_cnf(And(a, Or(a, Not(node))))
        assert exc_info.value.node is node

    def test_foreign_object(self, variables):
        a, *_ = variables
        with pytest.raises(UnsupportedPredicateKind) as exc_info:
            to_dnf(Or(a, 'b'))
        assert exc_info.value.node == 'b'

    def test_push_negations(self):
        with pytest.raises(UnsupportedPredicateKind):
            push_negations_to_atoms(Not(Opaque()))
        with pytest.raises(UnsupportedPredicateKind):
            push_negations_to_atoms(42)


class TestMergeAndAppend:

    def test_merge_dnf(self, variables):
        a, b, *_ = variables
        assert merge_and_clean_dnf_conjunctions(
            frozenset({a, T}), frozenset({b})) == frozenset({a, b})
        assert merge_and_clean_dnf_conjunctions(
            frozenset({a}), frozenset({F, b})) == frozenset({F})
        assert merge_and_clean_dnf_conjunctions(
            frozenset({T}), frozenset({T})) == frozenset({T})

    def test_merge_cnf(self, variables):
        a, b, *_ = variables
        assert merge_and_clean_cnf_disjunctions(
            frozenset({a, F}), frozenset({b})) == frozenset({a, b})
        assert merge_and_clean_cnf_disjunctions(
            frozenset({a}), frozenset({T})) == frozenset({T})
        assert merge_and_clean_cnf_disjunctions(
            frozenset({F}), frozenset({F})) == frozenset({F})

    def test_append_dnf(self, variables):
        a, b, *_ = variables
        result: ClauseAccumulator = ClauseAccumulator()
        append_dnf_conjunction(result, frozenset({F}))
        append_dnf_conjunction(result, frozenset({a}))
        append_dnf_conjunction(result, frozenset({a, b}))
        assert result.to_set() == clauses({a}, {a, b})

    def test_append_cnf_with_subsumption(self, variables):
        a, b, c, *_ = variables
        result: ClauseAccumulator = ClauseAccumulator()
        append_cnf_disjunction(result, frozenset({T}), subsumption=True)
        append_cnf_disjunction(result, frozenset({a, b, c}), subsumption=True)
        append_cnf_disjunction(result, frozenset({c, b}), subsumption=True)
        append_cnf_disjunction(result, frozenset({a, b, c}), subsumption=True)
        assert result.to_set() == clauses({b, c})


class TestSubsumption:

    def test_off_by_default(self, variables):
        a, b, c, *_ = variables
        f = Or(And(a, b), And(a, b, c))
        assert to_dnf(f) == clauses({a, b}, {a, b, c})

    def test_dnf(self, variables):
        a, b, c, *_ = variables
        f = Or(And(a, b, c), And(a, b))
        assert to_dnf(f, subsumption=True) == clauses({a, b})

    def test_cnf(self, variables):
        a, b, c, d, *_ = variables
        f = And(Or(a, b), Or(c, d), Or(a, b, c))
        assert to_cnf(f, subsumption=True) == clauses({a, b}, {c, d})

    def test_no_proper_supersets_remain(self, random_predicates):
        for f in random_predicates:
            for result in (to_dnf(f, subsumption=True), to_cnf(f, subsumption=True)):
                assert not any(c1 < c2 for c1 in result for c2 in result)


class TestOptions:

    def test_unknown_option(self, variables):
        with pytest.raises(TypeError):
            to_dnf(variables[0], minimize=True)

    def test_log_level_is_restored(self, variables):
        a, b, *_ = variables
        level = logger.level
        to_cnf(Or(And(a, b), a), log_level=logging.DEBUG)
        assert logger.level == level

    def test_level_set_elsewhere_is_kept(self, variables, monkeypatch):
        a, b, *_ = variables
        clause_form_ = ClauseForm._clause_form

        def set_level_meanwhile(self, f, gand):
            logger.setLevel(logging.INFO)
            return clause_form_(self, f, gand)

        monkeypatch.setattr(ClauseForm, '_clause_form', set_level_meanwhile)
        level = logger.level
        try:
            to_dnf(And(a, b))
            assert logger.level == logging.INFO
        finally:
            logger.setLevel(level)

    def test_log_level_is_restored_on_error(self):
        level = logger.level
        with pytest.raises(UnsupportedPredicateKind):
            to_cnf(Opaque(), log_level=logging.DEBUG)
        assert logger.level == level

    def test_clause_form(self, variables):
        a, b, *_ = variables
        clause_form: ClauseForm = ClauseForm(Options(subsumption=True))
        assert clause_form.dnf(And(Or(a, b), a)) == clauses({a})
        assert clause_form.time_total is not None
        assert clause_form.time_total >= 0.0
        assert clause_form(Or(a, b), Or) == clause_form.cnf(Or(a, b))

    def test_logging(self, variables, log_stream):
        a, b, c, d, *_ = variables
        to_dnf(And(Or(a, b), Or(c, d)), log_level=logging.DEBUG, log_rate=0.0)
        err = log_stream.getvalue()
        assert 'clausal.bnf - INFO' in err
        assert 'DNF has 4 clauses' in err
        assert 'clausal.bnf.fold - DEBUG' in err
        assert '2 x 2 clauses merged into 4' in err

    def test_quiet_by_default(self, variables, log_stream):
        a, b, *_ = variables
        to_dnf(And(Or(a, b), a))
        assert log_stream.getvalue() == ''


class TestReconstruction:

    def test_dnf_to_predicate(self, variables):
        a, b, c, *_ = variables
        assert dnf_to_predicate(clauses({c, a.negate()}, {b})) == Or(And(a.negate(), c), And(b))

    def test_cnf_to_predicate(self, variables):
        a, b, *_ = variables
        assert cnf_to_predicate(set()) == And()
        assert cnf_to_predicate(clauses({b, a})) == And(Or(a, b))
