import random

import pytest

from clausal.atoms import Var
from clausal.predicates import And, F, Not, Or, Predicate, T


@pytest.fixture
def variables() -> tuple[Var, ...]:
    return Var.get('a', 'b', 'c', 'd', 'e', 'f')


def random_predicate(rng: random.Random, atoms: tuple[Var, ...], depth: int) -> Predicate:
    """A random predicate of depth at most `depth`. Operators may have zero,
    one, or more arguments, and truth values occur with low probability.
    """
    if depth == 0 or rng.random() < 0.2:
        choice = rng.random()
        if choice < 0.05:
            return T
        if choice < 0.1:
            return F
        return rng.choice(atoms)
    op = rng.choice([And, Or, Or, And, Not])
    if op is Not:
        return Not(random_predicate(rng, atoms, depth - 1))
    return op(*(random_predicate(rng, atoms, depth - 1) for _ in range(rng.randint(0, 3))))


@pytest.fixture
def random_predicates(variables) -> list[Predicate]:
    rng = random.Random(20241018)
    return [random_predicate(rng, variables[:4], 4) for _ in range(60)]
