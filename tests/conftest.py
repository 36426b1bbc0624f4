import pytest

from cpzk.groups import MultiplicativeGroup, modp_group
from cpzk.chaum_pedersen import ChaumPedersen, FromEngine


@pytest.fixture(scope="session")
def group():
    return modp_group("modp2048")


@pytest.fixture
def toy_group():
    return MultiplicativeGroup(23, 5, 22)


@pytest.fixture
def cp(group):
    return ChaumPedersen(FromEngine(group))


@pytest.fixture
def statement(group):
    """A true statement x = g^r, m = n^r, with its secret r."""
    r = group.sample_scalar()
    n = group.power(group.sample_scalar())
    x = group.power(r)
    m = group.mod_pow(n, r)
    return r, x, n, m
