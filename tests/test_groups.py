import pytest

from petlib.bn import Bn
from petlib.pack import encode, decode

from cpzk.exceptions import InputTypeError, ValidationError
from cpzk.groups import MultiplicativeGroup, GroupParameters, modp_group


def test_group_default_order():
    group = MultiplicativeGroup(23, 5)
    assert group.order == 22
    assert group.params == GroupParameters(Bn(23), Bn(5), Bn(22))


def test_group_accepts_strings():
    assert MultiplicativeGroup("23", "0x5", "22") == MultiplicativeGroup(23, 5, 22)


def test_group_operations(toy_group):
    assert toy_group.power(6) == 8
    assert toy_group.mod_pow(Bn(2), Bn(6)) == 18
    assert toy_group.mod_pow(Bn(25), Bn(6)) == 18
    assert toy_group.multiply(Bn(8), Bn(18)) == (8 * 18) % 23


def test_sample_scalar_range(toy_group):
    for _ in range(50):
        k = toy_group.sample_scalar()
        assert 0 <= k < 22


def test_sample_scalar_fresh(group):
    assert group.sample_scalar() != group.sample_scalar()


@pytest.mark.parametrize(
    "params",
    [
        (2, 1, None),
        (23, 1, 22),
        (23, 23, 22),
        (23, 5, 0),
        # 5 has order 22 modulo 23, not 11.
        (23, 5, 11),
    ],
)
def test_group_validation(params):
    with pytest.raises(ValidationError):
        MultiplicativeGroup(*params)


def test_group_subgroup_order():
    # 4 is a quadratic residue modulo 23 and has order 11.
    group = MultiplicativeGroup(23, 4, 11)
    assert group.power(11) == 1


def test_group_malformed_parameters():
    with pytest.raises(InputTypeError):
        MultiplicativeGroup("twenty-three", 5)


def test_modp_group(group):
    assert group.modulus.num_bits() == 2048
    assert group.generator == 2
    assert group.order * 2 + 1 == group.modulus
    assert group.power(group.order) == 1


def test_modp_group_unknown():
    with pytest.raises(ValueError):
        modp_group("modp1")


def test_group_from_params(toy_group):
    assert MultiplicativeGroup.from_params(toy_group.params) == toy_group


def test_group_pack(group):
    assert decode(encode(group)) == group
