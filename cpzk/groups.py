"""
Cyclic subgroups of the multiplicative group of integers modulo p.

A group is specified by a modulus :math:`p`, a generator :math:`g` and the order
:math:`q` of the subgroup generated by :math:`g`. Elements are integers in
:math:`[0, p)` and exponents (scalars) live in :math:`[0, q)`.

Example:

>>> group = MultiplicativeGroup(23, 5)
>>> int(group.order)
22
>>> int(group.power(6))
8
"""
import logging

import attr
from petlib.pack import encode, decode, register_coders

from cpzk.consts import MODP_PRIMES, MODP_GENERATOR
from cpzk.exceptions import ValidationError
from cpzk.utils import ensure_bn


logger = logging.getLogger(__name__)


@attr.s(frozen=True)
class GroupParameters:
    """
    Public parameters of a cyclic multiplicative group.
    """

    modulus = attr.ib()
    generator = attr.ib()
    order = attr.ib()


class MultiplicativeGroup:
    """
    Subgroup of :math:`\\mathbb{Z}_p^*` generated by ``generator``.

    Args:
        modulus: The modulus :math:`p`.
        generator: The generator :math:`g`.
        order: Order :math:`q` of the subgroup generated by :math:`g`. Defaults to
            :math:`p - 1`, the order of the full group when :math:`p` is prime.

    Raises:
        ValidationError: If the parameters cannot describe such a group.
    """

    def __init__(self, modulus, generator, order=None):
        self.modulus = ensure_bn(modulus, "modulus")
        self.generator = ensure_bn(generator, "generator")
        if order is None:
            self.order = self.modulus - 1
        else:
            self.order = ensure_bn(order, "order")
        self.validate()

    def validate(self):
        """
        Check the parameters are consistent.

        The check :math:`g^q = 1 \\bmod p` only shows the order of :math:`g` divides
        :math:`q`. Proving :math:`g` generates the whole subgroup would need the
        factorization of :math:`q`.
        """
        if self.modulus <= 2:
            raise ValidationError("The modulus should be larger than 2")
        if not 1 < self.generator < self.modulus:
            raise ValidationError("The generator should lie in (1, modulus)")
        if self.order <= 0:
            raise ValidationError("The group order should be positive")
        if self.generator.mod_pow(self.order, self.modulus) != 1:
            raise ValidationError(
                "The generator does not generate a subgroup of the given order"
            )

    @classmethod
    def from_params(cls, params):
        return cls(params.modulus, params.generator, params.order)

    @property
    def params(self):
        return GroupParameters(
            modulus=self.modulus, generator=self.generator, order=self.order
        )

    def power(self, exponent):
        """Compute :math:`g^e \\bmod p`."""
        return self.generator.mod_pow(ensure_bn(exponent, "exponent"), self.modulus)

    def mod_pow(self, base, exponent):
        """Compute :math:`b^e \\bmod p`."""
        base = ensure_bn(base, "base") % self.modulus
        return base.mod_pow(ensure_bn(exponent, "exponent"), self.modulus)

    def multiply(self, a, b):
        """Compute :math:`a b \\bmod p`."""
        return ensure_bn(a, "a").mod_mul(ensure_bn(b, "b"), self.modulus)

    def sample_scalar(self):
        """
        Draw a uniformly random scalar in :math:`[0, q)`.

        The randomness comes from the OpenSSL CSPRNG.
        """
        return self.order.random()

    def __eq__(self, other):
        if not isinstance(other, MultiplicativeGroup):
            return NotImplemented
        return self.params == other.params

    def __hash__(self):
        return hash((self.modulus.hex(), self.generator.hex(), self.order.hex()))

    def __repr__(self):
        return "MultiplicativeGroup(modulus={}, generator={}, order={})".format(
            self.modulus, self.generator, self.order
        )


def modp_group(name="modp2048"):
    """
    Build a well-known RFC 3526 group.

    The generator 2 generates the subgroup of quadratic residues of the safe prime
    modulus, so the order is :math:`(p - 1) / 2`.

    Args:
        name: Name of the group, for instance ``"modp2048"``.
    """
    if name not in MODP_PRIMES:
        raise ValueError(
            "Unknown group {!r}. Known groups: {}".format(
                name, ", ".join(sorted(MODP_PRIMES))
            )
        )
    modulus = ensure_bn(MODP_PRIMES[name])
    order = (modulus - 1).int_div(2)
    logger.debug("Loading %s group (%d bits)", name, modulus.num_bits())
    return MultiplicativeGroup(modulus, MODP_GENERATOR, order)


def enc_MultiplicativeGroup(obj):
    return encode([obj.modulus, obj.generator, obj.order])


def dec_MultiplicativeGroup(data):
    return MultiplicativeGroup(*decode(data))


register_coders(MultiplicativeGroup, 10, enc_MultiplicativeGroup, dec_MultiplicativeGroup)
