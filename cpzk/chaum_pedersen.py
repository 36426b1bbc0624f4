r"""
Chaum-Pedersen proofs bound to a single group.

.. math::
    PK\{ (r): x = g^r \land m = n^r \}

Example usage, with the group parameters given explicitly:

>>> cp = ChaumPedersen(FromParameters(modulus=23, generator=5))
>>> proof = cp.prove(6, 8, 2, 18)
>>> cp.verify(proof, 8, 2, 18)
True
"""
import attr

from cpzk.consts import DEFAULT_HASH
from cpzk.exceptions import MissingParameterError
from cpzk.groups import MultiplicativeGroup
from cpzk.prover import ChaumPedersenProver
from cpzk.verifier import ChaumPedersenVerifier
from cpzk.utils import ensure_bn


PROVIDER_ATTRIBUTES = ("modulus", "generator", "order")


@attr.s(frozen=True)
class FromEngine:
    """
    Reuse an existing group provider.
    """

    provider = attr.ib()


@attr.s(frozen=True)
class FromParameters:
    """
    Build a :py:class:`cpzk.groups.MultiplicativeGroup` from raw parameters.
    """

    modulus = attr.ib()
    generator = attr.ib()
    order = attr.ib(default=None)


def resolve_group(source):
    """
    Resolve the group provider described by a construction parameter.

    Args:
        source: :py:class:`FromEngine` or :py:class:`FromParameters`.

    Raises:
        MissingParameterError: If no modulus and generator can be resolved.
        InputTypeError: If the provider holds parameters that are not integer-like.
    """
    if isinstance(source, FromEngine):
        provider = source.provider
        if provider is None:
            raise MissingParameterError("No group provider given")
        missing = [
            name for name in PROVIDER_ATTRIBUTES if getattr(provider, name, None) is None
        ]
        if missing:
            raise MissingParameterError(
                "Group provider lacks: {}".format(", ".join(missing))
            )
        for name in PROVIDER_ATTRIBUTES:
            ensure_bn(getattr(provider, name), name)
        return provider

    if isinstance(source, FromParameters):
        if source.modulus is None or source.generator is None:
            raise MissingParameterError("Both the modulus and the generator are needed")
        return MultiplicativeGroup(source.modulus, source.generator, source.order)

    raise MissingParameterError(
        "Expected FromEngine or FromParameters, got {}".format(type(source).__name__)
    )


class ChaumPedersen:
    """
    Prover and verifier sharing one set of group parameters.

    Args:
        source: :py:class:`FromEngine` wrapping a group provider, or
            :py:class:`FromParameters` with the modulus and generator.
        hash_name: Hash used for the Fiat-Shamir challenge.
    """

    def __init__(self, source, hash_name=DEFAULT_HASH):
        self.group = resolve_group(source)
        self.prover = ChaumPedersenProver(self.group, hash_name=hash_name)
        self.verifier = ChaumPedersenVerifier(self.group, hash_name=hash_name)

    @classmethod
    def from_engine(cls, provider, **kwargs):
        return cls(FromEngine(provider), **kwargs)

    @classmethod
    def from_parameters(cls, modulus, generator, order=None, **kwargs):
        return cls(FromParameters(modulus, generator, order), **kwargs)

    def prove(self, r, x, n, m, base=None):
        """
        Prove that :math:`x = b^r` and :math:`m = n^r` for the same secret :math:`r`.

        See :py:meth:`cpzk.prover.ChaumPedersenProver.prove`.
        """
        return self.prover.prove(r, x, n, m, base)

    def verify(self, proof, x, n, m, base=None):
        """
        Check a proof for :math:`x = b^r` and :math:`m = n^r`.

        See :py:meth:`cpzk.verifier.ChaumPedersenVerifier.verify`.
        """
        return self.verifier.verify(proof, x, n, m, base)
