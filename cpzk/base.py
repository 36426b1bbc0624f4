"""
Common classes: the proof transcript and the Fiat-Shamir challenge.
"""

import hashlib
from collections.abc import Mapping

import attr
from petlib.bn import Bn
from petlib.pack import encode, decode, register_coders

from cpzk.consts import DEFAULT_HASH
from cpzk.exceptions import InputTypeError
from cpzk.utils import ensure_bn, bn_to_str


PROOF_FIELDS = ("U", "V", "response")


def _field_converter(name):
    return lambda value: ensure_bn(value, name)


@attr.s(frozen=True)
class Proof:
    """
    Non-interactive Chaum-Pedersen proof.

    The proof carries the two commitments and the response, but no challenge: the
    verifier recomputes it from the statement and the commitments.
    """

    U = attr.ib(converter=_field_converter("U"))
    V = attr.ib(converter=_field_converter("V"))
    response = attr.ib(converter=_field_converter("response"))

    def to_dict(self, encoding="dec"):
        """
        Serialize the proof to a mapping of strings.

        Args:
            encoding: ``"dec"`` for decimal strings, ``"hex"`` for ``0x``-prefixed
                hexadecimal strings.
        """
        return {name: bn_to_str(getattr(self, name), encoding) for name in PROOF_FIELDS}

    @classmethod
    def from_dict(cls, data):
        """
        Build a proof from a mapping with the fields ``U``, ``V`` and ``response``.

        Values can be big numbers, integers, or decimal/hex strings.
        """
        missing = [name for name in PROOF_FIELDS if name not in data]
        if missing:
            raise InputTypeError("Proof is missing fields: {}".format(", ".join(missing)))
        return cls(**{name: data[name] for name in PROOF_FIELDS})


def ensure_proof(proof):
    """Accept a :py:class:`Proof` or a serialized proof mapping."""
    if isinstance(proof, Proof):
        return proof
    if isinstance(proof, Mapping):
        return Proof.from_dict(proof)
    raise InputTypeError(
        "Wrong type of proof: {}. Expected a Proof or a mapping.".format(
            type(proof).__name__
        )
    )


def resolve_base(group, base=None):
    """
    Resolve the base of the first exponentiation.

    Defaults to the generator of the group. The prover and the verifier both go
    through this function, so the resolved base is what gets hashed.
    """
    if base is None:
        return ensure_bn(group.generator, "generator")
    return ensure_bn(base, "base")


def build_fiat_shamir_challenge(order, *args, hash_name=DEFAULT_HASH):
    """
    Generate a Fiat-Shamir challenge.

    Every element is packed with :py:func:`petlib.pack.encode` before hashing, so
    the boundaries between elements are part of the transcript.

    >>> c = build_fiat_shamir_challenge(Bn(22), Bn(5), Bn(8), Bn(18))
    >>> 0 <= c < 22
    True

    Args:
        order: Group order. The challenge is reduced modulo it.
        args: Items to hash, in transcript order.
        hash_name: Name of a :py:mod:`hashlib` algorithm.
    """
    # A new context per call. Hash objects accumulate state.
    digest = hashlib.new(hash_name)
    for elem in args:
        digest.update(encode(elem))
    return Bn.from_hex(digest.hexdigest()) % order


def enc_Proof(obj):
    return encode([obj.U, obj.V, obj.response])


def dec_Proof(data):
    return Proof(*decode(data))


register_coders(Proof, 11, enc_Proof, dec_Proof)
