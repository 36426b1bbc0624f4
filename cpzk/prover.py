r"""
Prover for the Chaum-Pedersen proof of equality of discrete logarithms.

.. math::
    PK\{ (r): x = g^r \land m = n^r \}

See "`Wallet Databases with Observers`_" by Chaum and Pedersen, 1992.

.. _`Wallet Databases with Observers`:
    https://link.springer.com/chapter/10.1007/3-540-48071-4_7
"""
import logging

from cpzk.base import Proof, build_fiat_shamir_challenge, resolve_base
from cpzk.consts import DEFAULT_HASH
from cpzk.utils import ensure_bn


logger = logging.getLogger(__name__)


class ChaumPedersenProver:
    """
    The prover in a non-interactive Chaum-Pedersen proof.

    The prover keeps no state between proofs. Secrets and commitment randomness only
    live for the duration of :py:meth:`prove`.

    Args:
        group: Group provider, for instance a :py:class:`cpzk.groups.MultiplicativeGroup`.
        hash_name: Hash used for the Fiat-Shamir challenge.
    """

    def __init__(self, group, hash_name=DEFAULT_HASH):
        self.group = group
        self.hash_name = hash_name

    def prove(self, r, x, n, m, base=None):
        r"""
        Prove that :math:`x = b^r` and :math:`m = n^r` share the exponent :math:`r`.

        The caller is responsible for the statement being true. A false statement
        yields a proof that does not verify.

        Args:
            r: The secret exponent.
            x: First public value, :math:`b^r \bmod p`.
            n: Base of the second exponentiation.
            m: Second public value, :math:`n^r \bmod p`.
            base: Base :math:`b` of the first exponentiation. Defaults to the group
                generator.

        Returns:
            Proof: The commitments and the response.

        Raises:
            InputTypeError: If any argument is not integer-like.
        """
        r = ensure_bn(r, "r")
        x = ensure_bn(x, "x")
        n = ensure_bn(n, "n")
        m = ensure_bn(m, "m")
        base = resolve_base(self.group, base)

        # The provider may be any engine, its outputs go through the parser too.
        order = ensure_bn(self.group.order, "order")
        commitment = ensure_bn(self.group.sample_scalar(), "commitment")
        U = ensure_bn(self.group.mod_pow(base, commitment), "U")
        V = ensure_bn(self.group.mod_pow(n, commitment), "V")

        # Strong Fiat-Shamir: the statement is part of the hashed transcript.
        challenge = build_fiat_shamir_challenge(
            order, base, x, m, U, V, hash_name=self.hash_name
        )

        response = commitment.mod_sub(challenge.mod_mul(r, order), order)
        logger.debug("Computed proof commitments U=%s V=%s", U, V)
        return Proof(U=U, V=V, response=response)
