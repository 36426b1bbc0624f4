"""
Verifier for the Chaum-Pedersen proof of equality of discrete logarithms.
"""
import logging

from cpzk.base import build_fiat_shamir_challenge, ensure_proof, resolve_base
from cpzk.consts import DEFAULT_HASH
from cpzk.utils import ensure_bn


logger = logging.getLogger(__name__)


class ChaumPedersenVerifier:
    """
    The verifier in a non-interactive Chaum-Pedersen proof.

    Args:
        group: Group provider, for instance a :py:class:`cpzk.groups.MultiplicativeGroup`.
        hash_name: Hash used for the Fiat-Shamir challenge. Must match the prover's.
    """

    def __init__(self, group, hash_name=DEFAULT_HASH):
        self.group = group
        self.hash_name = hash_name

    def recompute_commitments(self, challenge, response, x, n, m, base):
        """
        Recompute :math:`(b^s x^c, n^s m^c)` from the challenge and the response.
        """
        group = self.group
        U = group.multiply(group.mod_pow(base, response), group.mod_pow(x, challenge))
        V = group.multiply(group.mod_pow(n, response), group.mod_pow(m, challenge))
        return ensure_bn(U, "U"), ensure_bn(V, "V")

    def verify(self, proof, x, n, m, base=None):
        """
        Verify a non-interactive proof.

        Malformed arguments raise. A well-formed proof that does not check out
        returns False.

        Args:
            proof: A :py:class:`cpzk.base.Proof`, or its serialized mapping.
            x: First public value.
            n: Base of the second exponentiation.
            m: Second public value.
            base: Base of the first exponentiation. Defaults to the group generator.

        Returns:
            bool: True if verification succeeded, False otherwise.

        Raises:
            InputTypeError: If the proof or any argument is malformed.
        """
        proof = ensure_proof(proof)
        x = ensure_bn(x, "x")
        n = ensure_bn(n, "n")
        m = ensure_bn(m, "m")
        base = resolve_base(self.group, base)

        order = ensure_bn(self.group.order, "order")
        if not 0 <= proof.response < order:
            logger.debug("Rejected proof: response out of range")
            return False

        challenge = build_fiat_shamir_challenge(
            order, base, x, m, proof.U, proof.V, hash_name=self.hash_name
        )
        U, V = self.recompute_commitments(challenge, proof.response, x, n, m, base)
        logger.debug("Recomputed commitments U=%s V=%s", U, V)

        result = U == proof.U and V == proof.V
        logger.debug("Proof %s", "verified" if result else "rejected")
        return result
