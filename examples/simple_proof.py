"""
Prove that x = g^r and m = n^r share the secret r, in a toy group.

p = 23, g = 5, q = 22, r = 6, so x = 5^6 = 8 and m = 2^6 = 18 (mod 23).
"""

from cpzk import ChaumPedersen, FromParameters, Proof

cp = ChaumPedersen(FromParameters(modulus=23, generator=5, order=22))
proof = cp.prove(6, 8, 2, 18)
assert cp.verify(proof, 8, 2, 18)

# A proof can be shipped as strings and checked elsewhere.
wire = proof.to_dict(encoding="hex")
assert cp.verify(Proof.from_dict(wire), "8", "2", "18")

# Changing the response breaks the proof.
tampered = Proof(U=proof.U, V=proof.V, response=(proof.response + 1) % 22)
assert not cp.verify(tampered, 8, 2, 18)
