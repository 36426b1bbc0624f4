r"""
Prove an ElGamal ciphertext was correctly re-randomized.

Given a public key :math:`y = g^a` and a ciphertext :math:`(c_1, c_2) = (g^t, y^t M)`,
anyone can re-randomize it with a blinding factor :math:`s`:

.. math::
    (c_1', c_2') = (c_1 g^s, c_2 y^s)

The re-randomizer proves :math:`c_1' / c_1 = g^s` and :math:`c_2' / c_2 = y^s` share
:math:`s`, without revealing it.
"""

from cpzk import ChaumPedersen, FromEngine, modp_group

group = modp_group("modp2048")
p = group.modulus

secret_key = group.sample_scalar()
public_key = group.power(secret_key)

message = group.power(group.sample_scalar())
t = group.sample_scalar()
c1 = group.power(t)
c2 = group.multiply(group.mod_pow(public_key, t), message)

blinding = group.sample_scalar()
c1_blinded = group.multiply(c1, group.power(blinding))
c2_blinded = group.multiply(c2, group.mod_pow(public_key, blinding))

# The ciphertext still decrypts to the same message.
shared = group.mod_pow(c1_blinded, secret_key)
assert group.multiply(c2_blinded, shared.mod_inverse(p)) == message

cp = ChaumPedersen(FromEngine(group))
proof = cp.prove(
    blinding,
    group.power(blinding),
    public_key,
    group.mod_pow(public_key, blinding),
)

# The verifier only sees the two ciphertexts and the public key.
x = group.multiply(c1_blinded, c1.mod_inverse(p))
m = group.multiply(c2_blinded, c2.mod_inverse(p))
assert cp.verify(proof, x, public_key, m)
