from typing import Tuple
from nacl.signing import SigningKey, VerifyKey
from nacl.exceptions import BadSignatureError


def generate_keypair() -> Tuple[bytes, bytes]:
    """
    Generate an Ed25519 keypair.
    Returns (private_key_seed_32_bytes, public_key_32_bytes)
    """
    sk = SigningKey.generate()
    vk = sk.verify_key
    # bytes(SigningKey) is the 32-byte seed
    return bytes(sk), bytes(vk)


def sign(message: bytes, private_key: bytes) -> bytes:
    """
    Sign message with an Ed25519 seed and return the raw 64-byte signature.
    """
    return SigningKey(private_key).sign(message).signature


def verify(public_key: bytes, message: bytes, signature: bytes) -> bool:
    """
    Verify a raw Ed25519 signature over message.
    """
    try:
        VerifyKey(public_key).verify(message, signature)
        return True
    except (BadSignatureError, ValueError, TypeError):
        return False
