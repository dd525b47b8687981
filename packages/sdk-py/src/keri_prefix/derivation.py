"""
Derivation code tables.

Each family is a closed enumeration. A member carries its text code, the
size in bytes of the raw derivative it names and the length of the base64
body that follows the code. Codes are either one character ("soft") or four
characters starting with the hard-code marker ``1``.
"""
import hashlib
from enum import Enum
from typing import Callable, Dict, Mapping, Type, TypeVar, Union

from blake3 import blake3

from .errors import UnknownDerivationCodeError, UnknownPrefixCodeError

HARD_CODE_MARKER = '1'
HARD_CODE_LEN = 4

_Family = TypeVar('_Family', bound=Enum)


class Basic(Enum):
    """Basic derivations: the derivative is the public key itself."""

    ED25519_NT = ('B', 32, 43)
    X25519 = ('C', 32, 43)
    ED25519 = ('D', 32, 43)
    X448 = ('L', 56, 75)
    ECDSA_SECP256K1_NT = ('1AAA', 33, 47)
    ECDSA_SECP256K1 = ('1AAB', 33, 47)
    ED448_NT = ('1AAC', 57, 76)
    ED448 = ('1AAD', 57, 76)

    def __init__(self, code: str, raw_size: int, derivative_b64_len: int):
        self.code = code
        self.raw_size = raw_size
        self.derivative_b64_len = derivative_b64_len

    @property
    def code_len(self) -> int:
        return len(self.code)

    @property
    def lead_size(self) -> int:
        return lead_size(self)

    @property
    def is_transferable(self) -> bool:
        return self not in _NON_TRANSFERABLE

    @property
    def is_signing(self) -> bool:
        # X25519 and X448 are key agreement keys
        return self not in (Basic.X25519, Basic.X448)

    @classmethod
    def from_code(cls, text: str) -> 'Basic':
        return lookup(cls, text)

    def derive(self, public_key: bytes):
        from .basic import BasicPrefix

        return BasicPrefix(self, public_key)

    def __str__(self) -> str:
        return self.code


class SelfAddressing(Enum):
    """Self-addressing derivations: the derivative is a content digest."""

    BLAKE3_256 = ('E', 32, 43)
    BLAKE2B_256 = ('F', 32, 43)
    BLAKE2S_256 = ('G', 32, 43)
    SHA3_256 = ('H', 32, 43)
    SHA2_256 = ('I', 32, 43)
    BLAKE3_512 = ('1AAE', 64, 86)
    SHA3_512 = ('1AAF', 64, 86)
    BLAKE2B_512 = ('1AAH', 64, 86)
    SHA2_512 = ('1AAI', 64, 86)

    def __init__(self, code: str, raw_size: int, derivative_b64_len: int):
        self.code = code
        self.raw_size = raw_size
        self.derivative_b64_len = derivative_b64_len

    @property
    def code_len(self) -> int:
        return len(self.code)

    @property
    def lead_size(self) -> int:
        return lead_size(self)

    @classmethod
    def from_code(cls, text: str) -> 'SelfAddressing':
        return lookup(cls, text)

    def digest(self, data: bytes) -> bytes:
        """Hash ``data`` with this derivation's algorithm."""
        return _HASHERS[self](data)

    def derive(self, data: bytes):
        """Hash ``data`` and wrap the digest as a self-addressing prefix."""
        from .self_addressing import SelfAddressingPrefix

        return SelfAddressingPrefix(self, self.digest(data))

    def __str__(self) -> str:
        return self.code


class Timestamp(Enum):
    """Timestamp derivation: the derivative is a substituted RFC3339 string."""

    # YYYY-MM-DDTHHcMMcSSdffffffp00c00
    RFC3339_MICROS = ('1AAG', 32, 32)

    def __init__(self, code: str, raw_size: int, derivative_b64_len: int):
        self.code = code
        self.raw_size = raw_size
        self.derivative_b64_len = derivative_b64_len

    @property
    def code_len(self) -> int:
        return len(self.code)

    @classmethod
    def from_code(cls, text: str) -> 'Timestamp':
        return lookup(cls, text)

    def __str__(self) -> str:
        return self.code


DerivationCode = Union[Basic, SelfAddressing, Timestamp]

_NON_TRANSFERABLE = frozenset({
    Basic.ED25519_NT,
    Basic.ECDSA_SECP256K1_NT,
    Basic.ED448_NT,
})

_HASHERS: Dict[SelfAddressing, Callable[[bytes], bytes]] = {
    SelfAddressing.BLAKE3_256: lambda data: blake3(data).digest(),
    SelfAddressing.BLAKE2B_256: lambda data: hashlib.blake2b(data, digest_size=32).digest(),
    SelfAddressing.BLAKE2S_256: lambda data: hashlib.blake2s(data, digest_size=32).digest(),
    SelfAddressing.SHA3_256: lambda data: hashlib.sha3_256(data).digest(),
    SelfAddressing.SHA2_256: lambda data: hashlib.sha256(data).digest(),
    SelfAddressing.BLAKE3_512: lambda data: blake3(data).digest(length=64),
    SelfAddressing.SHA3_512: lambda data: hashlib.sha3_512(data).digest(),
    SelfAddressing.BLAKE2B_512: lambda data: hashlib.blake2b(data, digest_size=64).digest(),
    SelfAddressing.SHA2_512: lambda data: hashlib.sha512(data).digest(),
}

_CODES: Dict[type, Mapping[str, Enum]] = {
    family: {member.code: member for member in family}
    for family in (Basic, SelfAddressing, Timestamp)
}


def lead_size(code: DerivationCode) -> int:
    """
    Number of zero bytes prepended to the raw derivative before encoding.

    The full prefix text decodes to ``floor(6 * total / 8)`` bytes; whatever
    the raw derivative does not fill is leading zeros, and the code characters
    overwrite the base64 characters that encode them.
    """
    total = code.code_len + code.derivative_b64_len
    return total * 3 // 4 - code.raw_size


def lookup(family: Type[_Family], text: str) -> _Family:
    """
    Resolve the derivation code at the start of ``text`` within ``family``.

    Reads one character; a soft code matches directly, the hard-code marker
    makes the lookup read four characters.
    """
    if not text:
        raise UnknownPrefixCodeError('Empty prefix')
    table = _CODES[family]
    if text[0] == HARD_CODE_MARKER:
        code = text[:HARD_CODE_LEN]
        if code not in table:
            raise UnknownDerivationCodeError(
                f'Unknown {family.__name__} derivation code: {code!r}'
            )
        return table[code]
    if text[0] not in table:
        raise UnknownPrefixCodeError(f'Unknown {family.__name__} prefix code: {text[0]!r}')
    return table[text[0]]
