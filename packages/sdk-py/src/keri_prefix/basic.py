from dataclasses import dataclass

from . import codec, crypto
from .derivation import Basic
from .errors import DerivativeLengthError, UnsupportedDerivationError

_ED25519 = (Basic.ED25519, Basic.ED25519_NT)


@dataclass(frozen=True)
class BasicPrefix:
    """A public key addressed by its derivation code."""

    derivation: Basic
    public_key: bytes

    def __post_init__(self):
        # Own an immutable copy of the caller's buffer
        object.__setattr__(self, 'public_key', bytes(self.public_key))
        if len(self.public_key) != self.derivation.raw_size:
            raise DerivativeLengthError(
                f'{self.derivation.name} public key must be '
                f'{self.derivation.raw_size} bytes, got {len(self.public_key)}'
            )

    @classmethod
    def from_str(cls, text: str) -> 'BasicPrefix':
        code, public_key = codec.decode(Basic, text)
        return cls(code, public_key)

    def derivation_code(self) -> str:
        return self.derivation.code

    def derivative(self) -> bytes:
        return self.public_key

    def to_str(self) -> str:
        return codec.encode(self.derivation, self.public_key)

    def verify(self, message: bytes, signature: bytes) -> bool:
        """
        Check an Ed25519 signature made by this key.
        Other key types have no verifier here.
        """
        if self.derivation not in _ED25519:
            raise UnsupportedDerivationError(
                f'Signature verification is not supported for {self.derivation.name}'
            )
        return crypto.verify(self.public_key, message, signature)

    def __str__(self) -> str:
        return self.to_str()
