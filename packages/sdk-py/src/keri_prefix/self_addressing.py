import hmac
from dataclasses import dataclass

from . import codec
from .derivation import SelfAddressing
from .errors import DerivativeLengthError
from .observability import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class SelfAddressingPrefix:
    """
    A content digest addressed by its derivation code.

    Equality and hashing use only ``(derivation, digest)``, so prefixes can
    key content-addressed maps.
    """

    derivation: SelfAddressing
    digest: bytes

    def __post_init__(self):
        # Own an immutable copy of the caller's buffer
        object.__setattr__(self, 'digest', bytes(self.digest))
        if len(self.digest) != self.derivation.raw_size:
            raise DerivativeLengthError(
                f'{self.derivation.name} digest must be '
                f'{self.derivation.raw_size} bytes, got {len(self.digest)}'
            )

    @classmethod
    def from_str(cls, text: str) -> 'SelfAddressingPrefix':
        code, digest = codec.decode(SelfAddressing, text)
        return cls(code, digest)

    def verify_binding(self, content: bytes) -> bool:
        """Return True iff ``content`` hashes to this prefix's digest."""
        bound = hmac.compare_digest(self.derivation.digest(content), self.digest)
        if not bound:
            log.info('digest_binding_mismatch', prefix=self.to_str())
        return bound

    def derivation_code(self) -> str:
        return self.derivation.code

    def derivative(self) -> bytes:
        return self.digest

    def to_str(self) -> str:
        return codec.encode(self.derivation, self.digest)

    def __str__(self) -> str:
        return self.to_str()
