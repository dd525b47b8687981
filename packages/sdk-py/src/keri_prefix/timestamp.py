"""
Timestamp prefixes.

The prefix text format forbids ``:``, ``.`` and ``+``, so the RFC3339
rendering (microseconds, explicit numeric offset) is stored with those
characters replaced by ``c``, ``d`` and ``p``. None of the replacements can
occur in the rendering itself, which keeps the mapping reversible.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from . import codec
from .derivation import Timestamp
from .errors import TimestampParseError

_ENCODE = str.maketrans(':.+', 'cdp')
_DECODE = str.maketrans('cdp', ':.+')
_UNSAFE = frozenset(':.+')


@dataclass(frozen=True, eq=False)
class TimestampPrefix:
    """
    A point in time rendered with its own offset.

    Equality follows the text form, so the same instant at two offsets is
    two different prefixes.
    """

    timestamp: datetime

    def __post_init__(self):
        offset = self.timestamp.utcoffset()
        if offset is None:
            raise TimestampParseError('Timestamp must be timezone-aware')
        if offset % timedelta(minutes=1):
            raise TimestampParseError(f'Offset with seconds is not representable: {offset}')

    @classmethod
    def now(cls) -> 'TimestampPrefix':
        return cls(datetime.now(timezone.utc))

    @classmethod
    def from_str(cls, text: str) -> 'TimestampPrefix':
        _, body = codec.split(Timestamp, text)
        if _UNSAFE.intersection(body):
            raise codec.reject(TimestampParseError, 'Unsubstituted character in timestamp', text)
        try:
            prefix = cls(datetime.fromisoformat(body.translate(_DECODE)))
        except ValueError as exc:
            raise codec.reject(TimestampParseError, f'Invalid timestamp ({exc})', text) from exc
        if prefix.to_str() != text:
            raise codec.reject(TimestampParseError, 'Non-canonical timestamp', text)
        return prefix

    def __eq__(self, other):
        if not isinstance(other, TimestampPrefix):
            return NotImplemented
        return self.to_str() == other.to_str()

    def __hash__(self):
        return hash(self.to_str())

    def derivation_code(self) -> str:
        return Timestamp.RFC3339_MICROS.code

    def derivative(self) -> bytes:
        rendered = self.timestamp.isoformat(timespec='microseconds')
        return rendered.translate(_ENCODE).encode('ascii')

    def to_str(self) -> str:
        return self.derivation_code() + self.derivative().decode('ascii')

    def __str__(self) -> str:
        return self.to_str()
