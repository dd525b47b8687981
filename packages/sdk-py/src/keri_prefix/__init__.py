from .derivation import Basic, SelfAddressing, Timestamp
from .basic import BasicPrefix
from .self_addressing import SelfAddressingPrefix
from .timestamp import TimestampPrefix
from .types import Prefix
from .parsing import parse_prefix
from .crypto import generate_keypair, sign, verify
from .errors import (
    PrefixError,
    UnknownPrefixCodeError,
    UnknownDerivationCodeError,
    PrefixLengthError,
    Base64DecodeError,
    DerivativeLengthError,
    TimestampParseError,
    UnsupportedDerivationError,
)

__all__ = [
    'Basic',
    'SelfAddressing',
    'Timestamp',
    'BasicPrefix',
    'SelfAddressingPrefix',
    'TimestampPrefix',
    'Prefix',
    'parse_prefix',
    'generate_keypair',
    'sign',
    'verify',
    'PrefixError',
    'UnknownPrefixCodeError',
    'UnknownDerivationCodeError',
    'PrefixLengthError',
    'Base64DecodeError',
    'DerivativeLengthError',
    'TimestampParseError',
    'UnsupportedDerivationError',
]
