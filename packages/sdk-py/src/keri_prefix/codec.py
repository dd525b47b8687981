import base64
import binascii
import re
from typing import Tuple, Type, TypeVar

from .derivation import DerivationCode
from .errors import (
    Base64DecodeError,
    DerivativeLengthError,
    PrefixError,
    PrefixLengthError,
)
from .observability import get_logger

log = get_logger(__name__)

# Six zero bits
PAD_CHAR = 'A'

_B64URL = re.compile(r'^[A-Za-z0-9_-]*$')

_Code = TypeVar('_Code')


def encode(code: DerivationCode, derivative: bytes) -> str:
    """
    Encode raw derivative bytes as prefix text.

    The derivative is left-padded with ``code.lead_size`` zero bytes so the
    base64url text (no ``=`` padding) is exactly ``code_len +
    derivative_b64_len`` characters, then the leading ``A`` characters are
    overwritten with the code.
    """
    if len(derivative) != code.raw_size:
        raise DerivativeLengthError(
            f'{code.name} derivative must be {code.raw_size} bytes, got {len(derivative)}'
        )
    padded = bytes(code.lead_size) + derivative
    text = base64.urlsafe_b64encode(padded).decode('ascii').rstrip('=')
    return code.code + text[code.code_len:]


def split(family: Type[_Code], text: str) -> Tuple[_Code, str]:
    """
    Resolve the code of ``text`` within ``family`` and check the total length.

    Returns the code and the body that follows it.
    """
    try:
        code = family.from_code(text)
    except PrefixError as exc:
        log.debug('prefix_decode_failed', reason=str(exc), prefix=text)
        raise
    expected = code.code_len + code.derivative_b64_len
    if len(text) != expected:
        raise reject(
            PrefixLengthError,
            f'Incorrect prefix length: expected {expected}, got {len(text)}',
            text,
        )
    return code, text[code.code_len:]


def decode(family: Type[_Code], text: str) -> Tuple[_Code, bytes]:
    """
    Decode prefix text into its derivation code and raw derivative bytes.

    The code characters are replaced by ``A`` so the whole string is aligned
    base64url again, then the lead zero bytes are dropped.
    """
    code, body = split(family, text)
    if not _B64URL.match(body):
        raise reject(Base64DecodeError, 'Invalid base64url character', text)
    aligned = PAD_CHAR * code.code_len + body
    try:
        raw = base64.urlsafe_b64decode(aligned + '=' * (-len(aligned) % 4))
    except binascii.Error as exc:
        log.debug('prefix_decode_failed', reason=str(exc), prefix=text)
        raise Base64DecodeError(f'Base64url decode failed: {exc}') from exc
    derivative = raw[code.lead_size:]
    # Non-zero lead bits or trailing bits would decode but not re-encode
    if encode(code, derivative) != text:
        raise reject(Base64DecodeError, 'Non-canonical prefix encoding', text)
    return code, derivative


def reject(exc_type: Type[PrefixError], reason: str, prefix: str) -> PrefixError:
    """Log a decode failure and build the exception for the caller to raise."""
    log.debug('prefix_decode_failed', reason=reason, prefix=prefix)
    return exc_type(f'{reason}: {prefix}')
