from typing import Tuple

from .basic import BasicPrefix
from .derivation import Basic, SelfAddressing, Timestamp
from .errors import UnknownDerivationCodeError, UnknownPrefixCodeError
from .self_addressing import SelfAddressingPrefix
from .timestamp import TimestampPrefix
from .types import Prefix

_KINDS: Tuple[tuple, ...] = (
    (Timestamp, TimestampPrefix),
    (Basic, BasicPrefix),
    (SelfAddressing, SelfAddressingPrefix),
)


def parse_prefix(text: str) -> Prefix:
    """
    Parse prefix text of any kind, dispatching on its derivation code.
    """
    unknown_selector = False
    for family, kind in _KINDS:
        try:
            family.from_code(text)
        except UnknownDerivationCodeError:
            unknown_selector = True
            continue
        except UnknownPrefixCodeError:
            continue
        return kind.from_str(text)
    if unknown_selector:
        raise UnknownDerivationCodeError(f'Unknown derivation code: {text[:4]!r}')
    raise UnknownPrefixCodeError(f'Unknown prefix code: {text[:1]!r}')
