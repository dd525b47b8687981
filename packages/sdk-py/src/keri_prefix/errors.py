class PrefixError(ValueError):
    """Base class for every prefix encode/decode failure."""


class UnknownPrefixCodeError(PrefixError):
    """The leading character does not match any known code."""


class UnknownDerivationCodeError(PrefixError):
    """A hard-code marker was found but its selector is not in the table."""


class PrefixLengthError(PrefixError):
    """The prefix text is not exactly the length its code requires."""


class Base64DecodeError(PrefixError):
    """The prefix body is not valid, canonical base64url."""


class DerivativeLengthError(PrefixError):
    """Raw derivative bytes do not match the size the algorithm defines."""


class TimestampParseError(PrefixError):
    """A timestamp prefix body does not parse as an offset-aware timestamp."""


class UnsupportedDerivationError(PrefixError):
    """The operation is not available for this derivation code."""
