"""
JSON surface for prefixes.

Prefixes serialize as their text form. Failures are reported through
``SerializerError`` carrying one of the generic serializer error kinds.
"""
import json
from enum import Enum
from typing import Any, Optional, Type

from .errors import PrefixError
from .parsing import parse_prefix
from .types import Prefix


class ErrorKind(Enum):
    MESSAGE = 'message'
    EOF = 'unexpected end of input'
    SYNTAX = 'incorrect syntax'
    EXPECTED_BOOLEAN = 'incorrect input: expected boolean'
    EXPECTED_INTEGER = 'incorrect input: expected integer'
    EXPECTED_STRING = 'incorrect input: expected string'
    EXPECTED_NULL = 'incorrect input: expected null'
    EXPECTED_ARRAY = 'incorrect input: expected array'
    EXPECTED_ARRAY_COMMA = 'incorrect input: expected array comma'
    EXPECTED_ARRAY_END = 'incorrect input: expected array end'
    EXPECTED_MAP = 'incorrect input: expected map'
    EXPECTED_MAP_COLON = 'incorrect input: expected map colon'
    EXPECTED_MAP_COMMA = 'incorrect input: expected map comma'
    EXPECTED_MAP_END = 'incorrect input: expected map end'
    EXPECTED_ENUM = 'incorrect input: expected enum'
    TRAILING_CHARACTERS = 'incorrect input: unexpected trailing characters'


class SerializerError(ValueError):
    def __init__(self, kind: ErrorKind, message: Optional[str] = None):
        self.kind = kind
        self.message = message
        super().__init__(message if kind is ErrorKind.MESSAGE else kind.value)


def _render(value: Any) -> str:
    if isinstance(value, Prefix):
        return value.to_str()
    raise TypeError(f'Object of type {type(value).__name__} is not JSON serializable')


def canonicalize(obj: Any) -> str:
    """
    Create canonical JSON: sorted keys, compact separators, prefixes as text.
    """
    return json.dumps(obj, separators=(',', ':'), sort_keys=True, default=_render)


def loads(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializerError(_classify(exc)) from exc


def _classify(exc: json.JSONDecodeError) -> ErrorKind:
    if exc.msg == 'Extra data':
        return ErrorKind.TRAILING_CHARACTERS
    if exc.pos >= len(exc.doc.rstrip()):
        return ErrorKind.EOF
    if exc.msg == "Expecting ':' delimiter":
        return ErrorKind.EXPECTED_MAP_COLON
    return ErrorKind.SYNTAX


def load_prefix(value: Any, kind: Optional[Type[Prefix]] = None) -> Prefix:
    """
    Turn a decoded JSON value back into a prefix.

    With no ``kind`` the prefix type is chosen by its derivation code.
    """
    if not isinstance(value, str):
        raise SerializerError(ErrorKind.EXPECTED_STRING)
    try:
        if kind is None:
            return parse_prefix(value)
        return kind.from_str(value)
    except PrefixError as exc:
        raise SerializerError(ErrorKind.MESSAGE, str(exc)) from exc
