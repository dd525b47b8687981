"""Tests for the JSON surface and serializer errors."""

import pytest

from keri_prefix import BasicPrefix
from keri_prefix.derivation import Basic, SelfAddressing
from keri_prefix.serialization import (
    ErrorKind,
    SerializerError,
    canonicalize,
    load_prefix,
    loads,
)


class TestCanonicalize:
    def test_prefixes_render_as_text(self):
        key = Basic.ED25519.derive(bytes(32))
        doc = {"k": [key], "i": key, "a": 1}
        expected = '{"a":1,"i":"%s","k":["%s"]}' % (key.to_str(), key.to_str())
        assert canonicalize(doc) == expected

    def test_other_objects_still_fail(self):
        with pytest.raises(TypeError):
            canonicalize({"a": object()})


class TestLoadPrefix:
    def test_round_trip_through_json(self):
        digest = SelfAddressing.BLAKE3_256.derive(b"event")
        value = loads(canonicalize({"d": digest}))["d"]
        assert load_prefix(value) == digest

    def test_explicit_kind(self):
        text = "B" + "A" * 43
        assert load_prefix(text, BasicPrefix) == Basic.ED25519_NT.derive(bytes(32))

    def test_non_string(self):
        with pytest.raises(SerializerError) as info:
            load_prefix(42)
        assert info.value.kind is ErrorKind.EXPECTED_STRING
        assert str(info.value) == "incorrect input: expected string"

    def test_codec_failure_becomes_message(self):
        with pytest.raises(SerializerError) as info:
            load_prefix("D" + "A" * 10)
        assert info.value.kind is ErrorKind.MESSAGE
        assert "Incorrect prefix length" in str(info.value)


class TestLoads:
    @pytest.mark.parametrize(
        "text,kind",
        [
            ('{"a":', ErrorKind.EOF),
            ('{"a" 1}', ErrorKind.EXPECTED_MAP_COLON),
            ('{"a":1} x', ErrorKind.TRAILING_CHARACTERS),
            ("[1,,2]", ErrorKind.SYNTAX),
        ],
    )
    def test_error_kinds(self, text, kind):
        with pytest.raises(SerializerError) as info:
            loads(text)
        assert info.value.kind is kind


class TestErrorDisplay:
    @pytest.mark.parametrize(
        "kind,text",
        [
            (ErrorKind.EOF, "unexpected end of input"),
            (ErrorKind.SYNTAX, "incorrect syntax"),
            (ErrorKind.EXPECTED_BOOLEAN, "incorrect input: expected boolean"),
            (ErrorKind.EXPECTED_INTEGER, "incorrect input: expected integer"),
            (ErrorKind.EXPECTED_NULL, "incorrect input: expected null"),
            (ErrorKind.EXPECTED_ARRAY, "incorrect input: expected array"),
            (ErrorKind.EXPECTED_ARRAY_COMMA, "incorrect input: expected array comma"),
            (ErrorKind.EXPECTED_ARRAY_END, "incorrect input: expected array end"),
            (ErrorKind.EXPECTED_MAP, "incorrect input: expected map"),
            (ErrorKind.EXPECTED_MAP_COMMA, "incorrect input: expected map comma"),
            (ErrorKind.EXPECTED_MAP_END, "incorrect input: expected map end"),
            (ErrorKind.EXPECTED_ENUM, "incorrect input: expected enum"),
            (ErrorKind.TRAILING_CHARACTERS, "incorrect input: unexpected trailing characters"),
        ],
    )
    def test_display(self, kind, text):
        assert str(SerializerError(kind)) == text

    def test_message(self):
        assert str(SerializerError(ErrorKind.MESSAGE, "foo")) == "foo"
