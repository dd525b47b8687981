"""Tests for dispatching prefix text to its kind."""

import pytest

from keri_prefix import (
    BasicPrefix,
    SelfAddressingPrefix,
    TimestampPrefix,
    parse_prefix,
)
from keri_prefix.errors import UnknownDerivationCodeError, UnknownPrefixCodeError


class TestParsePrefix:
    @pytest.mark.parametrize(
        "text,kind",
        [
            ("D" + "A" * 43, BasicPrefix),
            ("1AAD" + "A" * 76, BasicPrefix),
            ("ELC5L3iBVD77d_MYbYGGCUQgqQBju1o4x1Ud-z2sL-ux", SelfAddressingPrefix),
            ("1AAE" + "A" * 86, SelfAddressingPrefix),
            ("1AAG2020-08-22T17c50c09d988921p00c00", TimestampPrefix),
        ],
    )
    def test_dispatch(self, text, kind):
        prefix = parse_prefix(text)
        assert isinstance(prefix, kind)
        assert prefix.to_str() == text

    @pytest.mark.parametrize("text", ["", "?" + "A" * 43, "z"])
    def test_unknown_prefix_code(self, text):
        with pytest.raises(UnknownPrefixCodeError):
            parse_prefix(text)

    def test_unknown_derivation_code(self):
        with pytest.raises(UnknownDerivationCodeError):
            parse_prefix("1ZZZ" + "A" * 47)
