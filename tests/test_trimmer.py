"""
Tests for escape cooking and common-indentation trimming.

Run with: pytest tests/test_trimmer.py -v
"""

import pytest

from template_tag_common.config import TrimConfig
from template_tag_common.escapes import cook
from template_tag_common.template_strings import TemplateStrings
from template_tag_common.trimmer import (
    Trimmer,
    common_prefix_of,
    trim_common_whitespace_from_lines,
)


def trimmed(*raw, **flags):
    """Trim raw chunks and return plain lists for comparison."""
    result = trim_common_whitespace_from_lines(TemplateStrings.from_raw(raw), **flags)
    return {"cooked": list(result), "raw": list(result.raw)}


class TestCook:
    """Tests for raw -> cooked escape processing."""

    def test_no_escapes(self):
        """Text without backslashes is unchanged."""
        assert cook("plain text") == "plain text"

    def test_control_escapes(self):
        """Single-letter escapes map to control characters."""
        assert cook("\\b\\t\\n\\v\\f\\r") == "\b\t\n\v\f\r"

    def test_redundant_escape(self):
        """A non-special escaped character maps to itself."""
        assert cook("a\\/b") == "a/b"
        assert cook("\\\\oo") == "\\oo"
        assert cook("\\`") == "`"

    def test_hex_and_unicode(self):
        """Hex and unicode escapes produce the named code unit."""
        assert cook("\\x56") == "V"
        assert cook("\\u1234") == "\u1234"
        assert cook("\\u00e9t\\u00E9") == "été"

    def test_incomplete_hex_left_alone(self):
        """Malformed hex/unicode escapes keep their backslash."""
        assert cook("\\xZ1") == "\\xZ1"
        assert cook("\\u12") == "\\u12"

    def test_legacy_octal(self):
        """Octal escapes follow the 0-3 / 4-7 digit rules."""
        assert cook("\\0") == "\x00"
        assert cook("\\101") == "A"
        assert cook("\\377") == "\xff"
        assert cook("\\477") == "\x27" + "7"
        assert cook("\\08") == "\x00" + "8"

    def test_line_continuation(self):
        """Backslash + line break contributes nothing."""
        assert cook("a\\\nb") == "ab"
        assert cook("a\\\r\nb") == "ab"
        assert cook("a\\\rb") == "ab"
        assert cook("a\\\u2028b") == "ab"
        assert cook("a\\\u2029b") == "ab"

    def test_surrogate_pair(self):
        """Two \\u escapes forming a surrogate pair become one character."""
        assert cook("\\ud83d\\ude00") == "\U0001F600"

    def test_mixed(self):
        """Escapes of every kind in one chunk."""
        assert cook("\\foo \\u1234 \\x56 \\n \\0") == "\foo \u1234 V \n \x00"


class TestCommonPrefix:
    """Tests for the prefix helpers."""

    def test_common_prefix_of(self):
        """Longest shared prefix of two strings."""
        assert common_prefix_of("    ", "  \t") == "  "
        assert common_prefix_of("abc", "abd") == "ab"
        assert common_prefix_of("", "abc") == ""

    def test_requires_leading_line_break(self):
        """No prefix is computed unless the template starts with a line break."""
        strings = TemplateStrings.from_raw(("foo\n    bar\n    baz",))
        assert Trimmer().common_prefix(strings) == ""

    def test_blank_lines_do_not_reset_prefix(self):
        """Consecutive line breaks count as one boundary."""
        strings = TemplateStrings.from_raw(("\n    a\n\n    b",))
        assert Trimmer().common_prefix(strings) == "    "

    def test_unindented_line_empties_prefix(self):
        """A line without leading whitespace forces an empty prefix."""
        strings = TemplateStrings.from_raw(("\n    a\nb\n    c",))
        assert Trimmer().common_prefix(strings) == ""


class TestTrimmer:
    """Tests for trimming templates."""

    def test_empty_string(self):
        """Empty template stays empty."""
        assert trimmed("") == {"cooked": [""], "raw": [""]}

    def test_one_line(self):
        """Single line without line breaks is unchanged."""
        assert trimmed("foo") == {"cooked": ["foo"], "raw": ["foo"]}

    def test_one_line_with_escape(self):
        """Escapes are cooked but the raw form is kept."""
        assert trimmed("\\\\oo") == {"cooked": ["\\oo"], "raw": ["\\\\oo"]}

    def test_two_lines(self):
        """A line break plus trailing indentation trims to the line break."""
        assert trimmed("\n      ") == {"cooked": ["\n"], "raw": ["\n"]}

    def test_three_lines_with_escapes(self):
        """Escapes are re-cooked after trimming."""
        raw = "\n      \\foo \\u1234 \\x56 \\n        \\r\\n \\0\n      \\bar"
        assert trimmed(raw) == {
            "cooked": ["\n\foo \u1234 \x56 \n        \r\n \x00\n\bar"],
            "raw": ["\n\\foo \\u1234 \\x56 \\n        \\r\\n \\0\n\\bar"],
        }

    def test_variable_indentation(self):
        """Relative indentation survives across interpolations."""
        assert trimmed("\n      {\n        Hello, ", "!\n      }") == {
            "cooked": ["\n{\n  Hello, ", "!\n}"],
            "raw": ["\n{\n  Hello, ", "!\n}"],
        }

    def test_less_indented_line_sets_prefix(self):
        """The least indented line decides how much is removed."""
        assert trimmed("\n    a\n  b\n      c")["cooked"] == ["\n  a\nb\n    c"]

    def test_unindented_line_prevents_trimming(self):
        """Nothing is stripped when one line has no indentation."""
        assert trimmed("\n    a\nb")["cooked"] == ["\n    a\nb"]

    def test_mixed_line_terminators(self):
        """CR, CRLF and the Unicode separators all start lines."""
        result = trimmed("\r\n  a\r  b\u2028  c\u2029  d")
        assert result["raw"] == ["\r\na\rb\u2028c\u2029d"]

    def test_trim_eol_at_both_ends(self):
        """Boundary line breaks are removed after dedenting."""
        result = trimmed(
            "\n          bar\n          ",
            trim_eol_at_start=True,
            trim_eol_at_end=True,
        )
        assert result == {"cooked": ["bar"], "raw": ["bar"]}

    def test_trim_eol_without_common_prefix(self):
        """Boundary trimming still applies when nothing is indented."""
        result = trimmed("\nfoo\n", trim_eol_at_start=True, trim_eol_at_end=True)
        assert result["cooked"] == ["foo"]

    def test_trim_eol_removes_one_line_break(self):
        """Only a single boundary line break is removed at each end."""
        result = trimmed("\r\n\nfoo\n\r\n", trim_eol_at_start=True, trim_eol_at_end=True)
        assert result["raw"] == ["\nfoo\n"]

    def test_trim_eol_across_chunks(self):
        """Start applies to the first chunk, end to the last."""
        result = trimmed(
            "\n    <ul>\n      ", "\n    </ul>\n    ",
            trim_eol_at_start=True,
            trim_eol_at_end=True,
        )
        assert result["cooked"] == ["<ul>\n  ", "\n</ul>"]

    def test_fast_path_returns_input(self):
        """Already-trimmed input comes back as the same object."""
        strings = TemplateStrings.from_raw(("foo", "bar"))
        assert trim_common_whitespace_from_lines(strings) is strings

    def test_result_is_immutable(self):
        """Trimmed strings and their raw form cannot be modified."""
        result = trim_common_whitespace_from_lines(
            TemplateStrings.from_raw(("\n  foo",))
        )
        assert isinstance(result, TemplateStrings)
        assert isinstance(result.raw, tuple)
        with pytest.raises(AttributeError):
            result.raw = ("x",)

    def test_config_object(self):
        """Trimmer accepts a TrimConfig."""
        trimmer = Trimmer(TrimConfig(trim_eol_at_start=True))
        result = trimmer.trim(TemplateStrings.from_raw(("\n  foo\n  ",)))
        assert list(result) == ["foo\n"]

    def test_line_continuation_recooked(self):
        """A line continuation stays in raw and vanishes from cooked."""
        result = trimmed("\n    a \\\n    b")
        assert result["raw"] == ["\na \\\nb"]
        assert result["cooked"] == ["\na b"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
