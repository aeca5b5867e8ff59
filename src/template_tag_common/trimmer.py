"""
Common-indentation trimming for multiline templates.

KEY CONCEPT:
Multiline templates are usually indented to match the surrounding code:

    QUERY = TemplateStrings.from_raw(('''
        SELECT *
          FROM t
        WHERE id = ''', ''))

Every line starts with the same 8 spaces, which belong to the code layout,
not to the template. Trimming removes that common run so the template can
be re-indented as a block:

    '\nSELECT *\n  FROM t\nWHERE id = '

Relative indentation (the 2 extra spaces before FROM) is preserved.

"Whitespace" and "line terminator" follow the backtick-literal grammar:
tab, VT, FF, space, NBSP and BOM are whitespace; LF, CR, CRLF, U+2028
and U+2029 end lines.
"""

import re
from typing import Optional

from .config import TrimConfig
from .escapes import cook
from .template_strings import TemplateStrings

# Zero or more whitespace characters at the start of input
WS_RUN = re.compile('^[\t\u000b\u000c \u00a0\ufeff]*')

# A run of line terminators; a CRLF or a blank line is a single run
LINE_TERMINATORS = re.compile('[\n\r\u2028\u2029]+')

LINE_TERMINATOR_AT_START = re.compile('\\A(?:\r\n?|[\n\u2028\u2029])')
LINE_TERMINATOR_AT_END = re.compile('(?:\r\n?|[\n\r\u2028\u2029])\\Z')


def common_prefix_of(a: str, b: str) -> str:
    """The longest prefix of a that is also a prefix of b."""
    i = 0
    for x, y in zip(a, b):
        if x != y:
            break
        i += 1
    return a[:i]


class Trimmer:
    """
    Strips whitespace common to the start of every line of a template.

    Usage:
        trimmer = Trimmer(TrimConfig(trim_eol_at_start=True))
        trimmed = trimmer.trim(strings)

    Trimming is not cached here. Call it from a static helper of
    memoized_tag_function so it runs once per template.
    """

    def __init__(self, config: Optional[TrimConfig] = None):
        self.config = config or TrimConfig()

    def common_prefix(self, strings) -> str:
        """
        Whitespace common to every line start across all raw chunks.

        Only computed for templates whose first raw chunk starts with a
        line break; returns '' otherwise.
        """
        raw = strings.raw
        if not raw or not LINE_TERMINATOR_AT_START.match(raw[0]):
            return ''

        common = None
        for chunk in raw:
            lines = LINE_TERMINATORS.split(str(chunk))
            # Skip lines[0]: it follows the opening delimiter or a
            # substitution, not a line break.
            for line in lines[1:]:
                prefix = WS_RUN.match(line).group(0)
                common = prefix if common is None else common_prefix_of(common, prefix)
                if not common:
                    return ''
        return common or ''

    def trim(self, strings):
        """
        Remove the common indentation and, if configured, boundary line breaks.

        Returns the input object itself when there is nothing to do;
        otherwise a new TemplateStrings with re-cooked chunks.
        """
        prefix = self.common_prefix(strings)
        if not prefix and not self.config.trims_eol:
            # Fast path.
            return strings

        trimmed = list(strings.raw)
        if prefix:
            # prefix is whitespace only, but escape it anyway for the pattern.
            prefix_pattern = re.compile(
                f'({LINE_TERMINATORS.pattern}){re.escape(prefix)}'
            )
            trimmed = [prefix_pattern.sub(r'\1', chunk) for chunk in trimmed]

        if trimmed and self.config.trim_eol_at_start:
            trimmed[0] = LINE_TERMINATOR_AT_START.sub('', trimmed[0], count=1)
        if trimmed and self.config.trim_eol_at_end:
            trimmed[-1] = LINE_TERMINATOR_AT_END.sub('', trimmed[-1], count=1)

        return TemplateStrings((cook(chunk) for chunk in trimmed), trimmed)


def trim_common_whitespace_from_lines(
    strings,
    *,
    trim_eol_at_start: bool = False,
    trim_eol_at_end: bool = False,
):
    """
    Convenience function for one-off trimming.

    Usage:
        trimmed = trim_common_whitespace_from_lines(
            TemplateStrings.from_raw(('\\n    bar\\n    ',)),
            trim_eol_at_start=True,
            trim_eol_at_end=True,
        )
        # list(trimmed) == ['bar']
    """
    config = TrimConfig(
        trim_eol_at_start=trim_eol_at_start,
        trim_eol_at_end=trim_eol_at_end,
    )
    return Trimmer(config).trim(strings)
