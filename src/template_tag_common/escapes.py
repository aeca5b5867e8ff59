"""
Escape cooking for template chunks.

KEY CONCEPT:
Every static chunk of a tagged template exists in two forms:
    raw:    'Hello\\nWorld'   # backslash and "n" as typed
    cooked: 'Hello\nWorld'    # escape sequence interpreted

Once a raw chunk has been edited (for example by stripping indentation),
the cooked value that came with it is stale. cook() rebuilds the cooked
value from the raw text using the backtick-literal escape rules, so the
two forms never drift apart.
"""

import re

# The alternatives match, in order:
# *  Any non-special escaped character or single-letter control escape
# *  2-digit hex escape
# *  4-digit UTF-16 code-unit escape
# *  Legacy octal escape starting with 0-3 (up to three digits)
# *  Legacy octal escape starting with 4-7 (up to two digits)
# *  Line continuation that uses a CR or CRLF
ESCAPE_SEQUENCE = re.compile(
    r'\\(?:[^ux0-7\r]|x[0-9A-Fa-f]{2}|u[0-9A-Fa-f]{4}'
    r'|[0-3][0-7]{0,2}|[4-7][0-7]?|\r\n?)'
)

_SURROGATE = re.compile('[\ud800-\udfff]')


def _hex_value(escape: str) -> str:
    return chr(int(escape[2:], 16))


def _octal_value(escape: str) -> str:
    return chr(int(escape[1:], 8))


# String value of each escape, keyed by the character after the backslash.
# Callables receive the whole matched escape.
ESCAPE_VALUES = {
    'b': '\b',
    't': '\t',
    'n': '\n',
    'v': '\v',
    'f': '\f',
    'r': '\r',
    # Line continuations contribute no characters
    '\n': '',
    '\r': '',
    '\u2028': '',
    '\u2029': '',
    'x': _hex_value,
    'u': _hex_value,
}
ESCAPE_VALUES.update(dict.fromkeys('01234567', _octal_value))


def _replace_escape(match: re.Match) -> str:
    escape = match.group(0)
    value = ESCAPE_VALUES.get(escape[1])
    if value is None:
        return escape[1]
    if callable(value):
        return value(escape)
    return value


def _join_surrogates(text: str) -> str:
    """
    Combine UTF-16 surrogate pairs into single code points.

    \\uXXXX escapes name UTF-16 code units, so an astral character written
    as two escapes comes out of cook() as a pair of surrogates. Lone
    surrogates are kept as they are.
    """
    return text.encode('utf-16-le', 'surrogatepass').decode('utf-16-le', 'surrogatepass')


def cook(raw: str) -> str:
    """
    The cooked chunk corresponding to a raw template chunk.

    Usage:
        cook('a\\tb\\x41\\u00e9')
        # Returns: 'a\tbAé'
    """
    if '\\' not in raw:
        return raw
    cooked = ESCAPE_SEQUENCE.sub(_replace_escape, raw)
    if _SURROGATE.search(cooked):
        cooked = _join_surrogates(cooked)
    return cooked
