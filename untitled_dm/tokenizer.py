# untitled-dm — session launcher menu — MIT Licensed
"""
Quote-aware splitting of a command's argument tail.

`split_args` turns the text following a program name into the argument list
handed to the process:

    >>> split_args('foo "bar baz" qux')
    ['foo', 'bar baz', 'qux']
    >>> split_args('--title ""')
    ['--title', '']

Only double quotes are special. There are no escapes: a quoted token is the
verbatim text between two quote characters.
"""
from untitled_dm.exceptions import MalformedArgumentError

QUOTE = '"'


def split_args(raw: str) -> list[str]:
    """Split `raw` on whitespace, keeping double-quoted segments together.

    Raises:
        MalformedArgumentError: If `raw` has an unterminated quoted segment.
    """
    if raw.count(QUOTE) % 2:
        raise MalformedArgumentError(f"Unterminated quote in arguments: {raw!r}")

    tokens: list[str] = []
    position = 0
    length = len(raw)
    while position < length:
        char = raw[position]
        if char.isspace():
            position += 1
        elif char == QUOTE:
            end = raw.index(QUOTE, position + 1)
            tokens.append(raw[position + 1 : end])
            position = end + 1
        else:
            start = position
            while (
                position < length
                and not raw[position].isspace()
                and raw[position] != QUOTE
            ):
                position += 1
            tokens.append(raw[start:position])
    return tokens
