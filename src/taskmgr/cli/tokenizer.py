# src/taskmgr/cli/tokenizer.py

"""
Split one line of command input into tokens.

A token is either the contents of a double-quoted run (quotes stripped, no
escape sequences) or a run of non-whitespace characters. A quote opens a
quoted run only at the start of a token; inside a bare word it is an ordinary
character.

If the line ends inside a quoted run, that run was never a quoted run: the
text from the opening quote onward is re-read as bare words, so the quote stays
glued to the first word (`add "unclosed` -> ["add", '"unclosed']).
"""

from __future__ import annotations

QUOTE = '"'

_BETWEEN = 0
_WORD = 1
_QUOTED = 2


def tokenize(line: str) -> list[str]:
    tokens: list[str] = []
    buf: list[str] = []
    state = _BETWEEN
    quote_start = 0

    for i, ch in enumerate(line):
        if state == _BETWEEN:
            if ch.isspace():
                continue
            if ch == QUOTE:
                state = _QUOTED
                quote_start = i
            else:
                state = _WORD
                buf.append(ch)

        elif state == _WORD:
            if ch.isspace():
                tokens.append("".join(buf))
                buf.clear()
                state = _BETWEEN
            else:
                buf.append(ch)

        else:  # _QUOTED
            if ch == QUOTE:
                # Closing quote ends the token even when text follows directly.
                tokens.append("".join(buf))
                buf.clear()
                state = _BETWEEN
            else:
                buf.append(ch)

    if state == _WORD:
        tokens.append("".join(buf))
    elif state == _QUOTED:
        # Unterminated: no quote follows quote_start, so plain splitting is exact.
        tokens.extend(line[quote_start:].split())

    return tokens
