from __future__ import annotations

import re

DELIMITER_RUN_RE = re.compile(r'[-_\s]+(.)?')


def to_camel_case(text: str) -> str:
    """Convert hyphen, underscore or whitespace separated words to camelCase.

    >>> to_camel_case('hello-world_test')
    'helloWorldTest'
    >>> to_camel_case('Background Color')
    'backgroundColor'
    """
    def upper_next(match):
        ch = match.group(1)
        return ch.upper() if ch else ''

    out = DELIMITER_RUN_RE.sub(upper_next, text)
    if not out:
        return out
    return out[0].lower() + out[1:]
