from __future__ import annotations

from typing import Dict
from urllib.parse import unquote


def parse_query(query_string: str) -> Dict[str, str]:
    """Parse a URL query string into a dict of decoded key/value pairs.

    - One leading '?' is ignored.
    - Pairs are split on the first '='; a pair without '=' maps to ''.
    - Pairs with an empty key are skipped.
    - Later duplicates overwrite earlier ones.

    '+' is not treated as a space, and malformed percent escapes are kept
    verbatim instead of raising.
    """
    params: Dict[str, str] = {}
    if not query_string:
        return params

    query = query_string[1:] if query_string.startswith('?') else query_string
    for pair in query.split('&'):
        key, _, value = pair.partition('=')
        if not key:
            continue
        params[unquote(key)] = unquote(value) if value else ''
    return params
