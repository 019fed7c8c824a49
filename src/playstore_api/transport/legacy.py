"""
Legacy ``key=value`` response format used by the login and c2dm endpoints.
"""

import re
from typing import Union

_LINE_BREAKS = re.compile(r"[\r\n]+")


def parse_key_value(response: Union[str, bytes]) -> dict[str, str]:
    """Parse newline-delimited ``key=value`` text.

    Lines are split on the first ``=`` only, so values may contain ``=``.
    Lines without ``=`` are dropped and later duplicate keys win.
    """
    if isinstance(response, bytes):
        response = response.decode("utf-8", errors="replace")
    values: dict[str, str] = {}
    for line in _LINE_BREAKS.split(response):
        if not line:
            continue
        key_value = line.split("=", 1)
        if len(key_value) >= 2:
            values[key_value[0]] = key_value[1]
    return values
