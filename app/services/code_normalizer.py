# /app/services/code_normalizer.py

"""
Strips markdown code fences that models tend to wrap around their answers,
even when told not to.

Only fences at the very start or end of the text are removed. Fences embedded
in the body (for example a README snippet inside generated docs) are kept as-is;
this is not a markdown parser.
"""

import re
from typing import Optional

# ```python / ```c++ / ```objective-c, with or without the newline
_LEADING_FENCE = re.compile(r"\A```[\w+-]*\n?")
# closing fence on its own line, trailing whitespace allowed
_TRAILING_FENCE = re.compile(r"\n?```\s*\Z")
# leftover backticks glued to the last line
_DANGLING_FENCE = re.compile(r"```\Z")


def _strip_once(text: str) -> str:
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    text = _DANGLING_FENCE.sub("", text, count=1)
    return text.strip()


def normalize_code(raw_code: Optional[str]) -> str:
    """
    Returns `raw_code` with boundary fences and surrounding whitespace removed.

    Never raises. The passes repeat until nothing changes so that the result
    is stable: normalize_code(normalize_code(x)) == normalize_code(x).
    An empty return value means the model produced no usable code.
    """
    if not raw_code:
        return ""

    normalized = raw_code.strip()
    while True:
        stripped = _strip_once(normalized)
        if stripped == normalized:
            return stripped
        normalized = stripped
