from __future__ import annotations

import re
from typing import Callable

from .registry import IDENTIFIER


# ".5" is not matched: the identifier has to start with a letter
SELECTOR_RE = re.compile(rf"\.({IDENTIFIER})", re.ASCII)


def rewrite_stylesheet(css_text: str, resolve: Callable[[str], str]) -> str:
    """Prefix every `.identifier` token in stylesheet text.

    No selector-position awareness: anything shaped like `.name` is treated
    as a class reference, including inside comments and `url(...)` values.
    """
    return SELECTOR_RE.sub(lambda m: '.' + resolve(m.group(1)), css_text)
