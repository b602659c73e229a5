from __future__ import annotations

import re
from typing import Callable

from .registry import IDENTIFIER


# '.menu-btn' / ".menu-btn" / `.menu-btn` as a whole string literal
SELECTOR_LITERAL_RE = re.compile(rf"(['\"`])\.({IDENTIFIER})\1", re.ASCII)
CLASSLIST_METHODS = ('add', 'remove', 'toggle', 'contains')
CLASSLIST_CALL_RE = re.compile(
    r"classList\.(" + '|'.join(CLASSLIST_METHODS) + r")\(['\"`]([^'\"`]+)['\"`]\)"
)
GET_BY_ID_RE = re.compile(r"getElementById\(['\"`]([^'\"`]+)['\"`]\)")


def rewrite_selector_literals(code: str, resolve: Callable[[str], str]) -> str:
    def repl(m: re.Match) -> str:
        quote, name = m.group(1), m.group(2)
        return f"{quote}.{resolve(name)}{quote}"

    return SELECTOR_LITERAL_RE.sub(repl, code)


def rewrite_classlist_calls(code: str, resolve: Callable[[str], str]) -> str:
    # only literal arguments; classList.add(name) or classList.replace(...) stay as-is
    def repl(m: re.Match) -> str:
        method, name = m.group(1), m.group(2)
        return f"classList.{method}('{resolve(name)}')"

    return CLASSLIST_CALL_RE.sub(repl, code)


def rewrite_id_lookups(code: str, resolve: Callable[[str], str]) -> str:
    """Turn getElementById('some-id') into a class query.

    Hyphenated ids are assumed to be class-like hooks; ids without a hyphen
    are taken to be real element ids and left alone.
    """
    def repl(m: re.Match) -> str:
        ident = m.group(1)
        if '-' not in ident:
            return m.group(0)
        return f"querySelector('.{resolve(ident)}')"

    return GET_BY_ID_RE.sub(repl, code)


def rewrite_script(code: str, resolve: Callable[[str], str]) -> str:
    code = rewrite_selector_literals(code, resolve)
    code = rewrite_classlist_calls(code, resolve)
    code = rewrite_id_lookups(code, resolve)
    return code
