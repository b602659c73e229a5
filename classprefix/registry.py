from __future__ import annotations

from typing import Dict


# letter, then letters/digits/underscore/hyphen
IDENTIFIER = r"[a-zA-Z][\w-]*"

DEFAULT_PREFIX = 'dwp-'


class IdentifierRegistry:
    """Per-build map from raw class names to prefixed ones.

    The first lookup of a name stores ``prefix + name``; every later lookup
    returns that stored string object, so markup, script and stylesheet
    passes agree on the final name. Not thread-safe: one registry per build.
    """

    def __init__(self, prefix: str = DEFAULT_PREFIX):
        self.prefix = prefix
        self._table: Dict[str, str] = {}

    def resolve(self, raw: str) -> str:
        if raw not in self._table:
            self._table[raw] = f"{self.prefix}{raw}"
        return self._table[raw]

    __call__ = resolve

    def mapping(self) -> Dict[str, str]:
        return dict(self._table)

    def __contains__(self, raw: str) -> bool:
        return raw in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self):
        return f"<IdentifierRegistry prefix={self.prefix!r} size={len(self._table)}>"
