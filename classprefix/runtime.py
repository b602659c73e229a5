from __future__ import annotations

import json
import re
from dataclasses import dataclass


HEAD_OPEN_RE = re.compile(r"(<head\b[^>]*>)", re.I)
RUNTIME_GLOBAL = '__classNames'


@dataclass(frozen=True)
class RuntimeNaming:
    """Class naming for the page's runtime script.

    One runtime source reads `window.__classNames` instead of shipping a
    prefixed and an unprefixed copy. An empty prefix is the development
    behaviour; the runtime falls back to it when the global is absent.
    """
    prefix: str = ''

    def render_script(self) -> str:
        p = json.dumps(self.prefix)
        return (
            f'<script>window.{RUNTIME_GLOBAL}={{prefix:{p},'
            f'cls:function(n){{return {p}+n}},'
            f'sel:function(n){{return "."+{p}+n}}}};</script>'
        )


def inject_runtime_naming(html: str, naming: RuntimeNaming) -> str:
    # must run before any module script, so right after <head ...>
    if f"window.{RUNTIME_GLOBAL}=" in html:
        return html
    tag = naming.render_script()
    out, n = HEAD_OPEN_RE.subn(lambda m: m.group(1) + '\n    ' + tag, html, count=1)
    if n:
        return out
    return tag + '\n' + html
