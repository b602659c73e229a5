from __future__ import annotations

import re
from typing import Callable, Iterable, Optional, Tuple

from .manifest import AssetManifestEntry, find_asset


# double-quoted only; class='a b' is a known miss (see audit.py)
CLASS_ATTR_RE = re.compile(r'class="([^"]+)"')

OG_IMAGE_MARKER = 'og-image'
OG_IMAGE_PATH = './assets/og-image.png'


def rewrite_class_attributes(html: str, resolve: Callable[[str], str]) -> str:
    def repl(m: re.Match) -> str:
        tokens = [resolve(c) for c in m.group(1).split() if c]
        return 'class="' + ' '.join(tokens) + '"'

    return CLASS_ATTR_RE.sub(repl, html)


def replace_content_path(html: str, original: str, final_url: str) -> Tuple[str, int]:
    patt = re.compile(r'(\bcontent=")' + re.escape(original) + r'(")')
    return patt.subn(lambda m: m.group(1) + final_url + m.group(2), html)


def resolve_asset_path(
    html: str,
    entries: Iterable[AssetManifestEntry],
    base_url: str = '/',
    marker: str = OG_IMAGE_MARKER,
    original: str = OG_IMAGE_PATH,
) -> str:
    """Point the social-preview meta tag at the emitted (hashed) asset.

    Nothing happens when the manifest has no matching asset entry.
    """
    entry: Optional[AssetManifestEntry] = find_asset(entries, marker)
    if entry is None:
        return html
    out, _ = replace_content_path(html, original, f"{base_url}{entry.emitted_key}")
    return out
