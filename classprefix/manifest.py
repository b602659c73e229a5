from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Union


CHUNK_SUFFIXES = ('.js', '.mjs')


@dataclass(frozen=True)
class AssetManifestEntry:
    emitted_key: str
    kind: str
    original_reference: str = ''


def _original_of(meta: dict) -> str:
    if meta.get('originalFileName'):
        return str(meta['originalFileName'])
    names = meta.get('originalFileNames') or []
    if names:
        return str(names[0])
    return str(meta.get('src') or meta.get('name') or '')


def parse_manifest(data: Union[dict, list, None]) -> List[AssetManifestEntry]:
    """Normalize a bundler manifest into a list of entries.

    Accepts the bundle shape (`{fileName: {"type": "asset", ...}}`), a Vite
    `manifest.json` (`{src: {"file": "assets/x-hash.png", ...}}`), or an
    already flat list of `{"key", "kind"}` dicts. Unknown shapes give `[]`.
    """
    entries: List[AssetManifestEntry] = []
    if isinstance(data, list):
        for item in data:
            if not isinstance(item, dict) or not item.get('key'):
                continue
            entries.append(AssetManifestEntry(
                str(item['key']),
                str(item.get('kind') or item.get('type') or ''),
                _original_of(item),
            ))
        return entries
    if not isinstance(data, dict):
        return entries
    for key, meta in data.items():
        if not isinstance(meta, dict):
            continue
        kind = meta.get('type') or meta.get('kind')
        if kind:
            entries.append(AssetManifestEntry(str(key), str(kind), _original_of(meta)))
        elif meta.get('file'):
            emitted = str(meta['file'])
            kind = 'chunk' if emitted.endswith(CHUNK_SUFFIXES) else 'asset'
            entries.append(AssetManifestEntry(emitted, kind, str(meta.get('src') or key)))
    return entries


def load_manifest(path: Union[str, Path, None]) -> List[AssetManifestEntry]:
    if not path:
        return []
    p = Path(path)
    if not p.exists():
        print(f"[MANIFEST] not found: {p} (asset paths left as-is)")
        return []
    try:
        data = json.loads(p.read_text(encoding='utf-8'))
    except (OSError, ValueError) as e:
        print(f"[MANIFEST] unreadable: {p}: {e} (asset paths left as-is)")
        return []
    return parse_manifest(data)


def find_asset(entries: Iterable[AssetManifestEntry], marker: str) -> Optional[AssetManifestEntry]:
    for entry in entries:
        if entry.kind == 'asset' and marker in entry.emitted_key:
            return entry
    return None
