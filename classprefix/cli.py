#!/usr/bin/env python3
"""
Apply the class prefix to an emitted build directory.

Plays the bundler's part for files that are already on disk: every script
and stylesheet goes through the module phase, then the manifest is loaded
and the document is finalized.

  python prefix_build.py --root dist --base-url /app/

Flags (CLI > env > default):
  --prefix           Class prefix (env CLASS_PREFIX, default dwp-)
  --base-url         Public base URL for emitted assets (env BASE_URL, default /)
  --mode             development | production (env BUILD_MODE)
  --manifest         Bundler manifest JSON (default: <root>/.vite/manifest.json or <root>/manifest.json)
  --inject-runtime   Publish window.__classNames for the runtime script (env INJECT_RUNTIME_NAMING=true)
  --backup           Write .bak copies before modifying files
  --dry-run          Report only

A production run writes class_prefix_map.json into --root. A directory that
already has one is skipped, so rerunning never prefixes twice.
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List, Optional

from .config import MODES, load_config
from .manifest import load_manifest
from .session import SCRIPT_SUFFIX, STYLE_SUFFIX, BuildSession


MANIFEST_CANDIDATES = ('.vite/manifest.json', 'manifest.json')
CLASS_MAP_NAME = 'class_prefix_map.json'


def parse_args(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description='Namespace CSS classes across HTML, JS and CSS of a built site.')
    p.add_argument('--root', required=True, help='Build output directory containing the document, scripts and stylesheets')
    p.add_argument('--html', default='index.html', help='Document to finalize, relative to --root (default: index.html)')
    p.add_argument('--manifest', help='Bundler manifest JSON')
    p.add_argument('--prefix', help='Class prefix (fallback: env CLASS_PREFIX)')
    p.add_argument('--base-url', dest='base_url', help='Base URL for emitted assets (fallback: env BASE_URL)')
    p.add_argument('--mode', choices=MODES, help='Build mode (fallback: env BUILD_MODE)')
    p.add_argument('--env-file', dest='env_file', help='Explicit .env path')
    p.add_argument('--inject-runtime', dest='inject_runtime', action='store_true', default=None, help='Inject runtime class naming into the document')
    p.add_argument('--backup', action='store_true', help='Write .bak backups when modifying files')
    p.add_argument('--dry-run', action='store_true', help='Do not modify files')
    return p.parse_args(argv)


def find_manifest(root: Path, explicit: Optional[str]) -> Optional[Path]:
    if explicit:
        return Path(explicit)
    for rel in MANIFEST_CANDIDATES:
        cand = root / rel
        if cand.exists():
            return cand
    return None


def module_files(root: Path) -> List[Path]:
    files = [p for p in root.glob('**/*') if p.is_file() and p.suffix in (SCRIPT_SUFFIX, STYLE_SUFFIX)]
    return sorted(files)


def write_text(path: Path, new: str, old: str, backup: bool) -> bool:
    if new == old:
        return False
    if backup:
        bak = path.with_suffix(path.suffix + '.bak')
        if not bak.exists():
            bak.write_text(old, encoding='utf-8')
    path.write_text(new, encoding='utf-8')
    return True


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    root = Path(args.root)
    html_path = root / args.html
    if not html_path.exists():
        raise SystemExit(f'{args.html} not found under {root}')

    config = load_config(
        args.env_file,
        prefix=args.prefix,
        base_url=args.base_url,
        mode=args.mode,
        inject_runtime=args.inject_runtime,
    )

    if not config.known_mode:
        print(f"[PREFIX] Unknown mode {config.mode!r} (expected {' | '.join(MODES)}): files pass through unchanged")
    if not config.prefix:
        print('[PREFIX] Empty prefix: files pass through unchanged')
    print(f"[PREFIX] mode={config.mode} prefix={config.prefix!r} base_url={config.base_url!r}")

    # the class map doubles as the "already prefixed" marker
    class_map_path = root / CLASS_MAP_NAME
    if config.enabled and class_map_path.exists():
        print(f"[PREFIX] Skip: {class_map_path} exists, {root} was already prefixed")
        return None

    session = BuildSession(config)
    changed = 0
    for path in module_files(root):
        src = path.read_text(encoding='utf-8', errors='ignore')
        out = session.transform_module(src, path.name)
        if out == src:
            continue
        changed += 1
        if not args.dry_run:
            write_text(path, out, src, args.backup)

    manifest_path = find_manifest(root, args.manifest)
    entries = load_manifest(manifest_path)
    if manifest_path:
        print(f"[MANIFEST] {manifest_path}: {len(entries)} entries")
    session.bundled(entries)

    html = html_path.read_text(encoding='utf-8', errors='ignore')
    final_html = session.finalize_markup(html)
    html_changed = final_html != html
    if html_changed and not args.dry_run:
        write_text(html_path, final_html, html, args.backup)

    if session.enabled and not args.dry_run:
        class_map_path.write_text(json.dumps(session.class_map(), ensure_ascii=False, indent=2, sort_keys=True), encoding='utf-8')
        print(f"[PREFIX] Class map: {class_map_path}")

    verb = 'would change' if args.dry_run else 'changed'
    print(
        f"[PREFIX] {verb} {changed} module(s) "
        f"(scripts={session.stats['scripts']}, styles={session.stats['styles']}); "
        f"document {'updated' if html_changed else 'unchanged'}; classes={len(session.registry)}"
    )
    return session


if __name__ == '__main__':
    main()
