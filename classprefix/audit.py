#!/usr/bin/env python3
"""
Report class references the prefix pass could not reach.

The rewrite passes are literal text patterns, so some references are missed
by construction: single-quoted class attributes, classList calls with a
computed argument or an unsupported method, className assignments. This
audit parses the final markup with BeautifulSoup and scans scripts for those
shapes. It only reports; files are never modified.

  python -m classprefix.audit --root dist --prefix dwp-
"""
from __future__ import annotations

import argparse
import json
import os
import re
from pathlib import Path
from typing import Dict, List

from bs4 import BeautifulSoup
from dotenv import load_dotenv

from .registry import DEFAULT_PREFIX
from .script import CLASSLIST_METHODS


CLASSLIST_ANY_RE = re.compile(r"classList\.(\w+)\(([^)]*)\)")
LITERAL_ARG_RE = re.compile(r"^\s*(['\"`])[^'\"`]+\1\s*$")
CLASSNAME_ASSIGN_RE = re.compile(r"^.*\.className\s*\+?=(?!=).*$", re.M)


def _element_path(tag) -> str:
    parts = []
    for node in [tag, *tag.parents]:
        if node.name in (None, '[document]'):
            continue
        seg = node.name
        if node.get('id'):
            seg += f"#{node['id']}"
        parts.append(seg)
    return '/' + '/'.join(reversed(parts))


def audit_markup(html: str, prefix: str) -> List[Dict[str, str]]:
    """Class tokens in the document that do not carry the prefix."""
    findings: List[Dict[str, str]] = []
    soup = BeautifulSoup(html, 'html.parser')
    for tag in soup.find_all(class_=True):
        for cls in tag.get('class', []):
            if cls and not cls.startswith(prefix):
                findings.append({'path': _element_path(tag), 'class': cls})
    return findings


def audit_script(code: str) -> List[Dict[str, str]]:
    findings: List[Dict[str, str]] = []
    for m in CLASSLIST_ANY_RE.finditer(code):
        method, arg = m.group(1), m.group(2)
        parts = arg.split(',')
        if method not in CLASSLIST_METHODS:
            findings.append({'kind': 'unsupported-method', 'snippet': m.group(0)})
        elif len(parts) > 1 and all(LITERAL_ARG_RE.match(p) for p in parts):
            findings.append({'kind': 'multiple-arguments', 'snippet': m.group(0)})
        elif not LITERAL_ARG_RE.match(arg):
            findings.append({'kind': 'computed-argument', 'snippet': m.group(0)})
    for m in CLASSNAME_ASSIGN_RE.finditer(code):
        findings.append({'kind': 'className-assignment', 'snippet': m.group(0).strip()})
    return findings


def audit_root(root: Path, prefix: str) -> dict:
    report: dict = {'prefix': prefix, 'markup': {}, 'scripts': {}}
    for html_path in sorted(root.glob('**/*.html')):
        text = html_path.read_text(encoding='utf-8', errors='ignore')
        found = audit_markup(text, prefix)
        if found:
            report['markup'][str(html_path.relative_to(root))] = found
    for js_path in sorted(root.glob('**/*.js')):
        text = js_path.read_text(encoding='utf-8', errors='ignore')
        found = audit_script(text)
        if found:
            report['scripts'][str(js_path.relative_to(root))] = found
    report['unprefixed_count'] = sum(len(v) for v in report['markup'].values())
    report['script_findings_count'] = sum(len(v) for v in report['scripts'].values())
    return report


def main():
    load_dotenv()
    ap = argparse.ArgumentParser(description='Report class references left unprefixed in a built site')
    ap.add_argument('--root', required=True, help='Build output directory (e.g., dist)')
    ap.add_argument('--prefix', default=os.getenv('CLASS_PREFIX', DEFAULT_PREFIX), help='Expected class prefix (fallback: env CLASS_PREFIX)')
    ap.add_argument('--out', help='Report path (default: <root>/class_prefix_audit.json)')
    args = ap.parse_args()

    root = Path(args.root)
    if not root.is_dir():
        raise SystemExit(f'Not a directory: {root}')

    report = audit_root(root, args.prefix)
    out = Path(args.out) if args.out else root / 'class_prefix_audit.json'
    out.write_text(json.dumps(report, ensure_ascii=False, indent=2), encoding='utf-8')
    print(f"[AUDIT] Report: {out} (unprefixed={report['unprefixed_count']}, script findings={report['script_findings_count']})")


if __name__ == '__main__':
    main()
