"""
Tests for the markup pass, manifest loading and runtime naming.

Run with: pytest tests/test_markup.py -v
"""

import json

from classprefix.manifest import AssetManifestEntry, find_asset, load_manifest, parse_manifest
from classprefix.markup import resolve_asset_path, rewrite_class_attributes
from classprefix.registry import IdentifierRegistry
from classprefix.runtime import RuntimeNaming, inject_runtime_naming


OG_HTML = '<meta property="og:image" content="./assets/og-image.png">'


def rewrite(html, prefix='dwp-'):
    return rewrite_class_attributes(html, IdentifierRegistry(prefix).resolve)


class TestClassAttributes:

    def test_tokens_prefixed_in_order(self):
        html = '<div class="feature-card icon">'
        assert rewrite(html) == '<div class="dwp-feature-card dwp-icon">'

    def test_extra_whitespace_dropped(self):
        assert rewrite('<p class="  a   b ">') == '<p class="dwp-a dwp-b">'

    def test_other_attributes_untouched(self):
        html = '<a id="cta" href="#form" class="btn" title="a b">Go</a>'
        assert rewrite(html) == '<a id="cta" href="#form" class="dwp-btn" title="a b">Go</a>'

    def test_suffix_attribute_also_matches(self):
        """The pattern has no left boundary, so data-class="..." is rewritten too."""
        assert rewrite('<i data-class="x">') == '<i data-class="dwp-x">'

    def test_single_quoted_not_matched(self):
        html = "<div class='card'></div>"
        assert rewrite(html) == html


class TestAssetPath:

    def test_resolved_from_manifest(self):
        entries = [AssetManifestEntry('assets/og-image-ABC123.png', 'asset')]
        out = resolve_asset_path(OG_HTML, entries, '/app/')
        assert out == '<meta property="og:image" content="/app/assets/og-image-ABC123.png">'

    def test_empty_manifest_leaves_tag(self):
        assert resolve_asset_path(OG_HTML, [], '/app/') == OG_HTML

    def test_chunk_entry_ignored(self):
        entries = [AssetManifestEntry('assets/og-image-loader.js', 'chunk')]
        assert resolve_asset_path(OG_HTML, entries, '/') == OG_HTML

    def test_custom_marker_and_path(self):
        html = '<meta name="twitter:image" content="img/card.jpg">'
        entries = [AssetManifestEntry('assets/card-9f8e.jpg', 'asset')]
        out = resolve_asset_path(html, entries, 'https://cdn.example.com/', marker='card', original='img/card.jpg')
        assert out == '<meta name="twitter:image" content="https://cdn.example.com/assets/card-9f8e.jpg">'


class TestManifest:

    def test_bundle_shape(self):
        entries = parse_manifest({
            'assets/og-image-ABC123.png': {'type': 'asset', 'originalFileNames': ['assets/og-image.png']},
            'assets/main-1a2b.js': {'type': 'chunk', 'name': 'main'},
        })
        assert AssetManifestEntry('assets/og-image-ABC123.png', 'asset', 'assets/og-image.png') in entries
        assert find_asset(entries, 'og-image').emitted_key == 'assets/og-image-ABC123.png'

    def test_vite_manifest_shape(self):
        entries = parse_manifest({
            'index.html': {'file': 'assets/index-1a2b.js', 'isEntry': True},
            'assets/og-image.png': {'file': 'assets/og-image-ABC123.png', 'src': 'assets/og-image.png'},
        })
        kinds = {e.emitted_key: e.kind for e in entries}
        assert kinds == {'assets/index-1a2b.js': 'chunk', 'assets/og-image-ABC123.png': 'asset'}

    def test_flat_list(self):
        entries = parse_manifest([{'key': 'assets/og-image-X.png', 'kind': 'asset'}, {'kind': 'asset'}])
        assert entries == [AssetManifestEntry('assets/og-image-X.png', 'asset', '')]

    def test_unknown_shape(self):
        assert parse_manifest('nope') == []
        assert parse_manifest(None) == []

    def test_load_missing_file(self, tmp_path, capsys):
        assert load_manifest(tmp_path / 'missing.json') == []
        assert '[MANIFEST]' in capsys.readouterr().out

    def test_load_invalid_json(self, tmp_path):
        p = tmp_path / 'manifest.json'
        p.write_text('{not json', encoding='utf-8')
        assert load_manifest(p) == []

    def test_load_file(self, tmp_path):
        p = tmp_path / 'manifest.json'
        p.write_text(json.dumps({'assets/og-image-Z.png': {'type': 'asset'}}), encoding='utf-8')
        assert load_manifest(p) == [AssetManifestEntry('assets/og-image-Z.png', 'asset', '')]


class TestRuntimeNaming:

    def test_script_carries_prefix(self):
        script = RuntimeNaming('dwp-').render_script()
        assert script.startswith('<script>window.__classNames={prefix:"dwp-",')
        assert 'cls:function(n){return "dwp-"+n}' in script
        assert 'sel:function(n){return "."+"dwp-"+n}' in script

    def test_unprefixed(self):
        assert '{prefix:"",' in RuntimeNaming().render_script()

    def test_injected_after_head(self):
        html = '<html><head><title>x</title></head><body><header></header></body></html>'
        out = inject_runtime_naming(html, RuntimeNaming('dwp-'))
        assert out.startswith('<html><head>\n    <script>window.__classNames={prefix:"dwp-",')
        assert out.count('<script>') == 1
        assert inject_runtime_naming(out, RuntimeNaming('dwp-')) == out

    def test_without_head(self):
        out = inject_runtime_naming('<header>x</header>', RuntimeNaming('p-'))
        assert out.endswith('\n<header>x</header>')
        assert out.startswith('<script>window.__classNames=')
