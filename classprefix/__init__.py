"""Build-time CSS class namespacing for markup, scripts and stylesheets."""

from .config import BuildConfig, load_config
from .manifest import AssetManifestEntry, load_manifest, parse_manifest
from .markup import resolve_asset_path, rewrite_class_attributes
from .registry import IdentifierRegistry
from .runtime import RuntimeNaming
from .script import rewrite_script
from .session import BuildPhaseError, BuildSession, Phase, run_build
from .style import rewrite_stylesheet

__all__ = [
    'AssetManifestEntry',
    'BuildConfig',
    'BuildPhaseError',
    'BuildSession',
    'IdentifierRegistry',
    'Phase',
    'RuntimeNaming',
    'load_config',
    'load_manifest',
    'parse_manifest',
    'resolve_asset_path',
    'rewrite_class_attributes',
    'rewrite_script',
    'rewrite_stylesheet',
    'run_build',
]
