from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional

from .config import BuildConfig
from .manifest import AssetManifestEntry
from .markup import resolve_asset_path, rewrite_class_attributes
from .registry import IdentifierRegistry
from .runtime import RuntimeNaming, inject_runtime_naming
from .script import rewrite_script
from .style import rewrite_stylesheet


SCRIPT_SUFFIX = '.js'
STYLE_SUFFIX = '.css'


class Phase(Enum):
    CONFIGURING = 'configuring'
    MODULE_TRANSFORMING = 'module-transforming'
    BUNDLED = 'bundled'
    MARKUP_POST_PROCESSING = 'markup-post-processing'
    DONE = 'done'


class BuildPhaseError(RuntimeError):
    """A hook was called out of order by the build host."""


class BuildSession:
    """State for one build: one config, one registry.

    Hosts call `transform_module` for every script/stylesheet during module
    processing, then `bundled(manifest)` once the bundle is written, then
    `finalize_markup(html)` exactly once. Concurrent builds each need their
    own session.
    """

    def __init__(self, config: Optional[BuildConfig] = None):
        self.phase = Phase.CONFIGURING
        self.config = config or BuildConfig()
        self.registry = IdentifierRegistry(self.config.prefix)
        self.manifest: List[AssetManifestEntry] = []
        self.stats = {'scripts': 0, 'styles': 0, 'skipped': 0}

    @property
    def enabled(self) -> bool:
        return self.config.enabled

    def resolve(self, raw: str) -> str:
        return self.registry.resolve(raw)

    def _require(self, *allowed: Phase, action: str):
        if self.phase not in allowed:
            raise BuildPhaseError(f"cannot {action} while {self.phase.value}")

    # -- module phase -------------------------------------------------------

    def transform_module(self, code: str, module_id: str) -> str:
        self._require(Phase.CONFIGURING, Phase.MODULE_TRANSFORMING, action='transform a module')
        self.phase = Phase.MODULE_TRANSFORMING
        if not self.enabled:
            self.stats['skipped'] += 1
            return code
        if module_id.endswith(SCRIPT_SUFFIX):
            self.stats['scripts'] += 1
            return rewrite_script(code, self.resolve)
        if module_id.endswith(STYLE_SUFFIX):
            self.stats['styles'] += 1
            return rewrite_stylesheet(code, self.resolve)
        self.stats['skipped'] += 1
        return code

    # -- post-bundle phase --------------------------------------------------

    def bundled(self, manifest: Iterable[AssetManifestEntry] = ()):
        self._require(Phase.CONFIGURING, Phase.MODULE_TRANSFORMING, action='mark the build bundled')
        self.manifest = list(manifest)
        self.phase = Phase.BUNDLED

    def finalize_markup(self, html: str) -> str:
        self._require(Phase.BUNDLED, action='finalize markup')
        self.phase = Phase.MARKUP_POST_PROCESSING
        if self.enabled:
            html = rewrite_class_attributes(html, self.resolve)
            html = resolve_asset_path(
                html, self.manifest, self.config.base_url,
                marker=self.config.og_marker, original=self.config.og_path,
            )
            if self.config.inject_runtime:
                html = inject_runtime_naming(html, self.runtime_naming())
        self.phase = Phase.DONE
        return html

    def runtime_naming(self) -> RuntimeNaming:
        return RuntimeNaming(self.config.prefix if self.enabled else '')

    def class_map(self) -> dict:
        return self.registry.mapping()


def run_build(
    config: BuildConfig,
    modules: Iterable[tuple],
    html: str,
    manifest: Iterable[AssetManifestEntry] = (),
):
    """Drive one complete build: modules first, then the markup finalize step.

    `modules` yields `(module_id, code)` pairs; returns
    `(transformed modules, final html, session)`.
    """
    session = BuildSession(config)
    out = [(module_id, session.transform_module(code, module_id)) for module_id, code in modules]
    session.bundled(manifest)
    final_html = session.finalize_markup(html)
    return out, final_html, session
