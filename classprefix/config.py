from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv

from .markup import OG_IMAGE_MARKER, OG_IMAGE_PATH
from .registry import DEFAULT_PREFIX


MODES = ('development', 'production')


@dataclass(frozen=True)
class BuildConfig:
    prefix: str = DEFAULT_PREFIX
    base_url: str = '/'
    mode: str = 'production'
    og_marker: str = OG_IMAGE_MARKER
    og_path: str = OG_IMAGE_PATH
    inject_runtime: bool = False

    @property
    def known_mode(self) -> bool:
        return self.mode in MODES

    @property
    def enabled(self) -> bool:
        """Rewriting only happens for production builds with a non-empty prefix.

        An unknown mode (e.g. `staging`) is treated like development.
        """
        return self.mode == 'production' and bool(self.prefix)

    def with_overrides(self, **kw) -> 'BuildConfig':
        return replace(self, **{k: v for k, v in kw.items() if v is not None})


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).lower() == 'true'


def load_config(env_file: Optional[str] = None, **overrides) -> BuildConfig:
    """Resolve configuration: explicit overrides > environment (.env) > defaults."""
    load_dotenv(env_file)
    cfg = BuildConfig(
        prefix=os.getenv('CLASS_PREFIX', DEFAULT_PREFIX),
        base_url=os.getenv('BASE_URL', '/'),
        mode=os.getenv('BUILD_MODE', 'production').lower(),
        og_marker=os.getenv('OG_IMAGE_MARKER', OG_IMAGE_MARKER),
        og_path=os.getenv('OG_IMAGE_PATH', OG_IMAGE_PATH),
        inject_runtime=_env_flag('INJECT_RUNTIME_NAMING'),
    )
    return cfg.with_overrides(**overrides)
