import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

ENV_VARS = (
    'CLASS_PREFIX', 'BASE_URL', 'BUILD_MODE',
    'OG_IMAGE_MARKER', 'OG_IMAGE_PATH', 'INJECT_RUNTIME_NAMING',
)


@pytest.fixture
def clean_env(monkeypatch):
    """Unset config variables and restore them (or their absence) afterwards."""
    for name in ENV_VARS:
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    return monkeypatch
