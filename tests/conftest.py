"""Root test configuration: isolate each test from config.yaml and MDFIX_* env vars"""

import pytest

from mdfix.config import Settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test from an empty tmp dir with no MDFIX_ overrides in the environment."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"MDFIX_{name.upper()}", raising=False)
