"""Root test configuration: run each test from a scratch working directory"""

import pytest


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep config.yaml lookups and DOCSTORE_* env vars from leaking between tests."""
    monkeypatch.chdir(tmp_path)
    for name in ("APP_NAME", "DOCUMENTS_FILE", "OUTPUT_FORMAT", "LOG_LEVEL"):
        monkeypatch.delenv(f"DOCSTORE_{name}", raising=False)
