import pytest


@pytest.fixture(autouse=True)
def isolated_payback_env(tmp_path, monkeypatch):
    """Keep config and data out of the real home directory."""
    monkeypatch.setenv("PAYBACK_CONFIG", str(tmp_path / "payback_config.yaml"))
    monkeypatch.setenv("PAYBACK_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("PAYBACK_LOG_LEVEL", raising=False)
