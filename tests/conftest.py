"""Global test configuration for oxshare tests."""

import pytest


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch):
    """Keep host OXSHARE_/LOG_ variables from leaking into Settings()."""
    for var in ["OXSHARE_CHUNK_SIZE", "LOG_FORMAT", "LOG_LEVEL", "NO_COLOR"]:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def sample_payload():
    """Deterministic payload spanning several 16-byte chunks with a short tail."""
    return bytes(range(256)) * 3 + b"tail-bytes"


@pytest.fixture
def cli_runner():
    """Provide a typer CLI runner."""
    from typer.testing import CliRunner

    return CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run inside an empty directory so no .oxshare.* or .env file is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
