from pathlib import Path

import pytest

from speciescatalog.system.path_resolver import PathResolver


@pytest.fixture
def path_resolver(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> PathResolver:
    """Provide a PathResolver rooted in a temporary data directory."""
    monkeypatch.delenv("SPECIESCATALOG_CONFIG", raising=False)
    data_dir = tmp_path / "speciescatalog"
    data_dir.mkdir()

    resolver = PathResolver()
    resolver.data_dir = data_dir
    return resolver
