import pytest

from myMovies import settings


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "LOG_PATH", tmp_path / "log.txt")
    monkeypatch.setattr(settings, "DEBUG", True)
