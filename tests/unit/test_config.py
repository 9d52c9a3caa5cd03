
import pytest
from pydantic import ValidationError

from core.config import Settings

def test_defaults():
    cfg = Settings(_env_file=None)
    assert cfg.index_name == "index.html"
    assert cfg.description_placeholder == "Descripción no disponible"
    assert cfg.description_limit == 160

def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MKINDEX_DESCRIPTION_PLACEHOLDER", "No description")
    monkeypatch.setenv("MKINDEX_LOG_LEVEL", "DEBUG")
    cfg = Settings(_env_file=None)
    assert cfg.description_placeholder == "No description"
    assert cfg.log_level == "DEBUG"

def test_ellipsis_must_be_shorter_than_limit(monkeypatch):
    monkeypatch.setenv("MKINDEX_ELLIPSIS", "." * 10)
    with pytest.raises(ValidationError):
        Settings(_env_file=None, description_limit=10)
    assert Settings(_env_file=None, description_limit=11).ellipsis == "." * 10

def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("MKINDEX_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)

@pytest.mark.parametrize("limit", [3, 161])
def test_description_limit_is_bounded(limit):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, description_limit=limit)
