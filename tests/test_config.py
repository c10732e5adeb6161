import importlib

import pytest
from pydantic import ValidationError

from resume_generator import config


def test_port_from_env_is_coerced(monkeypatch):
    monkeypatch.setenv("PORT", "9001")
    try:
        reloaded = importlib.reload(config)
        assert reloaded.Settings().port == 9001
    finally:
        monkeypatch.undo()
        importlib.reload(config)


def test_bad_port_from_env_raises_validation_error(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    try:
        reloaded = importlib.reload(config)
        with pytest.raises(ValidationError):
            reloaded.Settings()
    finally:
        monkeypatch.undo()
        importlib.reload(config)
