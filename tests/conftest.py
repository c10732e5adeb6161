# tests/conftest.py
# Test setup: per-test settings with the template cache under tmp_path.

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure repo root on sys.path so "import resume_generator" works
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from resume_generator.config import PACKAGE_DIR, Settings  # noqa: E402
from resume_generator.container import Container  # noqa: E402
from resume_generator.main import create_app  # noqa: E402


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(
        templates_dir=PACKAGE_DIR / "templates",
        cache_dir=tmp_path / "cache" / "jinja",
        script_name="",
        display_error_details=True,
    )


@pytest.fixture()
def container(settings: Settings) -> Container:
    return Container(settings)


@pytest.fixture()
def client(container: Container):
    with TestClient(create_app(container=container)) as c:
        yield c
