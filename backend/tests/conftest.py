import zipfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from bepinex_installer.main import app


@pytest.fixture
def client():
    with TestClient(app, raise_server_exceptions=False) as tc:
        yield tc


@pytest.fixture
def make_zip():
    def _make(path: Path, files: dict[str, bytes]) -> Path:
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_STORED) as zf:
            for name, content in files.items():
                zf.writestr(name, content)
        return path

    return _make
