import pytest
from fastapi.testclient import TestClient

from main import app
from storage import get_files_dir, get_static_dir

INDEX_HTML = "<!doctype html><div id=root></div>"


@pytest.fixture
def files_dir(tmp_path):
    path = tmp_path / "files"
    path.mkdir()
    return path


@pytest.fixture
def static_dir(tmp_path):
    path = tmp_path / "dist"
    (path / "assets").mkdir(parents=True)
    (path / "index.html").write_text(INDEX_HTML)
    (path / "assets" / "app.js").write_text("console.log('drop');")
    return path


@pytest.fixture
def client(files_dir, static_dir):
    app.dependency_overrides[get_files_dir] = lambda: files_dir
    app.dependency_overrides[get_static_dir] = lambda: static_dir
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def upload(client):
    def _upload(name: str, content: bytes):
        return client.post("/api/upload", files={"file": (name, content)})

    return _upload
