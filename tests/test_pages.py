"""Tests for the static bundle and SPA fallback."""

from api.pages.controllers.pages_controller import find_asset, is_api_route
from conftest import INDEX_HTML


class TestServePage:
    def test_root_serves_index(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.text == INDEX_HTML
        assert response.headers["content-type"].startswith("text/html")

    def test_existing_asset_served_as_is(self, client):
        response = client.get("/assets/app.js")

        assert response.status_code == 200
        assert response.text == "console.log('drop');"

    def test_client_route_falls_back_to_index(self, client):
        response = client.get("/files/recent/report.txt")

        assert response.status_code == 200
        assert response.text == INDEX_HTML

    def test_directory_serves_its_index(self, client, static_dir):
        (static_dir / "docs").mkdir()
        (static_dir / "docs" / "index.html").write_text("docs")

        assert client.get("/docs/").text == "docs"

    def test_unknown_api_route_is_not_rewritten(self, client):
        response = client.get("/api/unknown")

        assert response.status_code == 404

    def test_missing_index(self, client, static_dir):
        (static_dir / "index.html").unlink()

        assert client.get("/").status_code == 404
        assert client.get("/deep/link").status_code == 404
        assert client.get("/assets/app.js").status_code == 200


def test_is_api_route():
    assert is_api_route("/api/files")
    assert is_api_route("/api")
    assert not is_api_route("/")
    assert not is_api_route("/settings/api")


def test_find_asset_stays_inside_bundle(static_dir, tmp_path):
    (tmp_path / "secret.txt").write_text("secret")

    assert find_asset(static_dir, "../secret.txt") is None
    assert find_asset(static_dir, "assets/app.js") == (static_dir / "assets" / "app.js").resolve()
    assert find_asset(static_dir, "") == static_dir / "index.html"
