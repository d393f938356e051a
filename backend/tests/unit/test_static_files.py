"""
Dashboard static files tests
"""

from pathlib import Path

import pytest

from gamelayer_proxy.api.static import FALLBACK_MIME_TYPE, DashboardStaticFiles, guess_mime_type
from gamelayer_proxy.common.errors import NotFoundError


def scope_for(path: str, method: str = "GET") -> dict:
    return {"type": "http", "method": method, "path": path, "headers": []}


@pytest.fixture
def root(tmp_path):
    (tmp_path / "site").mkdir()
    site = tmp_path / "site"
    (site / "index.html").write_text("home")
    (site / "about.html").write_text("about")
    (site / "guide").mkdir()
    (site / "guide" / "index.html").write_text("guide")
    (site / "app.js").write_text("console.log(1)")
    return site


@pytest.fixture
def static(root):
    return DashboardStaticFiles(directory=root, html=True)


def served(response) -> Path:
    return Path(response.path).resolve()


@pytest.mark.asyncio
async def test_root_maps_to_index(static, root):
    response = await static.get_response(".", scope_for("/"))
    assert served(response) == (root / "index.html").resolve()
    assert response.media_type == "text/html"


@pytest.mark.asyncio
async def test_exact_file(static, root):
    response = await static.get_response("app.js", scope_for("/app.js"))
    assert served(response) == (root / "app.js").resolve()
    assert response.media_type == "application/javascript"


@pytest.mark.asyncio
async def test_html_extension_tried_first(static, root):
    (root / "guide.html").write_text("guide page")

    response = await static.get_response("guide", scope_for("/guide"))

    assert served(response) == (root / "guide.html").resolve()


@pytest.mark.asyncio
async def test_directory_index_without_redirect(static, root):
    response = await static.get_response("guide", scope_for("/guide"))

    assert response.status_code == 200
    assert served(response) == (root / "guide" / "index.html").resolve()


@pytest.mark.asyncio
async def test_any_method_reads_the_file(static, root):
    response = await static.get_response("about", scope_for("/about", method="POST"))
    assert served(response) == (root / "about.html").resolve()


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["nope", "nope.css", "../secret.txt"])
async def test_missing_or_outside_root(static, root, path):
    (root.parent / "secret.txt").write_text("secret")

    with pytest.raises(NotFoundError):
        await static.get_response(path, scope_for("/" + path))


@pytest.mark.asyncio
async def test_directory_without_index(static, root):
    (root / "empty").mkdir()

    with pytest.raises(NotFoundError):
        await static.get_response("empty", scope_for("/empty"))


@pytest.mark.parametrize(
    "name, expected",
    [
        ("index.html", "text/html"),
        ("app.JS", "application/javascript"),
        ("data.json", "application/json"),
        ("logo.svg", "image/svg+xml"),
        ("photo.jpg", "image/jpeg"),
        ("favicon.ico", "image/x-icon"),
        ("archive.unknownext", FALLBACK_MIME_TYPE),
    ],
)
def test_guess_mime_type(name, expected):
    assert guess_mime_type(Path(name)) == expected
