"""
Pytest fixtures for article tests.
"""

import textwrap
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app import config
from app.main import app


def _make_article(title=None, slug=None, date=None, image=None, body="Body text.", extra=None) -> str:
    """Build the text of an article source file."""
    lines = ["---"]
    for key, value in (("title", title), ("slug", slug), ("date", date), ("image", image)):
        if value is not None:
            lines.append(f"{key}: {value}")
    for key, value in (extra or {}).items():
        lines.append(f"{key}: {value}")
    lines.append("---")
    lines.append(textwrap.dedent(body))
    return "\n".join(lines)


@pytest.fixture
def articles_dir(tmp_path):
    """Create an empty article directory."""
    directory = tmp_path / "articles"
    directory.mkdir()
    return directory


@pytest.fixture
def write_article(articles_dir):
    """Return a helper that writes an article file into articles_dir."""
    def _write(filename: str, text: str = None, **fields) -> Path:
        path = articles_dir / filename
        path.write_text(text if text is not None else _make_article(**fields), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def sample_articles(write_article):
    """Two valid articles: hello (2023-01-01) and world (2023-06-01)."""
    a = write_article("a.md", title="Hello", slug="hello", date="2023-01-01", body="# Hello\n\nFirst *post*.")
    b = write_article("b.md", title="World", slug="world", date="2023-06-01", body="Second post.")
    return a, b


@pytest.fixture
def client(articles_dir, monkeypatch):
    """Create a test client serving articles from articles_dir."""
    monkeypatch.setattr(config, "ARTICLES_DIR", articles_dir)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def make_article():
    """Return the article text builder."""
    return _make_article
