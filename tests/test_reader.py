"""
Tests for the source reader.
"""

import pytest

from app.errors import ArticleIOError
from app.services.reader import list_candidates, read_raw


class TestListCandidates:
    """Tests for list_candidates."""

    @pytest.mark.asyncio
    async def test_keeps_only_markdown_files(self, articles_dir, write_article):
        """Should skip other extensions and subdirectories."""
        write_article("a.md", title="A")
        write_article("b.md", title="B")
        (articles_dir / "notes.txt").write_text("not an article")
        (articles_dir / "README.MD").write_text("wrong case")
        (articles_dir / "img").mkdir()
        (articles_dir / "img" / "c.md").write_text("nested")
        (articles_dir / "folder.md").mkdir()

        candidates = await list_candidates(articles_dir)

        assert sorted(path.name for path in candidates) == ["a.md", "b.md"]
        assert all(path.parent == articles_dir for path in candidates)

    @pytest.mark.asyncio
    async def test_empty_directory(self, articles_dir):
        assert await list_candidates(articles_dir) == []

    @pytest.mark.asyncio
    async def test_accepts_string_paths(self, articles_dir, write_article):
        write_article("a.md", title="A")
        candidates = await list_candidates(str(articles_dir))
        assert [path.name for path in candidates] == ["a.md"]

    @pytest.mark.asyncio
    async def test_missing_directory(self, tmp_path):
        """Should raise ArticleIOError for a directory that does not exist."""
        missing = tmp_path / "missing"
        with pytest.raises(ArticleIOError) as exc_info:
            await list_candidates(missing)
        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value.__cause__, OSError)


class TestReadRaw:
    """Tests for read_raw."""

    @pytest.mark.asyncio
    async def test_reads_bytes(self, write_article):
        path = write_article("a.md", text="---\ntitle: Ágæt grein\n---\nBody\n")
        assert await read_raw(path) == "---\ntitle: Ágæt grein\n---\nBody\n".encode("utf-8")

    @pytest.mark.asyncio
    async def test_missing_file(self, articles_dir):
        """Should raise ArticleIOError for a file removed after listing."""
        path = articles_dir / "gone.md"
        with pytest.raises(ArticleIOError) as exc_info:
            await read_raw(path)
        assert exc_info.value.path == str(path)
