import textwrap
from pathlib import Path

import pytest

from devdaze.repos.posts_repo import FilesystemPostsRepo


def make_post_text(
    slug: str,
    title: str = "Title",
    body: str = "Body text.",
    extra: str = "",
) -> str:
    """Build a content file with a minimal frontmatter block."""
    return (
        "---\n"
        f'title: "{title}"\n'
        "date: 2025-01-01T00:00:00Z\n"
        f'slug: "{slug}"\n'
        f"{extra}"
        "---\n"
        f"{body}\n"
    )


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    path = tmp_path / "content"
    path.mkdir()
    return path


@pytest.fixture
def write_file(content_dir: Path):
    def _write(name: str, text: str) -> Path:
        path = content_dir / name
        path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
        return path

    return _write


class FakeRepo(FilesystemPostsRepo):
    """
    Filesystem repo stand-in that fails to read selected files.
    """

    def __init__(self, content_dir, unreadable=()):
        super().__init__(content_dir)
        self.unreadable = {Path(p).name for p in unreadable}
        self.reads = []

    def read_post_file(self, path: Path) -> str:
        self.reads.append(path.name)
        if path.name in self.unreadable:
            raise PermissionError(f"Permission denied: '{path}'")
        return super().read_post_file(path)


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        return self._get_post_return

    def list_summaries(self):
        from devdaze.services.posts_service import to_summary

        return [to_summary(p) for p in self.list_posts()]

    def get_detail(self, slug: str):
        from devdaze.services.posts_service import to_detail

        post = self.get_post(slug)
        return to_detail(post) if post else None
