from pathlib import Path

import pytest

from devdaze.repos.posts_repo import FilesystemPostsRepo


def test_list_post_files_missing_directory(tmp_path):
    repo = FilesystemPostsRepo(tmp_path / "missing")

    assert repo.exists() is False
    assert repo.list_post_files() == []


def test_list_post_files_filters_and_sorts(content_dir):
    (content_dir / "zeta.md").write_text("z")
    (content_dir / "alpha.md").write_text("a")
    (content_dir / "readme.txt").write_text("t")
    (content_dir / "draft.md.bak").write_text("b")
    (content_dir / "folder.md").mkdir()

    repo = FilesystemPostsRepo(str(content_dir))

    assert [p.name for p in repo.list_post_files()] == ["alpha.md", "zeta.md"]


def test_list_post_files_raises_when_not_a_directory(tmp_path):
    path = tmp_path / "file"
    path.write_text("x")

    with pytest.raises(OSError):
        FilesystemPostsRepo(path).list_post_files()


def test_read_post_file_returns_text(content_dir):
    path = content_dir / "post.md"
    path.write_text("---\ntitle: Café\n---\n", encoding="utf-8")

    assert FilesystemPostsRepo.read_post_file(path) == "---\ntitle: Café\n---\n"


def test_read_post_file_propagates_missing_file(content_dir):
    with pytest.raises(FileNotFoundError):
        FilesystemPostsRepo(content_dir).read_post_file(Path(content_dir / "gone.md"))
