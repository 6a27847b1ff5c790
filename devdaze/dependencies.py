from fastapi import Depends

from devdaze.repos.posts_repo import FilesystemPostsRepo
from devdaze.services.posts_service import PostsService
from devdaze.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_posts_repo(current_settings: Settings = Depends(get_settings)):
    return FilesystemPostsRepo(current_settings.content_path)


def get_posts_service(
    repo=Depends(get_posts_repo),
    current_settings: Settings = Depends(get_settings),
):
    return PostsService(
        repo=repo, markdown_extensions=current_settings.MARKDOWN_EXTENSIONS
    )
