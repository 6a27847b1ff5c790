import logging
from functools import partial
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from devdaze.schemas.blog import Post, PostDetail, PostSummary
from devdaze.services.content_parser import ParseError, parse_markdown_file
from devdaze.utils import calculate_reading_time

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(self, repo, parse=None, markdown_extensions=None):
        self.repo = repo
        if parse is None:
            parse = partial(parse_markdown_file, extensions=markdown_extensions)
        self.parse = parse

    def list_posts(self) -> List[Post]:
        posts = []
        seen_slugs: Dict[str, Path] = {}
        for path, post in self._iter_posts(log_failures=True):
            first = seen_slugs.setdefault(post.slug, path) if post.slug else path
            if first is not path:
                logger.warning(
                    f"Duplicate slug '{post.slug}' in {path}, "
                    f"{first} is served for /blog/{post.slug}"
                )
            posts.append(post)

        logger.info(f"Loaded {len(posts)} posts from {self.repo.content_dir}")
        return posts

    def get_post(self, slug: str) -> Optional[Post]:
        for _path, post in self._iter_posts(log_failures=False):
            if post.slug == slug:
                return post
        return None

    def list_summaries(self) -> List[PostSummary]:
        return [to_summary(post) for post in self.list_posts()]

    def get_detail(self, slug: str) -> Optional[PostDetail]:
        post = self.get_post(slug)
        if not post:
            return None
        return to_detail(post)

    def _iter_posts(self, log_failures: bool) -> Iterator[Tuple[Path, Post]]:
        for path in self.repo.list_post_files():
            post = load_post(
                self.repo, path, parse=self.parse, log_failures=log_failures
            )
            if post is not None:
                yield path, post


def load_post(
    repo, path: Path, *, parse=parse_markdown_file, log_failures: bool = True
) -> Optional[Post]:
    """Read and parse one content file, returning None when either step fails."""
    try:
        content = repo.read_post_file(path)
    except (OSError, UnicodeDecodeError) as e:
        if log_failures:
            logger.warning(f"Error reading file {path}: {e}")
        return None

    try:
        return parse(content)
    except ParseError as e:
        if log_failures:
            logger.warning(f"Error parsing file {path}: {e}")
        else:
            logger.debug(f"Skipping {path}: {e}")
        return None


def to_summary(post: Post) -> PostSummary:
    return PostSummary(
        slug=post.slug,
        title=post.title,
        author=post.author,
        summary=post.summary,
        publishedAt=post.publishedAt,
        tags=post.tags,
        readingTime=calculate_reading_time(post.rawBody),
    )


def to_detail(post: Post) -> PostDetail:
    return PostDetail(
        **to_summary(post).model_dump(),
        rawBody=post.rawBody,
        renderedBody=post.renderedBody,
    )
