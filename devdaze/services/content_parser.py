from typing import Iterable, Optional

import markdown
import yaml
from frontmatter.default_handlers import YAMLHandler
from pydantic import ValidationError

from devdaze.schemas.blog import FrontMatter, Post
from devdaze.settings import settings

FRONTMATTER_DELIMITER = "---"

_yaml_handler = YAMLHandler()


class FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that keeps impossible timestamps (2025-02-30) as strings."""

    def construct_yaml_timestamp(self, node):
        try:
            return super().construct_yaml_timestamp(node)
        except ValueError:
            return self.construct_scalar(node)


FrontMatterLoader.add_constructor(
    "tag:yaml.org,2002:timestamp", FrontMatterLoader.construct_yaml_timestamp
)


class ParseError(ValueError):
    """Raised when a content file cannot be turned into a Post."""


def parse_markdown_file(
    content: str, *, extensions: Optional[Iterable[str]] = None
) -> Post:
    """Split a content file into frontmatter and body, and render the body."""
    if not content.startswith(FRONTMATTER_DELIMITER):
        raise ParseError("no frontmatter found")

    parts = content[len(FRONTMATTER_DELIMITER) :].split(FRONTMATTER_DELIMITER, 1)
    if len(parts) != 2:
        raise ParseError("invalid frontmatter format")

    raw_metadata = parts[0].strip()
    body = parts[1].strip()

    metadata = parse_frontmatter(raw_metadata)

    return Post(
        title=metadata.title,
        publishedAt=metadata.date,
        author=metadata.author,
        summary=metadata.description,
        tags=metadata.tags,
        slug=metadata.slug,
        rawBody=body,
        renderedBody=render_markdown(body, extensions=extensions),
    )


def parse_frontmatter(raw_metadata: str) -> FrontMatter:
    try:
        data = (
            _yaml_handler.load(raw_metadata, Loader=FrontMatterLoader)
            if raw_metadata
            else None
        )
    except (yaml.YAMLError, ValueError) as e:
        raise ParseError(f"error parsing frontmatter: {e}") from e

    if data is None:
        return FrontMatter()
    if not isinstance(data, dict):
        raise ParseError(
            f"error parsing frontmatter: expected a mapping, got {type(data).__name__}"
        )

    try:
        return FrontMatter.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"error parsing frontmatter: {e}") from e


def render_markdown(text: str, *, extensions: Optional[Iterable[str]] = None) -> str:
    """Convert Markdown to HTML. A fresh converter per call keeps output stable."""
    if extensions is None:
        extensions = settings.MARKDOWN_EXTENSIONS
    return markdown.markdown(text, extensions=list(extensions))
