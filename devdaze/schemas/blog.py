import datetime
import logging
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class FrontMatter(BaseModel):
    """Recognized keys of a post's YAML block. Missing keys keep their defaults."""

    model_config = {"extra": "ignore"}

    title: str = ""
    date: Optional[datetime.datetime] = None
    author: str = ""
    description: str = ""
    tags: List[str] = Field(default_factory=list)
    slug: str = ""

    @field_validator("title", "author", "description", "slug", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        if value is None:
            return ""
        if isinstance(value, (str, int, float, bool, datetime.date)):
            return str(value)
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _coerce_tags(cls, value):
        if not value:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, (list, tuple)):
            return [str(item) for item in value if item is not None]
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value):
        return parse_timestamp(value)


def parse_timestamp(value) -> Optional[datetime.datetime]:
    """
    Convert a YAML timestamp, date or ISO-8601 string into a datetime.
    Anything else is logged and treated as absent.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime(value.year, value.month, value.day)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.datetime.fromisoformat(text)
        except ValueError:
            pass
    logger.warning(f"Ignoring malformed date value: {value!r}")
    return None


class Post(BaseModel):
    title: str = ""
    publishedAt: Optional[datetime.datetime] = None
    author: str = ""
    summary: str = ""
    tags: List[str] = Field(default_factory=list)
    slug: str = ""
    rawBody: str = ""
    renderedBody: str = ""


class PostSummary(BaseModel):
    slug: str
    title: str = ""
    author: str = ""
    summary: str = ""
    publishedAt: Optional[datetime.datetime] = None
    tags: List[str] = Field(default_factory=list)
    readingTime: Optional[str] = None


class PostDetail(PostSummary):
    rawBody: str
    renderedBody: str
