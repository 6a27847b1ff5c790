import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from fastapi.templating import Jinja2Templates

from devdaze import dependencies as deps
from devdaze.services.posts_service import PostsService
from devdaze.settings import Settings, settings
from devdaze.utils import calculate_reading_time, format_date

logger = logging.getLogger(__name__)

router = APIRouter()

templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)
templates.env.filters["date"] = format_date
templates.env.filters["reading_time"] = calculate_reading_time


def _render(request: Request, name: str, context: dict):
    try:
        return templates.TemplateResponse(request, name, context)
    except Exception as e:
        logger.error(f"Template render error in {name}: {e}")
        return PlainTextResponse("Template render error", status_code=500)


@router.get("/")
def index(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    current_settings: Settings = Depends(deps.get_settings),
):
    try:
        posts = service.list_posts()
    except Exception as e:
        logger.error(f"Error loading blog posts: {e}")
        return PlainTextResponse("Error loading blog posts", status_code=500)
    return _render(
        request,
        "index.html",
        {"title": current_settings.SITE_TITLE, "posts": posts},
    )


@router.get("/blog")
def blog(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        posts = service.list_posts()
    except Exception as e:
        logger.error(f"Error loading blog posts: {e}")
        return PlainTextResponse("Error loading blog posts", status_code=500)
    return _render(request, "blog.html", {"title": "All Blog Posts", "posts": posts})


@router.get("/blog/{slug}")
def post(
    slug: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
):
    try:
        found = service.get_post(slug)
    except Exception as e:
        logger.error(f"Error loading blog post {slug}: {e}")
        return PlainTextResponse("Error loading blog post", status_code=500)
    if not found:
        return PlainTextResponse("Blog post not found", status_code=404)
    return _render(request, "post.html", {"title": found.title, "post": found})
