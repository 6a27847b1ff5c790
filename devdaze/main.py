import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from devdaze.repos.posts_repo import FilesystemPostsRepo
from devdaze.routers import pages, posts
from devdaze.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    repo = FilesystemPostsRepo(settings.content_path)
    if repo.exists():
        logger.info(f"Serving posts from {repo.content_dir}")
    else:
        logger.warning(f"Content directory {repo.content_dir} not found")
    yield
    logger.info("Server shutting down")


app = FastAPI(
    title=settings.SITE_TITLE, description="Markdown blog", lifespan=lifespan
)

if settings.public_path.is_dir():
    app.mount("/static", StaticFiles(directory=settings.PUBLIC_DIR), name="static")

app.include_router(posts.router)
app.include_router(pages.router)


@app.get("/health")
async def health():
    return {"message": f"{settings.SITE_TITLE} is running"}
