import logging
from pathlib import Path
from typing import List, Union

logger = logging.getLogger(__name__)

MARKDOWN_SUFFIX = ".md"


class FilesystemPostsRepo:
    def __init__(self, content_dir: Union[str, Path]):
        self.content_dir = Path(content_dir)

    def exists(self) -> bool:
        return self.content_dir.exists()

    def list_post_files(self) -> List[Path]:
        """
        Markdown files in the content directory, ordered by file name.
        A missing directory yields an empty list; any other OSError propagates.
        """
        if not self.exists():
            logger.debug(f"Content directory {self.content_dir} does not exist")
            return []

        entries = sorted(self.content_dir.iterdir(), key=lambda p: p.name)
        return [
            path
            for path in entries
            if path.name.endswith(MARKDOWN_SUFFIX) and path.is_file()
        ]

    @staticmethod
    def read_post_file(path: Path) -> str:
        return path.read_text(encoding="utf-8")
