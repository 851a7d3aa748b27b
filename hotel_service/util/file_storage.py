import logging
import os
import uuid

from fastapi import UploadFile

from shared.core.config import settings

logger = logging.getLogger(__name__)


class LocalFileStorage:
    """Stores gallery uploads on disk and hands back the public URL."""

    def __init__(self, upload_dir: str, base_url: str):
        self.upload_dir = upload_dir
        self.base_url = base_url.rstrip("/")

    def _path_for(self, url: str) -> str:
        file_name = url.rsplit("/", 1)[-1]
        return os.path.join(self.upload_dir, file_name)

    async def save(self, file: UploadFile) -> str:
        os.makedirs(self.upload_dir, exist_ok=True)

        _, extension = os.path.splitext(file.filename or "")
        file_name = f"{uuid.uuid4().hex}{extension.lower()}"

        file_bytes = await file.read()
        with open(os.path.join(self.upload_dir, file_name), "wb") as out:
            out.write(file_bytes)

        logger.info("Stored upload %s (%d bytes)", file_name, len(file_bytes))
        return f"{self.base_url}/{file_name}"

    def delete(self, url: str):
        # raises OSError when the file is missing or cannot be removed
        os.remove(self._path_for(url))


def get_file_storage() -> LocalFileStorage:
    return LocalFileStorage(settings.UPLOAD_DIR, settings.UPLOAD_BASE_URL)
