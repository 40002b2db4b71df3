import logging
import uuid
from dataclasses import dataclass
from typing import Optional
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from supabase import Client
else:
    Client = object

logger = logging.getLogger(__name__)


@dataclass
class ImageFile:
    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


class ImageRepository:
    def __init__(self, client: Optional[Client], bucket: str):
        self.client = client
        self.bucket = bucket

    @staticmethod
    def object_path(image: ImageFile) -> str:
        return f"rooms/{uuid.uuid4().hex}-{image.filename}"

    def upload_image(self, image: ImageFile) -> str:
        """Store one image and return its public URL."""
        path = self.object_path(image)
        storage = self.client.storage.from_(self.bucket)
        try:
            storage.upload(path, image.content, {"content-type": image.content_type})
        except Exception as err:
            logger.error(f"Error uploading {image.filename} to {self.bucket}: {err}")
            raise
        return storage.get_public_url(path)
