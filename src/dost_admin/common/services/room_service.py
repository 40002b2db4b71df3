import logging
from typing import Callable, List, Optional

from dost_admin.common.models.results import Result
from dost_admin.common.models.rooms import Room, RoomStatus
from dost_admin.common.repository import fallback_data
from dost_admin.common.repository.image_repo import ImageFile, ImageRepository
from dost_admin.common.repository.room_repo import RoomRepository
from dost_admin.common.schemas.rooms import RoomRequest, RoomUpdateRequest
from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.constants import PLACEHOLDER_IMAGE_URL
from dost_admin.common.utils.datetime_normaliser import most_recent_first
from dost_admin.common.utils.fallback import remote_read, remote_write

logger = logging.getLogger(__name__)


def _fallback_rooms(self) -> List[Room]:
    return most_recent_first(fallback_data.rooms())


def _fallback_room(self, room_id: str) -> Optional[Room]:
    return next((room for room in fallback_data.rooms() if room.id == room_id), None)


def _fallback_count(self) -> int:
    return len(fallback_data.rooms())


def _fallback_available_count(self) -> int:
    return fallback_data.available_rooms_count()


class RoomService:
    def __init__(
        self,
        room_repo: RoomRepository,
        settings: SupabaseSettings,
        image_repo: Optional[ImageRepository] = None,
    ):
        self.room_repo = room_repo
        self.settings = settings
        self.image_repo = image_repo

    @remote_read(_fallback_rooms)
    def get_all_rooms(self) -> List[Room]:
        return self.room_repo.get_all_rooms()

    @remote_read(_fallback_room)
    def get_room(self, room_id: str) -> Optional[Room]:
        return self.room_repo.get_room(room_id)

    @remote_read(_fallback_count)
    def get_count(self) -> int:
        return self.room_repo.count_rooms()

    @remote_read(_fallback_available_count)
    def get_available_count(self) -> int:
        return self.room_repo.count_rooms(RoomStatus.AVAILABLE)

    @remote_write
    def create_room(self, req: RoomRequest) -> Result:
        room = self.room_repo.add_room(req.model_dump(mode="json"))
        return Result(data=room)

    @remote_write
    def update_room(self, room_id: str, req: RoomUpdateRequest) -> Result:
        room = self.room_repo.update_room(room_id, req.to_patch())
        return Result(data=room)

    @remote_write
    def delete_room(self, room_id: str) -> Result:
        self.room_repo.delete_room(room_id)
        return Result()

    def upload_images(
        self,
        files: List[ImageFile],
        on_progress: Optional[Callable[[int], None]] = None,
    ) -> List[str]:
        """Upload room images one after another.

        Returns one URL per input file, in input order. A file that fails to
        upload (or any file while running in demo mode) is replaced by the
        placeholder image URL. ``on_progress`` receives the completed
        percentage after each file.
        """
        total = len(files)
        urls = []
        for completed, image in enumerate(files, start=1):
            urls.append(self._upload_one(image))
            if on_progress:
                on_progress(round(completed / total * 100))
        return urls

    def _upload_one(self, image: ImageFile) -> str:
        if not self.settings.configured or self.image_repo is None:
            return PLACEHOLDER_IMAGE_URL
        try:
            return self.image_repo.upload_image(image)
        except Exception as err:
            logger.warning(f"Upload of {image.filename} failed, using placeholder: {err}")
            return PLACEHOLDER_IMAGE_URL
