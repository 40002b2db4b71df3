from postgrest.exceptions import APIError
import logging
from typing import List, Optional
from dost_admin.common.models.rooms import Room, RoomStatus
from dost_admin.common.utils.custom_exceptions import NotFoundException

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from supabase import Client
else:
    Client = object


logger = logging.getLogger(__name__)

TABLE_NAME = "rooms"


class RoomRepository:
    def __init__(self, client: Optional[Client]):
        self.client = client

    def get_all_rooms(self) -> List[Room]:
        try:
            response = (
                self.client.table(TABLE_NAME)
                .select("*")
                .order("created_at", desc=True)
                .execute()
            )
        except APIError as err:
            logger.error(f"Error retrieving rooms: {err.message}")
            raise
        return [Room.from_row(row) for row in response.data or []]

    def get_room(self, room_id: str) -> Optional[Room]:
        try:
            response = (
                self.client.table(TABLE_NAME)
                .select("*")
                .eq("id", room_id)
                .limit(1)
                .execute()
            )
        except APIError as err:
            logger.error(f"Error retrieving room {room_id}: {err.message}")
            raise

        items = response.data or []
        if not items:
            return None
        return Room.from_row(items[0])

    def count_rooms(self, status: Optional[RoomStatus] = None) -> int:
        query = self.client.table(TABLE_NAME).select("id")
        if status is not None:
            query = query.eq("status", status.value)
        try:
            response = query.execute()
        except APIError as err:
            logger.error(f"Error counting rooms: {err.message}")
            raise
        return len(response.data or [])

    def get_room_statuses(self) -> List[RoomStatus]:
        try:
            response = self.client.table(TABLE_NAME).select("status").execute()
        except APIError as err:
            logger.error(f"Error retrieving room statuses: {err.message}")
            raise
        return [RoomStatus(row["status"]) for row in response.data or []]

    def add_room(self, payload: dict) -> Room:
        try:
            response = self.client.table(TABLE_NAME).insert(payload).execute()
        except APIError as err:
            logger.error(f"Error creating room {payload.get('roomname')}: {err.message}")
            raise
        return Room.from_row(response.data[0])

    def update_room(self, room_id: str, updates: dict) -> Room:
        try:
            response = (
                self.client.table(TABLE_NAME)
                .update(updates)
                .eq("id", room_id)
                .execute()
            )
        except APIError as err:
            logger.error(f"Error updating room {room_id}: {err.message}")
            raise
        if not response.data:
            raise NotFoundException("room", room_id)
        return Room.from_row(response.data[0])

    def delete_room(self, room_id: str):
        try:
            self.client.table(TABLE_NAME).delete().eq("id", room_id).execute()
        except APIError as err:
            logger.error(f"Error deleting room {room_id}: {err.message}")
            raise
