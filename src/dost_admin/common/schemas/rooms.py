from typing import List, Optional
from pydantic import BaseModel, Field, field_validator
from dost_admin.common.models.rooms import RoomStatus, RoomType
from dost_admin.common.utils.constants import MAX_ROOM_IMAGES


def _clean_amenities(v: Optional[List[str]]):
    if v is None:
        return v
    seen = []
    for amenity in v:
        amenity = amenity.strip()
        if amenity and amenity not in seen:
            seen.append(amenity)
    return seen


class RoomRequest(BaseModel):
    roomname: str = Field(min_length=1)
    roomtype: RoomType = RoomType.SINGLE
    price: float = Field(default=0, ge=0)
    capacity: int = Field(default=1, ge=1)
    status: RoomStatus = RoomStatus.AVAILABLE
    amenities: List[str] = Field(min_length=1)
    images: List[str] = Field(default_factory=list, max_length=MAX_ROOM_IMAGES)

    @field_validator("amenities")
    @classmethod
    def validate_amenities(cls, v: List[str]):
        cleaned = _clean_amenities(v)
        if not cleaned:
            raise ValueError("Select at least one amenity")
        return cleaned


class RoomUpdateRequest(BaseModel):
    roomname: Optional[str] = Field(default=None, min_length=1)
    roomtype: Optional[RoomType] = None
    price: Optional[float] = Field(default=None, ge=0)
    capacity: Optional[int] = Field(default=None, ge=1)
    status: Optional[RoomStatus] = None
    amenities: Optional[List[str]] = None
    images: Optional[List[str]] = Field(default=None, max_length=MAX_ROOM_IMAGES)

    @field_validator("amenities")
    @classmethod
    def validate_amenities(cls, v: Optional[List[str]]):
        return _clean_amenities(v)

    def to_patch(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)
