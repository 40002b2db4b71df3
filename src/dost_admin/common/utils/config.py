import os
from dataclasses import dataclass
from typing import Optional

from dost_admin.common.utils.constants import DEFAULT_IMAGE_BUCKET


@dataclass(frozen=True)
class SupabaseSettings:
    url: Optional[str] = None
    anon_key: Optional[str] = None
    image_bucket: str = DEFAULT_IMAGE_BUCKET

    @property
    def configured(self) -> bool:
        return bool(self.url and self.anon_key)

    @classmethod
    def from_env(cls) -> "SupabaseSettings":
        return cls(
            url=os.environ.get("SUPABASE_URL"),
            anon_key=os.environ.get("SUPABASE_ANON_KEY"),
            image_bucket=os.environ.get("ROOM_IMAGES_BUCKET") or DEFAULT_IMAGE_BUCKET,
        )


def preferences_path() -> str:
    return os.environ.get("DOST_PREFERENCES_PATH") or os.path.join(
        os.path.expanduser("~"), ".dost_admin", "preferences.json"
    )
