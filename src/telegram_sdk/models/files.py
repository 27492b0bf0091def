"""
Files and media attachments — https://core.telegram.org/bots/api#available-types
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.units import Seconds
from telegram_sdk.models.values import FileId, FileUniqueId


class Media(TelegramObject):
    """Anything stored on Telegram servers and addressed by a file identifier."""
    id: FileId = Field(alias="file_id")
    unique_id: FileUniqueId = Field(alias="file_unique_id")


class File(Media):
    """A file ready to be downloaded from https://api.telegram.org/file/bot<token>/<file_path>."""
    file_size: Optional[int] = None
    file_path: Optional[str] = None


class PhotoSize(Media):
    width: int
    height: int
    file_size: Optional[int] = None


class Animation(Media):
    width: int
    height: int
    duration: Seconds
    thumbnail: Optional[PhotoSize] = None
    name: Optional[str] = Field(default=None, alias="file_name")
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Audio(Media):
    duration: Seconds
    performer: Optional[str] = None
    title: Optional[str] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None
    thumbnail: Optional[PhotoSize] = None


class Document(Media):
    thumbnail: Optional[PhotoSize] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class Video(Media):
    width: int
    height: int
    duration: Seconds
    thumbnail: Optional[PhotoSize] = None
    cover: tuple[PhotoSize, ...] = ()
    start_timestamp: Optional[Seconds] = None
    file_name: Optional[str] = None
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class VideoNote(Media):
    length: int  # diameter
    duration: Seconds
    thumbnail: Optional[PhotoSize] = None
    file_size: Optional[int] = None


class Voice(Media):
    duration: Seconds
    mime_type: Optional[str] = None
    file_size: Optional[int] = None


class StickerType(str, Enum):
    REGULAR = "regular"
    MASK = "mask"
    CUSTOM_EMOJI = "custom_emoji"


class MaskPosition(TelegramObject):
    point: str  # "forehead" | "eyes" | "mouth" | "chin"
    x_shift: float
    y_shift: float
    scale: float


class Sticker(Media):
    type: StickerType
    width: int
    height: int
    is_animated: bool = False
    is_video: bool = False
    thumbnail: Optional[PhotoSize] = None
    emoji: Optional[str] = None
    set_name: Optional[str] = None
    premium_animation: Optional[File] = None
    mask_position: Optional[MaskPosition] = None
    custom_emoji_id: Optional[str] = None
    needs_repainting: bool = False
    file_size: Optional[int] = None


class PaidMediaPreview(TelegramObject):
    """Paid media not available before payment."""
    type: Literal["preview"] = "preview"
    width: Optional[int] = None
    height: Optional[int] = None
    duration: Optional[Seconds] = None


class PaidMediaPhoto(TelegramObject):
    type: Literal["photo"] = "photo"
    photo: tuple[PhotoSize, ...]


class PaidMediaVideo(TelegramObject):
    type: Literal["video"] = "video"
    video: Video


PaidMedia = Annotated[
    Union[PaidMediaPreview, PaidMediaPhoto, PaidMediaVideo],
    Field(discriminator="type"),
]


class PaidMediaInfo(TelegramObject):
    star_count: int
    paid_media: tuple[PaidMedia, ...]
