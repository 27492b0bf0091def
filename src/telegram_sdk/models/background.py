"""
Chat backgrounds — https://core.telegram.org/bots/api#chatbackground

Colors are RGB24 integers.
"""

from typing import Annotated, Literal, Union

from pydantic import Field

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.files import Document


class BackgroundFillSolid(TelegramObject):
    type: Literal["solid"] = "solid"
    color: int


class BackgroundFillGradient(TelegramObject):
    type: Literal["gradient"] = "gradient"
    top_color: int
    bottom_color: int
    rotation_angle: int  # clockwise, 0-359


class BackgroundFillFreeformGradient(TelegramObject):
    type: Literal["freeform_gradient"] = "freeform_gradient"
    colors: tuple[int, ...]  # 3 or 4 base colors


BackgroundFill = Annotated[
    Union[BackgroundFillSolid, BackgroundFillGradient, BackgroundFillFreeformGradient],
    Field(discriminator="type"),
]


class BackgroundTypeFill(TelegramObject):
    type: Literal["fill"] = "fill"
    fill: BackgroundFill
    dark_theme_dimming: int  # percent


class BackgroundTypeWallpaper(TelegramObject):
    type: Literal["wallpaper"] = "wallpaper"
    document: Document
    dark_theme_dimming: int
    is_blurred: bool = False
    is_moving: bool = False


class BackgroundTypePattern(TelegramObject):
    type: Literal["pattern"] = "pattern"
    document: Document
    fill: BackgroundFill
    intensity: int
    is_inverted: bool = False
    is_moving: bool = False


class BackgroundTypeChatTheme(TelegramObject):
    type: Literal["chat_theme"] = "chat_theme"
    theme_name: str


BackgroundType = Annotated[
    Union[BackgroundTypeFill, BackgroundTypeWallpaper, BackgroundTypePattern, BackgroundTypeChatTheme],
    Field(discriminator="type"),
]


class ChatBackground(TelegramObject):
    type: BackgroundType
