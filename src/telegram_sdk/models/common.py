"""
Places — https://core.telegram.org/bots/api#location
"""

from typing import Optional

from telegram_sdk.models.base import TelegramObject


class Location(TelegramObject):
    latitude: float
    longitude: float
    horizontal_accuracy: Optional[float] = None  # meters, 0-1500
    live_period: Optional[int] = None
    heading: Optional[int] = None  # degrees, 1-360
    proximity_alert_radius: Optional[int] = None


class Venue(TelegramObject):
    location: Location
    title: str
    address: str
    foursquare_id: Optional[str] = None
    foursquare_type: Optional[str] = None
    google_place_id: Optional[str] = None
    google_place_type: Optional[str] = None
