"""
Payment models — https://core.telegram.org/bots/api#payments
"""

from typing import Optional

from pydantic import Field

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.units import UnixTime
from telegram_sdk.models.values import CountryCode, Currency, CurrencyAmount


class Invoice(TelegramObject):
    title: str
    description: str
    start_parameter: str
    currency: Currency
    total_amount: CurrencyAmount


class ShippingAddress(TelegramObject):
    country: CountryCode = Field(alias="country_code")
    state: Optional[str] = None
    city: str
    street_line1: str
    street_line2: str
    post_code: str


class OrderInfo(TelegramObject):
    name: Optional[str] = None
    phone_number: Optional[str] = None
    email: Optional[str] = None
    shipping_address: Optional[ShippingAddress] = None


class SuccessfulPayment(TelegramObject):
    currency: Currency
    total_amount: CurrencyAmount
    invoice_payload: str
    subscription_expiration_date: Optional[UnixTime] = None
    is_recurring: bool = False
    is_first_recurring: bool = False
    shipping_option_id: Optional[str] = None
    order_info: Optional[OrderInfo] = None
    telegram_payment_charge_id: str
    provider_payment_charge_id: str


class RefundedPayment(TelegramObject):
    currency: Currency  # always XTR for now
    total_amount: CurrencyAmount
    invoice_payload: str
    telegram_payment_charge_id: str
    provider_payment_charge_id: Optional[str] = None
