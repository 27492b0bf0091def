"""
Telegram Passport — https://core.telegram.org/bots/api#passportdata

Element payloads stay encrypted; decrypting them with the bot's private key
is left to the caller.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from telegram_sdk.models.base import TelegramObject
from telegram_sdk.models.units import UnixTime
from telegram_sdk.models.values import FileId, FileUniqueId


class PassportFile(TelegramObject):
    file_id: FileId
    file_unique_id: FileUniqueId
    file_size: int
    file_date: UnixTime


class EncryptedCredentials(TelegramObject):
    data: str  # base64, encrypted with the secret
    hash: str
    secret: str  # base64, encrypted with the bot's public RSA key


class EncryptedPassportElementPersonalDetails(TelegramObject):
    type: Literal["personal_details"] = "personal_details"
    data: Optional[str] = None
    hash: str


class EncryptedPassportElementPassport(TelegramObject):
    type: Literal["passport"] = "passport"
    data: Optional[str] = None
    front_side: Optional[PassportFile] = None
    selfie: Optional[PassportFile] = None
    translation: tuple[PassportFile, ...] = ()
    hash: str


class EncryptedPassportElementDriverLicense(TelegramObject):
    type: Literal["driver_license"] = "driver_license"
    data: Optional[str] = None
    front_side: Optional[PassportFile] = None
    reverse_side: Optional[PassportFile] = None
    selfie: Optional[PassportFile] = None
    translation: tuple[PassportFile, ...] = ()
    hash: str


class EncryptedPassportElementIdentityCard(TelegramObject):
    type: Literal["identity_card"] = "identity_card"
    data: Optional[str] = None
    front_side: Optional[PassportFile] = None
    reverse_side: Optional[PassportFile] = None
    selfie: Optional[PassportFile] = None
    translation: tuple[PassportFile, ...] = ()
    hash: str


class EncryptedPassportElementInternalPassport(TelegramObject):
    type: Literal["internal_passport"] = "internal_passport"
    data: Optional[str] = None
    front_side: Optional[PassportFile] = None
    selfie: Optional[PassportFile] = None
    translation: tuple[PassportFile, ...] = ()
    hash: str


class EncryptedPassportElementAddress(TelegramObject):
    type: Literal["address"] = "address"
    data: Optional[str] = None
    hash: str


class EncryptedPassportElementUtilityBill(TelegramObject):
    type: Literal["utility_bill"] = "utility_bill"
    files: tuple[PassportFile, ...] = ()
    translation: tuple[PassportFile, ...] = ()
    hash: str


class EncryptedPassportElementBankStatement(TelegramObject):
    type: Literal["bank_statement"] = "bank_statement"
    files: tuple[PassportFile, ...] = ()
    translation: tuple[PassportFile, ...] = ()
    hash: str


class EncryptedPassportElementRentalAgreement(TelegramObject):
    type: Literal["rental_agreement"] = "rental_agreement"
    files: tuple[PassportFile, ...] = ()
    translation: tuple[PassportFile, ...] = ()
    hash: str


class EncryptedPassportElementPassportRegistration(TelegramObject):
    type: Literal["passport_registration"] = "passport_registration"
    files: tuple[PassportFile, ...] = ()
    translation: tuple[PassportFile, ...] = ()
    hash: str


class EncryptedPassportElementTemporaryRegistration(TelegramObject):
    type: Literal["temporary_registration"] = "temporary_registration"
    files: tuple[PassportFile, ...] = ()
    translation: tuple[PassportFile, ...] = ()
    hash: str


class EncryptedPassportElementPhoneNumber(TelegramObject):
    type: Literal["phone_number"] = "phone_number"
    phone_number: str
    hash: str


class EncryptedPassportElementEmail(TelegramObject):
    type: Literal["email"] = "email"
    email: str
    hash: str


EncryptedPassportElement = Annotated[
    Union[
        EncryptedPassportElementPersonalDetails,
        EncryptedPassportElementPassport,
        EncryptedPassportElementDriverLicense,
        EncryptedPassportElementIdentityCard,
        EncryptedPassportElementInternalPassport,
        EncryptedPassportElementAddress,
        EncryptedPassportElementUtilityBill,
        EncryptedPassportElementBankStatement,
        EncryptedPassportElementRentalAgreement,
        EncryptedPassportElementPassportRegistration,
        EncryptedPassportElementTemporaryRegistration,
        EncryptedPassportElementPhoneNumber,
        EncryptedPassportElementEmail,
    ],
    Field(discriminator="type"),
]


class PassportData(TelegramObject):
    data: tuple[EncryptedPassportElement, ...]
    credentials: EncryptedCredentials
