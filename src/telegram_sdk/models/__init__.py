from telegram_sdk.models.background import (
    BackgroundFill,
    BackgroundFillFreeformGradient,
    BackgroundFillGradient,
    BackgroundFillSolid,
    BackgroundType,
    BackgroundTypeChatTheme,
    BackgroundTypeFill,
    BackgroundTypePattern,
    BackgroundTypeWallpaper,
    ChatBackground,
)
from telegram_sdk.models.base import TelegramObject, decode, encode
from telegram_sdk.models.bot_command import (
    BotCommand,
    BotCommandScope,
    BotCommandScopeAllChatAdministrators,
    BotCommandScopeAllGroupChats,
    BotCommandScopeAllPrivateChats,
    BotCommandScopeChat,
    BotCommandScopeChatAdministrators,
    BotCommandScopeChatMember,
    BotCommandScopeDefault,
    SetMyCommandsParams,
)
from telegram_sdk.models.chat import (
    BusinessIntro,
    BusinessLocation,
    BusinessOpeningHours,
    BusinessOpeningHoursInterval,
    Chat,
    ChatLocation,
    ChatPermissions,
    ChatPhoto,
    ChatType,
    Story,
)
from telegram_sdk.models.chat_info import ChatFullInfo
from telegram_sdk.models.checklists import Checklist, ChecklistTask, InputChecklist, InputChecklistTask
from telegram_sdk.models.common import Location, Venue
from telegram_sdk.models.envelope import Response, ResponseParameters
from telegram_sdk.models.files import (
    Animation,
    Audio,
    Document,
    File,
    MaskPosition,
    PaidMedia,
    PaidMediaInfo,
    PaidMediaPhoto,
    PaidMediaPreview,
    PaidMediaVideo,
    PhotoSize,
    Sticker,
    StickerType,
    Video,
    VideoNote,
    Voice,
)
from telegram_sdk.models.forum import (
    ForumTopicClosed,
    ForumTopicCreated,
    ForumTopicEdited,
    ForumTopicReopened,
    GeneralForumTopicHidden,
    GeneralForumTopicUnhidden,
)
from telegram_sdk.models.game import Game
from telegram_sdk.models.gift import (
    AcceptedGiftTypes,
    Gift,
    GiftInfo,
    UniqueGift,
    UniqueGiftBackdrop,
    UniqueGiftBackdropColors,
    UniqueGiftInfo,
    UniqueGiftModel,
    UniqueGiftSymbol,
)
from telegram_sdk.models.giveaway import Giveaway, GiveawayCreated, GiveawayWinners
from telegram_sdk.models.keyboard import (
    CallbackGame,
    CopyTextButton,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    LoginUrl,
    SwitchInlineQueryChosenChat,
    WebAppData,
    WebAppInfo,
)
from telegram_sdk.models.message import (
    ChecklistTasksAdded,
    ChecklistTasksDone,
    GiveawayCompleted,
    InaccessibleMessage,
    MaybeInaccessibleMessage,
    Message,
    MessageId,
    SuggestedPostApprovalFailed,
    SuggestedPostApproved,
    SuggestedPostDeclined,
    SuggestedPostPaid,
    SuggestedPostRefunded,
    decode_maybe_inaccessible,
    encode_maybe_inaccessible,
)
from telegram_sdk.models.passport import (
    EncryptedCredentials,
    EncryptedPassportElement,
    EncryptedPassportElementAddress,
    EncryptedPassportElementBankStatement,
    EncryptedPassportElementDriverLicense,
    EncryptedPassportElementEmail,
    EncryptedPassportElementIdentityCard,
    EncryptedPassportElementInternalPassport,
    EncryptedPassportElementPassport,
    EncryptedPassportElementPassportRegistration,
    EncryptedPassportElementPersonalDetails,
    EncryptedPassportElementPhoneNumber,
    EncryptedPassportElementRentalAgreement,
    EncryptedPassportElementTemporaryRegistration,
    EncryptedPassportElementUtilityBill,
    PassportData,
    PassportFile,
)
from telegram_sdk.models.payments import Invoice, OrderInfo, RefundedPayment, ShippingAddress, SuccessfulPayment
from telegram_sdk.models.polls import Dice, InputPollOption, Poll, PollAnswer, PollOption, PollType
from telegram_sdk.models.reaction import ReactionType, ReactionTypeCustomEmoji, ReactionTypeEmoji, ReactionTypePaid
from telegram_sdk.models.reply import (
    DirectMessagesTopic,
    ExternalReplyInfo,
    MessageOrigin,
    MessageOriginChannel,
    MessageOriginChat,
    MessageOriginHiddenUser,
    MessageOriginUser,
)
from telegram_sdk.models.service import (
    ChatBoostAdded,
    ChatShared,
    DirectMessagePriceChanged,
    MessageAutoDeleteTimerChanged,
    PaidMessagePriceChanged,
    ProximityAlertTriggered,
    UsersShared,
    VideoChatEnded,
    VideoChatParticipantsInvited,
    VideoChatScheduled,
    VideoChatStarted,
    WriteAccessAllowed,
)
from telegram_sdk.models.suggested_post import (
    StarAmount,
    SuggestedPostInfo,
    SuggestedPostPrice,
    SuggestedPostRefundReason,
    SuggestedPostState,
)
from telegram_sdk.models.text import (
    LinkPreviewOptions,
    MessageEntity,
    MessageEntityBlockQuote,
    MessageEntityBold,
    MessageEntityBotCommand,
    MessageEntityCashtag,
    MessageEntityCode,
    MessageEntityCustomEmoji,
    MessageEntityEmail,
    MessageEntityExpandableBlockQuote,
    MessageEntityHashtag,
    MessageEntityItalic,
    MessageEntityMention,
    MessageEntityPhoneNumber,
    MessageEntityPre,
    MessageEntitySpoiler,
    MessageEntityStrikethrough,
    MessageEntityTextLink,
    MessageEntityTextMention,
    MessageEntityUnderline,
    MessageEntityUrl,
    TextQuote,
    utf16_slice,
)
from telegram_sdk.models.units import Seconds, UnixTime, from_epoch_seconds, from_seconds, to_epoch_seconds, to_seconds
from telegram_sdk.models.update import Update
from telegram_sdk.models.user import BirthDate, Contact, SharedUser, User
from telegram_sdk.models.values import (
    AccentColor,
    ChatId,
    ChecklistTaskId,
    CountryCode,
    Currency,
    CurrencyAmount,
    FileId,
    FileUniqueId,
    LanguageCode,
    MessageIdentifier,
    PollId,
    Rarity,
    UpdateId,
    UserId,
)
