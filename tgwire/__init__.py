"""
Telegram Bot API client.

A small, type-safe client for sending and editing messages, managing inline
buttons, sending media and downloading files.

Basic Usage:
    from tgwire import TelegramClient

    client = TelegramClient(token="...")
    client.send_message(chat_id, "Hello, World!")

With Buttons:
    from tgwire import InlineKeyboardButton

    client.send_message(
        chat_id,
        "Pick one",
        buttons=[[InlineKeyboardButton("Yes", callback_data="y"),
                  InlineKeyboardButton("No", callback_data="n")]],
    )

Downloading Files:
    for update in client.get_updates():
        try:
            client.download_photo(update, "photo.jpg")
        except NoPhotoFound:
            continue
"""

from .base.errors import (
    DecodeError,
    FileRetrievalError,
    NoPhotoFound,
    RemoteRejected,
    ResolutionError,
    TelegramError,
    TransportError,
)
from .client import TelegramClient
from .commands import ApiRequest
from .envelope import Envelope, RawResponse, decode, decode_result
from .files import FileRetriever, highest_quality_photo_file_id
from .transport import Transport
from .types import (
    CallbackQuery,
    Chat,
    ChatAction,
    ChatType,
    ClientIdentity,
    FileDescriptor,
    InlineKeyboardButton,
    InlineKeyboardMarkup,
    MediaKind,
    Message,
    ParseMode,
    PhotoSize,
    Update,
    User,
    WebhookInfo,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "TelegramClient",
    "Transport",
    "FileRetriever",
    "ApiRequest",
    "Envelope",
    "RawResponse",
    "decode",
    "decode_result",
    "highest_quality_photo_file_id",
    # Types
    "ClientIdentity",
    "ParseMode",
    "ChatType",
    "ChatAction",
    "MediaKind",
    "InlineKeyboardButton",
    "InlineKeyboardMarkup",
    "User",
    "Chat",
    "Message",
    "PhotoSize",
    "CallbackQuery",
    "Update",
    "FileDescriptor",
    "WebhookInfo",
    # Errors
    "TelegramError",
    "TransportError",
    "DecodeError",
    "RemoteRejected",
    "FileRetrievalError",
    "ResolutionError",
    "NoPhotoFound",
]
