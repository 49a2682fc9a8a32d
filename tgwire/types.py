"""
Type definitions for the Telegram Bot API client.

Request-side values (buttons, identity) are plain dataclasses. Result shapes
returned by the API are pydantic models so that decoding is schema-checked.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_API_HOST = "api.telegram.org"

ChatTarget = Union[int, str]


class ParseMode(str, Enum):
    """Telegram message parse modes"""

    HTML = "HTML"
    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"


class ChatType(str, Enum):
    """Telegram chat types"""

    PRIVATE = "private"
    GROUP = "group"
    SUPERGROUP = "supergroup"
    CHANNEL = "channel"


class ChatAction(str, Enum):
    """Activity strings accepted by sendChatAction"""

    TYPING = "typing"
    UPLOAD_PHOTO = "upload_photo"
    RECORD_VIDEO = "record_video"
    UPLOAD_VIDEO = "upload_video"
    RECORD_VOICE = "record_voice"
    UPLOAD_VOICE = "upload_voice"
    UPLOAD_DOCUMENT = "upload_document"
    CHOOSE_STICKER = "choose_sticker"
    FIND_LOCATION = "find_location"
    RECORD_VIDEO_NOTE = "record_video_note"
    UPLOAD_VIDEO_NOTE = "upload_video_note"


class MediaKind(str, Enum):
    """Media that can be sent by URL or file_id"""

    PHOTO = "photo"
    VIDEO = "video"
    DOCUMENT = "document"
    AUDIO = "audio"

    @property
    def method(self) -> str:
        """API method name, e.g. sendPhoto"""
        return "send" + self.value.capitalize()


@dataclass(frozen=True)
class ClientIdentity:
    """
    Bot token plus the two endpoint roots derived from it.

    `host` is either a bare host name (https is assumed) or a full root URL
    such as http://127.0.0.1:8081 for a self-hosted Bot API server.
    """

    token: str = field(repr=False)
    host: str = DEFAULT_API_HOST

    @property
    def root_url(self) -> str:
        host = self.host.strip().rstrip("/")
        if "://" in host:
            return host
        return f"https://{host}"

    @property
    def api_base(self) -> str:
        """Method-call root: https://<host>/bot<token>/"""
        return f"{self.root_url}/bot{self.token}/"

    @property
    def file_base(self) -> str:
        """File-content root: https://<host>/file/bot<token>/"""
        return f"{self.root_url}/file/bot{self.token}/"

    def method_url(self, method: str) -> str:
        return self.api_base + method

    def file_url(self, file_path: str) -> str:
        return self.file_base + file_path.lstrip("/")


@dataclass
class InlineKeyboardButton:
    """Inline keyboard button"""

    text: str
    url: Optional[str] = None
    callback_data: Optional[str] = None
    switch_inline_query: Optional[str] = None
    switch_inline_query_current_chat: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API format, dropping unset fields"""
        return {
            k: v
            for k, v in {
                "text": self.text,
                "url": self.url,
                "callback_data": self.callback_data,
                "switch_inline_query": self.switch_inline_query,
                "switch_inline_query_current_chat": self.switch_inline_query_current_chat,
            }.items()
            if v is not None
        }


ButtonDescriptor = Union[InlineKeyboardButton, Mapping[str, Any]]
ButtonLayout = Sequence[Sequence[ButtonDescriptor]]


@dataclass
class InlineKeyboardMarkup:
    """Inline keyboard markup: rows of buttons, order significant"""

    inline_keyboard: List[List[ButtonDescriptor]] = field(default_factory=list)

    @classmethod
    def from_layout(cls, layout: Union["InlineKeyboardMarkup", ButtonLayout]) -> "InlineKeyboardMarkup":
        if isinstance(layout, InlineKeyboardMarkup):
            return layout
        if isinstance(layout, (str, bytes, Mapping)):
            raise TypeError("Button layout must be a sequence of rows")
        rows: List[List[ButtonDescriptor]] = []
        for row in layout:
            if isinstance(row, (str, bytes, Mapping)):
                raise TypeError("Each button layout row must be a sequence of buttons")
            rows.append(list(row))
        return cls(inline_keyboard=rows)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to API format"""
        return {
            "inline_keyboard": [
                [
                    btn.to_dict() if isinstance(btn, InlineKeyboardButton) else dict(btn)
                    for btn in row
                ]
                for row in self.inline_keyboard
            ]
        }


ReplyMarkup = Union[InlineKeyboardMarkup, ButtonLayout]


# Result models


class TelegramObject(BaseModel):
    """Base for API result objects; unknown fields are kept, not dropped"""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class User(TelegramObject):
    """Telegram user (getMe result)"""

    id: int
    is_bot: bool
    first_name: str
    last_name: Optional[str] = None
    username: Optional[str] = None
    language_code: Optional[str] = None


class Chat(TelegramObject):
    """Telegram chat"""

    id: int
    type: ChatType
    title: Optional[str] = None
    username: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class PhotoSize(TelegramObject):
    """One resolution of a photo"""

    file_id: str
    file_unique_id: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    file_size: Optional[int] = None


class Message(TelegramObject):
    """Telegram message"""

    message_id: int
    date: int
    chat: Chat
    from_user: Optional[User] = Field(default=None, alias="from")
    text: Optional[str] = None
    caption: Optional[str] = None
    photo: Optional[List[PhotoSize]] = None


class CallbackQuery(TelegramObject):
    """Inline button press"""

    id: str
    from_user: User = Field(alias="from")
    message: Optional[Message] = None
    data: Optional[str] = None
    chat_instance: Optional[str] = None


class Update(TelegramObject):
    """Incoming update (getUpdates item or webhook payload)"""

    update_id: int
    message: Optional[Message] = None
    edited_message: Optional[Message] = None
    channel_post: Optional[Message] = None
    edited_channel_post: Optional[Message] = None
    callback_query: Optional[CallbackQuery] = None


class FileDescriptor(TelegramObject):
    """getFile result; file_path is needed before a download can proceed"""

    file_id: str
    file_unique_id: Optional[str] = None
    file_size: Optional[int] = None
    file_path: Optional[str] = None


class WebhookInfo(TelegramObject):
    """getWebhookInfo result"""

    url: str
    has_custom_certificate: bool = False
    pending_update_count: int = 0
    ip_address: Optional[str] = None
    last_error_date: Optional[int] = None
    last_error_message: Optional[str] = None
    last_synchronization_error_date: Optional[int] = None
    max_connections: Optional[int] = None
    allowed_updates: Optional[List[str]] = None
