"""
Request builders, one per Bot API operation.

Each builder is pure: typed arguments in, ApiRequest out. Nothing here talks
to the network, so payload shapes can be checked without a transport.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from .types import (
    ChatAction,
    ChatTarget,
    InlineKeyboardMarkup,
    MediaKind,
    ParseMode,
    ReplyMarkup,
)

POST = "POST"
GET = "GET"


@dataclass(frozen=True)
class ApiRequest:
    """Method name, parameters and the HTTP verb used to send them"""

    method: str
    params: Dict[str, Any] = field(default_factory=dict)
    http_method: str = POST


def inline_keyboard(buttons: ReplyMarkup) -> Dict[str, Any]:
    """Wrap a button layout as {"inline_keyboard": rows}, order preserved"""
    return InlineKeyboardMarkup.from_layout(buttons).to_dict()


def _parse_mode(value: Optional[Union[ParseMode, str]]) -> Optional[str]:
    if value is None:
        return None
    return value.value if isinstance(value, ParseMode) else str(value)


def send_message(
    chat_id: ChatTarget,
    text: str,
    buttons: Optional[ReplyMarkup] = None,
    parse_mode: Optional[Union[ParseMode, str]] = None,
) -> ApiRequest:
    params: Dict[str, Any] = {"chat_id": chat_id, "text": text}
    if parse_mode is not None:
        params["parse_mode"] = _parse_mode(parse_mode)
    if buttons is not None:
        params["reply_markup"] = inline_keyboard(buttons)
    return ApiRequest("sendMessage", params)


def edit_message_text(
    chat_id: ChatTarget,
    message_id: int,
    text: str,
    buttons: Optional[ReplyMarkup] = None,
    parse_mode: Optional[Union[ParseMode, str]] = None,
) -> ApiRequest:
    params: Dict[str, Any] = {"chat_id": chat_id, "message_id": message_id, "text": text}
    if parse_mode is not None:
        params["parse_mode"] = _parse_mode(parse_mode)
    if buttons is not None:
        params["reply_markup"] = inline_keyboard(buttons)
    return ApiRequest("editMessageText", params)


def delete_message(chat_id: ChatTarget, message_id: int) -> ApiRequest:
    return ApiRequest("deleteMessage", {"chat_id": chat_id, "message_id": message_id})


def send_media(
    kind: Union[MediaKind, str],
    chat_id: ChatTarget,
    media: str,
    caption: str = "",
    parse_mode: Optional[Union[ParseMode, str]] = None,
) -> ApiRequest:
    """
    Build sendPhoto/sendVideo/sendDocument/sendAudio.

    The media field is named after its kind. Caption is always sent, as an
    empty string when not given.
    """
    kind = MediaKind(kind)
    params: Dict[str, Any] = {
        "chat_id": chat_id,
        kind.value: media,
        "caption": caption,
    }
    if parse_mode is not None:
        params["parse_mode"] = _parse_mode(parse_mode)
    return ApiRequest(kind.method, params)


def send_photo(chat_id: ChatTarget, photo: str, caption: str = "", **kwargs: Any) -> ApiRequest:
    return send_media(MediaKind.PHOTO, chat_id, photo, caption, **kwargs)


def send_video(chat_id: ChatTarget, video: str, caption: str = "", **kwargs: Any) -> ApiRequest:
    return send_media(MediaKind.VIDEO, chat_id, video, caption, **kwargs)


def send_document(chat_id: ChatTarget, document: str, caption: str = "", **kwargs: Any) -> ApiRequest:
    return send_media(MediaKind.DOCUMENT, chat_id, document, caption, **kwargs)


def send_audio(chat_id: ChatTarget, audio: str, caption: str = "", **kwargs: Any) -> ApiRequest:
    return send_media(MediaKind.AUDIO, chat_id, audio, caption, **kwargs)


def send_chat_action(chat_id: ChatTarget, action: Union[ChatAction, str]) -> ApiRequest:
    """Action strings are passed through; the platform validates them"""
    value = action.value if isinstance(action, ChatAction) else action
    return ApiRequest("sendChatAction", {"chat_id": chat_id, "action": value})


def set_webhook(url: str) -> ApiRequest:
    return ApiRequest("setWebhook", {"url": url})


def delete_webhook() -> ApiRequest:
    return ApiRequest("deleteWebhook")


def get_webhook_info() -> ApiRequest:
    return ApiRequest("getWebhookInfo")


def get_me() -> ApiRequest:
    return ApiRequest("getMe")


def get_updates(offset: Optional[int] = None, limit: Optional[int] = None) -> ApiRequest:
    """Polling cursor and batch size are optional and only sent when given"""
    params: Dict[str, Any] = {}
    if offset is not None:
        params["offset"] = offset
    if limit is not None:
        params["limit"] = limit
    return ApiRequest("getUpdates", params)


def get_file(file_id: str) -> ApiRequest:
    return ApiRequest("getFile", {"file_id": file_id}, http_method=GET)
