"""
Replacing a message's media, caption and buttons in one call.

editMessageMedia is the one method where `media` and `reply_markup` travel as
JSON text inside the outer parameters rather than as nested objects. Both are
serialized here independently of the outer body serialization.
"""

import json
from typing import Any, Dict, Optional, Union

from .commands import ApiRequest, inline_keyboard
from .types import ChatTarget, MediaKind, ParseMode, ReplyMarkup


def media_edit_payload(
    media: str,
    caption: str = "",
    parse_mode: Union[ParseMode, str] = ParseMode.HTML,
    kind: Union[MediaKind, str] = MediaKind.PHOTO,
) -> Dict[str, Any]:
    """InputMedia descriptor: type, media URL or file_id, caption, parse_mode"""
    return {
        "type": MediaKind(kind).value,
        "media": media,
        "caption": caption,
        "parse_mode": parse_mode.value if isinstance(parse_mode, ParseMode) else parse_mode,
    }


def edit_message_media(
    chat_id: ChatTarget,
    message_id: int,
    media: str,
    caption: str = "",
    buttons: Optional[ReplyMarkup] = None,
    parse_mode: Union[ParseMode, str] = ParseMode.HTML,
) -> ApiRequest:
    params: Dict[str, Any] = {
        "chat_id": chat_id,
        "message_id": message_id,
        "media": json.dumps(media_edit_payload(media, caption, parse_mode), ensure_ascii=False),
    }
    if buttons is not None:
        params["reply_markup"] = json.dumps(inline_keyboard(buttons), ensure_ascii=False)
    return ApiRequest("editMessageMedia", params)
