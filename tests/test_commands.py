"""Tests for request builders and the media-edit payload."""

import json

import pytest

from tgwire import commands
from tgwire.commands import GET, POST, ApiRequest
from tgwire.media import edit_message_media, media_edit_payload
from tgwire.types import ChatAction, InlineKeyboardButton, InlineKeyboardMarkup, MediaKind, ParseMode

LAYOUT = [
    [
        InlineKeyboardButton("Prev", callback_data="page:1"),
        {"text": "Open", "url": "https://example.com"},
        InlineKeyboardButton("Next", callback_data="page:3"),
    ],
    [{"text": "Close", "callback_data": "close"}],
]

EXPECTED_KEYBOARD = [
    [
        {"text": "Prev", "callback_data": "page:1"},
        {"text": "Open", "url": "https://example.com"},
        {"text": "Next", "callback_data": "page:3"},
    ],
    [{"text": "Close", "callback_data": "close"}],
]


class TestMessageBuilders:
    """Tests for text message builders."""

    def test_send_message_required_fields_only(self):
        """Test no optional keys are sent when not supplied."""
        request = commands.send_message(123, "hello")
        assert request == ApiRequest("sendMessage", {"chat_id": 123, "text": "hello"}, POST)

    def test_send_message_with_buttons(self):
        """Test buttons are wrapped under reply_markup.inline_keyboard in order."""
        request = commands.send_message("@channel", "pick", buttons=LAYOUT)
        assert request.params["chat_id"] == "@channel"
        assert request.params["reply_markup"] == {"inline_keyboard": EXPECTED_KEYBOARD}

    def test_send_message_with_markup_object(self):
        """Test an InlineKeyboardMarkup is accepted as-is."""
        markup = InlineKeyboardMarkup(inline_keyboard=[[InlineKeyboardButton("A", callback_data="a")]])
        request = commands.send_message(1, "x", buttons=markup)
        assert request.params["reply_markup"] == {
            "inline_keyboard": [[{"text": "A", "callback_data": "a"}]]
        }

    def test_send_message_parse_mode(self):
        """Test parse_mode is sent only when given."""
        request = commands.send_message(1, "<b>x</b>", parse_mode=ParseMode.HTML)
        assert request.params["parse_mode"] == "HTML"
        assert "parse_mode" not in commands.send_message(1, "x").params

    def test_empty_layout_is_sent(self):
        """Test an empty layout still produces reply_markup (clears buttons)."""
        request = commands.send_message(1, "x", buttons=[])
        assert request.params["reply_markup"] == {"inline_keyboard": []}

    def test_invalid_layout(self):
        """Test a flat list of strings is not a layout."""
        with pytest.raises(TypeError):
            commands.send_message(1, "x", buttons=["not", "rows"])

    def test_edit_message_text(self):
        """Test editMessageText fields and button wrapping."""
        request = commands.edit_message_text(1, 55, "updated", buttons=LAYOUT)
        assert request.method == "editMessageText"
        assert request.params["message_id"] == 55
        assert request.params["text"] == "updated"
        assert request.params["reply_markup"]["inline_keyboard"] == EXPECTED_KEYBOARD

    def test_edit_message_text_without_buttons(self):
        """Test editMessageText omits reply_markup when not supplied."""
        request = commands.edit_message_text(1, 55, "updated")
        assert request.params == {"chat_id": 1, "message_id": 55, "text": "updated"}

    def test_delete_message(self):
        """Test deleteMessage carries chat and message id."""
        request = commands.delete_message(-100200, 9)
        assert request == ApiRequest("deleteMessage", {"chat_id": -100200, "message_id": 9})


class TestMediaBuilders:
    """Tests for sendPhoto/Video/Document/Audio."""

    @pytest.mark.parametrize(
        "builder,method,field",
        [
            (commands.send_photo, "sendPhoto", "photo"),
            (commands.send_video, "sendVideo", "video"),
            (commands.send_document, "sendDocument", "document"),
            (commands.send_audio, "sendAudio", "audio"),
        ],
    )
    def test_field_named_after_kind(self, builder, method, field):
        """Test the media field name follows the media kind."""
        request = builder(1, "https://example.com/file", "caption")
        assert request.method == method
        assert request.params == {
            "chat_id": 1,
            field: "https://example.com/file",
            "caption": "caption",
        }

    def test_caption_defaults_to_empty_string(self):
        """Test caption is always sent, empty when not given."""
        request = commands.send_photo(1, "AgACAgIAAxkBAAI")
        assert request.params["caption"] == ""

    def test_send_media_accepts_kind_string(self):
        """Test send_media accepts a plain kind string."""
        request = commands.send_media("video", 1, "file-id")
        assert request.method == "sendVideo"
        assert MediaKind.AUDIO.method == "sendAudio"

    def test_unknown_kind(self):
        """Test unknown media kinds are rejected."""
        with pytest.raises(ValueError):
            commands.send_media("sticker", 1, "file-id")


class TestOtherBuilders:
    """Tests for chat action, webhook, updates and file builders."""

    def test_chat_action_enum(self):
        """Test ChatAction enums are sent as their string value."""
        request = commands.send_chat_action(1, ChatAction.UPLOAD_PHOTO)
        assert request.params == {"chat_id": 1, "action": "upload_photo"}

    def test_chat_action_not_validated(self):
        """Test unknown action strings pass through unchanged."""
        request = commands.send_chat_action(1, "some_future_action")
        assert request.params["action"] == "some_future_action"

    def test_webhook_builders(self):
        """Test webhook management payloads."""
        assert commands.set_webhook("https://example.com/hook") == ApiRequest(
            "setWebhook", {"url": "https://example.com/hook"}
        )
        assert commands.delete_webhook() == ApiRequest("deleteWebhook", {})
        assert commands.get_webhook_info() == ApiRequest("getWebhookInfo", {})

    def test_parameterless_builders(self):
        """Test getMe and getUpdates send no parameters by default."""
        assert commands.get_me().params == {}
        assert commands.get_updates().params == {}

    def test_get_updates_cursor(self):
        """Test offset and limit are forwarded when given."""
        assert commands.get_updates(offset=101, limit=5).params == {"offset": 101, "limit": 5}
        assert commands.get_updates(offset=0).params == {"offset": 0}

    def test_get_file_uses_get(self):
        """Test getFile is sent as a query-string GET."""
        request = commands.get_file("BQACAgIAAxk")
        assert request.method == "getFile"
        assert request.http_method == GET
        assert request.params == {"file_id": "BQACAgIAAxk"}


class TestEditMessageMedia:
    """Tests for the media-edit payload."""

    def test_media_is_json_text(self):
        """Test media is sent as a JSON string, not a nested object."""
        request = edit_message_media(1, 10, "https://example.com/p.jpg", "Page 2")

        assert request.method == "editMessageMedia"
        assert isinstance(request.params["media"], str)
        media = json.loads(request.params["media"])
        assert media == {
            "type": "photo",
            "media": "https://example.com/p.jpg",
            "caption": "Page 2",
            "parse_mode": "HTML",
        }
        assert "reply_markup" not in request.params

    def test_buttons_are_json_text(self):
        """Test reply_markup is serialized independently as JSON text."""
        request = edit_message_media(1, 10, "file-id", buttons=LAYOUT)

        assert isinstance(request.params["reply_markup"], str)
        assert json.loads(request.params["reply_markup"]) == {"inline_keyboard": EXPECTED_KEYBOARD}
        assert json.loads(request.params["media"])["type"] == "photo"

    def test_outer_serialization_keeps_strings(self):
        """Test the outer JSON body carries media as an encoded string."""
        request = edit_message_media(1, 10, "file-id", "caption", buttons=LAYOUT)
        body = json.loads(json.dumps(request.params))

        assert isinstance(body["media"], str)
        assert isinstance(body["reply_markup"], str)

    def test_parse_mode_override(self):
        """Test the caption parse mode can be changed."""
        payload = media_edit_payload("file-id", "*x*", ParseMode.MARKDOWN_V2)
        assert payload["parse_mode"] == "MarkdownV2"
        assert payload["type"] == "photo"
