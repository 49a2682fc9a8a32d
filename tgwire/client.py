"""
Telegram Bot API client.

Composes request builders, the transport and the envelope decoder into one
object exposing every supported operation.
"""

from typing import TYPE_CHECKING, Any, List, Optional, Union

from . import commands
from .commands import GET, ApiRequest
from .envelope import RawResponse, decode_result
from .files import Destination, FileRetriever, highest_quality_photo_file_id
from .media import edit_message_media
from .transport import Transport
from .types import (
    DEFAULT_API_HOST,
    ChatAction,
    ChatTarget,
    ClientIdentity,
    FileDescriptor,
    ParseMode,
    ReplyMarkup,
    Update,
    User,
    WebhookInfo,
)

if TYPE_CHECKING:
    from .config import TelegramSettings


class TelegramClient:
    """
    Synchronous Telegram Bot API client.

    Write operations (send/edit/delete/webhook management) return a
    RawResponse holding the raw body; read operations (get_me, get_updates,
    get_file, get_webhook_info) return the decoded, typed result.

    Every operation raises a TelegramError subclass on failure:
    TransportError when the platform cannot be reached, DecodeError when the
    answer is not a valid envelope, RemoteRejected when it says ok=false.

    Example:
        client = TelegramClient(token="...")
        client.send_message(chat_id, "Hello", buttons=[[{"text": "Hi", "callback_data": "hi"}]])
        me = client.get_me()
    """

    def __init__(
        self,
        token: str,
        timeout: float = 10,
        api_host: str = DEFAULT_API_HOST,
        transport: Optional[Transport] = None,
    ) -> None:
        """
        Initialize client.

        Args:
            token: Bot token from @BotFather (not validated locally)
            timeout: Request timeout in seconds, applied to every call
            api_host: API host name or root URL of a self-hosted server
            transport: Pre-built transport, mainly for tests
        """
        if transport is not None:
            # URLs built here must match the ones the transport calls
            self._identity = transport.identity
            self._transport = transport
        else:
            self._identity = ClientIdentity(token=token, host=api_host)
            self._transport = Transport(self._identity, timeout=timeout)
        self._files = FileRetriever(self._transport)

    @classmethod
    def from_settings(cls, settings: "TelegramSettings") -> "TelegramClient":
        """Create client from settings object"""
        return cls(
            token=settings.bot_token,
            timeout=settings.timeout,
            api_host=settings.api_host,
        )

    @property
    def identity(self) -> ClientIdentity:
        return self._identity

    def __repr__(self) -> str:
        return f"TelegramClient(host={self._identity.host!r})"

    def _execute(self, request: ApiRequest) -> str:
        if request.http_method == GET:
            return self._transport.get_json(request.method, request.params)
        return self._transport.post_json(request.method, request.params)

    def _call(self, request: ApiRequest) -> RawResponse:
        body = self._execute(request)
        return RawResponse.from_body(request.method, body)

    def _query(self, request: ApiRequest, model: Any) -> Any:
        body = self._execute(request)
        return decode_result(body, model, method=request.method)

    # Messages

    def send_message(
        self,
        chat_id: ChatTarget,
        text: str,
        buttons: Optional[ReplyMarkup] = None,
        parse_mode: Optional[Union[ParseMode, str]] = None,
    ) -> RawResponse:
        """
        Send a text message.

        Args:
            chat_id: Numeric chat id or @channel handle
            text: Message text
            buttons: Optional inline keyboard rows
            parse_mode: Optional parse mode
        """
        return self._call(commands.send_message(chat_id, text, buttons, parse_mode))

    def edit_message_text(
        self,
        chat_id: ChatTarget,
        message_id: int,
        text: str,
        buttons: Optional[ReplyMarkup] = None,
        parse_mode: Optional[Union[ParseMode, str]] = None,
    ) -> RawResponse:
        """Replace the text (and optionally the buttons) of a sent message"""
        return self._call(commands.edit_message_text(chat_id, message_id, text, buttons, parse_mode))

    def delete_message(self, chat_id: ChatTarget, message_id: int) -> RawResponse:
        """Delete a message; deleting it again raises RemoteRejected"""
        return self._call(commands.delete_message(chat_id, message_id))

    def edit_message_media(
        self,
        chat_id: ChatTarget,
        message_id: int,
        media: str,
        caption: str = "",
        buttons: Optional[ReplyMarkup] = None,
        parse_mode: Union[ParseMode, str] = ParseMode.HTML,
    ) -> RawResponse:
        """
        Replace a message's photo, caption and buttons in one call.

        Args:
            chat_id: Chat of the message
            message_id: Message to edit
            media: Photo URL or file_id
            caption: New caption
            buttons: Optional inline keyboard rows
            parse_mode: Caption parse mode (HTML by default)
        """
        return self._call(
            edit_message_media(chat_id, message_id, media, caption, buttons, parse_mode)
        )

    # Media

    def send_photo(self, chat_id: ChatTarget, photo: str, caption: str = "", **kwargs: Any) -> RawResponse:
        """Send a photo by URL or file_id"""
        return self._call(commands.send_photo(chat_id, photo, caption, **kwargs))

    def send_video(self, chat_id: ChatTarget, video: str, caption: str = "", **kwargs: Any) -> RawResponse:
        """Send a video by URL or file_id"""
        return self._call(commands.send_video(chat_id, video, caption, **kwargs))

    def send_document(
        self, chat_id: ChatTarget, document: str, caption: str = "", **kwargs: Any
    ) -> RawResponse:
        """Send a document by URL or file_id"""
        return self._call(commands.send_document(chat_id, document, caption, **kwargs))

    def send_audio(self, chat_id: ChatTarget, audio: str, caption: str = "", **kwargs: Any) -> RawResponse:
        """Send an audio file by URL or file_id"""
        return self._call(commands.send_audio(chat_id, audio, caption, **kwargs))

    def send_chat_action(self, chat_id: ChatTarget, action: Union[ChatAction, str]) -> RawResponse:
        """
        Send chat action (typing indicator, etc.)

        Args:
            chat_id: Target chat
            action: typing, upload_photo, record_voice, ...
        """
        return self._call(commands.send_chat_action(chat_id, action))

    # Webhooks and updates

    def set_webhook(self, url: str) -> RawResponse:
        return self._call(commands.set_webhook(url))

    def delete_webhook(self) -> RawResponse:
        return self._call(commands.delete_webhook())

    def get_webhook_info(self) -> WebhookInfo:
        return self._query(commands.get_webhook_info(), WebhookInfo)

    def get_me(self) -> User:
        """Get bot information"""
        return self._query(commands.get_me(), User)

    def get_updates(self, offset: Optional[int] = None, limit: Optional[int] = None) -> List[Update]:
        """
        Fetch pending updates once.

        Polling cadence is up to the caller; pass offset=last update_id + 1
        to acknowledge what was already processed.
        """
        return self._query(commands.get_updates(offset, limit), List[Update])

    # Files

    def get_file(self, file_id: str) -> FileDescriptor:
        """Resolve a file_id to its descriptor (file_path may be absent)"""
        return self._query(commands.get_file(file_id), FileDescriptor)

    def file_url(self, file_path: str) -> str:
        """Content URL of a resolved file. Contains the bot token."""
        return self._files.file_url(file_path)

    def download_file(self, file_path: str, destination: Optional[Destination] = None) -> Union[bytes, bool]:
        """
        Download an already resolved file_path.

        Returns:
            The bytes, or True when written to `destination`
        """
        return self._files.fetch(file_path, destination)

    def download(self, file_id: str, destination: Optional[Destination] = None) -> Union[bytes, bool]:
        """
        Resolve a file_id with getFile and download its content.

        Raises:
            ResolutionError: getFile was rejected or returned no file_path
            TransportError: either round trip failed
        """
        return self._files.download(file_id, destination)

    def download_photo(self, updates: Any, destination: Optional[Destination] = None) -> Union[bytes, bool]:
        """
        Download the highest quality photo of the first update carrying one.

        Raises:
            NoPhotoFound: no update carries a photo
        """
        return self._files.download_photo(updates, destination)

    highest_quality_photo_file_id = staticmethod(highest_quality_photo_file_id)
