"""
File resolution and retrieval.

Downloading a file takes two round trips:

    1. getFile(file_id) -> FileDescriptor with a file_path
    2. GET <file root>/<file_path> -> raw bytes

Nothing is kept between calls. Either phase failing ends the call.
"""

import logging
import os
from typing import IO, Any, Iterable, Mapping, Optional, Sequence, Union

from . import commands
from .base.errors import NoPhotoFound, RemoteRejected, ResolutionError
from .envelope import decode_result
from .transport import Transport
from .types import FileDescriptor, Message, Update

logger = logging.getLogger(__name__)

Destination = Union[str, "os.PathLike[str]", IO[bytes]]
UpdateLike = Union[Update, Mapping[str, Any]]


def _message_photos(update: UpdateLike) -> Optional[Sequence[Any]]:
    if isinstance(update, Update):
        for message in (update.message, update.channel_post):
            if message is not None and message.photo:
                return message.photo
        return None

    for key in ("message", "channel_post"):
        message = update.get(key)
        if isinstance(message, Message):
            if message.photo:
                return message.photo
        elif isinstance(message, Mapping) and message.get("photo"):
            return message["photo"]
    return None


def _iter_updates(updates: Any) -> Iterable[UpdateLike]:
    if isinstance(updates, Update):
        return [updates]
    if isinstance(updates, Mapping):
        # raw getUpdates envelope
        if "result" in updates and isinstance(updates["result"], list):
            return updates["result"]
        return [updates]
    if isinstance(updates, (str, bytes)):
        raise TypeError("Expected an update or a sequence of updates")
    return updates


def highest_quality_photo_file_id(updates: Any) -> str:
    """
    Return the file_id of the largest photo size in the first update with a photo.

    The platform lists photo sizes in ascending order, so the last entry is
    taken without comparing dimensions.

    Args:
        updates: An Update, a raw update dict, a sequence of either, or a
            raw getUpdates envelope dict

    Raises:
        NoPhotoFound: no update carries a photo
    """
    for update in _iter_updates(updates):
        photos = _message_photos(update)
        if not photos:
            continue
        largest = photos[-1]
        file_id = largest.file_id if hasattr(largest, "file_id") else largest.get("file_id")
        if file_id:
            return file_id
    raise NoPhotoFound()


class FileRetriever:
    """Resolve-then-fetch over a shared transport"""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def resolve(self, file_id: str) -> FileDescriptor:
        """
        Phase 1: getFile.

        Raises:
            ResolutionError: platform rejected the call or returned no file_path
            TransportError: platform could not be reached
        """
        request = commands.get_file(file_id)
        body = self._transport.get_json(request.method, request.params)
        try:
            descriptor = decode_result(body, FileDescriptor, method=request.method)
        except RemoteRejected as e:
            raise ResolutionError(file_id, e.description) from e

        if not descriptor.file_path:
            raise ResolutionError(file_id, "no file_path returned")
        return descriptor

    def file_url(self, file_path: str) -> str:
        return self._transport.identity.file_url(file_path)

    def fetch(self, file_path: str, destination: Optional[Destination] = None) -> Union[bytes, bool]:
        """
        Phase 2: download bytes for a resolved file_path.

        Returns the bytes, or True once they were written to `destination`.
        """
        content = self._transport.get_bytes(self.file_url(file_path))
        if destination is None:
            return content
        write_to(destination, content)
        logger.debug("Saved %d bytes from %s", len(content), file_path)
        return True

    def download(self, file_id: str, destination: Optional[Destination] = None) -> Union[bytes, bool]:
        """Resolve file_id, then fetch it"""
        descriptor = self.resolve(file_id)
        return self.fetch(descriptor.file_path, destination)

    def download_photo(self, updates: Any, destination: Optional[Destination] = None) -> Union[bytes, bool]:
        """Download the highest quality photo carried by an update"""
        return self.download(highest_quality_photo_file_id(updates), destination)


def write_to(destination: Destination, content: bytes) -> None:
    """
    Write content to a path or a binary stream.

    Paths are opened and closed here. Streams belong to the caller: they are
    flushed on every exit path but not closed.
    """
    if isinstance(destination, (str, os.PathLike)):
        with open(destination, "wb") as f:
            f.write(content)
        return

    try:
        destination.write(content)
    finally:
        destination.flush()
