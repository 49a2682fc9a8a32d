from .errors import (
    DecodeError,
    FileRetrievalError,
    NoPhotoFound,
    RemoteRejected,
    ResolutionError,
    TelegramError,
    TransportError,
)

__all__ = [
    "TelegramError",
    "TransportError",
    "DecodeError",
    "RemoteRejected",
    "FileRetrievalError",
    "ResolutionError",
    "NoPhotoFound",
]
