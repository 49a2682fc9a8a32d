"""
Error taxonomy for the Telegram Bot API client.

Every failure is an ordinary exception deriving from TelegramError, so callers
can tell apart:

    TransportError  - the platform could not be reached
    DecodeError     - the platform answered, but not with a valid envelope
    RemoteRejected  - the platform answered ok=false
"""

import re
from typing import Any, Dict, Optional

_TOKEN_IN_URL = re.compile(r"/bot\d+:[\w-]+")


def redact_token(text: str) -> str:
    """Hide bot tokens embedded in API or file URLs"""
    return _TOKEN_IN_URL.sub("/bot***", str(text))


class TelegramError(Exception):
    """Base class for all client errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = redact_token(message)
        self.details = details or {}
        super().__init__(self.message)


class TransportError(TelegramError):
    """Connection failure, timeout or empty response body"""

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        self.method = method
        self.status_code = status_code
        # requests exceptions embed the full URL; keep only a redacted copy
        self.cause = redact_token(f"{type(cause).__name__}: {cause}") if cause is not None else None
        super().__init__(
            message,
            {"method": method, "status_code": status_code, "cause": self.cause},
        )


class DecodeError(TelegramError):
    """Response body is not a valid API envelope or result shape"""


class RemoteRejected(TelegramError):
    """Well-formed envelope with ok=false"""

    def __init__(
        self,
        error_code: Optional[int],
        description: Optional[str],
        parameters: Optional[Dict[str, Any]] = None,
        method: Optional[str] = None,
    ):
        self.error_code = error_code
        self.description = description
        self.parameters = parameters or {}
        self.method = method
        prefix = f"{method}: " if method else ""
        super().__init__(
            f"{prefix}[{error_code}] {description or 'Unknown error'}",
            {"error_code": error_code, "description": description, "method": method},
        )

    @property
    def retry_after(self) -> Optional[int]:
        return self.parameters.get("retry_after")

    @property
    def migrate_to_chat_id(self) -> Optional[int]:
        return self.parameters.get("migrate_to_chat_id")


class FileRetrievalError(TelegramError):
    """Base class for file download failures"""


class ResolutionError(FileRetrievalError):
    """getFile did not yield a downloadable file_path"""

    def __init__(self, file_id: str, description: Optional[str] = None):
        self.file_id = file_id
        self.description = description
        super().__init__(
            f"Failed to resolve file {file_id}: {description or 'no file_path returned'}",
            {"file_id": file_id, "description": description},
        )


class NoPhotoFound(FileRetrievalError):
    """Update carries no photo sizes"""

    def __init__(self, message: str = "No photo found in update"):
        super().__init__(message)
