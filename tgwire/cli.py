"""
Command-line interface for one-off Bot API calls.

Useful for checking a token, inspecting webhook state or fetching a file
without writing a bot.
"""

import argparse
import json
import logging
import sys
from typing import Any, List, Optional, Union

import structlog
from dotenv import load_dotenv

from .base.errors import TelegramError
from .client import TelegramClient
from .config import get_settings
from .envelope import RawResponse

logger = structlog.get_logger()


def configure_logging(verbose: bool = False) -> None:
    """Console logging via structlog on top of stdlib logging"""
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.INFO,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def chat_target(value: str) -> Union[int, str]:
    """Numeric ids become ints, @handles stay strings"""
    try:
        return int(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tgwire",
        description="Telegram Bot API client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s me
  %(prog)s send @my_channel "Deploy finished"
  %(prog)s updates --offset 1001 --limit 10
  %(prog)s download AgACAgIAAxk... -o photo.jpg
  %(prog)s webhook set https://example.com/hook

Environment Variables:
  TELEGRAM_BOT_TOKEN  Bot token
  TELEGRAM_API_HOST   API host or root URL (default: api.telegram.org)
  TELEGRAM_TIMEOUT    Request timeout in seconds (default: 10)
        """,
    )
    parser.add_argument("--token", default=None, help="Bot token (or set TELEGRAM_BOT_TOKEN)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("me", help="Show bot identity (getMe)")

    updates = sub.add_parser("updates", help="Fetch pending updates once (getUpdates)")
    updates.add_argument("--offset", type=int, default=None)
    updates.add_argument("--limit", type=int, default=None)

    send = sub.add_parser("send", help="Send a text message")
    send.add_argument("chat", type=chat_target)
    send.add_argument("text")

    delete = sub.add_parser("delete", help="Delete a message")
    delete.add_argument("chat", type=chat_target)
    delete.add_argument("message_id", type=int)

    action = sub.add_parser("action", help="Send a chat action such as typing")
    action.add_argument("chat", type=chat_target)
    action.add_argument("action")

    webhook = sub.add_parser("webhook", help="Manage the webhook")
    webhook_sub = webhook.add_subparsers(dest="webhook_command", required=True)
    webhook_set = webhook_sub.add_parser("set")
    webhook_set.add_argument("url")
    webhook_sub.add_parser("delete")
    webhook_sub.add_parser("info")

    download = sub.add_parser("download", help="Download a file by file_id")
    download.add_argument("file_id")
    download.add_argument("-o", "--output", default=None, help="Destination path")

    return parser


def _emit(value: Any) -> None:
    if isinstance(value, RawResponse):
        print(value.body)
    elif isinstance(value, list):
        print(json.dumps([_dump(v) for v in value], ensure_ascii=False, indent=2))
    else:
        print(json.dumps(_dump(value), ensure_ascii=False, indent=2))


def _dump(value: Any) -> Any:
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    return value


def run(client: TelegramClient, args: argparse.Namespace) -> Any:
    """Dispatch parsed arguments to the client"""
    if args.command == "me":
        return client.get_me()
    if args.command == "updates":
        return client.get_updates(offset=args.offset, limit=args.limit)
    if args.command == "send":
        return client.send_message(args.chat, args.text)
    if args.command == "delete":
        return client.delete_message(args.chat, args.message_id)
    if args.command == "action":
        return client.send_chat_action(args.chat, args.action)
    if args.command == "webhook":
        if args.webhook_command == "set":
            return client.set_webhook(args.url)
        if args.webhook_command == "delete":
            return client.delete_webhook()
        return client.get_webhook_info()
    if args.command == "download":
        if args.output:
            client.download(args.file_id, args.output)
            logger.info("File saved", file_id=args.file_id, path=args.output)
            return None
        content = client.download(args.file_id)
        sys.stdout.buffer.write(content)
        sys.stdout.flush()
        return None
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    settings = get_settings()
    if args.token:
        settings = settings.model_copy(update={"bot_token": args.token})
    if not settings.bot_token:
        logger.error("TELEGRAM_BOT_TOKEN not set and --token not given")
        return 1

    client = TelegramClient.from_settings(settings)
    try:
        result = run(client, args)
    except TelegramError as e:
        logger.error("Request failed", command=args.command, error_type=type(e).__name__, error=str(e))
        return 1

    if result is not None:
        _emit(result)
    return 0
