import argparse
import json
import logging
import sys
from typing import Optional

from .api import MailRuClient, MailRuError, RequestsTransport
from .config import Settings, get_settings
from .utils import setup_logging, validate_uid

logger = logging.getLogger(__name__)


def create_client(settings: Optional[Settings] = None) -> MailRuClient:
    settings = settings or get_settings()

    transport = RequestsTransport(timeout=settings.http_timeout)

    return MailRuClient(
        config=settings.client_config(),
        transport=transport,
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Mail.ru OAuth client")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("dialog-url", help="Print authorization dialog URL")

    token_parser = subparsers.add_parser(
        "token",
        help="Exchange code from redirect URL for access token",
    )
    token_parser.add_argument("redirect_url", help="Redirect URL with code parameter")

    user_parser = subparsers.add_parser("user", help="Fetch user profile")
    user_parser.add_argument("uid", help="User ID")

    return parser


def run(args: argparse.Namespace, client: MailRuClient) -> int:
    if args.command == "dialog-url":
        print(client.dialog_url())
        return 0

    if args.command == "token":
        token = client.get_access_token(args.redirect_url)
        logger.info(f"Got access token for user {token.user_id}, expires in {token.expires_in}s")
        print(json.dumps(token.to_dict(), ensure_ascii=False, indent=2))
        return 0

    if args.command == "user":
        uid = validate_uid(args.uid)
        user = client.get_user(uid)
        logger.info(f"Fetched user {user.id}: {user.display_name}")
        print(json.dumps(user.to_dict(), ensure_ascii=False, indent=2))
        return 0

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        settings = get_settings()
        setup_logging(settings.log_file, settings.log_level)

        with create_client(settings) as client:
            return run(args, client)
    except ValueError as e:
        logger.error(str(e))
        return 1
    except MailRuError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
