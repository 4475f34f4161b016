"""``chat``: get answers to your queries using OpenAI's GPT-3.5-turbo via CLI."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import requests

from gpt_chat import config
from gpt_chat.chat_client import DEFAULT_MAX_TOKENS, DEFAULT_TIMEOUT, get_chat_response
from gpt_chat.errors import ChatError, ConfigLoadError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chat",
        description="Get answers using OpenAI's GPT",
        epilog="Get answers to your queries using OpenAI's GPT-3.5-turbo model via CLI.",
    )
    parser.add_argument(
        "query",
        nargs="*",
        help="Question to ask; several words are joined with spaces",
    )
    parser.add_argument(
        "--max-tokens",
        type=int,
        default=DEFAULT_MAX_TOKENS,
        help=f"Maximum tokens in the answer (default {DEFAULT_MAX_TOKENS})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help=f"Seconds to wait for the API (default {DEFAULT_TIMEOUT})",
    )
    parser.add_argument(
        "--env-file",
        default=config.ENV_FILE,
        help="dotenv file to read OPEN_API_KEY from (default .env)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log request diagnostics to stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config.load_env(args.env_file)
    except ConfigLoadError as exc:
        print(exc, file=sys.stderr)
        return 1

    if not args.query:
        print("Please provide a query.", file=sys.stderr)
        return 2
    query = " ".join(args.query)

    try:
        answer = get_chat_response(
            query, max_tokens=args.max_tokens, timeout=args.timeout
        )
    except (ChatError, requests.RequestException) as exc:
        logger.debug("Chat request failed", exc_info=True)
        print(f"Error getting response: {exc}", file=sys.stderr)
        return 1

    print("Answer:", answer)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
