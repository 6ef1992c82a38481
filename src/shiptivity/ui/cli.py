# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from shiptivity import app
from shiptivity.config import ConfigurationError, configure_logging
from shiptivity.domain.model import ClientStatus
from shiptivity.domain.validation import RequestValidationError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from types import FrameType

    from shiptivity.domain.model import ClientRecord

log = logging.getLogger(__name__)

_STATUS_CHOICES = ", ".join(status.value for status in ClientStatus)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage the Shiptivity client board")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output, including reconciliation decisions",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_cmd = subparsers.add_parser("list", help="List clients")
    list_cmd.add_argument(
        "--status",
        type=str,
        help=f"Only list clients in this lane ({_STATUS_CHOICES})",
    )

    get_cmd = subparsers.add_parser("get", help="Show a single client")
    get_cmd.add_argument("client_id", type=str, help="Client id")

    update_cmd = subparsers.add_parser(
        "update",
        help="Move a client to another lane and/or priority",
    )
    update_cmd.add_argument("client_id", type=str, help="Client id")
    update_cmd.add_argument(
        "--status",
        type=str,
        help=f"Destination lane ({_STATUS_CHOICES}); defaults to the current lane",
    )
    update_cmd.add_argument(
        "--priority",
        type=str,
        help="Desired rank in the lane, 1 being the top; omitted on a lane change "
        "sends the client to the bottom",
    )

    create_cmd = subparsers.add_parser("create", help="Add a client to the bottom of a lane")
    create_cmd.add_argument("--name", type=str, required=True, help="Client name")
    create_cmd.add_argument("--description", type=str, help="Optional description")
    create_cmd.add_argument(
        "--status",
        type=str,
        default=ClientStatus.BACKLOG.value,
        help="Lane to add the client to (default: %(default)s)",
    )

    return parser.parse_args(list(argv))


def _emit(payload: object) -> None:
    print(json.dumps(payload, indent=2))


def _emit_clients(records: Iterable[ClientRecord]) -> None:
    _emit([record.to_dict() for record in records])


def _run(args: argparse.Namespace) -> None:
    if args.command == "list":
        _emit_clients(app.list_clients(status=args.status))
    elif args.command == "get":
        _emit(app.get_client(client_id=args.client_id).to_dict())
    elif args.command == "update":
        result = app.update_client(
            client_id=args.client_id,
            status=args.status,
            priority=args.priority,
        )
        _emit_clients(result.clients)
    elif args.command == "create":
        record = app.create_client(
            name=args.name,
            description=args.description,
            status=args.status,
        )
        _emit(record.to_dict())
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    try:
        configure_logging(level=logging.DEBUG if parsed_args.verbose else None)
    except ConfigurationError:
        log.exception("Invalid logging configuration")
        sys.exit(2)

    try:
        _run(parsed_args)
    except RequestValidationError as exc:
        log.error("%s %s", exc.message, exc.long_message)  # noqa: TRY400
        _emit(exc.as_dict())
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while running %s", parsed_args.command)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console-script entry point."""
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
