"""
Command-line interface for the QIWI wallet client.
"""

import argparse
import asyncio
from contextlib import aclosing
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Callable, Sequence

import structlog

from qiwi_wallet.application.services import QiwiClient
from qiwi_wallet.core.config import settings
from qiwi_wallet.core.logging import setup_logging
from qiwi_wallet.domain.entities import CellularTopUp, Currency, Provider, QiwiTransfer, WalletUser
from qiwi_wallet.domain.exceptions import DomainException
from qiwi_wallet.schemas import WalletModel

from .credentials import config_location, load_credentials, save_credentials

logger = structlog.get_logger(__name__)


def _provider(value: str) -> int:
    if value.isdigit():
        return int(value)
    try:
        return int(Provider[value.upper()])
    except KeyError:
        raise argparse.ArgumentTypeError(
            f"unknown provider {value!r}; use a numeric id or one of "
            + ", ".join(p.name.lower() for p in Provider)
        ) from None


def _amount(value: str) -> Decimal:
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"invalid amount {value!r}") from None
    if not amount.is_finite() or amount <= 0:
        raise argparse.ArgumentTypeError("amount must be a positive number")
    return amount


def _limit(value: str) -> int:
    try:
        limit = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid limit {value!r}") from None
    if limit < 1:
        raise argparse.ArgumentTypeError("limit must be at least 1")
    return limit


def _currency(value: str) -> Currency:
    try:
        return Currency[value.upper()]
    except KeyError:
        raise argparse.ArgumentTypeError(
            "currency must be one of " + ", ".join(c.name for c in Currency)
        ) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qiwi-cli",
        description="Query and use a QIWI wallet from the command line",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to the credentials file (default: $XDG_CONFIG_HOME/qiwi-cli/config.env)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Python logging level (default: %(default)s)",
    )
    parser.add_argument(
        "--log-format",
        choices=("console", "json"),
        default=settings.log_format,
        help="Log renderer (default: %(default)s)",
    )

    commands = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    commands.add_parser("login", help="Authorize the client and store credentials")
    commands.add_parser("profile-info", help="Show profile info")

    history = commands.add_parser("payment-history", help="Show payment history")
    history.add_argument("--limit", type=_limit, default=None, help="Stop after N entries")

    info = commands.add_parser("commission-info", help="Show provider commission ranges")
    info.add_argument("provider", type=_provider)

    quote = commands.add_parser("commission-quote", help="Quote the commission of a payment")
    quote.add_argument("provider", type=_provider)
    quote.add_argument("account", help="Recipient phone number in international format")
    quote.add_argument("amount", type=_amount)

    transfer = commands.add_parser("transfer", help="Send money")
    directions = transfer.add_subparsers(dest="direction", required=True, metavar="DIRECTION")

    to_wallet = directions.add_parser("qiwi", help="Transfer to another wallet")
    to_wallet.add_argument("phone")
    to_wallet.add_argument("amount", type=_amount)
    to_wallet.add_argument("--currency", type=_currency, default=Currency.RUB)

    to_phone = directions.add_parser("cellular", help="Top up a mobile phone")
    to_phone.add_argument("carrier", type=_provider)
    to_phone.add_argument("phone")
    to_phone.add_argument("amount", type=_amount)

    for sub in (to_wallet, to_phone):
        sub.add_argument("--comment", default="")
        sub.add_argument("--id", type=int, default=None, help="Client-side transaction id")

    return parser


def do_login(path: Path, read_line: Callable[[str], str] = input) -> int:
    """Prompt for phone and token, then store them."""
    phone = read_line("Please enter user ID: ").strip()
    user = WalletUser.parse(phone)

    token = read_line("Please enter your token: ").strip()
    if not token:
        logger.error("login_failed", reason="empty token")
        return 1

    print(f"Saving token on disk to {path}")
    save_credentials(user.e164, token, path)
    return 0


def _print_model(model: WalletModel, indent: int | None = 2) -> None:
    print(model.model_dump_json(indent=indent, by_alias=True))


async def _run_command(args: argparse.Namespace, client: QiwiClient) -> int:
    if args.command == "profile-info":
        _print_model(await client.profile_info())

    elif args.command == "payment-history":
        count = 0
        async with aclosing(client.payment_history()) as entries:
            async for entry in entries:
                _print_model(entry, indent=None)
                count += 1
                if args.limit is not None and count >= args.limit:
                    break
        logger.info("payment_history_listed", entries=count)

    elif args.command == "commission-info":
        _print_model(await client.commission_info(args.provider))

    elif args.command == "commission-quote":
        amount = await client.commission_quote(args.provider, args.account, args.amount)
        print(amount)

    elif args.command == "transfer":
        if args.direction == "qiwi":
            direction = QiwiTransfer(
                to_phone=WalletUser.parse(args.phone),
                to_currency=args.currency,
            )
        else:
            direction = CellularTopUp(
                carrier=args.carrier,
                to_phone=WalletUser.parse(args.phone),
            )
        _print_model(await client.transfer(args.id, args.amount, direction, args.comment))

    return 0


def run_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_format)
    path = args.config or config_location()

    try:
        if args.command == "login":
            return do_login(path)

        credentials = load_credentials(path)
        if credentials is None:
            logger.error("not_logged_in", hint="run `qiwi-cli login` first", path=str(path))
            return 1

        logger.info("using_config", path=str(path), phone=credentials.phone)
        client = QiwiClient.from_credentials(
            credentials.phone,
            credentials.token.get_secret_value(),
        )
        return asyncio.run(_run_command(args, client))

    except DomainException as exc:
        logger.error("command_failed", command=args.command, code=exc.code, error=exc.message)
        return 1
    except EOFError:
        return 0
    except KeyboardInterrupt:
        return 130
