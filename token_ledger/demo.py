"""
Demo Driver

Walks a fresh ledger through a transfer, an approval and a delegated
transfer, printing balances along the way.
"""

import sys
from typing import Optional, TextIO

from .config import LedgerConfig, get_config
from .errors import TokenError
from .ledger import Ledger
from .logging_config import setup_logging


def run_demo(config: Optional[LedgerConfig] = None, out: Optional[TextIO] = None) -> Ledger:
    """
    Run the demo scenario and return the resulting ledger

    Args:
        config: Token settings, defaults to the global configuration
        out: Stream for the printed report, defaults to stdout
    """
    config = config or get_config()
    out = out or sys.stdout

    def say(line: str = "") -> None:
        print(line, file=out)

    token = Ledger.from_config(config)

    say(f"Token Name: {token.name()}")
    say(f"Token Symbol: {token.symbol()}")
    say(f"Total Supply: {token.total_supply()}")
    say(f"{config.owner} Balance: {token.balance_of(config.owner)}")
    say()

    try:
        token.transfer(config.owner, "bob", 100_000)
        say("Transfer successful!")
    except TokenError as e:
        say(f"Transfer failed: {type(e).__name__}: {e}")

    say(f"{config.owner} Balance: {token.balance_of(config.owner)}")
    say(f"bob Balance: {token.balance_of('bob')}")
    say()

    try:
        token.approve(config.owner, "charlie", 50_000)
        say(f"Allowance ({config.owner} -> charlie): {token.allowance(config.owner, 'charlie')}")
    except TokenError as e:
        say(f"Approval failed: {type(e).__name__}: {e}")
    say()

    try:
        token.transfer_from("charlie", config.owner, "dave", 30_000)
        say("TransferFrom successful!")
    except TokenError as e:
        say(f"TransferFrom failed: {type(e).__name__}: {e}")

    say()
    say("Final Balances:")
    for account in (config.owner, "bob", "dave"):
        say(f"{account}: {token.balance_of(account)} ({token.format_balance(account)})")
    say(f"Remaining Allowance ({config.owner} -> charlie): {token.allowance(config.owner, 'charlie')}")

    return token


def main() -> int:
    """Configure logging from settings and run the demo"""
    config = get_config()
    setup_logging(level=config.log_level, log_format=config.log_format)
    run_demo(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
