"""
Token Ledger

An in-memory fungible-token ledger with balance tracking, direct transfers
and delegated transfers through allowances. Amounts are integer base units;
decimals only scale them for display.
"""

from .ledger import (
    Ledger, TokenMetadata, TokenError, InvalidAddress,
    InsufficientBalance, InsufficientAllowance, InvalidAmount
)
from .events import LedgerEvent, EventPayload, LoggingEventSink, RecordingEventSink

__version__ = "1.0.0"
