"""
Ledger Event Module

Every successful mutation produces an EventPayload that is handed to a single
injectable sink. A sink is any callable taking the payload; the default one
writes the human-readable line through logging.
"""

from enum import Enum
from typing import Any, Callable, Dict, List
from dataclasses import dataclass, field
from datetime import datetime, timezone
import uuid
import logging


class LedgerEvent(Enum):
    """Mutations the ledger reports"""
    TRANSFER = "token.transfer"
    APPROVAL = "token.approval"
    TRANSFER_FROM = "token.transfer_from"


EventSink = Callable[['EventPayload'], None]


@dataclass
class EventPayload:
    """Payload for ledger events"""
    event_type: LedgerEvent
    data: Dict[str, Any]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def describe(self) -> str:
        """Human-readable one-line summary"""
        data = self.data
        if self.event_type == LedgerEvent.TRANSFER:
            return f"Transfer: {data['amount']} tokens from {data['from']} to {data['to']}"
        if self.event_type == LedgerEvent.APPROVAL:
            return f"Approval: {data['owner']} approved {data['spender']} to spend {data['amount']} tokens"
        return (f"TransferFrom: {data['spender']} transferred {data['amount']} tokens "
                f"from {data['from']} to {data['to']}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'event_type': self.event_type.value,
            'data': self.data,
            'timestamp': self.timestamp.isoformat(),
            'event_id': self.event_id
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EventPayload':
        """Create from dictionary"""
        return cls(
            event_type=LedgerEvent(data['event_type']),
            data=data['data'],
            timestamp=datetime.fromisoformat(data['timestamp']) if isinstance(data['timestamp'], str) else data['timestamp'],
            event_id=data['event_id']
        )


class LoggingEventSink:
    """Writes each event's summary line to a logger"""

    def __init__(self, logger: logging.Logger = None, level: int = logging.INFO):
        self.logger = logger or logging.getLogger("token_ledger.events")
        self.level = level

    def __call__(self, event: EventPayload) -> None:
        self.logger.log(self.level, event.describe())


class RecordingEventSink:
    """Keeps every event in memory"""

    def __init__(self):
        self.events: List[EventPayload] = []

    def __call__(self, event: EventPayload) -> None:
        self.events.append(event)

    def of_type(self, event_type: LedgerEvent) -> List[EventPayload]:
        return [e for e in self.events if e.event_type == event_type]

    def clear(self) -> None:
        self.events.clear()


def create_transfer_event(from_address: str, to_address: str, amount: int) -> EventPayload:
    return EventPayload(
        event_type=LedgerEvent.TRANSFER,
        data={"from": from_address, "to": to_address, "amount": amount}
    )


def create_approval_event(owner: str, spender: str, amount: int) -> EventPayload:
    return EventPayload(
        event_type=LedgerEvent.APPROVAL,
        data={"owner": owner, "spender": spender, "amount": amount}
    )


def create_transfer_from_event(spender: str, from_address: str, to_address: str,
                               amount: int, remaining_allowance: int) -> EventPayload:
    return EventPayload(
        event_type=LedgerEvent.TRANSFER_FROM,
        data={
            "spender": spender,
            "from": from_address,
            "to": to_address,
            "amount": amount,
            "remaining_allowance": remaining_allowance
        }
    )
