"""
Token Ledger Engine

Holds token metadata, balances and allowances for a single fungible token.
Transfers are conservative: every debit is matched by an equal credit, so the
sum of all balances always equals the total supply. Supply is fixed at
construction; there is no mint or burn.

The ledger does no locking. Callers sharing an instance across threads must
serialize access themselves.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from .amounts import validate_amount, validate_decimals, format_amount
from .errors import (
    TokenError, InvalidAddress, InsufficientBalance,
    InsufficientAllowance, InvalidAmount
)
from .events import (
    EventPayload, EventSink, LoggingEventSink, create_transfer_event,
    create_approval_event, create_transfer_from_event
)
from .logging_config import get_logger, log_action


__all__ = [
    "Ledger", "TokenMetadata", "TokenError", "InvalidAddress",
    "InsufficientBalance", "InsufficientAllowance", "InvalidAmount"
]


@dataclass(frozen=True)
class TokenMetadata:
    """Immutable token description"""
    name: str
    symbol: str
    decimals: int
    total_supply: int

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "symbol": self.symbol,
            "decimals": self.decimals,
            "total_supply": self.total_supply
        }


class Ledger:
    """
    In-memory fungible-token ledger

    Accounts absent from the balance map hold zero; absent allowance
    entries are zero. Approval overwrites, it never adds.
    """

    def __init__(
        self,
        name: str,
        symbol: str,
        decimals: int,
        initial_supply: int,
        owner: str,
        event_sink: Optional[EventSink] = None
    ):
        """
        Create a ledger with the whole supply credited to owner

        The owner is deliberately not validated here, unlike the addresses
        passed to transfer, approve and transfer_from.

        Args:
            name: Human-readable token name
            symbol: Ticker symbol
            decimals: Display precision (0-255)
            initial_supply: Total supply in base units
            owner: Account credited with the entire supply
            event_sink: Callable receiving an EventPayload per mutation

        Raises:
            ValueError: If decimals is out of range
            InvalidAmount: If initial_supply is out of the 128-bit range
        """
        self._metadata = TokenMetadata(
            name=name,
            symbol=symbol,
            decimals=validate_decimals(decimals),
            total_supply=validate_amount(initial_supply, "initial_supply")
        )
        self._balances: Dict[str, int] = {owner: initial_supply}
        self._allowances: Dict[str, Dict[str, int]] = {}
        self._event_sink = event_sink if event_sink is not None else LoggingEventSink()
        self.logger = get_logger("token_ledger.ledger")

        if not owner:
            self.logger.warning("Ledger created with an empty owner address")

        log_action(
            self.logger, "debug", f"Ledger created: {symbol}",
            action="create_ledger", resource=f"token:{symbol}",
            extra={**self._metadata.to_dict(), "owner": owner}
        )

    @classmethod
    def from_config(cls, config, event_sink: Optional[EventSink] = None) -> 'Ledger':
        """Build a ledger from a LedgerConfig"""
        return cls(
            name=config.token_name,
            symbol=config.token_symbol,
            decimals=config.token_decimals,
            initial_supply=config.initial_supply,
            owner=config.owner,
            event_sink=event_sink
        )

    # Accessors

    def name(self) -> str:
        return self._metadata.name

    def symbol(self) -> str:
        return self._metadata.symbol

    def decimals(self) -> int:
        return self._metadata.decimals

    def total_supply(self) -> int:
        return self._metadata.total_supply

    @property
    def metadata(self) -> TokenMetadata:
        return self._metadata

    def balance_of(self, address: str) -> int:
        """Get balance of an address, zero if never credited"""
        return self._balances.get(address, 0)

    def allowance(self, owner: str, spender: str) -> int:
        """Get amount spender may still move out of owner's balance"""
        return self._allowances.get(owner, {}).get(spender, 0)

    def balances(self) -> Dict[str, int]:
        """Snapshot of every recorded balance"""
        return dict(self._balances)

    def allowances_of(self, owner: str) -> Dict[str, int]:
        """Snapshot of every allowance granted by owner"""
        return dict(self._allowances.get(owner, {}))

    def is_balanced(self) -> bool:
        """Check that balances sum to the total supply"""
        return sum(self._balances.values()) == self._metadata.total_supply

    def format_balance(self, address: str) -> str:
        """Balance of address scaled by decimals, for display"""
        return format_amount(self.balance_of(address), self._metadata.decimals, self._metadata.symbol)

    # Mutations

    def transfer(self, from_address: str, to_address: str, amount: int) -> None:
        """
        Move amount from one account to another

        Args:
            from_address: Account debited
            to_address: Account credited, created if absent
            amount: Quantity in base units

        Raises:
            InvalidAddress: If either address is empty
            InvalidAmount: If amount is out of the 128-bit range
            InsufficientBalance: If from_address holds less than amount
        """
        try:
            self._require_addresses(from_address, to_address)
            validate_amount(amount)
            self._require_balance(from_address, amount)
        except TokenError as e:
            self._log_rejection("transfer", e, {
                "from": from_address, "to": to_address, "amount": amount
            })
            raise

        self._move(from_address, to_address, amount)
        self._publish_event(create_transfer_event(from_address, to_address, amount))

    def approve(self, owner: str, spender: str, amount: int) -> None:
        """
        Set (overwrite) the allowance from owner to spender

        The owner's balance is not consulted; an allowance may exceed it.

        Raises:
            InvalidAddress: If owner or spender is empty
            InvalidAmount: If amount is out of the 128-bit range
        """
        try:
            self._require_addresses(owner, spender)
            validate_amount(amount)
        except TokenError as e:
            self._log_rejection("approve", e, {
                "owner": owner, "spender": spender, "amount": amount
            })
            raise

        self._allowances.setdefault(owner, {})[spender] = amount
        self._publish_event(create_approval_event(owner, spender, amount))

    def transfer_from(self, spender: str, from_address: str, to_address: str, amount: int) -> None:
        """
        Delegated transfer by spender out of from_address's balance

        The allowance is checked before the balance. On success the allowance
        is reduced by amount, leaving any remainder for later spends. The
        spender's own balance is never touched.

        Args:
            spender: Account acting under the allowance
            from_address: Account debited
            to_address: Account credited
            amount: Quantity in base units

        Raises:
            InvalidAddress: If any address is empty
            InvalidAmount: If amount is out of the 128-bit range
            InsufficientAllowance: If the allowance from_address -> spender is below amount
            InsufficientBalance: If from_address holds less than amount
        """
        try:
            self._require_addresses(spender, from_address, to_address)
            validate_amount(amount)
            current_allowance = self.allowance(from_address, spender)
            if current_allowance < amount:
                raise InsufficientAllowance(
                    f"Allowance {from_address} -> {spender} is {current_allowance}, "
                    f"requested {amount}"
                )
            self._require_balance(from_address, amount)
        except TokenError as e:
            self._log_rejection("transfer_from", e, {
                "spender": spender, "from": from_address,
                "to": to_address, "amount": amount
            })
            raise

        remaining = current_allowance - amount
        granted = self._allowances.get(from_address, {})
        # A zero spend without approval must not create an entry
        if spender in granted:
            granted[spender] = remaining
        self._move(from_address, to_address, amount)
        self._publish_event(
            create_transfer_from_event(spender, from_address, to_address, amount, remaining)
        )

    def _require_addresses(self, *addresses: str) -> None:
        if any(not address for address in addresses):
            raise InvalidAddress("Addresses must be non-empty")

    def _require_balance(self, address: str, amount: int) -> None:
        balance = self.balance_of(address)
        if balance < amount:
            raise InsufficientBalance(
                f"Balance of {address} is {balance}, requested {amount}"
            )

    def _move(self, from_address: str, to_address: str, amount: int) -> None:
        # Debit first, then read the credit side so self-transfers net to zero
        self._balances[from_address] = self.balance_of(from_address) - amount
        self._balances[to_address] = self.balance_of(to_address) + amount

    def _log_rejection(self, action: str, error: TokenError, extra: Dict) -> None:
        log_action(
            self.logger, "warning", f"{action} rejected: {type(error).__name__}",
            action=action, resource=f"token:{self._metadata.symbol}",
            extra={**extra, "error": str(error)}
        )

    def _publish_event(self, event: EventPayload) -> None:
        """Hand an event to the sink; the mutation stands even if the sink fails"""
        try:
            self._event_sink(event)
        except Exception as e:
            self.logger.error(f"Error in event sink for {event.event_type.value}: {e}")
