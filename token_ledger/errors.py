"""
Ledger Errors

Every error is raised before any state is touched, so a failed operation
leaves balances and allowances exactly as they were.
"""


class TokenError(ValueError):
    """Base class for ledger rule violations"""


class InvalidAddress(TokenError):
    """A required account identifier is empty"""


class InsufficientBalance(TokenError):
    """The holder's balance is below the requested amount"""


class InsufficientAllowance(TokenError):
    """The spender's approved amount is below the requested amount"""


class InvalidAmount(TokenError):
    """Amount is not an integer within the unsigned 128-bit range"""
