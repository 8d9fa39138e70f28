class EscrowError(Exception):
    """
    The base exception for the escrow. The fmt directive
    will be overloaded by the inheriting classes

    :ivar msg: The message associated with the error
    """
    fmt = 'An unspecified error occurred'

    def __init__(self, **kwargs):
        msg = self.fmt.format(**kwargs)
        Exception.__init__(self, msg)
        self.kwargs = kwargs


class ValidationError(EscrowError):
    fmt = 'Invalid input'


class NotFoundError(EscrowError):
    fmt = 'Not found'


class InvalidStateError(EscrowError):
    fmt = 'Invalid state'


class ExpiryError(EscrowError):
    fmt = 'Deadline violated'


class SecretMismatchError(EscrowError):
    fmt = 'Secret does not match'


class AuthorizationError(EscrowError):
    fmt = 'Not authorized'


class UnsupportedChain(ValidationError):
    """
    :ivar chain: The source chain the order was created for
    """
    fmt = "Unsupported source chain '{chain}'"


class TimelockTooShort(ValidationError):
    fmt = 'Timelock too short: {timelock} must be after {earliest}'


class TimelockTooLong(ValidationError):
    fmt = 'Timelock too long: {timelock} must be before {latest}'


class OrderExists(ValidationError):
    fmt = "Order '{order_hash}' already exists"


class InvalidHashLockLength(ValidationError):
    fmt = 'Invalid hash lock length {length}, expected {expected}'


class NoDeposit(ValidationError):
    fmt = 'Must attach deposit'


class InvalidLimits(ValidationError):
    fmt = 'Invalid timelock limits: min {min_timelock} must be less than max {max_timelock}'


class InvalidKey(ValidationError):
    fmt = "Illegal storage key '{key}': {reason}"


class InvalidAmount(ValidationError):
    fmt = "Amount '{amount}' is not an unsigned 128 bit integer"


class AlreadyInitialized(ValidationError):
    fmt = "Escrow is already initialized with owner '{owner}'"


class NotFound(NotFoundError):
    fmt = "Order '{order_hash}' not found"


class InvalidState(InvalidStateError):
    fmt = "Order '{order_hash}' not active (state is {state})"


class Expired(ExpiryError):
    fmt = "HTLC '{order_hash}' expired at {timelock}"


class NotYetExpired(ExpiryError):
    fmt = "HTLC '{order_hash}' not expired until {timelock}"


class InvalidSecret(SecretMismatchError):
    fmt = "Invalid secret for order '{order_hash}'"


class NotOwner(AuthorizationError):
    fmt = "Only owner can call this method, '{caller}' is not the owner"


class InsufficientBalance(EscrowError):
    """
    Raised by the payout primitive when the contract cannot cover a transfer.
    Aborts the whole call.
    """
    fmt = 'Cannot pay {amount} to {recipient}, contract balance is {balance}'


class NotPayable(ValidationError):
    fmt = "Method '{function}' doesn't accept an attached deposit"


class InvalidArgument(ValidationError):
    fmt = "Invalid argument '{name}': {reason}"


class LedgerMismatch(EscrowError):
    """
    Raised when an active order has no deposit behind it. Stored state is
    corrupt, so the call is aborted instead of paying out.
    """
    fmt = "No deposit held for active order '{order_hash}'"
