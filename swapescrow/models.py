import hashlib
from dataclasses import dataclass, asdict
from enum import Enum

from swapescrow import config
from swapescrow.exceptions import InvalidHashLockLength, InvalidAmount, InvalidArgument


class HTLCState(str, Enum):
    """Persisted HTLC states. Expiry is derived from the timelock and never stored."""
    ACTIVE = 'Active'
    COMPLETED = 'Completed'
    REFUNDED = 'Refunded'


class HashLock(bytes):
    """A SHA-256 digest that a revealed secret must hash to. Always exactly 32 bytes."""

    def __new__(cls, value):
        value = require_bytes('hash_lock', value)
        if len(value) != config.HASH_LOCK_LENGTH:
            raise InvalidHashLockLength(length=len(value), expected=config.HASH_LOCK_LENGTH)
        return super().__new__(cls, value)

    def matches(self, secret: bytes):
        return sha256(secret) == self

    def __repr__(self):
        return 'HashLock({})'.format(self.hex())


def require_bytes(name, value) -> bytes:
    # bytes(int) would silently build a zero filled buffer
    if not isinstance(value, (bytes, bytearray)):
        raise InvalidArgument(name=name, reason='expected bytes, got {}'.format(type(value).__name__))
    return bytes(value)


def require_str(name, value) -> str:
    if not isinstance(value, str):
        raise InvalidArgument(name=name, reason='expected a string, got {}'.format(type(value).__name__))
    return value


def require_nanos(name, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgument(name=name, reason='expected non-negative integer nanoseconds')
    return value


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(require_bytes('secret', data)).digest()


def to_u128(amount) -> int:
    if isinstance(amount, bool):
        raise InvalidAmount(amount=amount)

    if isinstance(amount, str):
        try:
            amount = int(amount, 10)
        except ValueError:
            raise InvalidAmount(amount=amount)

    if not isinstance(amount, int) or not 0 <= amount <= config.U128_MAX:
        raise InvalidAmount(amount=amount)

    return amount


@dataclass
class SwapOrder:
    order_hash: bytes
    src_maker: str
    src_chain: str
    src_token: str
    src_amount: int
    dst_recipient: str
    dst_token: str
    dst_amount: int
    hash_lock: HashLock
    timelock: int
    state: HTLCState
    created_at: int
    resolver: str

    @property
    def is_native(self):
        return self.dst_token == config.NATIVE_TOKEN

    def is_expired(self, now: int):
        return self.state == HTLCState.ACTIVE and now > self.timelock

    def to_dict(self):
        d = asdict(self)
        d['hash_lock'] = bytes(self.hash_lock)
        d['state'] = self.state.value
        return d

    @classmethod
    def from_dict(cls, d: dict):
        d = dict(d)
        d['hash_lock'] = HashLock(d['hash_lock'])
        d['state'] = HTLCState(d['state'])
        return cls(**d)

    def to_json(self):
        """JSON friendly view: bytes as hex, u128 amounts as decimal strings."""
        d = self.to_dict()
        d['order_hash'] = self.order_hash.hex()
        d['hash_lock'] = self.hash_lock.hex()
        d['src_amount'] = str(self.src_amount)
        d['dst_amount'] = str(self.dst_amount)
        return d
