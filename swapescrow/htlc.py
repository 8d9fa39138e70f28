"""
Helpers for the party opening a swap: secrets, hash locks, order hashes and
timelock arithmetic. None of these touch escrow state.
"""

import hashlib
import json
import secrets

from swapescrow import config
from swapescrow.execution.runtime import now_nanos
from swapescrow.models import HashLock, sha256, require_bytes

SECRET_LENGTH = 32


def generate_secret(length=SECRET_LENGTH):
    """Returns a fresh random secret and the hash lock it opens."""
    secret = secrets.token_bytes(length)
    return secret, create_hash_lock(secret)


def create_hash_lock(secret) -> HashLock:
    # Hex strings are accepted so secrets can be pasted from the source chain
    if isinstance(secret, str):
        secret = bytes.fromhex(secret[2:] if secret.startswith('0x') else secret)
    return HashLock(sha256(secret))


def create_order_hash(src_maker, src_chain, src_token, src_amount, dst_recipient, dst_token, dst_amount,
                      hash_lock, nonce=None) -> bytes:
    """
    Derives a 32 byte order id from the swap terms. The nonce defaults to the
    current time so that identical terms still yield distinct orders.
    """
    order_data = {
        'src_maker': src_maker,
        'src_chain': src_chain,
        'src_token': src_token,
        'src_amount': str(src_amount),
        'dst_recipient': dst_recipient,
        'dst_token': dst_token,
        'dst_amount': str(dst_amount),
        'hash_lock': require_bytes('hash_lock', hash_lock).hex(),
        'nonce': now_nanos() if nonce is None else nonce,
    }

    data = json.dumps(order_data, sort_keys=True, separators=(',', ':'))
    return hashlib.sha256(data.encode()).digest()


def timelock_window(now=None, min_timelock=config.DEFAULT_MIN_TIMELOCK, max_timelock=config.DEFAULT_MAX_TIMELOCK):
    """Exclusive bounds a new order's timelock must fall between."""
    now = now_nanos() if now is None else now
    return now + min_timelock, now + max_timelock


def time_remaining(timelock, now=None) -> int:
    """Nanoseconds left before the order can be refunded, 0 once it has expired."""
    now = now_nanos() if now is None else now
    return max(timelock - now, 0)
