CONTRACT_NAME = 'escrow'

DELIMITER = ':'
INDEX_SEPARATOR = '.'

# Timelock bounds are durations in nanoseconds, relative to the creation time
DEFAULT_MIN_TIMELOCK = 3_600_000_000_000  # 1 hour
DEFAULT_MAX_TIMELOCK = 86_400_000_000_000  # 24 hours

HASH_LOCK_LENGTH = 32
NATIVE_TOKEN = 'NEAR'

U128_MAX = 2 ** 128 - 1

DEFAULT_SKIP = 0
DEFAULT_TAKE = 10

OWNER_KEY = '__owner__'
MIN_TIMELOCK_KEY = 'min_timelock'
MAX_TIMELOCK_KEY = 'max_timelock'

ORDERS_KEY = 'swap_orders'
ORDER_INDEX_KEY = 'order_index'
ORDER_COUNT_KEY = 'order_count'
DEPOSITS_KEY = 'deposits'
CHAINS_KEY = 'supported_chains'

WEB_SERVER_PORT = 8080

PRIVATE_METHOD_PREFIX = '_'
