from swapescrow.db.driver import ContractDriver
from swapescrow.db.orm import Variable, Hash
from swapescrow.models import SwapOrder, require_bytes, require_str
from swapescrow import config


# Identifiers are hex encoded so any byte or character can appear in them
def order_key(order_hash: bytes):
    return require_bytes('order_hash', order_hash).hex()


def chain_key(chain: str):
    return require_str('chain', chain).encode().hex()


class OrderStore:
    """
    order_hash -> SwapOrder. Orders are never removed, and iteration follows
    insertion order through a separate index.
    """
    def __init__(self, driver: ContractDriver, contract=config.CONTRACT_NAME):
        self.orders = Hash(contract, config.ORDERS_KEY, driver=driver)
        self.index = Hash(contract, config.ORDER_INDEX_KEY, driver=driver)
        self.count = Variable(contract, config.ORDER_COUNT_KEY, driver=driver, default_value=0)

    def get(self, order_hash: bytes):
        d = self.orders[order_key(order_hash)]
        if d is None:
            return None
        return SwapOrder.from_dict(d)

    def __contains__(self, order_hash):
        return self.orders[order_key(order_hash)] is not None

    def insert(self, order: SwapOrder):
        key = order_key(order.order_hash)

        if self.orders[key] is None:
            n = self.count.get()
            self.index[n] = key
            self.count.set(n + 1)

        self.orders[key] = order.to_dict()

    def __len__(self):
        return self.count.get()

    def __iter__(self):
        for i in range(len(self)):
            yield SwapOrder.from_dict(self.orders[self.index[i]])


class DepositLedger:
    """order_hash -> held amount. An entry exists only while its order is Active."""
    def __init__(self, driver: ContractDriver, contract=config.CONTRACT_NAME):
        self.deposits = Hash(contract, config.DEPOSITS_KEY, driver=driver)

    def get(self, order_hash: bytes):
        return self.deposits[order_key(order_hash)]

    def insert(self, order_hash: bytes, amount: int):
        self.deposits[order_key(order_hash)] = amount

    def remove(self, order_hash: bytes):
        key = order_key(order_hash)
        amount = self.deposits[key]
        del self.deposits[key]
        return amount


class ChainAllowlist:
    def __init__(self, driver: ContractDriver, contract=config.CONTRACT_NAME):
        self.chains = Hash(contract, config.CHAINS_KEY, driver=driver, default_value=False)

    def is_supported(self, chain: str):
        if not isinstance(chain, str):
            return False
        return self.chains[chain_key(chain)] is True

    def set(self, chain: str, enabled: bool):
        self.chains[chain_key(chain)] = enabled


class Settings:
    """Scalar fields: the owner and the timelock window used by future creates."""
    def __init__(self, driver: ContractDriver, contract=config.CONTRACT_NAME):
        self.owner = Variable(contract, config.OWNER_KEY, driver=driver)
        self.min_timelock = Variable(contract, config.MIN_TIMELOCK_KEY, driver=driver,
                                     default_value=config.DEFAULT_MIN_TIMELOCK)
        self.max_timelock = Variable(contract, config.MAX_TIMELOCK_KEY, driver=driver,
                                     default_value=config.DEFAULT_MAX_TIMELOCK)

    def timelock_limits(self):
        return self.min_timelock.get(), self.max_timelock.get()
