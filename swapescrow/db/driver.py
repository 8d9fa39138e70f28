from swapescrow.db.encoder import encode, decode, make_key
from swapescrow.logger import get_logger

# DB maps bytes to bytes
# Driver maps string to python object


class InMemDriver:
    def __init__(self):
        self.db = {}

    def get(self, item: str):
        key = item.encode()
        res = self.db.get(key)
        if res is None:
            return None
        return decode(res)

    def set(self, key: str, value):
        k = key.encode()
        if value is None:
            self.__delitem__(key)
        else:
            self.db[k] = encode(value).encode()

    def delete(self, key: str):
        self.__delitem__(key)

    def flush(self):
        self.db.clear()

    def __delitem__(self, key: str):
        k = key.encode()
        try:
            del self.db[k]
        except KeyError:
            pass


class CacheDriver:
    def __init__(self, driver=None):
        self.pending_writes = {}  # L2 cache
        self.cache = {}  # L1 cache
        self.driver = driver if driver is not None else InMemDriver()  # L0 cache

    def get(self, key: str):
        if key in self.pending_writes:
            return self.pending_writes[key]

        value = self.cache.get(key)
        if value is not None:
            return value

        return self.driver.get(key)

    def set(self, key, value):
        self.pending_writes[key] = value

    def delete(self, key):
        self.set(key, None)

    # Applies the pending writes to the underlying driver
    def commit(self):
        self.cache.update(self.pending_writes)

        for k, v in self.cache.items():
            if v is None:
                self.driver.delete(k)
            else:
                self.driver.set(k, v)

        self.cache.clear()
        self.pending_writes.clear()

    def rollback(self):
        # Returns to disk state which should be whatever it was prior to any write sessions
        self.cache.clear()
        self.pending_writes.clear()


class ContractDriver(CacheDriver):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.log = get_logger('Driver')

    def make_key(self, contract, variable, args=()):
        return make_key(contract, variable, args)

    def flush(self):
        self.log.debug('Flushing all state')
        self.driver.flush()
        self.rollback()
