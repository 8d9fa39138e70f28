from swapescrow.db.driver import ContractDriver
from swapescrow.exceptions import InvalidKey
from swapescrow import config


class Datum:
    def __init__(self, contract, name, driver: ContractDriver):
        self._driver = driver
        self._key = self._driver.make_key(contract, name)


class Variable(Datum):
    def __init__(self, contract, name, driver: ContractDriver, default_value=None):
        self._default_value = default_value
        super().__init__(contract, name, driver=driver)

    def set(self, value):
        self._driver.set(self._key, value)

    def get(self):
        value = self._driver.get(self._key)
        if value is None:
            return self._default_value
        return value


class Hash(Datum):
    def __init__(self, contract, name, driver: ContractDriver, default_value=None):
        super().__init__(contract, name, driver=driver)
        self._delimiter = config.DELIMITER
        self._default_value = default_value

    def _set(self, key, value):
        self._driver.set('{}{}{}'.format(self._key, self._delimiter, key), value)

    def _get(self, item):
        value = self._driver.get('{}{}{}'.format(self._key, self._delimiter, item))

        # Add Python defaultdict behavior
        if value is None:
            value = self._default_value

        return value

    @staticmethod
    def _validate_key(k):
        if isinstance(k, slice):
            raise InvalidKey(key=k, reason='slices prohibited in hashes')

        k = str(k)

        if config.DELIMITER in k:
            raise InvalidKey(key=k, reason='illegal delimiter')
        if config.INDEX_SEPARATOR in k:
            raise InvalidKey(key=k, reason='illegal separator')

        return k

    def __setitem__(self, key, value):
        key = self._validate_key(key)
        self._set(key, value)

    def __getitem__(self, key):
        key = self._validate_key(key)
        return self._get(key)

    def __delitem__(self, key):
        key = self._validate_key(key)
        self._set(key, None)
