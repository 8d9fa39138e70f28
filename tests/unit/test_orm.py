from unittest import TestCase
from swapescrow.db.driver import ContractDriver
from swapescrow.db.orm import Datum, Variable, Hash
from swapescrow.exceptions import InvalidKey

driver = ContractDriver()


class TestDatum(TestCase):
    def setUp(self):
        driver.flush()

    def tearDown(self):
        driver.flush()

    def test_init(self):
        d = Datum('escrow', 'test', driver)
        self.assertEqual(d._key, driver.make_key('escrow', 'test'))


class TestVariable(TestCase):
    def setUp(self):
        driver.flush()

    def tearDown(self):
        driver.flush()

    def test_set(self):
        v = Variable('escrow', 'owner', driver=driver)
        v.set('stu')

        self.assertEqual(driver.get('escrow.owner'), 'stu')

    def test_get(self):
        driver.set('escrow.owner', 'stu')

        v = Variable('escrow', 'owner', driver=driver)
        self.assertEqual(v.get(), 'stu')

    def test_default_value(self):
        v = Variable('escrow', 'count', driver=driver, default_value=0)
        self.assertEqual(v.get(), 0)


class TestHash(TestCase):
    def setUp(self):
        driver.flush()

    def tearDown(self):
        driver.flush()

    def test_set_get(self):
        h = Hash('escrow', 'deposits', driver=driver)
        h['abcd'] = 100

        self.assertEqual(h['abcd'], 100)
        self.assertEqual(driver.get('escrow.deposits:abcd'), 100)

    def test_default_value(self):
        h = Hash('escrow', 'chains', driver=driver, default_value=False)
        self.assertFalse(h['ethereum'])

    def test_del_item(self):
        h = Hash('escrow', 'deposits', driver=driver)
        h['abcd'] = 100
        del h['abcd']

        self.assertIsNone(h['abcd'])

    def test_delimiter_in_key_rejected(self):
        h = Hash('escrow', 'chains', driver=driver)

        with self.assertRaises(InvalidKey):
            h['eth:main'] = True

        with self.assertRaises(InvalidKey):
            h['eth.main'] = True

    def test_long_keys_allowed(self):
        h = Hash('escrow', 'orders', driver=driver)
        h['ab' * 1000] = 1

        self.assertEqual(h['ab' * 1000], 1)
