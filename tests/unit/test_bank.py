from unittest import TestCase

from swapescrow.exceptions import InsufficientBalance, InvalidAmount
from swapescrow.execution.bank import InMemBank


class TestInMemBank(TestCase):
    def setUp(self):
        self.bank = InMemBank()

    def test_receive_then_commit(self):
        self.bank.receive(10)
        self.assertEqual(self.bank.balance(), 10)

        self.bank.commit()
        self.assertEqual(self.bank.balance(), 10)

    def test_pay_is_staged(self):
        self.bank.receive(10)
        self.bank.commit()

        self.bank.pay('alice', 4)

        self.assertEqual(self.bank.balance(), 6)
        self.assertListEqual(self.bank.transfers, [])

        self.bank.commit()

        self.assertListEqual(self.bank.transfers, [('alice', 4)])
        self.assertEqual(self.bank.paid_to('alice'), 4)

    def test_rollback_restores_balance(self):
        self.bank.receive(10)
        self.bank.commit()

        self.bank.receive(5)
        self.bank.pay('alice', 12)
        self.bank.rollback()

        self.assertEqual(self.bank.balance(), 10)
        self.assertEqual(self.bank.paid_to('alice'), 0)

    def test_pay_more_than_balance(self):
        self.bank.receive(3)

        with self.assertRaises(InsufficientBalance):
            self.bank.pay('alice', 4)

    def test_negative_amounts(self):
        with self.assertRaises(InvalidAmount):
            self.bank.receive(-1)

        with self.assertRaises(InvalidAmount):
            self.bank.pay('alice', -1)

    def test_flush(self):
        self.bank.receive(3)
        self.bank.pay('alice', 3)
        self.bank.commit()

        self.bank.flush()

        self.assertEqual(self.bank.balance(), 0)
        self.assertListEqual(self.bank.transfers, [])
