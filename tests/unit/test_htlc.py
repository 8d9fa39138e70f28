from unittest import TestCase, mock
import hashlib

from swapescrow import htlc, config
from swapescrow.exceptions import InvalidArgument
from swapescrow.models import HashLock

NOW = 1_700_000_000_000_000_000
HOUR = 3_600_000_000_000

TERMS = dict(
    src_maker='0xmaker',
    src_chain='ethereum',
    src_token='USDC',
    src_amount=1000,
    dst_recipient='alice.near',
    dst_token='NEAR',
    dst_amount=5,
)


class TestSecrets(TestCase):
    def test_generate_secret(self):
        secret, hash_lock = htlc.generate_secret()

        self.assertEqual(len(secret), htlc.SECRET_LENGTH)
        self.assertIsInstance(hash_lock, HashLock)
        self.assertEqual(hash_lock, hashlib.sha256(secret).digest())

    def test_secrets_differ(self):
        self.assertNotEqual(htlc.generate_secret()[0], htlc.generate_secret()[0])

    def test_create_hash_lock(self):
        self.assertEqual(htlc.create_hash_lock(b's3cr3t'), hashlib.sha256(b's3cr3t').digest())

    def test_create_hash_lock_from_hex(self):
        secret = b'\xde\xad\xbe\xef'

        self.assertEqual(htlc.create_hash_lock('deadbeef'), htlc.create_hash_lock(secret))
        self.assertEqual(htlc.create_hash_lock('0xdeadbeef'), htlc.create_hash_lock(secret))

    def test_create_hash_lock_rejects_other_types(self):
        with self.assertRaises(InvalidArgument):
            htlc.create_hash_lock(1234)


class TestOrderHash(TestCase):
    def setUp(self):
        self.hash_lock = htlc.create_hash_lock(b's3cr3t')

    def test_deterministic(self):
        a = htlc.create_order_hash(hash_lock=self.hash_lock, nonce=1, **TERMS)
        b = htlc.create_order_hash(hash_lock=self.hash_lock, nonce=1, **TERMS)

        self.assertEqual(a, b)
        self.assertEqual(len(a), 32)

    def test_terms_and_nonce_change_the_hash(self):
        base = htlc.create_order_hash(hash_lock=self.hash_lock, nonce=1, **TERMS)

        self.assertNotEqual(base, htlc.create_order_hash(hash_lock=self.hash_lock, nonce=2, **TERMS))
        self.assertNotEqual(base, htlc.create_order_hash(hash_lock=self.hash_lock, nonce=1,
                                                         **dict(TERMS, dst_amount=6)))
        self.assertNotEqual(base, htlc.create_order_hash(hash_lock=htlc.create_hash_lock(b'other'), nonce=1,
                                                         **TERMS))

    def test_default_nonce_is_the_current_time(self):
        with mock.patch('swapescrow.htlc.now_nanos', return_value=NOW):
            order_hash = htlc.create_order_hash(hash_lock=self.hash_lock, **TERMS)

        self.assertEqual(order_hash, htlc.create_order_hash(hash_lock=self.hash_lock, nonce=NOW, **TERMS))


class TestTimelocks(TestCase):
    def test_window(self):
        self.assertEqual(htlc.timelock_window(now=NOW),
                         (NOW + config.DEFAULT_MIN_TIMELOCK, NOW + config.DEFAULT_MAX_TIMELOCK))
        self.assertEqual(htlc.timelock_window(now=NOW, min_timelock=HOUR, max_timelock=2 * HOUR),
                         (NOW + HOUR, NOW + 2 * HOUR))

    def test_time_remaining(self):
        self.assertEqual(htlc.time_remaining(NOW + HOUR, now=NOW), HOUR)
        self.assertEqual(htlc.time_remaining(NOW, now=NOW), 0)
        self.assertEqual(htlc.time_remaining(NOW, now=NOW + 1), 0)
