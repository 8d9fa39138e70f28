"""
The HTLC state machine.

An order moves from Active to exactly one of Completed (secret revealed before
the timelock) or Refunded (timelock passed). Every mutating operation checks
all of its preconditions against stored state before it writes anything, so a
failing call leaves the stores untouched.
"""

from swapescrow.contracts.stores import OrderStore, DepositLedger, ChainAllowlist, Settings
from swapescrow.db.driver import ContractDriver
from swapescrow.exceptions import (
    UnsupportedChain, TimelockTooShort, TimelockTooLong, OrderExists, NoDeposit,
    NotFound, InvalidState, Expired, NotYetExpired, InvalidSecret, LedgerMismatch
)
from swapescrow.execution.access import export
from swapescrow.execution.bank import Bank
from swapescrow.execution.runtime import Context
from swapescrow.logger import get_logger
from swapescrow.models import (
    SwapOrder, HashLock, HTLCState, sha256, to_u128, require_bytes, require_str, require_nanos
)
from swapescrow import config

log = get_logger('Escrow')


class EscrowEngine:
    def __init__(self, driver: ContractDriver, bank: Bank, contract=config.CONTRACT_NAME):
        self.bank = bank
        self.orders = OrderStore(driver, contract)
        self.deposits = DepositLedger(driver, contract)
        self.chains = ChainAllowlist(driver, contract)
        self.settings = Settings(driver, contract)

    @export(payable=True)
    def create(self, ctx: Context, order_hash, src_maker, src_chain, src_token, src_amount,
               dst_recipient, dst_token, hash_lock, timelock):
        # Everything stored must round trip through the encoder unchanged
        order_hash = require_bytes('order_hash', order_hash)
        src_maker = require_str('src_maker', src_maker)
        src_chain = require_str('src_chain', src_chain)
        src_token = require_str('src_token', src_token)
        src_amount = to_u128(src_amount)
        dst_recipient = require_str('dst_recipient', dst_recipient)
        dst_token = require_str('dst_token', dst_token)
        timelock = require_nanos('timelock', timelock)

        if not self.chains.is_supported(src_chain):
            raise UnsupportedChain(chain=src_chain)

        min_timelock, max_timelock = self.settings.timelock_limits()

        if not timelock > ctx.now + min_timelock:
            raise TimelockTooShort(timelock=timelock, earliest=ctx.now + min_timelock)

        if not timelock < ctx.now + max_timelock:
            raise TimelockTooLong(timelock=timelock, latest=ctx.now + max_timelock)

        if order_hash in self.orders:
            raise OrderExists(order_hash=order_hash.hex())

        hash_lock = HashLock(hash_lock)

        amount = ctx.attached_deposit
        if not amount > 0:
            raise NoDeposit()

        order = SwapOrder(
            order_hash=order_hash,
            src_maker=src_maker,
            src_chain=src_chain,
            src_token=src_token,
            src_amount=src_amount,
            dst_recipient=dst_recipient,
            dst_token=dst_token,
            dst_amount=amount,
            hash_lock=hash_lock,
            timelock=timelock,
            state=HTLCState.ACTIVE,
            created_at=ctx.now,
            resolver=ctx.caller,
        )

        self.orders.insert(order)
        self.deposits.insert(order_hash, amount)

        ctx.log('HTLC created: order_hash={}, amount={}, timelock={}'.format(order_hash.hex(), amount, timelock))

        return order

    def _active_order(self, order_hash):
        order = self.orders.get(order_hash)

        if order is None:
            raise NotFound(order_hash=order_hash.hex())

        if order.state != HTLCState.ACTIVE:
            raise InvalidState(order_hash=order_hash.hex(), state=order.state.value)

        return order

    def _settle(self, order: SwapOrder, state: HTLCState):
        order.state = state
        self.orders.insert(order)

        amount = self.deposits.remove(order.order_hash)
        if amount is None:
            raise LedgerMismatch(order_hash=order.order_hash.hex())

        return amount

    def _pay_out(self, order: SwapOrder, amount):
        if not order.is_native:
            # Token payouts would go through the token contract; every payout is native for now
            log.debug('Paying out {} natively for token {}'.format(amount, order.dst_token))

        self.bank.pay(order.dst_recipient, amount)

    @export()
    def complete(self, ctx: Context, order_hash, secret):
        order_hash = require_bytes('order_hash', order_hash)
        secret = require_bytes('secret', secret)

        order = self._active_order(order_hash)

        if order.is_expired(ctx.now):
            raise Expired(order_hash=order_hash.hex(), timelock=order.timelock)

        if not order.hash_lock.matches(secret):
            raise InvalidSecret(order_hash=order_hash.hex())

        amount = self._settle(order, HTLCState.COMPLETED)
        self._pay_out(order, amount)

        ctx.log('HTLC completed: order_hash={}, secret={}, amount={}'.format(order_hash.hex(), secret.hex(), amount))

        return amount

    @export()
    def refund(self, ctx: Context, order_hash):
        order_hash = require_bytes('order_hash', order_hash)

        order = self._active_order(order_hash)

        if not order.is_expired(ctx.now):
            raise NotYetExpired(order_hash=order_hash.hex(), timelock=order.timelock)

        amount = self._settle(order, HTLCState.REFUNDED)

        # Back to whoever funded the escrow, not the maker on the source chain
        self.bank.pay(order.resolver, amount)

        ctx.log('HTLC refunded: order_hash={}, amount={}'.format(order_hash.hex(), amount))

        return amount

    @export()
    def get_swap_order(self, ctx: Context, order_hash):
        return self.orders.get(require_bytes('order_hash', order_hash))

    @export()
    def get_deposit(self, ctx: Context, order_hash):
        return self.deposits.get(require_bytes('order_hash', order_hash))

    @export()
    def is_htlc_active(self, ctx: Context, order_hash):
        order = self.orders.get(require_bytes('order_hash', order_hash))
        if order is None:
            return False
        return order.state == HTLCState.ACTIVE and not order.is_expired(ctx.now)

    @export()
    def get_active_orders(self, ctx: Context, skip=config.DEFAULT_SKIP, take=config.DEFAULT_TAKE):
        # Listing only looks at the stored state; overdue orders still show until refunded
        orders = []
        matched = 0

        if take <= 0:
            return orders

        for order in self.orders:
            if order.state != HTLCState.ACTIVE:
                continue

            matched += 1
            if matched <= skip:
                continue

            orders.append(order)
            if len(orders) >= take:
                break

        return orders

    @export()
    def verify_secret(self, ctx: Context, secret, hash_lock):
        return verify_secret(secret, hash_lock)


def verify_secret(secret, hash_lock):
    return sha256(secret) == require_bytes('hash_lock', hash_lock)
