from swapescrow.exceptions import InsufficientBalance, InvalidAmount
from swapescrow.logger import get_logger


class Bank:
    """
    The payout capability. ``pay`` either succeeds or raises, aborting the
    whole call. Implementations stage transfers until ``commit``.
    """
    def receive(self, amount: int):
        raise NotImplementedError

    def pay(self, recipient: str, amount: int):
        raise NotImplementedError

    def balance(self) -> int:
        raise NotImplementedError

    def commit(self):
        raise NotImplementedError

    def rollback(self):
        raise NotImplementedError


class InMemBank(Bank):
    def __init__(self, balance=0):
        self._balance = balance
        self.pending_transfers = []
        self.pending_received = 0

        # Settled payouts in the order they were made: (recipient, amount)
        self.transfers = []
        self.log = get_logger('Bank')

    def balance(self):
        return self._balance + self.pending_received - sum(a for _, a in self.pending_transfers)

    def receive(self, amount: int):
        if amount < 0:
            raise InvalidAmount(amount=amount)
        self.pending_received += amount

    def pay(self, recipient: str, amount: int):
        if amount < 0:
            raise InvalidAmount(amount=amount)

        balance = self.balance()
        if amount > balance:
            raise InsufficientBalance(recipient=recipient, amount=amount, balance=balance)

        self.pending_transfers.append((recipient, amount))

    def paid_to(self, recipient: str):
        return sum(a for r, a in self.transfers if r == recipient)

    def commit(self):
        self._balance = self.balance()

        for recipient, amount in self.pending_transfers:
            self.log.debug('Transferred {} to {}'.format(amount, recipient))

        self.transfers.extend(self.pending_transfers)
        self.pending_transfers = []
        self.pending_received = 0

    def rollback(self):
        self.pending_transfers = []
        self.pending_received = 0

    def flush(self):
        self.rollback()
        self._balance = 0
        self.transfers = []
