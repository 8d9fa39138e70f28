from swapescrow.execution.executor import Executor
from swapescrow.db.driver import ContractDriver
from swapescrow.execution.bank import InMemBank
from swapescrow import htlc
from functools import partial


class EscrowClient:
    """
    Convenience front end for the executor. Every exported escrow function is
    available as a method taking its keyword arguments plus optional
    ``signer``, ``now`` and ``attached_deposit`` overrides. Failed calls raise
    the error that aborted them.
    """
    def __init__(self, signer='sys', driver=None, bank=None, owner=None, supported_chains=()):
        self.raw_driver = driver if driver is not None else ContractDriver()
        self.bank = bank if bank is not None else InMemBank()
        self.executor = Executor(driver=self.raw_driver, bank=self.bank)
        self.signer = signer

        if owner is not None:
            self.initialize(owner=owner, supported_chains=list(supported_chains))

    def call(self, function_name, signer=None, now=None, attached_deposit=0, **kwargs):
        output = self.executor.execute(sender=signer or self.signer,
                                       function_name=function_name,
                                       kwargs=kwargs,
                                       now=now,
                                       attached_deposit=attached_deposit)

        if output['status_code'] == 1:
            raise output['result']

        return output['result']

    def open_swap(self, src_maker, src_chain, src_token, src_amount, dst_recipient, dst_token, timelock,
                  attached_deposit, secret=None, nonce=None, signer=None, now=None):
        """
        Creates an order with a derived order hash. A random secret is drawn
        when none is given. Returns the stored order and the secret that
        completes it.
        """
        if secret is None:
            secret, hash_lock = htlc.generate_secret()
        else:
            hash_lock = htlc.create_hash_lock(secret)

        order_hash = htlc.create_order_hash(src_maker=src_maker, src_chain=src_chain, src_token=src_token,
                                            src_amount=src_amount, dst_recipient=dst_recipient,
                                            dst_token=dst_token, dst_amount=attached_deposit,
                                            hash_lock=hash_lock, nonce=nonce)

        order = self.call('create', signer=signer, now=now, attached_deposit=attached_deposit,
                          order_hash=order_hash, src_maker=src_maker, src_chain=src_chain, src_token=src_token,
                          src_amount=src_amount, dst_recipient=dst_recipient, dst_token=dst_token,
                          hash_lock=hash_lock, timelock=timelock)

        return order, secret

    def functions(self):
        return sorted(self.executor.functions.keys())

    def flush(self):
        self.raw_driver.flush()
        self.bank.flush()

    def __getattr__(self, item):
        # Only reached when normal lookup fails
        executor = self.__dict__.get('executor')
        if executor is not None and item in executor.functions:
            return partial(self.call, item)
        raise AttributeError(item)
