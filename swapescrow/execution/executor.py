from swapescrow.contracts.admin import AdminControl
from swapescrow.contracts.escrow import EscrowEngine
from swapescrow.db.driver import ContractDriver
from swapescrow.exceptions import NotPayable
from swapescrow.execution.access import exported_functions, is_payable
from swapescrow.execution.bank import InMemBank
from swapescrow.execution.runtime import Context
from swapescrow.logger import get_logger
from swapescrow.models import require_str, require_nanos, to_u128
from swapescrow import config
from copy import deepcopy
import traceback

log = get_logger('Executor')


class Executor:
    """
    Runs one call at a time. Each call is a single transaction: storage writes,
    the attached deposit, payouts and audit logs are all committed when the
    call returns and all discarded when it raises.
    """
    def __init__(self, driver=None, bank=None, contract=config.CONTRACT_NAME):
        self.driver = driver if driver is not None else ContractDriver()
        self.bank = bank if bank is not None else InMemBank()

        self.engine = EscrowEngine(self.driver, self.bank, contract)
        self.admin = AdminControl(self.driver, self.bank, contract)

        self.functions = exported_functions(self.engine, self.admin)

    def execute(self, sender, function_name, kwargs, now=None, attached_deposit=0) -> dict:
        writes = {}
        transfers = []
        logs = []

        try:
            if function_name.startswith(config.PRIVATE_METHOD_PREFIX):
                raise AttributeError('Private method {} not callable.'.format(function_name))

            func = self.functions.get(function_name)
            if func is None:
                raise AttributeError('Function {} does not exist.'.format(function_name))

            # The caller becomes the resolver of new orders, so it is stored too
            require_str('sender', sender)
            if now is not None:
                require_nanos('now', now)
            attached_deposit = to_u128(attached_deposit)

            ctx = Context(caller=sender, now=now, attached_deposit=attached_deposit)

            if attached_deposit:
                if not is_payable(func):
                    raise NotPayable(function=function_name)
                self.bank.receive(attached_deposit)

            result = func(ctx, **kwargs)

            writes = deepcopy(self.driver.pending_writes)
            transfers = list(self.bank.pending_transfers)

            self.driver.commit()
            self.bank.commit()

            logs = ctx.logs
            for message in logs:
                log.audit(message)

            status_code = 0
        except Exception as e:
            result = e
            log.error('{} failed for {}: {}'.format(function_name, sender, e))
            log.debug(traceback.format_exc())
            status_code = 1

            self.driver.rollback()
            self.bank.rollback()

        return {
            'status_code': status_code,
            'result': result,
            'logs': logs,
            'writes': writes,
            'transfers': transfers,
        }
