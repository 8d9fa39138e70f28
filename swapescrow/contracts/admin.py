from swapescrow.contracts.stores import ChainAllowlist, Settings
from swapescrow.db.driver import ContractDriver
from swapescrow.exceptions import InvalidLimits, AlreadyInitialized, InvalidArgument
from swapescrow.execution.access import export, owner_only
from swapescrow.execution.bank import Bank
from swapescrow.execution.runtime import Context
from swapescrow.logger import get_logger
from swapescrow.models import to_u128, require_str, require_nanos
from swapescrow import config

log = get_logger('Admin')


class AdminControl:
    def __init__(self, driver: ContractDriver, bank: Bank, contract=config.CONTRACT_NAME):
        self.bank = bank
        self.chains = ChainAllowlist(driver, contract)
        self.settings = Settings(driver, contract)

    @export()
    def initialize(self, ctx: Context, owner, supported_chains=()):
        current = self.settings.owner.get()
        if current is not None:
            raise AlreadyInitialized(owner=current)

        owner = require_str('owner', owner)
        if not isinstance(supported_chains, (list, tuple)):
            raise InvalidArgument(name='supported_chains', reason='expected a list of chain ids')
        supported_chains = [require_str('chain', chain) for chain in supported_chains]

        self.settings.owner.set(owner)
        self.settings.min_timelock.set(config.DEFAULT_MIN_TIMELOCK)
        self.settings.max_timelock.set(config.DEFAULT_MAX_TIMELOCK)

        for chain in supported_chains:
            self.chains.set(chain, True)

        ctx.log('Escrow initialized: owner={}, chains={}'.format(owner, supported_chains))

    @export()
    @owner_only
    def add_supported_chain(self, ctx: Context, chain):
        self.chains.set(chain, True)
        ctx.log('Chain enabled: {}'.format(chain))

    @export()
    @owner_only
    def remove_supported_chain(self, ctx: Context, chain):
        # Orders already created for this chain stay valid
        self.chains.set(chain, False)
        ctx.log('Chain disabled: {}'.format(chain))

    @export()
    @owner_only
    def update_timelock_limits(self, ctx: Context, min_timelock, max_timelock):
        min_timelock = require_nanos('min_timelock', min_timelock)
        max_timelock = require_nanos('max_timelock', max_timelock)

        if not min_timelock < max_timelock:
            raise InvalidLimits(min_timelock=min_timelock, max_timelock=max_timelock)

        self.settings.min_timelock.set(min_timelock)
        self.settings.max_timelock.set(max_timelock)
        ctx.log('Timelock limits updated: min={}, max={}'.format(min_timelock, max_timelock))

    @export()
    @owner_only
    def emergency_withdraw(self, ctx: Context, amount):
        """
        Pays ``amount`` out of the contract's whole balance to the owner. This is
        not limited to unclaimed funds and can drain deposits backing active
        orders; the owner is trusted.
        """
        amount = to_u128(amount)
        owner = self.settings.owner.get()

        self.bank.pay(owner, amount)

        log.warning('Emergency withdrawal of {} to {}'.format(amount, owner))
        ctx.log('Emergency withdrawal: amount={}, owner={}'.format(amount, owner))

    @export()
    @owner_only
    def transfer_ownership(self, ctx: Context, new_owner):
        new_owner = require_str('new_owner', new_owner)
        previous = self.settings.owner.get()
        self.settings.owner.set(new_owner)
        ctx.log('Ownership transferred: {} -> {}'.format(previous, new_owner))

    @export()
    def get_owner(self, ctx: Context):
        return self.settings.owner.get()

    @export()
    def is_chain_supported(self, ctx: Context, chain):
        return self.chains.is_supported(chain)

    @export()
    def get_timelock_limits(self, ctx: Context):
        return self.settings.timelock_limits()
