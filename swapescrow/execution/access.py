from functools import wraps

from swapescrow.exceptions import NotOwner
from swapescrow.execution.runtime import Context
from swapescrow import config

EXPORT_ATTR = '__export__'
PAYABLE_ATTR = '__payable__'


def export(payable=False):
    """Marks a contract method as callable through the executor."""
    def decorator(func):
        setattr(func, EXPORT_ATTR, True)
        setattr(func, PAYABLE_ATTR, payable)
        return func
    return decorator


def is_payable(func):
    return getattr(func, PAYABLE_ATTR, False)


def owner_only(func):
    @wraps(func)
    def wrapper(self, ctx: Context, *args, **kwargs):
        owner = self.settings.owner.get()
        if owner is None or ctx.caller != owner:
            raise NotOwner(caller=ctx.caller)
        return func(self, ctx, *args, **kwargs)
    return wrapper


def exported_functions(*contracts):
    functions = {}
    for contract in contracts:
        for name in dir(type(contract)):
            if name.startswith(config.PRIVATE_METHOD_PREFIX):
                continue

            attr = getattr(type(contract), name)
            if callable(attr) and getattr(attr, EXPORT_ATTR, False):
                assert name not in functions, 'Function {} exported twice.'.format(name)
                functions[name] = getattr(contract, name)

    return functions
