from datetime import datetime, timezone, timedelta
from functools import partial

import iso8601

from ..client import EscrowClient
from ..exceptions import EscrowError, InvalidArgument
from ..models import SwapOrder, to_u128

client = EscrowClient()

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

OK = 0
FAILED = 1
NO_COMMAND = 2


def parse_bytes(name, value):
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)

    if not isinstance(value, str):
        raise InvalidArgument(name=name, reason='expected a hex string')

    if value.startswith('0x'):
        value = value[2:]

    try:
        return bytes.fromhex(value)
    except ValueError:
        raise InvalidArgument(name=name, reason='expected a hex string')


def parse_timestamp(name, value):
    # Integer nanoseconds, or an ISO-8601 timestamp
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    if isinstance(value, str):
        if value.isdigit():
            return int(value)

        try:
            dt = iso8601.parse_date(value)
        except iso8601.ParseError as e:
            raise InvalidArgument(name=name, reason=str(e))

        return ((dt - EPOCH) // timedelta(microseconds=1)) * 1000

    raise InvalidArgument(name=name, reason='expected nanoseconds or an ISO-8601 timestamp')


def parse_int(name, value):
    try:
        return to_u128(value)
    except EscrowError as e:
        raise InvalidArgument(name=name, reason=str(e))


# Argument name to decoder. Anything not listed is passed through as-is.
PARSERS = {
    'order_hash': parse_bytes,
    'hash_lock': parse_bytes,
    'secret': parse_bytes,
    'src_amount': parse_int,
    'amount': parse_int,
    'skip': parse_int,
    'take': parse_int,
    'timelock': parse_timestamp,
    'min_timelock': parse_int,
    'max_timelock': parse_int,
}


def parse_arguments(arguments: dict):
    parsed = {}
    for name, value in arguments.items():
        parser = PARSERS.get(name)
        parsed[name] = parser(name, value) if parser is not None else value
    return parsed


def to_json(value):
    if isinstance(value, SwapOrder):
        return value.to_json()
    elif isinstance(value, (bytes, bytearray)):
        return bytes(value).hex()
    elif isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    elif isinstance(value, int) and not isinstance(value, bool) and value.bit_length() > 53:
        return str(value)
    return value


# String to callable map for strict RPC capabilities. Explicit for a reason!
command_map = {name: partial(client.call, name) for name in client.functions()}


# Single function call to map RPC command to an escrow call. Allows the server to just call this.
def process_json_rpc_command(payload: dict):
    command = payload.get('command')
    arguments = payload.get('arguments') or {}

    func = command_map.get(command)

    if func is None:
        return {
            'status': NO_COMMAND,
            'error': 'Unknown command {}'.format(command)
        }

    try:
        call = {
            'signer': payload.get('sender'),
            'attached_deposit': parse_int('attached_deposit', payload.get('attached_deposit', 0)),
        }
        if payload.get('now') is not None:
            call['now'] = parse_timestamp('now', payload['now'])

        result = func(**call, **parse_arguments(arguments))
    except Exception as e:
        # The executor has already rolled the call back; only the response is left
        return {
            'status': FAILED,
            'error': type(e).__name__,
            'message': str(e)
        }

    return {
        'status': OK,
        'result': to_json(result)
    }
