import json
from swapescrow.config import INDEX_SEPARATOR, DELIMITER

# JSON consumers commonly read numbers as doubles or signed 64 bit ints, so u128 amounts and
# nanosecond timestamps outside this range are stored as strings.
MIN_INT = -(2 ** 63)
MAX_INT = 2 ** 63 - 1

##
# ENCODER CLASS
# Add to this to encode Python types for storage.
# Bytes (order hashes, hash locks) can't be stored in JSON so we use hex strings converted into bytes and back.
##


class Encoder(json.JSONEncoder):
    def default(self, o, *args):
        if isinstance(o, (bytes, bytearray)):
            return {
                '__bytes__': bytes(o).hex()
            }
        return super().default(o)


def encode_int(value: int):
    if MIN_INT < value < MAX_INT:
        return value

    return {
        '__big_int__': str(value)
    }


def _encode_ints(value):
    if isinstance(value, bool):
        return value
    elif isinstance(value, int):
        return encode_int(value)
    elif isinstance(value, dict):
        return encode_ints_in_dict(value)
    elif isinstance(value, (list, tuple)):
        return [_encode_ints(i) for i in value]
    return value


def encode_ints_in_dict(data: dict):
    return {k: _encode_ints(v) for k, v in data.items()}


# JSON library from Python 3 doesn't let you instantiate your custom Encoder. You have to pass it as an obj to json
def encode(data):
    """ NOTE:
    Normally encoding behavior is overriden in 'default' method inside
    a class derived from json.JSONEncoder. Unfortunately this can be done only
    for custom types, and int is not one of them, so big integers are
    preprocessed here.
    """
    data = _encode_ints(data)

    return json.dumps(data, cls=Encoder, separators=(',', ':'))


def as_object(d):
    if '__bytes__' in d:
        return bytes.fromhex(d['__bytes__'])
    elif '__big_int__' in d:
        return int(d['__big_int__'])
    return dict(d)


# Decode has a hook for JSON objects, which are just Python dictionaries. You have to specify the logic in this hook.
def decode(data):
    if data is None:
        return None

    if isinstance(data, bytes):
        data = data.decode()

    try:
        return json.loads(data, object_hook=as_object)
    except json.decoder.JSONDecodeError:
        return None


def make_key(contract, variable, args=()):
    contract_variable = INDEX_SEPARATOR.join((contract, variable))
    if args:
        return DELIMITER.join((contract_variable, *[str(arg) for arg in args]))
    return contract_variable
