from sanic import Sanic
from sanic.response import json, text

from swapescrow import config
from swapescrow.exceptions import InvalidArgument
from swapescrow.logger import get_logger
from swapescrow.server import rpc

log = get_logger('Webserver')

app = Sanic('swapescrow')

# Shares state with the RPC command map
client = rpc.client


def _order_hash(value):
    try:
        return rpc.parse_bytes('order_hash', value)
    except InvalidArgument as e:
        return e


@app.route('/', methods=['GET'])
async def index(request):
    return text("I\'m a teapot", status=418)


@app.route('/orders', methods=['GET'])
async def get_active_orders(request):
    try:
        skip = rpc.parse_int('skip', request.args.get('skip', config.DEFAULT_SKIP))
        take = rpc.parse_int('take', request.args.get('take', config.DEFAULT_TAKE))
    except InvalidArgument as e:
        return json({'error': str(e)}, status=400)

    orders = client.get_active_orders(skip=skip, take=take)
    return json({'orders': [o.to_json() for o in orders]})


@app.route('/orders/<order_hash>', methods=['GET'])
async def get_swap_order(request, order_hash):
    h = _order_hash(order_hash)
    if isinstance(h, Exception):
        return json({'error': str(h)}, status=400)

    order = client.get_swap_order(order_hash=h)

    if order is None:
        return json({'error': '{} does not exist'.format(order_hash)}, status=404)
    return json(order.to_json(), status=200)


@app.route('/orders/<order_hash>/active', methods=['GET'])
async def is_htlc_active(request, order_hash):
    h = _order_hash(order_hash)
    if isinstance(h, Exception):
        return json({'error': str(h)}, status=400)

    return json({'active': client.is_htlc_active(order_hash=h)})


@app.route('/owner', methods=['GET'])
async def get_owner(request):
    return json({'owner': client.get_owner()})


@app.route('/chains/<chain>', methods=['GET'])
async def is_chain_supported(request, chain):
    return json({'chain': chain, 'supported': client.is_chain_supported(chain=chain)})


@app.route('/timelock_limits', methods=['GET'])
async def get_timelock_limits(request):
    min_timelock, max_timelock = client.get_timelock_limits()
    return json({'min_timelock': min_timelock, 'max_timelock': max_timelock})


@app.route('/rpc', methods=['POST'])
async def process_rpc(request):
    payload = request.json
    if not isinstance(payload, dict):
        return json({'error': 'Expected a JSON object'}, status=400)

    response = rpc.process_json_rpc_command(payload)

    if response['status'] == rpc.NO_COMMAND:
        return json(response, status=404)
    elif response['status'] == rpc.FAILED:
        return json(response, status=400)
    return json(response, status=200)


def start_webserver(port=config.WEB_SERVER_PORT, workers=1):
    log.info('Starting escrow webserver on port {}'.format(port))
    app.run(host='0.0.0.0', port=port, workers=workers)


if __name__ == '__main__':
    start_webserver()
