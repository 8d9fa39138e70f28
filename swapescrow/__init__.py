from swapescrow.client import EscrowClient
from swapescrow.models import SwapOrder, HashLock, HTLCState

__version__ = '0.1.0'
