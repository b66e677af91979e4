from .client import CartClient, find_line_item, resolve_line_index
from .errors import CartError, InvalidArgument, NotFound, TransportFailure

__version__ = "0.1.0"
