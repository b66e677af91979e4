# theme_cart/errors.py
from __future__ import annotations

import json

import httpx


class CartError(Exception):
    """Base class for errors raised by theme_cart itself."""


class InvalidArgument(CartError, TypeError):
    """Malformed key, variant id or options; detected before any request is sent."""


class NotFound(CartError, LookupError):
    """No line item in the current cart matches the given key."""


# Transport and decoding errors propagate untouched; this tuple only exists
# so callers can write `except TransportFailure:`.
TransportFailure = (httpx.HTTPError, json.JSONDecodeError)
