from __future__ import annotations

from typing import Any, Awaitable, Dict, Mapping, Optional

import httpx

from .errors import NotFound
from .log import get_logger
from .settings import settings
from .validation import check_change_options, check_key, check_variant_id

logger = get_logger(__name__)

# Marks requests as script-initiated; the storefront answers these with JSON
# instead of rendering the cart page.
XHR_HEADERS = {"X-Requested-With": "XMLHttpRequest"}

STATE_PATH = "/cart.js"
ADD_PATH = "/cart/add.js"
CHANGE_PATH = "/cart/change.js"
CLEAR_PATH = "/cart/clear.js"
UPDATE_PATH = "/cart/update.js"
SHIPPING_RATES_PATH = "/cart/shipping_rates.json"


# --- Line resolution ----------------------------------------------------------
def resolve_line_index(state: Mapping[str, Any], key: str) -> int:
    """
    Position of the line item with `key` in `state["items"]`.

    Every item is visited, so if the same key shows up twice the last one
    wins. Raises NotFound when nothing matches.
    """
    index = -1
    for i, item in enumerate(state.get("items") or []):
        if item.get("key") == key:
            index = i
    if index == -1:
        raise NotFound("Unable to match line item with provided key")
    return index


def find_line_item(state: Mapping[str, Any], key: str) -> Optional[Dict[str, Any]]:
    line_item = None
    for item in state.get("items") or []:
        if item.get("key") == key:
            line_item = item
    return line_item


# --- Client -------------------------------------------------------------------
class CartClient:
    """
    Async wrapper around the storefront cart endpoints.

    Holds no cart state; the only thing kept between calls is the httpx
    client and its cookie jar, which carries the cart session.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if http_client is not None:
            self._http = http_client
            self._owns_http = False
        else:
            self._http = httpx.AsyncClient(
                base_url=base_url or settings.storefront_url,
                transport=transport,
            )
            self._owns_http = True

    async def __aenter__(self) -> "CartClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def _request(
        self, method: str, path: str, payload: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Send one request with the shared policy and return the decoded JSON body."""
        logger.debug("%s %s", method, path)
        resp = await self._http.request(method, path, json=payload, headers=XHR_HEADERS)
        return resp.json()

    # ---- State ----
    async def get_state(self) -> Dict[str, Any]:
        return await self._request("GET", STATE_PATH)

    # ---- Line items ----
    async def get_line_item_index(self, key: str) -> int:
        check_key(key).raise_for_error()

        state = await self.get_state()
        try:
            return resolve_line_index(state, key)
        except NotFound:
            logger.info("no line item with key %s", key)
            raise

    def get_line_item(self, key: str) -> Awaitable[Optional[Dict[str, Any]]]:
        """
        Bad keys raise here, at call time. A well-formed key that matches
        nothing resolves to None.
        """
        check_key(key).raise_for_error()
        return self._fetch_line_item(key)

    async def _fetch_line_item(self, key: str) -> Optional[Dict[str, Any]]:
        state = await self.get_state()
        return find_line_item(state, key)

    def add_line_item(
        self, variant_id: int | float, options: Optional[Mapping[str, Any]] = None
    ) -> Awaitable[Dict[str, Any]]:
        """Add `variant_id` to the cart; a bad id raises here, at call time."""
        check_variant_id(variant_id).raise_for_error()

        payload = dict(options or {})
        payload["id"] = variant_id
        return self._request("POST", ADD_PATH, payload)

    async def change_line_item(self, key: str, options: Mapping[str, Any]) -> Dict[str, Any]:
        check_key(key).raise_for_error()
        check_change_options(options).raise_for_error()

        line = await self.get_line_item_index(key)
        return await self.change_line(line, options)

    async def change_line(self, line: int, options: Mapping[str, Any]) -> Dict[str, Any]:
        """POST an already-resolved line number to the change endpoint."""
        payload = dict(options)
        payload["line"] = line
        return await self._request("POST", CHANGE_PATH, payload)

    async def remove_line_item(self, key: str) -> Dict[str, Any]:
        return await self.change_line_item(key, {"quantity": 0})

    async def clear_line_items(self) -> Dict[str, Any]:
        return await self._request("POST", CLEAR_PATH)

    # ---- Attributes ----
    async def get_attributes(self) -> Optional[Dict[str, Any]]:
        state = await self.get_state()
        return state.get("attributes")

    async def set_attributes(self, attributes: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", UPDATE_PATH, {"attributes": dict(attributes)})

    async def clear_attributes(self) -> Dict[str, Any]:
        return await self.set_attributes({})

    # ---- Note ----
    async def get_note(self) -> Optional[str]:
        state = await self.get_state()
        return state.get("note")

    async def set_note(self, note: Optional[str]) -> Optional[str]:
        state = await self._request("POST", UPDATE_PATH, {"note": note})
        return state.get("note")

    async def clear_note(self) -> Optional[str]:
        return await self.set_note(None)

    # ---- Shipping ----
    async def get_shipping_rates(self) -> Any:
        return await self._request("GET", SHIPPING_RATES_PATH)
