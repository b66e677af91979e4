# theme_cart/storefront/store.py
from __future__ import annotations

import hashlib
import json
import uuid
from typing import Any, Dict, List, Optional

from ..log import get_logger
from ..schemas.cart import AddIn, CartState, ChangeIn, LineItem, UpdateIn

logger = get_logger(__name__)

DEFAULT_SHIPPING_RATES: List[Dict[str, Any]] = [
    {"name": "Standard", "code": "standard", "price": "5.00", "currency": "USD"},
    {"name": "Express", "code": "express", "price": "15.00", "currency": "USD"},
]


def _line_key(variant_id: int, properties: Optional[Dict[str, Any]]) -> str:
    digest = hashlib.md5(
        json.dumps(properties or {}, sort_keys=True).encode("utf-8")
    ).hexdigest()
    return f"{variant_id}:{digest}"


class CartStore:
    """
    In-memory cart behind the stub storefront. One cart per app; the
    `cart` cookie only identifies it, it does not select between carts.
    """

    def __init__(
        self,
        seed: Optional[Dict[str, Any]] = None,
        shipping_rates: Optional[List[Dict[str, Any]]] = None,
    ) -> None:
        self.state = CartState.model_validate(seed or {})
        if not self.state.token:
            self.state.token = uuid.uuid4().hex
        self.shipping_rates = list(
            DEFAULT_SHIPPING_RATES if shipping_rates is None else shipping_rates
        )
        self._recalc()

    # --- READ HELPERS ---------------------------------------------------------
    def snapshot(self) -> Dict[str, Any]:
        return self.state.model_dump()

    def rates(self) -> Dict[str, Any]:
        return {"shipping_rates": list(self.shipping_rates)}

    # --- MUTATIONS ------------------------------------------------------------
    def add(self, body: AddIn) -> Dict[str, Any]:
        for item in self.state.items:
            if item.variant_id == body.id and (item.properties or None) == (body.properties or None):
                item.quantity += body.quantity
                self._recalc()
                logger.info("add: variant %s now x%s", body.id, item.quantity)
                return item.model_dump()

        item = LineItem(
            id=body.id,
            variant_id=body.id,
            key=_line_key(body.id, body.properties),
            quantity=body.quantity,
            properties=body.properties,
            title=f"Variant {body.id}",
        )
        self.state.items.append(item)
        self._recalc()
        logger.info("add: new line %s", item.key)
        return item.model_dump()

    def change(self, body: ChangeIn) -> Dict[str, Any]:
        items = self.state.items
        if body.line < 0 or body.line >= len(items):
            raise ValueError(f"line {body.line} is out of range")

        item = items[body.line]
        fields = body.model_fields_set
        if "properties" in fields:
            item.properties = body.properties
        if "quantity" in fields and body.quantity is not None:
            item.quantity = body.quantity
        item.line_price = item.price * item.quantity
        if item.quantity == 0:
            items.pop(body.line)
        self._recalc()
        logger.info("change: line %s -> x%s", body.line, item.quantity)
        return item.model_dump()

    def clear(self) -> Dict[str, Any]:
        self.state.items = []
        self._recalc()
        logger.info("clear: cart emptied")
        return self.snapshot()

    def update(self, body: UpdateIn) -> Dict[str, Any]:
        fields = body.model_fields_set
        if "attributes" in fields:
            self.state.attributes = dict(body.attributes or {})
        if "note" in fields:
            self.state.note = body.note
        logger.info("update: %s", ", ".join(sorted(fields)) or "nothing")
        return self.snapshot()

    # --- UTILS ----------------------------------------------------------------
    def _recalc(self) -> None:
        total_qty, total_price = 0, 0
        for item in self.state.items:
            item.line_price = item.price * item.quantity
            total_qty += item.quantity
            total_price += item.line_price
        self.state.item_count = total_qty
        self.state.total_price = total_price
