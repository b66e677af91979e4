# theme_cart/schemas/cart.py
from __future__ import annotations
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _PassThrough(BaseModel):
    # the storefront owns these shapes; keep whatever fields it sends
    model_config = ConfigDict(extra="allow")


# ---- Cart state --------------------------------------------------------------
class LineItem(_PassThrough):
    id: int
    key: str = Field(..., description="'<variant_id>:<line_item_hash>'")
    variant_id: Optional[int] = None
    quantity: int = Field(0, ge=0)
    properties: Optional[Dict[str, Any]] = None
    title: Optional[str] = None
    price: int = 0          # cents
    line_price: int = 0     # cents


class CartState(_PassThrough):
    token: Optional[str] = None
    note: Optional[str] = None
    attributes: Dict[str, Any] = Field(default_factory=dict)
    items: List[LineItem] = Field(default_factory=list)
    item_count: int = 0
    total_price: int = 0
    currency: str = "USD"


class ShippingRate(_PassThrough):
    name: Optional[str] = None
    code: Optional[str] = None
    price: Optional[str] = None


# ---- Request bodies ----------------------------------------------------------
class AddIn(_PassThrough):
    id: int
    quantity: int = Field(1, ge=0)
    properties: Optional[Dict[str, Any]] = None


class ChangeIn(_PassThrough):
    line: int
    quantity: Optional[int] = Field(None, ge=0)
    properties: Optional[Dict[str, Any]] = None


class UpdateIn(_PassThrough):
    attributes: Optional[Dict[str, Any]] = None
    note: Optional[str] = None
