# theme_cart/storefront/routes.py
from __future__ import annotations
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Request, Response

from ..schemas.cart import AddIn, ChangeIn, UpdateIn
from .store import CartStore

router = APIRouter(tags=["cart"])

CART_COOKIE = "cart"


# ---- Helpers -----------------------------------------------------------------
async def _record(request: Request, response: Response) -> CartStore:
    """Log the request for test assertions and hand out the cart cookie."""
    store: CartStore = request.app.state.store
    raw = await request.body()
    request.app.state.requests.append({
        "method": request.method,
        "path": request.url.path,
        "headers": dict(request.headers),
        "cookies": dict(request.cookies),
        "json": await request.json() if raw else None,
    })
    if CART_COOKIE not in request.cookies:
        response.set_cookie(CART_COOKIE, store.state.token or "")
    return store


# ---- Routes ------------------------------------------------------------------
@router.get("/cart.js")
async def get_cart(request: Request, response: Response) -> Dict[str, Any]:
    store = await _record(request, response)
    return store.snapshot()


@router.post("/cart/add.js")
async def add_line_item(body: AddIn, request: Request, response: Response):
    store = await _record(request, response)
    return store.add(body)


@router.post("/cart/change.js")
async def change_line_item(body: ChangeIn, request: Request, response: Response):
    store = await _record(request, response)
    try:
        return store.change(body)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/cart/clear.js")
async def clear_cart(request: Request, response: Response):
    store = await _record(request, response)
    return store.clear()


@router.post("/cart/update.js")
async def update_cart(body: UpdateIn, request: Request, response: Response):
    store = await _record(request, response)
    return store.update(body)


@router.get("/cart/shipping_rates.json")
async def shipping_rates(request: Request, response: Response):
    store = await _record(request, response)
    return store.rates()
