"""Stub storefront: the cart endpoints served from memory, for development and tests."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import FastAPI

from .routes import router
from .store import CartStore


def create_app(
    seed: Optional[Dict[str, Any]] = None,
    shipping_rates: Optional[List[Dict[str, Any]]] = None,
) -> FastAPI:
    app = FastAPI(title="theme-cart stub storefront")
    app.state.store = CartStore(seed, shipping_rates)
    app.state.requests = []
    app.include_router(router)

    @app.get("/")
    def root():
        return {"message": "stub storefront is running"}

    return app
