"""Shared fixtures: a stub storefront per test and a CartClient wired to it."""
from __future__ import annotations

import json
import os
from pathlib import Path

# Set env BEFORE any theme_cart imports so settings pick it up
os.environ.setdefault("STOREFRONT_URL", "http://testserver")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import httpx
import pytest

from theme_cart.client import CartClient
from theme_cart.storefront import create_app

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURES / name, "r", encoding="utf-8") as f:
        return json.load(f)


# ---------- Cart state fixtures ----------

@pytest.fixture()
def empty_state() -> dict:
    return load_fixture("cart-empty.json")


@pytest.fixture()
def populated_state() -> dict:
    return load_fixture("cart-populated.json")


# ---------- Storefront + client ----------

@pytest.fixture()
def make_cart():
    """Build (app, CartClient) around a fresh stub storefront seeded with `seed`."""
    def _make(seed=None, shipping_rates=None):
        app = create_app(seed, shipping_rates)
        cart = CartClient(
            "http://testserver",
            transport=httpx.ASGITransport(app=app),
        )
        return app, cart
    return _make


@pytest.fixture()
def empty_cart(make_cart, empty_state):
    return make_cart(empty_state)


@pytest.fixture()
def populated_cart(make_cart, populated_state):
    return make_cart(populated_state)


@pytest.fixture()
def storefront(populated_state):
    """FastAPI TestClient (sync) over a populated stub storefront."""
    from fastapi.testclient import TestClient
    return TestClient(create_app(populated_state))
