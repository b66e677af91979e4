from __future__ import annotations

from theme_cart.settings import Settings


def test_storefront_url_strips_trailing_slash(monkeypatch):
    monkeypatch.setenv("STOREFRONT_URL", "https://shop.example.com/")
    assert Settings().storefront_url == "https://shop.example.com"


def test_theme_cart_url_alias(monkeypatch):
    monkeypatch.delenv("STOREFRONT_URL", raising=False)
    monkeypatch.setenv("THEME_CART_URL", "http://localhost:9292")
    assert Settings().storefront_url == "http://localhost:9292"


def test_defaults(monkeypatch):
    for key in ("STOREFRONT_URL", "THEME_CART_URL", "API_PORT"):
        monkeypatch.delenv(key, raising=False)
    s = Settings(_env_file=None)
    assert s.storefront_url == "http://127.0.0.1:8000"
    assert s.api_port == 8000
