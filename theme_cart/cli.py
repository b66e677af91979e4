# theme_cart/cli.py
from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List, Optional

from .client import CartClient
from .errors import InvalidArgument, NotFound
from .log import configure_logging
from .settings import settings


def _parse_pairs(pairs: Optional[List[str]]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for p in pairs or []:
        k, sep, v = p.partition("=")
        if not sep or not k:
            raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {p!r}")
        out[k] = v
    return out


def _variant_id(s: str) -> int:
    try:
        return int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"variant id must be a number, got {s!r}")


def _line_options(args: argparse.Namespace) -> Dict[str, Any]:
    options: Dict[str, Any] = {}
    if args.quantity is not None:
        options["quantity"] = args.quantity
    if args.property:
        options["properties"] = _parse_pairs(args.property)
    return options


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="theme-cart", description="Talk to a storefront cart.")
    ap.add_argument("--url", default=None, help=f"Storefront origin (default {settings.storefront_url})")
    ap.add_argument("--log-level", default=None, help="Logging level (default from LOG_LEVEL)")
    sub = ap.add_subparsers(dest="command", required=True)

    sub.add_parser("state", help="Print the full cart state")

    p = sub.add_parser("index", help="Print the line number of a line item")
    p.add_argument("key")

    p = sub.add_parser("item", help="Print a line item (null if absent)")
    p.add_argument("key")

    p = sub.add_parser("add", help="Add a variant to the cart")
    p.add_argument("variant_id", type=_variant_id)
    p.add_argument("--quantity", type=int, default=None)
    p.add_argument("--property", action="append", metavar="KEY=VALUE")

    p = sub.add_parser("change", help="Change quantity/properties of a line item")
    p.add_argument("key")
    p.add_argument("--quantity", type=int, default=None)
    p.add_argument("--property", action="append", metavar="KEY=VALUE")

    p = sub.add_parser("remove", help="Remove a line item")
    p.add_argument("key")

    sub.add_parser("clear", help="Remove every line item")

    p = sub.add_parser("attributes", help="Show, set or clear cart attributes")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--set", dest="set_pairs", action="append", metavar="KEY=VALUE")
    g.add_argument("--clear", action="store_true")

    p = sub.add_parser("note", help="Show, set or clear the cart note")
    g = p.add_mutually_exclusive_group()
    g.add_argument("--set", dest="set_note", default=None)
    g.add_argument("--clear", action="store_true")

    sub.add_parser("shipping-rates", help="Print shipping rates for the cart")
    return ap


async def run(args: argparse.Namespace, cart: CartClient) -> Any:
    """Dispatch one parsed command against `cart` and return its result."""
    cmd = args.command
    if cmd == "state":
        return await cart.get_state()
    if cmd == "index":
        return await cart.get_line_item_index(args.key)
    if cmd == "item":
        return await cart.get_line_item(args.key)
    if cmd == "add":
        return await cart.add_line_item(args.variant_id, _line_options(args))
    if cmd == "change":
        return await cart.change_line_item(args.key, _line_options(args))
    if cmd == "remove":
        return await cart.remove_line_item(args.key)
    if cmd == "clear":
        return await cart.clear_line_items()
    if cmd == "attributes":
        if args.clear:
            return await cart.clear_attributes()
        if args.set_pairs:
            return await cart.set_attributes(_parse_pairs(args.set_pairs))
        return await cart.get_attributes()
    if cmd == "note":
        if args.clear:
            return await cart.clear_note()
        if args.set_note is not None:
            return await cart.set_note(args.set_note)
        return await cart.get_note()
    if cmd == "shipping-rates":
        return await cart.get_shipping_rates()
    raise ValueError(f"unknown command {cmd!r}")


async def _main(args: argparse.Namespace) -> Any:
    async with CartClient(args.url) as cart:
        return await run(args, cart)


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    # stdout carries the JSON result
    configure_logging(args.log_level, stream=sys.stderr)

    try:
        result = asyncio.run(_main(args))
    except argparse.ArgumentTypeError as e:
        ap.error(str(e))
    except InvalidArgument as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except NotFound as e:
        print(f"not found: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
