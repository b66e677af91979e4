# theme_cart/validation.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .errors import InvalidArgument

KEY_FORMAT_MESSAGE = "Provided key value is not a string with the format xxx:xxx"
VARIANT_ID_MESSAGE = "Variant ID must be a number"
CHANGE_OPTIONS_MESSAGE = (
    "An object which specifies a quantity or properties value is required"
)


@dataclass(frozen=True)
class Check:
    """Outcome of an input check: either ok, or carrying the error to raise."""
    ok: bool
    error: Optional[InvalidArgument] = None

    @classmethod
    def passed(cls) -> "Check":
        return cls(ok=True)

    @classmethod
    def failed(cls, message: str) -> "Check":
        return cls(ok=False, error=InvalidArgument(message))

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def check_key(key: Any) -> Check:
    """
    A line item key is '<variant_id>:<hash>': exactly one colon with
    something on both sides of it.
    """
    if not isinstance(key, str):
        return Check.failed(KEY_FORMAT_MESSAGE)
    parts = key.split(":")
    if len(parts) != 2 or not all(parts):
        return Check.failed(KEY_FORMAT_MESSAGE)
    return Check.passed()


def check_variant_id(variant_id: Any) -> Check:
    # bool is an int subclass but never a variant id
    if isinstance(variant_id, bool) or not isinstance(variant_id, (int, float)):
        return Check.failed(VARIANT_ID_MESSAGE)
    return Check.passed()


def check_change_options(options: Any) -> Check:
    if not isinstance(options, Mapping):
        return Check.failed(CHANGE_OPTIONS_MESSAGE)
    if "quantity" not in options and "properties" not in options:
        return Check.failed(CHANGE_OPTIONS_MESSAGE)
    return Check.passed()
