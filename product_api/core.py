import re
from typing import Any, Dict, Iterable, Optional

from fastapi import Header, Request

from .config import get_settings
from .errors import AuthenticationError
from .models import ProductIn

# This file holds the request pipeline stages shared by the routes:
# access control, validation messages, sanitization and query coercion.

READ_ONLY_METHODS = ("GET",)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# one message per product field, in reporting order
RULE_MESSAGES = {
    "name": "Name is required and must be a non-empty string",
    "description": "Description is required and must be a non-empty string",
    "price": "Price is required and must be a non-negative number",
    "category": "Category is required and must be a non-empty string",
    "inStock": "inStock is required and must be a boolean",
}

# ---------------------------
# Access control
# ---------------------------
def check_api_key(method: str, api_key: Optional[str], secret: str) -> None:
    if method.upper() in READ_ONLY_METHODS:
        return
    if not api_key or api_key != secret:
        raise AuthenticationError("Invalid or missing API key")


async def require_api_key(request: Request, x_api_key: Optional[str] = Header(None)) -> None:
    check_api_key(request.method, x_api_key, get_settings().API_KEY)

# ---------------------------
# Validation
# ---------------------------
def is_json_decode_error(errors: Iterable[Dict[str, Any]]) -> bool:
    return any(err.get("type") == "json_invalid" for err in errors)


def validation_message(errors: Iterable[Dict[str, Any]]) -> str:
    """Join the rule message of every failing field, in field order.

    An error on the body as a whole (missing, or not an object) fails every rule.
    """
    failed = set()
    for err in errors:
        loc = tuple(err.get("loc", ()))
        if len(loc) >= 2 and loc[0] == "body" and loc[1] in RULE_MESSAGES:
            failed.add(loc[1])
        else:
            failed.update(RULE_MESSAGES)
    return ", ".join(msg for field, msg in RULE_MESSAGES.items() if field in failed)


def sanitize_product(payload: ProductIn, product_id: str) -> Dict[str, Any]:
    return {
        "id": product_id,
        "name": payload.name.strip(),
        "description": payload.description.strip(),
        "price": payload.price,
        "category": payload.category.strip().lower(),
        "inStock": payload.inStock,
    }

# ---------------------------
# Query coercion
# ---------------------------
def coerce_positive_int(raw: Optional[str], default: int) -> int:
    """Parse the leading integer of raw; absent, unparsable or < 1 gives default."""
    if raw is None:
        return default
    m = _LEADING_INT.match(raw)
    if not m:
        return default
    value = int(m.group(1))
    return value if value >= 1 else default
