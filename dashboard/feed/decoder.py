from __future__ import annotations

import json
import math
from typing import Any, Union

from dashboard.errors import DecodeError
from dashboard.models.market import Tick


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float
        return False


def decode_tick(raw: Union[str, bytes]) -> Tick:
    """
    Decode one feed message:
      {"timestamp": <epoch ms>, "price": <number>}

    Only the shape is checked. A negative price or a zero timestamp is a valid
    Tick here. Float timestamps are truncated to int.
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"message is not utf-8: {e}") from e

    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise DecodeError(f"message is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(f"expected a JSON object, got {type(data).__name__}")

    ts = data.get("timestamp")
    price = data.get("price")

    if not _is_number(ts):
        raise DecodeError(f"missing or non-numeric timestamp: {ts!r}")
    if not _is_number(price):
        raise DecodeError(f"missing or non-numeric price: {price!r}")

    return Tick(timestamp=int(ts), price=float(price))
