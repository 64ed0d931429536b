# payload.py
"""Request body decoding: JSON first, URL-encoded form data as the fallback."""

import json
import logging
from typing import Any, Callable, Dict, List
from urllib.parse import parse_qs

logger = logging.getLogger(__name__)

Payload = Dict[str, Any]


def decode_json(body: bytes) -> Payload:
    data = json.loads(body)
    if not isinstance(data, dict):
        # Valid JSON but not an object: nothing to dispatch on
        return {}
    return data


def decode_form(body: bytes) -> Payload:
    """Decode ``a=1&b=2``; repeated keys keep every value as a list."""
    parsed = parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)
    return {key: values[0] if len(values) == 1 else values for key, values in parsed.items()}


DECODERS: List[Callable[[bytes], Payload]] = [decode_json, decode_form]


def parse_payload(body: bytes) -> Payload:
    """Run the decoders in order and return the first result that parses."""
    for decoder in DECODERS:
        try:
            return decoder(body)
        except ValueError:
            logger.debug(f"{decoder.__name__} could not decode request body")
    return {}
