"""
Envelope parsing — turns a raw Bot API reply into its result or a RequestFailedError.
"""

import json
from typing import Any, Callable, Optional, TypeVar

from telegram_sdk.errors import RequestFailedError
from telegram_sdk.models.base import decode
from telegram_sdk.models.envelope import Response

T = TypeVar("T")


def parse_response(raw: dict[str, Any], result_type: Any) -> Response:
    """Decode a raw envelope, decoding ``result`` as ``result_type``."""
    return decode(Response[result_type], raw)


def unwrap(
    response: Response,
    body: str = "",
    is_success: Optional[Callable[[Response], bool]] = None,
) -> Any:
    """Return the result of a successful response.

    Raises RequestFailedError when ``ok`` is false, when the result is missing,
    or when ``is_success`` rejects the response. The Bot API description is
    carried verbatim, along with the raw body.
    """
    if response.ok and response.result is not None and (is_success is None or is_success(response)):
        return response.result
    raise RequestFailedError(response.description, body=body, error_code=response.error_code)


def read_result(raw: dict[str, Any], result_type: Any, is_success: Optional[Callable[[Response], bool]] = None) -> Any:
    """``parse_response`` then ``unwrap``, keeping the raw envelope for the error."""
    response = parse_response(raw, result_type)
    return unwrap(response, body=json.dumps(raw, ensure_ascii=False), is_success=is_success)
