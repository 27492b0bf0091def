"""
Telegram SDK error types.

Decode errors describe why a wire payload could not be turned into an entity.
They are terminal for the entity being decoded: nothing in the SDK retries.
"""

from typing import Any, Optional

from pydantic import ValidationError


class TelegramError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class DecodeError(TelegramError):
    """A wire payload does not match the entity it was decoded as."""

    def __init__(self, message: str, code: str = "decode_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "DecodeError":
        """Map the first pydantic error onto the decode error taxonomy.

        All errors reported by pydantic are kept in ``details["errors"]``.
        """
        errors = exc.errors(include_url=False)
        details = {"errors": errors}
        if not errors:
            return DecodeError(str(exc), details=details)

        first = errors[0]
        path = tuple(first.get("loc", ()))
        ctx = first.get("ctx") or {}
        kind = first.get("type")

        if kind == "missing":
            return MissingField(str(path[-1]) if path else "", path=path, details=details)
        if kind == "union_tag_invalid":
            return UnknownVariant(_strip_quotes(ctx.get("discriminator", "type")), ctx.get("tag"), details=details)
        if kind == "union_tag_not_found":
            return MissingDiscriminator(_strip_quotes(ctx.get("discriminator", "type")), details=details)
        return TypeMismatch(
            _format_path(path),
            expected=first.get("msg", kind or ""),
            actual=type(first.get("input")).__name__,
            details=details,
        )


class MissingField(DecodeError):
    def __init__(self, name: str, path: tuple[Any, ...] = (), details: Optional[dict[str, Any]] = None):
        self.name = name
        self.path = path or (name,)
        super().__init__(f"Missing required field '{_format_path(self.path)}'", "missing_field", details)


class UnknownVariant(DecodeError):
    def __init__(self, discriminator: str, value: Any, details: Optional[dict[str, Any]] = None):
        self.discriminator = discriminator
        self.value = value
        super().__init__(f"Unknown {discriminator} {value!r}", "unknown_variant", details)


class TypeMismatch(DecodeError):
    def __init__(self, field: str, expected: str, actual: str, details: Optional[dict[str, Any]] = None):
        self.field = field
        self.expected = expected
        self.actual = actual
        super().__init__(f"Field '{field}': {expected} (got {actual})", "type_mismatch", details)


class MissingDiscriminator(DecodeError):
    def __init__(self, discriminator: str = "type", details: Optional[dict[str, Any]] = None):
        self.discriminator = discriminator
        super().__init__(f"Missing discriminator field '{discriminator}'", "missing_discriminator", details)


class EncodeError(TelegramError):
    """A value cannot be represented on the wire without losing information."""

    def __init__(self, message: str):
        super().__init__("encode_error", message)


class RequestFailedError(TelegramError):
    """The Bot API answered, but not with a successful result."""

    def __init__(self, description: Optional[str], body: str = "", error_code: Optional[int] = None):
        self.description = description
        self.body = body
        self.error_code = error_code
        message = description or "No description provided"
        super().__init__("request_failed", message, {"body": body, "error_code": error_code})


class TransportError(TelegramError):
    def __init__(self, message: str):
        super().__init__("transport_error", message)


def _strip_quotes(discriminator: str) -> str:
    return str(discriminator).strip("'\"")


def _format_path(path: tuple[Any, ...]) -> str:
    return ".".join(str(part) for part in path)
