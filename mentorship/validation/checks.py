"""
Primitive field checks.

Each check is an immutable record that, called with a value and the
validation context, returns an error message or None when the value passes.

Dependencies: pydantic (email and URL parsing), re
System role: Building blocks of the field rule tables
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Protocol

from pydantic import AnyUrl, EmailStr, TypeAdapter, ValidationError

from mentorship.validation.context import ValidationContext

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
INT_PATTERN = re.compile(r"^[-+]?(?:0|[1-9][0-9]*)$")
FLOAT_PATTERN = re.compile(r"^[-+]?(?:[0-9]+)?(?:\.[0-9]*)?(?:[eE][-+]?[0-9]+)?$")

_email_adapter = TypeAdapter(EmailStr)
_url_adapter = TypeAdapter(AnyUrl)

URL_SCHEMES = ("http", "https", "ftp")
WHITESPACE = re.compile(r"\s")


class Check(Protocol):
    def __call__(self, value: Any, context: ValidationContext) -> str | None:
        ...


def as_int(value: Any) -> int | None:
    """Interpret a JSON number or an integer-shaped string as an int."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str) and INT_PATTERN.match(value):
        return int(value)
    return None


def as_float(value: Any) -> float | None:
    """Interpret a finite JSON number or a numeric string as a float."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str) and FLOAT_PATTERN.match(value):
        try:
            number = float(value)
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def text_length(value: str) -> int:
    """Length in UTF-16 code units, so an astral character counts as two."""
    return len(value.encode("utf-16-le", errors="surrogatepass")) // 2


def _is_url_host(host: str | None) -> bool:
    if not host:
        return False
    return host == "localhost" or host.startswith("[") or "." in host.strip(".")


def normalize_email(value: str) -> str:
    return _email_adapter.validate_python(value).lower()


@dataclass(frozen=True)
class IsUUID:
    message: str

    def __call__(self, value: Any, context: ValidationContext) -> str | None:
        if isinstance(value, str) and UUID_PATTERN.match(value):
            return None
        return self.message


@dataclass(frozen=True)
class Length:
    """String length, in UTF-16 code units, within [min_length, max_length]."""

    message: str
    min_length: int = 0
    max_length: int | None = None

    def __call__(self, value: Any, context: ValidationContext) -> str | None:
        if not isinstance(value, str):
            return self.message
        length = text_length(value)
        if length < self.min_length:
            return self.message
        if self.max_length is not None and length > self.max_length:
            return self.message
        return None


@dataclass(frozen=True)
class IntRange:
    message: str
    minimum: int | None = None
    maximum: int | None = None

    def __call__(self, value: Any, context: ValidationContext) -> str | None:
        number = as_int(value)
        if number is None:
            return self.message
        if self.minimum is not None and number < self.minimum:
            return self.message
        if self.maximum is not None and number > self.maximum:
            return self.message
        return None


@dataclass(frozen=True)
class FloatRange:
    message: str
    minimum: float | None = None
    maximum: float | None = None

    def __call__(self, value: Any, context: ValidationContext) -> str | None:
        number = as_float(value)
        if number is None:
            return self.message
        if self.minimum is not None and number < self.minimum:
            return self.message
        if self.maximum is not None and number > self.maximum:
            return self.message
        return None


@dataclass(frozen=True)
class OneOf:
    message: str
    choices: tuple[str, ...]

    def __call__(self, value: Any, context: ValidationContext) -> str | None:
        return None if isinstance(value, str) and value in self.choices else self.message


@dataclass(frozen=True)
class IsEmail:
    """Bare email address; display-name forms such as "Name <addr>" fail."""

    message: str

    def __call__(self, value: Any, context: ValidationContext) -> str | None:
        if not isinstance(value, str):
            return self.message
        try:
            address = _email_adapter.validate_python(value)
        except ValidationError:
            return self.message
        if address.lower() != value.lower():
            return self.message
        return None


@dataclass(frozen=True)
class IsURL:
    """
    http, https or ftp URL with a dotted host (or localhost).

    A value without a scheme is read as an http URL, so
    "meet.google.com/abc" passes. Whitespace anywhere fails.
    """

    message: str

    def __call__(self, value: Any, context: ValidationContext) -> str | None:
        if not isinstance(value, str) or not value or WHITESPACE.search(value):
            return self.message
        candidate = value if "://" in value else f"http://{value}"
        try:
            url = _url_adapter.validate_python(candidate)
        except ValidationError:
            return self.message
        if url.scheme not in URL_SCHEMES or not _is_url_host(url.host):
            return self.message
        return None


@dataclass(frozen=True)
class StringArray:
    """
    List of strings with a bounded item count and per-item length bounds.

    The item count is checked before the items, so an oversized list fails
    with too_many_message even when every item is valid.
    """

    not_array_message: str
    too_many_message: str
    item_message: str
    max_items: int
    item_min_length: int = 0
    item_max_length: int | None = None

    def __call__(self, value: Any, context: ValidationContext) -> str | None:
        if not isinstance(value, list):
            return self.not_array_message
        if len(value) > self.max_items:
            return self.too_many_message
        for item in value:
            if not isinstance(item, str) or text_length(item) < self.item_min_length:
                return self.item_message
            if self.item_max_length is not None and text_length(item) > self.item_max_length:
                return self.item_message
        return None


@dataclass(frozen=True)
class Custom:
    """Arbitrary predicate that may inspect the whole request through the context."""

    predicate: Callable[[Any, ValidationContext], str | None]

    def __call__(self, value: Any, context: ValidationContext) -> str | None:
        return self.predicate(value, context)
