"""Wire value codec.

Converts argument and result values between native Python values and wire
JSON. Element references are tagged objects on the wire:

    {"ELEMENT": "<id>"}

Any object carrying the reserved key is an element reference, even when it
was ordinary caller data. That ambiguity belongs to the wire protocol and is
kept here, in ``is_element_reference``, and nowhere else.
"""

from __future__ import annotations

import math
from typing import Any

from webdriver_exec.errors import InvalidArgumentError
from webdriver_exec.types import ELEMENT_KEY, ElementReference

_PRIMITIVES = (str, int, bool, type(None))


class ValueCodec:
    """Encodes and decodes wire values using one reserved element key."""

    def __init__(self, element_key: str = ELEMENT_KEY) -> None:
        if not element_key:
            raise ValueError("element_key must be a non-empty string")
        self.element_key = element_key

    def is_element_reference(self, value: Any) -> bool:
        """Return True if a wire value is a tagged element reference."""
        return isinstance(value, dict) and self.element_key in value

    def encode(self, value: Any, *, path: str = "value") -> Any:
        """Encode a native value into its wire form.

        Args:
            value: Primitive, list/tuple, str-keyed dict or ElementReference
            path: Location of the value, used in error messages

        Raises:
            InvalidArgumentError: If the value is not JSON-representable
        """
        if isinstance(value, ElementReference):
            return {self.element_key: value.id}
        if isinstance(value, _PRIMITIVES):
            return value
        if isinstance(value, float):
            if not math.isfinite(value):
                raise InvalidArgumentError(
                    f"{path}: non-finite float {value!r} is not JSON-representable",
                    details={"path": path},
                )
            return value
        if isinstance(value, (list, tuple)):
            return [self.encode(item, path=f"{path}[{i}]") for i, item in enumerate(value)]
        if isinstance(value, dict):
            encoded: dict[str, Any] = {}
            for key, item in value.items():
                if not isinstance(key, str):
                    raise InvalidArgumentError(
                        f"{path}: object key {key!r} is not a string",
                        details={"path": path},
                    )
                encoded[key] = self.encode(item, path=f"{path}.{key}")
            return encoded

        raise InvalidArgumentError(
            f"{path}: value of type {type(value).__name__} is not JSON-representable",
            details={"path": path, "type": type(value).__name__},
        )

    def encode_args(self, args: tuple[Any, ...] | list[Any]) -> tuple[Any, ...]:
        """Encode a positional argument list."""
        return tuple(self.encode(arg, path=f"args[{i}]") for i, arg in enumerate(args))

    def decode(self, value: Any) -> Any:
        """Decode a wire value into native form.

        Element references are detected before any other object handling.
        """
        if self.is_element_reference(value):
            return ElementReference(id=str(value[self.element_key]))
        if isinstance(value, list):
            return [self.decode(item) for item in value]
        if isinstance(value, dict):
            return {key: self.decode(item) for key, item in value.items()}
        return value


default_codec = ValueCodec()


def encode(value: Any) -> Any:
    """Encode with the JSON Wire element key."""
    return default_codec.encode(value)


def decode(value: Any) -> Any:
    """Decode with the JSON Wire element key."""
    return default_codec.decode(value)
