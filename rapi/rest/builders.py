from __future__ import annotations

from typing import Any, List, Tuple

import attr

from .codec import Codec

__all__ = ("JSONBuilder", "ParamsBuilder")


@attr.define(init=False)
class JSONBuilder:
    """Represents a JSON request body, either a model or a plain mapping
    of keys added one by one.
    """

    inner: Any = attr.field(init=False)
    """ The inner representation of the body """

    def __init__(self, model: Any = None, **kwargs: Any):
        if model is not None and kwargs:
            raise TypeError("pass either a model or keyword arguments, not both")

        self.inner = model if model is not None else kwargs

    def add(self, key: str, value: Any) -> JSONBuilder:
        """Add a key to the JSON mapping

        Parameters
        ----------
        key : builtins.str
            The key (wire name).
        value : typing.Any
            The value that the key represents, models are encoded
            with their wire names.

        Returns
        -------
        rapi.rest.builders.JSONBuilder
            The builder object, can be used for chaining.
        """

        if not isinstance(self.inner, dict):
            raise TypeError("cannot add keys to a model body")

        self.inner[key] = value
        return self

    def build(self, codec: Codec) -> bytes:
        """Encodes the body with `codec`.

        Returns
        -------
        builtins.bytes
        """

        return codec.encode(self.inner)


@attr.define(init=False)
class ParamsBuilder:
    """Represents the parameters of the query string, in the order they
    were added
    """

    inner: List[Tuple[str, str]] = attr.field(init=False)
    """ The inner representation of the parameters """

    def __init__(self, **kwargs: Any):
        self.inner = []

        for key, value in kwargs.items():
            self.add(key, value)

    def add(self, key: str, value: Any) -> ParamsBuilder:
        """Add a parameter to the parameters, `None` values are skipped
        and booleans are sent as `true` / `false`.

        Parameters
        ----------
        key : builtins.str
            The key.
        value : typing.Any
            The value that the key represents.

        Returns
        -------
        rapi.rest.builders.ParamsBuilder
            The builder object, can be used for chaining.
        """

        if value is None:
            return self

        if isinstance(value, bool):
            value = "true" if value else "false"
        elif hasattr(value, "value"):
            value = value.value

        self.inner.append((key, str(value)))
        return self

    def build(self) -> Tuple[Tuple[str, str], ...]:
        """Build the parameters into a sequence of pairs.

        Returns
        -------
        typing.Tuple[typing.Tuple[builtins.str, builtins.str], ...]
        """

        return tuple(self.inner)
