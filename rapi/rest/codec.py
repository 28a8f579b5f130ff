import functools
from typing import Any, Final, Type, TypeVar

import attr
from pydantic import TypeAdapter, ValidationError

from .errors import DecodeError

__all__ = ("Codec", "DEFAULT_CODEC")

T = TypeVar("T")


@functools.lru_cache(maxsize=None)
def _adapter(type_: Any) -> TypeAdapter:
    return TypeAdapter(type_)


@attr.define(frozen=True)
class Codec:
    """The JSON encoder / decoder pair shared by every request a client
    makes. Wire names come from the models' field aliases.
    """

    exclude_none: bool = attr.field(default=True)
    """ Leave unset optional fields out of encoded bodies instead of
    sending `null`
    """

    def encode(self, value: Any) -> bytes:
        """Encodes a model (or anything pydantic can serialize) into a
        JSON request body.

        Parameters
        ----------
        value : typing.Any
            The value to encode.

        Returns
        -------
        builtins.bytes
            The UTF-8 encoded JSON document.
        """

        return _adapter(type(value)).dump_json(
            value, by_alias=True, exclude_none=self.exclude_none
        )

    def decode(self, type_: Type[T], data: bytes) -> T:
        """Decodes a JSON document into `type_`.

        Parameters
        ----------
        type_ : typing.Type[T]
            What the document should contain, e.g. `Message` or
            `typing.List[Message]`.
        data : builtins.bytes
            The raw JSON document.

        Raises
        ------
        rapi.rest.errors.DecodeError
            The document is not valid JSON or does not have the
            expected shape.

        Returns
        -------
        T
        """

        try:
            return _adapter(type_).validate_json(data)
        except ValidationError as exc:
            raise DecodeError.from_validation_error(exc) from exc


DEFAULT_CODEC: Final[Codec] = Codec()
