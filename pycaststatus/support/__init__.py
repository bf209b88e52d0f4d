"""Support functions used in library."""

import binascii
import logging
from os import environ
from typing import Any, List, Sequence, Union, get_origin

from pydantic import BaseModel

_BINARY_LINE_LENGTH = 512


def _shorten(text: Union[str, bytes], length: int) -> str:
    if isinstance(text, str):
        return text if len(text) < length else (text[: length - 3] + "...")
    return str(text if len(text) < length else (text[: length - 3] + b"..."))


def _log_value(value):
    if value is None:
        return ""
    if isinstance(value, bytes):
        return binascii.hexlify(bytearray(value or b"")).decode()
    return str(value)


def prettydataclass(max_length: int = 150):
    """Prettify dataclasses.

    Prettify an existing dataclass by replacing __repr__ with a method that
    shortens variables to a max length, greatly reducing output for long strings
    (like image URLs or raw image data) in debug logs.
    """

    def _repr(self) -> str:
        def _format(value: Any) -> str:
            if isinstance(value, (str, bytes)):
                return _shorten(value, max_length)
            return value

        return (
            self.__class__.__name__
            + "("
            + ", ".join(
                [
                    f"{f}={_format(getattr(self, f))}"
                    for f in self.__dataclass_fields__.keys()
                ]
            )
            + ")"
        )

    def _wrap(cls):
        setattr(cls, "__repr__", _repr)
        return cls

    return _wrap


# Special log method to avoid hexlify conversion if debug is on
def log_binary(logger, message, level=logging.DEBUG, **kwargs):
    """Log binary data if debug is enabled."""
    if logger.isEnabledFor(level):
        override_length = int(environ.get("PYCASTSTATUS_BINARY_MAX_LINE", 0))
        line_length = override_length or _BINARY_LINE_LENGTH

        output = (
            f"{k}={_shorten(_log_value(v), line_length)}"
            for k, v in sorted(kwargs.items())
        )

        logger.log(level, "%s (%s)", message, ", ".join(output))


def stringify_model(model: BaseModel) -> Sequence[str]:
    """Recursively traverse a pydantic model and print values.

    This method will traverse a model and present each field with a "dotted" string
    path and current value. It is supposed to be used with pycaststatus.settings.
    """

    def _recurse_into(
        current_model: BaseModel, prefix: str, output: List[str]
    ) -> Sequence[str]:
        for name, field in dict(current_model).items():
            if isinstance(field, BaseModel):
                _recurse_into(field, f"{prefix}{name}.", output)
            else:
                output.append(f"{prefix}{name} = {field}")
        return output

    return _recurse_into(model, "", [])


def update_model_field(model: BaseModel, field: str, value: Any) -> None:
    """Update a field in a model using dotting string path.

    Values are validated by pydantic, so a ValueError (ValidationError) is raised if
    the value is not valid for the field. A string assigned to a list field is split
    on commas, e.g. "a,b" becomes ["a", "b"].
    """
    splitted_path = field.split(".", maxsplit=1)
    next_field = splitted_path[0]

    if not hasattr(model, next_field):
        raise AttributeError(f"{model} has no field {next_field}")

    if len(splitted_path) > 1:
        update_model_field(getattr(model, next_field), splitted_path[1], value)
        return

    model_field = type(model).model_fields.get(field)
    if model_field is None:
        raise AttributeError(f"{model} has no field {field}")

    if isinstance(value, str) and get_origin(model_field.annotation) is list:
        value = [item.strip() for item in value.split(",") if item.strip()]

    validated = model.model_validate({**model.model_dump(), field: value})
    setattr(model, field, getattr(validated, field))
