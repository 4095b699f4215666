# tket_pass_json/compiler_pass/pass_codec/standard_codec.py

import copy
import logging
from typing import Any

from pydantic import ValidationError

from tket_pass_json.compiler_pass.entities.standard_pass import (
    STANDARD_PASS_TYPES,
    STANDARD_PASSES,
    AnyStandardPass,
    UnrecognizedStandardPass,
)
from tket_pass_json.compiler_pass.pass_codec.defs import NAME_KEY
from tket_pass_json.compiler_pass.pass_codec.errors import (
    ErrorPath,
    PassDecodeError,
    StrictShapeError,
    TypeMismatchError,
    format_path,
)

logger = logging.getLogger(__name__)

# pydantic error types that mean "wrong set of keys" rather than "wrong value"
_SHAPE_ERROR_TYPES = {"missing", "extra_forbidden"}


def decode_standard_pass(payload: Any, path: ErrorPath = ()) -> AnyStandardPass:
    """Decode the payload of a ``StandardPass`` envelope.

    The payload is adjacently tagged by its ``name`` field. Names outside the
    catalog decode into an :class:`UnrecognizedStandardPass` holding the raw
    fields instead of failing.
    """
    if not isinstance(payload, dict):
        raise TypeMismatchError(f"expected a JSON object, got {type(payload).__name__}", path)
    if NAME_KEY not in payload:
        raise StrictShapeError(f"missing required field '{NAME_KEY}'", path)

    name = payload[NAME_KEY]
    if not isinstance(name, str):
        raise TypeMismatchError(f"expected a string, got {type(name).__name__}", (*path, NAME_KEY))

    model = STANDARD_PASSES.get(name)
    if model is None:
        logger.debug("Unrecognized standard pass '%s' at %s, keeping raw fields", name, format_path(path))
        raw_fields = {key: copy.deepcopy(value) for key, value in payload.items() if key != NAME_KEY}
        return UnrecognizedStandardPass(name=name, raw_fields=raw_fields)

    try:
        # opaque values (architectures, circuits, ...) must not alias the caller's document
        return model.model_validate(copy.deepcopy(payload))
    except ValidationError as exc:
        raise translate_validation_error(exc, path) from exc


def encode_standard_pass(pass_: AnyStandardPass) -> dict[str, Any]:
    """Encode a standard pass as its flat, ``name``-tagged JSON object."""
    if not isinstance(pass_, STANDARD_PASS_TYPES):
        raise TypeError(f"Not a standard pass: {type(pass_).__name__}")
    return pass_.model_dump(mode="json", by_alias=True)


def translate_validation_error(exc: ValidationError, path: ErrorPath = ()) -> PassDecodeError:
    """Map the first pydantic error onto the decode error taxonomy."""
    error = exc.errors()[0]
    error_path = (*path, *error["loc"])
    if error["type"] in _SHAPE_ERROR_TYPES:
        kind = "missing required field" if error["type"] == "missing" else "unexpected field"
        return StrictShapeError(f"{kind} '{error['loc'][-1]}'", error_path)
    return TypeMismatchError(f"{error['msg']} (got {error.get('input')!r})", error_path)
