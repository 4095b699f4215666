# tket_pass_json/compiler_pass/pass_codec/decoder.py

import copy
import logging
from typing import Any

from tket_pass_json.compiler_pass.config import CodecConfig, get_config
from tket_pass_json.compiler_pass.entities.base_pass import (
    BasePass,
    RepeatPass,
    RepeatUntilSatisfiedPass,
    RepeatWithMetricPass,
    SequencePass,
)
from tket_pass_json.compiler_pass.pass_codec.defs import (
    BODY_KEY,
    COMBINATOR_PAYLOAD_KEYS,
    METRIC_KEY,
    PASS_CLASS_KEY,
    PASS_CLASSES,
    PREDICATE_KEY,
    SEQUENCE_KEY,
    PassClass,
)
from tket_pass_json.compiler_pass.pass_codec.errors import (
    DepthExceededError,
    ErrorPath,
    StrictShapeError,
    TagMismatchError,
    TypeMismatchError,
    UnknownVariantError,
    format_path,
)
from tket_pass_json.compiler_pass.pass_codec.standard_codec import decode_standard_pass

logger = logging.getLogger(__name__)


def decode_pass(document: Any, config: CodecConfig | None = None) -> BasePass:
    """Entrypoint: decode one ``compiler_pass_v1`` document into a pass tree.

    The document is the already parsed JSON value (a dict). Nested passes are
    walked with an explicit work stack, so the only limit on nesting is
    ``config.max_depth``.

    Args:
      document  the envelope ``{"pass_class": ..., <pass_class>: {...}}``
      config    codec limits; the process-wide config when None

    Returns:
      BasePass

    Raises:
      PassDecodeError (one of its subclasses), with the path of the
      offending value. No partial tree is ever returned.

    """
    config = config or get_config()

    # Work items are ("visit", document, path, depth) or ("build", pass_class, payload, path, n_children).
    # Finished passes are pushed on `done`; a build pops its children from there.
    work: list[tuple] = [("visit", document, (), 1)]
    done: list[BasePass] = []

    while work:
        item = work.pop()
        if item[0] == "build":
            _, pass_class, payload, path, n_children = item
            children = done[len(done) - n_children:]
            del done[len(done) - n_children:]
            done.append(_build_combinator(pass_class, payload, children))
            continue

        _, node, path, depth = item
        if depth > config.max_depth:
            raise DepthExceededError(f"passes nested deeper than {config.max_depth} levels", path)

        pass_class, payload = _split_envelope(node, path, config.allow_extra_fields)
        payload_path = (*path, pass_class.value)

        if pass_class is PassClass.STANDARD:
            done.append(decode_standard_pass(payload, payload_path))
            continue

        _check_combinator_payload(pass_class, payload, payload_path)

        if pass_class is PassClass.SEQUENCE:
            sequence = payload[SEQUENCE_KEY]
            work.append(("build", pass_class, payload, payload_path, len(sequence)))
            # reversed, so the first element is decoded (and pushed on `done`) first
            for index in reversed(range(len(sequence))):
                work.append(("visit", sequence[index], (*payload_path, SEQUENCE_KEY, index), depth + 1))
        else:
            work.append(("build", pass_class, payload, payload_path, 1))
            work.append(("visit", payload[BODY_KEY], (*payload_path, BODY_KEY), depth + 1))

    return done[0]


def _split_envelope(node: Any, path: ErrorPath, allow_extra_fields: bool) -> tuple[PassClass, Any]:
    """Read the adjacent tag, then the externally tagged payload it names."""
    if not isinstance(node, dict):
        raise TypeMismatchError(f"expected a pass object, got {type(node).__name__}", path)
    if PASS_CLASS_KEY not in node:
        raise StrictShapeError(f"missing required field '{PASS_CLASS_KEY}'", path)

    tag = node[PASS_CLASS_KEY]
    if not isinstance(tag, str):
        raise TypeMismatchError(f"expected a string, got {type(tag).__name__}", (*path, PASS_CLASS_KEY))
    if tag not in PASS_CLASSES:
        raise UnknownVariantError(
            f"unknown pass class '{tag}', expected one of {sorted(PASS_CLASSES)}", (*path, PASS_CLASS_KEY)
        )
    if tag not in node:
        present = sorted(key for key in node if key != PASS_CLASS_KEY)
        raise TagMismatchError(f"pass_class is '{tag}' but no '{tag}' field was found (fields: {present})", path)

    extra = sorted(key for key in node if key not in (PASS_CLASS_KEY, tag))
    if extra:
        if not allow_extra_fields:
            raise StrictShapeError(f"unexpected fields {extra} next to '{tag}'", path)
        logger.debug("Skipping extra fields %s at %s", extra, format_path(path))

    return PassClass(tag), node[tag]


def _check_combinator_payload(pass_class: PassClass, payload: Any, path: ErrorPath) -> None:
    if not isinstance(payload, dict):
        raise TypeMismatchError(f"expected a JSON object, got {type(payload).__name__}", path)

    expected = COMBINATOR_PAYLOAD_KEYS[pass_class]
    for key in expected:
        if key not in payload:
            raise StrictShapeError(f"missing required field '{key}'", path)
    extra = sorted(key for key in payload if key not in expected)
    if extra:
        raise StrictShapeError(f"unexpected fields {extra}", path)

    if SEQUENCE_KEY in expected and not isinstance(payload[SEQUENCE_KEY], list):
        raise TypeMismatchError(
            f"expected a list, got {type(payload[SEQUENCE_KEY]).__name__}", (*path, SEQUENCE_KEY)
        )
    if METRIC_KEY in expected and not isinstance(payload[METRIC_KEY], str):
        raise TypeMismatchError(
            f"expected a string, got {type(payload[METRIC_KEY]).__name__}", (*path, METRIC_KEY)
        )


def _build_combinator(pass_class: PassClass, payload: dict, children: list[BasePass]) -> BasePass:
    # Children are already validated models; pydantic only checks their type here.
    if pass_class is PassClass.SEQUENCE:
        return SequencePass(sequence=children)
    if pass_class is PassClass.REPEAT:
        return RepeatPass(body=children[0])
    if pass_class is PassClass.REPEAT_WITH_METRIC:
        return RepeatWithMetricPass(body=children[0], metric=payload[METRIC_KEY])
    return RepeatUntilSatisfiedPass(body=children[0], predicate=copy.deepcopy(payload[PREDICATE_KEY]))
