# tket_pass_json/compiler_pass/pass_codec/encoder.py

import copy
from typing import Any

from tket_pass_json.compiler_pass.entities.base_pass import (
    BasePass,
    RepeatPass,
    RepeatUntilSatisfiedPass,
    RepeatWithMetricPass,
    SequencePass,
)
from tket_pass_json.compiler_pass.entities.standard_pass import STANDARD_PASS_TYPES
from tket_pass_json.compiler_pass.pass_codec.defs import (
    BODY_KEY,
    METRIC_KEY,
    PASS_CLASS_KEY,
    PREDICATE_KEY,
    SEQUENCE_KEY,
)
from tket_pass_json.compiler_pass.pass_codec.standard_codec import encode_standard_pass


def encode_pass(pass_: BasePass) -> dict[str, Any]:
    """Encode a pass tree into its ``compiler_pass_v1`` document.

    Every envelope gets exactly two keys: ``pass_class`` and the payload
    stored under the same name. Nested passes are written through an explicit
    stack; each stack entry says which slot (dict key or list index) of its
    parent the encoded envelope goes into.
    """
    root: dict[str, Any] = {}
    stack: list[tuple[Any, Any, Any]] = [(pass_, root, "root")]

    while stack:
        node, parent, slot = stack.pop()
        pass_class = getattr(type(node), "pass_class", None)
        if pass_class is None:
            raise TypeError(f"Not a pass: {type(node).__name__}")

        if isinstance(node, STANDARD_PASS_TYPES):
            payload = encode_standard_pass(node)
        elif isinstance(node, SequencePass):
            payload = {SEQUENCE_KEY: [None] * len(node.sequence)}
            for index, child in enumerate(node.sequence):
                stack.append((child, payload[SEQUENCE_KEY], index))
        elif isinstance(node, (RepeatPass, RepeatWithMetricPass, RepeatUntilSatisfiedPass)):
            payload = {BODY_KEY: None}
            stack.append((node.body, payload, BODY_KEY))
            if isinstance(node, RepeatWithMetricPass):
                payload[METRIC_KEY] = node.metric
            elif isinstance(node, RepeatUntilSatisfiedPass):
                payload[PREDICATE_KEY] = copy.deepcopy(node.predicate)
        else:
            raise TypeError(f"Not a pass: {type(node).__name__}")

        parent[slot] = {PASS_CLASS_KEY: pass_class, pass_class: payload}

    return root["root"]
