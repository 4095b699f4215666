"""Serialized definition for TKET passes.

Based on the ``compiler_pass_v1`` schema. A pass is either a standard pass
from the catalog or one of the combinators below, which own their nested
passes and so form a tree of arbitrary depth.

On the wire every pass is tagged twice: adjacently, with a ``pass_class``
string field, and externally, with the payload stored under a field whose
name is that same ``pass_class`` string::

    {"pass_class": "RepeatPass", "RepeatPass": {"body": {...}}}

Each model exposes its discriminant as the ``pass_class`` class attribute.
The document <-> model conversion lives in ``pass_codec``.
"""

from __future__ import annotations

from typing import ClassVar, Union

from tket_pass_json.compiler_pass.entities.attributes import Predicate
from tket_pass_json.compiler_pass.entities.serial_model import SerialModel
from tket_pass_json.compiler_pass.entities.standard_pass import StandardPass, UnrecognizedStandardPass


class SequencePass(SerialModel):
    """A pass that executes a sequence of passes in order."""

    pass_class: ClassVar[str] = "SequencePass"

    sequence: list[BasePass]


class RepeatPass(SerialModel):
    """A pass that iterates an internal pass until no further change."""

    pass_class: ClassVar[str] = "RepeatPass"

    body: BasePass


class RepeatWithMetricPass(SerialModel):
    """A pass that iterates an internal pass whilst some metric decreases."""

    pass_class: ClassVar[str] = "RepeatWithMetricPass"

    body: BasePass
    # dill string of the python metric function
    metric: str


class RepeatUntilSatisfiedPass(SerialModel):
    """A pass that iterates an internal pass until some predicate is satisfied."""

    pass_class: ClassVar[str] = "RepeatUntilSatisfiedPass"

    body: BasePass
    predicate: Predicate


BasePass = Union[
    StandardPass,
    UnrecognizedStandardPass,
    SequencePass,
    RepeatPass,
    RepeatWithMetricPass,
    RepeatUntilSatisfiedPass,
]

COMBINATOR_PASSES: tuple[type[SerialModel], ...] = (
    SequencePass,
    RepeatPass,
    RepeatWithMetricPass,
    RepeatUntilSatisfiedPass,
)

# Rebuild models to resolve the recursive BasePass reference
SequencePass.model_rebuild()
RepeatPass.model_rebuild()
RepeatWithMetricPass.model_rebuild()
RepeatUntilSatisfiedPass.model_rebuild()
