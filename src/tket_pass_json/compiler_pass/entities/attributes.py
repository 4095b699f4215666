"""Attribute types shared by the standard pass definitions.

Architecture, placement, predicate and circuit payloads follow their own
TKET schemas (``architecture_v1``, ``placement_v1``, ``predicate_v1``,
``circuit_v1``). They are carried as opaque JSON values and never inspected.
"""

from enum import Enum
from typing import Annotated, Any

from pydantic import ConfigDict, Field, Strict

from tket_pass_json.compiler_pass.entities.serial_model import SerialModel

# Opaque, schema-versioned JSON blobs.
Architecture = Any
Placement = Any
Predicate = Any

# A serialized circuit is always a JSON object.
SerialCircuit = dict[str, Any]

# Qubit / bit identifier, e.g. ["q", [0]].
ElementId = Any


class RotationAxis(str, Enum):
    """Rotation axes used during Euler angle reduction."""

    Rx = "Rx"
    Ry = "Ry"
    Rz = "Rz"


class TargetTwoQubitGate(str, Enum):
    """Target native two-qubit gate for optimisation passes."""

    CX = "CX"
    TK2 = "TK2"


class CxConfig(str, Enum):
    """Preferred CX configuration for gadget construction."""

    Snake = "Snake"
    Tree = "Tree"
    Star = "Star"


class PauliSynthStrategy(str, Enum):
    """Strategy for synthesising Pauli gadgets."""

    Individual = "Individual"
    Pairwise = "Pairwise"
    Sets = "Sets"


# Enum fields accept their wire string; everything else stays strict.
RotationAxisField = Annotated[RotationAxis, Strict(False)]
TargetTwoQubitGateField = Annotated[TargetTwoQubitGate, Strict(False)]
CxConfigField = Annotated[CxConfig, Strict(False)]
PauliSynthStrategyField = Annotated[PauliSynthStrategy, Strict(False)]

# [source, target], serialized as a two element JSON array.
QubitMapping = Annotated[tuple[ElementId, ElementId], Strict(False)]


class RoutingMethod(SerialModel):
    """Routing method descriptor.

    Method specific parameters (``depth``, ``max_depth``, ...) are kept
    as-is next to the name.
    """

    name: str
    model_config = ConfigDict(extra="allow")


# Ordered by priority; never sorted or deduplicated.
RoutingConfig = list[RoutingMethod]


class DecomposeTk2Fidelities(SerialModel):
    """Optional fidelity hints for decomposing TK2 gates, keyed by gate name."""

    cx: float | None = Field(default=None, alias="CX")
    zz_max: float | None = Field(default=None, alias="ZZMax")
    zz_phase: float | None = Field(default=None, alias="ZZPhase")
