"""Standard pass definitions.

Each catalog entry is a frozen pydantic model whose ``name`` literal is the
wire tag of the ``compiler_pass_v1`` schema; the remaining fields sit next to
it in the same JSON object. Wire names are authoritative, class names are not
(e.g. ``DecomposeSwapsToCXs`` vs ``DecomposeSwapsToCxs``).

The catalog keeps growing on the TKET side. Names this module does not know
are decoded into :class:`UnrecognizedStandardPass`, so code matching over
standard passes should always keep a fallback branch.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Literal, Union, get_args

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_serializer

from tket_pass_json.compiler_pass.entities.attributes import (
    Architecture,
    CxConfigField,
    DecomposeTk2Fidelities,
    PauliSynthStrategyField,
    Placement,
    QubitMapping,
    RotationAxisField,
    RoutingConfig,
    SerialCircuit,
    TargetTwoQubitGateField,
)
from tket_pass_json.compiler_pass.entities.serial_model import SerialModel


class StandardPassBase(SerialModel):
    """Common base of the catalog entries."""

    pass_class: ClassVar[str] = "StandardPass"

    name: str


# ---------------------------------------------------------------------------
# Gate set / rebase
# ---------------------------------------------------------------------------


class RebaseCustom(StandardPassBase):
    """Re-base the circuit to a custom basis."""

    name: Literal["RebaseCustom"] = "RebaseCustom"
    basis_allowed: list[str]  # OpTypes of supported gates
    basis_cx_replacement: SerialCircuit
    # dill encoded python function, kept verbatim
    basis_tk1_replacement: str


class RebaseCustomViaTK2(StandardPassBase):
    name: Literal["RebaseCustomViaTK2"] = "RebaseCustomViaTK2"


class AutoRebase(StandardPassBase):
    """Automatically rebase to a given gate set."""

    name: Literal["AutoRebase"] = "AutoRebase"
    basis_allowed: list[str]
    allow_swaps: bool


class RebaseTket(StandardPassBase):
    name: Literal["RebaseTket"] = "RebaseTket"


class RebaseUFR(StandardPassBase):
    name: Literal["RebaseUFR"] = "RebaseUFR"


class RxFromSX(StandardPassBase):
    name: Literal["RxFromSX"] = "RxFromSX"


# ---------------------------------------------------------------------------
# Squash / peephole / Clifford / KAK
# ---------------------------------------------------------------------------


class SquashCustom(StandardPassBase):
    """Squash single-qubit gates into a custom basis."""

    name: Literal["SquashCustom"] = "SquashCustom"
    basis_singleqs: list[str]
    basis_tk1_replacement: str
    always_squash_symbols: bool


class AutoSquash(StandardPassBase):
    name: Literal["AutoSquash"] = "AutoSquash"
    basis_singleqs: list[str]


class SquashTK1(StandardPassBase):
    name: Literal["SquashTK1"] = "SquashTK1"


class SquashRzPhasedX(StandardPassBase):
    name: Literal["SquashRzPhasedX"] = "SquashRzPhasedX"


class PeepholeOptimise2Q(StandardPassBase):
    name: Literal["PeepholeOptimise2Q"] = "PeepholeOptimise2Q"
    allow_swaps: bool


class FullPeepholeOptimise(StandardPassBase):
    name: Literal["FullPeepholeOptimise"] = "FullPeepholeOptimise"
    allow_swaps: bool
    target_2qb_gate: TargetTwoQubitGateField


class KakDecomposition(StandardPassBase):
    """KAK decomposition of two-qubit blocks."""

    name: Literal["KAKDecomposition"] = "KAKDecomposition"
    # Semantically within [0, 1]; not enforced.
    fidelity: float
    allow_swaps: bool
    target_2qb_gate: TargetTwoQubitGateField


class ThreeQubitSquash(StandardPassBase):
    name: Literal["ThreeQubitSquash"] = "ThreeQubitSquash"
    allow_swaps: bool


class CliffordSimp(StandardPassBase):
    """Clifford simplification."""

    name: Literal["CliffordSimp"] = "CliffordSimp"
    allow_swaps: bool
    target_2qb_gate: TargetTwoQubitGateField


class EulerAngleReduction(StandardPassBase):
    name: Literal["EulerAngleReduction"] = "EulerAngleReduction"
    euler_p: RotationAxisField
    euler_q: RotationAxisField
    euler_strict: bool


class CommuteThroughMultis(StandardPassBase):
    name: Literal["CommuteThroughMultis"] = "CommuteThroughMultis"


class RemoveRedundancies(StandardPassBase):
    name: Literal["RemoveRedundancies"] = "RemoveRedundancies"


class SynthesiseTK(StandardPassBase):
    name: Literal["SynthesiseTK"] = "SynthesiseTK"


class SynthesiseTket(StandardPassBase):
    name: Literal["SynthesiseTket"] = "SynthesiseTket"


class SynthesiseOQC(StandardPassBase):
    name: Literal["SynthesiseOQC"] = "SynthesiseOQC"


# ---------------------------------------------------------------------------
# Box decomposition
# ---------------------------------------------------------------------------


class DecomposeBoxes(StandardPassBase):
    """Decompose boxes, filtered by op type and op group.

    ``None`` for an ``included_*`` filter means "no filter", which is not the
    same thing as an empty list.
    """

    name: Literal["DecomposeBoxes"] = "DecomposeBoxes"
    excluded_types: list[str]
    excluded_opgroups: list[str]
    included_types: list[str] | None = None
    included_opgroups: list[str] | None = None


class DecomposeArbitrarilyControlledGates(StandardPassBase):
    name: Literal["DecomposeArbitrarilyControlledGates"] = "DecomposeArbitrarilyControlledGates"


class DecomposeMultiQubitsCX(StandardPassBase):
    name: Literal["DecomposeMultiQubitsCX"] = "DecomposeMultiQubitsCX"


class DecomposeSingleQubitsTK1(StandardPassBase):
    name: Literal["DecomposeSingleQubitsTK1"] = "DecomposeSingleQubitsTK1"


class DecomposeBridges(StandardPassBase):
    name: Literal["DecomposeBridges"] = "DecomposeBridges"


class ComposePhasePolyBoxes(StandardPassBase):
    name: Literal["ComposePhasePolyBoxes"] = "ComposePhasePolyBoxes"
    # Minimal number of CX gates in each phase polynomial box.
    min_size: int = Field(ge=0, le=2**32 - 1)


class CnXPairwiseDecomposition(StandardPassBase):
    name: Literal["CnXPairwiseDecomposition"] = "CnXPairwiseDecomposition"


class DecomposeTk2(StandardPassBase):
    name: Literal["DecomposeTK2"] = "DecomposeTK2"
    fidelities: DecomposeTk2Fidelities | None = None


class NormaliseTK2(StandardPassBase):
    name: Literal["NormaliseTK2"] = "NormaliseTK2"


class ZZPhaseToRz(StandardPassBase):
    name: Literal["ZZPhaseToRz"] = "ZZPhaseToRz"


# ---------------------------------------------------------------------------
# Routing / placement / mapping
# ---------------------------------------------------------------------------


class RoutingPass(StandardPassBase):
    name: Literal["RoutingPass"] = "RoutingPass"
    architecture: Architecture
    routing_config: RoutingConfig


class CustomRoutingPass(StandardPassBase):
    name: Literal["CustomRoutingPass"] = "CustomRoutingPass"
    architecture: Architecture
    routing_config: RoutingConfig


class PlacementPass(StandardPassBase):
    name: Literal["PlacementPass"] = "PlacementPass"
    placement: Placement


class NaivePlacementPass(StandardPassBase):
    name: Literal["NaivePlacementPass"] = "NaivePlacementPass"
    architecture: Architecture


class RenameQubitsPass(StandardPassBase):
    name: Literal["RenameQubitsPass"] = "RenameQubitsPass"
    qubit_map: list[QubitMapping]


class DecomposeSwapsToCxs(StandardPassBase):
    name: Literal["DecomposeSwapsToCXs"] = "DecomposeSwapsToCXs"
    architecture: Architecture
    directed: bool


class DecomposeSwapsToCircuit(StandardPassBase):
    name: Literal["DecomposeSwapsToCircuit"] = "DecomposeSwapsToCircuit"
    swap_replacement: SerialCircuit


class FullMappingPass(StandardPassBase):
    """Placement followed by routing and swap decomposition."""

    name: Literal["FullMappingPass"] = "FullMappingPass"
    architecture: Architecture
    placement: Placement
    routing_config: RoutingConfig


class DefaultMappingPass(StandardPassBase):
    name: Literal["DefaultMappingPass"] = "DefaultMappingPass"
    architecture: Architecture
    delay_measures: bool


class CxMappingPass(StandardPassBase):
    """Mapping pipeline that also rebases swaps to CX, honouring edge direction."""

    name: Literal["CXMappingPass"] = "CXMappingPass"
    architecture: Architecture
    placement: Placement
    routing_config: RoutingConfig
    directed: bool
    delay_measures: bool


# ---------------------------------------------------------------------------
# Pauli synthesis
# ---------------------------------------------------------------------------


class OptimisePhaseGadgets(StandardPassBase):
    name: Literal["OptimisePhaseGadgets"] = "OptimisePhaseGadgets"
    cx_config: CxConfigField


class OptimisePairwiseGadgets(StandardPassBase):
    name: Literal["OptimisePairwiseGadgets"] = "OptimisePairwiseGadgets"


class PauliSynthesisConfig(StandardPassBase):
    """Payload shared by the Pauli synthesis family.

    PauliSimp, PauliExponentials, GuidedPauliSimp and PauliSquash only differ
    by their tag.
    """

    pauli_synth_strat: PauliSynthStrategyField
    cx_config: CxConfigField


class PauliSimp(PauliSynthesisConfig):
    name: Literal["PauliSimp"] = "PauliSimp"


class PauliExponentials(PauliSynthesisConfig):
    name: Literal["PauliExponentials"] = "PauliExponentials"


class GuidedPauliSimp(PauliSynthesisConfig):
    name: Literal["GuidedPauliSimp"] = "GuidedPauliSimp"


class PauliSquash(PauliSynthesisConfig):
    name: Literal["PauliSquash"] = "PauliSquash"


class GreedyPauliSimp(StandardPassBase):
    """Greedy Pauli simplification.

    The schema types every numeric knob as a double, including the integral
    ones (seed, trials, lookahead), so they stay floats here too.
    """

    name: Literal["GreedyPauliSimp"] = "GreedyPauliSimp"
    discount_rate: float
    depth_weight: float
    max_lookahead: float
    max_tqe_candidates: float
    seed: float
    allow_zzphase: bool
    thread_timeout: float
    only_reduce: bool
    trials: float


# ---------------------------------------------------------------------------
# Initial state / measurement / register housekeeping
# ---------------------------------------------------------------------------


class SimplifyInitial(StandardPassBase):
    name: Literal["SimplifyInitial"] = "SimplifyInitial"
    allow_classical: bool
    create_all_qubits: bool
    x_circuit: SerialCircuit | None = None


class ContextSimp(StandardPassBase):
    name: Literal["ContextSimp"] = "ContextSimp"
    allow_classical: bool
    x_circuit: SerialCircuit


class DelayMeasures(StandardPassBase):
    name: Literal["DelayMeasures"] = "DelayMeasures"
    allow_partial: bool


class RoundAngles(StandardPassBase):
    name: Literal["RoundAngles"] = "RoundAngles"
    n: int = Field(ge=-(2**63), le=2**63 - 1)
    only_zeros: bool


class FlattenRegisters(StandardPassBase):
    name: Literal["FlattenRegisters"] = "FlattenRegisters"


class FlattenRelabelRegistersPass(StandardPassBase):
    name: Literal["FlattenRelabelRegistersPass"] = "FlattenRelabelRegistersPass"
    label: str
    relabel_classical_registers: bool


class RemoveDiscarded(StandardPassBase):
    name: Literal["RemoveDiscarded"] = "RemoveDiscarded"


class SimplifyMeasured(StandardPassBase):
    name: Literal["SimplifyMeasured"] = "SimplifyMeasured"


class RemoveBarriers(StandardPassBase):
    name: Literal["RemoveBarriers"] = "RemoveBarriers"


class RemovePhaseOps(StandardPassBase):
    name: Literal["RemovePhaseOps"] = "RemovePhaseOps"


class RemoveImplicitQubitPermutation(StandardPassBase):
    name: Literal["RemoveImplicitQubitPermutation"] = "RemoveImplicitQubitPermutation"


# ---------------------------------------------------------------------------
# Forward compatibility
# ---------------------------------------------------------------------------


class UnrecognizedStandardPass(BaseModel):
    """A standard pass whose name is not part of this catalog.

    The raw fields are kept untouched so the pass can be re-encoded without
    loss.
    """

    pass_class: ClassVar[str] = "StandardPass"

    name: str
    raw_fields: dict[str, Any] = Field(default_factory=dict)
    model_config = ConfigDict(frozen=True, strict=True, extra="forbid")

    @field_validator("raw_fields")
    @classmethod
    def _name_is_not_a_field(cls, v: dict[str, Any]) -> dict[str, Any]:
        if "name" in v:
            raise ValueError("'name' is the pass tag and cannot appear in raw_fields")
        return v

    @model_serializer(mode="plain")
    def _flatten(self) -> dict[str, Any]:
        return {"name": self.name, **self.raw_fields}


StandardPass = Annotated[
    Union[
        RebaseCustom,
        RebaseCustomViaTK2,
        AutoRebase,
        SquashCustom,
        AutoSquash,
        CommuteThroughMultis,
        DecomposeArbitrarilyControlledGates,
        DecomposeBoxes,
        DecomposeMultiQubitsCX,
        DecomposeSingleQubitsTK1,
        PeepholeOptimise2Q,
        RebaseTket,
        RebaseUFR,
        RemoveRedundancies,
        SynthesiseTK,
        SynthesiseTket,
        SynthesiseOQC,
        SquashTK1,
        SquashRzPhasedX,
        FlattenRegisters,
        DelayMeasures,
        ZZPhaseToRz,
        RemoveDiscarded,
        SimplifyMeasured,
        RemoveBarriers,
        RemovePhaseOps,
        DecomposeBridges,
        KakDecomposition,
        ThreeQubitSquash,
        FullPeepholeOptimise,
        ComposePhasePolyBoxes,
        EulerAngleReduction,
        RoutingPass,
        CustomRoutingPass,
        PlacementPass,
        NaivePlacementPass,
        RenameQubitsPass,
        CliffordSimp,
        DecomposeSwapsToCxs,
        DecomposeSwapsToCircuit,
        OptimisePhaseGadgets,
        OptimisePairwiseGadgets,
        PauliSimp,
        PauliExponentials,
        GuidedPauliSimp,
        SimplifyInitial,
        FullMappingPass,
        DefaultMappingPass,
        CxMappingPass,
        PauliSquash,
        ContextSimp,
        DecomposeTk2,
        CnXPairwiseDecomposition,
        RemoveImplicitQubitPermutation,
        NormaliseTK2,
        RoundAngles,
        GreedyPauliSimp,
        RxFromSX,
        FlattenRelabelRegistersPass,
    ],
    Field(discriminator="name"),
]

AnyStandardPass = Union[StandardPass, UnrecognizedStandardPass]

# Wire name -> catalog model.
STANDARD_PASSES: dict[str, type[StandardPassBase]] = {
    cls.model_fields["name"].default: cls for cls in get_args(get_args(StandardPass)[0])
}

STANDARD_PASS_TYPES: tuple[type[BaseModel], ...] = (StandardPassBase, UnrecognizedStandardPass)
