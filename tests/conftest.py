"""
Pytest fixtures for pass documents and sample pass trees.
"""
import json
from pathlib import Path

import pytest

from tket_pass_json.compiler_pass.config import reset_config
from tket_pass_json.compiler_pass.entities import standard_pass as sp
from tket_pass_json.compiler_pass.entities.attributes import (
    CxConfig,
    DecomposeTk2Fidelities,
    PauliSynthStrategy,
    RotationAxis,
    RoutingMethod,
    TargetTwoQubitGate,
)

DATA_DIR = Path(__file__).parent / "data" / "pass"

PASS_DOCUMENTS = sorted(p.name for p in DATA_DIR.glob("*.json"))


def load_document(name: str) -> dict:
    """Load one of the JSON documents under tests/data/pass."""
    return json.loads((DATA_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Every test starts from default settings and an empty config singleton."""
    for var in ("TKET_PASS_MAX_DEPTH", "TKET_PASS_ALLOW_EXTRA_FIELDS", "TKET_PASS_JSON_INDENT", "ENVIRONMENT"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


# =============================================================================
# Opaque payloads
# =============================================================================

@pytest.fixture
def line_architecture():
    """Three node line, architecture_v1 layout."""
    return {
        "links": [
            {"link": [["node", [0]], ["node", [1]]], "weight": 1},
            {"link": [["node", [1]], ["node", [2]]], "weight": 1},
        ],
        "nodes": [["node", [0]], ["node", [1]], ["node", [2]]],
    }


@pytest.fixture
def cx_circuit():
    """Single CX, circuit_v1 layout."""
    return {
        "phase": "0.0",
        "bits": [],
        "qubits": [["q", [0]], ["q", [1]]],
        "commands": [{"args": [["q", [0]], ["q", [1]]], "op": {"type": "CX"}}],
        "implicit_permutation": [[["q", [0]], ["q", [0]]], [["q", [1]], ["q", [1]]]],
    }


# =============================================================================
# One instance of every catalog entry
# =============================================================================

@pytest.fixture
def catalog_samples(line_architecture, cx_circuit):
    placement = {"type": "LinePlacement", "architecture": line_architecture}
    routing = [RoutingMethod(name="LexiLabellingMethod"), RoutingMethod(name="LexiRouteRoutingMethod", depth=10)]
    tk1 = "80049563000000000000008c0a64696c6c2e5f64696c6c94"

    return [
        sp.RebaseCustom(basis_allowed=["CX", "TK1"], basis_cx_replacement=cx_circuit, basis_tk1_replacement=tk1),
        sp.RebaseCustomViaTK2(),
        sp.AutoRebase(basis_allowed=["ZZPhase", "PhasedX", "Rz"], allow_swaps=True),
        sp.SquashCustom(basis_singleqs=["Rz", "Rx"], basis_tk1_replacement=tk1, always_squash_symbols=False),
        sp.AutoSquash(basis_singleqs=["Rz", "PhasedX"]),
        sp.CommuteThroughMultis(),
        sp.DecomposeArbitrarilyControlledGates(),
        sp.DecomposeBoxes(excluded_types=[], excluded_opgroups=[], included_types=["CircBox"]),
        sp.DecomposeMultiQubitsCX(),
        sp.DecomposeSingleQubitsTK1(),
        sp.PeepholeOptimise2Q(allow_swaps=False),
        sp.RebaseTket(),
        sp.RebaseUFR(),
        sp.RemoveRedundancies(),
        sp.SynthesiseTK(),
        sp.SynthesiseTket(),
        sp.SynthesiseOQC(),
        sp.SquashTK1(),
        sp.SquashRzPhasedX(),
        sp.FlattenRegisters(),
        sp.DelayMeasures(allow_partial=True),
        sp.ZZPhaseToRz(),
        sp.RemoveDiscarded(),
        sp.SimplifyMeasured(),
        sp.RemoveBarriers(),
        sp.RemovePhaseOps(),
        sp.DecomposeBridges(),
        sp.KakDecomposition(fidelity=0.99, allow_swaps=True, target_2qb_gate=TargetTwoQubitGate.TK2),
        sp.ThreeQubitSquash(allow_swaps=True),
        sp.FullPeepholeOptimise(allow_swaps=False, target_2qb_gate=TargetTwoQubitGate.CX),
        sp.ComposePhasePolyBoxes(min_size=2),
        sp.EulerAngleReduction(euler_p=RotationAxis.Rz, euler_q=RotationAxis.Rx, euler_strict=True),
        sp.RoutingPass(architecture=line_architecture, routing_config=routing),
        sp.CustomRoutingPass(architecture=line_architecture, routing_config=routing[:1]),
        sp.PlacementPass(placement=placement),
        sp.NaivePlacementPass(architecture=line_architecture),
        sp.RenameQubitsPass(qubit_map=[(["q", [0]], ["node", [2]]), (["q", [1]], ["node", [0]])]),
        sp.CliffordSimp(allow_swaps=True, target_2qb_gate=TargetTwoQubitGate.CX),
        sp.DecomposeSwapsToCxs(architecture=line_architecture, directed=False),
        sp.DecomposeSwapsToCircuit(swap_replacement=cx_circuit),
        sp.OptimisePhaseGadgets(cx_config=CxConfig.Snake),
        sp.OptimisePairwiseGadgets(),
        sp.PauliSimp(pauli_synth_strat=PauliSynthStrategy.Sets, cx_config=CxConfig.Tree),
        sp.PauliExponentials(pauli_synth_strat=PauliSynthStrategy.Individual, cx_config=CxConfig.Star),
        sp.GuidedPauliSimp(pauli_synth_strat=PauliSynthStrategy.Pairwise, cx_config=CxConfig.Snake),
        sp.SimplifyInitial(allow_classical=False, create_all_qubits=True, x_circuit=cx_circuit),
        sp.FullMappingPass(architecture=line_architecture, placement=placement, routing_config=routing),
        sp.DefaultMappingPass(architecture=line_architecture, delay_measures=True),
        sp.CxMappingPass(
            architecture=line_architecture,
            placement=placement,
            routing_config=routing,
            directed=True,
            delay_measures=False,
        ),
        sp.PauliSquash(pauli_synth_strat=PauliSynthStrategy.Sets, cx_config=CxConfig.Snake),
        sp.ContextSimp(allow_classical=True, x_circuit=cx_circuit),
        sp.DecomposeTk2(fidelities=DecomposeTk2Fidelities(CX=0.99, ZZMax=0.98)),
        sp.CnXPairwiseDecomposition(),
        sp.RemoveImplicitQubitPermutation(),
        sp.NormaliseTK2(),
        sp.RoundAngles(n=8, only_zeros=True),
        sp.GreedyPauliSimp(
            discount_rate=0.7,
            depth_weight=0.3,
            max_lookahead=500,
            max_tqe_candidates=500,
            seed=0,
            allow_zzphase=False,
            thread_timeout=100,
            only_reduce=False,
            trials=1,
        ),
        sp.RxFromSX(),
        sp.FlattenRelabelRegistersPass(label="q", relabel_classical_registers=False),
    ]
