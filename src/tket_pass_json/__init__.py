"""TKET pass JSON package.

Serialized definition of TKET compiler passes (``compiler_pass_v1``) and the
codec that converts pass trees to and from their JSON documents.
"""

from pathlib import Path

THIS_DIR = Path(__file__).parent
PROJECT_DIR = (THIS_DIR / "../..").resolve()

from tket_pass_json.compiler_pass.entities.base_pass import (  # noqa: E402
    BasePass,
    RepeatPass,
    RepeatUntilSatisfiedPass,
    RepeatWithMetricPass,
    SequencePass,
)
from tket_pass_json.compiler_pass.pass_codec.decoder import decode_pass  # noqa: E402
from tket_pass_json.compiler_pass.pass_codec.encoder import encode_pass  # noqa: E402
from tket_pass_json.compiler_pass.pass_codec.errors import PassDecodeError  # noqa: E402

__all__ = [
    "PROJECT_DIR",
    "BasePass",
    "SequencePass",
    "RepeatPass",
    "RepeatWithMetricPass",
    "RepeatUntilSatisfiedPass",
    "decode_pass",
    "encode_pass",
    "PassDecodeError",
]
