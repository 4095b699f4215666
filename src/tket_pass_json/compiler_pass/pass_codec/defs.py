# -----------------------------------------------------------------------------
# Wire constants for the compiler_pass_v1 documents
# -----------------------------------------------------------------------------
from enum import Enum

PASS_CLASS_KEY = "pass_class"   # adjacent tag of the outer pass envelope
NAME_KEY = "name"               # adjacent tag of a standard pass payload

SEQUENCE_KEY = "sequence"
BODY_KEY = "body"
METRIC_KEY = "metric"
PREDICATE_KEY = "predicate"

DEFAULT_MAX_DEPTH = 256


class PassClass(str, Enum):
    """Outer pass discriminants. Closed set: anything else is a decode error."""

    STANDARD = "StandardPass"
    SEQUENCE = "SequencePass"
    REPEAT = "RepeatPass"
    REPEAT_WITH_METRIC = "RepeatWithMetricPass"
    REPEAT_UNTIL_SATISFIED = "RepeatUntilSatisfiedPass"


PASS_CLASSES = frozenset(pc.value for pc in PassClass)

# Keys each combinator payload must carry, in wire order.
COMBINATOR_PAYLOAD_KEYS: dict[PassClass, tuple[str, ...]] = {
    PassClass.SEQUENCE: (SEQUENCE_KEY,),
    PassClass.REPEAT: (BODY_KEY,),
    PassClass.REPEAT_WITH_METRIC: (BODY_KEY, METRIC_KEY),
    PassClass.REPEAT_UNTIL_SATISFIED: (BODY_KEY, PREDICATE_KEY),
}
