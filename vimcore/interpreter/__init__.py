"""Modal key interpreter: session state, host interface and the key state machine."""

from .host import EditorHost, KeyResult, Viewport, dispatch_key
from .machine import ESCAPE, KeyInterpreter
from .memory import MemoryHost
from .state import (
    AwaitingOperatorPrefix,
    AwaitingOperatorTarget,
    AwaitingPrefix,
    CharSearch,
    Idle,
    Mode,
    Operator,
    PendingState,
    SessionState,
)

__all__ = [
    # Interpreter
    "ESCAPE",
    "KeyInterpreter",
    "dispatch_key",
    # Host
    "EditorHost",
    "KeyResult",
    "MemoryHost",
    "Viewport",
    # State
    "AwaitingOperatorPrefix",
    "AwaitingOperatorTarget",
    "AwaitingPrefix",
    "CharSearch",
    "Idle",
    "Mode",
    "Operator",
    "PendingState",
    "SessionState",
]
