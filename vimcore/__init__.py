"""vimcore - a modal vim-style key interpreter for text editors."""

from typing import TYPE_CHECKING, Any

__all__ = [
    "__version__",
    "main",
    "KeyInterpreter",
    "MemoryHost",
    "Mode",
]

__version__ = "0.1.0"

if TYPE_CHECKING:
    from .cli import main
    from .interpreter import KeyInterpreter, MemoryHost, Mode


def __getattr__(name: str) -> Any:
    """Lazy import so the pure engine loads without Textual."""
    if name == "main":
        from .cli import main

        return main
    if name in ("KeyInterpreter", "MemoryHost", "Mode"):
        from . import interpreter

        return getattr(interpreter, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
