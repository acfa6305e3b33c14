"""
Centralized logging using Loguru with context-aware verbosity.

LOG() only emits when a ProgramState has been connected to the current
context and its verbosity is high enough. Code that calls the renderer as a
library (a web view rendering a post, say) never connects a state, so the
renderer stays silent there; the batch CLI connects its state and gets the
messages on stderr.

Usage:
    from markfolio.lib.log import LOG, state_connectToLogger

    state_connectToLogger(state)

    LOG("Rendered 12 files", level=1)
    LOG("Highlighting python block", level=3)
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{module: <10}</cyan>:<cyan>{function: <20}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)


def state_disconnectFromLogger() -> None:
    """Drop the connected ProgramState so LOG() goes quiet again."""
    _program_state.set(None)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        1 = Normal output (default)
        2 = Verbose (-v)
        3 = Debug (-vv or higher)
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1).debug(message, **kwargs)
