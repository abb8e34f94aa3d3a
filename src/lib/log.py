"""
Centralized logging using Loguru with context-aware verbosity.

LOG() consults the verbosity of whichever ProgramState has been bound to the
current context, so the converter, the rule chain and the CLI stages can log
without having the state passed to them.

Usage:
    from lib.log import LOG, state_connectToLogger

    # Once, at the start of the pipeline:
    state_connectToLogger(state)

    # Anywhere downstream:
    LOG("Converted 12 lines", level=1)
    LOG("Rule '## ' claimed line 3", level=3)

Outside a bound context (e.g. library use or tests) LOG() is silent.
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
    "<cyan>{function: <18}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

logger.remove()
logger.add(sys.stderr, format=logger_format, level="DEBUG")


def state_connectToLogger(state: Any) -> None:
    """
    Bind a ProgramState to the logging context.

    Args:
        state: Object with an integer ``verbosity`` attribute
    """
    _program_state.set(state)


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru arguments passed through to logger.opt()
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.opt(depth=1, **kwargs).debug(message)


def WARN(message: str) -> None:
    """Log a warning regardless of verbosity."""
    logger.opt(depth=1).warning(message)
