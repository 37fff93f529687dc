"""Orchestration for running drill sessions."""

from .console_session import ConsoleSessionRunner
from .session_engine import SessionEngine

__all__ = ["SessionEngine", "ConsoleSessionRunner"]
