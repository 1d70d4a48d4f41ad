from .dispatcher import CommandDispatcher
from .engine import AuthEngine, EngineContext, EngineState, open_context

__all__ = ["CommandDispatcher", "AuthEngine", "EngineContext", "EngineState", "open_context"]
