# Integration Module
"""
Background hashing for interactive front ends:
- Hash worker thread - worker.py
- Event log of worker activity - event_logger.py
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    from . import event_logger, worker
    for module in (worker, event_logger):
        if hasattr(module, name):
            return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    'Algorithm',
    'HashWorker',
    'MessageKind',
    'WorkerMessage',
    'hash_request',
    'EventType',
    'HashEvent',
    'EventLogger',
]
