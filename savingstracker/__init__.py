"""Mini README: Core package initializer for the savings tracker.

The package records income and expense entries in a persisted ledger and
renders a running balance plus a newest-first feed. Convenience imports
here let entry points reach the controller and logging helpers without
knowing the exact module structure.
"""

from .logging_utils import get_logger

__version__ = "0.1.0"

__all__ = ["get_logger", "__version__"]
