from .checks import default_registry
from .registry import Check, CheckRegistry, CheckResult

__all__ = ["Check", "CheckRegistry", "CheckResult", "default_registry"]
