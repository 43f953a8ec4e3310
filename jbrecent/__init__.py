"""jbrecent — recent JetBrains IDE projects, resolved to the Toolbox build that opens them."""

__version__ = "0.1.0"

from jbrecent.core.discovery import discover_projects, discover_from_config
from jbrecent.core.exceptions import JBRecentError
from jbrecent.core.models import ProjectIdentity, ResolvedProject
from jbrecent.core.registry import ProjectRegistry

__all__ = [
    "__version__",
    "discover_projects",
    "discover_from_config",
    "JBRecentError",
    "ProjectIdentity",
    "ResolvedProject",
    "ProjectRegistry",
]
