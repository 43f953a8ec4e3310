"""jbrecent discovery exceptions."""


class JBRecentError(Exception):
    """Base exception for jbrecent."""


class ConfigError(JBRecentError):
    """Invalid or unreadable configuration."""


class ScanIOError(JBRecentError):
    """Reading or walking one of the roots failed. Aborts discovery."""


class ToolboxNotFoundError(JBRecentError):
    """No Toolbox directory under the projects root."""


class MalformedRecordError(JBRecentError):
    """A recent-projects file is not the expected XML document."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed record file {path}: {reason}")


class RegistryError(JBRecentError):
    """Registry used out of order (e.g. listed before finalize)."""


class ProjectNotFoundError(RegistryError, KeyError):
    """No project under the requested identity."""

    def __str__(self):
        return str(self.args[0]) if self.args else "Project not found"
