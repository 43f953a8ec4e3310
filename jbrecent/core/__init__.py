from .models import ProjectIdentity, BuildDetails, ProjectRecord, ResolvedProject
from .exceptions import (
    JBRecentError, ConfigError, ScanIOError, ToolboxNotFoundError,
    MalformedRecordError, RegistryError, ProjectNotFoundError,
)
from .locator import RecordFile, LocateResult, locate_record_files, application_from_path
from .record_parser import derive_display_name, parse_record_bytes, read_record_file
from .resolver import find_installed_apps
from .reconcile import resolve_records
from .registry import ProjectRegistry
from .discovery import discover_projects, discover_from_config
from .logger import get_logger, get_app_logger, setup_logging

__all__ = [
    "ProjectIdentity", "BuildDetails", "ProjectRecord", "ResolvedProject",
    "JBRecentError", "ConfigError", "ScanIOError", "ToolboxNotFoundError",
    "MalformedRecordError", "RegistryError", "ProjectNotFoundError",
    "RecordFile", "LocateResult", "locate_record_files", "application_from_path",
    "derive_display_name", "parse_record_bytes", "read_record_file",
    "find_installed_apps", "resolve_records", "ProjectRegistry",
    "discover_projects", "discover_from_config",
    "get_logger", "get_app_logger", "setup_logging",
]
