"""
Discovery pipeline: locate -> resolve installs -> parse -> reconcile -> registry.
Every call scans from scratch; nothing is cached between runs.
"""
from pathlib import Path
from typing import Iterable, Optional

from .config import BUNDLE_PATTERN, IGNORED_APPLICATIONS
from .locator import locate_record_files
from .logger import get_logger
from .reconcile import resolve_records
from .record_parser import read_record_file
from .registry import ProjectRegistry
from .resolver import find_installed_apps

logger = get_logger(__name__)


def discover_projects(
    projects_root,
    toolbox_root=None,
    home_dir: Optional[str] = None,
    ignore: Iterable[str] = IGNORED_APPLICATIONS,
    bundle_pattern: str = BUNDLE_PATTERN,
    merge_applications: bool = False,
) -> ProjectRegistry:
    """
    Scan projects_root and return a finalized ProjectRegistry.

    Raises ScanIOError (walk/read failure), ToolboxNotFoundError (no Toolbox
    folder under projects_root) or MalformedRecordError (bad record file).
    toolbox_root defaults to the Toolbox folder found under projects_root.
    """
    home_dir = str(home_dir) if home_dir else str(Path.home())

    located = locate_record_files(projects_root, ignore=ignore)
    suite_dir = located.require_suite()
    build_to_path = find_installed_apps(toolbox_root or suite_dir, bundle_pattern)

    records = []
    for record_file in located.record_files:
        records.extend(read_record_file(record_file, home_dir))

    resolved = resolve_records(records, build_to_path)
    logger.info("Resolved %d of %d record(s)", len(resolved), len(records))

    registry = ProjectRegistry(merge_applications=merge_applications)
    registry.ingest(resolved)
    registry.finalize()
    return registry


def discover_from_config(config: dict) -> ProjectRegistry:
    """Run discover_projects with roots and options from a load_config() dict."""
    return discover_projects(
        config["projects_root"],
        toolbox_root=config.get("toolbox_root"),
        home_dir=config.get("home_dir"),
        bundle_pattern=config.get("bundle_pattern") or BUNDLE_PATTERN,
        merge_applications=bool(config.get("merge_applications")),
    )
