"""
Find recentProjects.xml / recentSolutions.xml under the JetBrains options root.
The same walk notes whether the Toolbox directory exists next to the IDE folders.
"""
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Optional

from .config import IGNORED_APPLICATIONS, RECORD_FILE_NAMES, TOOLBOX_MARKER
from .exceptions import ScanIOError, ToolboxNotFoundError
from .logger import get_logger

logger = get_logger(__name__)

# IntelliJIdea2023.1 -> IntelliJIdea, Rider2022.3.2 -> Rider
_VERSION_SUFFIX = re.compile(r"\d[\d.]*$")


@dataclass(frozen=True)
class RecordFile:
    application: str
    path: Path


@dataclass
class LocateResult:
    root: Path
    record_files: list = field(default_factory=list)
    suite_dir: Optional[Path] = None

    def require_suite(self) -> Path:
        """Return the Toolbox directory or raise ToolboxNotFoundError."""
        if self.suite_dir is None:
            raise ToolboxNotFoundError(f"JetBrains Toolbox is not found under {self.root}")
        return self.suite_dir


def application_from_path(root, path) -> str:
    """Owning application: first segment below root, version digits stripped."""
    rel = Path(path).relative_to(root)
    if len(rel.parts) < 2:
        return ""
    return _VERSION_SUFFIX.sub("", rel.parts[0])


def _find_suite_dir(root: Path, dirnames: list) -> Optional[Path]:
    """Exact Toolbox folder if present, else the first folder whose name contains it."""
    if TOOLBOX_MARKER in dirnames:
        return root / TOOLBOX_MARKER
    for name in dirnames:
        if TOOLBOX_MARKER in name:
            return root / name
    return None


def _raise_walk_error(err: OSError) -> None:
    raise err


def locate_record_files(root, ignore: Iterable[str] = IGNORED_APPLICATIONS) -> LocateResult:
    """
    Walk root and collect record files of every non-ignored application.
    Any OSError aborts with ScanIOError; the Toolbox check is left to require_suite().
    """
    root = Path(root)
    ignore = frozenset(ignore)
    result = LocateResult(root=root)

    if not root.is_dir():
        raise ScanIOError(f"Projects root is not a directory: {root}")

    try:
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise_walk_error):
            dirnames.sort()
            current = Path(dirpath)
            if current == root:
                result.suite_dir = _find_suite_dir(root, dirnames)
            for name in sorted(filenames):
                if name not in RECORD_FILE_NAMES:
                    continue
                path = current / name
                application = application_from_path(root, path)
                if not application:
                    logger.debug("Skipping %s: not inside an application folder", path)
                    continue
                if application in ignore:
                    logger.debug("Ignoring %s (application %s)", path, application)
                    continue
                result.record_files.append(RecordFile(application=application, path=path))
    except OSError as e:
        raise ScanIOError(f"Cannot scan {root}: {e}") from e

    logger.info("Found %d record file(s) under %s", len(result.record_files), root)
    return result
