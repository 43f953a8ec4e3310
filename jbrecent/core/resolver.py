"""
Map installed IDE builds to their bundles under the Toolbox root.
Toolbox keeps one folder per build: .../apps/IDEA-U/ch-0/233.11799.241/IntelliJ IDEA.app
"""
import os
import re
from pathlib import Path

from .config import BUNDLE_PATTERN
from .logger import get_logger

logger = get_logger(__name__)


def find_installed_apps(suite_root, bundle_pattern: str = BUNDLE_PATTERN) -> dict[str, str]:
    """
    Walk suite_root and return {build number: bundle path}.
    The build number is the bundle's parent folder name; a later bundle for the same
    build wins. Matched bundles are never descended into. Walk errors are skipped.
    """
    pattern = re.compile(bundle_pattern)
    build_to_path: dict[str, str] = {}

    def _skip(err: OSError) -> None:
        logger.debug("Skipping %s: %s", getattr(err, "filename", suite_root), err)

    for dirpath, dirnames, filenames in os.walk(suite_root, onerror=_skip):
        current = Path(dirpath)
        dirnames.sort()
        descend = []
        for name in dirnames:
            if pattern.fullmatch(name):
                build_to_path[current.name] = str(current / name)
            else:
                descend.append(name)
        dirnames[:] = descend
        for name in sorted(filenames):
            if pattern.fullmatch(name):
                build_to_path[current.name] = str(current / name)

    logger.info("Found %d installed build(s) under %s", len(build_to_path), suite_root)
    return build_to_path
