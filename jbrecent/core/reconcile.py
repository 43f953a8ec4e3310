"""
Bind parsed records to installed bundles.
EAP and patched builds often have no folder of their own; any installed
copy of the same IDE family can reopen the project instead.
"""
from collections import defaultdict

from .logger import get_logger
from .models import ProjectRecord, ResolvedProject

logger = get_logger(__name__)


def resolve_records(records: list[ProjectRecord], build_to_path: dict[str, str]) -> list[ResolvedProject]:
    """
    Resolve by exact build number first, then by production code.
    A production-code fallback picks the lexicographically smallest bundle path;
    records with neither are dropped.
    """
    resolved: list[ResolvedProject] = []
    pending: list[ProjectRecord] = []
    paths_by_code: dict[str, list[str]] = defaultdict(list)

    for record in records:
        app_path = build_to_path.get(record.build.build_number)
        if app_path:
            resolved.append(record.resolve(app_path))
            paths_by_code[record.build.production_code].append(app_path)
        else:
            pending.append(record)

    for record in pending:
        candidates = paths_by_code.get(record.build.production_code)
        if not candidates:
            logger.debug(
                "No installed build for %s (%s %s)",
                record.name, record.build.production_code, record.build.build_number,
            )
            continue
        resolved.append(record.resolve(min(candidates)))

    return resolved
