"""
Turn one recentProjects.xml / recentSolutions.xml into ProjectRecords.

Document shape (decoded via xml_schema):
application > component > option[name=additionalInfo] > map > entry[key=<path>]
  > value > RecentProjectMetaInfo[frameTitle, opened] > option[name, value]
One ProjectRecord per entry/value pair, in document order.
"""
import re
from pathlib import Path, PurePath
from typing import Optional

from .config import PRODUCT_CODES, RECENT_INFO_OPTION, USER_HOME_PLACEHOLDER
from .exceptions import ScanIOError
from .locator import RecordFile
from .logger import get_app_logger, get_logger
from .models import BuildDetails, ProjectIdentity, ProjectRecord
from .xml_schema import Application, decode_document

logger = get_logger(__name__)

# "myrepo – src/main.go" -> "myrepo" (U+2013 EN DASH, as the IDE writes frame titles)
TITLE_SEPARATOR = "–"
_TITLE_SUFFIX = re.compile(r"\s" + TITLE_SEPARATOR + r"\s.*", re.DOTALL)
_DOTTED_PATH = re.compile(r".*/\..*")
_INTEGER = re.compile(r"[+-]?\d+")


def strip_title_suffix(title: str) -> str:
    """Drop the ' – <file>' part of a frame title and trim."""
    return _TITLE_SUFFIX.sub("", title).strip()


def derive_display_name(title: str, path: str = "") -> str:
    """
    Display name for a project.
    Frame title without its suffix; a title that is only a dotted path collapses,
    and an empty result falls back to the last segment of the project path.
    """
    name = strip_title_suffix(title)
    if not name:
        name = _DOTTED_PATH.sub("", title).strip()
    if not name and path:
        name = PurePath(path.rstrip("/\\")).name
    return name


def parse_timestamp(raw: str) -> int:
    """Milliseconds string -> whole seconds. Anything unparsable is 0."""
    raw = (raw or "").strip()
    if not _INTEGER.fullmatch(raw):
        return 0
    ms = int(raw)
    # truncate toward zero like the IDE's own int division
    return ms // 1000 if ms >= 0 else -(-ms // 1000)


def parse_build_number(build: str, production_code: str) -> str:
    """'IU-233.11799.241' with code 'IU' -> '233.11799.241'."""
    prefix = f"{production_code}-"
    if production_code and build.startswith(prefix):
        return build[len(prefix):]
    return build


def parse_record_bytes(
    data: bytes,
    application: str,
    home_dir: str,
    source: Optional[Path] = None,
) -> list[ProjectRecord]:
    """Decode a record file's bytes. MalformedRecordError on bad XML or wrong root."""
    log = get_app_logger(logger, application, source)
    document = decode_document(data, Application, source=source or "<bytes>")
    option = document.component.option(RECENT_INFO_OPTION)
    if option is None:
        log.debug("No %s option in %s", RECENT_INFO_OPTION, source)
        return []

    records: list[ProjectRecord] = []
    for entry in option.map.entries:
        path = entry.key.replace(USER_HOME_PLACEHOLDER, home_dir)
        for value in entry.values:
            meta = value.meta
            production_code = meta.options.find("productionCode")
            if production_code and production_code not in PRODUCT_CODES:
                log.debug("Unknown production code %s for %s", production_code, path)
            records.append(
                ProjectRecord(
                    identity=ProjectIdentity(
                        name=derive_display_name(meta.frame_title, path),
                        application=application,
                    ),
                    path=path,
                    build_timestamp=parse_timestamp(meta.options.find("buildTimestamp")),
                    open_timestamp=parse_timestamp(meta.options.find("projectOpenTimestamp")),
                    build=BuildDetails(
                        build_number=parse_build_number(meta.options.find("build"), production_code),
                        production_code=production_code,
                    ),
                    opened=meta.opened.lower() == "true",
                    frame_title=meta.frame_title,
                    workspace_id=meta.workspace_id,
                    source=source,
                )
            )
    log.debug("Parsed %d record(s) from %s", len(records), source)
    return records


def read_record_file(record_file: RecordFile, home_dir: str) -> list[ProjectRecord]:
    """Read and parse one located file. ScanIOError if it cannot be read."""
    try:
        data = Path(record_file.path).read_bytes()
    except OSError as e:
        raise ScanIOError(f"Cannot read {record_file.path}: {e}") from e
    get_app_logger(logger, record_file.application, record_file.path).info("Record file %s opened", record_file.path)
    return parse_record_bytes(data, record_file.application, home_dir, source=record_file.path)
