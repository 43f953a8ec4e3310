"""
Logging: level, file log, timestamp, per-record-file context (IDE + options folder).
Configure once with setup_logging(); use get_logger() / get_app_logger() everywhere.
"""
import logging
import os
from pathlib import Path
from typing import Optional

from .config import ENV_LOG_LEVEL, ENV_LOG_DIR

ROOT_NAME = "jbrecent"
LOG_FILE_NAME = "jbrecent.log"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_setup_done = False


class JBRecentFormatter(logging.Formatter):
    """Formatter with timestamp and optional record-file tag; safe when record has none."""

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None):
        fmt = fmt or "%(asctime)s [%(levelname)s] %(name)s%(record_file)s %(message)s"
        super().__init__(fmt=fmt, datefmt=datefmt or _DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        setattr(record, "record_file", getattr(record, "record_file", ""))
        return super().format(record)


class RecordFileAdapter(logging.LoggerAdapter):
    """
    Logger bound to one record file: tags lines with the owning IDE and the
    options folder it came from, e.g. [IntelliJIdea@IntelliJIdea2023.1/recentProjects.xml].
    Without a source only the IDE is shown.
    """

    def process(self, msg, kwargs):
        extra = kwargs.get("extra") or {}
        application = self.extra.get("application", "")
        source = self.extra.get("source")
        tag = application
        if source is not None:
            source = Path(source)
            folder = source.parent.parent.name if source.parent.name == "options" else source.parent.name
            tag = f"{application}@{folder}/{source.name}"
        extra["record_file"] = f" [{tag}]" if tag else ""
        kwargs["extra"] = extra
        return msg, kwargs


def _get_level_from_env() -> int:
    # Listing output goes to stdout; keep stderr quiet unless asked.
    raw = os.environ.get(ENV_LOG_LEVEL, "").strip().upper()
    level = getattr(logging, raw, None) if raw else None
    return level if isinstance(level, int) else logging.WARNING


def _ensure_log_dir(log_dir: Optional[Path]) -> Optional[Path]:
    if log_dir is None:
        log_dir = os.environ.get(ENV_LOG_DIR)
        if log_dir:
            log_dir = Path(log_dir)
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def setup_logging(
    level: Optional[int] = None,
    log_file: Optional[os.PathLike | str] = None,
    log_dir: Optional[os.PathLike | str] = None,
    format_string: Optional[str] = None,
    use_console: bool = True,
) -> None:
    """
    Configure jbrecent root logger: level, console handler, optional file handler.
    Idempotent; safe to call once at startup.
    """
    global _setup_done
    if _setup_done:
        return

    root = logging.getLogger(ROOT_NAME)
    if level is None:
        level = _get_level_from_env()
    root.setLevel(level)

    formatter = JBRecentFormatter(format_string)

    if use_console:
        console = logging.StreamHandler()
        console.setLevel(level)
        console.setFormatter(formatter)
        root.addHandler(console)

    if log_file is None:
        log_dir = _ensure_log_dir(Path(log_dir) if log_dir else None)
        if log_dir is not None:
            log_file = log_dir / LOG_FILE_NAME
    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(path, encoding="utf-8")
        fh.setLevel(level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    _setup_done = True


def reset_logging() -> None:
    """Drop handlers installed by setup_logging (e.g. for tests)."""
    global _setup_done
    root = logging.getLogger(ROOT_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    _setup_done = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under jbrecent.* (e.g. jbrecent.core.locator)."""
    if not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)


def get_app_logger(logger: logging.Logger, application: str, source=None):
    """
    Return an adapter that tags every log line with the owning application and,
    when given, the record file being read:
    get_app_logger(get_logger('record_parser'), 'IntelliJIdea', record_file.path).
    """
    if isinstance(logger, RecordFileAdapter):
        logger = logger.logger
    return RecordFileAdapter(logger, {"application": application, "source": source})
