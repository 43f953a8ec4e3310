"""Logging helpers: names, record-file tag, file handler."""
import logging

from jbrecent.core.logger import JBRecentFormatter, get_app_logger, get_logger, setup_logging


def test_get_logger_prefixes_root():
    assert get_logger("core.locator").name == "jbrecent.core.locator"
    assert get_logger("jbrecent.core.locator").name == "jbrecent.core.locator"


def test_record_file_tag_in_output(tmp_path):
    setup_logging(level=logging.INFO, log_dir=tmp_path, use_console=False)
    source = tmp_path / "JetBrains" / "IntelliJIdea2023.1" / "options" / "recentProjects.xml"
    get_app_logger(get_logger("record_parser"), "IntelliJIdea", source).info("parsed %d", 3)
    get_app_logger(get_logger("record_parser"), "GoLand").info("no file")
    get_logger("record_parser").info("untagged")
    for handler in logging.getLogger("jbrecent").handlers:
        handler.flush()

    lines = (tmp_path / "jbrecent.log").read_text(encoding="utf-8").splitlines()
    assert lines[0].endswith("jbrecent.record_parser [IntelliJIdea@IntelliJIdea2023.1/recentProjects.xml] parsed 3")
    assert lines[1].endswith("jbrecent.record_parser [GoLand] no file")
    assert lines[2].endswith("jbrecent.record_parser untagged")


def test_adapter_does_not_nest():
    base = get_logger("x")
    outer = get_app_logger(get_app_logger(base, "GoLand"), "Rider")
    assert outer.logger is base
    assert outer.extra == {"application": "Rider", "source": None}


def test_formatter_without_record_file():
    record = logging.LogRecord("jbrecent.t", logging.INFO, __file__, 1, "hello", None, None)
    assert JBRecentFormatter("%(name)s%(record_file)s %(message)s").format(record) == "jbrecent.t hello"
