"""
Pytest configuration and shared fixtures.

Fixtures build throwaway JetBrains trees under tmp_path:
  <root>/IntelliJIdea2023.1/options/recentProjects.xml   (record files)
  <root>/Toolbox/apps/IDEA-U/ch-0/233.11799.241/IntelliJ IDEA.app   (installed bundles)
"""
from pathlib import Path
from xml.sax.saxutils import quoteattr

import pytest

from jbrecent.config import reset_config
from jbrecent.core.logger import reset_logging


@pytest.fixture(autouse=True)
def _clean_state(monkeypatch):
    for name in (
        "JBRECENT_CONFIG",
        "JBRECENT_LOG_LEVEL",
        "JBRECENT_LOG_DIR",
        "JBRECENT_PROJECTS_ROOT",
        "JBRECENT_TOOLBOX_ROOT",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_logging()
    yield
    reset_config()
    reset_logging()


def _meta_xml(title, opened, options):
    opts = "".join(
        f"<option name={quoteattr(k)} value={quoteattr(str(v))} />" for k, v in options.items()
    )
    return (
        f"<RecentProjectMetaInfo frameTitle={quoteattr(title)} opened={quoteattr(opened)}>"
        f"{opts}</RecentProjectMetaInfo>"
    )


def record_xml(projects) -> str:
    """
    Build a recentProjects.xml document.
    projects: list of dicts with path, title, and optional opened, build, code,
    open_ts, build_ts (ms). A dict with "values" (list of such dicts) produces
    one entry with several values.
    """
    entries = []
    for p in projects:
        values = p.get("values") or [p]
        value_xml = ""
        for v in values:
            options = {}
            if "build_ts" in v:
                options["buildTimestamp"] = v["build_ts"]
            if "open_ts" in v:
                options["projectOpenTimestamp"] = v["open_ts"]
            if "build" in v:
                options["build"] = v["build"]
            if "code" in v:
                options["productionCode"] = v["code"]
            value_xml += f"<value>{_meta_xml(v.get('title', ''), v.get('opened', 'false'), options)}</value>"
        entries.append(f"<entry key={quoteattr(p['path'])}>{value_xml}</entry>")
    return (
        '<application>\n'
        '  <component name="RecentProjectsManager">\n'
        '    <option name="additionalInfo"><map>'
        + "".join(entries)
        + '</map></option>\n'
        '    <option name="lastOpenedProject" value="$USER_HOME$/last" />\n'
        '  </component>\n'
        '</application>\n'
    )


class JetBrainsTree:
    """A fake ~/Library/Application Support/JetBrains."""

    def __init__(self, root: Path):
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)

    @property
    def toolbox(self) -> Path:
        return self.root / "Toolbox"

    def add_toolbox(self) -> Path:
        self.toolbox.mkdir(parents=True, exist_ok=True)
        return self.toolbox

    def add_record(self, folder: str, projects, file_name: str = "recentProjects.xml") -> Path:
        path = self.root / folder / "options" / file_name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(record_xml(projects), encoding="utf-8")
        return path

    def add_bundle(self, product: str, build: str, bundle: str, channel: str = "ch-0") -> Path:
        path = self.toolbox / "apps" / product / channel / build / bundle
        (path / "Contents").mkdir(parents=True, exist_ok=True)
        return path


@pytest.fixture
def jetbrains_tree(tmp_path) -> JetBrainsTree:
    return JetBrainsTree(tmp_path / "JetBrains")


@pytest.fixture
def make_record_xml():
    return record_xml
