"""
Deduplicated, recency-ordered set of resolved projects.
One project per identity survives: the one opened most recently.
"""
from typing import Iterable, Iterator

from .exceptions import ProjectNotFoundError, RegistryError
from .models import ProjectIdentity, ResolvedProject


class ProjectRegistry:
    """
    ingest() any number of times, finalize() once, then list/filter/lookup.
    With merge_applications=True the identity ignores the owning application,
    so a project opened from several IDEs is kept once.
    """

    def __init__(self, merge_applications: bool = False):
        self.merge_applications = merge_applications
        self._projects: dict[ProjectIdentity, ResolvedProject] = {}
        self._ordered: list[ResolvedProject] | None = None

    def _key(self, name: str, application: str) -> ProjectIdentity:
        return ProjectIdentity(name=name, application="" if self.merge_applications else application)

    def ingest(self, projects: Iterable[ResolvedProject]) -> None:
        for project in projects:
            if not project.valid:
                continue
            key = self._key(project.name, project.application)
            existing = self._projects.get(key)
            if existing is None or existing.open_timestamp < project.open_timestamp:
                self._projects[key] = project
                self._ordered = None

    def finalize(self) -> None:
        """Order by last open, newest first. Ties keep ingestion order."""
        self._ordered = sorted(self._projects.values(), key=lambda p: p.open_timestamp, reverse=True)

    @property
    def finalized(self) -> bool:
        return self._ordered is not None

    def list_projects(self) -> list[ResolvedProject]:
        if self._ordered is None:
            raise RegistryError("Registry not finalized; call finalize() after ingest()")
        return list(self._ordered)

    def filter_projects(self, query: str) -> list[ResolvedProject]:
        """Case-insensitive substring match on display name, order preserved."""
        needle = query.lower()
        return [p for p in self.list_projects() if needle in p.name.lower()]

    def lookup(self, name: str, application: str = "") -> ResolvedProject:
        try:
            return self._projects[self._key(name, application)]
        except KeyError:
            raise ProjectNotFoundError(f"Project {name} ({application}) not found") from None

    def __len__(self) -> int:
        return len(self._projects)

    def __iter__(self) -> Iterator[ResolvedProject]:
        return iter(self.list_projects())
