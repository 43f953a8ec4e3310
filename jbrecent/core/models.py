"""
Project records as they move through discovery.
ProjectRecord is what a recent-projects file says; ResolvedProject adds the IDE bundle that reopens it.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class ProjectIdentity:
    """Registry key: display name + owning application (IDE folder without version)."""

    name: str
    application: str


@dataclass(frozen=True)
class BuildDetails:
    build_number: str
    production_code: str


@dataclass(frozen=True)
class ProjectRecord:
    identity: ProjectIdentity
    path: str
    build_timestamp: int
    open_timestamp: int
    build: BuildDetails
    opened: bool = False
    frame_title: str = ""
    workspace_id: str = ""
    source: Optional[Path] = field(default=None, compare=False)

    @property
    def name(self) -> str:
        return self.identity.name

    @property
    def application(self) -> str:
        return self.identity.application

    def resolve(self, app_path: str) -> "ResolvedProject":
        return ResolvedProject(record=self, app_path=app_path, valid=bool(app_path))


@dataclass(frozen=True)
class ResolvedProject:
    """A record bound to the installed bundle that can open it."""

    record: ProjectRecord
    app_path: str
    valid: bool = True

    @property
    def identity(self) -> ProjectIdentity:
        return self.record.identity

    @property
    def name(self) -> str:
        return self.record.identity.name

    @property
    def application(self) -> str:
        return self.record.identity.application

    @property
    def path(self) -> str:
        return self.record.path

    @property
    def open_timestamp(self) -> int:
        return self.record.open_timestamp

    @property
    def opened(self) -> bool:
        return self.record.opened

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "application": self.application,
            "path": self.path,
            "app_path": self.app_path,
            "valid": self.valid,
            "opened": self.opened,
            "open_timestamp": self.open_timestamp,
            "build_timestamp": self.record.build_timestamp,
            "build_number": self.record.build.build_number,
            "production_code": self.record.build.production_code,
            "workspace_id": self.record.workspace_id,
        }
