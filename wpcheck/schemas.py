"""Pydantic models for installations and version reports."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field

from wpcheck.config import WP_VERSION_SUFFIX


class Status(str, Enum):
    """Comparison outcome for one installation."""

    OK = "OK"
    NOK = "NOK"


class Installation(BaseModel):
    """One discovered installation, identified by its marker file."""

    marker_file_path: str
    installed_version: str = ""
    marker_suffix: str = Field(default=WP_VERSION_SUFFIX, exclude=True)

    @computed_field
    @property
    def installation_root(self) -> str:
        """Marker file path with the marker suffix chopped off."""
        if self.marker_file_path.endswith(self.marker_suffix):
            return self.marker_file_path[: -len(self.marker_suffix)]
        return self.marker_file_path


class ReportEntry(BaseModel):
    """An installation together with its comparison status."""

    installation: Installation
    status: Status


class VersionReport(BaseModel):
    """Outcome of comparing every installation against the latest version."""

    latest_version: str
    entries: list[ReportEntry] = Field(default_factory=list)

    @computed_field
    @property
    def total(self) -> int:
        return len(self.entries)

    @computed_field
    @property
    def ok_count(self) -> int:
        return sum(1 for entry in self.entries if entry.status == Status.OK)

    @computed_field
    @property
    def not_ok_count(self) -> int:
        return sum(1 for entry in self.entries if entry.status == Status.NOK)

    @computed_field
    @property
    def health(self) -> float | None:
        """Percentage of OK installations, or None when nothing was checked."""
        if not self.entries:
            return None
        return self.ok_count * 100 / self.total
