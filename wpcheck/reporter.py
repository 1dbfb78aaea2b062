"""Compare installations against the latest version and format the results."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from wpcheck.schemas import Installation, ReportEntry, Status, VersionReport

logger = logging.getLogger(__name__)


def compare_version(installed_version: str, latest_version: str) -> Status:
    """Exact string comparison; an unknown installed version is never OK."""
    if installed_version and installed_version == latest_version:
        return Status.OK
    return Status.NOK


def build_report(latest_version: str, installations: Iterable[Installation]) -> VersionReport:
    """Assign a status to every installation, preserving order."""
    entries = [
        ReportEntry(
            installation=installation,
            status=compare_version(installation.installed_version, latest_version),
        )
        for installation in installations
    ]
    report = VersionReport(latest_version=latest_version, entries=entries)
    logger.info(f"Compared {report.total} installations: {report.ok_count} OK, {report.not_ok_count} NOK")
    return report


def format_health(health: float) -> str:
    """Round to one decimal place, dropping a trailing .0 (75, 66.7)."""
    return f"{round(health, 1):g}"


def format_installation(entry: ReportEntry) -> str:
    installation = entry.installation
    return f"{entry.status.value} : {installation.installation_root} ({installation.installed_version})"


def format_stats(report: VersionReport) -> str:
    """Build the summary line; the health segment is left out when nothing was checked."""
    line = (
        f"Stats: checked a total of {report.total} installations. "
        f"{report.ok_count} are OK."
        f"{report.not_ok_count} are not OK."
    )
    if report.health is not None:
        line += f"Health: {format_health(report.health)}%"
    return line


def render_report(report: VersionReport) -> list[str]:
    """All output lines for a report: one per installation, then the stats."""
    lines = [format_installation(entry) for entry in report.entries]
    lines.append(format_stats(report))
    return lines
