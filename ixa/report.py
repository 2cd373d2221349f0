"""CSV report output keyed by report type.

Each report type is registered once with a short name and written to
``<output_dir>/<file_prefix><short_name>.csv``. Rows are sent as dataclass
instances (or as raw rows for reports registered by key with explicit
columns).
"""

from __future__ import annotations

import csv
import dataclasses
import enum
import logging
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TextIO

logger = logging.getLogger(__name__)


class ReportError(RuntimeError):
    """Raised when a report is written to before it has been added."""


def serialize_float(value: float, digits: int) -> str:
    """Format ``value`` with exactly ``digits`` digits after the decimal point."""
    return f"{value:.{digits}f}"


def _format_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, enum.Enum):
        return value.name
    return str(value)


@dataclass
class ConfigReportOptions:
    """Where report files go and how existing files are treated."""

    file_prefix: str = ""
    output_dir: Path = field(default_factory=Path.cwd)
    overwrite: bool = False

    def file_prefix_as(self, file_prefix: str) -> ConfigReportOptions:
        """Set the text placed before each report's name in its file name."""
        logger.debug("setting report prefix to %s", file_prefix)
        self.file_prefix = file_prefix
        return self

    def directory(self, directory: str | Path) -> ConfigReportOptions:
        """Set the directory reports are written to."""
        logger.debug("setting report directory to %s", directory)
        self.output_dir = Path(directory)
        return self

    def overwrite_existing(self, overwrite: bool) -> ConfigReportOptions:
        """Set whether existing report files of the same name are replaced."""
        logger.debug("setting report overwrite %s", overwrite)
        self.overwrite = overwrite
        return self


@dataclass
class _ReportFile:
    handle: TextIO
    writer: Any
    pending_header: list[str] | None = None


class ReportWriter:
    """Owns the open report files and writes rows to them."""

    def __init__(self, options: ConfigReportOptions | None = None) -> None:
        self._options = options if options is not None else ConfigReportOptions()
        self._files: dict[Hashable, _ReportFile] = {}

    def __enter__(self) -> ReportWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def report_options(self) -> ConfigReportOptions:
        """The options object, whose setters can be chained."""
        return self._options

    def generate_filename(self, short_name: str) -> Path:
        """The path a report named ``short_name`` is written to."""
        basename = f"{self._options.file_prefix}{short_name}"
        return (self._options.output_dir / basename).with_suffix(".csv")

    def add_report_by_key(
        self,
        key: Hashable,
        short_name: str,
        columns: Iterable[str] | None = None,
    ) -> None:
        """Create the file for report ``key``; write ``columns`` as its header if given.

        Raises FileExistsError if the file exists and overwriting is off.
        """
        logger.debug("adding report %s by key %r", short_name, key)
        path = self.generate_filename(short_name)
        try:
            handle = open(path, "x", newline="", encoding="utf-8")
        except FileExistsError:
            if not self._options.overwrite:
                logger.error(
                    "File already exists: %s. Please set `overwrite` to true in "
                    "the file configuration and rerun.",
                    path,
                )
                raise
            handle = open(path, "w", newline="", encoding="utf-8")
        previous = self._files.pop(key, None)
        if previous is not None:
            previous.handle.close()
        report = _ReportFile(handle, csv.writer(handle, lineterminator="\n"))
        self._files[key] = report
        if columns is not None:
            report.writer.writerow(list(columns))
            handle.flush()

    def add_report(self, report_type: type, short_name: str) -> None:
        """Register a dataclass report type; its field names form the header."""
        if not (isinstance(report_type, type) and dataclasses.is_dataclass(report_type)):
            raise TypeError(f"{report_type!r} is not a dataclass type")
        logger.debug("Adding report %s", short_name)
        self.add_report_by_key(report_type, short_name)
        self._files[report_type].pending_header = [
            f.name for f in dataclasses.fields(report_type)
        ]

    def _report_file(self, key: Hashable) -> _ReportFile:
        try:
            return self._files[key]
        except KeyError:
            raise ReportError("No writer found for the report type") from None

    def write_row(self, key: Hashable, row: Sequence[Any]) -> None:
        """Append ``row`` to the report registered under ``key``."""
        report = self._report_file(key)
        if report.pending_header is not None:
            report.writer.writerow(report.pending_header)
            report.pending_header = None
        report.writer.writerow([_format_value(v) for v in row])
        report.handle.flush()

    def send_report(self, report: Any) -> None:
        """Write a dataclass instance as a row of its type's report."""
        if not dataclasses.is_dataclass(report) or isinstance(report, type):
            raise TypeError(f"{report!r} is not a dataclass instance")
        values = [getattr(report, f.name) for f in dataclasses.fields(report)]
        self.write_row(type(report), values)

    def close(self) -> None:
        """Flush and close every report file."""
        for report in self._files.values():
            report.handle.close()
        self._files.clear()