"""Task export serializers (CSV and XML).

Both serializers write to a text sink one task at a time, so the caller decides
whether the sink is an in-memory buffer, a file or a response stream.
"""

from __future__ import annotations

import csv
from enum import Enum
from typing import Callable, Iterable, TextIO
from xml.sax.saxutils import XMLGenerator

from taskboard.application.services.task_fields import TASK_FIELDS
from taskboard.domain.entities.task import TaskEntity
from taskboard.domain.exceptions import UnsupportedFormatException

# CSV column order. No header row is written.
CSV_COLUMNS = ("id", "assignedTo", "description", "severity", "status", "title")

# Child elements of <task>, in document order. id is an attribute.
XML_ELEMENTS = ("title", "description", "assignedTo", "status", "severity")


class ExportFormat(str, Enum):
    """Supported export formats with their download metadata."""

    CSV = "csv"
    XML = "xml"

    @classmethod
    def parse(cls, raw: str) -> "ExportFormat":
        """Resolve a format token (case-insensitive).

        Raises:
            UnsupportedFormatException: For anything other than csv or xml.
        """
        try:
            return cls(raw.strip().lower())
        except ValueError as e:
            raise UnsupportedFormatException(raw, [f.value for f in cls]) from e

    @property
    def media_type(self) -> str:
        return f"application/{self.value}"

    @property
    def filename(self) -> str:
        return f"Tasks.{self.value}"


def write_tasks_csv(tasks: Iterable[TaskEntity], sink: TextIO) -> None:
    """Write one CSV record per task (no header). Empty input writes nothing."""
    writer = csv.writer(sink)
    for task in tasks:
        writer.writerow([TASK_FIELDS[name].serialize(task) for name in CSV_COLUMNS])


def write_tasks_xml(tasks: Iterable[TaskEntity], sink: TextIO) -> None:
    """Write a <tasks> document with one <task id="..."> per task.

    Text and attribute values are escaped by the generator. Empty input
    writes an empty root element.
    """
    xml = XMLGenerator(sink, encoding="utf-8")
    xml.startDocument()
    xml.startElement("tasks", {})
    for task in tasks:
        xml.startElement("task", {"id": task.id})
        for name in XML_ELEMENTS:
            xml.startElement(name, {})
            xml.characters(TASK_FIELDS[name].serialize(task))
            xml.endElement(name)
        xml.endElement("task")
    xml.endElement("tasks")
    xml.endDocument()


SERIALIZERS: dict[ExportFormat, Callable[[Iterable[TaskEntity], TextIO], None]] = {
    ExportFormat.CSV: write_tasks_csv,
    ExportFormat.XML: write_tasks_xml,
}
