"""Text formatting helpers shared by the renderers."""

from __future__ import annotations

from datetime import datetime, timezone

from llmstxt.models import DocEntry


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as UTC ISO-8601 with milliseconds and a ``Z`` suffix.

    Naive datetimes are taken to be UTC already.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_entry(entry: DocEntry) -> str:
    line = f"- [{entry.title}]({entry.path})"
    if entry.description:
        line += f": {entry.description}"
    return line
