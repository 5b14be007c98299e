#!/usr/bin/env python3
"""
export.py
-------------------
Write parsed timelines to JSON or YAML.

Each ``.mw`` timeline becomes one document file:

    timelines/
    ├── roadmap.mw        ->   out/roadmap.json
    └── 2024/
        └── roadmap.mw    ->   out/2024/roadmap.json

Moments serialize as ISO-8601 strings, with the NOW sentinel written as
``"now"``. Events use the markup's own ``from``/``to`` keys.

Programmatic API:
    from markwhen.pipeline.export import convert_file, convert_directory
    stats = convert_file(input_path, output_dir, fmt, force_overwrite, logger)
    stats = convert_directory(input_dir, output_dir, fmt, force_overwrite, logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

# --- Third-party imports ---
import yaml

# --- Local imports ---
from markwhen.core.cli import ConversionStats
from markwhen.core.exceptions import ExportError, ParseError
from markwhen.core.logging_manager import MarkwhenLogger, safe_logger
from markwhen.core.paths import TIMELINE_SUFFIXES
from markwhen.dataclasses.timeline import Collection, Document, Event, Page
from markwhen.parser.builder import parse_file


EXPORT_FORMATS = {"json": ".json", "yaml": ".yaml"}


# --- Serialization ---
def event_to_dict(event: Event) -> Dict[str, Any]:
    return {
        "from": event.start.isoformat(),
        "to": event.end.isoformat(),
        "body": event.body,
    }


def collection_to_dict(collection: Collection) -> Dict[str, Any]:
    return {
        "kind": collection.kind.value,
        "collapsed": collection.collapsed,
        "title": collection.title,
        "events": [event_to_dict(e) for e in collection.events],
    }


def page_to_dict(page: Page) -> Dict[str, Any]:
    return {
        "header": {
            "title": page.header.title,
            "description": page.header.description,
            "dateFormat": page.header.date_format.value,
        },
        "collections": [collection_to_dict(c) for c in page.collections],
    }


def document_to_dict(document: Document) -> Dict[str, Any]:
    """Convert a Document into plain dicts and lists."""
    return {
        "pages": [page_to_dict(p) for p in document.pages],
        "tags": dict(document.tags),
    }


def dump_document(document: Document, fmt: str = "json") -> str:
    """
    Serialize a Document to text.

    Args:
        document: Parsed document
        fmt: 'json' or 'yaml'

    Raises:
        ExportError: If the format is not supported
    """
    data = document_to_dict(document)
    if fmt == "json":
        return json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(
            data,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
    raise ExportError(f"Unsupported export format: {fmt}")


# --- Conversion ---
def convert_file(
    input_path: Path,
    output_dir: Path,
    fmt: str = "json",
    force_overwrite: bool = False,
    logger: Optional[MarkwhenLogger] = None,
) -> ConversionStats:
    """
    Parse one timeline file and write its document next to the others.

    Processing Flow:
    1. Validates input file and format
    2. Parses the file (fails fast on the first invalid line)
    3. Skips writing if the output exists and not force_overwrite
    4. Writes the serialized document as UTF-8

    Args:
        input_path: Timeline file (e.g., roadmap.mw)
        output_dir: Directory for the exported document
        fmt: 'json' or 'yaml'
        force_overwrite: If True, overwrite an existing output file
        logger: Optional logger for operation tracking

    Returns:
        ConversionStats with document counts

    Raises:
        ExportError: If the input is missing, the format unsupported, or
            the output cannot be written
        ParseError: If the timeline is invalid
    """
    stats = ConversionStats()

    if not input_path.exists():
        raise ExportError(f"Input file not found: {input_path}")
    if fmt not in EXPORT_FORMATS:
        raise ExportError(f"Unsupported export format: {fmt}")

    safe_logger(logger).log_operation(
        "convert_file_start",
        {"input": str(input_path), "output": str(output_dir), "format": fmt},
    )

    try:
        document = parse_file(input_path)
    except ParseError as e:
        safe_logger(logger).log_error(e, {"operation": "parse_file", "file": str(input_path)})
        raise
    except (OSError, UnicodeDecodeError) as e:
        raise ExportError(f"Cannot read {input_path}: {e}") from e

    stats.record_document(document)

    output_path = output_dir / f"{input_path.stem}{EXPORT_FORMATS[fmt]}"
    if output_path.exists() and not force_overwrite:
        safe_logger(logger).log_debug(f"{output_path.name} exists, skipping")
        stats.files_skipped += 1
        return stats

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path.write_text(dump_document(document, fmt), encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Failed to write {output_path}: {e}") from e

    stats.files_written += 1
    safe_logger(logger).log_operation("convert_file_complete", {"stats": stats.summary()})
    return stats


def find_timeline_files(input_dir: Path) -> List[Path]:
    """Timeline files under ``input_dir``, sorted by path."""
    return sorted(
        p for p in input_dir.rglob("*") if p.is_file() and p.suffix in TIMELINE_SUFFIXES
    )


def convert_directory(
    input_dir: Path,
    output_dir: Path,
    fmt: str = "json",
    force_overwrite: bool = False,
    logger: Optional[MarkwhenLogger] = None,
) -> ConversionStats:
    """
    Convert every timeline file in a directory.

    Subdirectories of ``input_dir`` are mirrored under ``output_dir``, so
    timelines sharing a name in different folders never share an output
    path. A file that fails to parse is counted in ``errors`` and does not
    stop the remaining files.

    Raises:
        ExportError: If directory not found
    """
    total_stats = ConversionStats()

    if not input_dir.is_dir():
        raise ExportError(f"Input directory not found: {input_dir}")

    timeline_files = find_timeline_files(input_dir)
    if not timeline_files:
        safe_logger(logger).log_info(f"No timeline files found in {input_dir}")
        return total_stats

    safe_logger(logger).log_operation(
        "convert_directory_start",
        {"input": str(input_dir), "files_found": len(timeline_files)},
    )

    for timeline_file in timeline_files:
        try:
            safe_logger(logger).log_info(f"Processing {timeline_file.name}")
            target_dir = output_dir / timeline_file.parent.relative_to(input_dir)
            stats = convert_file(timeline_file, target_dir, fmt, force_overwrite, logger)
            total_stats.merge(stats)
        except (ParseError, ExportError) as e:
            total_stats.errors += 1
            safe_logger(logger).log_error(
                e, {"operation": "convert_file", "file": str(timeline_file)}
            )

    safe_logger(logger).log_operation(
        "convert_directory_complete", {"stats": total_stats.summary()}
    )
    return total_stats
