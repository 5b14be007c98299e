#!/usr/bin/env python3
"""
cli.py
------
Shared CLI utilities and statistics for markwhen commands.

Functions:
    setup_logger: Initialize MarkwhenLogger for CLI operations

Classes:
    ConversionStats: Counters for parse and export runs

Usage:
    from markwhen.core.cli import setup_logger, ConversionStats

    logger = setup_logger(log_dir, "convert")
    stats = ConversionStats()
    stats.record_document(document)
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

# --- Local imports ---
from markwhen.core.logging_manager import MarkwhenLogger

if TYPE_CHECKING:
    from markwhen.dataclasses.timeline import Document


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> MarkwhenLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a MarkwhenLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'convert')

    Returns:
        Configured MarkwhenLogger instance
    """
    operations_log_dir = log_dir / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return MarkwhenLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class ConversionStats:
    """
    Statistics for parse and export operations.

    Attributes:
        files_processed: Timeline files parsed successfully
        files_written: Export files written
        files_skipped: Export files left untouched (already exist)
        pages: Pages parsed across all files
        collections: Collections parsed across all files
        events: Events parsed across all files
        tags: Tag definitions in the resulting registries
        errors: Number of files that failed
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    files_written: int = 0
    files_skipped: int = 0
    pages: int = 0
    collections: int = 0
    events: int = 0
    tags: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        for name in (
            "files_processed",
            "files_written",
            "files_skipped",
            "pages",
            "collections",
            "events",
            "tags",
            "errors",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def record_document(self, document: Document) -> None:
        """Add the counts of one parsed document."""
        self.files_processed += 1
        self.pages += len(document.pages)
        for page in document.pages:
            self.collections += len(page.collections)
            self.events += sum(len(c.events) for c in page.collections)
        self.tags += len(document.tags)

    def merge(self, other: ConversionStats) -> None:
        """Fold another run's counters into this one."""
        self.files_processed += other.files_processed
        self.files_written += other.files_written
        self.files_skipped += other.files_skipped
        self.pages += other.pages
        self.collections += other.collections
        self.events += other.events
        self.tags += other.tags
        self.errors += other.errors

    def duration(self) -> float:
        """Get elapsed time in seconds (cached after first call)."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        """Get formatted summary string."""
        parts = [
            f"{self.files_processed} files processed",
            f"{self.pages} pages",
            f"{self.collections} collections",
            f"{self.events} events",
            f"{self.tags} tags",
        ]
        if self.files_written or self.files_skipped:
            parts.append(f"{self.files_written} written")
            parts.append(f"{self.files_skipped} skipped")
        parts.append(f"{self.errors} errors")
        parts.append(f"{self.duration():.2f}s")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "files_processed": self.files_processed,
            "files_written": self.files_written,
            "files_skipped": self.files_skipped,
            "pages": self.pages,
            "collections": self.collections,
            "events": self.events,
            "tags": self.tags,
            "errors": self.errors,
            "duration": self.duration(),
        }
