"""
conftest.py
-----------
Shared pytest fixtures for markwhen tests.

Provides fixtures for:
- Sample timeline files
- Inline timeline snippets
- Temporary directories
"""
import pytest
from datetime import datetime, timezone
from pathlib import Path
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def test_data_dir():
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def timelines_dir(test_data_dir):
    """Path to sample .mw timeline files."""
    return test_data_dir / "timelines"


@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Helpers -----

@pytest.fixture
def utc():
    """Build UTC datetimes the way the date resolver produces them."""
    def _utc(year, month, day):
        return datetime(year, month, day, tzinfo=timezone.utc)
    return _utc


# ----- Sample Timeline Content Fixtures -----

@pytest.fixture
def eu_timeline_text():
    """European-format timeline from the Markwhen documentation."""
    return """// To indicate we are using European date formatting
dateFormat: d/M/y

// 2 weeks
01/01/2023 - 14/01/2023: Phase 1 #Exploratory

// Another 2 weeks
15/01/2023 - 31/01/2023: Phase 2 #Implementation

// 3 days, after a one week buffer
07/03/2023 - 10/03/2023: Phase 4 - kickoff! #Launch
"""


@pytest.fixture
def two_page_titles_text():
    """Two pages that only set titles."""
    return """title: This is a title for page 1
_-_-_break_-_-_
title: This is a title for page 2"""
