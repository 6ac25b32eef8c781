"""
Shared test fixtures.
"""

import sys
from pathlib import Path

# Add project root to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

import pytest

from services.notification_service import LoggingNotifier
from services.submission_repository import (
    InMemorySubmissionRepository,
    JsonFileSubmissionRepository,
)
from services.wizard_service import PlanWizard
from tests.factories import PlanFactory

# ===================
# MOCK SUPABASE CLIENT
# ===================

class MockSupabaseResponse:
    """Mock Supabase query response."""
    
    def __init__(self, data: list = None):
        self.data = data or []
        self.count = len(self.data)


class MockSupabaseQuery:
    """Mock Supabase query builder with chainable methods."""
    
    def __init__(self, table: "MockSupabaseTable", data: list = None):
        self._table = table
        self._data = data or []
    
    def select(self, *args, **kwargs):
        return self
    
    def order(self, column, **kwargs):
        self._data = sorted(self._data, key=lambda row: row.get(column) or "")
        return self
    
    def limit(self, count):
        self._data = self._data[:count]
        return self
    
    def execute(self) -> MockSupabaseResponse:
        if self._table.error:
            raise self._table.error
        return MockSupabaseResponse(data=list(self._data))


class MockSupabaseInsert:
    """Pending insert; rows are stored on execute()."""

    def __init__(self, table: "MockSupabaseTable", rows: list):
        self._table = table
        self._rows = rows

    def execute(self) -> MockSupabaseResponse:
        if self._table.error:
            raise self._table.error
        self._table.rows.extend(self._rows)
        return MockSupabaseResponse(data=self._rows)


class MockSupabaseTable:
    """Mock Supabase table backed by a list of rows."""
    
    def __init__(self):
        self.rows: list = []
        self.error = None
    
    def select(self, *args, **kwargs):
        return MockSupabaseQuery(self, [dict(row) for row in self.rows])
    
    def insert(self, data):
        rows = [data] if isinstance(data, dict) else list(data)
        return MockSupabaseInsert(self, rows)


class MockSupabaseClient:
    """Mock Supabase client."""
    
    def __init__(self):
        self._tables = {}
    
    def set_table_data(self, table_name: str, data: list):
        """Configure existing rows for a table."""
        self.table(table_name).rows = list(data)

    def fail_table(self, table_name: str, error: Exception):
        """Make every query on a table raise `error`."""
        self.table(table_name).error = error
    
    def table(self, name: str) -> MockSupabaseTable:
        if name not in self._tables:
            self._tables[name] = MockSupabaseTable()
        return self._tables[name]


# ===================
# FIXTURES
# ===================

@pytest.fixture
def mock_supabase() -> MockSupabaseClient:
    """
    Create a mock Supabase client.
    
    Usage:
        def test_something(mock_supabase):
            mock_supabase.set_table_data("production_plan_submissions", [...])
    """
    return MockSupabaseClient()


@pytest.fixture
def memory_repository() -> InMemorySubmissionRepository:
    return InMemorySubmissionRepository()


@pytest.fixture
def file_repository(tmp_path) -> JsonFileSubmissionRepository:
    """JSON blob repository in a temporary directory."""
    return JsonFileSubmissionRepository(tmp_path / "productionFormSubmissions.json")


@pytest.fixture
def notifier() -> LoggingNotifier:
    return LoggingNotifier()


@pytest.fixture
def wizard(memory_repository, notifier) -> PlanWizard:
    """Fresh wizard session on an in-memory store."""
    return PlanWizard(repository=memory_repository, notifier=notifier)


@pytest.fixture
def valid_plan():
    """
    Plan that passes all three steps.

    Order of 100, one Cotton fabric taking all of it, domestic sourcing.
    """
    return PlanFactory.create_valid()
