"""Shared pytest fixtures for budgetkit tests."""

import tempfile
import os
from datetime import datetime
from decimal import Decimal

import pytest
from dateutil import tz

from budgetkit.database.factories import create_sqlite_database
from budgetkit.domain.alerts import SpendingAlertService
from budgetkit.domain.category import CategoryService
from budgetkit.domain.entities import TransactionType
from budgetkit.domain.goals import SavingsGoalService
from budgetkit.domain.reports import ReportService
from budgetkit.domain.scope import ScopeService
from budgetkit.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def zone():
    """Reporting timezone used by service tests."""
    return tz.UTC


@pytest.fixture
def scope_service(temp_db):
    return ScopeService(temp_db)


@pytest.fixture
def category_service(temp_db):
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    return TransactionService(temp_db)


@pytest.fixture
def alert_service(temp_db, zone):
    return SpendingAlertService(temp_db, timezone=zone)


@pytest.fixture
def goal_service(temp_db):
    return SavingsGoalService(temp_db)


@pytest.fixture
def report_service(temp_db, zone):
    return ReportService(temp_db, timezone=zone)


@pytest.fixture
def sample_scope(scope_service):
    """Create a sample user scope."""
    scope_id = scope_service.create_scope(name="Alex")
    return scope_service.get_scope(scope_id)


@pytest.fixture
def sample_categories(category_service, sample_scope):
    """Create a few categories in the sample scope and return name -> ID."""
    return {
        "Groceries": category_service.create_category(sample_scope.id, "Groceries"),
        "Restaurants": category_service.create_category(sample_scope.id, "Restaurants"),
        "Salary": category_service.create_category(
            sample_scope.id, "Salary", TransactionType.INCOME
        ),
    }


@pytest.fixture
def add_transaction(transaction_service, sample_scope, sample_categories, zone):
    """Return a helper that records a transaction in the sample scope."""

    def _add(amount, category="Groceries", when=None, transaction_type=TransactionType.EXPENSE,
             description="Test transaction"):
        if when is None:
            when = datetime(2024, 3, 15, 12, 0, tzinfo=zone)
        return transaction_service.create_transaction(
            scope_id=sample_scope.id,
            category_id=sample_categories[category],
            description=description,
            amount=Decimal(amount),
            transaction_type=transaction_type,
            date=when,
        )

    return _add


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def run_cli(cli_runner, temp_db):
    """Return a helper that invokes the CLI against the temporary database in UTC."""
    from budgetkit.cli.main import cli

    def _run(*args, input=None):
        return cli_runner.invoke(
            cli,
            ["--db-path", temp_db.database_path, "--timezone", "UTC", *args],
            input=input,
        )

    return _run
