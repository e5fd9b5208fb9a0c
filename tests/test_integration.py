"""Integration tests for end-to-end workflows."""

import json


def test_full_workflow(run_cli):
    """Scope, categories, transactions, alert, goal and reports through the CLI."""
    result = run_cli("scope", "create", "Household", "--kind", "family")
    assert result.exit_code == 0

    result = run_cli("category", "init", "--scope", "Household")
    assert result.exit_code == 0

    transactions = [
        ("Salary", "3200.00", "income", "2024-03-25"),
        ("Groceries", "180.40", "expense", "2024-03-02 10:15"),
        ("Groceries", "95.60", "expense", "2024-03-11 17:45"),
        ("Restaurants", "64.00", "expense", "2024-03-12 20:00"),
        ("Housing", "1200.00", "expense", "2024-03-01"),
        ("Restaurants", "30.00", "expense", "2024-02-28 19:00"),
    ]
    for category, amount, txn_type, when in transactions:
        result = run_cli(
            "add", "--scope", "Household", "--category", category,
            "--amount", amount, "--type", txn_type, "--date", when,
        )
        assert result.exit_code == 0, result.output

    result = run_cli(
        "alert", "create", "Food this week", "--scope", "Household",
        "--limit", "150", "--period", "weekly", "--category", "Groceries",
    )
    assert result.exit_code == 0

    result = run_cli(
        "alert", "create", "Monthly spending", "--scope", "Household", "--limit", "1500",
    )
    assert result.exit_code == 0

    # Wednesday 2024-03-13: the week started on Sunday 2024-03-10
    result = run_cli(
        "alert", "check", "--scope", "Household", "--as-of", "2024-03-13 21:00", "--json"
    )
    assert result.exit_code == 0
    statuses = {item["alert"]["name"]: item for item in json.loads(result.output)}
    assert statuses["Food this week"]["current_spending"] == "95.60"
    assert statuses["Food this week"]["percentage_used"] == "63.73"
    assert statuses["Monthly spending"]["current_spending"] == "1540.00"
    assert statuses["Monthly spending"]["percentage_used"] == "102.67"

    result = run_cli(
        "report", "balance", "--scope", "Household", "--year", "2024", "--month", "3", "--json"
    )
    assert json.loads(result.output) == {
        "income": "3200.00",
        "expenses": "1540.00",
        "balance": "1660.00",
    }

    result = run_cli(
        "report", "categories", "--scope", "Household", "--year", "2024", "--month", "3", "--json"
    )
    breakdown = json.loads(result.output)
    assert [(item["category_name"], item["total"], item["percentage"]) for item in breakdown] == [
        ("Housing", "1200.00", 78),
        ("Groceries", "276.00", 18),
        ("Restaurants", "64.00", 4),
    ]

    result = run_cli("goal", "create", "Emergency fund", "--scope", "Household", "--target", "5000")
    assert result.exit_code == 0
    result = run_cli("goal", "contribute", "1", "1660", "--scope", "Household")
    assert result.exit_code == 0
    assert "(33.20%)" in result.output


def test_scopes_do_not_see_each_other(run_cli):
    for name in ("Alex", "Sam"):
        assert run_cli("scope", "create", name).exit_code == 0
        assert run_cli("category", "init", "--scope", name).exit_code == 0

    result = run_cli(
        "add", "--scope", "Alex", "--category", "Groceries", "--amount", "50",
        "--type", "expense", "--date", "2024-03-05",
    )
    assert result.exit_code == 0

    result = run_cli(
        "report", "balance", "--scope", "Sam", "--year", "2024", "--month", "3", "--json"
    )
    assert json.loads(result.output)["expenses"] == "0"

    result = run_cli("transaction", "list", "--scope", "Sam")
    assert "No transactions found" in result.output
