"""Tests for the command line interface."""

from autoledger.cli.main import cli


def _run(cli_runner, temp_db, *args):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args])


def _setup_books(cli_runner, temp_db):
    """Create a company with the standard chart, rules and a fiscal year."""
    result = _run(cli_runner, temp_db, "company", "create", "Acme", "--standard")
    assert result.exit_code == 0, result.output
    result = _run(cli_runner, temp_db, "period", "create", "Acme", "FY2024", "--start", "2024-03-01", "--end", "2025-02-28")
    assert result.exit_code == 0, result.output


def test_help_does_not_need_database(cli_runner):
    """Showing help works without touching a database."""
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "classify" in result.output
    assert "override" in result.output


def test_company_create_and_list(cli_runner, temp_db):
    """Companies can be created and listed."""
    result = _run(cli_runner, temp_db, "company", "create", "Acme")
    assert result.exit_code == 0
    assert "Created company 'Acme'" in result.output

    result = _run(cli_runner, temp_db, "company", "list")
    assert result.exit_code == 0
    assert "Acme" in result.output


def test_company_create_standard(cli_runner, temp_db):
    """--standard installs the chart and the rules."""
    result = _run(cli_runner, temp_db, "company", "create", "Acme", "--standard")
    assert result.exit_code == 0
    assert "Installed 79 accounts and 100 rules" in result.output


def test_unknown_company_is_an_error(cli_runner, temp_db):
    """Commands naming an unknown company exit with an error."""
    result = _run(cli_runner, temp_db, "classify", "Nobody")
    assert result.exit_code == 1
    assert "Error: Company 'Nobody' not found" in result.output


def test_period_month_shortcut(cli_runner, temp_db):
    """--month creates a whole calendar month."""
    _run(cli_runner, temp_db, "company", "create", "Acme")
    result = _run(cli_runner, temp_db, "period", "create", "Acme", "Feb 2024", "--month", "2024-02")
    assert result.exit_code == 0
    assert "2024-02-01 to 2024-02-29" in result.output


def test_rule_add_validation(cli_runner, temp_db):
    """Invalid rules are refused with a clear message."""
    _setup_books(cli_runner, temp_db)
    result = _run(
        cli_runner, temp_db, "rule", "add", "Acme", "Broken", "--type", "REGEX", "--value", "(", "--account", "9600"
    )
    assert result.exit_code == 1
    assert "Invalid regular expression" in result.output


def test_rule_test_explains_winner(cli_runner, temp_db):
    """rule test shows the winning rule first."""
    _setup_books(cli_runner, temp_db)
    result = _run(cli_runner, temp_db, "rule", "test", "Acme", "INSURANCE CHAUKE SALARY")
    assert result.exit_code == 0
    assert "Classified as 8100 by 'Insurance Chauke Salaries' (priority 10)" in result.output
    assert "-> 8800" in result.output


def test_full_classification_workflow(cli_runner, temp_db):
    """Record, classify, post, report and override end to end."""
    _setup_books(cli_runner, temp_db)

    for args in (
        ["--date", "2024-03-10", "--details", "INSURANCE CHAUKE SALARY", "--amount", "-5000.00"],
        ["--date", "2024-03-11", "--details", "FEE IMMEDIATE PAYMENT", "--debit", "35.00"],
        ["--date", "2024-03-12", "--details", "COROBRIK PAYMENT", "--credit", "15000.00"],
        ["--date", "2024-03-13", "--details", "SOMETHING UNKNOWN", "--amount", "12.50"],
    ):
        result = _run(cli_runner, temp_db, "transaction", "add", "Acme", *args)
        assert result.exit_code == 0, result.output

    result = _run(cli_runner, temp_db, "classify", "Acme")
    assert result.exit_code == 0, result.output
    assert "Classified 3 of 4 transactions (1 unmatched, 0 failed)" in result.output

    result = _run(cli_runner, temp_db, "post", "Acme")
    assert result.exit_code == 0, result.output
    assert "Generated 3 journal entries" in result.output

    result = _run(cli_runner, temp_db, "post", "Acme")
    assert "Generated 0 journal entries" in result.output

    result = _run(cli_runner, temp_db, "report", "Acme")
    assert result.exit_code == 0
    assert "Total: 4, Classified: 3, Unclassified: 1 (75.0%)" in result.output
    assert "OVERALL: 3/4 transactions classified (75.0%)" in result.output

    result = _run(cli_runner, temp_db, "report", "Acme", "--unclassified")
    assert "SOMETHING UNKNOWN" in result.output

    unknown_id = temp_db.list_transactions(1, unclassified=True)[0].id
    result = _run(cli_runner, temp_db, "override", str(unknown_id), "--debit", "1000", "--credit", "8200", "--actor", "jane")
    assert result.exit_code == 0, result.output
    assert f"MANUAL-{unknown_id}" in result.output

    temp_db.disconnect()
    assert temp_db.get_transaction(unknown_id).account_code == "1000"
    assert len(temp_db.list_journal_entries(1)) == 4


def test_regenerate_command(cli_runner, temp_db):
    """regenerate reclassifies and posts in one go."""
    _setup_books(cli_runner, temp_db)
    _run(cli_runner, temp_db, "transaction", "add", "Acme", "--date", "2024-04-01", "--details", "CARTRACK", "--debit", "99")

    result = _run(cli_runner, temp_db, "regenerate", "Acme")
    assert result.exit_code == 0, result.output
    assert "Reclassified 1 of 1 transactions, generated 1 journal entries" in result.output


def test_control_account_option(cli_runner, temp_db):
    """A missing control account makes posting fail with an error."""
    _setup_books(cli_runner, temp_db)
    _run(cli_runner, temp_db, "transaction", "add", "Acme", "--date", "2024-04-01", "--details", "FEE", "--debit", "5")
    _run(cli_runner, temp_db, "classify", "Acme")

    result = _run(cli_runner, temp_db, "--control-account", "0001", "post", "Acme")
    assert result.exit_code == 1
    assert "No active account with code '0001'" in result.output


def test_transaction_classify_and_list(cli_runner, temp_db):
    """Single transactions can be classified by hand."""
    _setup_books(cli_runner, temp_db)
    _run(cli_runner, temp_db, "transaction", "add", "Acme", "--date", "2024-04-01", "--details", "ODD ONE", "--debit", "5")

    result = _run(cli_runner, temp_db, "transaction", "classify", "1", "8200")
    assert result.exit_code == 0, result.output

    result = _run(cli_runner, temp_db, "transaction", "list", "Acme")
    assert "8200" in result.output
    assert "ODD ONE" in result.output
