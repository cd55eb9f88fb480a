"""Classification rule commands."""

import click

from autoledger.cli.company_resolution import resolve_company_or_exit
from autoledger.cli.error_handling import handle_domain_error
from autoledger.domain.entities import MatchType
from autoledger.domain.rule import RuleService


@click.group()
def rule_group():
    """Manage classification rules."""
    pass


@rule_group.command("add")
@click.argument("company")
@click.argument("name")
@click.option(
    "--type",
    "match_type",
    type=click.Choice([m.value for m in MatchType], case_sensitive=False),
    default=MatchType.CONTAINS.value,
    help="Match type (default: CONTAINS). REGEX must match the whole description.",
)
@click.option("--value", "match_value", required=True, help="Text or pattern to match")
@click.option("--account", "account_code", required=True, help="Target account code")
@click.option("--priority", type=int, default=8, help="Higher runs first (default: 8)")
@click.option("--description", help="Free-text description")
@click.pass_context
def add_rule(
    ctx, company: str, name: str, match_type: str, match_value: str, account_code: str, priority: int, description: str
):
    """Add a classification rule to COMPANY.

    Examples:
        autoledger rule add Acme "Bank fees" --value FEE --account 9600 --priority 20
        autoledger rule add Acme "Salaries" --type REGEX --value ".*SALARY.*" --account 8100
    """
    company_obj = resolve_company_or_exit(ctx, company)
    try:
        rule_id = RuleService(ctx.obj["db"]).add_rule(
            company_obj.id,
            name,
            match_type,
            match_value,
            account_code,
            priority,
            description=description,
        )
        click.echo(f"Created rule '{name}' (ID: {rule_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@rule_group.command("list")
@click.argument("company")
@click.option("--active-only", is_flag=True, help="Only show active rules")
@click.pass_context
def list_rules(ctx, company: str, active_only: bool):
    """List rules of COMPANY in evaluation order."""
    company_obj = resolve_company_or_exit(ctx, company)
    rules = RuleService(ctx.obj["db"]).list_rules(company_obj.id, active_only=active_only)
    if not rules:
        click.echo("No rules found. Run 'rule install-standard' to create the standard rules.")
        return

    click.echo(f"{'ID':<6} {'Pri':<4} {'Type':<12} {'Account':<10} {'Active':<7} {'Name':<40} Value")
    click.echo("-" * 110)
    for r in rules:
        active = "yes" if r.is_active else "no"
        click.echo(
            f"{r.id:<6} {r.priority:<4} {r.match_type.value:<12} {r.account_code:<10} {active:<7} "
            f"{r.name[:40]:<40} {r.match_value}"
        )


@rule_group.command("activate")
@click.argument("rule_id", type=int)
@click.pass_context
def activate_rule(ctx, rule_id: int):
    """Activate a rule."""
    try:
        RuleService(ctx.obj["db"]).set_active(rule_id, True)
        click.echo(f"Rule {rule_id} activated")
    except ValueError as e:
        handle_domain_error(ctx, e)


@rule_group.command("deactivate")
@click.argument("rule_id", type=int)
@click.pass_context
def deactivate_rule(ctx, rule_id: int):
    """Deactivate a rule."""
    try:
        RuleService(ctx.obj["db"]).set_active(rule_id, False)
        click.echo(f"Rule {rule_id} deactivated")
    except ValueError as e:
        handle_domain_error(ctx, e)


@rule_group.command("priority")
@click.argument("rule_id", type=int)
@click.argument("priority", type=int)
@click.pass_context
def set_priority(ctx, rule_id: int, priority: int):
    """Change the priority of a rule."""
    try:
        RuleService(ctx.obj["db"]).set_priority(rule_id, priority)
        click.echo(f"Rule {rule_id} priority set to {priority}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@rule_group.command("install-standard")
@click.argument("company")
@click.pass_context
def install_standard(ctx, company: str):
    """Install the standard rule catalog for COMPANY.

    The standard chart of accounts must be installed first.
    """
    company_obj = resolve_company_or_exit(ctx, company)
    try:
        created = RuleService(ctx.obj["db"]).install_standard_rules(company_obj.id)
        click.echo(f"Created {created} rules for '{company_obj.name}'")
    except ValueError as e:
        handle_domain_error(ctx, e)


@rule_group.command("import")
@click.argument("company")
@click.argument("csv_file", type=click.Path(exists=True))
@click.pass_context
def import_rules(ctx, company: str, csv_file: str):
    """Import rules for COMPANY from a CSV file.

    Columns: name, match_type, match_value, account_code, priority and an
    optional description.
    """
    company_obj = resolve_company_or_exit(ctx, company)
    try:
        created = RuleService(ctx.obj["db"]).import_rules_csv(company_obj.id, csv_file)
        click.echo(f"Imported {created} rules for '{company_obj.name}'")
    except (ValueError, FileNotFoundError) as e:
        handle_domain_error(ctx, e)


@rule_group.command("test")
@click.argument("company")
@click.argument("description")
@click.pass_context
def test_rules(ctx, company: str, description: str):
    """Show which active rules of COMPANY match DESCRIPTION, winner first."""
    company_obj = resolve_company_or_exit(ctx, company)
    matching = RuleService(ctx.obj["db"]).explain(company_obj.id, description)
    if not matching:
        click.echo("No rule matches; the transaction would stay unclassified.")
        return

    winner = matching[0]
    click.echo(f"Classified as {winner.account_code} by '{winner.name}' (priority {winner.priority})")
    for r in matching[1:]:
        click.echo(f"  also matches: '{r.name}' -> {r.account_code} (priority {r.priority})")


def register_commands(cli):
    """Register rule commands with main CLI."""
    cli.add_command(rule_group, name="rule")
