"""Classification rule domain service."""

from typing import Iterable, Optional

import structlog

from autoledger.database.base import Database
from autoledger.domain import errors
from autoledger.domain.entities import ClassificationRule, MatchType
from autoledger.domain.rule_catalog import (
    RuleCatalog,
    RuleDefinition,
    load_rule_definitions_csv,
    validate_rule_pattern,
)
from autoledger.domain.rulebook import STANDARD_RULES

logger = structlog.get_logger(__name__)


class RuleService:
    """Service for authoring and maintaining a company's classification rules."""

    def __init__(self, db: Database):
        """Initialize rule service.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_company(self, company_id: int) -> None:
        if self.db.get_company(company_id) is None:
            raise errors.NotFoundError(errors.company_not_found(company_id))

    def _require_account(self, company_id: int, account_code: str) -> None:
        if self.db.get_account_by_code(company_id, account_code) is None:
            raise errors.ValidationError(
                f"Target account '{account_code}' does not exist for company {company_id}"
            )

    def add_rule(
        self,
        company_id: int,
        name: str,
        match_type: MatchType | str,
        match_value: str,
        account_code: str,
        priority: int,
        description: Optional[str] = None,
    ) -> int:
        """Add a classification rule after validating it.

        Args:
            company_id: Owning company
            name: Rule name
            match_type: Match type (enum or name, case-insensitive)
            match_value: Pattern text; REGEX patterns must match the whole
                description
            account_code: Target account code
            priority: Higher priorities are evaluated first
            description: Optional free text

        Returns:
            Rule ID

        Raises:
            NotFoundError: If the company does not exist
            ValidationError: If the name is empty, the pattern is unusable or
                the target account does not exist
        """
        self._require_company(company_id)
        name = (name or "").strip()
        if not name:
            raise errors.ValidationError("Rule name cannot be empty")
        try:
            match_type = MatchType.parse(match_type)
        except ValueError as e:
            raise errors.ValidationError(str(e))
        validate_rule_pattern(match_type, match_value)
        account_code = (account_code or "").strip()
        self._require_account(company_id, account_code)

        rule_id = self.db.create_rule(
            company_id,
            name,
            match_type,
            match_value,
            account_code,
            priority,
            description=description,
        )
        logger.info("rule_added", company_id=company_id, rule=name, rule_id=rule_id, priority=priority)
        return rule_id

    def get_rule(self, rule_id: int) -> Optional[ClassificationRule]:
        """Get rule by ID."""
        return self.db.get_rule(rule_id)

    def list_rules(self, company_id: int, active_only: bool = False) -> list[ClassificationRule]:
        """List rules in evaluation order (priority descending, then ID)."""
        return self.db.list_rules(company_id, active_only=active_only)

    def _require_rule(self, rule_id: int) -> ClassificationRule:
        rule = self.db.get_rule(rule_id)
        if rule is None:
            raise errors.NotFoundError(errors.rule_not_found(rule_id))
        return rule

    def set_active(self, rule_id: int, is_active: bool) -> None:
        """Activate or deactivate a rule.

        Raises:
            NotFoundError: If the rule does not exist
        """
        self._require_rule(rule_id)
        self.db.update_rule(rule_id, is_active=is_active)

    def set_priority(self, rule_id: int, priority: int) -> None:
        """Change a rule's priority.

        Raises:
            NotFoundError: If the rule does not exist
        """
        self._require_rule(rule_id)
        self.db.update_rule(rule_id, priority=priority)

    def install_rules(self, company_id: int, definitions: Iterable[RuleDefinition]) -> int:
        """Store rule definitions for a company, skipping names already present.

        Definitions are stored in the given order, so rules sharing a priority
        keep that order through their IDs.

        Returns:
            Number of rules created

        Raises:
            NotFoundError: If the company does not exist
            ValidationError: If a definition is unusable or targets a missing
                account; nothing is stored in that case
        """
        self._require_company(company_id)
        definitions = list(definitions)

        for definition in definitions:
            validate_rule_pattern(definition.match_type, definition.match_value)
            self._require_account(company_id, definition.account_code)

        existing = {rule.name for rule in self.db.list_rules(company_id)}
        created = 0
        for definition in definitions:
            if definition.name in existing:
                continue
            self.db.create_rule(
                company_id,
                definition.name,
                definition.match_type,
                definition.match_value,
                definition.account_code,
                definition.priority,
                description=definition.description,
            )
            existing.add(definition.name)
            created += 1

        logger.info("rules_installed", company_id=company_id, created=created, total=len(definitions))
        return created

    def install_standard_rules(self, company_id: int) -> int:
        """Store the standard rule table for a company.

        The company needs the standard chart of accounts first.
        """
        return self.install_rules(company_id, STANDARD_RULES)

    def import_rules_csv(self, company_id: int, csv_file_path: str) -> int:
        """Load rules from a CSV file and store them for a company.

        Raises:
            FileNotFoundError: If the CSV file doesn't exist
            ValidationError: If the file or any rule in it is invalid
        """
        return self.install_rules(company_id, load_rule_definitions_csv(csv_file_path))

    def load_catalog(self, company_id: int, active_only: bool = True) -> RuleCatalog:
        """Build a catalog from the company's stored rules."""
        return RuleCatalog.from_stored_rules(self.db.list_rules(company_id, active_only=active_only))

    def explain(self, company_id: int, description: str) -> list[ClassificationRule]:
        """Return every active rule matching a description, winner first."""
        return self.load_catalog(company_id).matching_rules(description)
