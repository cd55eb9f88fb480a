"""Rule catalog and matcher.

A rule matches a transaction description according to its match type. All
comparisons are case-insensitive. REGEX rules must match the *entire*
description, so a pattern meant to match anywhere needs explicit wildcards
(``.*FOO.*``); a CONTAINS rule with value ``FOO`` matches anywhere.
"""

import csv
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional, Protocol

import structlog

from autoledger.domain.entities import MatchType
from autoledger.domain.errors import ValidationError

logger = structlog.get_logger(__name__)

Matcher = Callable[[str], bool]

CSV_REQUIRED_COLUMNS = ("name", "match_type", "match_value", "account_code", "priority")


class RuleLike(Protocol):
    """Anything carrying the fields the matcher needs."""

    name: str
    match_type: MatchType
    match_value: str
    account_code: str
    priority: int


@dataclass(frozen=True)
class RuleDefinition:
    """A classification rule as authored, before it is stored for a company."""

    name: str
    match_type: MatchType
    match_value: str
    account_code: str
    priority: int
    description: Optional[str] = None


@lru_cache(maxsize=1024)
def _compile_regex(pattern: str) -> re.Pattern:
    return re.compile(pattern, re.IGNORECASE)


def compile_matcher(match_type: "MatchType | str", match_value: str) -> Matcher:
    """Build a predicate over descriptions for one rule.

    Args:
        match_type: Match type (enum or name)
        match_value: Pattern text

    Returns:
        Callable taking a description and returning True on match

    Raises:
        ValidationError: If the match type is unknown, the value is empty or
            the regular expression does not compile
    """
    try:
        match_type = MatchType.parse(match_type)
    except ValueError as e:
        raise ValidationError(str(e))

    if match_value is None or not match_value.strip():
        raise ValidationError("Rule match value cannot be empty")

    if match_type == MatchType.REGEX:
        try:
            pattern = _compile_regex(match_value)
        except re.error as e:
            raise ValidationError(f"Invalid regular expression '{match_value}': {e}")
        return lambda description: pattern.fullmatch(description or "") is not None

    needle = match_value.lower()
    if match_type == MatchType.CONTAINS:
        return lambda description: needle in (description or "").lower()
    if match_type == MatchType.STARTS_WITH:
        return lambda description: (description or "").lower().startswith(needle)
    if match_type == MatchType.ENDS_WITH:
        return lambda description: (description or "").lower().endswith(needle)
    return lambda description: (description or "").lower() == needle


def matches(description: Optional[str], rule: RuleLike) -> bool:
    """Return True if the rule matches the description."""
    return compile_matcher(rule.match_type, rule.match_value)(description or "")


def validate_rule_pattern(match_type: "MatchType | str", match_value: str) -> None:
    """Reject a rule pattern that cannot produce a matcher.

    Raises:
        ValidationError: If the pattern is unusable
    """
    compile_matcher(match_type, match_value)


@dataclass(frozen=True)
class _CatalogEntry:
    sequence: int
    rule: RuleLike
    matcher: Matcher

    @property
    def sort_key(self) -> tuple[int, int]:
        return (-self.rule.priority, self.sequence)


class RuleCatalog:
    """Priority-ordered collection of compiled rules.

    Rules are evaluated by priority descending. Rules sharing a priority are
    evaluated by ascending sequence: the store id for persisted rules, or the
    position in the source table for rule definitions. The catalog is
    immutable from the caller's point of view once built, so classification
    against it is a pure function of the description.
    """

    def __init__(self, rules: Iterable[RuleLike] = ()):
        self._entries: list[_CatalogEntry] = []
        for rule in rules:
            self.add(rule)

    @classmethod
    def from_stored_rules(cls, rules: Iterable[RuleLike]) -> "RuleCatalog":
        """Build a catalog from persisted rules, ordering ties by rule id.

        Rules that no longer compile are skipped with a warning instead of
        failing the whole catalog.
        """
        catalog = cls()
        for rule in rules:
            try:
                catalog.add(rule, sequence=getattr(rule, "id", None))
            except ValidationError as e:
                logger.warning("rule_skipped", rule=rule.name, error=str(e))
        return catalog

    def add(self, rule: RuleLike, sequence: Optional[int] = None) -> None:
        """Add a rule to the catalog.

        Args:
            rule: Rule to add
            sequence: Tie-break key among equal priorities; defaults to
                insertion order

        Raises:
            ValidationError: If the rule's pattern cannot produce a matcher
        """
        matcher = compile_matcher(rule.match_type, rule.match_value)
        if sequence is None:
            sequence = len(self._entries)
        self._entries.append(_CatalogEntry(sequence=sequence, rule=rule, matcher=matcher))
        # Stable sort keeps insertion order for identical keys
        self._entries.sort(key=lambda entry: entry.sort_key)

    def __iter__(self) -> Iterator[RuleLike]:
        return (entry.rule for entry in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def rules(self) -> tuple[RuleLike, ...]:
        """Rules in evaluation order."""
        return tuple(self)

    def active(self) -> "RuleCatalog":
        """Return a catalog holding only active rules, in the same order."""
        catalog = RuleCatalog()
        catalog._entries = [
            entry for entry in self._entries if getattr(entry.rule, "is_active", True)
        ]
        return catalog

    def first_match(self, description: Optional[str]) -> Optional[RuleLike]:
        """Return the first rule, in evaluation order, matching the description."""
        text = description or ""
        for entry in self._entries:
            if entry.matcher(text):
                return entry.rule
        return None

    def matching_rules(self, description: Optional[str]) -> list[RuleLike]:
        """Return every rule matching the description, in evaluation order."""
        text = description or ""
        return [entry.rule for entry in self._entries if entry.matcher(text)]


def load_rule_definitions_csv(csv_file_path: str) -> list[RuleDefinition]:
    """Load rule definitions from a CSV file.

    Expected columns: name, match_type, match_value, account_code, priority and
    an optional description. Every row is validated, including regex
    compilation, before anything is returned.

    Args:
        csv_file_path: Path to CSV file

    Returns:
        Rule definitions in file order

    Raises:
        FileNotFoundError: If the CSV file doesn't exist
        ValidationError: If columns are missing or any row is invalid
    """
    csv_path = Path(csv_file_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_file_path}")

    definitions = []
    errors = []

    with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None:
            raise ValidationError("CSV file has no columns")

        missing_columns = [col for col in CSV_REQUIRED_COLUMNS if col not in reader.fieldnames]
        if missing_columns:
            raise ValidationError(
                f"CSV file missing required columns: {', '.join(missing_columns)}"
            )

        for row_num, row in enumerate(reader, start=2):  # Header is row 1
            name = (row.get("name") or "").strip()
            account_code = (row.get("account_code") or "").strip()
            match_value = row.get("match_value") or ""
            if not name:
                errors.append(f"Row {row_num}: Missing name")
                continue
            if not account_code:
                errors.append(f"Row {row_num}: Missing account_code")
                continue
            try:
                priority = int((row.get("priority") or "").strip())
            except ValueError:
                errors.append(f"Row {row_num}: Priority must be an integer")
                continue
            try:
                match_type = MatchType.parse(row.get("match_type") or "")
                validate_rule_pattern(match_type, match_value)
            except ValueError as e:
                errors.append(f"Row {row_num}: {e}")
                continue

            description = (row.get("description") or "").strip() or None
            definitions.append(
                RuleDefinition(
                    name=name,
                    match_type=match_type,
                    match_value=match_value,
                    account_code=account_code,
                    priority=priority,
                    description=description,
                )
            )

    if errors:
        raise ValidationError("Invalid rule file:\n" + "\n".join(errors))

    return definitions
