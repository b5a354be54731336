"""Rule tables mapping directory and file names to exclude reasons."""

from .rule_tables import DIRECTORY_RULES, FILE_RULES, RuleEntry, check_rule_table, find_rule

__all__ = [
    "DIRECTORY_RULES",
    "FILE_RULES",
    "RuleEntry",
    "check_rule_table",
    "find_rule",
]
