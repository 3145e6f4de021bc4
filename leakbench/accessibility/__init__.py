"""Accessibility auditing."""

from .auditor import (
    AccessibilityIssue,
    AccessibilityTestResult,
    AccessibilityTester,
    DEFAULT_CHECKS,
    IssueSeverity,
    IssueType,
    calculate_score,
    generate_summary,
)

__all__ = [
    "AccessibilityIssue",
    "AccessibilityTestResult",
    "AccessibilityTester",
    "DEFAULT_CHECKS",
    "IssueSeverity",
    "IssueType",
    "calculate_score",
    "generate_summary",
]
