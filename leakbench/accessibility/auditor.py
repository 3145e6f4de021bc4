"""Accessibility audit with a pluggable battery of rule checks."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Any


class IssueType(str, Enum):
    CONTRAST = "contrast"
    FOCUS = "focus"
    LABELS = "labels"
    STRUCTURE = "structure"
    NAVIGATION = "navigation"


class IssueSeverity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


SEVERITY_PENALTIES: Dict[IssueSeverity, int] = {
    IssueSeverity.CRITICAL: 25,
    IssueSeverity.HIGH: 15,
    IssueSeverity.MEDIUM: 10,
    IssueSeverity.LOW: 5,
}

# (minimum score, summary), checked in order
SUMMARY_BRACKETS: Tuple[Tuple[int, str], ...] = (
    (90, "Excellent accessibility compliance with minor improvements needed."),
    (75, "Good accessibility with some areas for improvement."),
    (60, "Moderate accessibility issues that should be addressed."),
    (0, "Significant accessibility issues requiring immediate attention."),
)


@dataclass(frozen=True)
class AccessibilityIssue:
    """A single finding from a rule check."""

    type: IssueType
    severity: IssueSeverity
    description: str
    suggestion: str
    element: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "severity": self.severity.value,
            "description": self.description,
            "element": self.element,
            "suggestion": self.suggestion,
        }


@dataclass(frozen=True)
class AccessibilityTestResult:
    """Issues, score (0-100) and summary of an audit."""

    issues: Tuple[AccessibilityIssue, ...] = field(default_factory=tuple)
    score: int = 100
    summary: str = SUMMARY_BRACKETS[0][1]

    def count_by_severity(self) -> Dict[str, int]:
        counts = {s.value: 0 for s in IssueSeverity}
        for issue in self.issues:
            counts[issue.severity.value] += 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "summary": self.summary,
            "issues": [i.to_dict() for i in self.issues],
        }


RuleCheck = Callable[[], Sequence[AccessibilityIssue]]


# Illustrative findings; swap any of these for a real analyser.

def check_color_contrast() -> List[AccessibilityIssue]:
    return [
        AccessibilityIssue(
            type=IssueType.CONTRAST,
            severity=IssueSeverity.MEDIUM,
            description="Text color may not have sufficient contrast against background",
            element="Secondary text elements",
            suggestion="Ensure contrast ratio is at least 4.5:1 for normal text",
        )
    ]


def check_focus_management() -> List[AccessibilityIssue]:
    return [
        AccessibilityIssue(
            type=IssueType.FOCUS,
            severity=IssueSeverity.HIGH,
            description="Focus indicators may not be visible enough",
            element="Interactive elements",
            suggestion="Add clear focus indicators with sufficient contrast",
        )
    ]


def check_labels() -> List[AccessibilityIssue]:
    return [
        AccessibilityIssue(
            type=IssueType.LABELS,
            severity=IssueSeverity.MEDIUM,
            description="Some form inputs may lack proper labels",
            element="Form inputs",
            suggestion="Ensure all inputs have associated labels or aria-label attributes",
        )
    ]


def check_structure() -> List[AccessibilityIssue]:
    return [
        AccessibilityIssue(
            type=IssueType.STRUCTURE,
            severity=IssueSeverity.LOW,
            description="Heading hierarchy could be improved",
            element="Page headings",
            suggestion=(
                "Use proper heading hierarchy (h1, h2, h3) for better screen "
                "reader navigation"
            ),
        )
    ]


def check_navigation() -> List[AccessibilityIssue]:
    return [
        AccessibilityIssue(
            type=IssueType.NAVIGATION,
            severity=IssueSeverity.MEDIUM,
            description="Some interactive elements may not be keyboard accessible",
            element="Custom components",
            suggestion="Ensure all interactive elements are keyboard accessible",
        )
    ]


DEFAULT_CHECKS: Tuple[RuleCheck, ...] = (
    check_color_contrast,
    check_focus_management,
    check_labels,
    check_structure,
    check_navigation,
)


def calculate_score(issues: Sequence[AccessibilityIssue]) -> int:
    """100 minus the per-severity penalty of every issue, floored at 0."""
    score = 100
    for issue in issues:
        score -= SEVERITY_PENALTIES[issue.severity]
    return max(0, score)


def generate_summary(score: int) -> str:
    for minimum, summary in SUMMARY_BRACKETS:
        if score >= minimum:
            return summary
    return SUMMARY_BRACKETS[-1][1]


class AccessibilityTester:
    """Runs each rule check in order and scores the combined findings."""

    def __init__(self, checks: Optional[Sequence[RuleCheck]] = None):
        self.checks: Tuple[RuleCheck, ...] = (
            tuple(checks) if checks is not None else DEFAULT_CHECKS
        )

    def run(self) -> AccessibilityTestResult:
        issues: List[AccessibilityIssue] = []
        for check in self.checks:
            issues.extend(check())

        score = calculate_score(issues)
        return AccessibilityTestResult(
            issues=tuple(issues),
            score=score,
            summary=generate_summary(score),
        )
