"""Full test suite: load tests, a stress test and the accessibility audit."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..accessibility.auditor import AccessibilityTester, AccessibilityTestResult
from ..core.load_tester import LoadTester, Probe
from ..core.models import LoadTestResult, StressTestConfig, TestConfig
from ..core.probes import get_simulated_probe
from ..results.aggregator import ResultAggregator
from .presets import SUITE_PRESETS
from .stress import StressRound, StressTester


@dataclass
class SuiteResult:
    """Results of one full suite run."""

    load_tests: Dict[str, LoadTestResult] = field(default_factory=dict)
    stress_test: Optional[LoadTestResult] = None
    stress_rounds: List[StressRound] = field(default_factory=list)
    breaking_point: Optional[int] = None
    accessibility: Optional[AccessibilityTestResult] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "load_tests": {k: v.to_dict() for k, v in self.load_tests.items()},
            "stress_test": self.stress_test.to_dict() if self.stress_test else None,
            "breaking_point": self.breaking_point,
            "accessibility": self.accessibility.to_dict() if self.accessibility else None,
        }


def _config_kwargs(preset: Mapping[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in preset.items() if k != "probe"}


def _resolve_probe(preset: Mapping[str, Any], probes: Mapping[str, Probe]) -> Probe:
    name = preset["probe"]
    if name in probes:
        return probes[name]
    return get_simulated_probe(name)


async def run_all_tests(
    probes: Optional[Mapping[str, Probe]] = None,
    presets: Mapping[str, Any] = SUITE_PRESETS,
    aggregator: Optional[ResultAggregator] = None,
) -> SuiteResult:
    """
    Run every load test, the stress test and the accessibility audit.

    Args:
        probes: Probe overrides by name; unnamed probes use the simulations
        presets: Test plan, shaped like ``SUITE_PRESETS``
        aggregator: Collects each result for the summary table

    Returns:
        SuiteResult with every test's outcome
    """
    logger = logging.getLogger(__name__)
    probes = probes or {}
    suite = SuiteResult()

    logger.info("=== LOAD TESTING ===")
    for preset in presets.get("load_tests", []):
        config = TestConfig(**_config_kwargs(preset))
        tester = LoadTester(config)
        result = await tester.run(_resolve_probe(preset, probes))
        suite.load_tests[config.label or preset["probe"]] = result
        if aggregator is not None:
            aggregator.add_result(result)
            aggregator.print_single_result(result)

    stress_preset = presets.get("stress_test")
    if stress_preset:
        logger.info("=== STRESS TESTING ===")
        stress_tester = StressTester(StressTestConfig(**_config_kwargs(stress_preset)))
        suite.stress_test = await stress_tester.run(_resolve_probe(stress_preset, probes))
        suite.stress_rounds = stress_tester.rounds
        suite.breaking_point = stress_tester.breaking_point
        if aggregator is not None:
            aggregator.add_result(suite.stress_test)
            aggregator.print_single_result(suite.stress_test)

    logger.info("=== ACCESSIBILITY TESTING ===")
    suite.accessibility = AccessibilityTester().run()

    return suite
