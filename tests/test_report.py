"""Tests for the brand compliance report."""

from tonelab.core.contrast import ComplianceLevel
from tonelab.logic.report.engine import (
    APPLICATION_PAIRS,
    GENERAL_RECOMMENDATIONS,
    ColorPair,
    build_compliance_report,
)


class TestApplicationReport:
    def test_counts(self) -> None:
        report = build_compliance_report()
        assert report.total == len(APPLICATION_PAIRS) == 15
        assert report.passed_aa == 9
        assert report.failed_aa == 6
        assert report.passed_aaa == 7
        assert report.compliance_percentage == 60

    def test_results_keyed_by_name(self) -> None:
        report = build_compliance_report()
        assert set(report.results) == {pair.name for pair in APPLICATION_PAIRS}
        assert report.results["high-contrast-text"].level is ComplianceLevel.AAA
        assert report.results["high-contrast-primary"].level is ComplianceLevel.AA
        assert report.results["primary-button"].level is ComplianceLevel.FAIL

    def test_critical_issues(self) -> None:
        report = build_compliance_report()
        assert len(report.critical_issues) == 3
        names = ("primary-button", "primary-button-hover", "nav-active")
        for name, issue in zip(names, report.critical_issues):
            assert issue.startswith(f"CRITICAL: {name} has insufficient contrast")

    def test_link_failures_are_not_critical(self) -> None:
        report = build_compliance_report()
        assert not any("link-text" in issue for issue in report.critical_issues)
        assert any(rec.startswith("link-text:") for rec in report.recommendations)

    def test_recommendations(self) -> None:
        report = build_compliance_report()
        assert len(report.recommendations) == 6 + len(GENERAL_RECOMMENDATIONS)
        assert report.recommendations[-len(GENERAL_RECOMMENDATIONS):] == list(GENERAL_RECOMMENDATIONS)

    def test_large_text(self) -> None:
        report = build_compliance_report(large_text=True)
        assert report.failed_aa == 4
        assert report.compliance_percentage == 73
        assert len(report.critical_issues) == 2


class TestCustomPairs:
    def test_empty_is_fully_compliant(self) -> None:
        report = build_compliance_report([])
        assert report.total == 0
        assert report.compliance_percentage == 100
        assert report.recommendations == []
        assert report.critical_issues == []

    def test_all_passing_has_no_recommendations(self) -> None:
        report = build_compliance_report([ColorPair("body-text", "#000000", "#FFFFFF")])
        assert report.compliance_percentage == 100
        assert report.recommendations == []

    def test_malformed_pair_counts_as_failure(self) -> None:
        report = build_compliance_report([ColorPair("nav-text", "#nothex", "#FFFFFF")])
        assert report.failed_aa == 1
        assert report.results["nav-text"].ratio == 0.0
        assert report.critical_issues[0].startswith("CRITICAL: nav-text")
