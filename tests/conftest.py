"""
Pytest Configuration and Fixtures

This module provides:
- Timestamped result file generation
- Shared fixtures for all tests (API payloads, in-memory API, HTTP mocks)
- Test category organization
"""

import pytest
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Dict, Any
from unittest.mock import Mock

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Import test configuration
from tests.test_config import (
    CONFIG, EXPECTED, TEST_DATA, MESSAGES, TEST_CATEGORIES,
    get_sample_idea, get_all_sample_ideas,
)


# =============================================================================
# TEST RESULT FILE CONFIGURATION
# =============================================================================

RESULTS_DIR = PROJECT_ROOT / "test_results"


def get_result_filename() -> str:
    """Generate timestamped result filename."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"test_results_{timestamp}.txt"


def ensure_results_dir():
    """Create results directory if it doesn't exist."""
    RESULTS_DIR.mkdir(exist_ok=True)


# =============================================================================
# PYTEST HOOKS FOR CUSTOM OUTPUT
# =============================================================================

class ResultCollector:
    """Collects test results for formatted output."""

    def __init__(self):
        self.results: List[Dict[str, Any]] = []
        self.start_time: datetime = None
        self.end_time: datetime = None
        self.categories: Dict[str, List[Dict]] = {}

    def add_result(self, nodeid: str, outcome: str, duration: float, message: str = ""):
        """Add a test result."""
        category = self._extract_category(nodeid)

        result = {
            "nodeid": nodeid,
            "name": self._extract_test_name(nodeid),
            "category": category,
            "outcome": outcome,
            "duration": duration,
            "message": message,
        }

        self.results.append(result)
        self.categories.setdefault(category, []).append(result)

    def _extract_category(self, nodeid: str) -> str:
        """Extract test category from nodeid (tests/test_<category>.py::...)."""
        filename = nodeid.split("::")[0].split("/")[-1]
        return filename.replace("test_", "", 1).replace(".py", "")

    def _extract_test_name(self, nodeid: str) -> str:
        """Extract readable test name from nodeid."""
        parts = nodeid.split("::")
        if len(parts) >= 2:
            return parts[-1].replace("test_", "").replace("_", " ").title()
        return nodeid

    def get_summary(self) -> Dict[str, int]:
        """Get test result summary."""
        return {
            "total": len(self.results),
            "passed": sum(1 for r in self.results if r["outcome"] == "passed"),
            "failed": sum(1 for r in self.results if r["outcome"] == "failed"),
            "skipped": sum(1 for r in self.results if r["outcome"] == "skipped"),
        }


# Global collector instance
_collector = ResultCollector()


def pytest_configure(config):
    """Register custom markers and start the collector."""
    config.addinivalue_line(
        "markers", "config_validation: Configuration validation tests"
    )
    config.addinivalue_line(
        "markers", "list_refresh: Idea list fetch and refetch-on-write tests"
    )
    config.addinivalue_line(
        "markers", "form_validation: Creation and comment form validation tests"
    )
    config.addinivalue_line(
        "markers", "cli_behavior: CLI interface tests"
    )

    _collector.start_time = datetime.now()
    ensure_results_dir()


def pytest_runtest_logreport(report):
    """Called after each test phase."""
    if report.when == "call":  # Only record the actual test call
        _collector.add_result(
            nodeid=report.nodeid,
            outcome=report.outcome,
            duration=report.duration,
            message=str(report.longrepr) if report.longrepr else "",
        )


def pytest_sessionfinish(session, exitstatus):
    """Called after all tests complete."""
    _collector.end_time = datetime.now()

    report = generate_formatted_report(_collector)
    save_report(report)
    print_summary(_collector)


def generate_formatted_report(collector: ResultCollector) -> str:
    """Generate a formatted test report."""
    lines = []

    lines.append("=" * 80)
    lines.append("VIBE HUNT - TEST RESULTS REPORT")
    lines.append("=" * 80)
    lines.append("")

    lines.append(f"Run Date:     {collector.start_time.strftime('%Y-%m-%d %H:%M:%S')}")
    if collector.end_time:
        duration = (collector.end_time - collector.start_time).total_seconds()
        lines.append(f"Duration:     {duration:.2f} seconds")
    lines.append("")

    summary = collector.get_summary()
    lines.append("-" * 40)
    lines.append("SUMMARY")
    lines.append("-" * 40)
    lines.append(f"Total Tests:  {summary['total']}")
    lines.append(f"Passed:       {summary['passed']} ✓")
    lines.append(f"Failed:       {summary['failed']} ✗")
    lines.append(f"Skipped:      {summary['skipped']} ○")
    lines.append(f"Pass Rate:    {(summary['passed'] / max(summary['total'], 1) * 100):.1f}%")
    lines.append("")

    lines.append("=" * 80)
    lines.append("RESULTS BY CATEGORY")
    lines.append("=" * 80)

    for category, results in sorted(collector.categories.items()):
        cat_info = TEST_CATEGORIES.get(category, {
            "name": category.replace("_", " ").title(),
            "description": "Test category",
            "protects_against": [],
        })

        passed = sum(1 for r in results if r["outcome"] == "passed")
        failed = sum(1 for r in results if r["outcome"] == "failed")

        lines.append("")
        lines.append(f"{cat_info['name']} - {cat_info['description']}")
        lines.append(f"  Tests: {passed} passed, {failed} failed")

        if cat_info.get("protects_against"):
            lines.append("  Protects Against:")
            for protection in cat_info["protects_against"]:
                lines.append(f"    • {protection}")

        for result in results:
            status = "✓" if result["outcome"] == "passed" else "✗" if result["outcome"] == "failed" else "○"
            duration_str = f"({result['duration']*1000:.0f}ms)"
            lines.append(f"    {status} {result['name']:<55} {duration_str:>10}")

            if result["outcome"] == "failed" and result["message"]:
                for msg_line in result["message"].split("\n")[:3]:
                    if msg_line.strip():
                        lines.append(f"      └─ {msg_line[:70]}")

    lines.append("")
    lines.append("=" * 80)
    lines.append("END OF REPORT")
    lines.append("=" * 80)

    return "\n".join(lines)


def save_report(report: str):
    """Save report to timestamped file."""
    filepath = RESULTS_DIR / get_result_filename()

    with open(filepath, "w") as f:
        f.write(report)

    print(f"\n📄 Test results saved to: {filepath}")


def print_summary(collector: ResultCollector):
    """Print summary to console."""
    summary = collector.get_summary()

    print("\n" + "=" * 60)
    print("TEST RUN COMPLETE")
    print("=" * 60)
    print(f"Total: {summary['total']} | Passed: {summary['passed']} | Failed: {summary['failed']} | Skipped: {summary['skipped']}")
    print("=" * 60)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def sample_idea_payload():
    """Provide a single idea object as served by the API."""
    return get_sample_idea(0)


@pytest.fixture
def sample_idea_payloads():
    """Provide the list response of GET /api/ideas."""
    return get_all_sample_ideas()


@pytest.fixture
def test_data():
    """Provide access to test data."""
    return TEST_DATA


@pytest.fixture
def messages():
    """Provide access to expected messages."""
    return MESSAGES


@pytest.fixture
def mock_api():
    """Provide an empty in-memory API."""
    from src.api.mock import MockIdeaBoardAPI
    return MockIdeaBoardAPI()


@pytest.fixture
def seeded_api():
    """In-memory API with two ideas; the first one has no comments."""
    from src.api.mock import MockIdeaBoardAPI

    api = MockIdeaBoardAPI()
    api.seed_idea("Standup summarizer", "Digest async standups", tags=["AI"], votes=3)
    api.seed_idea("Plant reminders", "Watering schedules", votes=1)
    return api


@pytest.fixture
def stub_api():
    """Provide a Mock constrained to the IdeaBoardAPI interface."""
    from src.api.base import IdeaBoardAPI

    api = Mock(spec=IdeaBoardAPI)
    api.name = "stub"
    api.list_ideas.return_value = []
    api.get_comments.return_value = []
    return api


def make_response(json_data=None, json_error: Exception = None) -> Mock:
    """Build a fake requests.Response whose json() returns or raises."""
    response = Mock()
    response.status_code = 200
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def response_factory():
    """Provide make_response to tests that patch requests."""
    return make_response
