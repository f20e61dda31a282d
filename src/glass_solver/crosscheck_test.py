import io

from rich.console import Console
from glass_solver import crosscheck as crosscheck_module
from glass_solver.crosscheck import boundary_targets, crosscheck
from glass_solver.models.report import CrosscheckReport, Mismatch
from glass_solver.ui import get_progress, render_report


class TestBoundaryTargets:
    """Test suite for target enumeration"""

    def test_perimeter(self):
        """Every level pair with a glass empty or full"""
        targets = set(boundary_targets(3, 5))
        assert len(targets) == 16
        assert (1, 0) in targets and (3, 4) in targets
        assert (1, 2) not in targets


class TestCrosscheck:
    """Test suite for the closed-form sweep"""

    def test_sweep_has_no_mismatches(self):
        """The closed form agrees with search for all pairs up to 20"""
        report = crosscheck(20)
        assert report.pairs == 400
        assert report.compared > 0
        assert report.ok

    def test_reports_mismatches(self, monkeypatch):
        """A wrong answer is recorded with its expected value"""
        monkeypatch.setattr(crosscheck_module, "solve_for_two", lambda a, b, ta, tb: 0)
        report = crosscheck(2)
        assert not report.ok
        assert all(m.actual == 0 and m.expected > 0 for m in report.mismatches)

    def test_missing_closed_form_answer(self, monkeypatch):
        """A closed form with no strategy is a mismatch, not a search fallback"""
        monkeypatch.setattr(crosscheck_module, "solve_for_two", lambda a, b, ta, tb: None)
        report = crosscheck(5)
        assert not report.ok
        assert len(report.mismatches) == report.compared
        assert all(m.actual == -1 and m.expected > 0 for m in report.mismatches)
        assert any((m.a, m.b, m.ta, m.tb, m.expected) == (3, 5, 0, 4, 7) for m in report.mismatches)

    def test_progress_advances(self):
        """The progress task moves once per capacity pair"""
        progress = get_progress(Console(file=io.StringIO()))
        task = progress.add_task("sweep", total=9)
        crosscheck(3, progress=progress, task=task)
        assert progress.tasks[0].completed == 9


class TestRenderReport:
    """Test suite for the report panel"""

    def _render(self, report: CrosscheckReport) -> str:
        console = Console(width=100, record=True, file=io.StringIO())
        console.print(render_report(report))
        return console.export_text()

    def test_clean_report(self):
        """A clean sweep shows zero mismatches"""
        text = self._render(CrosscheckReport(max_capacity=2, pairs=4, compared=3))
        assert "Targets compared" in text
        assert "Mismatches" in text

    def test_mismatch_rows(self):
        """Each mismatch gets its own row"""
        report = CrosscheckReport(
            max_capacity=5,
            pairs=25,
            compared=10,
            mismatches=[Mismatch(a=3, b=5, ta=0, tb=4, expected=7, actual=6)],
        )
        text = self._render(report)
        assert "expected" in text
        assert "7" in text and "6" in text
