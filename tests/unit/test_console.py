"""
Unit tests for console rendering
"""

import io
import unittest

from abeebus.core.models import GeoRecord, Notice, Report, ReportRow, Severity
from abeebus.interfaces.console import Colors, Console, ProgressBar, Spinner

class TestConsole(unittest.TestCase):
    """Test Console class"""

    def setUp(self):
        self.out = io.StringIO()
        self.err = io.StringIO()
        self.console = Console(monochrome=True, out=self.out, err=self.err)

    def test_notices_routed_by_severity(self):
        """Test errors go to stderr and everything else to stdout"""
        self.console.notify(Notice("reading", Severity.SUCCESS))
        self.console.notify(Notice("broken", Severity.ERROR))

        self.assertEqual(self.out.getvalue(), "\nreading")
        self.assertEqual(self.err.getvalue(), "\nbroken")

    def test_colors(self):
        """Test colored output unless monochrome"""
        console = Console(out=self.out, err=self.err)
        console.notify(Notice("found", Severity.HIGHLIGHT))

        self.assertEqual(self.out.getvalue(), f"{Colors.MAGENTA}\nfound{Colors.RESET}")

    def test_print_table(self):
        """Test column widths include the header"""
        report = Report(rows=[
            ReportRow(GeoRecord.from_api({"ip": "8.8.8.8", "hostname": "dns.google"}), 12),
            ReportRow(GeoRecord.from_api({"ip": "1.1.1.1", "hostname": "one.one.one.one"}), 3),
        ])
        self.console.print_table(report)

        lines = self.out.getvalue().strip("\n").splitlines()
        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[0].startswith("IP Address | Hostname        | Country |"))
        self.assertTrue(lines[1].startswith("8.8.8.8    | dns.google      | N/A     |"))
        self.assertTrue(lines[2].endswith("| N/A | 3    "))
        self.assertEqual(len({len(line) for line in lines}), 1)

    def test_summary(self):
        """Test singular, plural and empty summaries"""
        row = ReportRow(GeoRecord(), 1)

        self.console.print_summary(Report(rows=[row]))
        self.assertIn("1 unique IP address found.", self.out.getvalue())

        self.console.print_summary(Report(rows=[row, row]))
        self.assertIn("2 unique IP addresses found.", self.out.getvalue())

        self.console.print_summary(Report())
        self.assertIn("No results found!", self.err.getvalue())

class TestSpinner(unittest.TestCase):
    """Test Spinner class"""

    def setUp(self):
        self.out = io.StringIO()
        self.now = 0.0
        self.spinner = Spinner(Console(monochrome=True, out=self.out), interval=0.1, clock=lambda: self.now)

    def test_tick_rate_limited(self):
        """Test frames advance only once per interval"""
        self.spinner.tick()
        self.spinner.tick()
        self.now = 0.2
        self.spinner.tick()

        self.assertEqual(self.out.getvalue(), "  |\b/")

    def test_clear(self):
        """Test clear erases a visible cursor and its gap only"""
        self.spinner.clear()
        self.assertEqual(self.out.getvalue(), "")

        self.spinner.tick()
        self.spinner.clear()
        self.assertEqual(self.out.getvalue(), "  |\b\b\b   \b\b\b")

class TestProgressBar(unittest.TestCase):
    """Test ProgressBar class"""

    def test_render(self):
        """Test the bar fill and percentage"""
        bar = ProgressBar(Console(monochrome=True, out=io.StringIO()))

        text, done = bar.render(1, 4)
        self.assertEqual(text, "[" + "█" * 12 + "." * 38 + "] 25.0%")
        self.assertEqual(done, "")

        text, done = bar.render(3, 3)
        self.assertEqual(text, "[" + "█" * 50 + "] 100.0%")
        self.assertEqual(done, " Done!")

if __name__ == "__main__":
    unittest.main()
