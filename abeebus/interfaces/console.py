"""
Console rendering for Abeebus
"""

import sys
import time
from typing import Callable, Optional, TextIO, Tuple

from colorama import Fore, Style

from abeebus.core.models import Notice, Report, Severity

# Console color definitions
class Colors:
    GREEN = Fore.GREEN
    MAGENTA = Fore.MAGENTA
    CYAN = Fore.CYAN
    RED = Fore.RED
    RESET = Style.RESET_ALL

SEVERITY_COLORS = {
    Severity.INFO: "",
    Severity.SUCCESS: Colors.GREEN,
    Severity.HIGHLIGHT: Colors.MAGENTA,
    Severity.ERROR: Colors.RED,
}

class Console:
    """Writes notices, progress and tables to the terminal"""

    def __init__(self, monochrome: bool = False, out: Optional[TextIO] = None, err: Optional[TextIO] = None):
        self.monochrome = monochrome
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def style(self, text: str, color: str) -> str:
        if self.monochrome or not color:
            return text
        return f"{color}{text}{Colors.RESET}"

    def write(self, text: str, color: str = "", stream: Optional[TextIO] = None):
        stream = stream or self.out
        stream.write(self.style(text, color))
        stream.flush()

    def notify(self, notice: Notice):
        """Print a notice on its own line, errors to stderr"""
        stream = self.err if notice.severity is Severity.ERROR else self.out
        self.write(f"\n{notice.text}", SEVERITY_COLORS[notice.severity], stream)

    def print_table(self, report: Report):
        """
        Print the report as a padded table with a highlighted header

        Args:
            report: Report to print
        """
        table = report.table()
        widths = [max(len(row[col]) for row in table) for col in range(len(report.header))]

        self.write("\n")
        for index, row in enumerate(table):
            line = " | ".join(cell.ljust(widths[col]) for col, cell in enumerate(row))
            self.write(f"{line}\n", Colors.CYAN if index == 0 else "")

    def print_summary(self, report: Report):
        """Print the unique address count, or the no-results notice"""
        count = len(report.rows)
        if count == 0:
            self.notify(Notice("\nNo results found!", Severity.ERROR))
            return
        noun = "address" if count == 1 else "addresses"
        self.notify(Notice(f"\n{count} unique IP {noun} found.", Severity.HIGHLIGHT))

    def spinner(self, interval: float = 0.1) -> "Spinner":
        return Spinner(self, interval)

    def progress_bar(self) -> "ProgressBar":
        return ProgressBar(self)

class Spinner:
    """Rotating cursor advanced by polling rather than a background thread"""

    FRAMES = ("|", "/", "-", "\\")
    GAP = "  "

    def __init__(self, console: Console, interval: float = 0.1, clock: Callable[[], float] = time.monotonic):
        self.console = console
        self.interval = interval
        self.clock = clock
        self.frame = 0
        self.visible = False
        self.last_tick = None

    def tick(self):
        """Draw the next frame if at least one interval has passed"""
        now = self.clock()
        if self.last_tick is not None and now - self.last_tick < self.interval:
            return
        self.last_tick = now

        prefix = "\b" if self.visible else self.GAP
        self.console.write(prefix + self.FRAMES[self.frame])
        self.frame = (self.frame + 1) % len(self.FRAMES)
        self.visible = True

    def clear(self):
        """Erase the cursor and its leading gap, then reset for the next file"""
        if self.visible:
            width = len(self.GAP) + 1
            self.console.write("\b" * width + " " * width + "\b" * width)
        self.visible = False
        self.last_tick = None

class ProgressBar:
    """Fixed-width lookup progress bar"""

    WIDTH = 50

    def __init__(self, console: Console):
        self.console = console

    def render(self, count: int, total: int) -> Tuple[str, str]:
        filled = int(round(self.WIDTH * count / float(total)))
        percent = round(100.0 * count / total, 1)
        bar = "█" * filled + "." * (self.WIDTH - filled)
        return f"[{bar}] {percent}%", " Done!" if count >= total else ""

    def update(self, count: int, total: int):
        text, done = self.render(count, total)
        if done:
            self.console.write(f"\r{text}{done}", Colors.GREEN)
        else:
            self.console.write(f"\r{text}")
