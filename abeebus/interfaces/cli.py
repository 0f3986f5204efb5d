"""
Command-line interface for Abeebus
"""

import argparse
import logging
from typing import List, Optional

from abeebus import __version__
from abeebus.core.config import Config
from abeebus.core.exceptions import (
    AbeebusError, ConfigurationError, CredentialError, OutputWriteError, UsageError
)
from abeebus.core.models import Notice, Severity
from abeebus.interfaces.console import Console
from abeebus.services.counter import tally_addresses
from abeebus.services.extraction import AddressExtractor
from abeebus.services.geoip_lookup import IPInfoLookupService
from abeebus.services.report import build_report, write_report
from abeebus.utils.files import expand_paths

logger = logging.getLogger(__name__)

DESCRIPTION = f"""\
Abeebus version {__version__}
Parses publicly routable IPv4 addresses from specified file(s) and obtains
GeoIP information from IPinfo.io"""

EXAMPLES = """\
examples:
  abeebus file1.txt
  abeebus *.csv
  abeebus /var/log/
  abeebus file1.txt file2.txt -w out.csv
  abeebus file1.txt file2.txt -w ~/Desktop/out.csv -a TOKEN"""

class UsageParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting"""

    def error(self, message):
        raise UsageError(message)

class CLI:
    """Command-line interface for Abeebus"""

    def __init__(self, config: Config, console: Optional[Console] = None):
        """
        Initialize CLI

        Args:
            config: Configuration object
            console: Console to render to (defaults to stdout/stderr)
        """
        self.config = config
        self.console = console or Console(monochrome=config.monochrome)
        self.extractor = AddressExtractor(chunk_size=config.chunk_size)

    def run(self, args: List[str]) -> int:
        """
        Run CLI with arguments

        Args:
            args: Command-line arguments

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        parser = self._create_parser()
        try:
            parsed_args = parser.parse_intermixed_args(args)
            if parsed_args.help:
                parser.print_help(self.console.out)
                return 0
            if parsed_args.version:
                self.console.write(f"Abeebus version {__version__}\n")
                return 0
            if not parsed_args.files:
                raise UsageError("at least one filename is required")
            # argparse accepts values such as "-5" as negative numbers
            for value in (parsed_args.write, parsed_args.token):
                if value is not None and value.startswith("-"):
                    raise UsageError(f"expected a value, got option-like argument: {value}")
        except UsageError as e:
            logger.debug(f"Usage error: {e}")
            parser.print_help(self.console.out)
            return 1

        if parsed_args.monochrome:
            self.config.monochrome = True
            self.console.monochrome = True

        try:
            return self._run_report(parsed_args.files, parsed_args.write, parsed_args.token)
        except (CredentialError, OutputWriteError) as e:
            self.console.notify(Notice(f"\n{e}", Severity.ERROR))
            return 1
        except ConfigurationError as e:
            self.console.notify(Notice(f"Configuration error: {e}", Severity.ERROR))
            return 1
        except AbeebusError as e:
            self.console.notify(Notice(f"Error: {e}", Severity.ERROR))
            return 1

    def _create_parser(self) -> argparse.ArgumentParser:
        """
        Create argument parser

        Every option takes exactly one value or is a bare switch; anything
        malformed surfaces as a UsageError.

        Returns:
            Configured argument parser
        """
        parser = UsageParser(
            prog="abeebus",
            description=DESCRIPTION,
            epilog=EXAMPLES,
            formatter_class=argparse.RawDescriptionHelpFormatter,
            add_help=False,
        )

        parser.add_argument("-w", "--write", metavar="<filename>",
                            help="Write the results to the specified file (if omitted, results will be displayed in the console)")
        parser.add_argument("-a", "--token", metavar="<apiToken>",
                            help="Specify an IPinfo.io API token (NOT required)")
        parser.add_argument("-m", "--monochrome", action="store_true", help="Disable colored output")
        parser.add_argument("-v", "--verbose", action="store_true", help="Enable (and log to a file) debug messages")
        parser.add_argument("--config", metavar="<file>", help="Path to configuration file (YAML)")
        parser.add_argument("--version", action="store_true", help="Show version information")
        parser.add_argument("-h", "--help", action="store_true", help="Show this help message")

        parser.add_argument("files", nargs="*", help="Files, wildcard patterns (* and ?) or directories to scan")

        return parser

    def _run_report(self, files: List[str], outfile: Optional[str], token: Optional[str]) -> int:
        """
        Extract, count, look up and report

        Args:
            files: Paths from the command line
            outfile: Destination file, or None for the console table
            token: API token from the command line

        Returns:
            Exit code (0 for success)

        Raises:
            CredentialError: If lookups fail while a token is in use
            OutputWriteError: If the report file cannot be written
        """
        console = self.console
        spinner = console.spinner(self.config.spinner_interval)

        def notify(notice):
            spinner.clear()
            console.notify(notice)

        console.write("\nReading File:\n")
        addresses = self.extractor.extract_from_files(expand_paths(files), notify, spinner.tick)
        spinner.clear()

        tally = tally_addresses(addresses)
        logger.debug(f"{tally.total} addresses extracted, {len(tally.unique)} unique")

        if tally.unique:
            console.write("\n\nGetting Results:\n\n")

        service = IPInfoLookupService(self.config, token=token)
        try:
            records = service.resolve_all(tally.unique, console.notify, console.progress_bar().update)
        finally:
            service.close()

        report = build_report(records, tally)

        if outfile and report.rows:
            write_report(report, outfile)
            console.notify(Notice(f"\nResults written to: {outfile}", Severity.SUCCESS))
            return 0

        console.print_summary(report)
        if report.rows:
            console.print_table(report)
        return 0
