#!/usr/bin/env python3
"""
Abeebus - GeoIP report for the public IPv4 addresses found in text files

Scans files for publicly routable IPv4 addresses, counts them, looks each
unique address up on IPinfo.io and prints or writes a table sorted by count.
"""

import logging
import sys
from pathlib import Path

from colorama import init as colorama_init

from abeebus.core.config import Config
from abeebus.core.exceptions import ConfigurationError, UsageError
from abeebus.interfaces.cli import CLI, UsageParser

def main(argv=None):
    """Main entry point for Abeebus"""
    argv = sys.argv[1:] if argv is None else argv

    # Parse just the settings needed before the CLI is built
    parser = UsageParser(add_help=False)
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--config", type=str)
    try:
        args, _ = parser.parse_known_args(argv)
        verbose, config_file = args.verbose, args.config
    except UsageError:
        # The full parser in CLI.run reports it
        verbose, config_file = False, None

    # Setup configuration
    config_path = Path(config_file) if config_file else None
    try:
        config = Config(config_path, debug=verbose)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    # Setup logging
    if config.debug:
        config.ensure_directories()
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            handlers=[
                logging.FileHandler(config.log_file),
                logging.StreamHandler()
            ]
        )
    else:
        logging.basicConfig(
            level=logging.WARNING,
            format="%(asctime)s - %(levelname)s - %(message)s"
        )

    # Cross-platform color support
    colorama_init()

    cli = CLI(config)
    return cli.run(argv)

if __name__ == "__main__":
    sys.exit(main())
