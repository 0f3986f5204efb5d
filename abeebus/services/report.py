"""
Report assembly and file output
"""

import logging
from pathlib import Path
from typing import Mapping, Union

from abeebus.core.exceptions import DataParsingError, OutputWriteError
from abeebus.core.models import AddressTally, GeoRecord, Report, ReportRow, REPORT_HEADER

logger = logging.getLogger(__name__)

def build_report(records: Mapping[str, GeoRecord], tally: AddressTally) -> Report:
    """
    Pair each resolved address with its count and sort by count

    Args:
        records: GeoRecords keyed by the address as extracted
        tally: Occurrence counts for the same addresses

    Returns:
        Report with rows in descending count order, ties in arrival order
    """
    rows = [ReportRow(record, tally.counts[address]) for address, record in records.items()]
    rows.sort(key=lambda row: row.count, reverse=True)
    return Report(rows=rows)

def write_report(report: Report, path: Union[str, Path]) -> None:
    """
    Write the report as comma-separated lines

    Raises:
        OutputWriteError: If the file cannot be written
    """
    try:
        with open(path, 'w', encoding='utf-8', newline='') as f:
            for line in report.lines():
                f.write(line + "\n")
    except OSError as e:
        logger.debug(f"Writing {path} failed: {e}")
        raise OutputWriteError(path)

def read_report(path: Union[str, Path]) -> Report:
    """
    Read a report previously written by write_report

    Raises:
        DataParsingError: If the header or a row has the wrong shape
    """
    with open(path, 'r', encoding='utf-8') as f:
        lines = f.read().splitlines()

    if not lines or tuple(lines[0].split(",")) != REPORT_HEADER:
        raise DataParsingError(f"Missing report header in {path}", str(path))

    rows = []
    for number, line in enumerate(lines[1:], start=2):
        cells = line.split(",")
        if len(cells) != len(REPORT_HEADER):
            raise DataParsingError(f"Line {number} of {path} has {len(cells)} fields", str(path))
        try:
            count = int(cells[9])
        except ValueError:
            raise DataParsingError(f"Invalid count value on line {number}: {cells[9]}", str(path))
        record = GeoRecord(*cells[:9])
        rows.append(ReportRow(record, count))

    return Report(rows=rows)
