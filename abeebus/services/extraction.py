"""
Address extraction from input files
"""

import logging
import os
import re
from typing import Callable, Iterable, List, Optional, TextIO

from abeebus.core.exceptions import FileAccessError
from abeebus.core.models import Notice, Severity
from abeebus.utils.network import NetworkUtils

logger = logging.getLogger(__name__)

# Last character that cannot belong to a dotted quad
_LAST_SEPARATOR = re.compile(r'[^0-9.][0-9.]*\Z')

NoticeCallback = Callable[[Notice], None]
ChunkCallback = Callable[[], None]

class AddressExtractor:
    """Scans text files for publicly routable IPv4 addresses"""

    def __init__(self, chunk_size: int = 16384):
        """
        Initialize the extractor

        Args:
            chunk_size: Number of characters read per chunk
        """
        self.chunk_size = chunk_size

    def extract_from_stream(self, stream: TextIO, on_chunk: Optional[ChunkCallback] = None) -> List[str]:
        """
        Extract addresses from a text stream read in chunks

        The trailing run of digits and dots of each chunk, together with the
        character in front of it, is held back and scanned with the next
        chunk, so an address split across chunks is found exactly once.

        Args:
            stream: Text stream to read
            on_chunk: Called after every chunk is read

        Returns:
            Addresses in order of appearance
        """
        addresses = []
        carry = ""
        chunks = 0

        while True:
            chunk = stream.read(self.chunk_size)
            if not chunk:
                break
            chunks += 1

            buffer = carry + chunk
            match = _LAST_SEPARATOR.search(buffer)
            if match:
                cut = match.start()
                addresses.extend(NetworkUtils.extract_ipv4_addresses(buffer[:cut + 1]))
                carry = buffer[cut:]
            else:
                carry = buffer

            if on_chunk:
                on_chunk()

        if carry:
            addresses.extend(NetworkUtils.extract_ipv4_addresses(carry))

        logger.debug(f"Scanned {chunks} chunks, found {len(addresses)} addresses")
        return addresses

    def extract_from_file(self, path: str, on_chunk: Optional[ChunkCallback] = None) -> List[str]:
        """
        Extract addresses from one file

        Args:
            path: File to scan
            on_chunk: Called after every chunk is read

        Returns:
            Addresses in order of appearance

        Raises:
            FileAccessError: If the file cannot be opened or read
        """
        try:
            with open(path, 'r', encoding='utf-8', errors='replace') as f:
                return self.extract_from_stream(f, on_chunk)
        except OSError as e:
            logger.debug(f"Could not read {path}: {e}")
            raise FileAccessError(path, e)

    def extract_from_files(
        self,
        paths: Iterable[str],
        notify: NoticeCallback,
        on_chunk: Optional[ChunkCallback] = None,
    ) -> List[str]:
        """
        Extract addresses from every file, skipping unreadable ones

        Args:
            paths: Files to scan, already expanded
            notify: Receives a notice per file and per failure
            on_chunk: Called after every chunk is read

        Returns:
            Addresses from all files in order of appearance
        """
        addresses = []
        for path in paths:
            try:
                size = os.path.getsize(path)
            except OSError as e:
                notify(Notice(str(FileAccessError(path, e)), Severity.ERROR))
                continue

            notify(Notice(f"{path} ({size:,} bytes)", Severity.SUCCESS))

            try:
                addresses.extend(self.extract_from_file(path, on_chunk))
            except FileAccessError as e:
                notify(Notice(str(e), Severity.ERROR))

        return addresses
