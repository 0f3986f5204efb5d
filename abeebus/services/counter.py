"""
Deduplication and occurrence counting
"""

from collections import Counter
from typing import Iterable

from abeebus.core.models import AddressTally

def tally_addresses(addresses: Iterable[str]) -> AddressTally:
    """
    Count every address and list the unique ones in first-seen order

    Args:
        addresses: Extracted addresses, duplicates included

    Returns:
        AddressTally over the full sequence
    """
    addresses = list(addresses)
    return AddressTally(
        counts=dict(Counter(addresses)),
        unique=list(dict.fromkeys(addresses)),
    )
