"""
Recipient admission: syntactic validation and de-duplication.

Admission is lenient. Invalid and duplicate candidates are dropped rather
than failing the whole batch.
"""

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(address: str) -> bool:
    """
    Check that an address has a local part, an "@" and a dotted domain.

    Examples:
        >>> is_valid_email('bob@x.com')
        True
        >>> is_valid_email('bob@localhost')
        False
    """
    return bool(address) and EMAIL_PATTERN.match(address) is not None


@dataclass(frozen=True)
class AdmissionResult:
    admitted: Tuple[str, ...]
    rejected: Tuple[str, ...]


def admit_recipients(candidates: Optional[Iterable[str]]) -> AdmissionResult:
    """
    Validate and de-duplicate recipient candidates, keeping first-seen order.

    Candidates are stripped before validation. Exact duplicates of an admitted
    address are dropped without being reported as rejected.
    """
    admitted = []
    rejected = []
    seen = set()

    for candidate in candidates or ():
        address = candidate.strip() if isinstance(candidate, str) else ""
        if not is_valid_email(address):
            rejected.append(candidate)
            continue
        if address in seen:
            continue
        seen.add(address)
        admitted.append(address)

    if rejected:
        logger.debug(f"Dropped {len(rejected)} invalid recipient(s)")

    return AdmissionResult(admitted=tuple(admitted), rejected=tuple(rejected))
