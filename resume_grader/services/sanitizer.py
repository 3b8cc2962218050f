import logging
import re
from typing import List, Optional

from ..schemas.pydantic import GradeResult

logger = logging.getLogger(__name__)

GMAIL_PATTERN = re.compile(r"gmail", re.IGNORECASE)
HOTMAIL_PATTERN = re.compile(r"hotmail", re.IGNORECASE)


def is_gmail_flag(flag: str) -> bool:
    """A flag about Gmail that is not a "prefer Gmail over Hotmail" remark."""
    return bool(GMAIL_PATTERN.search(flag)) and not HOTMAIL_PATTERN.search(flag)


def _first_gmail_index(flags: List[str]) -> Optional[int]:
    for idx, flag in enumerate(flags):
        if is_gmail_flag(flag):
            return idx
    return None


def _without_first_gmail_flag(flags: List[str]) -> List[str]:
    remaining = list(flags)
    idx = _first_gmail_index(remaining)
    if idx is not None:
        del remaining[idx]
    return remaining


def sanitize_grade(result: GradeResult) -> GradeResult:
    """
    Drop the first Gmail complaint from each flag list.

    The model occasionally tells users to stop using Gmail even though the
    rubric says not to. Flags that also mention Hotmail are kept, since
    those recommend Gmail rather than criticise it. Only one entry per list
    is removed per call; a new GradeResult is returned.
    """
    red_flags = _without_first_gmail_flag(result.red_flags)
    yellow_flags = _without_first_gmail_flag(result.yellow_flags)

    removed = (len(result.red_flags) - len(red_flags)) + (len(result.yellow_flags) - len(yellow_flags))
    if removed:
        logger.info(f"Removed {removed} Gmail flag(s) from grade result")

    return result.model_copy(update={"red_flags": red_flags, "yellow_flags": yellow_flags})
