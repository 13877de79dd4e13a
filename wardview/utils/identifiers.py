"""
Sequential record identifiers of the form {PREFIX}{zero-padded number}
"""
import re
from typing import Iterable


def next_sequential_id(existing_ids: Iterable[str], prefix: str, width: int = 3) -> str:
    """Next id after the highest existing id carrying this prefix.

    Ids with a different prefix or a non-numeric suffix are ignored, so the
    result never collides with an existing id and increases monotonically
    per prefix.  APT049 -> APT050, APT999 -> APT1000.
    """
    pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
    highest = 0
    for record_id in existing_ids:
        match = pattern.match(str(record_id or ""))
        if match:
            highest = max(highest, int(match.group(1)))

    return f"{prefix}{str(highest + 1).zfill(width)}"
