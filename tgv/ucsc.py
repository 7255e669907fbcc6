"""UCSC public MySQL hosts."""

from __future__ import annotations

from datetime import datetime
from enum import Enum


class UcscHost(Enum):
    """Mirror of the UCSC public database."""

    US = "us"
    EU = "eu"

    def url(self) -> str:
        if self is UcscHost.US:
            return "genome-mysql.soe.ucsc.edu"
        return "genome-euro-mysql.soe.ucsc.edu"

    @classmethod
    def auto(cls) -> "UcscHost":
        """Choose the host based on the local timezone."""
        offset = datetime.now().astimezone().utcoffset()
        seconds = offset.total_seconds() if offset is not None else 0.0
        hours = int(seconds / 3600)
        return cls.US if -12 <= hours <= 0 else cls.EU