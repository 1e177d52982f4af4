from dataclasses import dataclass
from datetime import datetime
from typing import Tuple


@dataclass
class AuditEntry:
    timestamp: datetime
    action: str              # "book", "book_failed", "randomize", "reset"
    detail: str
    room_numbers: Tuple[int, ...] = ()
    available_after: int = 0
