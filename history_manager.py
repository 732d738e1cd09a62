"""
History Manager for DarkCalc
Keeps a bounded, most-recent-first log of completed calculations
"""
from collections import deque
from dataclasses import dataclass

import config


@dataclass(frozen=True)
class HistoryEntry:
    expression: str
    result: str


class HistoryLog:
    def __init__(self, capacity=config.MAX_HISTORY_ITEMS):
        if capacity < 1:
            raise ValueError("history capacity must be at least 1")
        self.capacity = capacity
        # appendleft on a full deque drops the rightmost (oldest) entry
        self._entries = deque(maxlen=capacity)

    def record(self, expression, result):
        """Add a calculation to the front of the history"""
        entry = HistoryEntry(expression, result)
        self._entries.appendleft(entry)
        return entry

    def clear(self):
        """Clear all calculation history"""
        self._entries.clear()

    def entries(self):
        """Get calculation history, most recent first"""
        return list(self._entries)

    def format_entries(self):
        """Format calculation history for display"""
        return [f"{entry.expression} = {entry.result}" for entry in self._entries]

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)
