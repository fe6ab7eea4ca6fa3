# -*- coding: utf-8 -*-
"""
Working Record - in-memory accumulation of every collected field value.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Union

RecordValue = Optional[Union[str, int]]


@dataclass
class WorkingRecord:
    """
    Flat mapping of field id to collected value (str, int or None).

    Values are merged one step at a time; a key is only replaced when the
    step that owns it is collected again.
    """

    values: Dict[str, RecordValue] = field(default_factory=dict)

    def merge(self, partial: Mapping[str, RecordValue]):
        """Merge a partial record produced by collecting one step."""
        self.values.update(partial)

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def text(self, key: str) -> str:
        """Trimmed string form of a value; empty string for missing/None."""
        value = self.values.get(key)
        if value is None:
            return ""
        return str(value).strip()

    def has_text(self, key: str) -> bool:
        return bool(self.text(key))

    def snapshot(self) -> Dict[str, RecordValue]:
        """Shallow copy of the current values."""
        return dict(self.values)

    def clear(self):
        self.values.clear()

    def __contains__(self, key: str) -> bool:
        return key in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)
