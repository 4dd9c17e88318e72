# normalize/schema.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional

# One extracted table row: column key -> inches (None when the cell had no digits).
DataRow = Dict[str, Optional[int]]


@dataclass
class ExtractionResult:
    labels: List[str] = field(default_factory=list)     # header text as shown on the page
    keys: List[str] = field(default_factory=list)       # slugified labels, same order
    rows: List[DataRow] = field(default_factory=list)
    key_index: Dict[str, int] = field(default_factory=dict)  # key -> column position

    def is_empty(self) -> bool:
        return not self.keys and not self.rows

    def to_dict(self) -> Dict[str, list]:
        """Wire form returned by the API; `key_index` stays server side."""
        return {
            "labels": list(self.labels),
            "keys": list(self.keys),
            "rows": [dict(row) for row in self.rows],
        }
