"""Token statistics collected while prettifying a document."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict

import pandas as pd


@dataclass
class TokenStats:
    """Container for token statistics."""

    total_lines: int = 0
    resolved_codes: int = 0
    formatted_datetimes: int = 0
    unresolved_codes: Counter = field(default_factory=Counter)
    unparsed_datetimes: Counter = field(default_factory=Counter)

    def record_code(self, code: str, resolved: bool) -> None:
        if resolved:
            self.resolved_codes += 1
        else:
            self.unresolved_codes[code] += 1

    def record_datetime(self, value: str, parsed: bool) -> None:
        if parsed:
            self.formatted_datetimes += 1
        else:
            self.unparsed_datetimes[value] += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total_lines": self.total_lines,
            "resolved_codes": self.resolved_codes,
            "formatted_datetimes": self.formatted_datetimes,
            "unresolved_codes": dict(self.unresolved_codes),
            "unparsed_datetimes": dict(self.unparsed_datetimes),
        }

    def unresolved_dataframe(self) -> pd.DataFrame:
        """Return unresolved codes and unparsable timestamps, most frequent first."""
        rows = [
            {"token": "code", "value": k, "count": v}
            for k, v in self.unresolved_codes.items()
        ] + [
            {"token": "datetime", "value": k, "count": v}
            for k, v in self.unparsed_datetimes.items()
        ]
        if not rows:
            return pd.DataFrame(columns=["token", "value", "count"])
        df = pd.DataFrame(rows)
        return df.sort_values(["count", "value"], ascending=[False, True]).reset_index(drop=True)
