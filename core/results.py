"""
Shared shape for check results: blocking errors plus informational warnings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple


@dataclass
class CheckResult:
    """Collects errors (blocking) and warnings (informational)."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def _sections(self) -> Sequence[Tuple[str, str, List[str]]]:
        return (
            ("ERRORS", "✗", self.errors),
            ("WARNINGS", "⚠", self.warnings),
        )

    def summary(self) -> str:
        lines = []
        for title, marker, items in self._sections():
            if not items:
                continue
            lines.append(f"{title} ({len(items)}):")
            for item in items:
                lines.append(f"  {marker} {item}")
        if not lines:
            lines.append("✓ All checks passed.")
        return "\n".join(lines)
