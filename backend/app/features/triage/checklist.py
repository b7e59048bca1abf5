# backend/app/features/triage/checklist.py
"""Completion tracking for an action plan.

The plan itself is immutable; which items the user ticked off belongs to
whoever is displaying it.
"""

from typing import Dict, Set

from backend.app.core import ValidationError
from .models import ActionPlan, Priority


class ChecklistProgress:
    """Set of completed item ids for one displayed plan."""

    def __init__(self, plan: ActionPlan) -> None:
        self.plan = plan
        self._known = {item.id for _, item in plan.items()}
        self._checked: Set[str] = set()

    def _require_known(self, item_id: str) -> None:
        if item_id not in self._known:
            raise ValidationError(
                f"Unknown action item '{item_id}'",
                details={"item_id": item_id},
            )

    def check(self, item_id: str) -> None:
        """Mark an item completed. Checking it again changes nothing."""
        self._require_known(item_id)
        self._checked.add(item_id)

    def toggle(self, item_id: str) -> bool:
        """Flip an item and return its new state."""
        self._require_known(item_id)
        if item_id in self._checked:
            self._checked.remove(item_id)
            return False
        self._checked.add(item_id)
        return True

    def is_checked(self, item_id: str) -> bool:
        return item_id in self._checked

    def completed(self, priority: Priority) -> int:
        return sum(1 for item in self.plan.bucket(priority) if item.id in self._checked)

    def by_bucket(self) -> Dict[str, str]:
        """``{"now": "1/3", ...}`` as shown in each section header."""
        return {
            p.value: f"{self.completed(p)}/{len(self.plan.bucket(p))}" for p in Priority
        }

    @property
    def total_completed(self) -> int:
        return len(self._checked)

    @property
    def ratio(self) -> float:
        if self.plan.total == 0:
            return 0.0
        return self.total_completed / self.plan.total
