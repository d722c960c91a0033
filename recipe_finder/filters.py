"""
Filter editor: draft vs. applied filter state for text search.

The user edits a *draft* FilterState (diet buttons, intolerance checkboxes, ready-in
options). Nothing changes for the search until they press Apply, which copies the draft
into the *applied* state and notifies the coordinator.

Two kinds of action apply instantly instead:
- Clear resets both draft and applied state to the empty filter
- Removing a single badge (diet, one intolerance, or the time limit) from the
  active-filter summary drops just that constraint
"""

import logging
from typing import Callable, List, NamedTuple, Optional

from .models import Diet, FilterState, Intolerance

logger = logging.getLogger(__name__)

ApplyCallback = Callable[[FilterState], None]


class FilterBadge(NamedTuple):
    """One removable entry in the active-filter summary."""
    kind: str  # "diet", "intolerance" or "time"
    value: object
    label: str


class FilterEditor:
    """
    Holds the draft and applied filters.

    Args:
        on_apply: Called with the applied FilterState after every applying action
        initial: Starting applied state (defaults to the empty filter)
    """

    def __init__(self, on_apply: Optional[ApplyCallback] = None, initial: Optional[FilterState] = None):
        self._on_apply = on_apply
        self.applied = initial or FilterState.empty()
        self.draft = self.applied

    def bind(self, on_apply: ApplyCallback) -> None:
        self._on_apply = on_apply

    # Draft edits (no effect on search until apply())

    def set_diet(self, diet: Diet) -> None:
        self.draft = self.draft.with_diet(Diet(diet))

    def toggle_intolerance(self, value: Intolerance) -> None:
        self.draft = self.draft.with_intolerance_toggled(Intolerance(value))

    def set_max_ready_time(self, minutes: Optional[int]) -> None:
        self.draft = self.draft.with_max_ready_time(minutes)

    def replace_draft(self, draft: FilterState) -> None:
        self.draft = draft

    def reset_draft(self) -> None:
        """Discard unapplied edits."""
        self.draft = self.applied

    @property
    def has_pending_changes(self) -> bool:
        return self.draft != self.applied

    # Applying actions

    def apply(self) -> None:
        """Make the draft the applied filter."""
        self._set_applied(self.draft)

    def clear(self) -> None:
        """Reset draft and applied state to the empty filter, applying immediately."""
        self._set_applied(FilterState.empty())

    def remove_diet(self) -> None:
        self._set_applied(self.applied.with_diet(Diet.NONE))

    def remove_intolerance(self, value: Intolerance) -> None:
        self._set_applied(self.applied.without_intolerance(value))

    def remove_max_ready_time(self) -> None:
        self._set_applied(self.applied.with_max_ready_time(None))

    def remove_badge(self, badge: FilterBadge) -> None:
        if badge.kind == "diet":
            self.remove_diet()
        elif badge.kind == "intolerance":
            self.remove_intolerance(badge.value)
        elif badge.kind == "time":
            self.remove_max_ready_time()
        else:
            raise ValueError(f"Unknown filter badge kind: {badge.kind!r}")

    def badges(self) -> List[FilterBadge]:
        """
        Active-filter summary entries for the applied state.

        Returns:
            Badges in display order: diet, intolerances (enumeration order), time limit
        """
        applied = self.applied
        badges: List[FilterBadge] = []
        if applied.diet is not Diet.NONE:
            badges.append(FilterBadge("diet", applied.diet, applied.diet.label))
        for intolerance in applied.sorted_intolerances():
            badges.append(FilterBadge("intolerance", intolerance, intolerance.label))
        if applied.max_ready_time is not None:
            badges.append(FilterBadge(
                "time",
                applied.max_ready_time,
                f"Ready in {applied.max_ready_time} min or less",
            ))
        return badges

    def _set_applied(self, filters: FilterState) -> None:
        # The draft always follows the applied state after an applying action
        self.draft = filters
        self.applied = filters
        logger.debug("Filters applied: %s", filters.to_dict())
        if self._on_apply is not None:
            self._on_apply(filters)

