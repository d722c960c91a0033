"""
Tests for the filter editor (draft vs. applied filters).
"""

from unittest.mock import Mock

import pytest

from recipe_finder.filters import FilterBadge, FilterEditor
from recipe_finder.models import Diet, FilterState, Intolerance


@pytest.fixture
def on_apply():
    return Mock()


@pytest.fixture
def editor(on_apply):
    return FilterEditor(on_apply=on_apply)


class TestDraftEditing:
    """Draft edits must not touch the applied state."""

    def test_draft_edits_do_not_apply(self, editor, on_apply):
        """Test that editing the draft neither applies nor searches."""
        editor.set_diet(Diet.VEGAN)
        editor.toggle_intolerance(Intolerance.DAIRY)
        editor.set_max_ready_time(30)

        assert editor.applied == FilterState.empty()
        assert editor.has_pending_changes
        on_apply.assert_not_called()

    def test_reset_draft(self, editor):
        """Test that resetting the draft returns it to the applied filters."""
        editor.set_diet(Diet.PALEO)
        editor.reset_draft()
        assert editor.draft == editor.applied
        assert not editor.has_pending_changes

    def test_replace_draft(self, editor):
        """Test that the draft can be replaced wholesale."""
        draft = FilterState(diet=Diet.VEGETARIAN, max_ready_time=15)
        editor.replace_draft(draft)
        assert editor.draft == draft


class TestApplyingActions:
    """Apply, clear and badge removal apply immediately."""

    def test_apply(self, editor, on_apply):
        """Test that apply commits the draft and fires the callback."""
        editor.set_diet(Diet.VEGAN)
        editor.set_max_ready_time(30)
        editor.apply()

        expected = FilterState(diet=Diet.VEGAN, max_ready_time=30)
        assert editor.applied == expected
        assert not editor.has_pending_changes
        on_apply.assert_called_once_with(expected)

    def test_clear_resets_draft_and_applied(self, editor, on_apply):
        """Test that clear empties both draft and applied filters."""
        editor.set_diet(Diet.VEGAN)
        editor.apply()
        editor.toggle_intolerance(Intolerance.EGG)

        editor.clear()

        assert editor.applied == FilterState.empty()
        assert editor.draft == FilterState.empty()
        assert on_apply.call_count == 2

    def test_remove_intolerance_badge(self, editor, on_apply):
        """Test that removing an intolerance badge applies immediately."""
        editor.replace_draft(FilterState(intolerances={Intolerance.DAIRY, Intolerance.GLUTEN}))
        editor.apply()

        editor.remove_badge(FilterBadge("intolerance", Intolerance.DAIRY, "Dairy"))

        assert editor.applied.intolerances == frozenset({Intolerance.GLUTEN})
        on_apply.assert_called_with(editor.applied)

    def test_remove_diet_and_time(self, editor):
        """Test that the diet and time badges can be removed."""
        editor.replace_draft(FilterState(diet=Diet.VEGAN, max_ready_time=60))
        editor.apply()
        editor.remove_diet()
        editor.remove_max_ready_time()
        assert editor.applied.is_empty

    def test_badge_removal_discards_unapplied_draft(self, editor):
        """Test that the draft follows the applied state after an applying action."""
        editor.replace_draft(FilterState(diet=Diet.VEGAN))
        editor.apply()
        editor.set_max_ready_time(15)

        editor.remove_diet()

        assert editor.draft == FilterState.empty()

    def test_unknown_badge_kind(self, editor):
        """Test that an unknown badge kind is rejected."""
        with pytest.raises(ValueError):
            editor.remove_badge(FilterBadge("colour", "red", "Red"))

    def test_bind_replaces_callback(self, editor, on_apply):
        """Test that binding a new callback replaces the old one."""
        other = Mock()
        editor.bind(other)
        editor.apply()
        other.assert_called_once()
        on_apply.assert_not_called()

    def test_works_without_callback(self):
        """Test that applying works with no callback bound."""
        editor = FilterEditor()
        editor.set_diet(Diet.VEGAN)
        editor.apply()
        assert editor.applied.diet is Diet.VEGAN


class TestBadges:

    def test_no_badges_when_empty(self, editor):
        assert editor.badges() == []

    def test_badge_order_and_labels(self, editor):
        """Test that badges list diet, intolerances and time in order."""
        editor.replace_draft(FilterState(
            diet=Diet.GLUTEN_FREE,
            intolerances={Intolerance.WHEAT, Intolerance.DAIRY},
            max_ready_time=30,
        ))
        editor.apply()

        assert [badge.label for badge in editor.badges()] == [
            "Gluten Free",
            "Dairy",
            "Wheat",
            "Ready in 30 min or less",
        ]
        assert [badge.kind for badge in editor.badges()] == ["diet", "intolerance", "intolerance", "time"]

    def test_badges_reflect_applied_not_draft(self, editor):
        """Test that badges show applied filters, not the draft."""
        editor.set_diet(Diet.VEGAN)
        assert editor.badges() == []
