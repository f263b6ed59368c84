"""
Tests for the FAQ scorer.
"""

import pytest

from cognitrack.domain.exceptions import InvalidInputError
from cognitrack.domain.services.scoring.faq import faq_impairment, item_breakdown, score_faq
from cognitrack.domain.value_objects.answers import FAQItemRating
from cognitrack.tests.conftest import faq_items


@pytest.mark.unit
class TestScoreFAQ:
    """Tests for score_faq."""

    def test_all_zero_is_no_impairment(self):
        result = score_faq(faq_items([0] * 10))

        assert result.total_score == 0
        assert result.impairment == "None"
        assert result.is_complete

    def test_all_dependent_is_very_severe(self):
        result = score_faq(faq_items([3] * 10))

        assert result.total_score == 30
        assert result.impairment == "Very Severe"

    def test_partial_submission_is_incomplete(self):
        result = score_faq(faq_items([1, 2, 3]))

        assert result.total_score == 6
        assert result.impairment == "Moderate"
        assert result.answered_items == 3
        assert not result.is_complete

    def test_rejects_empty_submission(self):
        with pytest.raises(InvalidInputError) as exc_info:
            score_faq([])

        assert "No item ratings provided" in exc_info.value.errors

    def test_rejects_eleven_items(self):
        items = faq_items([0] * 10) + [FAQItemRating(11, 0)]

        with pytest.raises(InvalidInputError) as exc_info:
            score_faq(items)

        assert any("Too many items" in error for error in exc_info.value.errors)

    def test_rejects_duplicates_and_bad_ratings_together(self):
        with pytest.raises(InvalidInputError) as exc_info:
            score_faq([FAQItemRating(1, 4), FAQItemRating(1, 0)])

        errors = exc_info.value.errors
        assert "Rating for item 1 must be between 0 and 3, got 4" in errors
        assert "Duplicate item ids: 1" in errors

    def test_rejects_boolean_rating(self):
        with pytest.raises(InvalidInputError):
            score_faq([FAQItemRating(1, True)])


@pytest.mark.unit
class TestFAQImpairment:
    """Tests for the FAQ impairment bands."""

    @pytest.mark.parametrize(
        ("score", "impairment"),
        [
            (0, "None"),
            (1, "Mild"),
            (5, "Mild"),
            (6, "Moderate"),
            (15, "Moderate"),
            (16, "Severe"),
            (25, "Severe"),
            (26, "Very Severe"),
            (30, "Very Severe"),
        ],
    )
    def test_band_boundaries(self, score, impairment):
        assert faq_impairment(score)[0] == impairment


@pytest.mark.unit
def test_item_breakdown_labels_unanswered_items_as_normal():
    rows = item_breakdown([FAQItemRating(2, 3)])

    assert len(rows) == 10
    assert rows[1].rating == 3
    assert rows[1].rating_label == "Dependent"
    assert rows[0].answered is False
    assert rows[0].rating_label == "Normal"
