"""
Unit tests for the review status state machine.
"""

import pytest

from ytreview.errors import InvalidInput, InvalidStatus
from ytreview.models.annotation import AnnotationStatus
from ytreview.timeline.status import INITIAL_STATUS, can_transition, validate_transition

P = AnnotationStatus.PENDING
A = AnnotationStatus.ACCEPTED
R = AnnotationStatus.REJECTED


@pytest.mark.unit
class TestTransitions:
    """Test which status changes are allowed."""

    def test_pending_is_initial(self):
        """Test pending is initial."""
        assert INITIAL_STATUS == P

    @pytest.mark.parametrize("current,target", [(P, A), (P, R), (A, R), (R, A)])
    def test_allowed_transitions(self, current, target):
        """Test allowed transitions."""
        assert can_transition(current, target)
        assert validate_transition(current, target) == target

    @pytest.mark.parametrize("current", [P, A, R])
    def test_no_transition_back_to_pending(self, current):
        """Test no transition back to pending."""
        assert not can_transition(current, P)
        with pytest.raises(InvalidStatus):
            validate_transition(current, P)

    @pytest.mark.parametrize("status", [A, R])
    def test_repeating_current_status_is_allowed(self, status):
        """Test repeating current status is allowed."""
        assert validate_transition(status, status) == status

    def test_accepts_wire_codes_and_names(self):
        """Test accepts wire codes and names."""
        assert validate_transition(P, 1) == A
        assert validate_transition(P, "rejected") == R
        assert validate_transition(A, "2") == R

    @pytest.mark.parametrize("value", [3, -1, "resolved", None, True])
    def test_unknown_status(self, value):
        """Test unknown status."""
        with pytest.raises(InvalidStatus):
            validate_transition(P, value)

    def test_invalid_status_is_invalid_input(self):
        """Test invalid status is invalid input."""
        with pytest.raises(InvalidInput):
            validate_transition(A, P)
