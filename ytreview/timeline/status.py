"""
Annotation review status state machine.

Pending is the only initial state. Accepted and Rejected are reachable
from Pending and from each other. There is no transition back to Pending.
Re-requesting the current Accepted/Rejected status is allowed and leaves
the record unchanged.
"""

from typing import Any, Dict, FrozenSet

from ytreview.errors import InvalidStatus
from ytreview.models.annotation import AnnotationStatus

INITIAL_STATUS = AnnotationStatus.PENDING

TRANSITIONS: Dict[AnnotationStatus, FrozenSet[AnnotationStatus]] = {
    AnnotationStatus.PENDING: frozenset({AnnotationStatus.ACCEPTED, AnnotationStatus.REJECTED}),
    AnnotationStatus.ACCEPTED: frozenset({AnnotationStatus.ACCEPTED, AnnotationStatus.REJECTED}),
    AnnotationStatus.REJECTED: frozenset({AnnotationStatus.ACCEPTED, AnnotationStatus.REJECTED}),
}


def can_transition(current: AnnotationStatus, target: AnnotationStatus) -> bool:
    return target in TRANSITIONS.get(current, frozenset())


def validate_transition(current: AnnotationStatus, target: Any) -> AnnotationStatus:
    """
    Check a requested status change before it is sent to the API.

    Returns:
        The parsed target status

    Raises:
        InvalidStatus: unknown status value or a disallowed transition
    """
    try:
        parsed = AnnotationStatus.parse(target)
    except ValueError:
        raise InvalidStatus(f"Unknown status: {target!r}")

    if not can_transition(current, parsed):
        raise InvalidStatus(
            f"Cannot change status from {current.name.lower()} to {parsed.name.lower()}"
        )
    return parsed
