"""
Unit tests for the annotation store.
"""

import pytest

from ytreview.models.annotation import AnnotationStatus
from ytreview.timeline.store import AnnotationStore


@pytest.mark.unit
class TestAnnotationStore:
    """Test load, add, remove and status changes."""

    def test_load_sorts_by_timecode(self, annotation_factory):
        """Test load sorts by timecode."""
        store = AnnotationStore([annotation_factory(30), annotation_factory(5), annotation_factory(12)])
        assert [a.timecode for a in store] == [5, 12, 30]

    def test_load_normalizes_legacy_records(self):
        """Test load normalizes legacy records."""
        store = AnnotationStore([
            {"id": "a", "author": "A", "text": "x", "timecode": 1, "resolved": 1},
            {"id": "b", "author": "B", "text": "y", "timecode": 2, "resolved": 0},
            {"id": "c", "author": "C", "text": "z", "timecode": 3, "status": 2},
        ])
        assert [a.status for a in store] == [
            AnnotationStatus.ACCEPTED,
            AnnotationStatus.PENDING,
            AnnotationStatus.REJECTED,
        ]

    def test_load_rejects_duplicate_ids(self, annotation_factory):
        """Test load rejects duplicate ids."""
        with pytest.raises(ValueError):
            AnnotationStore([annotation_factory(1, annotation_id="x"), annotation_factory(2, annotation_id="x")])

    def test_load_replaces_contents(self, annotation_factory):
        """Test load replaces contents."""
        store = AnnotationStore([annotation_factory(1)])
        store.load([annotation_factory(2), annotation_factory(3)])
        assert len(store) == 2

    def test_add_keeps_order(self, annotation_factory):
        """Test add keeps order."""
        store = AnnotationStore([annotation_factory(10), annotation_factory(30)])

        added = store.add(annotation_factory(20))

        assert [a.timecode for a in store] == [10, 20, 30]
        assert added.id in store

    def test_add_duplicate_id(self, annotation_factory):
        """Test add duplicate id."""
        store = AnnotationStore([annotation_factory(1, annotation_id="x")])
        with pytest.raises(ValueError):
            store.add(annotation_factory(2, annotation_id="x"))

    def test_remove(self, annotation_factory):
        """Test removing an annotation."""
        store = AnnotationStore([annotation_factory(1, annotation_id="x"), annotation_factory(2)])

        assert store.remove("x") is True
        assert "x" not in store
        assert store.remove("x") is False
        assert len(store) == 1

    def test_set_status_in_place(self, annotation_factory):
        """Test set status in place."""
        annotation = annotation_factory(1, annotation_id="x")
        store = AnnotationStore([annotation])

        assert store.set_status("x", AnnotationStatus.ACCEPTED) is True
        assert annotation.status == AnnotationStatus.ACCEPTED

    def test_set_status_unknown_id(self, annotation_factory):
        """Test set status unknown id."""
        store = AnnotationStore([annotation_factory(1)])
        assert store.set_status("missing", AnnotationStatus.REJECTED) is False

    def test_annotations_is_a_copy(self, annotation_factory):
        """Test annotations is a copy."""
        store = AnnotationStore([annotation_factory(1)])
        store.annotations.clear()
        assert len(store) == 1
