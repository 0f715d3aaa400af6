"""
In-memory annotation store for one project.

The store only changes after the annotation API has confirmed a change.
It is kept sorted by timecode; clusters and rendered output are derived
from it on every change and never patched.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from ytreview.models.annotation import Annotation, AnnotationStatus

AnnotationLike = Union[Annotation, Dict[str, Any]]


def _coerce(record: AnnotationLike) -> Annotation:
    if isinstance(record, Annotation):
        return record
    return Annotation.model_validate(record)


class AnnotationStore:
    """Ordered, id-unique sequence of annotations."""

    def __init__(self, records: Optional[Iterable[AnnotationLike]] = None):
        self._annotations: List[Annotation] = []
        if records is not None:
            self.load(records)

    def load(self, records: Iterable[AnnotationLike]) -> None:
        """
        Replace the contents wholesale (project load).

        Raises:
            ValueError: if two records share an id
        """
        annotations = [_coerce(r) for r in records]
        seen = set()
        for annotation in annotations:
            if annotation.id in seen:
                raise ValueError(f"Duplicate annotation id: {annotation.id}")
            seen.add(annotation.id)
        annotations.sort(key=lambda a: a.timecode)
        self._annotations = annotations

    def add(self, record: AnnotationLike) -> Annotation:
        """Append a newly created annotation and re-sort by timecode."""
        annotation = _coerce(record)
        if self.get(annotation.id) is not None:
            raise ValueError(f"Duplicate annotation id: {annotation.id}")
        self._annotations.append(annotation)
        self._annotations.sort(key=lambda a: a.timecode)
        return annotation

    def remove(self, annotation_id: str) -> bool:
        """Remove by id. Returns False when the id is not present."""
        before = len(self._annotations)
        self._annotations = [a for a in self._annotations if a.id != annotation_id]
        return len(self._annotations) != before

    def set_status(self, annotation_id: str, status: AnnotationStatus) -> bool:
        """Mutate a record's status in place. Returns False when the id is not present."""
        annotation = self.get(annotation_id)
        if annotation is None:
            return False
        annotation.status = AnnotationStatus(status)
        return True

    def get(self, annotation_id: str) -> Optional[Annotation]:
        for annotation in self._annotations:
            if annotation.id == annotation_id:
                return annotation
        return None

    @property
    def annotations(self) -> List[Annotation]:
        return list(self._annotations)

    def __len__(self) -> int:
        return len(self._annotations)

    def __iter__(self) -> Iterator[Annotation]:
        return iter(list(self._annotations))

    def __contains__(self, annotation_id: object) -> bool:
        return any(a.id == annotation_id for a in self._annotations)
