"""
Document completeness calculations.

Stats are derived from the beneficiary's document rows on every read and
are never stored.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence

from portal.utils.constants import REQUIRED_DOCUMENT_TYPES, DocumentStatus


@dataclass
class DocumentCompletionStats:
    """Completion of the required document set for one beneficiary."""
    total: int
    completed: int
    total_required: int
    missing_types: List[str] = field(default_factory=list)
    percentage: int = 0


def _value(item: Any, name: str) -> Any:
    # Accepts ORM rows, schema objects or plain dicts
    if isinstance(item, dict):
        return item.get(name)
    value = getattr(item, name, None)
    return getattr(value, "value", value)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


def completion_percentage(completed: int, total_required: int) -> int:
    if total_required == 0:
        return 0
    return round_half_up(completed / total_required * 100)


def compute_completion(
    documents: Iterable[Any],
    required_types: Optional[Sequence[str]] = None
) -> DocumentCompletionStats:
    """
    Compute which required document types are present.

    Several uploads of the same type count once. Documents whose type is
    not required count toward ``total`` only. ``missing_types`` follows the
    declaration order of ``required_types``.
    """
    if required_types is None:
        required_types = REQUIRED_DOCUMENT_TYPES

    documents = list(documents)
    present = {_value(doc, "type") for doc in documents}

    missing = [t for t in required_types if t not in present]
    completed = len(required_types) - len(missing)

    return DocumentCompletionStats(
        total=len(documents),
        completed=completed,
        total_required=len(required_types),
        missing_types=missing,
        percentage=completion_percentage(completed, len(required_types)),
    )


def count_by_type(
    documents: Iterable[Any],
    required_types: Optional[Sequence[str]] = None
) -> Dict[str, int]:
    """Number of documents per required type, zero for absent types."""
    if required_types is None:
        required_types = REQUIRED_DOCUMENT_TYPES

    counts = {t: 0 for t in required_types}
    for doc in documents:
        doc_type = _value(doc, "type")
        if doc_type in counts:
            counts[doc_type] += 1
    return counts


def count_by_status(documents: Iterable[Any]) -> Dict[str, int]:
    """Number of documents per review status."""
    counts = {s.value: 0 for s in DocumentStatus}
    for doc in documents:
        status = _value(doc, "status")
        if status in counts:
            counts[status] += 1
    return counts


def completion_status(percentage: int) -> str:
    """Bucket a completion percentage into complete / incomplete / missing."""
    if percentage >= 100:
        return "complete"
    if percentage > 0:
        return "incomplete"
    return "missing"
