"""
Upload constraint checks and blob path naming.
"""
from datetime import datetime, timezone
from typing import Optional, Sequence


def file_extension(filename: str) -> str:
    """Extension including the dot, lower-cased (``report.PDF`` -> ``.pdf``)."""
    if "." not in filename:
        return ""
    return "." + filename.rsplit(".", 1)[1].lower()


def validate_upload(
    filename: str,
    size: int,
    accepted_types: Sequence[str],
    max_size_mb: int
) -> Optional[str]:
    """
    Check an upload against the size ceiling and the extension allow-list.

    Returns:
        Error message, or None when the file is acceptable
    """
    if size > max_size_mb * 1024 * 1024:
        return f"File size must be less than {max_size_mb}MB"

    if file_extension(filename) not in accepted_types:
        return f"File type not supported. Accepted types: {', '.join(accepted_types)}"

    return None


def build_storage_path(owner_id: str, document_type: str, filename: str, now: Optional[datetime] = None) -> str:
    """Blob key in the form ``{owner_id}/{type}_{timestamp_ms}.{ext}``."""
    now = now or datetime.now(timezone.utc)
    timestamp = int(now.timestamp() * 1000)
    ext = filename.rsplit(".", 1)[-1]
    return f"{owner_id}/{document_type}_{timestamp}.{ext}"
