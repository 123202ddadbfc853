"""
Utils package initialization.
"""
from portal.utils.date_utils import (
    today,
    calculate_age,
    iso_date,
    parse_date_string,
)
from portal.utils.completeness import (
    DocumentCompletionStats,
    compute_completion,
    count_by_type,
    count_by_status,
    completion_status,
)
from portal.utils.attendance_snapshot import (
    build_snapshot,
    mark_all,
    to_insertable_rows,
)
from portal.utils.csv_export import (
    records_to_csv,
    report_filename,
)
from portal.utils.uploads import (
    validate_upload,
    build_storage_path,
)
from portal.utils.constants import (
    REQUIRED_DOCUMENT_TYPES,
    DOCUMENT_TYPE_LABELS,
    DOCUMENT_TYPE_DESCRIPTIONS,
)

__all__ = [
    "today",
    "calculate_age",
    "iso_date",
    "parse_date_string",
    "DocumentCompletionStats",
    "compute_completion",
    "count_by_type",
    "count_by_status",
    "completion_status",
    "build_snapshot",
    "mark_all",
    "to_insertable_rows",
    "records_to_csv",
    "report_filename",
    "validate_upload",
    "build_storage_path",
    "REQUIRED_DOCUMENT_TYPES",
    "DOCUMENT_TYPE_LABELS",
    "DOCUMENT_TYPE_DESCRIPTIONS",
]
