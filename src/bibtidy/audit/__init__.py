"""Audit logging subsystem for bibtidy.

Main Components
---------------
- AuditLogger: JSONL event logger
- LogEvent: one log line
- generate_run_id: run identifier factory
"""

from bibtidy.audit.helpers import generate_run_id, get_package_version
from bibtidy.audit.logger import AuditLogger
from bibtidy.audit.models import LogEvent

__all__ = [
    "AuditLogger",
    "LogEvent",
    "generate_run_id",
    "get_package_version",
]
