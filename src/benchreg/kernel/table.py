"""Validate a whole table of rows without stopping at bad rows."""

import logging
from typing import Iterable, List, Mapping, Optional

from pydantic import BaseModel, Field

from .record_spec import RecordSpec
from .validator import UnknownFieldsMode, ValidatedRecord, ValidationFailure, validate_record


logger = logging.getLogger(__name__)


class RejectedRow(BaseModel):
    """A row that failed validation, with its 0-based position in the input."""
    index: int
    failure: ValidationFailure


class TableReport(BaseModel):
    """Result of validating every row of a table."""
    registry_name: Optional[str] = None
    version_key: Optional[str] = None
    total: int = 0
    accepted: List[ValidatedRecord] = Field(default_factory=list)
    rejected: List[RejectedRow] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.rejected


def validate_table(
    spec: RecordSpec,
    rows: Iterable[Mapping],
    unknown_fields: UnknownFieldsMode = "ignore",
) -> TableReport:
    """Validate rows in order. Bad rows are reported and skipped, never fatal."""
    report = TableReport(registry_name=spec.registry_name, version_key=spec.version_key)
    for index, row in enumerate(rows):
        outcome = validate_record(spec, row, unknown_fields)
        if outcome.ok:
            report.accepted.append(outcome.record)
        else:
            logger.warning(
                "Rejected row %d for %s@%s: %s",
                index, spec.registry_name, spec.version_key, outcome.failure.summary()
            )
            report.rejected.append(RejectedRow(index=index, failure=outcome.failure))
        report.total += 1
    return report
