"""
Import Results

Per-item import outcomes and the batch result aggregated from them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from .entities import CatalogRecord

DUPLICATE_REASON = "Content already exists"


class OutcomeKind(Enum):
    """Terminal state of one normalized item."""

    IMPORTED = "imported"
    DUPLICATE = "duplicate"
    FAILED = "failed"


@dataclass(frozen=True)
class ImportOutcome:
    """
    Result of running the persistence flow for one normalized item.

    Exactly one outcome is produced per item; ``record`` is set for
    IMPORTED, ``reason`` for DUPLICATE and FAILED.
    """

    kind: OutcomeKind
    record: Optional[CatalogRecord] = None
    reason: Optional[str] = None

    @classmethod
    def imported(cls, record: CatalogRecord) -> "ImportOutcome":
        return cls(kind=OutcomeKind.IMPORTED, record=record)

    @classmethod
    def duplicate(cls, reason: str = DUPLICATE_REASON) -> "ImportOutcome":
        return cls(kind=OutcomeKind.DUPLICATE, reason=reason)

    @classmethod
    def failed(cls, error: str) -> "ImportOutcome":
        return cls(kind=OutcomeKind.FAILED, reason=error or "Unknown error")

    @property
    def is_imported(self) -> bool:
        return self.kind is OutcomeKind.IMPORTED


@dataclass(frozen=True)
class ImportBatchResult:
    """
    Aggregated result of one import call.

    Counting rules:
    - imported_count is the number of IMPORTED outcomes
    - duplicates_skipped counts DUPLICATE and FAILED outcomes together,
      since neither ended up imported
    - errors lists the reason of every DUPLICATE/FAILED outcome in the
      order processed, followed by any fetch error that cut a batch short

    ``success`` is False only when the call itself failed before any item
    could be processed.
    """

    success: bool
    imported_count: int
    duplicates_skipped: int
    imported: List[CatalogRecord] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    message: str = ""

    @classmethod
    def from_outcomes(
        cls,
        outcomes: Sequence[ImportOutcome],
        trailing_errors: Sequence[str] = (),
        message: Optional[str] = None,
    ) -> "ImportBatchResult":
        """
        Aggregate per-item outcomes into a batch result.

        Args:
            outcomes: One outcome per item, in processing order
            trailing_errors: Errors not tied to an item (e.g. a failed page fetch)
            message: Summary override; defaults to the batch summary

        Returns:
            ImportBatchResult with success=True
        """
        imported = [o.record for o in outcomes if o.is_imported]
        errors = [o.reason for o in outcomes if not o.is_imported]
        errors.extend(trailing_errors)
        skipped = len(outcomes) - len(imported)

        if message is None:
            message = cls.summarize(len(imported), skipped, len(errors))

        return cls(
            success=True,
            imported_count=len(imported),
            duplicates_skipped=skipped,
            imported=imported,
            errors=errors,
            message=message,
        )

    @classmethod
    def from_single(cls, outcome: ImportOutcome, subject: str = "Video") -> "ImportBatchResult":
        """Wrap a single outcome as a batch of one."""
        if outcome.is_imported:
            message = f"{subject} imported successfully"
        else:
            message = f"{subject} was skipped (duplicate or error)"
        return cls.from_outcomes([outcome], message=message)

    @classmethod
    def failure(cls, message: str, error: str) -> "ImportBatchResult":
        """Result for a call that failed before any item was processed."""
        return cls(
            success=False,
            imported_count=0,
            duplicates_skipped=0,
            imported=[],
            errors=[error],
            message=message,
        )

    @staticmethod
    def summarize(imported: int, skipped: int, errors: int) -> str:
        message = f"Successfully imported {imported} videos, skipped {skipped} duplicates"
        if errors > 0:
            message += f", encountered {errors} errors"
        return message

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "importedCount": self.imported_count,
            "duplicatesSkipped": self.duplicates_skipped,
            "imported": [record.to_dict() for record in self.imported],
            "errors": list(self.errors),
            "message": self.message,
        }
