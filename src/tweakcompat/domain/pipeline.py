"""Batch driver: validate, merge, aggregate and persist submissions one at a time."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from tweakcompat.domain.aggregation import aggregate_catalog
from tweakcompat.domain.merge import MergeError, merge_change
from tweakcompat.domain.model import ChangeRecord, MergeEffect
from tweakcompat.domain.sharding import CatalogShards, shard_catalog
from tweakcompat.domain.submissions import parse_submissions
from tweakcompat.domain.validation import validate_change

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from tweakcompat.domain.model import CandidateChange, Issue, RunMode
    from tweakcompat.domain.ports import CatalogStore, SubmissionFeedback

log = getLogger(__name__)


@dataclass(slots=True)
class PipelineResult:
    """Outcome of one batch run."""

    received: int = 0
    invalid: int = 0
    merged: int = 0
    effects: Counter[MergeEffect] = field(default_factory=Counter[MergeEffect])
    shards: CatalogShards | None = None

    @property
    def published(self) -> bool:
        return self.shards is not None


def process_changes(
    candidates: Sequence[CandidateChange],
    *,
    store: CatalogStore,
    feedback: SubmissionFeedback | None,
) -> PipelineResult:
    """Apply ``candidates`` in order, persisting the re-aggregated catalog after each merge.

    ``feedback`` is ``None`` when the run must not touch the tracker. A
    :class:`MergeError` aborts the remaining batch; catalogs saved for earlier
    changes stay persisted.
    """

    result = PipelineResult(received=len(candidates))
    for candidate in candidates:
        issue_number = candidate.get("issueNumber")
        log.info("Working on: %s", candidate.get("issueTitle"))

        violations = validate_change(candidate)
        if violations:
            result.invalid += 1
            log.warning(
                "Validation error in issue #%s: %s",
                issue_number,
                "; ".join(str(violation) for violation in violations),
            )
            if feedback is not None and isinstance(issue_number, int):
                feedback.mark_invalid(issue_number)
            continue

        change = ChangeRecord.from_candidate(candidate)
        try:
            merged = merge_change(store.load_catalog(), change)
        except MergeError as exc:
            log.error("Aborting batch at issue #%s: %s", change.issue_number, exc)
            raise

        result.merged += 1
        result.effects[merged.effect] += 1
        if feedback is not None and change.issue_number is not None:
            feedback.report_merge(change.issue_number, merged.effect)

        store.save_catalog(aggregate_catalog(merged.catalog))

    return result


def publish_outputs(store: CatalogStore) -> CatalogShards:
    """Rewrite every per-package and per-OS-version document from the stored catalog."""

    store.wipe_output()
    shards = shard_catalog(store.load_catalog())
    for package_shard in shards.packages:
        store.write_package(package_shard)
    for ios_shard in shards.ios_versions:
        store.write_ios_version(ios_shard)
    log.info(
        "Published %s package document(s) and %s iOS version document(s)",
        len(shards.packages),
        len(shards.ios_versions),
    )
    return shards


def run_batch(
    issues: Iterable[Issue],
    *,
    mode: RunMode,
    store: CatalogStore,
    feedback: SubmissionFeedback | None = None,
) -> PipelineResult:
    """Run one batch of issues through the pipeline under ``mode``."""

    candidates = parse_submissions(issues)
    effective_feedback = feedback if mode.sends_feedback else None

    if mode.wipes_catalog:
        log.info("Rebuild mode: wiping catalog packages")
        store.wipe_packages()

    result = process_changes(candidates, store=store, feedback=effective_feedback)

    if candidates:
        result.shards = publish_outputs(store)
    return result
