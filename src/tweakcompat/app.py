"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from tweakcompat.adapters.github import GitHubClient, GitHubIssueTracker
from tweakcompat.adapters.json_store import JsonCatalogStore
from tweakcompat.config import get_github_config, get_storage_config
from tweakcompat.domain.model import RunMode
from tweakcompat.domain.pipeline import PipelineResult, run_batch

if TYPE_CHECKING:
    from pathlib import Path

    from tweakcompat.domain.ports import CatalogStore, IssueTracker


log = getLogger(__name__)


def build_github_tracker() -> GitHubIssueTracker:
    return GitHubIssueTracker(client=GitHubClient(config=get_github_config()))


def build_json_store(*, data_dir: Path | None = None) -> JsonCatalogStore:
    return JsonCatalogStore(config=get_storage_config(data_dir=data_dir))


def sync_submissions(
    mode: RunMode,
    *,
    tracker: IssueTracker | None = None,
    store: CatalogStore | None = None,
    data_dir: Path | None = None,
) -> PipelineResult:
    """Fetch submissions for ``mode`` and run them through the catalog pipeline."""

    effective_tracker = tracker or build_github_tracker()
    effective_store = store or build_json_store(data_dir=data_dir)
    log.info("Starting %s run", mode)

    issues = effective_tracker.fetch_issues(mode)
    result = run_batch(issues, mode=mode, store=effective_store, feedback=effective_tracker)

    log.info(
        f"Finished {mode} run: received={result.received}, invalid={result.invalid}, "
        f"merged={result.merged}, effects={dict(result.effects)}, published={result.published}"
    )
    return result


def process_new_submissions(
    *,
    tracker: IssueTracker | None = None,
    store: CatalogStore | None = None,
) -> PipelineResult:
    """Handle newly opened submission issues and report back on each of them."""

    return sync_submissions(RunMode.PROCESS, tracker=tracker, store=store)


def rebuild_catalog(
    *,
    tracker: IssueTracker | None = None,
    store: CatalogStore | None = None,
) -> PipelineResult:
    """Wipe the catalog and replay every closed submission, oldest first."""

    return sync_submissions(RunMode.REBUILD, tracker=tracker, store=store)
