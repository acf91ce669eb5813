# indexnow_sync/runner/executor.py
"""
Runner for one build-triggered IndexNow sync.

Orchestrates the full pipeline:
1. Validate config (key, site URL) - fatal, before any cache I/O
2. Prepare cache storage and load the previous cache
3. Walk the output directory
4. Compute diff
5. Submit changed URLs in batches (skipped when nothing changed)
6. Persist the next cache - always, once the diff exists

State machine:
    IDLE -> CACHE_READY -> WALKED -> DIFFED -> (SKIPPED | SUBMITTING -> SUBMITTED)
         -> CACHE_PERSISTED -> DONE

Runs against the same cache file must not overlap; serializing builds is
the caller's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

from indexnow_sync.cache.store import CacheStore
from indexnow_sync.config.schema import IndexNowConfig
from indexnow_sync.diff.differ import ChangeDetector, DiffResult
from indexnow_sync.diff.scanner import SiteWalker
from indexnow_sync.logging import LOG_PREFIX, get_logger
from indexnow_sync.runner.context import RunContext
from indexnow_sync.submit.submitter import BatchSubmitter, SubmissionReport

logger = get_logger(__name__)


class RunState(str, Enum):
    """Stages of a run, in the order they are reached."""

    IDLE = "idle"
    DISABLED = "disabled"
    CACHE_READY = "cache_ready"
    WALKED = "walked"
    DIFFED = "diffed"
    DRY_RUN = "dry_run"
    SKIPPED = "skipped"
    SUBMITTING = "submitting"
    SUBMITTED = "submitted"
    CACHE_PERSISTED = "cache_persisted"
    DONE = "done"


@dataclass
class RunSummary:
    """Summary of a sync run."""

    pages: int = 0
    changed: int = 0
    unchanged: int = 0
    removed: int = 0
    cache_path: Optional[Path] = None
    diff: Optional[DiffResult] = field(default=None, repr=False)
    report: SubmissionReport = field(default_factory=SubmissionReport)
    states: List[RunState] = field(default_factory=lambda: [RunState.IDLE])

    @property
    def state(self) -> RunState:
        return self.states[-1]

    @property
    def ok(self) -> bool:
        """False only when at least one batch failed."""
        return self.report.ok

    def advance(self, state: RunState) -> None:
        self.states.append(state)
        logger.debug(f"{LOG_PREFIX} state -> {state.value}")

    def __str__(self) -> str:
        """Get summary string."""
        base = (
            f"pages {self.pages}, changed {self.changed}, "
            f"unchanged {self.unchanged}, removed {self.removed}"
        )
        if self.report.batches:
            base += (
                f", batches {self.report.batches} "
                f"(ok {self.report.succeeded}, failed {self.report.failed})"
            )
        return base


class IndexNowRunner:
    """
    Runs the walk -> diff -> submit -> persist pipeline.

    Usage:
        runner = IndexNowRunner(IndexNowConfig(key="abc", site_url="https://example.com"))
        summary = runner.run("./dist")
        print(summary)
    """

    def __init__(
        self,
        config: IndexNowConfig,
        *,
        submitter: Optional[BatchSubmitter] = None,
        project_root: Optional[str | Path] = None,
    ) -> None:
        self._config = config
        self._project_root = project_root
        self._submitter = submitter or BatchSubmitter(
            endpoint=config.endpoint,
            batch_size=config.batch_size,
            timeout=config.timeout,
        )

    def resolve_context(
        self, out_dir: str | Path, declared_site: Optional[str] = None
    ) -> RunContext:
        """Resolve the run context; raises ConfigError."""
        return RunContext.resolve(
            self._config,
            out_dir,
            declared_site=declared_site,
            project_root=self._project_root,
        )

    def run(
        self,
        out_dir: str | Path,
        declared_site: Optional[str] = None,
        *,
        dry_run: bool = False,
    ) -> RunSummary:
        """
        Run the pipeline.

        Args:
            out_dir: Build output directory (path or file:// URL).
            declared_site: Site URL declared by the build, used when the
                config has no site_url.
            dry_run: Diff and report only; no submission, no cache write.

        Returns:
            RunSummary with counts, final state and the submission report.

        Raises:
            ConfigError: missing key or site URL (nothing on disk touched).
            TraversalError: output tree could not be read (previous cache entries kept).
        """
        summary = RunSummary()

        if not self._config.enabled:
            logger.info(f"{LOG_PREFIX} disabled")
            summary.advance(RunState.DISABLED)
            return summary

        ctx = self.resolve_context(out_dir, declared_site)
        summary.cache_path = ctx.cache_path
        logger.debug(f"{LOG_PREFIX} output dir: {ctx.out_dir}")
        logger.debug(f"{LOG_PREFIX} site: {ctx.site_url}")

        # 1. Cache storage
        store = CacheStore(ctx.cache_path)
        if not dry_run:
            store.ensure_storage_ready()
        summary.advance(RunState.CACHE_READY)
        previous_cache = store.load()

        # 2. Walk
        pages = SiteWalker(ctx.out_dir, ctx.site_url).scan()
        summary.pages = len(pages)
        summary.advance(RunState.WALKED)

        # 3. Diff
        diff = ChangeDetector(previous_cache).detect(pages)
        summary.diff = diff
        summary.changed = len(diff.changed_urls)
        summary.unchanged = len(diff.unchanged_urls)
        summary.removed = len(diff.removed_urls)
        summary.advance(RunState.DIFFED)

        if dry_run:
            summary.advance(RunState.DRY_RUN)
            logger.info(f"{LOG_PREFIX} dry run: {summary}")
            return summary

        # 4. Submit, then 5. persist no matter how submission went
        try:
            if not diff.has_changes:
                logger.info(f"{LOG_PREFIX} no changed URLs detected, skipping submission")
                summary.advance(RunState.SKIPPED)
            else:
                self._warn_missing_key_file(ctx)
                summary.advance(RunState.SUBMITTING)
                summary.report = self._submitter.submit(
                    diff.changed_urls, ctx.site_url, ctx.key
                )
                summary.advance(RunState.SUBMITTED)
        finally:
            store.save(diff.next_cache)
            summary.advance(RunState.CACHE_PERSISTED)

        summary.advance(RunState.DONE)

        if summary.report.batches:
            logger.info(f"{LOG_PREFIX} IndexNow submission complete: {summary}")
        return summary

    @staticmethod
    def _warn_missing_key_file(ctx: RunContext) -> None:
        if not ctx.key_file.is_file():
            logger.warning(
                f"{LOG_PREFIX} key file not found at {ctx.key_file}; "
                f"the endpoint expects it at {ctx.key_location}"
            )


def run_indexnow_sync(
    out_dir: str | Path,
    config: IndexNowConfig,
    *,
    declared_site: Optional[str] = None,
    project_root: Optional[str | Path] = None,
    submitter: Optional[BatchSubmitter] = None,
    dry_run: bool = False,
) -> RunSummary:
    """
    Convenience function to run one sync.

    Args:
        out_dir: Build output directory.
        config: Run options.
        declared_site: Site URL declared by the build.
        project_root: Base for the cache location (default: cwd).
        submitter: Custom submitter (e.g. with a preconfigured client).
        dry_run: Diff and report only.

    Returns:
        RunSummary with results.
    """
    runner = IndexNowRunner(config, submitter=submitter, project_root=project_root)
    return runner.run(out_dir, declared_site, dry_run=dry_run)


__all__ = ["RunState", "RunSummary", "IndexNowRunner", "run_indexnow_sync"]
