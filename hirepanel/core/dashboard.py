"""
Dashboard aggregator.

Four count-bearing reads (jobs, candidates, interviews, offers) run
concurrently; summary metrics are derived client-side. Any failed read
zeroes every metric.
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from hirepanel.data.client import RowClient
from hirepanel.data.query import SelectResult, select
from hirepanel.utils.constants import (
    CandidateStage,
    InterviewStatus,
    JobStatus,
    OfferStatus,
    Table,
)
from hirepanel.utils.dates import ensure_utc, parse_timestamp
from hirepanel.utils.logger import LoggerMixin


@dataclass(frozen=True)
class DashboardStats:
    """Summary metrics shown on the dashboard."""

    total_jobs: int = 0
    active_jobs: int = 0
    total_candidates: int = 0
    upcoming_interviews: int = 0
    pending_offers: int = 0
    # Counts every hired candidate; there is no time window despite the name
    hired_this_month: int = 0


@dataclass(frozen=True)
class StatCard:
    """One dashboard card."""

    name: str
    value: str
    accent: str
    total: Optional[int] = None

    @property
    def caption(self) -> Optional[str]:
        return f"of {self.total} total" if self.total is not None else None


@dataclass(frozen=True)
class PipelineStage:
    """One bar of the pipeline overview panel."""

    stage: str
    count: int
    color: str


@dataclass(frozen=True)
class ActivityPlaceholder:
    """Placeholder row of the recent activity panel."""

    message: str = "Loading recent activities..."
    when: str = "Just now"


# Illustrative panels; neither is backed by live data.
RECENT_ACTIVITY_PLACEHOLDERS: tuple[ActivityPlaceholder, ...] = tuple(
    ActivityPlaceholder() for _ in range(4)
)

PIPELINE_OVERVIEW: tuple[PipelineStage, ...] = (
    PipelineStage("Applied", 45, "#3b82f6"),
    PipelineStage("Screening", 28, "#eab308"),
    PipelineStage("Interview", 15, "#f97316"),
    PipelineStage("Offer", 8, "#22c55e"),
    PipelineStage("Hired", 12, "#10b981"),
)

GROWTH_RATE = "+12%"


def pipeline_bar_fraction(item: PipelineStage) -> float:
    """Width of a pipeline bar relative to the largest stage."""
    largest = max(stage.count for stage in PIPELINE_OVERVIEW)
    return item.count / largest if largest else 0.0


def _total(result: SelectResult) -> int:
    return result.count or 0


def compute_dashboard_stats(
    jobs: SelectResult,
    candidates: SelectResult,
    interviews: SelectResult,
    offers: SelectResult,
    now: datetime,
) -> DashboardStats:
    """
    Derive dashboard metrics from the four reads.

    Args:
        jobs: ``status`` of every job, with count.
        candidates: ``current_stage`` of every candidate, with count.
        interviews: ``status`` and ``scheduled_at`` of every interview.
            A ``scheduled_at`` without a UTC offset is read as UTC.
        offers: ``status`` of every offer.
        now: Evaluation time. An interview scheduled exactly at ``now`` is
            not upcoming.

    Returns:
        DashboardStats
    """
    now = ensure_utc(now)
    upcoming = 0
    for row in interviews.rows:
        scheduled_at = parse_timestamp(row.get("scheduled_at"))
        if row.get("status") == InterviewStatus.SCHEDULED.value and scheduled_at and scheduled_at > now:
            upcoming += 1

    return DashboardStats(
        total_jobs=_total(jobs),
        active_jobs=sum(1 for row in jobs.rows if row.get("status") == JobStatus.PUBLISHED.value),
        total_candidates=_total(candidates),
        upcoming_interviews=upcoming,
        pending_offers=sum(1 for row in offers.rows if row.get("status") == OfferStatus.SENT.value),
        hired_this_month=sum(
            1 for row in candidates.rows
            if row.get("current_stage") == CandidateStage.HIRED.value
        ),
    )


def build_stat_cards(stats: DashboardStats) -> list[StatCard]:
    """The six dashboard cards, in display order."""
    return [
        StatCard("Active Jobs", str(stats.active_jobs), "#2563eb", total=stats.total_jobs),
        StatCard("Total Candidates", str(stats.total_candidates), "#16a34a"),
        StatCard("Upcoming Interviews", str(stats.upcoming_interviews), "#ea580c"),
        StatCard("Pending Offers", str(stats.pending_offers), "#d97706"),
        StatCard("Hired This Month", str(stats.hired_this_month), "#059669"),
        StatCard("Growth Rate", GROWTH_RATE, "#7c3aed"),
    ]


class DashboardModel(LoggerMixin):
    """State behind the dashboard screen."""

    def __init__(self, client: RowClient) -> None:
        self._client = client
        self.stats = DashboardStats()
        self.loading = True

    async def load(self, now: Optional[datetime] = None) -> DashboardStats:
        """
        Fetch and derive the dashboard metrics.

        ``now`` is captured once; upcoming interviews are not re-evaluated
        afterwards. No retry.
        """
        self.loading = True
        now = now or datetime.now(timezone.utc)
        try:
            jobs, candidates, interviews, offers = await asyncio.gather(
                self._client.select(select(Table.JOBS, "status").with_count()),
                self._client.select(select(Table.CANDIDATES, "current_stage").with_count()),
                self._client.select(
                    select(Table.INTERVIEWS, "status", "scheduled_at").with_count()
                ),
                self._client.select(select(Table.OFFERS, "status").with_count()),
            )
            self.stats = compute_dashboard_stats(jobs, candidates, interviews, offers, now)
        except Exception as e:
            self.logger.error(f"Error loading stats: {e}")
            self.stats = DashboardStats()
        finally:
            self.loading = False
        return self.stats

    @property
    def cards(self) -> list[StatCard]:
        return build_stat_cards(self.stats)
