"""
Relationships between backend tables.

Screens never spell out join keys; they expand one of the relations below.
"""

from hirepanel.utils.constants import Table

from .query import Relation


# job_applications.candidate_id -> candidates.id
APPLICATION_CANDIDATE = Relation(
    name="candidate",
    table=Table.CANDIDATES.value,
    local_key="candidate_id",
)

# interview_rounds.id <- interview_round_panelists.interview_round_id
ROUND_PANELISTS = Relation(
    name="panelists",
    table=Table.INTERVIEW_ROUND_PANELISTS.value,
    local_key="id",
    foreign_key="interview_round_id",
    many=True,
)

# interviews.application_id -> job_applications.id, with candidate and job.
# All three links are inner: an interview missing any of them is not listed.
INTERVIEW_APPLICATION = Relation(
    name="application",
    table=Table.JOB_APPLICATIONS.value,
    local_key="application_id",
    inner=True,
    columns=("job_id", "candidate_id"),
    relations=(
        Relation(
            name="candidate",
            table=Table.CANDIDATES.value,
            local_key="candidate_id",
            inner=True,
            columns=("full_name", "email"),
        ),
        Relation(
            name="job",
            table=Table.JOBS.value,
            local_key="job_id",
            inner=True,
            columns=("title",),
        ),
    ),
)
