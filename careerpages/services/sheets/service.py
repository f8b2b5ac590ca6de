"""
Sheet Reader: spreadsheet -> SiteContent.

Layout read (row 1 of every tab is a header):
  - 'Home Page'!A2:C2    title, intro paragraph 1, intro paragraph 2
  - 'Job Titles'!A2:C    name, blurb URL, optional active flag
  - '<job name>'!A2:C    section title, Notion URL, optional active flag

Public API:
  - SheetsService.read_site_content() -> SiteContent
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from careerpages.config import SiteConfig

from .client import SheetsClient, SheetsError, a1_range
from .models import HomeContent, Job, Section, SiteContent

LOGGER = logging.getLogger(__name__)

HOME_SHEET = "Home Page"
JOBS_SHEET = "Job Titles"
HOME_CELLS = "A2:C2"
ROW_CELLS = "A2:C"

ACTIVE_COLUMN = 2


def cell(row: Sequence[str], idx: int) -> str:
    """Trimmed cell value; cells the API omitted read as ''."""
    if idx >= len(row) or row[idx] is None:
        return ""
    return str(row[idx]).strip()


def filter_active_rows(rows: Sequence[Sequence[str]]) -> List[Sequence[str]]:
    """Apply the optional active-flag column.

    The flag only takes effect when at least one row actually carries a third
    cell; sheets that never had the column keep every row. Once in effect, a
    row survives only if its flag reads TRUE (any case).
    """
    if not any(len(r) > ACTIVE_COLUMN for r in rows):
        return list(rows)
    return [r for r in rows if cell(r, ACTIVE_COLUMN).upper() == "TRUE"]


class SheetsService:
    def __init__(self, client: SheetsClient):
        self._raw = client

    @classmethod
    def from_config(cls, config: SiteConfig) -> "SheetsService":
        info = config.service_account_info_or_raise()
        sheet_id = config.sheet_id_or_raise()
        return cls(SheetsClient.from_service_account_info(info, sheet_id))

    @property
    def raw(self) -> SheetsClient:
        return self._raw

    def _rows(self, sheet_name: str) -> List[Sequence[str]]:
        rows = self._raw.get_values(a1_range(sheet_name, ROW_CELLS))
        return [r for r in filter_active_rows(rows) if cell(r, 0)]

    def read_home(self) -> HomeContent:
        rows = self._raw.get_values(a1_range(HOME_SHEET, HOME_CELLS))
        row = rows[0] if rows else []
        return HomeContent(title=cell(row, 0), intro1=cell(row, 1), intro2=cell(row, 2))

    def read_jobs(self) -> List[Job]:
        return [
            Job(name=cell(r, 0), notion_blurb=cell(r, 1)) for r in self._rows(JOBS_SHEET)
        ]

    def read_sections(self, job_name: str) -> List[Section]:
        """Sections for one job; a missing or unreadable tab yields []."""
        try:
            rows = self._rows(job_name)
        except SheetsError as e:
            LOGGER.warning("No sections for job %r: %s", job_name, e)
            return []
        return [Section(title=cell(r, 0), notion_url=cell(r, 1)) for r in rows]

    def read_site_content(self) -> SiteContent:
        home = self.read_home()
        jobs = self.read_jobs()
        sections_by_job = {job.name: self.read_sections(job.name) for job in jobs}
        LOGGER.info(
            "Read site content: %d jobs, %d sections",
            len(jobs),
            sum(len(s) for s in sections_by_job.values()),
        )
        return SiteContent(home=home, jobs=jobs, sections_by_job=sections_by_job)
