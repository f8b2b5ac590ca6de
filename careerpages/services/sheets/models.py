"""
Pydantic models for the site content assembled from the spreadsheet.

Serialized with camel-case aliases to match the JSON the front-end reads:
    { home: {title, intro1, intro2},
      jobs: [{name, notionBlurb}],
      sectionsByJob: { [jobName]: [{title, notionUrl}] } }
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ContentModel(BaseModel):
    """Base class providing camel-case aliases and population by name."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class HomeContent(ContentModel):
    title: str = ""
    intro1: str = ""
    intro2: str = ""


class Job(ContentModel):
    """One job title (category) from the 'Job Titles' tab."""

    name: str
    notion_blurb: str = ""
    """Optional Notion page URL with the job's introductory blurb."""


class Section(ContentModel):
    """One entry of a job's own tab."""

    title: str
    notion_url: str = ""


class SiteContent(ContentModel):
    home: HomeContent = Field(default_factory=HomeContent)
    jobs: List[Job] = Field(default_factory=list)
    sections_by_job: Dict[str, List[Section]] = Field(default_factory=dict)
