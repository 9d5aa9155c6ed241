# src/schemas/event.py
"""
Calendar event schema.

One ``CalendarEvent`` is a production (show, audition, workshop, ...) with
all of its performance dates grouped together, which is the shape the
calendar's event data file is stored in. Field names are snake_case in
Python and accept the camelCase keys used in the JSON file.
"""

import re
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_PATTERN = re.compile(r"[0-9]{2}:[0-9]{2}")


class EventDate(BaseModel):
    """A single performance of an event."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    date: str = Field(..., description="ISO date string YYYY-MM-DD")
    time: Optional[str] = Field(None, description="Start time HH:MM")
    is_matinee: bool = Field(False, alias="isMatinee")
    ticket_link: Optional[str] = Field(None, alias="ticketLink")

    @field_validator("date")
    @classmethod
    def validate_date(cls, v: str) -> str:
        """Require a real calendar date written as YYYY-MM-DD."""
        if not _DATE_PATTERN.fullmatch(v):
            raise ValueError(f"Invalid date '{v}', expected YYYY-MM-DD")
        try:
            datetime.strptime(v, "%Y-%m-%d")
        except ValueError as e:
            raise ValueError(f"Invalid date '{v}': {e}") from e
        return v

    @field_validator("time")
    @classmethod
    def validate_time(cls, v: Optional[str]) -> Optional[str]:
        """Require a 24-hour HH:MM time when one is given."""
        if v is None:
            return v
        if not _TIME_PATTERN.fullmatch(v):
            raise ValueError(f"Invalid time '{v}', expected HH:MM")
        try:
            datetime.strptime(v, "%H:%M")
        except ValueError as e:
            raise ValueError(f"Invalid time '{v}': {e}") from e
        return v

    @property
    def sort_key(self) -> str:
        """Chronological sort key (date followed by time)."""
        return self.date + (self.time or "")


class CalendarEvent(BaseModel):
    """An event listed on the calendar, with all of its dates."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    slug: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    category: str = Field(..., description="Event type, e.g. Play, Musical, Audition")
    venue: str = Field(..., description="Venue name as entered by the organizer")

    description: Optional[str] = None
    director: Optional[str] = None
    cast: Optional[str] = None
    ticket_link: Optional[str] = Field(None, alias="ticketLink")

    dates: List[EventDate] = Field(default_factory=list)

    @model_validator(mode="after")
    def sort_dates(self) -> "CalendarEvent":
        """Keep performances in chronological order."""
        self.dates.sort(key=lambda d: d.sort_key)
        return self

    @property
    def first_date(self) -> Optional[str]:
        """Date of the earliest performance, if any."""
        return self.dates[0].date if self.dates else None
