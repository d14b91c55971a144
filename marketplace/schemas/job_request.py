import re
from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from marketplace.schemas.common import NonEmptyStr, WorkerCategory, blank_to_none

START_TIME_RE = re.compile(r"^([01]\d|2[0-3]):00$")

SIMPLE_SCHEDULE_FIELDS = ("duration", "budget", "deadline")
DETAILED_SCHEDULE_FIELDS = ("start_date", "start_time", "hours_per_day", "number_of_days")


class JobType(str, Enum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    CONTRACT = "contract"
    ONE_TIME = "one-time"
    OTHER = "other"


class JobCategory(BaseModel):
    model_config = {"use_enum_values": True}

    category: WorkerCategory
    count: int = Field(ge=1)


def derive_title(categories: list[JobCategory]) -> str:
    return ", ".join(f"{c.count} {c.category}" for c in categories)


class JobRequestCreate(BaseModel):
    model_config = {"use_enum_values": True}

    title: str | None = None
    location: NonEmptyStr
    job_type: JobType
    description: NonEmptyStr
    contact_info: NonEmptyStr
    user_id: str | None = None
    workers: int | None = None
    categories: list[JobCategory] | None = None
    duration: str | None = None
    budget: str | None = None
    deadline: date | None = None
    start_date: date | None = None
    start_time: str | None = None
    hours_per_day: int | None = Field(default=None, ge=1, le=12)
    number_of_days: int | None = Field(default=None, ge=1)

    @field_validator("title", "user_id", "duration", "budget", "start_time")
    @classmethod
    def strip_optional_text(cls, v: str | None) -> str | None:
        return blank_to_none(v)

    @model_validator(mode="after")
    def derive_workers_and_title(self):
        if self.categories:
            names = [c.category for c in self.categories]
            if len(set(names)) != len(names):
                raise ValueError("Each worker category may only be listed once")
            # Categories win over any directly entered total
            self.workers = sum(c.count for c in self.categories)
            if not self.title:
                self.title = derive_title(self.categories)
        else:
            self.categories = None

        if not self.title:
            raise ValueError("title is required")
        if self.workers is None or self.workers < 1:
            raise ValueError("workers must be at least 1")
        self._check_schedule()
        return self

    def _check_schedule(self):
        simple = [f for f in SIMPLE_SCHEDULE_FIELDS if getattr(self, f) is not None]
        detailed = [f for f in DETAILED_SCHEDULE_FIELDS if getattr(self, f) is not None]
        if detailed:
            if simple:
                raise ValueError(f"Cannot combine {', '.join(simple)} with a detailed schedule")
            missing = [f for f in DETAILED_SCHEDULE_FIELDS if getattr(self, f) is None]
            if missing:
                raise ValueError(f"Detailed schedule is missing: {', '.join(missing)}")
            if not START_TIME_RE.match(self.start_time):
                raise ValueError("start_time must be a whole hour between 00:00 and 23:00")
        elif not self.duration:
            raise ValueError("Provide either a duration or a detailed schedule")


class JobRequestBrief(BaseModel):
    id: int
    title: str
    location: str


class JobRequestResponse(BaseModel):
    id: int
    title: str
    location: str
    job_type: str
    workers: int
    categories: list[JobCategory] | None = None
    duration: str | None = None
    budget: str | None = None
    deadline: date | None = None
    start_date: date | None = None
    start_time: str | None = None
    hours_per_day: int | None = None
    number_of_days: int | None = None
    description: str
    contact_info: str
    user_id: str
    created_at: str
    quotes: int = 0
    posted_date: str = ""
