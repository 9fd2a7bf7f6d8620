"""
Database Schemas

Pydantic models for every resource kind the portal stores. This file is the
single source of truth for the data structure.

Each kind has three models:
- <Kind>Create  - full create payload, applies field defaults
- <Kind>Update  - partial update payload, every field optional
- <Kind>        - stored record as returned by the API (adds id / timestamps)

JSON uses camelCase (imageUrl, createdAt); Python attributes are snake_case.
Both spellings are accepted on input, output is always camelCase.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Annotated, ClassVar, FrozenSet, List, Literal, Optional, Tuple, Type

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    StringConstraints,
    ValidationInfo,
    create_model,
    field_validator,
)
from pydantic.alias_generators import to_camel


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
OptionalStr = Annotated[Optional[str], BeforeValidator(_blank_to_none)]
HexColor = Annotated[str, StringConstraints(strip_whitespace=True, pattern=r"^#[0-9A-Fa-f]{6}$")]

DeveloperStatus = Literal["active", "inactive"]
EventStatus = Literal["draft", "published", "cancelled"]
EventCategory = Literal[
    "Community Service", "Training", "Cultural", "Healthcare", "Education", "Environment",
]
ResourceCategory = Literal["Documents", "Forms", "Videos", "Images"]
FileType = Literal["PDF", "DOC", "DOCX", "MP4", "MOV", "JPG", "PNG", "GIF"]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class PartialModel(CamelModel):
    """Base for update payloads.

    Omitted fields stay unset. Fields listed in ``non_nullable`` may be
    omitted but not sent as null.
    """

    non_nullable: ClassVar[FrozenSet[str]] = frozenset()

    @field_validator("*", mode="after")
    @classmethod
    def _reject_null(cls, value, info: ValidationInfo):
        if value is None and info.field_name in cls.non_nullable:
            raise ValueError("Field cannot be null")
        return value

    def changes(self) -> dict:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True)


# ---------------------------------------------------------------- Excos

class ExcoCreate(CamelModel):
    """Executive committee member."""
    name: NonEmptyStr
    position: NonEmptyStr
    email: EmailStr
    phone: OptionalStr = None
    image_url: OptionalStr = None
    is_active: bool = True


class ExcoUpdate(PartialModel):
    non_nullable = frozenset({"name", "position", "email", "is_active"})

    name: Optional[NonEmptyStr] = None
    position: Optional[NonEmptyStr] = None
    email: Optional[EmailStr] = None
    phone: OptionalStr = None
    image_url: OptionalStr = None
    is_active: Optional[bool] = None


class Exco(ExcoCreate):
    id: str
    created_at: datetime


# ----------------------------------------------------------- Developers

class DeveloperCreate(CamelModel):
    name: NonEmptyStr
    email: EmailStr
    role: NonEmptyStr
    skills: Optional[List[NonEmptyStr]] = None
    status: DeveloperStatus = "active"
    image_url: OptionalStr = None


class DeveloperUpdate(PartialModel):
    non_nullable = frozenset({"name", "email", "role", "status"})

    name: Optional[NonEmptyStr] = None
    email: Optional[EmailStr] = None
    role: Optional[NonEmptyStr] = None
    skills: Optional[List[NonEmptyStr]] = None
    status: Optional[DeveloperStatus] = None
    image_url: OptionalStr = None


class Developer(DeveloperCreate):
    id: str
    created_at: datetime


# --------------------------------------------------------------- Events

class EventCreate(CamelModel):
    title: NonEmptyStr
    description: NonEmptyStr
    date: NonEmptyStr
    time: NonEmptyStr
    location: NonEmptyStr
    category: EventCategory
    image_url: OptionalStr = None
    status: EventStatus = "draft"


class EventUpdate(PartialModel):
    non_nullable = frozenset({
        "title", "description", "date", "time", "location", "category", "status",
    })

    title: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None
    date: Optional[NonEmptyStr] = None
    time: Optional[NonEmptyStr] = None
    location: Optional[NonEmptyStr] = None
    category: Optional[EventCategory] = None
    image_url: OptionalStr = None
    status: Optional[EventStatus] = None


class Event(EventCreate):
    id: str
    created_at: datetime


# ------------------------------------------------------------ Resources

class ResourceCreate(CamelModel):
    """Downloadable document, form, video or image."""
    title: NonEmptyStr
    description: OptionalStr = None
    category: ResourceCategory
    file_url: OptionalStr = None
    file_type: FileType
    file_size: OptionalStr = None


class ResourceUpdate(PartialModel):
    non_nullable = frozenset({"title", "category", "file_type"})

    title: Optional[NonEmptyStr] = None
    description: OptionalStr = None
    category: Optional[ResourceCategory] = None
    file_url: OptionalStr = None
    file_type: Optional[FileType] = None
    file_size: OptionalStr = None


class Resource(ResourceCreate):
    id: str
    created_at: datetime


# ---------------------------------------------------------- UI settings

class UiSettingsBase(CamelModel):
    """Site theme. The defaults are the settings the portal starts with."""
    primary_color: HexColor = "#006600"
    secondary_color: HexColor = "#C3B091"
    accent_color: HexColor = "#FFD700"
    logo_url: OptionalStr = None
    site_title: NonEmptyStr = "NYSC Jos North - Official Biodata Portal"
    site_description: NonEmptyStr = "Official portal for NYSC Jos North operations and management"
    contact_email: EmailStr = "contact@nyscjosnorth.gov.ng"


class UiSettingsUpdate(PartialModel):
    non_nullable = frozenset({
        "primary_color", "secondary_color", "accent_color",
        "site_title", "site_description", "contact_email",
    })

    primary_color: Optional[HexColor] = None
    secondary_color: Optional[HexColor] = None
    accent_color: Optional[HexColor] = None
    logo_url: OptionalStr = None
    site_title: Optional[NonEmptyStr] = None
    site_description: Optional[NonEmptyStr] = None
    contact_email: Optional[EmailStr] = None


class UiSettings(UiSettingsBase):
    id: str
    updated_at: datetime


# ------------------------------------------------------ Resource kinds

@dataclass(frozen=True)
class ResourceKind:
    """Everything the storage engine and router need to serve one collection."""
    name: str
    label: str
    create_model: Type[CamelModel]
    update_model: Type[PartialModel]
    record_model: Type[CamelModel]
    filter_fields: Tuple[str, ...] = ()
    search_fields: Tuple[str, ...] = ()


EXCOS = ResourceKind(
    name="excos",
    label="Exco",
    create_model=ExcoCreate,
    update_model=ExcoUpdate,
    record_model=Exco,
    filter_fields=("is_active",),
    search_fields=("name", "position", "email"),
)

DEVELOPERS = ResourceKind(
    name="developers",
    label="Developer",
    create_model=DeveloperCreate,
    update_model=DeveloperUpdate,
    record_model=Developer,
    filter_fields=("status",),
    search_fields=("name", "role", "email"),
)

EVENTS = ResourceKind(
    name="events",
    label="Event",
    create_model=EventCreate,
    update_model=EventUpdate,
    record_model=Event,
    filter_fields=("category", "status"),
    search_fields=("title", "description"),
)

RESOURCES = ResourceKind(
    name="resources",
    label="Resource",
    create_model=ResourceCreate,
    update_model=ResourceUpdate,
    record_model=Resource,
    filter_fields=("category", "file_type"),
    search_fields=("title", "description"),
)

RESOURCE_KINDS: Tuple[ResourceKind, ...] = (EXCOS, DEVELOPERS, EVENTS, RESOURCES)


def build_filter_model(kind: ResourceKind) -> Type[CamelModel]:
    """Query-string model for ``GET /api/<kind>``: every filter field optional."""
    fields = {
        name: (Optional[kind.record_model.model_fields[name].annotation], None)
        for name in kind.filter_fields
    }
    return create_model(f"{kind.label}Filters", __base__=CamelModel, **fields)
