from datetime import datetime
from typing import Any, Dict, List, Optional
from urllib.parse import urlsplit
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

SAFE_URL_SCHEMES = ("http", "https", "mailto")


def _clean_text(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


def safe_url(value: str) -> str:
    """Keep links that a browser can only navigate to.

    A bare host such as ``github.com/jd`` gets an ``https://`` prefix;
    any other scheme (``javascript:``, ``data:``) becomes ``""``.
    """
    if not value:
        return ""
    try:
        scheme = urlsplit(value).scheme.lower()
    except ValueError:
        return ""
    if scheme in SAFE_URL_SCHEMES:
        return value
    if not scheme and ":" not in value.split("/", 1)[0]:
        return "https://" + value.lstrip("/")
    return ""


class _Entry(BaseModel):
    model_config = ConfigDict(extra="ignore")
    
    @field_validator('*', mode='before')
    def trim(cls, v):
        if v is None:
            return ""
        if isinstance(v, str):
            return v.strip()
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v
    
    def is_blank(self) -> bool:
        return not any(value for value in self.model_dump().values())


class ProjectEntry(_Entry):
    title: str = ""
    description: str = ""
    link: str = ""

    @field_validator('link')
    def check_link(cls, v):
        return safe_url(v)


class EducationEntry(_Entry):
    degree: str = ""
    institution: str = ""
    year: str = ""


class ExperienceEntry(_Entry):
    company: str = ""
    title: str = ""
    duration: str = ""
    description: str = ""


class ProfileLinks(_Entry):
    github: str = ""
    linkedin: str = ""

    @field_validator('github', 'linkedin')
    def check_links(cls, v):
        return safe_url(v)


class PortfolioIn(BaseModel):
    """Editable portfolio fields as submitted by the owner.

    Text is trimmed and blank text becomes ``None``. Blank skills and
    achievements are dropped, as are list entries whose fields are all blank.
    """
    model_config = ConfigDict(extra="ignore")
    
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    summary: Optional[str] = None
    skills: List[str] = []
    achievements: List[str] = []
    projects: List[ProjectEntry] = []
    education: List[EducationEntry] = []
    experience: List[ExperienceEntry] = []
    links: Optional[ProfileLinks] = None
    
    @field_validator('name', 'email', 'phone', 'summary', mode='before')
    def clean_text(cls, v):
        return _clean_text(v)
    
    @field_validator('skills', 'achievements', mode='before')
    def clean_string_list(cls, v):
        if v is None:
            return []
        if not isinstance(v, list):
            return v
        return [item.strip() for item in v if isinstance(item, str) and item.strip()]
    
    @field_validator('projects', 'education', 'experience', mode='before')
    def default_entries(cls, v):
        return [] if v is None else v
    
    @field_validator('projects', 'education', 'experience')
    def drop_blank_entries(cls, v):
        return [entry for entry in v if not entry.is_blank()]
    
    @field_validator('links')
    def drop_blank_links(cls, v):
        if v is None or v.is_blank():
            return None
        return v
    
    def to_fields(self) -> Dict[str, Any]:
        return self.model_dump()


class PortfolioResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)
    
    id: str
    user_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    summary: Optional[str] = None
    skills: List[str] = []
    achievements: List[str] = []
    projects: List[ProjectEntry] = []
    education: List[EducationEntry] = []
    experience: List[ExperienceEntry] = []
    links: Optional[ProfileLinks] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
