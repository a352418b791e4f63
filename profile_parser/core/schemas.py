from pydantic import BaseModel, ConfigDict, Field
from typing import List, Tuple


SectionIndex = List[Tuple[str, int]]  # (header key, line index), ordered by index


class ProfileModel(BaseModel):
    """Base for every parser output: snake_case in Python, camelCase on the wire."""
    model_config = ConfigDict(populate_by_name=True)


class ContactInfo(ProfileModel):
    headline: str = ""
    location: str = ""
    email: str = ""
    phone: str = ""
    linkedin_url: str = Field(default="", alias="linkedinUrl")
    websites: List[str] = Field(default_factory=list)  # in document order, may repeat linkedin_url


class ExperienceEntry(ProfileModel):
    """One position from the Experience section."""
    role: str = ""
    organization: str = ""
    duration: str = ""  # first line of the chunk holding a year, e.g. "2021 - Present"
    summary: str = ""


class EducationEntry(ProfileModel):
    """One school from the Education section."""
    institution: str = ""
    degree: str = ""
    duration: str = ""
    summary: str = ""


class ParsedProfile(ProfileModel):
    name: str = ""
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    headline: str = ""
    location: str = ""
    email: str = ""
    phone: str = ""
    linkedin_url: str = Field(default="", alias="linkedinUrl")
    websites: List[str] = Field(default_factory=list)
    summary: str = ""
    skills: List[str] = Field(default_factory=list, max_length=20)
    experience: List[ExperienceEntry] = Field(default_factory=list, max_length=6)
    education: List[EducationEntry] = Field(default_factory=list, max_length=5)
    confidence: int = Field(default=0, ge=0, le=4, description="How many of name, headline, summary, skills were found")
