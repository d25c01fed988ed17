"""
Profile document normalization.

Maps field-name variants onto one canonical record shape through a declarative
alias table, then validates the sections into pydantic models. Unknown fields
are ignored.

Dependencies: pydantic
System role: Canonical input for entry derivation
"""

import logging
from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from profile_rag.core.exceptions import SourceDocumentInvalid

logger = logging.getLogger(__name__)

# Keys are compared after lowercasing and stripping a trailing colon.
DOCUMENT_ALIASES: dict[str, str] = {
    "profile": "profile",
    "projects": "projects",
    "project": "projects",
    "experiences": "experiences",
    "experience": "experiences",
    "education": "education",
    "educations": "education",
    "faqs": "faqs",
    "faq": "faqs",
}

PROFILE_ALIASES: dict[str, str] = {
    "soft_skills": "soft_skills",
    "softskills": "soft_skills",
    "soft skills": "soft_skills",
    "hard_skills": "hard_skills",
    "hardskills": "hard_skills",
    "hard skills": "hard_skills",
    "language": "languages",
    "languages": "languages",
    "achievement": "achievement",
    "achievements": "achievement",
}

FAQ_ALIASES: dict[str, str] = {
    "question": "q",
    "answer": "a",
}


def canonical_key(key: str, aliases: Mapping[str, str]) -> str:
    """
    Resolve a raw field name to its canonical key.

    Args:
        key: Raw field name as found in the document
        aliases: Alias table for the enclosing section

    Returns:
        str: Canonical key, or the cleaned key when no alias matches
    """
    cleaned = str(key).strip().rstrip(":").strip().lower()
    return aliases.get(cleaned, cleaned)


def apply_aliases(record: Mapping[str, Any], aliases: Mapping[str, str]) -> dict[str, Any]:
    """
    Rename the keys of one record using an alias table.

    When several variants map to the same canonical key the first non-empty
    value wins.
    """
    result: dict[str, Any] = {}
    for key, value in record.items():
        target = canonical_key(key, aliases)
        if target in result and result[target] not in (None, "", []):
            continue
        result[target] = value
    return result


def _to_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value if item not in (None, ""))
    return str(value)


def _to_list(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value if item not in (None, "")]
    return [str(value)]


Text = Annotated[str | None, BeforeValidator(_to_text)]
TextList = Annotated[list[str], BeforeValidator(_to_list)]


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore")


class ProfileSection(_Record):
    """Top-level profile facts."""

    full_name: Text = None
    headline: Text = None
    summary: Text = None
    achievement: Text = None
    hard_skills: Text = None
    soft_skills: Text = None
    languages: Text = None


class ProjectRecord(_Record):
    name: Text = None
    description: Text = None
    impact: Text = None
    tech_stack: TextList = Field(default_factory=list)
    repo_url: Text = None


class ExperienceRecord(_Record):
    role: Text = None
    organization: Text = None
    start_date: Text = None
    end_date: Text = None
    highlights: TextList = Field(default_factory=list)
    responsibilities: TextList = Field(default_factory=list)
    projects: TextList = Field(default_factory=list)


class EducationRecord(_Record):
    institution: Text = None
    campus: Text = None
    location: Text = None
    degree: Text = None
    program: Text = None
    stream: Text = None
    start_date: Text = None
    end_date: Text = None
    end_date_expected: Text = None
    gpa: Text = None
    coursework: TextList = Field(default_factory=list)
    activities: TextList = Field(default_factory=list)


class FaqRecord(_Record):
    q: Text = None
    a: Text = None


class ProfileDocument(_Record):
    """Canonical profile document."""

    profile: ProfileSection | None = None
    projects: list[ProjectRecord] = Field(default_factory=list)
    experiences: list[ExperienceRecord] = Field(default_factory=list)
    education: list[EducationRecord] = Field(default_factory=list)
    faqs: list[FaqRecord] = Field(default_factory=list)


def _normalize_records(raw: Any, section: str, aliases: Mapping[str, str]) -> list[dict[str, Any]]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise SourceDocumentInvalid(f"Section '{section}' must be a list", details={"section": section})
    records = []
    for index, item in enumerate(raw):
        if not isinstance(item, Mapping):
            raise SourceDocumentInvalid(
                f"Section '{section}' item {index} must be an object",
                details={"section": section, "index": index},
            )
        records.append(apply_aliases(item, aliases))
    return records


def normalize_document(raw: Any) -> ProfileDocument:
    """
    Normalize a parsed profile document into its canonical shape.

    Args:
        raw: Parsed JSON document (mapping of sections)

    Returns:
        ProfileDocument: Canonical, validated document

    Raises:
        SourceDocumentInvalid: When the document or one of its sections is malformed
    """
    if isinstance(raw, ProfileDocument):
        return raw
    if not isinstance(raw, Mapping):
        raise SourceDocumentInvalid(
            "Profile document must be a JSON object",
            details={"type": type(raw).__name__},
        )

    top = apply_aliases(raw, DOCUMENT_ALIASES)

    profile = top.get("profile")
    if profile is not None and not isinstance(profile, Mapping):
        raise SourceDocumentInvalid("Section 'profile' must be an object", details={"section": "profile"})

    canonical = {
        "profile": apply_aliases(profile, PROFILE_ALIASES) if profile is not None else None,
        "projects": _normalize_records(top.get("projects"), "projects", {}),
        "experiences": _normalize_records(top.get("experiences"), "experiences", {}),
        "education": _normalize_records(top.get("education"), "education", {}),
        "faqs": _normalize_records(top.get("faqs"), "faqs", FAQ_ALIASES),
    }

    try:
        document = ProfileDocument.model_validate(canonical)
    except PydanticValidationError as e:
        raise SourceDocumentInvalid(
            "Profile document failed validation",
            details={"errors": e.error_count()},
        ) from e

    logger.debug(
        f"{__name__}:normalize_document - projects={len(document.projects)}, "
        f"experiences={len(document.experiences)}, education={len(document.education)}, "
        f"faqs={len(document.faqs)}"
    )
    return document
