"""
Entry derivation from a canonical profile document.

Produces one labeled Entry per logical fact in a fixed section order:
profile summary, headline, achievement, skills, then one entry per project,
experience, education record and FAQ.

Dependencies: profile_rag.core.ingestion.profile_normalizer
System role: Turns profile records into retrievable text
"""

from .models import Entry
from .profile_normalizer import (
    EducationRecord,
    ExperienceRecord,
    FaqRecord,
    ProfileDocument,
    ProfileSection,
    ProjectRecord,
)


def _join_lines(*lines: str | None) -> str:
    return "\n".join(line for line in lines if line).strip()


def _labeled(label: str, value: str | None) -> str:
    return f"{label}: {value}" if value else ""


def _labeled_list(label: str, values: list[str]) -> str:
    return f"{label}: {', '.join(values)}" if values else ""


def _profile_entries(profile: ProfileSection) -> list[Entry]:
    entries = []
    if profile.summary:
        entries.append(Entry(source_id="profile:summary", text=profile.summary))
    if profile.full_name or profile.headline:
        entries.append(
            Entry(
                source_id="profile:headline",
                text=f"{profile.full_name or ''}\n{profile.headline or ''}".strip(),
            )
        )
    if profile.achievement:
        entries.append(
            Entry(source_id="profile:achievement", text=f"Achievement: {profile.achievement}")
        )
    skills = _join_lines(
        _labeled("Hard skills", profile.hard_skills),
        _labeled("Soft skills", profile.soft_skills),
        _labeled("Languages", profile.languages),
    )
    if skills:
        entries.append(Entry(source_id="profile:skills", text=skills))
    return entries


def project_entry(project: ProjectRecord) -> Entry:
    return Entry(
        source_id=f"project:{project.name}",
        text=_join_lines(
            project.name,
            project.description,
            _labeled("Impact", project.impact),
            _labeled_list("Stack", project.tech_stack),
            project.repo_url,
        ),
    )


def experience_entry(experience: ExperienceRecord) -> Entry:
    org = experience.organization or "Unknown"
    bullets = experience.highlights or experience.responsibilities
    period = f"{experience.start_date or ''}–{experience.end_date or 'Present'}"
    return Entry(
        source_id=f"exp:{org}",
        text=_join_lines(
            f"{experience.role or ''} @ {org} ({period})",
            "; ".join(bullets),
            _labeled_list("Projects", experience.projects),
        ),
    )


def education_entry(education: EducationRecord) -> Entry:
    if education.campus:
        place = f"Campus: {education.campus}"
    elif education.location:
        place = f"Location: {education.location}"
    else:
        place = ""
    institution = education.institution or ""
    degree = " ".join(
        part for part in (
            education.degree or education.program or "",
            f"({education.stream})" if education.stream else "",
        ) if part
    )
    period = f"{education.start_date or ''}–{education.end_date_expected or education.end_date or ''}"
    return Entry(
        source_id=f"edu:{education.institution}",
        text=_join_lines(
            f"{institution}, {place}" if place else institution,
            degree,
            period,
            _labeled("GPA", education.gpa),
            _labeled_list("Coursework", education.coursework),
            _labeled_list("Activities", education.activities),
        ),
    )


def faq_entry(faq: FaqRecord) -> Entry:
    return Entry(source_id=f"faq:{faq.q}", text=_join_lines(faq.q, faq.a))


def derive_entries(document: ProfileDocument) -> list[Entry]:
    """
    Derive entries from a canonical document in declared section order.

    Discriminators are not deduplicated: two projects with the same name
    produce the same source_id. Entries whose text is empty are skipped.

    Args:
        document: Normalized profile document

    Returns:
        list[Entry]: Entries in deterministic order
    """
    entries: list[Entry] = []
    if document.profile is not None:
        entries.extend(_profile_entries(document.profile))
    entries.extend(project_entry(project) for project in document.projects)
    entries.extend(experience_entry(experience) for experience in document.experiences)
    entries.extend(education_entry(education) for education in document.education)
    entries.extend(faq_entry(faq) for faq in document.faqs)
    return [entry for entry in entries if entry.text.strip()]
