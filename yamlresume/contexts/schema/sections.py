"""
Section schemas.

One field map per resume section. Item sections (education, work, ...) are
lists of item objects; basics and location are single objects. CONTENT_FIELDS
composes every section into the content object, basics and education being
the only required sections.
"""

from yamlresume.contexts.schema import primitives as p
from yamlresume.contexts.schema.combinators import merge_fields, object_schema
from yamlresume.contexts.schema.options import SECTION_IDS

# Field maps (required fields first, then optional ones)

BASICS_FIELDS = {
    "name": p.name(),
    "email": p.email().optional(),
    "headline": p.headline().optional(),
    "phone": p.phone().optional(),
    "summary": p.summary().optional(),
    "url": p.url().optional(),
}

LOCATION_FIELDS = {
    "city": p.sized_string("city", 2, 64, title="City", examples=["San Francisco"]),
    "address": p.sized_string(
        "address", 4, 256, title="Address", examples=["123 Main Street"]
    ).optional(),
    "country": p.country().optional(),
    "postalCode": p.sized_string(
        "postalCode", 2, 16, title="Postal Code", examples=["94105"]
    ).optional(),
    "region": p.sized_string("region", 2, 64, title="Region", examples=["California"]).optional(),
}

PROFILE_FIELDS = {
    "network": p.network(),
    "username": p.sized_string("username", 2, 64, title="Username", examples=["yamlresume"]),
    "url": p.url().optional(),
}

EDUCATION_FIELDS = {
    "area": p.sized_string("area", 2, 64, title="Area", examples=["Computer Science"]),
    "institution": p.organization("institution"),
    "degree": p.degree(),
    "startDate": p.date("startDate"),
    "courses": p.list_of(
        "courses",
        p.sized_string("course", 2, 128, title="Course", examples=["Operating Systems"]),
        title="Courses",
        description="A list of courses taken.",
    ).optional(),
    "endDate": p.date("endDate").optional(),
    "summary": p.summary().optional(),
    "score": p.sized_string("score", 2, 32, title="Score", examples=["3.9/4.0"]).optional(),
    "url": p.url().optional(),
}

WORK_FIELDS = {
    "name": p.organization("name"),
    "position": p.position(),
    "startDate": p.date("startDate"),
    "summary": p.summary(),
    "endDate": p.date("endDate").optional(),
    "keywords": p.keywords().optional(),
    "url": p.url().optional(),
}

AWARD_FIELDS = {
    "awarder": p.organization("awarder"),
    "title": p.sized_string("title", 2, 128, title="Title", examples=["Dean's List"]),
    "date": p.date("date").optional(),
    "summary": p.summary().optional(),
}

CERTIFICATE_FIELDS = {
    "issuer": p.organization("issuer"),
    "name": p.name(),
    "date": p.date("date").optional(),
    "url": p.url().optional(),
}

INTEREST_FIELDS = {
    "name": p.name(),
    "keywords": p.keywords().optional(),
}

LANGUAGE_FIELDS = {
    "fluency": p.fluency(),
    "language": p.language(),
    "keywords": p.keywords().optional(),
}

PROJECT_FIELDS = {
    "name": p.name(),
    "startDate": p.date("startDate"),
    "summary": p.summary(),
    "description": p.sized_string(
        "description", 4, 128, title="Description", examples=["A resume builder"]
    ).optional(),
    "endDate": p.date("endDate").optional(),
    "keywords": p.keywords().optional(),
    "url": p.url().optional(),
}

PUBLICATION_FIELDS = {
    "name": p.name(),
    "publisher": p.organization("publisher"),
    "releaseDate": p.date("releaseDate").optional(),
    "summary": p.summary().optional(),
    "url": p.url().optional(),
}

REFERENCE_FIELDS = {
    "name": p.name(),
    "summary": p.summary(),
    "email": p.email().optional(),
    "phone": p.phone().optional(),
    "relationship": p.sized_string(
        "relationship", 2, 128, title="Relationship", examples=["Former manager"]
    ).optional(),
}

SKILL_FIELDS = {
    "level": p.level(),
    "name": p.name(),
    "keywords": p.keywords().optional(),
}

VOLUNTEER_FIELDS = {
    "organization": p.organization(),
    "position": p.position(),
    "startDate": p.date("startDate"),
    "summary": p.summary(),
    "endDate": p.date("endDate").optional(),
    "url": p.url().optional(),
}

# Models

Basics = object_schema("Basics", BASICS_FIELDS, description="Personal information.")
Location = object_schema("Location", LOCATION_FIELDS, description="Where the person lives.")
Profile = object_schema("Profile", PROFILE_FIELDS)
EducationItem = object_schema("EducationItem", EDUCATION_FIELDS)
WorkItem = object_schema("WorkItem", WORK_FIELDS)
AwardItem = object_schema("AwardItem", AWARD_FIELDS)
CertificateItem = object_schema("CertificateItem", CERTIFICATE_FIELDS)
InterestItem = object_schema("InterestItem", INTEREST_FIELDS)
LanguageItem = object_schema("LanguageItem", LANGUAGE_FIELDS)
ProjectItem = object_schema("ProjectItem", PROJECT_FIELDS)
PublicationItem = object_schema("PublicationItem", PUBLICATION_FIELDS)
ReferenceItem = object_schema("ReferenceItem", REFERENCE_FIELDS)
SkillItem = object_schema("SkillItem", SKILL_FIELDS)
VolunteerItem = object_schema("VolunteerItem", VOLUNTEER_FIELDS)


def _section_list(section: str, item_model, description: str, min_items: int = 0) -> p.Rule:
    item = p.object_of(section, item_model, title=section.capitalize(), description=description)
    return p.list_of(
        section,
        item,
        title=section.capitalize(),
        description=description,
        min_items=min_items,
    )


# Section maps, one per section id, composed below

BASICS_SECTION = {
    "basics": p.object_of("basics", Basics, title="Basics", description="Personal information.")
}
EDUCATION_SECTION = {
    "education": _section_list(
        "education", EducationItem, "Education history, at least one entry.", min_items=1
    )
}
LOCATION_SECTION = {
    "location": p.object_of(
        "location", Location, title="Location", description="Where the person lives."
    ).optional()
}
PROFILES_SECTION = {
    "profiles": _section_list("profiles", Profile, "Social network profiles.").optional()
}
WORK_SECTION = {"work": _section_list("work", WorkItem, "Work experience.").optional()}
VOLUNTEER_SECTION = {
    "volunteer": _section_list("volunteer", VolunteerItem, "Volunteer experience.").optional()
}
AWARDS_SECTION = {
    "awards": _section_list("awards", AwardItem, "Awards and honors.").optional()
}
CERTIFICATES_SECTION = {
    "certificates": _section_list(
        "certificates", CertificateItem, "Certificates earned."
    ).optional()
}
PUBLICATIONS_SECTION = {
    "publications": _section_list(
        "publications", PublicationItem, "Published works."
    ).optional()
}
SKILLS_SECTION = {
    "skills": _section_list("skills", SkillItem, "Professional skills.").optional()
}
LANGUAGES_SECTION = {
    "languages": _section_list("languages", LanguageItem, "Spoken languages.").optional()
}
INTERESTS_SECTION = {
    "interests": _section_list("interests", InterestItem, "Personal interests.").optional()
}
REFERENCES_SECTION = {
    "references": _section_list("references", ReferenceItem, "Professional references.").optional()
}
PROJECTS_SECTION = {
    "projects": _section_list("projects", ProjectItem, "Personal or work projects.").optional()
}

CONTENT_FIELDS = merge_fields(
    BASICS_SECTION,
    LOCATION_SECTION,
    PROFILES_SECTION,
    EDUCATION_SECTION,
    WORK_SECTION,
    VOLUNTEER_SECTION,
    AWARDS_SECTION,
    CERTIFICATES_SECTION,
    PUBLICATIONS_SECTION,
    SKILLS_SECTION,
    LANGUAGES_SECTION,
    INTERESTS_SECTION,
    REFERENCES_SECTION,
    PROJECTS_SECTION,
)

assert tuple(CONTENT_FIELDS) == SECTION_IDS, "content fields out of sync with SECTION_IDS"

Content = object_schema("Content", CONTENT_FIELDS, description="The resume content.")
