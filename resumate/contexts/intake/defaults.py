"""
Default values for the résumé record.

Provides shared defaults used by:
- the field extractors (placeholders for fields that could not be extracted)
- ResumeRecord.from_dict() (placeholders for partial external data)
- default_resume_record() (bootstrap record for an empty editor)

Placeholders are plain strings so a renderer can show them as-is.
"""

import copy
from typing import Any, Dict

# Personal info
NAME_PLACEHOLDER = "Your Name"

# Experience: required fields are never left empty
EXPERIENCE_PLACEHOLDERS = {
    "title": "Position Title",
    "company": "Company Name",
    "location": "Location",
    "start_date": "Start Date",
    "end_date": "End Date",
}
EXPERIENCE_ACHIEVEMENT_PLACEHOLDER = "Key responsibilities and achievements"

# Education: location and graduation date are allowed to stay empty
EDUCATION_PLACEHOLDERS = {
    "degree": "Degree",
    "institution": "University Name",
}

# Projects
PROJECT_PLACEHOLDERS = {
    "name": "Project Name",
    "description": "Project description",
}
PROJECT_ACHIEVEMENT_PLACEHOLDER = "Key project accomplishment"

# Certifications and awards
ISSUER_PLACEHOLDER = "Issuing Organization"
DATE_PLACEHOLDER = "Date"

# Languages
DEFAULT_PROFICIENCY = "Professional"
LANGUAGE_PROFICIENCIES = ("Native", "Fluent", "Professional", "Intermediate", "Basic")

# Skills bucket names
UNGROUPED_SKILLS_CATEGORY = "Skills"
FALLBACK_SKILLS_CATEGORY = "Technical Skills"

# Fully-placeholder record shown before any résumé is uploaded
DEFAULT_RECORD = {
    "personal_info": {
        "full_name": NAME_PLACEHOLDER,
        "email": "your.email@example.com",
        "phone": "+1 (555) 123-4567",
        "location": "City, State",
        "linkedin": "https://linkedin.com/in/yourprofile",
        "github": "https://github.com/yourusername",
    },
    "summary": (
        "Upload your resume to see your information displayed here with professional formatting."
    ),
    "skills": [
        {
            "category": "Example Skills",
            "items": ["Skill 1", "Skill 2", "Skill 3", "Skill 4", "Skill 5"],
        },
    ],
    "experience": [
        {
            "title": "Your Job Title",
            "company": "Company Name",
            "location": "City, State",
            "start_date": "Start Date",
            "end_date": "Present",
            "is_current": True,
            "achievements": [
                "Upload your resume to see your actual experience displayed here",
                "Your achievements and responsibilities will be shown professionally",
            ],
        },
    ],
    "education": [
        {
            "degree": "Your Degree",
            "institution": "University Name",
            "location": "City, State",
            "graduation_date": "Graduation Date",
        },
    ],
}


def get_default_record_data() -> Dict[str, Any]:
    """
    Get the default record as plain data.

    Returns a deep copy, so callers may mutate the result freely.

    Returns:
        Dict in ResumeRecord.to_dict() shape
    """
    return copy.deepcopy(DEFAULT_RECORD)
