"""
Keyword Extractor

Scans a free-text job description for the fixed keyword vocabulary. Matching
is plain substring containment on the lower-cased text, so "java" also
matches inside "javascript".

Dependencies:
- app.constants.interview_templates: For the keyword vocabulary.
- app.schemas.interview_schemas: For the JobContext schema.

Author: @kcaparas1630
"""
from typing import List, Optional
from app.constants.interview_templates import InterviewTemplates, get_interview_templates
from app.schemas.interview_schemas import JobContext


def extract_keywords(description: str, templates: Optional[InterviewTemplates] = None) -> List[str]:
    """
    Find vocabulary terms mentioned in a job description.

    When fewer than three terms are found, the generic fallback terms are
    appended so question and feedback generators always have material.

    Args:
        description (str): Free-text job description.
        templates (InterviewTemplates, optional): Template set to use.

    Returns:
        List[str]: Matched terms in vocabulary order, never empty.

    Example:
        >>> extract_keywords("Senior Python developer, Docker and AWS")
        ['python', 'docker', 'aws']
    """
    templates = templates or get_interview_templates()
    text = str(description or "").lower()

    found_keywords = [keyword for keyword in templates.keyword_vocabulary if keyword in text]

    if len(found_keywords) < templates.min_keyword_matches:
        found_keywords.extend(templates.generic_keywords)

    return found_keywords


def build_job_context(job_title: str, job_description: str, templates: Optional[InterviewTemplates] = None) -> JobContext:
    """Extract keywords once and bundle them with the job details."""
    return JobContext(
        title=job_title,
        description=job_description,
        keywords=tuple(extract_keywords(job_description, templates)),
    )
