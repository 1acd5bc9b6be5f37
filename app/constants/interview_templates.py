"""
Description:
Immutable template tables used by the heuristic interview engine.

All keyword vocabularies, question templates, feedback strings and report
pools are held in a single frozen pydantic model. A process-wide instance is
loaded once (optionally from a JSON override file) and handed to each engine
component.

Dependencies:
- pydantic: For the frozen configuration model and JSON loading.
- python-dotenv: For loading INTERVIEW_TEMPLATES_PATH from a .env file.
- loguru: For logging template loading.

Author: @kcaparas1630
"""
import os
import threading
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, ValidationError
from dotenv import load_dotenv
from loguru import logger

load_dotenv()


class InterviewTemplates(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword_vocabulary: Tuple[str, ...] = (
        "javascript", "typescript", "python", "java", "c++", "react", "angular",
        "vue", "node", "express", "django", "flask", "spring", "docker", "kubernetes",
        "aws", "azure", "gcp", "cloud", "database", "sql", "nosql", "mongodb",
        "leadership", "management", "communication", "teamwork", "problem-solving",
        "analytics", "data", "machine learning", "ai", "agile", "scrum", "devops",
        "frontend", "backend", "fullstack", "mobile", "android", "ios", "testing",
        "qa", "security", "networking", "infrastructure", "architecture", "design",
        "user experience", "ui", "ux", "product management", "project management",
    )
    min_keyword_matches: int = 3
    generic_keywords: Tuple[str, ...] = ("experience", "skills", "projects", "challenges")

    # Question synthesis
    technical_question_templates: Tuple[str, ...] = (
        "Tell me about your experience with {skill}.",
        "How have you used {skill} in your previous roles?",
        "Describe a challenging project where you utilized {skill}.",
        "What do you consider best practices when working with {skill}?",
        "How do you stay updated with the latest developments in {skill}?",
    )
    behavioral_questions: Tuple[str, ...] = (
        "Describe a situation where you had to meet a tight deadline.",
        "Tell me about a time when you had to work with a difficult team member.",
        "Give an example of a project that didn't go as planned and how you handled it.",
        "Describe a situation where you had to make a difficult decision.",
        "Tell me about a time when you went above and beyond for a project.",
        "How do you prioritize tasks when working on multiple projects?",
        "Describe a situation where you had to learn a new skill quickly.",
        "Tell me about a time when you received constructive criticism.",
        "How do you handle disagreements with team members?",
        "Give an example of how you've contributed to improving a process.",
    )
    role_question_templates: Tuple[str, ...] = (
        "What interests you about this {job_title} position?",
        "What do you think are the most important skills for a {job_title}?",
        "Where do you see the challenges in this {job_title} role?",
        "What achievements are you most proud of in your career as a {job_title}?",
        "How would you approach the first 90 days in this {job_title} position?",
    )
    default_question_templates: Tuple[str, ...] = (
        "What interests you about this {job_title} position?",
        "What relevant experience do you have for this {job_title} role?",
        "What do you consider your strongest skills for this {job_title} position?",
        "Describe a challenging project you've worked on that's relevant to this role.",
        "How do you stay updated with the latest developments in your field?",
        "Tell me about a time when you had to solve a complex problem.",
        "How do you handle working under pressure or tight deadlines?",
        "Give an example of a situation where you had to collaborate with a difficult team member.",
        "What are your career goals and how does this position help you achieve them?",
        "Do you have any questions about the role or the company?",
    )

    # Inline (per-answer) feedback
    positive_feedback_templates: Tuple[str, ...] = (
        "Thank you for sharing your experience with {keyword}. That's valuable information.",
        "Your knowledge of {keyword} shows through in your answer. That's great to hear.",
        "I appreciate your detailed explanation about {keyword}.",
        "Your experience with {keyword} seems relevant to this position.",
    )
    general_feedback_templates: Tuple[str, ...] = (
        "Thank you for your answer.",
        "I appreciate your response.",
        "That's helpful information.",
        "Thank you for sharing your perspective.",
    )

    # Follow-up questions
    follow_up_templates: Tuple[str, ...] = (
        "Could you tell me more about your experience with {keyword}?",
        "How have you applied {keyword} in your previous roles?",
        "What challenges have you faced when working with {keyword}?",
        "Can you give a specific example of how you've used {keyword} to solve a problem?",
        "What do you consider to be the most important aspects of {keyword}?",
    )
    general_follow_up_questions: Tuple[str, ...] = (
        "Could you elaborate on your last point?",
        "How would you apply that experience to this role?",
        "What specific skills did you develop from that experience?",
        "How do you measure success in that area?",
        "What did you learn from that experience that would be valuable in this position?",
    )
    fallback_follow_up_feedback: str = "Thank you for sharing that information. That's helpful context."
    fallback_follow_up_question: str = "Could you tell me more about your specific experience related to this role?"

    # Answer scoring: (minimum score, feedback), checked highest first
    score_feedback_tiers: Tuple[Tuple[int, str], ...] = (
        (90, "Excellent answer with specific details and relevant skills."),
        (80, "Strong answer demonstrating good knowledge and experience."),
        (70, "Good answer with some relevant points, but could include more specific examples."),
        (60, "Adequate answer, but lacks depth and concrete examples."),
    )
    lowest_tier_feedback: str = "Answer needs improvement - provide more details and specific examples."
    analysis_error_feedback: str = "Unable to analyze this answer."

    # Report strengths
    high_score_strength: str = "Provided detailed and relevant answers to multiple questions"
    technical_strength: str = "Demonstrated good technical knowledge relevant to the position"
    communication_strength: str = "Communicated ideas clearly and effectively"
    problem_solving_strength: str = "Showed strong problem-solving abilities"
    generic_strengths: Tuple[str, ...] = (
        "Showed enthusiasm for the role",
        "Articulated past experiences well",
        "Demonstrated a positive attitude",
        "Presented professional demeanor during the interview",
    )

    # Report improvements
    low_score_improvement: str = "Provide more detailed responses with specific examples"
    technical_improvement: str = "Highlight technical skills more clearly in answers"
    communication_improvement: str = "Structure answers more clearly with a beginning, middle, and conclusion"
    problem_solving_improvement: str = "Include more examples of problem-solving in responses"
    generic_improvements: Tuple[str, ...] = (
        "Quantify achievements with metrics when possible",
        "Research the company more thoroughly before the interview",
        "Prepare more concise responses to common questions",
        "Practice the STAR method (Situation, Task, Action, Result) for behavioral questions",
    )

    # Report recommendations, keyed by exact improvement text
    recommendations_by_improvement: Tuple[Tuple[str, str], ...] = (
        ("Provide more detailed responses with specific examples",
            "Practice answering questions using the STAR method to provide structured examples"),
        ("Highlight technical skills more clearly in answers",
            "Create a list of your technical skills with specific project examples for each"),
        ("Structure answers more clearly with a beginning, middle, and conclusion",
            "Record yourself answering practice questions and review for clarity and structure"),
        ("Include more examples of problem-solving in responses",
            "Prepare 5-7 stories about overcoming challenges in previous roles"),
        ("Quantify achievements with metrics when possible",
            "Review your resume and add specific numbers and percentages to your achievements"),
        ("Research the company more thoroughly before the interview",
            "Spend at least one hour researching the company's products, culture, and recent news"),
        ("Prepare more concise responses to common questions",
            "Practice limiting your answers to 1-2 minutes for most questions"),
        ("Practice the STAR method for behavioral questions",
            "Work with a friend to practice behavioral interview questions using the STAR framework"),
    )
    unmapped_recommendation_template: str = 'To address "{improvement}", practice with a friend or career counselor'
    generic_recommendations: Tuple[str, ...] = (
        "Join professional groups related to your field to expand your network",
        "Take an online course to strengthen skills in areas mentioned in the job description",
        "Prepare thoughtful questions to ask at the end of your next interview",
        "Create a portfolio that showcases your relevant projects and skills",
    )
    min_report_items: int = 3

    # Fallback report
    fallback_overall_score: int = 70
    fallback_technical_score: int = 68
    fallback_communication_score: int = 75
    fallback_problem_solving_score: int = 65
    fallback_question_score: int = 70
    fallback_question_feedback: str = "Good answer that could be more detailed."
    fallback_strengths: Tuple[str, ...] = (
        "Good communication skills",
        "Demonstrates technical knowledge",
        "Shows enthusiasm for the role",
    )
    fallback_improvements: Tuple[str, ...] = (
        "Could provide more specific examples",
        "More detailed technical answers needed",
        "Could structure answers more clearly",
    )
    fallback_recommendations: Tuple[str, ...] = (
        "Practice structured answering techniques",
        "Prepare more concrete examples",
        "Research company-specific information",
    )

    def recommendation_for(self, improvement: str) -> Optional[str]:
        for known_improvement, recommendation in self.recommendations_by_improvement:
            if known_improvement == improvement:
                return recommendation
        return None


def load_interview_templates(path: Optional[str] = None) -> InterviewTemplates:
    """
    Load interview templates, applying overrides from a JSON file if given.

    Args:
        path: Optional path to a JSON file whose keys override the defaults.

    Returns:
        InterviewTemplates: The frozen template set.

    Raises:
        OSError: If the file cannot be read.
        ValidationError: If the file does not describe a valid template set.
    """
    if not path:
        return InterviewTemplates()
    with open(path, "r", encoding="utf-8") as templates_file:
        templates = InterviewTemplates.model_validate_json(templates_file.read())
    logger.info(f"Loaded interview templates from {path}")
    return templates


_templates: Optional[InterviewTemplates] = None
_templates_lock = threading.Lock()


def get_interview_templates() -> InterviewTemplates:
    """
    Get the process-wide template set, loading it on first access.

    An unreadable or invalid override file is logged and the built-in
    defaults are used instead.
    """
    global _templates

    if _templates is None:
        with _templates_lock:
            if _templates is None:
                path = os.getenv("INTERVIEW_TEMPLATES_PATH")
                try:
                    _templates = load_interview_templates(path)
                except (OSError, ValidationError) as e:
                    logger.error(f"Error loading interview templates from {path}, using defaults: {e}")
                    _templates = InterviewTemplates()

    return _templates
