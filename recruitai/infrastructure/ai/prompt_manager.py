"""
Prompt Manager for AI Operations

Centralized prompt management for consistent AI interactions:
- Templated prompts for each analysis the platform performs
- Per-template sampling parameters (temperature, max tokens)
- Usage metrics per template
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

import structlog

logger = structlog.get_logger(__name__)


class PromptType(Enum):
    """Types of prompts supported by the system"""
    JOB_MATCHING = "job_matching"
    RESUME_ANALYSIS = "resume_analysis"
    ANSWER_ANALYSIS = "answer_analysis"
    INTERVIEW_ASSESSMENT = "interview_assessment"


def _join(values: Optional[Sequence[Any]]) -> str:
    items = [str(v) for v in (values or []) if v not in (None, "")]
    return ", ".join(items) if items else "N/A"


def _or_na(value: Any) -> str:
    return "N/A" if value in (None, "") else str(value)


class PromptManager:
    """
    Template-based prompt generation for the recruitment analyzers.

    Every template asks for a single JSON object; the analyzers validate that
    object against a strict schema before use.
    """

    def __init__(self):
        self._prompt_templates = self._initialize_templates()
        self._metrics = {
            "prompts_generated": 0,
            "template_usage": {},
        }

    def _initialize_templates(self) -> Dict[str, Dict[str, Any]]:
        """Initialize prompt templates"""
        return {
            PromptType.JOB_MATCHING.value: {
                "system": "You are an expert recruitment AI. Analyze job-candidate matches objectively.",
                "user": """Compare this job posting with the candidate's resume and provide a detailed match analysis.

JOB POSTING:
Title: {job_title}
Required Skills: {required_skills}
Experience Required: {experience_min}-{experience_max} {experience_unit}
Education: {education}
Description: {job_description}

CANDIDATE RESUME:
Skills: {candidate_skills}
Experience: {experience_years} years
Education: {education_level}
Career Level: {career_level}

Provide a JSON response with:
1. overallScore: 0-100 match percentage
2. skillMatch: {{score: 0-100, matched: [], missing: []}}
3. experienceMatch: {{score: 0-100, analysis: string}}
4. educationMatch: {{score: 0-100, analysis: string}}
5. cultureFit: {{score: 0-100, analysis: string}}
6. recommendation: one of [strong_match, good_match, potential_match, weak_match, no_match]
7. reasoning: detailed explanation
8. confidence: 0-1

Return only valid JSON.""",
                "temperature": 0.2,
                "max_tokens": 1500
            },

            PromptType.RESUME_ANALYSIS.value: {
                "system": "You are an expert HR analyst. Extract structured information from resumes.",
                "user": """Analyze the following resume and extract key information in JSON format:

Resume:
{resume_text}

Please provide:
1. extractedSkills: Array of technical and soft skills
2. experienceYears: Total years of experience (number)
3. keyStrengths: Top 3-5 strengths
4. educationLevel: Highest education level
5. careerLevel: one of [entry, mid, senior, executive]

Return only valid JSON.""",
                "temperature": 0.3,
                "max_tokens": 1000
            },

            PromptType.ANSWER_ANALYSIS.value: {
                "system": "You are an expert interview assessor. Provide fair, constructive analysis of candidate responses.",
                "user": """Analyze this interview response and provide detailed feedback.

Question: {question}
Question Type: {question_type}
{expected_points}
{job_context}
Candidate's Answer: {answer}

Provide a JSON response with:
1. score: 0-100 rating
2. strengths: Array of positive aspects
3. weaknesses: Array of areas for improvement
4. keyPoints: Main points covered by the candidate
5. sentiment: overall sentiment (positive/neutral/negative)
6. confidence: 0-1 confidence in the analysis
7. feedback: Constructive feedback for the candidate

Return only valid JSON.""",
                "temperature": 0.3,
                "max_tokens": 800
            },

            PromptType.INTERVIEW_ASSESSMENT.value: {
                "system": "You are an expert HR interviewer providing final candidate assessments.",
                "user": """Based on this complete interview, provide an overall assessment.
{job_context}
{qa_text}

Provide a JSON response with:
1. technicalScore: 0-100
2. communicationScore: 0-100
3. problemSolvingScore: 0-100
4. cultureFitScore: 0-100
5. strengths: Top 3-5 strengths demonstrated
6. concerns: Any concerns or red flags
7. keyInsights: Important observations
8. recommendation: one of [strong_yes, yes, maybe, no, strong_no]
9. confidence: 0-1

Return only valid JSON.""",
                "temperature": 0.3,
                "max_tokens": 1000
            },
        }

    def generate_prompt(
        self,
        prompt_type: Union[PromptType, str],
        context: Dict[str, Any],
        custom_instructions: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Generate a prompt for specific AI operations.

        Args:
            prompt_type: Type of prompt to generate
            context: Context variables for template substitution
            custom_instructions: Additional custom instructions

        Returns:
            Dictionary with ``messages``, ``temperature`` and ``max_tokens``
        """
        prompt_type_str = prompt_type if isinstance(prompt_type, str) else prompt_type.value

        if prompt_type_str not in self._prompt_templates:
            raise ValueError(f"Unknown prompt type: {prompt_type_str}")

        template = self._prompt_templates[prompt_type_str]
        user_message = template["user"].format(**context)
        if custom_instructions:
            user_message += f"\n\nAdditional Instructions: {custom_instructions}"

        prompt = {
            "messages": [
                {"role": "system", "content": template["system"]},
                {"role": "user", "content": user_message}
            ],
            "temperature": template.get("temperature", 0.3),
            "max_tokens": template.get("max_tokens", 500),
            "prompt_type": prompt_type_str,
            "generated_at": datetime.now().isoformat()
        }

        self._metrics["prompts_generated"] += 1
        usage = self._metrics["template_usage"]
        usage[prompt_type_str] = usage.get(prompt_type_str, 0) + 1

        logger.debug(
            "Generated prompt",
            prompt_type=prompt_type_str,
            context_keys=list(context.keys())
        )
        return prompt

    def create_job_matching_prompt(self, job: Any, resume: Any) -> Dict[str, Any]:
        """Create prompt comparing a job posting with a candidate resume"""
        experience = job.requirements.experience
        context = {
            "job_title": job.title,
            "required_skills": _join(job.requirements.skills),
            "experience_min": _or_na(experience.min if experience else None),
            "experience_max": _or_na(experience.max if experience else None),
            "experience_unit": experience.unit.value if experience else "years",
            "education": _or_na(job.requirements.education),
            "job_description": job.description,
            "candidate_skills": _join(resume.skills),
            "experience_years": _or_na(resume.analysis.experience_years),
            "education_level": _or_na(resume.analysis.education_level),
            "career_level": _or_na(
                resume.analysis.career_level.value if resume.analysis.career_level else None
            ),
        }
        return self.generate_prompt(PromptType.JOB_MATCHING, context)

    def create_resume_analysis_prompt(self, resume_text: str) -> Dict[str, Any]:
        return self.generate_prompt(PromptType.RESUME_ANALYSIS, {"resume_text": resume_text})

    def create_answer_analysis_prompt(
        self,
        question: str,
        question_type: str,
        answer: str,
        expected_points: Optional[List[str]] = None,
        job_title: Optional[str] = None,
    ) -> Dict[str, Any]:
        context = {
            "question": question,
            "question_type": question_type,
            "expected_points": f"Expected Points: {', '.join(expected_points)}" if expected_points else "",
            "job_context": f"Position: {job_title}\n" if job_title else "",
            "answer": answer,
        }
        return self.generate_prompt(PromptType.ANSWER_ANALYSIS, context)

    def create_interview_assessment_prompt(
        self,
        questions_and_answers: Sequence[Dict[str, Any]],
        job_title: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Build the overall-assessment prompt from answered questions (Q/A/Score blocks)"""
        qa_text = "\n\n".join(
            f"Q{i}: {qa['question']}\nA{i}: {qa['answer']}\nScore: {_or_na(qa.get('score'))}"
            for i, qa in enumerate(questions_and_answers, start=1)
        )
        context = {
            "qa_text": qa_text,
            "job_context": f"Position: {job_title}\n" if job_title else "",
        }
        return self.generate_prompt(PromptType.INTERVIEW_ASSESSMENT, context)

    def get_metrics(self) -> Dict[str, Any]:
        return {
            "prompts_generated": self._metrics["prompts_generated"],
            "template_usage": dict(self._metrics["template_usage"]),
        }
