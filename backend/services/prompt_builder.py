"""Prompt templates for Gemini API calls."""

from models.schemas.intake import AIIntakeInput

SYSTEM_INSTRUCTION = (
    "You are a professional recruiter AI that generates structured job specifications. "
    "Always return valid JSON. Never include PII or demographic information."
)


def build_job_intake_prompt(intake: AIIntakeInput) -> str:
    """Job spec draft from employer intake. Caller strips PII first."""
    experience = (
        f"{intake.experience_years} years" if intake.experience_years is not None else "Not specified"
    )

    return f"""You are an expert recruiter helping to create a structured job posting.
Based on the following intake information, generate a well-structured job specification.

Job Title: {intake.job_title}
Company: {intake.company_description or 'Not specified'}
What We Need: {intake.what_you_need}
Key Responsibilities: {intake.key_responsibilities or 'Not specified'}
Must-Have Skills: {', '.join(intake.must_have_skills)}
Nice-to-Have Skills: {', '.join(intake.nice_to_have_skills) or 'None'}
Experience Required: {experience}
Work Location: {intake.work_location}

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "refinedTitle": "<professional, clear job title>",
  "refinedDescription": "<compelling 2-3 paragraph job description, 200-300 words>",
  "requiredSkills": [<required technical skills>],
  "preferredSkills": [<nice-to-have skills>],
  "experienceLevel": "<one of: entry, mid, senior, lead, executive>",
  "screeningQuestions": [<3-5 relevant screening questions>],
  "compensationInsights": {{"suggestedMin": <number or null>, "suggestedMax": <number or null>}}
}}

Ensure no PII is included."""
