"""Extraction prompt templates."""

SKILLS_EXTRACTION_PROMPT = """You are a resume parser. Extract technical skills, programming languages, frameworks, tools, and technologies from the resume text.
Use the exact names as written (e.g. "React", "TypeScript", "Node.js", "PostgreSQL"). Never fabricate.

=== RESUME TEXT ===
{resume_text}"""


COVER_LETTER_PREFERENCES_PROMPT = """You are a cover letter analyzer. Extract job preferences from the cover letter text.

=== RULES ===
1. If the job title contains a role level (e.g. "Senior Full-Stack Engineer", "Junior Developer"), extract BOTH:
   - job_title: the title WITHOUT the level (e.g. "Full-Stack Engineer")
   - role_level: the level ("Senior", "Junior", "Lead", "Intern")
2. If the role level is mentioned separately from the job title, use that.
3. Normalize common variations: "Full-Stack Engineer" = "Full Stack Engineer".

=== FIELDS ===
- job_title: position without the role level prefix
- role_level: one of "Intern", "Junior", "Senior", "Lead"
- salary_min / salary_max: expected monthly salary, numbers only, if mentioned
- mode_of_work: one of "Work from Home", "On site", "Hybrid" (infer from remote/onsite/hybrid mentions)

Leave a field empty when the letter does not mention it.

=== COVER LETTER ===
{cover_letter_text}"""
