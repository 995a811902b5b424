SCHEMA = """{{
  "success": true,
  "score": [number between 0-100],
  "matchedKeywords": [array of matched keywords from the lists above],
  "missingKeywords": [array of important missing keywords, max 15],
  "feedback": {{
    "overall": "Overall assessment paragraph",
    "strengths": [array of 3-5 strength points],
    "improvements": [array of 3-5 improvement suggestions],
    "recommendations": [array of 3-5 actionable recommendations]
  }},
  "analysis": {{
    "totalKeywords": [total number of keywords checked],
    "matchedCount": [number of keywords found],
    "technicalMatched": [number of technical skills found],
    "softMatched": [number of soft skills found],
    "technicalTotal": {technical_total},
    "softTotal": {soft_total},
    "technicalScore": [technical skills score 0-100],
    "softScore": [soft skills score 0-100],
    "matchPercentage": [overall match percentage],
    "contextBonus": [bonus points for context, 0-25]
  }}
}}"""

PROMPT = """
You are an expert ATS (Applicant Tracking System) and HR professional. Analyze the following resume for a {job_role} position.

RESUME CONTENT:
{resume_text}

TARGET JOB ROLE: {job_role}

RELEVANT TECHNICAL SKILLS TO LOOK FOR: {technical_keywords}
RELEVANT SOFT SKILLS TO LOOK FOR: {soft_keywords}

Please provide a comprehensive analysis in the following JSON format (respond ONLY with valid JSON, no additional text):

{schema}

SCORING GUIDELINES:
- Technical skills should carry 80% weight, soft skills 20% weight
- Score 90-100: Excellent match, strong technical skills, relevant experience
- Score 75-89: Good match, most technical requirements met
- Score 60-74: Moderate match, some gaps in technical skills
- Score 40-59: Needs improvement, significant technical gaps
- Score 0-39: Poor match, major technical deficiencies

Consider:
1. Presence of technical skills and their depth
2. Relevant work experience and projects
3. Education and certifications
4. Soft skills demonstration
5. Overall resume quality and ATS compatibility
6. Industry-specific experience
7. Leadership and impact examples

Be thorough but concise in your analysis.
"""


def build_prompt(resume_text: str, job_role: str, technical: list, soft: list) -> str:
    schema = SCHEMA.format(technical_total=len(technical), soft_total=len(soft))
    return PROMPT.format(
        job_role=job_role,
        resume_text=resume_text,
        technical_keywords=", ".join(technical),
        soft_keywords=", ".join(soft),
        schema=schema,
    )
