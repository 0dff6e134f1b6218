"""Prompt templates for question generation and answer scoring."""

from __future__ import annotations

import os

from interview_api.utils.text import clip_text

# Each embedded document is clipped to this many characters.
MAX_PROMPT_DOCUMENT_CHARS = int(os.getenv("MAX_PROMPT_DOCUMENT_CHARS", "20000"))

QUESTION_COUNT = 20

QUESTION_PROMPT_TEMPLATE = """You are an expert technical interviewer. Your task is to generate a list of {count} interview questions based on the provided job description and candidate resume.

**Instructions:**
1.  **Analyze the Job Description and Resume:** Carefully compare the skills and experiences listed in the resume against the requirements in the job description.
2.  **Identify Key Areas:** Determine the most critical skills, technologies, and responsibilities for the role. Note where the candidate's experience is strong and where there are potential gaps.
3.  **Generate High-Quality Questions:** Create questions that directly probe the candidate's fitness for the job.
    *   **For Skills Listed on the Resume:** Ask specific, experience-based questions. Instead of "Do you know Python?", ask "The job requires extensive data processing with Pandas. Can you describe a complex data transformation you've implemented and the challenges you faced?"
    *   **For Gaps in Experience:** Ask questions that test the candidate's ability to learn and adapt. For example, if the job requires 'Terraform' and it's not on the resume, ask "This role involves managing infrastructure as code using Terraform. What is your experience with similar tools, and how would you approach getting up to speed with Terraform in the first few weeks?"
    *   **Behavioral Questions:** Tie behavioral questions directly to the job's context. Instead of a generic "Tell me about a time you worked on a team," ask "This role requires close collaboration with the product team. Can you give an example of a time you had to negotiate project requirements with a non-technical stakeholder?"
4.  **Strict Formatting:**
    *   Each question must be a complete, natural-sounding sentence.
    *   **DO NOT** use placeholders like `[specific task from JD]` or `[key technologies from JD]`.
    *   Format the output as a numbered list of questions.

**Input:**

**Job Description:**
{job_description}

**Resume:**
{resume}

**Output (Numbered List of {count} Questions):**"""

ANSWER_PROMPT_TEMPLATE = """You are an expert technical interviewer and career coach.

A candidate is participating in a mock interview. You will evaluate their answer to one question based on the transcript of their response, the job description, and their resume.

Please follow this structure:

---
Job Description:
{job_description}

Resume Summary:
{resume_summary}

Interview Question:
{question}

Transcript of Candidate's Answer:
{transcript}

---

Based on this, do the following:

1. **Score the candidate's answer out of 30 points**, using this rubric:
   - Relevance to the question and job description (10 points)
   - Clarity and structure of the answer (10 points)
   - Communication style and confidence (based on tone inferred from the text) (10 points)

2. **Give 3 bullet points of detailed feedback**:
   - What was done well
   - What was missing or unclear
   - What could be improved in future answers

3. **Suggest 1 area the candidate should focus on to improve.**

4. **Final verdict**: Was the answer strong, average, or weak? (based on the total score and content)

Be objective, constructive, and supportive. Do not sugarcoat, but encourage growth.
"""

TRANSCRIPT_PROMPT_TEMPLATE = """You are an expert technical interviewer and career coach.

A candidate has just finished a mock interview. Below is every question they were asked together with the feedback each answer received.

---
Job Description:
{job_description}

Resume Summary:
{resume_summary}

Interview Transcript:
{transcript}
---

Write an overall review of the interview:

1. **Overall impression** in two or three sentences.
2. **Strongest areas**: up to 3 bullet points.
3. **Weakest areas**: up to 3 bullet points.
4. **Preparation plan**: the 3 most valuable things to practise before a real interview for this role.
5. **Readiness verdict**: ready, almost ready, or not yet ready.

Be objective, constructive, and supportive.
"""


def build_question_prompt(job_description: str, resume: str) -> str:
    """Return the prompt asking for a numbered list of interview questions."""
    return QUESTION_PROMPT_TEMPLATE.format(
        count=QUESTION_COUNT,
        job_description=clip_text(job_description, MAX_PROMPT_DOCUMENT_CHARS),
        resume=clip_text(resume, MAX_PROMPT_DOCUMENT_CHARS),
    )


def build_answer_prompt(job_description: str, resume_summary: str, question: str, transcript: str) -> str:
    """Return the prompt scoring a single answer on the 30-point rubric."""
    return ANSWER_PROMPT_TEMPLATE.format(
        job_description=clip_text(job_description, MAX_PROMPT_DOCUMENT_CHARS),
        resume_summary=clip_text(resume_summary, MAX_PROMPT_DOCUMENT_CHARS),
        question=question,
        transcript=transcript,
    )


def build_transcript_prompt(job_description: str, resume_summary: str, transcript: str) -> str:
    """Return the prompt reviewing a finished interview as a whole."""
    return TRANSCRIPT_PROMPT_TEMPLATE.format(
        job_description=clip_text(job_description, MAX_PROMPT_DOCUMENT_CHARS),
        resume_summary=clip_text(resume_summary, MAX_PROMPT_DOCUMENT_CHARS),
        transcript=transcript,
    )
