"""Prompt builders for the generation flows.

Every prompt ends with an instruction to answer with a bare JSON object;
the flows parse that object out of the returned text.
"""
import json

RESUME_PROMPT = """You are an expert resume writer. Your task is to generate a complete, ATS-optimized, one-page resume in LaTeX format.
You must use the provided user profile data and tailor it to the given job description.
Generate a professional title and a 3-4 point professional summary, then select and categorize the most relevant skills, experiences, and projects.
The LaTeX must compile with pdflatex, use the article class on a4paper, and contain no page numbers.

Job Description:
{job_description}

User Profile Data:
{profile_json}

Return ONLY a JSON object with a single key "latexCode" whose value is the LaTeX code as a string, starting with \\documentclass and ending with \\end{{document}}."""

COVER_LETTER_PROMPT = """You are an expert career coach and professional writer. Your task is to generate a compelling, professional cover letter in LaTeX format.
Your writing must be flawless, with no grammatical errors, and maintain a highly professional tone.

User Profile:
- Name: {name}
- Contact: {contact}
- Education: {education}
- Experience: {experience}
- Projects: {projects}
- Skills: {skills}

Job Description:
{job_description}

AI Actions:
1. Extract the Job Title, Company Name, and Hiring Manager's Name from the job description. If Hiring Manager is not found, use "Hiring Team".
2. Write an opening paragraph introducing the user and stating the role they're applying for.
3. Write 2-3 body paragraphs built around the single most relevant project or work experience, connecting it to the key requirements of the job.
4. Write a closing paragraph with genuine enthusiasm for the company and a call to action.
5. Replace every placeholder with extracted or generated information.

Return ONLY a JSON object with a single key "latexCode" whose value is the LaTeX code as a string, starting with \\documentclass and ending with \\end{{document}}."""

MODERATION_PROMPT = """You are an extremely strict content moderator for a job board. Your task is to analyze the provided text, URL, and email to determine if it is a legitimate job description.
If you have any doubt, mark it as 'spam'.

Analyze the following job posting content:
- Description: "{job_description}"
- Apply URL: "{apply_link}"
- Apply Email: "{apply_email}"

Checks:
1. Relevance: the text MUST be a job description. Gibberish, random conversation, advertisements or anything clearly not a job post is 'invalid'.
2. Malicious content: code snippets or text designed to harm a system is 'invalid'. URL shorteners, suspicious domains, phishing-looking links, or temporary/suspicious email addresses are 'spam'.
3. Profanity: profane, hateful or inappropriate language is 'invalid'.

Decision:
- Clearly malicious, profane, or gibberish -> 'invalid'.
- Vague, suspicious links/email, or feels "off" but not clearly malicious -> 'spam'.
- A legitimate, professional job posting -> 'valid'.

Return ONLY a JSON object with two fields:
- "decision": 'valid', 'spam', or 'invalid'.
- "reason": a brief, user-friendly reason for 'spam' or 'invalid'; an empty string if 'valid'."""


def _join_entries(entries, render):
    rendered = [render(entry) for entry in entries]
    return " ".join(f"- {line}" for line in rendered) or "None provided"


def resume_prompt(profile, job_description):
    return RESUME_PROMPT.format(
        job_description=job_description.strip(),
        profile_json=json.dumps(profile.to_dict(), indent=2, ensure_ascii=False),
    )


def cover_letter_prompt(profile, job_description):
    contact = profile.contact_info
    contact_parts = [part for part in (contact.phone, contact.email, contact.linkedin) if part]
    return COVER_LETTER_PROMPT.format(
        name=contact.name,
        contact=" | ".join(contact_parts),
        education=_join_entries(
            profile.education,
            lambda e: f"{e.qualification} at {e.institute} ({e.start_date} - {e.end_date}). Achievements: {e.achievements}",
        ),
        experience=_join_entries(
            profile.experience,
            lambda e: f"{e.title} at {e.company} ({e.start_date} - {e.end_date}). Responsibilities: {e.responsibilities}",
        ),
        projects=_join_entries(
            profile.projects,
            lambda p: f"{p.name} ({p.date}). Achievements: {p.achievements}",
        ),
        skills=", ".join(profile.skills) or "None provided",
        job_description=job_description.strip(),
    )


def moderation_prompt(job_description, apply_link="", apply_email=""):
    return MODERATION_PROMPT.format(
        job_description=job_description.strip(),
        apply_link=apply_link or "",
        apply_email=apply_email or "",
    )
