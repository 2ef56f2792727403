"""Deterministic LaTeX documents used when no AI provider can answer.

Output depends only on the profile, so the same profile always renders the
same document.
"""
LATEX_SPECIAL_CHARS = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

RESUME_PREAMBLE = r"""\documentclass[10pt, a4paper]{article}
\usepackage[T1]{fontenc}
\usepackage{mathptmx}
\usepackage[a4paper, top=0.5in, bottom=0.5in, left=0.6in, right=0.6in]{geometry}
\usepackage{titlesec}
\usepackage{enumitem}
\usepackage{hyperref}
\pagestyle{empty}
\setlength{\parindent}{0pt}
\hypersetup{colorlinks=true, linkcolor=black, filecolor=black, urlcolor=black}
\titleformat{\section}{\vspace{-5pt}\raggedright\Large\bfseries\scshape}{}{0em}{}[\titlerule]
\titlespacing*{\section}{0pt}{8pt}{3pt}
\setlist[itemize]{noitemsep, leftmargin=*, align=left, topsep=3pt, parsep=0pt}
\newcommand{\resitem}[3]{\vspace{3pt}\textbf{#1} \hfill \textbf{#3} \\ \textit{#2} \hfill}
"""

COVER_LETTER_PREAMBLE = r"""\documentclass[10pt, a4paper]{article}
\usepackage[T1]{fontenc}
\usepackage{mathptmx}
\usepackage[a4paper, top=1.0in, bottom=1.0in, left=1.0in, right=1.0in]{geometry}
\usepackage{hyperref}
\pagestyle{empty}
\setlength{\parindent}{0pt}
\setlength{\parskip}{1em}
\hypersetup{colorlinks=true, linkcolor=black, filecolor=black, urlcolor=black}
"""

CONTACT_LINKS = (
    ("linkedin", "LinkedIn"),
    ("github", "GitHub"),
    ("portfolio", "Portfolio"),
    ("instagram", "Instagram"),
    ("other", "Other URL"),
)


def escape_latex(text):
    return "".join(LATEX_SPECIAL_CHARS.get(char, char) for char in text or "")


def _date_range(start, end):
    if start and end:
        return f"{escape_latex(start)} -- {escape_latex(end)}"
    return escape_latex(start or end)


def _href(url, label):
    # \href takes the URL verbatim apart from characters that break the argument.
    safe_url = url.replace("\\", "").replace("{", "%7B").replace("}", "%7D")
    safe_url = safe_url.replace("%", r"\%").replace("#", r"\#")
    return rf"\href{{{safe_url}}}{{{escape_latex(label)}}}"


def _contact_line(contact):
    parts = []
    if contact.phone:
        parts.append(escape_latex(contact.phone))
    if contact.email:
        parts.append(_href(f"mailto:{contact.email}", contact.email))
    for attr, label in CONTACT_LINKS:
        url = getattr(contact, attr)
        if url:
            parts.append(_href(url, label))
    return " $|$ ".join(parts)


def _itemize(items):
    items = [item for item in items if item]
    if not items:
        return []
    lines = [r"\begin{itemize}"]
    lines.extend(rf"    \item {escape_latex(item)}" for item in items)
    lines.append(r"\end{itemize}")
    return lines


def render_resume(profile):
    """A plain one-page resume built from the profile alone."""
    contact = profile.contact_info
    lines = [RESUME_PREAMBLE, r"\begin{document}", r"\begin{center}"]
    lines.append(rf"    {{\Huge \textbf{{{escape_latex(contact.name)}}}}} \\")
    lines.append(r"    \vspace{2pt}")
    lines.append(f"    {_contact_line(contact)}")
    lines.append(r"\end{center}")

    if profile.skills:
        lines.append(r"\section*{TECHNICAL SKILLS}")
        lines.append(r"\textbf{Skills:} " + ", ".join(escape_latex(skill) for skill in profile.skills if skill))

    experience = [entry for entry in profile.experience if entry.title]
    if experience:
        lines.append(r"\section*{PROFESSIONAL EXPERIENCE}")
        for entry in experience:
            lines.append(
                rf"\resitem{{{escape_latex(entry.title)}}}{{{escape_latex(entry.company)}}}"
                rf"{{{_date_range(entry.start_date, entry.end_date)}}}"
            )
            lines.extend(_itemize([entry.responsibilities]))

    projects = [entry for entry in profile.projects if entry.name]
    if projects:
        lines.append(r"\section*{DEVELOPMENT PROJECTS}")
        for entry in projects:
            lines.append(rf"\resitem{{{escape_latex(entry.name)}}}{{}}{{{escape_latex(entry.date)}}}")
            lines.extend(_itemize([entry.achievements]))

    education = [entry for entry in profile.education if entry.qualification]
    if education:
        lines.append(r"\section*{EDUCATION}")
        for entry in education:
            lines.append(
                rf"\resitem{{{escape_latex(entry.qualification)}}}{{{escape_latex(entry.institute)}}}"
                rf"{{{_date_range(entry.start_date, entry.end_date)}}}"
            )
            lines.extend(_itemize([entry.achievements]))

    certifications = [entry for entry in profile.certifications if entry.name]
    if certifications:
        lines.append(r"\section*{CERTIFICATES \& TRAINING}")
        items = []
        for entry in certifications:
            text = entry.name
            if entry.organization:
                text += f" from {entry.organization}"
            if entry.achievements:
                text += f": {entry.achievements}"
            if entry.skills_achieved:
                text += f" Skills: {entry.skills_achieved}"
            items.append(text)
        lines.extend(_itemize(items))

    lines.append(r"\end{document}")
    return "\n".join(lines) + "\n"


def render_cover_letter(profile):
    """A generic cover letter addressed to the hiring team."""
    contact = profile.contact_info
    name = escape_latex(contact.name)
    highlight = next((entry for entry in profile.experience if entry.title), None)
    project = next((entry for entry in profile.projects if entry.name), None)
    skills = ", ".join(escape_latex(skill) for skill in profile.skills[:5] if skill)

    paragraphs = [
        "I am writing to express my interest in the position advertised by your team. "
        "I am confident that my skills and experience make me a strong candidate for this role.",
    ]
    if highlight:
        paragraphs.append(
            f"Most recently I worked as {escape_latex(highlight.title)} at {escape_latex(highlight.company)}, "
            f"where my responsibilities included {escape_latex(highlight.responsibilities)}"
            + ("" if highlight.responsibilities.endswith(".") else ".")
        )
    if project:
        paragraphs.append(
            f"In my project {escape_latex(project.name)}, {escape_latex(project.achievements)}"
            + ("" if project.achievements.endswith(".") else ".")
        )
    if skills:
        paragraphs.append(f"My core skills include {skills}, which I would be glad to bring to your team.")
    paragraphs.append(
        "Thank you for your time and consideration. I have attached my resume for your review "
        "and look forward to the opportunity to discuss how I can contribute."
    )

    header = [rf"\textbf{{{name}}} \\"]
    if contact.phone:
        header.append(rf"{escape_latex(contact.phone)} \\")
    if contact.email:
        header.append(_href(f"mailto:{contact.email}", contact.email) + r" \\")
    if contact.linkedin:
        header.append(_href(contact.linkedin, "LinkedIn Profile") + r" \\")

    header[-1] = header[-1].removesuffix(r" \\")

    blocks = [
        COVER_LETTER_PREAMBLE + r"\begin{document}" + "\n" + r"\raggedright",
        "\n".join(header),
        r"\today",
        r"\textbf{Hiring Team}",
        "Dear Hiring Team,",
    ]
    blocks.extend(paragraphs)
    blocks.append("Sincerely, \\\\\n" + name)
    blocks.append(r"\end{document}")
    return "\n\n".join(blocks) + "\n"
