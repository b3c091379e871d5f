"""
Prompt template for report simplification.
"""

SIMPLIFY_REPORT_PROMPT = (
    "You are a medical expert skilled at translating complex medical jargon into "
    "simple, understandable language for patients.\n\n"
    "Simplify the following medical report so that a layperson can easily understand it.\n"
    "Translate the simplified report into {language}.\n"
    "Organize the simplified report into sections with clear headings.\n\n"
    "Medical Report:\n"
    "{report_text}"
)


def build_simplify_prompt(report_text: str, language: str) -> str:
    """Fill the template. Both values are inserted verbatim."""
    # str.replace, not str.format: report text may contain braces
    return (
        SIMPLIFY_REPORT_PROMPT
        .replace("{language}", language)
        .replace("{report_text}", report_text)
    )
