from __future__ import annotations

RESULT_KEYS = ("problem", "solution", "codeSnippet")

SYSTEM_INSTRUCTION = (
    "You are an expert programmer. Respond ONLY with a JSON object containing "
    "problem analysis, solution, and problematic code snippet."
)

# The JSON shape below is the contract every provider is asked for; the
# validator checks exactly these keys.
_TEMPLATE = """You are an expert programmer. Analyze this code and problem, then respond ONLY with a JSON object in this exact format:
{{
  "problem": "detailed analysis of the issue",
  "solution": "step-by-step solution",
  "codeSnippet": "relevant problematic code section"
}}

Code:
{code}

Problem Description:
{problem}"""


def build_prompt(code_text: str, problem_text: str) -> str:
    """Render the debugging instruction sent to every provider.

    Both texts are embedded verbatim; blank input is not rejected here.
    """

    return _TEMPLATE.format(code=code_text, problem=problem_text)
