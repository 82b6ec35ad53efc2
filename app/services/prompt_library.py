# /app/services/prompt_library.py

CODE_GENERATION_PROMPT = """Generate {language} code for the following prompt. Return only the code without any markdown formatting, explanations, or comments unless specifically requested:

{prompt}"""


def build_code_prompt(prompt: str, language: str) -> str:
    return CODE_GENERATION_PROMPT.format(language=language, prompt=prompt)
