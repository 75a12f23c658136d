"""Prompt templates for LLM interactions."""

from __future__ import annotations

ARTICLE_WRITER_SYSTEM_PROMPT = (
    "You are a skilled writer who creates engaging articles based on source materials. "
    "Maintain the user's voice and style as specified in their instructions."
)

ARTICLE_EDITOR_SYSTEM_PROMPT = (
    "You are a skilled editor who revises articles based on feedback while maintaining "
    "consistency with the original voice and style."
)

SOURCE_SEPARATOR = "\n\n---\n\n"


def get_article_prompt(
    source_blocks: list[str], instructions: str, title: str | None = None
) -> str:
    """Generate the prompt for synthesizing a new article from source blocks."""
    title_request = (
        f'The article should be titled: "{title}"' if title else "Generate an appropriate title."
    )
    return f"""Based on the following source materials, create an article following these instructions:

INSTRUCTIONS: {instructions}

SOURCE MATERIALS:
{SOURCE_SEPARATOR.join(source_blocks)}

Write a well-structured article that synthesizes the key points from these sources while following the user's instructions for tone and style. {title_request}"""


def get_revision_prompt(
    current_content: str, instructions: str, additional_blocks: list[str] | None = None
) -> str:
    """Generate the prompt for revising an existing article."""
    prompt = f"""Here is an existing article that needs to be revised:

CURRENT ARTICLE:
{current_content}

REVISION INSTRUCTIONS: {instructions}"""
    if additional_blocks:
        prompt += f"""

ADDITIONAL SOURCE MATERIALS TO INCORPORATE:
{SOURCE_SEPARATOR.join(additional_blocks)}"""
    return prompt
