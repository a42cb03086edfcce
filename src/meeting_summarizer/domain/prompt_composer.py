"""Builds the provider prompts for a summarization request."""

from meeting_summarizer.domain.models import ComposedPrompt

SYSTEM_PROMPT = """You are an expert meeting notes summarizer and business analyst. Your task is to create a comprehensive, well-structured summary that follows the user's specific requirements EXACTLY.

CRITICAL INSTRUCTIONS:
- ALWAYS follow the user's custom instructions precisely
- Use clear, professional formatting with proper headings and bullet points
- Extract and highlight the most important information from the transcript
- Organize information logically and chronologically when relevant
- Include key decisions, action items, deadlines, and responsibilities
- Summarize main discussion points, conclusions, and next steps
- Use business-appropriate language and tone
- Ensure the summary is actionable and easy to understand
- If the user asks for specific format (bullet points, executive summary, etc.), follow that format exactly
- Focus on substance over style - prioritize content that matches the user's requirements"""

USER_PROMPT_TEMPLATE = """CUSTOM INSTRUCTIONS: {instruction}

TRANSCRIPT:
{transcript}

TASK: Create a comprehensive summary that follows the custom instructions above EXACTLY. Ensure the summary is well-structured, professional, and addresses all requirements specified in the custom instructions."""


def compose(transcript: str, instruction: str) -> ComposedPrompt:
    """
    Builds the system and user prompts for one summary.

    The transcript and instruction are interpolated verbatim, without
    truncation or escaping.
    """
    return ComposedPrompt(
        system_prompt=SYSTEM_PROMPT,
        user_prompt=USER_PROMPT_TEMPLATE.format(
            instruction=instruction, transcript=transcript
        ),
    )
