"""Prompt construction for meeting summaries."""

from typing import Dict, List, Optional

SYSTEM_PROMPT = (
    "You are a professional meeting summarizer. Provide clear, structured "
    "summaries that are easy to read and actionable."
)

DEFAULT_PROMPT_LABEL = "Default summary"


def has_custom_instruction(custom_instruction: Optional[str]) -> bool:
    return bool(custom_instruction)


def build_summary_prompt(transcript: str, custom_instruction: Optional[str] = None) -> str:
    """Build the user prompt, framed by the custom instruction when one is given."""
    if has_custom_instruction(custom_instruction):
        return (
            "Please summarize the following transcript based on this instruction: "
            f"\"{custom_instruction}\"\n\nTranscript:\n{transcript}"
        )
    return f"Please provide a comprehensive summary of the following transcript:\n\n{transcript}"


def build_messages(transcript: str, custom_instruction: Optional[str] = None) -> List[Dict[str, str]]:
    """Build the system + user message pair sent to the model."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_summary_prompt(transcript, custom_instruction)},
    ]
