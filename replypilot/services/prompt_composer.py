from dataclasses import dataclass
from pathlib import Path

from replypilot.models.review import ReviewRequest
from replypilot.services.language_policy import LanguagePolicy
from replypilot.services.tone_policy import format_rating

_PROMPT_DIR = Path(__file__).parent.parent / "prompts"
_SYSTEM_PROMPT_TEMPLATE = (_PROMPT_DIR / "system_prompt.txt").read_text(encoding="utf-8")
_USER_PROMPT_TEMPLATE = (_PROMPT_DIR / "user_prompt.txt").read_text(encoding="utf-8")


@dataclass(frozen=True)
class PromptPair:
    system_prompt: str
    user_prompt: str


def compose_prompts(
    request: ReviewRequest,
    language: LanguagePolicy,
    tone_instruction: str,
) -> PromptPair:
    """
    Build the system and user messages for one review.

    Args:
        request: Normalized review request.
        language: Resolved language policy; its rules are embedded verbatim.
        tone_instruction: Instruction chosen from the review rating.

    Returns:
        PromptPair with both messages trimmed.
    """
    system_prompt = _SYSTEM_PROMPT_TEMPLATE.format(
        language_label=language.label,
        language_rules=language.rules,
        tone_instruction=tone_instruction,
        marketplace=request.marketplace,
        product_name=request.product_name,
    )
    # Review text is quoted as-is, without escaping.
    user_prompt = _USER_PROMPT_TEMPLATE.format(
        rating=format_rating(request.rating),
        marketplace=request.marketplace,
        product_name=request.product_name,
        language_label=language.label,
        review_text=request.review_text,
    )
    return PromptPair(system_prompt=system_prompt.strip(), user_prompt=user_prompt.strip())
