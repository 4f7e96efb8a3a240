import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "english"


@dataclass(frozen=True)
class LanguagePolicy:
    label: str
    rules: str


LANGUAGE_POLICIES: dict[str, LanguagePolicy] = {
    "english": LanguagePolicy(
        label="English",
        rules=(
            "LANGUAGE RULES (STRICT)\n"
            "- You MUST reply in 100% English.\n"
            "- Do NOT use Filipino or Taglish.\n"
            "- Do NOT mix languages.\n"
            "Tone: professional, warm, brand-representative."
        ),
    ),
    "tagalog": LanguagePolicy(
        label="Filipino (Tagalog)",
        rules=(
            "LANGUAGE RULES (STRICT)\n"
            "- You MUST reply fully in Filipino (Tagalog).\n"
            '- Avoid English words, except unavoidable product terms (e.g. "charger", "order").\n'
            "Tone: warm, friendly, conversational."
        ),
    ),
    "taglish": LanguagePolicy(
        label="Taglish (Filipino + English)",
        rules=(
            "LANGUAGE RULES (STRICT)\n"
            "- Use a natural mix of Filipino and English.\n"
            "- Filipino should be the base language.\n"
            "- English is allowed for simple, casual expressions or product terms.\n"
            "Tone: friendly, conversational, like a real online seller."
        ),
    ),
    "auto": LanguagePolicy(
        label="Auto-detect",
        rules=(
            "LANGUAGE RULES (STRICT)\n"
            "- First, detect the main language of the customer's review.\n"
            "- Then reply in that SAME language.\n"
            "- If the review mixes languages, choose the dominant one.\n"
            "- Keep the tone natural and appropriate for that language."
        ),
    ),
    "vietnamese": LanguagePolicy(
        label="Vietnamese",
        rules=(
            "LANGUAGE RULES (STRICT)\n"
            "- Reply fully in Vietnamese.\n"
            "- Do NOT switch to other languages."
        ),
    ),
    "indonesian": LanguagePolicy(
        label="Indonesian",
        rules=(
            "LANGUAGE RULES (STRICT)\n"
            "- Reply fully in Indonesian (Bahasa Indonesia).\n"
            "- Do NOT switch to other languages."
        ),
    ),
    "thai": LanguagePolicy(
        label="Thai",
        rules=(
            "LANGUAGE RULES (STRICT)\n"
            "- Reply fully in Thai.\n"
            "- Do NOT switch to other languages."
        ),
    ),
}

DEFAULT_LANGUAGE_POLICY = LanguagePolicy(
    label="English (default)",
    rules=(
        "LANGUAGE RULES (STRICT)\n"
        "- Reply in clear, natural English."
    ),
)


def normalize_language(value: object) -> str:
    """Lowercase and trim a language code; missing or blank means English."""
    # Whitespace-only codes select the "English" policy, not the
    # "English (default)" fallback used for unrecognized codes.
    if value is None:
        return DEFAULT_LANGUAGE
    code = str(value).strip().lower()
    return code or DEFAULT_LANGUAGE


def resolve_language(code: object) -> LanguagePolicy:
    """
    Look up the language policy for a requested code.

    Unknown codes fall back to DEFAULT_LANGUAGE_POLICY instead of raising,
    so any client-supplied value yields a usable policy.
    """
    normalized = normalize_language(code)
    policy = LANGUAGE_POLICIES.get(normalized)
    if policy is None:
        logger.info("Unsupported language '%s', using default policy", normalized)
        return DEFAULT_LANGUAGE_POLICY
    return policy


def supported_languages() -> list[str]:
    return list(LANGUAGE_POLICIES)
