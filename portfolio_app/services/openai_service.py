# filename: openai_service.py
# location: portfolio_app/services/

import logging

from flask import current_app
from openai import OpenAI

logger = logging.getLogger(__name__)

# instructions per assist mode
MODE_PROMPTS = {
    "improve": "Improve the following text so it reads clearly and confidently. Keep its meaning and length roughly the same.",
    "shorten": "Rewrite the following text to be noticeably shorter while keeping the key points.",
    "expand": "Expand the following text with one or two more sentences of relevant, concrete detail.",
    "professional": "Rewrite the following text in a polished, professional tone suitable for a portfolio.",
    "grammar": "Fix spelling, grammar and punctuation in the following text. Change nothing else.",
}

# what each component field is, so the rewrite fits where it is shown
FIELD_CONTEXT = {
    "hero": "the headline section of a personal portfolio",
    "about": "an 'about me' section of a personal portfolio",
    "text": "a free text block in a personal portfolio",
    "header": "a section heading in a personal portfolio",
    "project": "a project showcase in a personal portfolio",
    "experience": "a work experience entry in a portfolio",
    "education": "an education entry in a portfolio",
    "certification": "a certification entry in a portfolio",
    "image": "an image caption in a portfolio",
}


class TextAssistError(Exception):
    pass


class ProviderNotConfigured(TextAssistError):
    pass


def get_client():
    """One OpenAI client per app, created on first use."""
    client = current_app.extensions.get("openai_client")
    if client is None:
        api_key = current_app.config.get("OPENAI_API_KEY")
        if not api_key:
            raise ProviderNotConfigured("OpenAI API key is not configured")
        client = OpenAI(api_key=api_key)
        current_app.extensions["openai_client"] = client
    return client


def build_prompt(text: str, mode: str, component_type: str = "", field: str = "") -> str:
    context = FIELD_CONTEXT.get(component_type, "a personal portfolio")
    where = f"the '{field}' field of {context}" if field else context
    return f"""
    {MODE_PROMPTS[mode]}
    The text is {where}. It may contain simple inline HTML (b, i, u, a, ul, ol, li); keep that markup intact.

    Original text: "{text}"

    Rewritten text (provide only the final text):
    """


def rewrite_text(text: str, mode: str, component_type: str = "", field: str = "") -> str:
    """
    Rewrite a portfolio field with the configured chat model.

    Raises ProviderNotConfigured when no API key is set and TextAssistError
    when the provider call fails.
    """
    client = get_client()
    prompt = build_prompt(text, mode, component_type, field)

    try:
        completion = client.chat.completions.create(
            model=current_app.config.get("OPENAI_MODEL", "gpt-3.5-turbo"),
            messages=[
                {"role": "system", "content": "You are a helpful writing assistant for personal portfolios."},
                {"role": "user", "content": prompt},
            ],
            temperature=0.7,
            max_tokens=400,
        )
        rewritten = (completion.choices[0].message.content or "").strip()
    except Exception as e:
        logger.error(f"❌ An error occurred while calling OpenAI API: {e}")
        raise TextAssistError("Text assist provider failed") from e

    if not rewritten:
        raise TextAssistError("Text assist provider returned no text")

    logger.info(f"✅ Text assist ({mode}) for {component_type}.{field}")
    return rewritten
