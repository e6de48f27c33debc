SYSTEM_PERSONA = (
    "You are a motivational writer. Your writing style is intense, poetic, raw, "
    "and inspiring — like a locker room speech or manifesto."
)

PROMPT_TEMPLATE = """Write a long motivational message in uppercase. Use short, punchy lines like a speech or spoken word poetry. Break it into multiple lines and paragraphs. The tone should be bold, emotional, and raw — like it's meant to fire someone up.

Include the word: "{trigger_word}" meaningfully and powerfully in the message. Avoid rhyming. Do not use hashtags, emojis, or any signature.

Format only as plain text in uppercase.

Make it intense, passionate, and inspiring - like a manifesto or battle cry. Use line breaks to create rhythm and impact."""


def build_prompt(trigger_word: str) -> str:
    return PROMPT_TEMPLATE.format(trigger_word=trigger_word)
