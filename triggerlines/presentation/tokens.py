import re
from dataclasses import dataclass

MIN_TRIGGER_LENGTH = 3

_WHITESPACE = re.compile(r"(\s+)")
# Same character class as the browser client's /[^\w]/g (ASCII word characters).
_NON_WORD = re.compile(r"[^\w]", re.ASCII)


@dataclass(frozen=True)
class Token:
    text: str
    clean_word: str = ""
    is_word: bool = False

    @property
    def triggers(self) -> bool:
        return self.is_word and len(self.clean_word) >= MIN_TRIGGER_LENGTH


def clean_word(word: str) -> str:
    return _NON_WORD.sub("", word)


def render_tokens(message: str) -> list[Token]:
    """Split a message into display tokens.

    The text is uppercased and trimmed, then split on whitespace runs. Each
    run is kept as a non-word token so joining every ``text`` reproduces the
    processed message exactly.
    """
    processed = message.upper().strip()
    tokens: list[Token] = []
    for part in _WHITESPACE.split(processed):
        if not part:
            continue
        if part.isspace():
            tokens.append(Token(text=part))
        else:
            tokens.append(Token(text=part, clean_word=clean_word(part), is_word=True))
    return tokens


def split_lines(tokens: list[Token]) -> list[list[Token]]:
    """Group tokens by display line; whitespace containing newlines ends a line."""
    lines: list[list[Token]] = [[]]
    for token in tokens:
        if token.is_word:
            lines[-1].append(token)
            continue
        for _ in range(token.text.count("\n")):
            lines.append([])
    return lines
