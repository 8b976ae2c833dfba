"""Shell-like lexer for splitting editor commands and piped filenames."""

from .errors import UnterminatedQuote

QUOTES = ('"', "'")
ESCAPE = "\\"

# Characters of context kept on each side of an unterminated quote.
CONTEXT_CHARS = 3


def split(line: str) -> list[str]:
    """
    Split a line into tokens, handling quotes and escapes.

    Rules:
    - Whitespace separates tokens; repeated whitespace is collapsed
    - Single quotes (') and double quotes (") group text into one token
    - Quotes are removed from tokens
    - Outside quotes, a backslash before either quote makes it literal
    - Inside quotes, a backslash before the *same* quote makes it literal;
      any other backslash is kept as is

    Args:
        line: The line to split

    Returns:
        List of parsed tokens

    Raises:
        UnterminatedQuote: If a quote is opened but never closed
    """
    tokens = []
    token_chars = []
    quote = None
    quote_pos = 0
    i = 0
    line_len = len(line)

    while i < line_len:
        c = line[i]
        has_next = i + 1 < line_len

        # Skip separators between tokens
        if quote is None and not token_chars and c.isspace():
            i += 1
            continue

        if quote is not None:
            if c == ESCAPE and has_next and line[i + 1] == quote:
                token_chars.append(quote)
                i += 2
            elif c == quote:
                quote = None
                i += 1
            else:
                token_chars.append(c)
                i += 1
            continue

        if c == ESCAPE and has_next and line[i + 1] in QUOTES:
            token_chars.append(line[i + 1])
            i += 2
        elif c in QUOTES:
            quote = c
            quote_pos = i
            i += 1
        elif c.isspace():
            tokens.append("".join(token_chars))
            token_chars = []
            i += 1
        else:
            token_chars.append(c)
            i += 1

    if quote is not None:
        context = ellipsize(
            max(0, quote_pos - CONTEXT_CHARS),
            min(line_len, quote_pos + CONTEXT_CHARS + 1),
            line,
        )
        raise UnterminatedQuote(quote_pos, context)

    if token_chars:
        tokens.append("".join(token_chars))

    return tokens


def ellipsize(start: int, end: int, text: str) -> str:
    """
    Cut text down to text[start:end], marking dropped ends with "...".

    Ends that are within CONTEXT_CHARS of the edge of the string are kept
    whole instead of being elided. Callers must pass
    0 <= start <= end <= len(text).
    """
    prefix = "..."
    if start <= CONTEXT_CHARS:
        start = 0
        prefix = ""

    suffix = "..."
    if end >= len(text) - CONTEXT_CHARS:
        end = len(text)
        suffix = ""

    return prefix + text[start:end] + suffix
