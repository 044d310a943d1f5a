"""Regex-driven lexer for PowerShell-style script text.

Only as much of the dialect is recognised as is needed to tell keywords
apart from names, strings, comments and variables. There is no grammar and
no error recovery: text that matches nothing else comes out as OTHER.
"""

from __future__ import annotations

import re
from typing import Iterator, List, Optional

from .models import Token, TokenType


KEYWORDS = frozenset({
    "begin",
    "break",
    "catch",
    "class",
    "clean",
    "configuration",
    "continue",
    "data",
    "define",
    "do",
    "dynamicparam",
    "else",
    "elseif",
    "end",
    "enum",
    "exit",
    "filter",
    "finally",
    "for",
    "foreach",
    "from",
    "function",
    "hidden",
    "if",
    "in",
    "inlinescript",
    "parallel",
    "param",
    "process",
    "return",
    "sequence",
    "static",
    "switch",
    "throw",
    "trap",
    "try",
    "until",
    "using",
    "var",
    "while",
    "workflow",
})

# Alternation order matters: here-strings before splats and groups, block
# comments before line comments, parameters before punctuation runs.
_TOKEN_RE = re.compile(
    r"""
    (?P<newline>\r\n|\n|\r)
  | (?P<space>[ \t\f\v\u00a0\ufeff]+|`(?:\r\n|\n|\r))
  | (?P<block_comment><\#.*?(?:\#>|\Z))
  | (?P<comment>\#[^\r\n]*)
  | (?P<herestring>@'(?:\r?\n)(?:.*?\n)?'@|@"(?:\r?\n)(?:.*?\n)?"@|@['"]\r?\n.*\Z)
  | (?P<string>'(?:[^']|'')*(?:'|\Z)|"(?:`.|""|[^"`])*(?:"|`?\Z))
  | (?P<group>[$@]\(|@\{|[(){}\[\]])
  | (?P<variable>\$(?:\{[^}]*\}?|[^\W\d]\w*:\w+|\w+|[?^$])|@[^\W\d]\w*)
  | (?P<number>(?:0[xX][0-9a-fA-F]+|\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)(?:[kKmMgGtTpP][bB]|[lLdD])?)
  | (?P<parameter>-[^\W\d][\w-]*:?)
  | (?P<word>[^\W\d][\w-]*(?::[^\W\d][\w-]*)?)
  | (?P<operator>::|[-+*/%=!<>|&,;.:?]+)
  | (?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)

# Declaring keywords only count as keywords where a statement can begin.
STATEMENT_KEYWORDS = frozenset({"configuration", "filter", "function", "workflow"})

# Content of the token preceding a statement; None means start of text.
_STATEMENT_OPENERS = frozenset({";", "{", "}", "(", "$(", "@(", "|", "&&", "||"})

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_KEY_SUFFIX_RE = re.compile(r"[ \t]*[:=]")

_GROUP_TYPES = {
    "newline": TokenType.NEWLINE,
    "block_comment": TokenType.COMMENT,
    "comment": TokenType.COMMENT,
    "herestring": TokenType.STRING,
    "string": TokenType.STRING,
    "group": TokenType.GROUP,
    "variable": TokenType.VARIABLE,
    "number": TokenType.NUMBER,
    "parameter": TokenType.OPERATOR,
    "operator": TokenType.OPERATOR,
    "other": TokenType.OTHER,
}


def _at_statement_start(previous: Optional[Token]) -> bool:
    if previous is None or previous.type is TokenType.NEWLINE:
        return True
    return previous.content in _STATEMENT_OPENERS


def _classify_word(text: str, start: int, end: int, word: str, previous: Optional[Token]) -> TokenType:
    # `$obj.function` and `[T]::while` are member names, not keywords.
    if start > 0 and text[start - 1] in ".:":
        return TokenType.IDENTIFIER
    # `function:` drive paths and `@{ function = 1 }` hashtable keys.
    if _KEY_SUFFIX_RE.match(text, end):
        return TokenType.IDENTIFIER
    lowered = word.lower()
    if lowered not in KEYWORDS:
        return TokenType.IDENTIFIER
    if lowered in STATEMENT_KEYWORDS and not _at_statement_start(previous):
        return TokenType.IDENTIFIER
    return TokenType.KEYWORD


def iter_tokens(text: str) -> Iterator[Token]:
    """Yield tokens from text in source order; whitespace is not emitted."""
    line = 1
    line_start = 0
    previous: Optional[Token] = None
    for match in _TOKEN_RE.finditer(text):
        kind = match.lastgroup
        value = match.group()
        start = match.start()
        if kind != "space":
            if kind == "word":
                token_type = _classify_word(text, start, match.end(), value, previous)
            else:
                token_type = _GROUP_TYPES[kind]  # type: ignore[index]
            token = Token(type=token_type, content=value, line=line, column=start - line_start + 1)
            if token_type is not TokenType.COMMENT:
                previous = token
            yield token
        breaks = len(_LINE_BREAK_RE.findall(value))
        if breaks:
            line += breaks
            line_start = start + max(value.rfind("\n"), value.rfind("\r")) + 1


def tokenize(text: str) -> List[Token]:
    return list(iter_tokens(text))


def next_significant(tokens: List[Token], index: int) -> Optional[Token]:
    """Return the first non-trivia token after position index, if any."""
    for position in range(index + 1, len(tokens)):
        if not tokens[position].is_trivia:
            return tokens[position]
    return None
