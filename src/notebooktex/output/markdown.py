"""Markdown to LaTeX translation for markdown cells.

Covers the subset authors use in notebook prose: headings, paragraphs,
lists, block quotes, fenced code, display and inline math, emphasis,
inline code and links.
"""

import re

HEADING_COMMANDS = (
    "chapter",
    "section",
    "subsection",
    "subsubsection",
    "paragraph",
    "subparagraph",
)

_HEADING_RE = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")
_BULLET_RE = re.compile(r"^\s*[-*+]\s+(.*)$")
_NUMBERED_RE = re.compile(r"^\s*\d+[.)]\s+(.*)$")
_FENCE_RE = re.compile(r"^\s*(```|~~~)")
_QUOTE_RE = re.compile(r"^\s*>\s?(.*)$")

_TOKEN_RE = re.compile(
    r"(?P<math>(?<!\\)\$[^$]+?(?<!\\)\$)"
    r"|`(?P<code>[^`]+)`"
    r"|\[(?P<label>[^\]]+)\]\((?P<url>[^)\s]+)\)"
    r"|\*\*(?P<bold>.+?)\*\*"
    r"|__(?P<bold2>.+?)__"
    r"|\*(?P<em>[^*]+?)\*"
    r"|(?<!\w)_(?P<em2>[^_]+?)_(?!\w)"
)

_ESCAPES = {
    "\\": r"\textbackslash{}",
    "{": r"\{",
    "}": r"\}",
    "#": r"\#",
    "$": r"\$",
    "%": r"\%",
    "&": r"\&",
    "_": r"\_",
    "^": r"\textasciicircum{}",
    "~": r"\textasciitilde{}",
}


def escape_latex(text: str) -> str:
    """Escape LaTeX special characters in plain text."""
    return "".join(_ESCAPES.get(char, char) for char in text)


def convert_inline(text: str) -> str:
    """Translate inline markdown of one paragraph or heading."""
    parts: list[str] = []
    cursor = 0
    for match in _TOKEN_RE.finditer(text):
        parts.append(escape_latex(text[cursor:match.start()]))
        cursor = match.end()
        if match.group("math"):
            parts.append(match.group("math"))
        elif match.group("code") is not None:
            parts.append(r"\texttt{" + escape_latex(match.group("code")) + "}")
        elif match.group("label") is not None:
            url = match.group("url").replace("%", r"\%").replace("#", r"\#")
            parts.append(r"\href{" + url + "}{" + convert_inline(match.group("label")) + "}")
        elif match.group("bold") is not None or match.group("bold2") is not None:
            inner = match.group("bold") or match.group("bold2")
            parts.append(r"\textbf{" + convert_inline(inner) + "}")
        else:
            inner = match.group("em") or match.group("em2")
            parts.append(r"\emph{" + convert_inline(inner) + "}")
    parts.append(escape_latex(text[cursor:]))
    return "".join(parts)


def markdown_to_latex(markdown: str) -> str:
    """Translate a markdown cell body into LaTeX.

    Args:
        markdown: Markdown text without cell delimiters

    Returns:
        str: LaTeX fragment, starting and ending with a newline
    """
    out: list[str] = []
    paragraph: list[str] = []
    list_env: str | None = None
    quote: list[str] = []
    lines = markdown.splitlines()
    i = 0

    def flush_paragraph() -> None:
        if paragraph:
            out.append(convert_inline(" ".join(line.strip() for line in paragraph)))
            out.append("")
            paragraph.clear()

    def close_list() -> None:
        nonlocal list_env
        if list_env:
            out.append(r"\end{" + list_env + "}")
            out.append("")
            list_env = None

    def flush_quote() -> None:
        if quote:
            out.append(r"\begin{quote}")
            out.append(convert_inline(" ".join(line.strip() for line in quote if line.strip())))
            out.append(r"\end{quote}")
            out.append("")
            quote.clear()

    def flush_all() -> None:
        flush_paragraph()
        close_list()
        flush_quote()

    while i < len(lines):
        line = lines[i]
        stripped = line.strip()

        if _FENCE_RE.match(line):
            flush_all()
            fence = _FENCE_RE.match(line).group(1)
            out.append(r"\begin{verbatim}")
            i += 1
            while i < len(lines) and not lines[i].strip().startswith(fence):
                out.append(lines[i])
                i += 1
            out.append(r"\end{verbatim}")
            out.append("")
            i += 1
            continue

        if stripped.startswith("$$"):
            flush_all()
            body = stripped[2:]
            math: list[str] = []
            if body.endswith("$$") and len(stripped) > 2:
                math.append(body[:-2])
            else:
                if body:
                    math.append(body)
                i += 1
                while i < len(lines) and not lines[i].strip().endswith("$$"):
                    math.append(lines[i])
                    i += 1
                if i < len(lines):
                    math.append(lines[i].strip()[:-2])
            out.append(r"\[")
            out.extend(part for part in math if part.strip())
            out.append(r"\]")
            out.append("")
            i += 1
            continue

        if not stripped:
            flush_all()
            i += 1
            continue

        heading = _HEADING_RE.match(line)
        if heading:
            flush_all()
            command = HEADING_COMMANDS[len(heading.group(1)) - 1]
            out.append("\\" + command + "{" + convert_inline(heading.group(2)) + "}")
            out.append("")
            i += 1
            continue

        quoted = _QUOTE_RE.match(line)
        if quoted:
            flush_paragraph()
            close_list()
            quote.append(quoted.group(1))
            i += 1
            continue

        bullet = _BULLET_RE.match(line)
        numbered = None if bullet else _NUMBERED_RE.match(line)
        if bullet or numbered:
            flush_paragraph()
            flush_quote()
            env = "itemize" if bullet else "enumerate"
            if list_env != env:
                close_list()
                out.append(r"\begin{" + env + "}")
                list_env = env
            item = (bullet or numbered).group(1)
            out.append(r"\item " + convert_inline(item))
            i += 1
            continue

        if list_env and line.startswith((" ", "\t")):
            # continuation of the previous list item
            out[-1] += " " + convert_inline(stripped)
            i += 1
            continue

        close_list()
        flush_quote()
        paragraph.append(line)
        i += 1

    flush_all()
    return "\n" + "\n".join(out).rstrip("\n") + "\n"
