from __future__ import annotations
import re
from pathlib import Path
from typing import Union

_RTF_CONTROL_RE = re.compile(r"\\[a-z]+-?\d* ?")
_RTF_HEX_RE = re.compile(r"\\'([0-9a-fA-F]{2})")
_RTF_LITERAL_RE = re.compile(r"\\([\\{}])")
_RTF_ESCAPE_RE = re.compile(r"\\[^a-z]")
_RTF_BRACE_RE = re.compile(r"(?<!\\)[{}]")
# groups holding metadata rather than document text
_RTF_DESTINATION_RE = re.compile(r"\{\\(?:\*|(?:fonttbl|colortbl|stylesheet|info)\b)")

_MD_CODE_BLOCK_RE = re.compile(r"```.*?```", re.DOTALL)
_MD_HEADER_RE = re.compile(r"^#{1,6}\s+", re.MULTILINE)
_MD_RULE_RE = re.compile(r"^[ \t]*(?:-{3,}|\*{3,}|_{3,})\s*$", re.MULTILINE)
_MD_IMAGE_RE = re.compile(r"!\[([^\]]*)\]\([^)]+\)")
_MD_LINK_RE = re.compile(r"\[([^\]]+)\]\([^)]+\)")
_MD_EMPHASIS_RE = re.compile(r"(\*{1,2}|_{1,2})(.+?)\1")
_MD_INLINE_CODE_RE = re.compile(r"`([^`]+)`")
_MD_BULLET_RE = re.compile(r"^[ \t]*(?:[-*+]|\d+\.)\s+", re.MULTILINE)

def _drop_destinations(content: str) -> str:
    out = []
    pos = 0
    while True:
        m = _RTF_DESTINATION_RE.search(content, pos)
        if m is None:
            out.append(content[pos:])
            return "".join(out)
        out.append(content[pos:m.start()])
        # skip to the matching close brace, ignoring escaped braces
        depth, i = 0, m.start()
        while i < len(content):
            ch = content[i]
            if ch == "\\":
                i += 2
                continue
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    break
            i += 1
        pos = i + 1

def _decode_hex(m: re.Match) -> str:
    return bytes([int(m.group(1), 16)]).decode("cp1252", errors="replace")

def strip_rtf(content: str) -> str:
    """Drop RTF control words, groups and escapes, keep the visible text."""
    text = _drop_destinations(content)
    text = _RTF_HEX_RE.sub(_decode_hex, text)
    text = _RTF_CONTROL_RE.sub(" ", text)
    text = _RTF_BRACE_RE.sub("", text)
    text = _RTF_LITERAL_RE.sub(r"\1", text)
    text = _RTF_ESCAPE_RE.sub("", text)
    return re.sub(r"\s+", " ", text).strip()

def strip_markdown(content: str) -> str:
    text = _MD_CODE_BLOCK_RE.sub("", content)
    text = _MD_HEADER_RE.sub("", text)
    text = _MD_RULE_RE.sub("", text)
    text = _MD_IMAGE_RE.sub(r"\1", text)
    text = _MD_LINK_RE.sub(r"\1", text)
    text = _MD_EMPHASIS_RE.sub(r"\2", text)
    text = _MD_INLINE_CODE_RE.sub(r"\1", text)
    text = _MD_BULLET_RE.sub("", text)
    # collapse runs of blank lines left behind by removed blocks
    text = re.sub(r"\n\s*\n", "\n\n", text)
    return text.strip()

def decode_document(content: str, suffix: str) -> str:
    suffix = suffix.lower().lstrip(".")
    if suffix == "rtf":
        return strip_rtf(content)
    if suffix in ("md", "markdown"):
        return strip_markdown(content)
    return content  # txt and anything else

def read_document(path: Union[str, Path]) -> str:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"{path} does not exist or is not a file")
    return decode_document(path.read_text(encoding="utf-8"), path.suffix)
