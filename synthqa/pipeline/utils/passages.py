"""Heuristic text helpers: header skipping and passage extraction.

Everything here is pure. Passages are chosen by layout alone (paragraphs,
then line groups, then fixed slices); no semantic ranking is applied.
"""

import re
from typing import List

# Seed-question prompts skip these labels within the first 10 lines
PROMPT_HEADER_SCAN_LINES = 10
PROMPT_HEADER_PATTERN = re.compile(
    r"^(Date|Version|Author|License|Table of Contents):", re.IGNORECASE
)
EMPTY_HEADING_PATTERN = re.compile(r"^#+\s*$")

# Passage extraction scans further and knows more labels
PASSAGE_HEADER_SCAN_LINES = 20
_PASSAGE_LABELS = "Date|Version|Author|License|Table of Contents|Executive Summary"
PASSAGE_HEADER_PATTERNS = [
    re.compile(rf"^({_PASSAGE_LABELS}):", re.IGNORECASE),
    re.compile(rf"^#+\s*({_PASSAGE_LABELS})", re.IGNORECASE),
    re.compile(r"^(Context \d+|Relevance:|Source:)", re.IGNORECASE),
]

MIN_HEADER_LINE_LENGTH = 10
MIN_PARAGRAPH_LENGTH = 50
MAX_PARAGRAPH_LENGTH = 1000
MIN_CHUNK_LINE_LENGTH = 20
TARGET_CHUNK_LENGTH = 500
MIN_CHUNK_FLUSH_LENGTH = 100
MIN_CONTENT_FOR_SLICING = 100
SLICE_LENGTH = 500
MAX_PASSAGES = 3


def strip_prompt_header(content: str) -> str:
    """Drop leading metadata lines (dates, versions, authors, short lines)."""
    lines = content.split("\n")
    start_index = 0

    for i in range(min(PROMPT_HEADER_SCAN_LINES, len(lines))):
        line = lines[i].strip()
        if (
            PROMPT_HEADER_PATTERN.match(line)
            or EMPTY_HEADING_PATTERN.match(line)
            or len(line) < MIN_HEADER_LINE_LENGTH
        ):
            start_index = i + 1
        else:
            break

    if start_index > 0:
        return "\n".join(lines[start_index:])
    return content


def _strip_passage_header(content: str) -> str:
    lines = content.split("\n")
    start_index = 0

    for i in range(min(PASSAGE_HEADER_SCAN_LINES, len(lines))):
        line = lines[i].strip()
        if (
            any(pattern.match(line) for pattern in PASSAGE_HEADER_PATTERNS)
            or len(line) < MIN_HEADER_LINE_LENGTH
        ):
            start_index = i + 1
        elif len(line) > 30 and ":" not in line:
            # First real sentence of body text
            break

    return "\n".join(lines[start_index:])


def _paragraph_passages(text: str) -> List[str]:
    passages = []
    for para in re.split(r"\n\n+", text):
        if len(para.strip()) <= MIN_PARAGRAPH_LENGTH:
            continue
        if len(para) > MAX_PARAGRAPH_LENGTH:
            passages.append(para[:MAX_PARAGRAPH_LENGTH] + "...")
        else:
            passages.append(para.strip())
    return passages


def _line_group_passages(text: str) -> List[str]:
    passages = []
    lines = [l for l in text.split("\n") if len(l.strip()) > MIN_CHUNK_LINE_LENGTH]

    current = ""
    for line in lines:
        if (
            len(current) + len(line) > TARGET_CHUNK_LENGTH
            and len(current) > MIN_CHUNK_FLUSH_LENGTH
        ):
            passages.append(current.strip())
            current = line
        else:
            current += ("\n" if current else "") + line

    if len(current.strip()) > MIN_PARAGRAPH_LENGTH:
        passages.append(current.strip())
    return passages


def _slice_passages(content: str) -> List[str]:
    passages = []
    for i in range(0, len(content), SLICE_LENGTH):
        chunk = content[i : i + SLICE_LENGTH]
        if len(chunk.strip()) > MIN_PARAGRAPH_LENGTH:
            passages.append(chunk.strip())
    return passages


def extract_passages(question: str, content: str) -> List[str]:
    """
    Extract up to three context passages from document content.

    Args:
        question: The question the passages are for. Accepted for future
            relevance scoring; currently unused.
        content: Raw document text

    Returns:
        Ordered list of at most three passages
    """
    main_content = _strip_passage_header(content)

    passages = _paragraph_passages(main_content)
    if not passages:
        passages = _line_group_passages(main_content)

    if not passages and len(content) > MIN_CONTENT_FOR_SLICING:
        passages = _slice_passages(content)

    return passages[:MAX_PASSAGES]
