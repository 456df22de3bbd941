"""Helpers over the structured rich-text blocks stored in `Post.content`."""

import json
import math
from typing import Any, Dict, List, Optional

from src.apps.blog.schemas.post import Heading

TOC_LEVELS = (2, 3)
WORDS_PER_MINUTE = 200


def _is_toc_heading(block: Dict[str, Any]) -> bool:
    return block.get("type") == "heading" and block.get("level") in TOC_LEVELS


def extract_headings(content: Optional[List[Dict[str, Any]]]) -> List[Heading]:
    """Level 2 and 3 headings in document order, anchored `heading-<n>`."""
    blocks = [b for b in content or [] if isinstance(b, dict) and _is_toc_heading(b)]
    return [
        Heading(id=f"heading-{index}", text=str(block.get("text", "")), level=block["level"])
        for index, block in enumerate(blocks)
    ]


def reading_time(content: Optional[List[Dict[str, Any]]]) -> int:
    serialized = json.dumps(content, separators=(",", ":"), ensure_ascii=False)
    return math.ceil(len(serialized.split()) / WORDS_PER_MINUTE)


def prepare_blocks(content: Optional[List[Dict[str, Any]]]) -> List[Dict[str, Any]]:
    """Copy the renderable blocks, attaching anchor ids to TOC headings."""
    prepared = []
    index = 0
    for block in content or []:
        if not isinstance(block, dict) or not block.get("type"):
            continue
        block = dict(block)
        if _is_toc_heading(block):
            block["anchor"] = f"heading-{index}"
            index += 1
        prepared.append(block)
    return prepared
