from src.apps.blog.seed import CHSL_CONTENT
from src.apps.blog.services.content import extract_headings, prepare_blocks, reading_time


async def test_extract_headings_levels_two_and_three():
    headings = extract_headings(CHSL_CONTENT)
    assert [(h.id, h.text, h.level) for h in headings] == [
        ("heading-0", "SSC CHSL Exam Pattern", 2),
        ("heading-1", "Tier 1 Sections", 3),
        ("heading-2", "SSC CHSL Syllabus", 2),
    ]


async def test_extract_headings_empty_content():
    assert extract_headings(None) == []
    assert extract_headings([]) == []


async def test_prepare_blocks_attaches_matching_anchors():
    blocks = prepare_blocks(CHSL_CONTENT)
    anchors = [b.get("anchor") for b in blocks if b["type"] == "heading"]
    assert anchors == ["heading-0", "heading-1", "heading-2", None]
    # source blocks are left untouched
    assert "anchor" not in CHSL_CONTENT[1]


async def test_prepare_blocks_skips_untyped_entries():
    blocks = prepare_blocks([{"text": "orphan"}, "junk", {"type": "paragraph", "text": "ok"}])
    assert blocks == [{"type": "paragraph", "text": "ok"}]


async def test_reading_time_rounds_up():
    assert reading_time([{"type": "paragraph", "text": "one"}]) == 1
    words = " ".join(["word"] * 450)
    assert reading_time([{"type": "paragraph", "text": words}]) == 3
