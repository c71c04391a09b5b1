"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_document() -> str:
    """Generate a large HTML comment thread (~150KB)."""
    sections = []
    for i in range(400):
        sections.append(f"""
<p>Comment {i} by user{i}@example.com: have a look at http://example.com/posts/{i}
(or the mirror at www.mirror{i}.example.org/page?id={i}&amp;ref=feed).</p>
<pre>curl https://api.example.com/v1/items/{i}</pre>
<p>See <a href="https://docs.example.com/{i}">the docs</a>, it's all there!</p>
""")
    return "\n".join(sections)


@pytest.fixture
def plain_document() -> str:
    """Generate a large document with no links at all (~100KB)."""
    line = "Nothing to link here, just words and punctuation; plus a colon: ok.\n"
    return line * 1500


@pytest.fixture
def real_world_comments() -> list[str]:
    """Collection of short user-generated snippets."""
    return [
        "lol",
        "Check https://example.com/Pikachu_(Electric)!",
        "mail me: someone.else+tag@sub.example.co.uk.",
        "(see www.example.com)",
        "<code>http://localhost:8000</code> works for me",
        'Try <a href="http://x.com">this</a> or http://y.com?q=1&amp;r=2',
        "javascript:alert(1) should stay text",
        "café → http://example.com/ñ",
    ]
