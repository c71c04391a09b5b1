"""Existing links and code are never touched; choose what else to skip."""

from enlace import DEFAULT_SKIP_TAGS, autolink

html = """<p>Docs: http://docs.example.com</p>
<pre>$ curl http://localhost:8000/health</pre>
<blockquote>quoted www.example.org</blockquote>
<a href="http://already.example.com">http://already.example.com</a>"""

print("Default skip tags:", DEFAULT_SKIP_TAGS)
print(autolink(html).text)
print()

# Also leave quotes alone
print(autolink(html, skip_tags=[*DEFAULT_SKIP_TAGS, "blockquote"]).text)
