"""Autolink a sentence in 3 lines — zero config, zero deps."""

from enlace import autolink

text, count = autolink("Visit http://example.com. or write to hello@example.com")
print(text)
print(f"{count} link(s)")
