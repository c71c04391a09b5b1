"""Replace the visible text of each link, keep the href."""

from urllib.parse import urlsplit

from enlace import autolink


def short_name(url: str) -> str:
    if "@" in url and "://" not in url:
        return url
    host = urlsplit(url if "://" in url else "http://" + url).hostname or url
    return f"[{host}]"


text, _ = autolink(
    "Docs live at https://docs.example.com/guide/install and www.example.org/faq",
    link_attr='rel="nofollow noopener" target="_blank"',
    on_link=short_name,
)
print(text)
