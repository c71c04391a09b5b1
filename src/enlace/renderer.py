"""Anchor markup for detected links.

Output for a link to ``http://example.com``::

    <a href="http://example.com">http://example.com</a>
    <a href="http://example.com" target="_blank">http://example.com</a>

The input is assumed to be already-escaped HTML or plain text, so the
matched bytes are emitted as they are. The only substitution is ``"`` ->
``&quot;`` inside the href, which keeps the attribute value closed.

Thread Safety:
LinkRenderer is immutable after construction. The link text callback is
called synchronously, once per link, in input order.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from enlace.bytebuilder import ByteBuilder
from enlace.detectors import LinkCategory
from enlace.errors import InvalidCallbackResultError
from enlace.span import Span

LinkTextCallback: TypeAlias = Callable[[str], str | bytes] | Callable[[bytes], str | bytes]

# Text <-> bytes for str input. Span edges always sit next to ASCII bytes,
# so slices of UTF-8 input decode cleanly.
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogatepass"


def encode_link_attr(link_attr: str | bytes | None) -> bytes | None:
    """Normalize link attributes to bytes without leading whitespace."""
    if link_attr is None:
        return None
    if isinstance(link_attr, str):
        attr = link_attr.encode(TEXT_ENCODING, TEXT_ERRORS)
    elif isinstance(link_attr, (bytes, bytearray)):
        attr = bytes(link_attr)
    else:
        raise TypeError(f"link_attr must be str or bytes, got {type(link_attr).__name__}")
    return attr.lstrip() or None


class LinkRenderer:
    """Render detected spans as ``<a>`` tags into a ByteBuilder.
    
    Args:
        link_attr: Attributes inserted verbatim after the href, or None.
        on_link: Optional callback returning the visible text of each link.
        text_input: Pass the callback ``str`` instead of ``bytes``.
        
    """

    __slots__ = ("_link_attr", "_on_link", "_text_input")

    def __init__(
        self,
        link_attr: str | bytes | None = None,
        on_link: LinkTextCallback | None = None,
        *,
        text_input: bool = False,
    ) -> None:
        self._link_attr = encode_link_attr(link_attr)
        self._on_link = on_link
        self._text_input = text_input

    def render(self, out: ByteBuilder, data: bytes, span: Span, category: LinkCategory) -> None:
        """Append the anchor for ``span`` to ``out``.

        Raises:
            InvalidCallbackResultError: If the callback returns neither
                str nor bytes.

        """
        link = span.slice(data)

        out.append(b'<a href="')
        out.append(category.href_prefix)
        out.append(link.replace(b'"', b"&quot;"))
        if self._link_attr is not None:
            out.append(b'" ')
            out.append(self._link_attr)
            out.append(b">")
        else:
            out.append(b'">')
        out.append(self._link_text(link))
        out.append(b"</a>")

    def _link_text(self, link: bytes) -> bytes:
        if self._on_link is None:
            return link

        if self._text_input:
            result = self._on_link(link.decode(TEXT_ENCODING, TEXT_ERRORS))
        else:
            result = self._on_link(link)

        if isinstance(result, str):
            return result.encode(TEXT_ENCODING, TEXT_ERRORS)
        if isinstance(result, (bytes, bytearray)):
            return bytes(result)
        raise InvalidCallbackResultError(result)
