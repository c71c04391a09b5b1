"""Tests for the link detectors, domain validator and safety classifier."""

import pytest

from enlace.config import AutolinkFlags
from enlace.detectors import DETECTORS, LinkCategory, match_email, match_url, match_www
from enlace.domain import check_domain
from enlace.safety import SAFE_PREFIXES, is_safe
from enlace.span import Span

# =========================================================================
# Domain validator
# =========================================================================


class TestCheckDomain:
    """Verify hostname consumption and dot requirements."""

    def test_dotted_domain(self) -> None:
        data = b"example.com/path"
        assert check_domain(data, Span(0, 0), False) == Span(0, 11)

    def test_requires_alnum_start(self) -> None:
        assert check_domain(b"-example.com", Span(0, 0), False) is None
        assert check_domain(b".example.com", Span(0, 0), True) is None

    def test_short_domain_rejected_by_default(self) -> None:
        assert check_domain(b"localhost/x", Span(0, 0), False) is None

    def test_short_domain_allowed(self) -> None:
        assert check_domain(b"localhost/x", Span(0, 0), True) == Span(0, 9)

    def test_hyphens_allowed(self) -> None:
        assert check_domain(b"my-site.example ", Span(0, 0), False) == Span(0, 15)

    def test_last_byte_not_consumed(self) -> None:
        """The final input byte is left to the non-whitespace extension."""
        assert check_domain(b"example.com", Span(0, 0), False) == Span(0, 10)

    def test_trailing_dot_at_end_is_not_a_dot(self) -> None:
        assert check_domain(b"example.", Span(0, 0), False) is None

    def test_stops_at_non_ascii(self) -> None:
        data = "exämple.com".encode()
        assert check_domain(data, Span(0, 0), True) == Span(0, 2)

    def test_start_past_end(self) -> None:
        assert check_domain(b"abc", Span(3, 3), True) is None


# =========================================================================
# Safety classifier
# =========================================================================


class TestIsSafe:
    """Verify the scheme allow-list."""

    @pytest.mark.parametrize(
        "link",
        [b"http://a", b"https://a.com", b"ftp://files", b"mailto:joe", b"/path", b"HtTpS://X"],
    )
    def test_allowed(self, link: bytes) -> None:
        assert is_safe(link)

    @pytest.mark.parametrize(
        "link",
        [
            b"javascript:alert(1)",
            b"data://text",
            b"vbscript://x",
            b"http://",
            b"http://-x",
            b"http:/x",
            b"//example.com",
            b"",
        ],
    )
    def test_rejected(self, link: bytes) -> None:
        assert not is_safe(link)

    def test_prefix_list(self) -> None:
        assert SAFE_PREFIXES == (b"/", b"http://", b"https://", b"ftp://", b"mailto:")


# =========================================================================
# URL detector
# =========================================================================


class TestMatchUrl:
    """Verify URL detection around the colon."""

    def test_basic(self) -> None:
        data = b"go http://example.com/x now"
        assert match_url(data, data.index(b":")) == Span(3, 23)

    def test_requires_double_slash(self) -> None:
        data = b"http:/example.com"
        assert match_url(data, 4) is None

    def test_requires_room_after_colon(self) -> None:
        assert match_url(b"a://", 1) is None

    def test_invalid_domain(self) -> None:
        data = b"http://-bad.com"
        assert match_url(data, 4) is None

    def test_short_domain_flag(self) -> None:
        data = b"http://intranet/page"
        assert match_url(data, 4) is None
        assert match_url(data, 4, AutolinkFlags.SHORT_DOMAINS) == Span(0, 20)

    def test_scheme_stops_at_non_letter(self) -> None:
        data = b"xhttp://a.com"
        assert match_url(data, 5) is None
        data = b"1http://a.com"
        assert match_url(data, 5) == Span(1, 13)

    def test_unsafe_scheme(self) -> None:
        data = b"file://etc.passwd"
        assert match_url(data, 4) is None

    def test_stops_at_whitespace(self) -> None:
        data = b"http://a.com/x\ty"
        assert match_url(data, 4) == Span(0, 14)

    def test_stops_at_markup(self) -> None:
        data = b"http://a.com/x</p>"
        assert match_url(data, 4) == Span(0, 14)


# =========================================================================
# www detector
# =========================================================================


class TestMatchWww:
    """Verify bare www. detection."""

    def test_basic(self) -> None:
        data = b"see www.example.com."
        assert match_www(data, 4) == Span(4, 19)

    def test_at_start_of_input(self) -> None:
        assert match_www(b"www.example.com", 0) == Span(0, 15)

    def test_after_punctuation(self) -> None:
        assert match_www(b"(www.example.com)", 1) == Span(1, 16)

    def test_mid_word_rejected(self) -> None:
        assert match_www(b"awww.example.com", 1) is None

    def test_case_sensitive_prefix(self) -> None:
        assert match_www(b"WWW.example.com", 0) is None

    def test_needs_dotted_domain(self) -> None:
        assert match_www(b"www.", 0) is None

    def test_short_flag_has_no_effect(self) -> None:
        assert match_www(b"www.", 0, AutolinkFlags.SHORT_DOMAINS) is None

    def test_not_www(self) -> None:
        assert match_www(b"web.example.com", 0) is None


# =========================================================================
# Email detector
# =========================================================================


class TestMatchEmail:
    """Verify email detection around the @."""

    def test_basic(self) -> None:
        data = b"mail joe@example.com today"
        assert match_email(data, data.index(b"@")) == Span(5, 20)

    def test_local_part_characters(self) -> None:
        data = b"first.last+tag-x_y@example.co.uk"
        assert match_email(data, data.index(b"@")) == Span(0, len(data))

    def test_empty_local_part(self) -> None:
        assert match_email(b" @example.com", 1) is None

    def test_requires_dot(self) -> None:
        assert match_email(b"joe@localhost", 3) is None

    def test_two_at_signs(self) -> None:
        assert match_email(b"joe@a@example.com", 3) is None

    def test_trailing_dot_at_end(self) -> None:
        data = b"joe@example.com."
        assert match_email(data, 3) == Span(0, 15)

    def test_dot_only_at_end_is_not_enough(self) -> None:
        assert match_email(b"joe@example.", 3) is None

    def test_too_short(self) -> None:
        assert match_email(b"joe@", 3) is None

    def test_not_at_sign(self) -> None:
        assert match_email(b"joe", 1) is None


# =========================================================================
# Registry
# =========================================================================


class TestDetectorTable:
    def test_one_detector_per_category(self) -> None:
        assert DETECTORS[LinkCategory.URL] is match_url
        assert DETECTORS[LinkCategory.WWW] is match_www
        assert DETECTORS[LinkCategory.EMAIL] is match_email

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            DETECTORS[LinkCategory.URL] = match_www  # type: ignore[index]

    def test_href_prefixes(self) -> None:
        assert LinkCategory.URL.href_prefix == b""
        assert LinkCategory.WWW.href_prefix == b"http://"
        assert LinkCategory.EMAIL.href_prefix == b"mailto:"

    @pytest.mark.parametrize("data", [b"a://b.c http://x.com", b"www.a.com x@y.z"])
    def test_detectors_are_repeatable(self, data: bytes) -> None:
        for pos in range(len(data)):
            for detect in DETECTORS.values():
                first = detect(data, pos, 0)
                assert detect(data, pos, 0) == first
