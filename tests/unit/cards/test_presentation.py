"""Tests for card presentation and video URL handling."""

import pytest

from compass.modules.cards.models import Card
from compass.modules.cards.presentation import (
    ImageBanner,
    VideoBanner,
    VideoProvider,
    classify_video_url,
    embed_url,
    present_card,
)


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", VideoProvider.YOUTUBE),
        ("https://youtu.be/dQw4w9WgXcQ", VideoProvider.YOUTUBE),
        ("https://m.youtube.com/shorts/abcdEFGH123", VideoProvider.YOUTUBE),
        ("https://vimeo.com/76979871", VideoProvider.VIMEO),
        ("https://player.vimeo.com/video/76979871", VideoProvider.VIMEO),
        ("https://www.loom.com/share/0281766fa2d04bb788eaf19e65135184", VideoProvider.LOOM),
        ("https://acme.wistia.com/medias/e4a27b971d", VideoProvider.WISTIA),
        ("https://cdn.example.com/intro.mp4", VideoProvider.FILE),
        ("https://cdn.example.com/intro.MOV", VideoProvider.FILE),
        ("https://example.com/watch/intro", VideoProvider.OTHER),
    ],
)
def test_classify_video_url(url: str, expected: VideoProvider):
    """Verify provider detection by domain and file extension."""
    assert classify_video_url(url) == expected


def test_classify_uses_mime_type_for_files():
    """Verify a video MIME type marks an extensionless URL as a file."""
    url = "https://blob.example.com/compass-banners/123-clip"

    assert classify_video_url(url) == VideoProvider.OTHER
    assert classify_video_url(url, "video/webm") == VideoProvider.FILE


def test_lookalike_domain_is_not_youtube():
    """Verify only real subdomains match a provider."""
    assert classify_video_url("https://notyoutube.com/watch?v=x") == VideoProvider.OTHER


@pytest.mark.parametrize(
    ("url", "provider", "expected"),
    [
        (
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42",
            VideoProvider.YOUTUBE,
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
        ),
        (
            "https://youtu.be/dQw4w9WgXcQ?si=share",
            VideoProvider.YOUTUBE,
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
        ),
        (
            "https://www.youtube.com/shorts/abcdEFGH123",
            VideoProvider.YOUTUBE,
            "https://www.youtube.com/embed/abcdEFGH123",
        ),
        (
            "https://vimeo.com/76979871",
            VideoProvider.VIMEO,
            "https://player.vimeo.com/video/76979871",
        ),
        (
            "https://www.loom.com/share/0281766fa2d04bb788eaf19e65135184",
            VideoProvider.LOOM,
            "https://www.loom.com/embed/0281766fa2d04bb788eaf19e65135184",
        ),
        (
            "https://acme.wistia.com/medias/e4a27b971d",
            VideoProvider.WISTIA,
            "https://fast.wistia.net/embed/iframe/e4a27b971d",
        ),
        (
            "https://cdn.example.com/intro.mp4",
            VideoProvider.FILE,
            "https://cdn.example.com/intro.mp4",
        ),
    ],
)
def test_embed_url(url: str, provider: VideoProvider, expected: str):
    """Verify embeddable URL derivation per provider."""
    assert embed_url(url, provider) == expected


def test_embed_url_without_id_passes_through():
    """Verify an unparseable provider URL is returned unchanged."""
    url = "https://www.youtube.com/channel/UC123"

    assert embed_url(url, VideoProvider.YOUTUBE) == url


class TestPresentCard:
    """Tests for present_card."""

    def test_text_card_has_no_banner(self):
        card = Card(id=1, type="text", title="Hi", content="Body")

        slide = present_card(card)

        assert slide.banner is None
        assert slide.content == "Body"

    def test_empty_title_defaults_to_untitled(self):
        card = Card(id=1, type="text", title=None, content=None)

        slide = present_card(card)

        assert slide.title == "Untitled"
        assert slide.content == ""

    def test_image_card_with_media(self):
        card = Card(id=2, type="image", title="Pic", media_url="https://cdn/x.png")

        slide = present_card(card)

        assert isinstance(slide.banner, ImageBanner)
        assert slide.banner.url == "https://cdn/x.png"

    def test_image_card_without_media_has_no_banner(self):
        card = Card(id=2, type="image", title="Pic", media_url=None)

        assert present_card(card).banner is None

    def test_video_card_prefers_media_url(self):
        card = Card(
            id=3,
            type="video",
            content="Watch this first",
            media_url="https://cdn.example.com/tour.mp4",
            media_mime_type="video/mp4",
        )

        slide = present_card(card)

        assert isinstance(slide.banner, VideoBanner)
        assert slide.banner.provider == VideoProvider.FILE
        assert slide.content == "Watch this first"

    def test_video_card_falls_back_to_content_url(self):
        """Verify a URL taken from content is not repeated as body text."""
        card = Card(id=4, type="video", content="https://vimeo.com/76979871")

        slide = present_card(card)

        assert isinstance(slide.banner, VideoBanner)
        assert slide.banner.embed_url == "https://player.vimeo.com/video/76979871"
        assert slide.content == ""

    def test_banner_serializes_with_kind_tag(self):
        card = Card(id=5, type="video", content="https://youtu.be/dQw4w9WgXcQ")

        data = present_card(card).model_dump(by_alias=True)

        assert data["banner"]["kind"] == "video"
        assert data["banner"]["embedUrl"] == "https://www.youtube.com/embed/dQw4w9WgXcQ"
