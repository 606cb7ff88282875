"""Card presentation for the member-facing carousel.

A stored card is turned into a slide exactly once, here. The slide's
banner is a tagged union (image, video or none) and video banners carry
the provider detected from the URL together with an embeddable URL.
"""

import re
from enum import StrEnum
from typing import Annotated, Literal
from urllib.parse import parse_qs, urlparse

from pydantic import Field

from compass.core.constants import UNTITLED_CARD_TITLE
from compass.core.schemas import CamelModel
from compass.modules.cards.models import Card
from compass.modules.cards.schemas import CardType


class VideoProvider(StrEnum):
    """Where a video is hosted."""

    YOUTUBE = "youtube"
    VIMEO = "vimeo"
    LOOM = "loom"
    WISTIA = "wistia"
    FILE = "file"
    OTHER = "other"


VIDEO_FILE_EXTENSIONS = (".mp4", ".webm", ".ogg", ".ogv", ".mov", ".m4v")

_PROVIDER_DOMAINS: dict[VideoProvider, tuple[str, ...]] = {
    VideoProvider.YOUTUBE: ("youtube.com", "youtu.be", "youtube-nocookie.com"),
    VideoProvider.VIMEO: ("vimeo.com",),
    VideoProvider.LOOM: ("loom.com",),
    VideoProvider.WISTIA: ("wistia.com", "wistia.net", "wi.st"),
}

_YOUTUBE_PATH_ID = re.compile(r"^/(?:embed|shorts|live|v)/([\w-]{6,})")
_VIMEO_ID = re.compile(r"/(?:video/)?(\d+)")
_LOOM_ID = re.compile(r"/(?:share|embed)/([0-9a-f]+)")
_WISTIA_ID = re.compile(r"/(?:medias|embed/iframe|embed/medias)/(\w+)")


class ImageBanner(CamelModel):
    """Still image shown above the card text."""

    kind: Literal["image"] = "image"
    url: str


class VideoBanner(CamelModel):
    """Video shown above the card text."""

    kind: Literal["video"] = "video"
    url: str
    provider: VideoProvider
    embed_url: str


Banner = Annotated[ImageBanner | VideoBanner, Field(discriminator="kind")]


class CardPresentation(CamelModel):
    """One carousel slide."""

    id: int
    type: CardType
    title: str
    content: str
    banner: Banner | None = None


class PresentationResponse(CamelModel):
    """Carousel wrapper: ``{"slides": [...]}``."""

    slides: list[CardPresentation]


def _host_matches(host: str, domain: str) -> bool:
    return host == domain or host.endswith(f".{domain}")


def classify_video_url(url: str, mime_type: str | None = None) -> VideoProvider:
    """Detect which provider hosts a video URL.

    Known hosting domains win; otherwise a ``video/*`` MIME type or a
    video file extension marks a directly playable file.

    Args:
        url: The video URL as stored on the card
        mime_type: The card's media MIME type, if known

    Returns:
        The detected provider (``OTHER`` when nothing matches)
    """
    parsed = urlparse(url.strip())
    host = (parsed.hostname or "").lower()

    for provider, domains in _PROVIDER_DOMAINS.items():
        if any(_host_matches(host, domain) for domain in domains):
            return provider

    if mime_type and mime_type.lower().startswith("video/"):
        return VideoProvider.FILE
    if parsed.path.lower().endswith(VIDEO_FILE_EXTENSIONS):
        return VideoProvider.FILE

    return VideoProvider.OTHER


def _youtube_id(url: str) -> str | None:
    parsed = urlparse(url)
    host = (parsed.hostname or "").lower()
    if _host_matches(host, "youtu.be"):
        video_id = parsed.path.lstrip("/").split("/")[0]
        return video_id or None
    if parsed.path == "/watch":
        ids = parse_qs(parsed.query).get("v")
        return ids[0] if ids else None
    match = _YOUTUBE_PATH_ID.match(parsed.path)
    return match.group(1) if match else None


def embed_url(url: str, provider: VideoProvider) -> str:
    """Build the URL an iframe or player should load for a video.

    URLs that cannot be parsed for an id are returned unchanged, as are
    direct files and unknown providers.
    """
    url = url.strip()
    path = urlparse(url).path

    if provider == VideoProvider.YOUTUBE:
        video_id = _youtube_id(url)
        if video_id:
            return f"https://www.youtube.com/embed/{video_id}"
    elif provider == VideoProvider.VIMEO:
        match = _VIMEO_ID.search(path)
        if match:
            return f"https://player.vimeo.com/video/{match.group(1)}"
    elif provider == VideoProvider.LOOM:
        match = _LOOM_ID.search(path)
        if match:
            return f"https://www.loom.com/embed/{match.group(1)}"
    elif provider == VideoProvider.WISTIA:
        match = _WISTIA_ID.search(path)
        if match:
            return f"https://fast.wistia.net/embed/iframe/{match.group(1)}"

    return url


def present_card(card: Card) -> CardPresentation:
    """Resolve a stored card into a carousel slide.

    Image cards get an image banner when they have media. Video cards
    use ``media_url`` and fall back to ``content``; a URL taken from
    ``content`` is not repeated as body text. Text cards have no banner.
    """
    content = card.content or ""
    banner: ImageBanner | VideoBanner | None = None

    if card.type == CardType.IMAGE and card.media_url:
        banner = ImageBanner(url=card.media_url)
    elif card.type == CardType.VIDEO:
        video_url = card.media_url or card.content
        if video_url:
            provider = classify_video_url(video_url, card.media_mime_type)
            banner = VideoBanner(
                url=video_url,
                provider=provider,
                embed_url=embed_url(video_url, provider),
            )
            if not card.media_url:
                content = ""

    return CardPresentation(
        id=card.id,
        type=CardType(card.type),
        title=card.title or UNTITLED_CARD_TITLE,
        content=content,
        banner=banner,
    )
