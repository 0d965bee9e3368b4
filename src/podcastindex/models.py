"""Data models for the podcastindex client."""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, IntEnum

from .exceptions import FieldParseError

EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)

PAYMENT_ANY = "any"
PAYMENT_LIGHTNING = "lightning"
PAYMENT_HIVE = "hive"
PAYMENT_WEB_MONETIZATION = "webmonetization"

_NUMBER_RE = re.compile(r"[+-]?[0-9]+")


class ITunesID(str):
    """iTunes identifier, either bare digits or prefixed, e.g. ``id1441923632``."""

    PREFIX = "id"

    def to_int(self) -> int:
        """Convert to the integer form used on the wire.

        Raises:
            FieldParseError: If the identifier is not numeric once the prefix is removed

        """
        digits = self.removeprefix(self.PREFIX)
        if not _NUMBER_RE.fullmatch(digits):
            raise FieldParseError("itunesId", str(self), f"invalid iTunes ID '{self}': not a number")
        return int(digits)

    @classmethod
    def from_int(cls, value: int) -> "ITunesID":
        return cls(str(value))


class FeedType(IntEnum):
    """Type of the source feed."""

    RSS = 0
    ATOM = 1


class EpisodeType(str, Enum):
    FULL = "full"
    TRAILER = "trailer"
    BONUS = "bonus"


class LivestreamStatus(str, Enum):
    PENDING = "pending"
    LIVE = "live"
    ENDED = "ended"


class TranscriptType(str, Enum):
    PLAINTEXT = "text/plain"
    HTML = "text/html"
    VTT = "text/vtt"
    APPLICATION_SRT = "application/srt"
    TEXT_SRT = "text/srt"
    JSON = "application/json"


@dataclass(frozen=True)
class Category:
    """A podcast category as listed by ``categories/list``."""

    id: int
    name: str


@dataclass(frozen=True)
class ValueModel:
    """How "Value for Value" payments are made."""

    type: str
    method: str
    suggested: str = ""


@dataclass(frozen=True)
class ValueDestination:
    """A recipient of "Value for Value" payments."""

    name: str
    address: str
    type: str
    split: int
    fee: bool | None = None
    custom_key: str | None = None
    custom_value: str | None = None


@dataclass(frozen=True)
class Value:
    """Payment model plus its ordered list of destinations."""

    model: ValueModel
    destinations: list[ValueDestination] = field(default_factory=list)


@dataclass(frozen=True)
class Funding:
    url: str | None = None
    message: str = ""


@dataclass(frozen=True)
class Transcript:
    url: str
    type: TranscriptType


@dataclass(frozen=True)
class Person:
    """Someone with an interest in an episode (host, guest, editor...)."""

    id: int
    name: str
    role: str = ""
    group: str = ""
    href: str = ""
    img: str = ""


@dataclass(frozen=True)
class Soundbite:
    start_time: float
    duration: float
    title: str = ""


@dataclass(frozen=True)
class SocialInteract:
    """Root post of a comment thread for an episode."""

    url: str
    protocol: str
    account_id: str = ""
    account_url: str = ""
    priority: int = 0


@dataclass(frozen=True)
class Podcast:
    """Podcast feed metadata from the Podcast Index API."""

    id: int
    guid: str = ""
    title: str = ""
    url: str = ""
    original_url: str = ""
    link: str = ""
    description: str = ""
    author: str = ""
    owner_name: str = ""
    image: str = ""
    artwork: str = ""
    last_update_time: datetime = EPOCH
    last_crawl_time: datetime = EPOCH
    last_parse_time: datetime = EPOCH
    last_good_http_status_time: datetime = EPOCH
    last_http_status: int = 0
    content_type: str = ""
    itunes_id: ITunesID | None = None
    itunes_type: str | None = None
    generator: str = ""
    language: str = ""
    explicit: bool = False
    type: FeedType = FeedType.RSS
    medium: str = ""
    dead: bool = False
    episode_count: int = 0
    crawl_errors: int = 0
    parse_errors: int = 0
    categories: list[Category] = field(default_factory=list)
    locked: bool = False
    image_url_hash: int = 0
    in_polling_queue: int | None = None
    priority: int | None = None
    newest_item_pub_date: datetime | None = None
    value: Value | None = None
    funding: Funding | None = None

    def display_name(self) -> str:
        """Get the podcast's display name (title or URL if no title)."""
        return self.title if self.title else self.url

    def categories_string(self) -> str:
        """Get formatted categories as a string."""
        if self.categories:
            return ", ".join(category.name for category in self.categories)
        return "Unknown"


@dataclass(frozen=True)
class Episode:
    """A single episode, or a live item when ``livestream_status`` is set."""

    id: int
    title: str = ""
    link: str = ""
    description: str = ""
    guid: str = ""
    date_published: datetime = EPOCH
    date_published_pretty: str = ""
    date_crawled: datetime = EPOCH
    enclosure_url: str = ""
    enclosure_type: str = ""
    enclosure_length: int = 0
    explicit: bool = False
    episode_number: int | None = None
    episode_type: EpisodeType | None = None
    season: int | None = None
    image: str = ""
    feed_itunes_id: ITunesID | None = None
    feed_url: str = ""
    feed_image: str = ""
    feed_id: int = 0
    feed_guid: str = ""
    feed_language: str = ""
    feed_dead: bool = False
    feed_duplicate_of: int | None = None
    chapters_url: str | None = None
    transcript_url: str | None = None
    transcripts: list[Transcript] | None = None
    soundbite: Soundbite | None = None
    soundbites: list[Soundbite] | None = None
    persons: list[Person] | None = None
    social_interact: list[SocialInteract] | None = None
    value: Value | None = None
    # live items only
    livestream_status: LivestreamStatus | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None
    content_link: str | None = None
    duration: int | None = None

    @property
    def is_live(self) -> bool:
        return self.livestream_status is not None
