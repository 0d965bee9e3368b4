"""Podcast Index API client library."""

from .api import PodcastIndexAPI
from .auth import build_auth_headers
from .client import PodcastIndexClient
from .codec import (
    decode_episode,
    decode_podcast,
    encode_episode,
    encode_podcast,
    parse_bool_like,
    parse_url,
)
from .exceptions import (
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    ExecutionError,
    FieldParseError,
    MalformedRequestError,
    PodcastIndexError,
    ReadError,
    ServerError,
    TypeMismatchError,
)
from .models import (
    PAYMENT_ANY,
    PAYMENT_HIVE,
    PAYMENT_LIGHTNING,
    PAYMENT_WEB_MONETIZATION,
    Category,
    Episode,
    EpisodeType,
    FeedType,
    Funding,
    ITunesID,
    LivestreamStatus,
    Person,
    Podcast,
    SocialInteract,
    Soundbite,
    Transcript,
    TranscriptType,
    Value,
    ValueDestination,
    ValueModel,
)
from .params import (
    EpisodesParams,
    LiveEpisodesParams,
    SearchByPersonParams,
    SearchByTermParams,
    SearchByTitleParams,
    SearchMusicByTermParams,
)
from .utils import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, REQUEST_TIMEOUT

__all__ = [
    # Main classes
    "PodcastIndexClient",
    "PodcastIndexAPI",
    "build_auth_headers",
    # Exceptions
    "PodcastIndexError",
    "ConfigurationError",
    "ExecutionError",
    "AuthenticationError",
    "MalformedRequestError",
    "ServerError",
    "ReadError",
    "DecodeError",
    "FieldParseError",
    "TypeMismatchError",
    # Models
    "Category",
    "Episode",
    "EpisodeType",
    "FeedType",
    "Funding",
    "ITunesID",
    "LivestreamStatus",
    "Person",
    "Podcast",
    "SocialInteract",
    "Soundbite",
    "Transcript",
    "TranscriptType",
    "Value",
    "ValueDestination",
    "ValueModel",
    "PAYMENT_ANY",
    "PAYMENT_HIVE",
    "PAYMENT_LIGHTNING",
    "PAYMENT_WEB_MONETIZATION",
    # Endpoint parameters
    "EpisodesParams",
    "LiveEpisodesParams",
    "SearchByPersonParams",
    "SearchByTermParams",
    "SearchByTitleParams",
    "SearchMusicByTermParams",
    # Codec
    "decode_episode",
    "decode_podcast",
    "encode_episode",
    "encode_podcast",
    "parse_bool_like",
    "parse_url",
    # Other utilities
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "REQUEST_TIMEOUT",
]
