"""Translation between the Podcast Index JSON wire format and the data models.

The API is loosely typed: boolean flags arrive as ``0``/``1`` or as JSON
booleans depending on the endpoint, timestamps are Unix seconds, URLs may be
empty strings, and podcast categories are sent as an object keyed by the
stringified category id. Decoders here accept those variations and raise a
``FieldParseError`` naming the offending field when a value cannot be
converted. Encoders produce JSON-ready dictionaries in the wire format, so
``decode_podcast(encode_podcast(p)) == p`` holds for decoded podcasts.
"""

import re
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urlsplit

from .exceptions import FieldParseError, TypeMismatchError
from .models import (
    EPOCH,
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
from .utils import bool_to_int

_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SEGMENT_END_RE = re.compile(r"[/?#]")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_PORT_RE = re.compile(r":[0-9]*")


# --- field level helpers ---


def _require_mapping(value: Any, field: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise TypeMismatchError(field, value, "object")
    return value


def _require_list(value: Any, field: str) -> list[Any]:
    if not isinstance(value, list):
        raise TypeMismatchError(field, value, "array")
    return value


def parse_bool_like(value: Any, field: str) -> bool:
    """Decode a flag sent either as a JSON boolean or as an integer.

    Args:
        value: The raw JSON value
        field: Field name used in error messages

    Returns:
        The flag, where any non-zero integer is true

    Raises:
        TypeMismatchError: If the value is neither a boolean nor an integer

    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    raise TypeMismatchError(field, value, "boolean or integer")


def parse_timestamp(value: Any, field: str) -> datetime:
    """Convert Unix epoch seconds into an aware UTC datetime."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatchError(field, value, "integer unix timestamp")
    try:
        return datetime.fromtimestamp(value, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise FieldParseError(field, value, f"failed to convert {field} {value} to a time: {e}") from e


def format_timestamp(value: datetime) -> int:
    return int(value.timestamp())


def _url_problem(raw: str) -> str | None:
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in raw):
        return "invalid control character in URL"
    if _BAD_ESCAPE_RE.search(raw):
        return "invalid URL escape"

    first_segment = _SEGMENT_END_RE.split(raw, maxsplit=1)[0]
    if ":" in first_segment:
        scheme = first_segment.split(":", 1)[0]
        if not scheme:
            return "missing protocol scheme"
        if not _SCHEME_RE.fullmatch(scheme):
            return "first path segment in URL cannot contain colon"

    try:
        parts = urlsplit(raw)
    except ValueError as e:
        return str(e)
    return _port_problem(parts.netloc)


def _port_problem(netloc: str) -> str | None:
    # digits only, the range is not checked
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        port = host.partition("]")[2]
    else:
        colon = host.rfind(":")
        port = host[colon:] if colon != -1 else ""
    if port and not _PORT_RE.fullmatch(port):
        return f'invalid port "{port}" after host'
    return None


def parse_url(raw: Any, field: str, label: str) -> str:
    """Validate a URL string from the wire.

    Args:
        raw: The raw JSON value, an empty string means "no URL"
        field: JSON key of the field
        label: Name used in the error message, e.g. ``URL`` or ``Image URL``

    Returns:
        The URL string unchanged

    Raises:
        FieldParseError: If the string is not a valid URL

    """
    if not isinstance(raw, str):
        raise TypeMismatchError(field, raw, "string")
    if raw == "":
        return raw
    problem = _url_problem(raw)
    if problem:
        raise FieldParseError(field, raw, f"failed to parse {label} '{raw}': {problem}")
    return raw


def _get_str(data: Mapping[str, Any], key: str, default: str = "") -> str:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise TypeMismatchError(key, value, "string")
    return value


def _get_optional_str(data: Mapping[str, Any], key: str) -> str | None:
    if data.get(key) is None:
        return None
    return _get_str(data, key)


def _get_int(data: Mapping[str, Any], key: str, default: int = 0) -> int:
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeMismatchError(key, value, "integer")
    return value


def _get_optional_int(data: Mapping[str, Any], key: str) -> int | None:
    if data.get(key) is None:
        return None
    return _get_int(data, key)


def _get_number(data: Mapping[str, Any], key: str) -> float:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeMismatchError(key, value, "number")
    return value


def _get_bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    return parse_bool_like(value, key)


def _get_optional_bool(data: Mapping[str, Any], key: str) -> bool | None:
    value = data.get(key)
    if value is None:
        return None
    return parse_bool_like(value, key)


def _get_timestamp(data: Mapping[str, Any], key: str) -> datetime:
    value = data.get(key)
    if value is None:
        return EPOCH
    return parse_timestamp(value, key)


def _get_optional_timestamp(data: Mapping[str, Any], key: str) -> datetime | None:
    value = data.get(key)
    if value is None:
        return None
    return parse_timestamp(value, key)


def _get_url(data: Mapping[str, Any], key: str, label: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    return parse_url(value, key, label)


def _get_optional_url(data: Mapping[str, Any], key: str, label: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    return parse_url(value, key, label)


def _get_itunes_id(data: Mapping[str, Any], key: str) -> ITunesID | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise TypeMismatchError(key, value, "integer or string")
    if isinstance(value, int):
        return ITunesID.from_int(value)
    if isinstance(value, str):
        itunes_id = ITunesID(value)
        itunes_id.to_int()
        return itunes_id
    raise TypeMismatchError(key, value, "integer or string")


def _encode_itunes_id(value: ITunesID | None) -> int | None:
    if value is None:
        return None
    return value.to_int()


def _get_enum(data: Mapping[str, Any], key: str, enum_type: Any) -> Any:
    value = data.get(key)
    if value is None:
        return None
    try:
        return enum_type(value)
    except ValueError as e:
        allowed = ", ".join(str(member.value) for member in enum_type)
        raise FieldParseError(key, value, f"unexpected value {value!r} for {key}, expected one of: {allowed}") from e


def _decode_list(data: Mapping[str, Any], key: str, decode: Any) -> list[Any] | None:
    value = data.get(key)
    if value is None:
        return None
    return [decode(item) for item in _require_list(value, key)]


# --- categories ---


def decode_category_map(raw: Any) -> list[Category]:
    """Convert the ``categories`` object into a list sorted by category id.

    Args:
        raw: Mapping of stringified category id to category name, or null

    Returns:
        One Category per entry

    Raises:
        FieldParseError: If a key is not an integer, or two keys name the same id

    """
    if raw is None or raw == []:
        return []
    mapping = _require_mapping(raw, "categories")

    categories: dict[int, Category] = {}
    for key, name in mapping.items():
        if not isinstance(key, str) or not _INTEGER_RE.fullmatch(key):
            raise FieldParseError("categories", key, f"failed to convert category ID '{key}' to int")
        category_id = int(key)
        if category_id in categories:
            raise FieldParseError("categories", key, f"duplicate category ID '{key}'")
        if not isinstance(name, str):
            raise TypeMismatchError(f"categories.{key}", name, "string")
        categories[category_id] = Category(id=category_id, name=name)

    return [categories[category_id] for category_id in sorted(categories)]


def encode_category_map(categories: list[Category]) -> dict[str, str] | None:
    if not categories:
        return None
    return {str(category.id): category.name for category in categories}


def decode_category(data: Any) -> Category:
    data = _require_mapping(data, "category")
    return Category(id=_get_int(data, "id"), name=_get_str(data, "name"))


# --- value for value ---


def decode_value(data: Any) -> Value:
    """Decode a ``value`` block (payment model plus destinations)."""
    data = _require_mapping(data, "value")
    model = _require_mapping(data.get("model") or {}, "model")
    destinations = _decode_list(data, "destinations", decode_value_destination) or []
    return Value(
        model=ValueModel(
            type=_get_str(model, "type"),
            method=_get_str(model, "method"),
            suggested=_get_str(model, "suggested"),
        ),
        destinations=destinations,
    )


def decode_value_destination(data: Any) -> ValueDestination:
    data = _require_mapping(data, "destinations")
    return ValueDestination(
        name=_get_str(data, "name"),
        address=_get_str(data, "address"),
        type=_get_str(data, "type"),
        split=_get_int(data, "split"),
        fee=_get_optional_bool(data, "fee"),
        custom_key=_get_optional_str(data, "customKey"),
        custom_value=_get_optional_str(data, "customValue"),
    )


def encode_value(value: Value) -> dict[str, Any]:
    return {
        "model": {
            "type": value.model.type,
            "method": value.model.method,
            "suggested": value.model.suggested,
        },
        "destinations": [
            {
                "name": destination.name,
                "address": destination.address,
                "type": destination.type,
                "split": destination.split,
                "fee": destination.fee,
                "customKey": destination.custom_key,
                "customValue": destination.custom_value,
            }
            for destination in value.destinations
        ],
    }


def decode_funding(data: Any) -> Funding:
    data = _require_mapping(data, "funding")
    return Funding(url=_get_optional_url(data, "url", "Funding URL"), message=_get_str(data, "message"))


def encode_funding(funding: Funding) -> dict[str, Any]:
    return {"url": funding.url, "message": funding.message}


# --- episode parts ---


def decode_transcript(data: Any) -> Transcript:
    data = _require_mapping(data, "transcripts")
    transcript_type = _get_enum(data, "type", TranscriptType)
    if transcript_type is None:
        raise FieldParseError("type", None, "transcript is missing its type")
    return Transcript(url=_get_url(data, "url", "Transcript URL"), type=transcript_type)


def encode_transcript(transcript: Transcript) -> dict[str, Any]:
    return {"url": transcript.url, "type": transcript.type.value}


def decode_person(data: Any) -> Person:
    data = _require_mapping(data, "persons")
    return Person(
        id=_get_int(data, "id"),
        name=_get_str(data, "name"),
        role=_get_str(data, "role"),
        group=_get_str(data, "group"),
        href=_get_url(data, "href", "Href"),
        img=_get_url(data, "img", "Person Image URL"),
    )


def encode_person(person: Person) -> dict[str, Any]:
    return {
        "id": person.id,
        "name": person.name,
        "role": person.role,
        "group": person.group,
        "href": person.href,
        "img": person.img,
    }


def decode_soundbite(data: Any) -> Soundbite:
    data = _require_mapping(data, "soundbite")
    return Soundbite(
        start_time=_get_number(data, "startTime"),
        duration=_get_number(data, "duration"),
        title=_get_str(data, "title"),
    )


def encode_soundbite(soundbite: Soundbite) -> dict[str, Any]:
    return {"startTime": soundbite.start_time, "duration": soundbite.duration, "title": soundbite.title}


def decode_social_interact(data: Any) -> SocialInteract:
    data = _require_mapping(data, "socialInteract")
    return SocialInteract(
        url=_get_url(data, "url", "SocialInteract URL"),
        protocol=_get_str(data, "protocol"),
        account_id=_get_str(data, "accountId"),
        account_url=_get_url(data, "accountUrl", "AccountURL"),
        priority=_get_int(data, "priority"),
    )


def encode_social_interact(social_interact: SocialInteract) -> dict[str, Any]:
    return {
        "url": social_interact.url,
        "protocol": social_interact.protocol,
        "accountId": social_interact.account_id,
        "accountUrl": social_interact.account_url,
        "priority": social_interact.priority,
    }


# --- podcast ---


def decode_podcast(data: Any) -> Podcast:
    """Decode a podcast feed object.

    Args:
        data: The parsed JSON object of a single feed

    Returns:
        The decoded Podcast

    Raises:
        FieldParseError: If any field holds a value that cannot be converted

    """
    data = _require_mapping(data, "feed")
    if data.get("id") is None:
        raise FieldParseError("id", None, "podcast is missing its id")

    newest_key = "newestItemPubdate" if data.get("newestItemPubdate") is not None else "newestItemPublishTime"
    value = data.get("value")
    funding = data.get("funding")

    return Podcast(
        id=_get_int(data, "id"),
        guid=_get_str(data, "podcastGuid"),
        title=_get_str(data, "title"),
        url=_get_url(data, "url", "URL"),
        original_url=_get_url(data, "originalUrl", "OriginalURL"),
        link=_get_url(data, "link", "Link"),
        description=_get_str(data, "description"),
        author=_get_str(data, "author"),
        owner_name=_get_str(data, "ownerName"),
        image=_get_url(data, "image", "Image URL"),
        artwork=_get_url(data, "artwork", "Artwork URL"),
        last_update_time=_get_timestamp(data, "lastUpdateTime"),
        last_crawl_time=_get_timestamp(data, "lastCrawlTime"),
        last_parse_time=_get_timestamp(data, "lastParseTime"),
        last_good_http_status_time=_get_timestamp(data, "lastGoodHttpStatusTime"),
        last_http_status=_get_int(data, "lastHttpStatus"),
        content_type=_get_str(data, "contentType"),
        itunes_id=_get_itunes_id(data, "itunesId"),
        itunes_type=_get_optional_str(data, "itunesType"),
        generator=_get_str(data, "generator"),
        language=_get_str(data, "language"),
        explicit=_get_bool(data, "explicit"),
        type=_get_enum(data, "type", FeedType) or FeedType.RSS,
        medium=_get_str(data, "medium"),
        dead=_get_bool(data, "dead"),
        episode_count=_get_int(data, "episodeCount"),
        crawl_errors=_get_int(data, "crawlErrors"),
        parse_errors=_get_int(data, "parseErrors"),
        categories=decode_category_map(data.get("categories")),
        locked=_get_bool(data, "locked"),
        image_url_hash=_get_int(data, "imageUrlHash"),
        in_polling_queue=_get_optional_int(data, "inPollingQueue"),
        priority=_get_optional_int(data, "priority"),
        newest_item_pub_date=_get_optional_timestamp(data, newest_key),
        value=decode_value(value) if value is not None else None,
        funding=decode_funding(funding) if funding is not None else None,
    )


def encode_podcast(podcast: Podcast) -> dict[str, Any]:
    """Encode a Podcast into its wire representation."""
    data: dict[str, Any] = {
        "id": podcast.id,
        "podcastGuid": podcast.guid,
        "title": podcast.title,
        "url": podcast.url,
        "originalUrl": podcast.original_url,
        "link": podcast.link,
        "description": podcast.description,
        "author": podcast.author,
        "ownerName": podcast.owner_name,
        "image": podcast.image,
        "artwork": podcast.artwork,
        "lastUpdateTime": format_timestamp(podcast.last_update_time),
        "lastCrawlTime": format_timestamp(podcast.last_crawl_time),
        "lastParseTime": format_timestamp(podcast.last_parse_time),
        "lastGoodHttpStatusTime": format_timestamp(podcast.last_good_http_status_time),
        "lastHttpStatus": podcast.last_http_status,
        "contentType": podcast.content_type,
        "itunesId": _encode_itunes_id(podcast.itunes_id),
        "generator": podcast.generator,
        "language": podcast.language,
        "explicit": podcast.explicit,
        "type": int(podcast.type),
        "medium": podcast.medium,
        "dead": bool_to_int(podcast.dead),
        "episodeCount": podcast.episode_count,
        "crawlErrors": podcast.crawl_errors,
        "parseErrors": podcast.parse_errors,
        "categories": encode_category_map(podcast.categories),
        "locked": bool_to_int(podcast.locked),
        "imageUrlHash": podcast.image_url_hash,
    }

    # omitted rather than null when unset
    if podcast.itunes_type is not None:
        data["itunesType"] = podcast.itunes_type
    if podcast.in_polling_queue is not None:
        data["inPollingQueue"] = podcast.in_polling_queue
    if podcast.priority is not None:
        data["priority"] = podcast.priority
    if podcast.newest_item_pub_date is not None:
        data["newestItemPubdate"] = format_timestamp(podcast.newest_item_pub_date)
    if podcast.value is not None:
        data["value"] = encode_value(podcast.value)
    if podcast.funding is not None:
        data["funding"] = encode_funding(podcast.funding)
    return data


# --- episode ---


def decode_episode(data: Any) -> Episode:
    """Decode an episode or live item object.

    Args:
        data: The parsed JSON object of a single item

    Returns:
        The decoded Episode

    Raises:
        FieldParseError: If any field holds a value that cannot be converted

    """
    data = _require_mapping(data, "item")
    if data.get("id") is None:
        raise FieldParseError("id", None, "episode is missing its id")

    soundbite = data.get("soundbite")
    value = data.get("value")

    return Episode(
        id=_get_int(data, "id"),
        title=_get_str(data, "title"),
        link=_get_url(data, "link", "Link"),
        description=_get_str(data, "description"),
        guid=_get_str(data, "guid"),
        date_published=_get_timestamp(data, "datePublished"),
        date_published_pretty=_get_str(data, "datePublishedPretty"),
        date_crawled=_get_timestamp(data, "dateCrawled"),
        enclosure_url=_get_url(data, "enclosureUrl", "EnclosureURL"),
        enclosure_type=_get_str(data, "enclosureType"),
        enclosure_length=_get_int(data, "enclosureLength"),
        explicit=_get_bool(data, "explicit"),
        episode_number=_get_optional_int(data, "episode"),
        episode_type=_get_enum(data, "episodeType", EpisodeType),
        season=_get_optional_int(data, "season"),
        image=_get_url(data, "image", "Image URL"),
        feed_itunes_id=_get_itunes_id(data, "feedItunesId"),
        feed_url=_get_url(data, "feedUrl", "FeedURL"),
        feed_image=_get_url(data, "feedImage", "FeedImage URL"),
        feed_id=_get_int(data, "feedId"),
        feed_guid=_get_str(data, "podcastGuid"),
        feed_language=_get_str(data, "feedLanguage"),
        feed_dead=_get_bool(data, "feedDead"),
        feed_duplicate_of=_get_optional_int(data, "feedDuplicateOf"),
        chapters_url=_get_optional_url(data, "chaptersUrl", "ChaptersURL"),
        transcript_url=_get_optional_url(data, "transcriptUrl", "TranscriptURL"),
        transcripts=_decode_list(data, "transcripts", decode_transcript),
        soundbite=decode_soundbite(soundbite) if soundbite is not None else None,
        soundbites=_decode_list(data, "soundbites", decode_soundbite),
        persons=_decode_list(data, "persons", decode_person),
        social_interact=_decode_list(data, "socialInteract", decode_social_interact),
        value=decode_value(value) if value is not None else None,
        livestream_status=_get_enum(data, "status", LivestreamStatus),
        start_time=_get_optional_timestamp(data, "startTime"),
        end_time=_get_optional_timestamp(data, "endTime"),
        content_link=_get_optional_str(data, "contentLink"),
        duration=_get_optional_int(data, "duration"),
    )


def encode_episode(episode: Episode) -> dict[str, Any]:
    """Encode an Episode into its wire representation."""
    data: dict[str, Any] = {
        "id": episode.id,
        "title": episode.title,
        "link": episode.link,
        "description": episode.description,
        "guid": episode.guid,
        "datePublished": format_timestamp(episode.date_published),
        "datePublishedPretty": episode.date_published_pretty,
        "dateCrawled": format_timestamp(episode.date_crawled),
        "enclosureUrl": episode.enclosure_url,
        "enclosureType": episode.enclosure_type,
        "enclosureLength": episode.enclosure_length,
        "explicit": bool_to_int(episode.explicit),
        "episode": episode.episode_number,
        "episodeType": episode.episode_type.value if episode.episode_type is not None else None,
        "image": episode.image,
        "feedImage": episode.feed_image,
        "feedId": episode.feed_id,
        "feedLanguage": episode.feed_language,
        "feedDead": bool_to_int(episode.feed_dead),
        "feedDuplicateOf": episode.feed_duplicate_of,
        "chaptersUrl": episode.chapters_url,
        "transcriptUrl": episode.transcript_url,
    }

    optional: dict[str, Any] = {
        "season": episode.season,
        "feedItunesId": _encode_itunes_id(episode.feed_itunes_id),
        "feedUrl": episode.feed_url or None,
        "podcastGuid": episode.feed_guid or None,
        "contentLink": episode.content_link,
        "duration": episode.duration,
        "status": episode.livestream_status.value if episode.livestream_status is not None else None,
        "startTime": format_timestamp(episode.start_time) if episode.start_time is not None else None,
        "endTime": format_timestamp(episode.end_time) if episode.end_time is not None else None,
        "soundbite": encode_soundbite(episode.soundbite) if episode.soundbite is not None else None,
        "value": encode_value(episode.value) if episode.value is not None else None,
    }
    if episode.transcripts is not None:
        optional["transcripts"] = [encode_transcript(transcript) for transcript in episode.transcripts]
    if episode.soundbites is not None:
        optional["soundbites"] = [encode_soundbite(soundbite) for soundbite in episode.soundbites]
    if episode.persons is not None:
        optional["persons"] = [encode_person(person) for person in episode.persons]
    if episode.social_interact is not None:
        optional["socialInteract"] = [encode_social_interact(item) for item in episode.social_interact]

    data.update({key: value for key, value in optional.items() if value is not None})
    return data


# --- response envelopes ---


def decode_feed_response(payload: Any) -> Podcast | None:
    """Decode a ``podcasts/by*`` response; None when the feed is not found."""
    payload = _require_mapping(payload, "response")
    feed = payload.get("feed")
    if not feed:
        return None
    return decode_podcast(feed)


def decode_feeds_response(payload: Any) -> list[Podcast]:
    """Decode a ``search/*`` response."""
    payload = _require_mapping(payload, "response")
    return _decode_list(payload, "feeds", decode_podcast) or []


def decode_items_response(payload: Any) -> list[Episode]:
    """Decode an ``episodes/*`` response listing items."""
    payload = _require_mapping(payload, "response")
    return _decode_list(payload, "items", decode_episode) or []


def decode_episode_response(payload: Any) -> Episode | None:
    """Decode an ``episodes/byid`` response; None when the episode is not found."""
    payload = _require_mapping(payload, "response")
    item = payload.get("episode")
    if not item:
        return None
    return decode_episode(item)


def decode_category_list_response(payload: Any) -> list[Category]:
    """Decode a ``categories/list`` response."""
    payload = _require_mapping(payload, "response")
    return _decode_list(payload, "feeds", decode_category) or []
