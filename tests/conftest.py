import copy
import json
import os
from dataclasses import dataclass
from typing import Any

import pytest

from podcastindex import PodcastIndexClient

TEST_BASE_URL = "http://localhost/api/1.0/"


@dataclass
class MockResponse:
    status_code: int = 200
    _json: Any = None
    body: str = ""
    url: str = ""
    read_error: Exception | None = None
    closed: bool = False

    @property
    def text(self) -> str:
        if self.read_error is not None:
            raise self.read_error
        return self.body

    def json(self) -> Any:
        if self.read_error is not None:
            raise self.read_error
        if self._json is None:
            return json.loads(self.body)
        return self._json

    def close(self) -> None:
        self.closed = True


PODCAST_PAYLOAD: dict[str, Any] = {
    "id": 75075,
    "podcastGuid": "ac9907f2-a748-59eb-a799-88a9c8bfb9f5",
    "title": "Batman University",
    "url": "https://feeds.theincomparable.com/batmanuniversity",
    "originalUrl": "https://feeds.theincomparable.com/batmanuniversity",
    "link": "https://www.theincomparable.com/batmanuniversity/",
    "description": "Batman University is a seasonal podcast about you know who.",
    "author": "Tony Sindelar",
    "ownerName": "",
    "image": "https://www.theincomparable.com/imgs/logos/logo-batmanuniversity-3x.jpg",
    "artwork": "https://www.theincomparable.com/imgs/logos/logo-batmanuniversity-3x.jpg",
    "lastUpdateTime": 1744427062,
    "lastCrawlTime": 1744427030,
    "lastParseTime": 1744427084,
    "lastGoodHttpStatusTime": 1744427030,
    "lastHttpStatus": 200,
    "contentType": "application/rss+xml",
    "itunesId": 1441923632,
    "generator": None,
    "language": "en",
    "explicit": False,
    "type": 0,
    "medium": "podcast",
    "dead": 0,
    "episodeCount": 19,
    "crawlErrors": 0,
    "parseErrors": 0,
    "categories": {"104": "Tv", "105": "Film", "107": "Reviews"},
    "locked": 0,
    "imageUrlHash": 1702747127,
    "newestItemPubdate": 1546399813,
}

VALUE_PAYLOAD: dict[str, Any] = {
    "model": {"type": "lightning", "method": "keysend", "suggested": "0.00000015000"},
    "destinations": [
        {
            "name": "podcaster",
            "address": "02d5c1bf8b940dc9cadca86d1b0a3c37fbe39cee4c7e839e33bef9174531d27f52",
            "type": "node",
            "split": 99,
        },
        {
            "name": "Podcastindex.org",
            "address": "03ae9f91a0cb8ff43840e3c322c4c61f019d8c1c3cea15a25cfc425ac605e61a4a",
            "type": "node",
            "split": 1,
            "fee": True,
            "customKey": "696969",
            "customValue": "eChoVKtO1KujpAA5HCoB",
        },
    ],
}

EPISODE_PAYLOAD: dict[str, Any] = {
    "id": 16795090,
    "title": "Batman University 100",
    "link": "https://www.theincomparable.com/batmanuniversity/100/",
    "description": "The class reunion episode.",
    "guid": "incomparable/batman/100",
    "datePublished": 1546399813,
    "datePublishedPretty": "January 01, 2019 9:30pm",
    "dateCrawled": 1598369456,
    "enclosureUrl": "https://www.theincomparable.com/podcast/batmanuniversity100.mp3",
    "enclosureType": "audio/mp3",
    "enclosureLength": 57653623,
    "duration": 3600,
    "explicit": 0,
    "episode": 100,
    "episodeType": "full",
    "season": 3,
    "image": "",
    "feedItunesId": 1441923632,
    "feedUrl": "https://feeds.theincomparable.com/batmanuniversity",
    "feedImage": "https://www.theincomparable.com/imgs/logos/logo-batmanuniversity-3x.jpg",
    "feedId": 75075,
    "podcastGuid": "ac9907f2-a748-59eb-a799-88a9c8bfb9f5",
    "feedLanguage": "en",
    "feedDead": 0,
    "feedDuplicateOf": None,
    "chaptersUrl": "https://example.com/chapters/100.json",
    "transcriptUrl": None,
    "transcripts": [
        {"url": "https://example.com/transcripts/100.vtt", "type": "text/vtt"},
        {"url": "https://example.com/transcripts/100.srt", "type": "application/srt"},
    ],
    "soundbite": {"startTime": 1234.5, "duration": 42, "title": "The best bit"},
    "soundbites": [{"startTime": 1234.5, "duration": 42, "title": "The best bit"}],
    "persons": [
        {
            "id": 1,
            "name": "Tony Sindelar",
            "role": "host",
            "group": "cast",
            "href": "https://www.theincomparable.com/person/tonysindelar/",
            "img": "",
        }
    ],
    "socialInteract": [
        {
            "url": "https://podcastindex.social/@batman/1",
            "protocol": "activitypub",
            "accountId": "@batman",
            "accountUrl": "https://podcastindex.social/@batman",
            "priority": 1,
        }
    ],
    "value": VALUE_PAYLOAD,
}

LIVE_EPISODE_PAYLOAD: dict[str, Any] = {
    "id": 43141716087,
    "title": "Live from the Batcave",
    "link": "https://example.com/live",
    "description": "",
    "guid": "live-1",
    "datePublished": 1700000000,
    "dateCrawled": 1700000100,
    "enclosureUrl": "https://example.com/live.m3u8",
    "enclosureType": "application/x-mpegURL",
    "enclosureLength": 0,
    "explicit": True,
    "image": "https://example.com/live.jpg",
    "feedImage": "https://example.com/feed.jpg",
    "feedId": 920666,
    "feedLanguage": "en-us",
    "feedDead": False,
    "status": "live",
    "startTime": 1700000000,
    "endTime": 1700007200,
    "contentLink": "https://example.com/watch",
}


@pytest.fixture()
def podcast_payload() -> dict[str, Any]:
    return copy.deepcopy(PODCAST_PAYLOAD)


@pytest.fixture()
def episode_payload() -> dict[str, Any]:
    return copy.deepcopy(EPISODE_PAYLOAD)


@pytest.fixture()
def live_episode_payload() -> dict[str, Any]:
    return copy.deepcopy(LIVE_EPISODE_PAYLOAD)


@pytest.fixture()
def client() -> PodcastIndexClient:
    return PodcastIndexClient(
        api_key="testKey",
        api_secret="testSecret",
        user_agent="testAgent",
        base_url=TEST_BASE_URL,
    )


@pytest.fixture()
def credentials() -> tuple[str, str]:
    key = os.environ.get("PODCASTINDEX_API_KEY", "")
    secret = os.environ.get("PODCASTINDEX_API_SECRET", "")
    if not key or not secret:
        pytest.skip("PODCASTINDEX_API_KEY and PODCASTINDEX_API_SECRET not set, skipping test")
    return key, secret
