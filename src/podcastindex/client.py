"""Podcast Index API client exposing one method per endpoint."""

import logging
from typing import Any

import requests

from .api import PodcastIndexAPI
from .codec import (
    decode_category_list_response,
    decode_episode_response,
    decode_feed_response,
    decode_feeds_response,
    decode_items_response,
)
from .models import Category, Episode, ITunesID, Podcast
from .params import (
    EpisodesParams,
    LiveEpisodesParams,
    Query,
    SearchByPersonParams,
    SearchByTermParams,
    SearchByTitleParams,
    SearchMusicByTermParams,
    search_query,
)
from .utils import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, REQUEST_TIMEOUT


class PodcastIndexClient:
    """Client for the Podcast Index API."""

    def __init__(
        self,
        api_key: str = "",
        api_secret: str = "",
        user_agent: str = DEFAULT_USER_AGENT,
        base_url: str = DEFAULT_BASE_URL,
        *,
        session: requests.Session | None = None,
        proxy: str | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the API client.

        Args:
            api_key: Podcast Index API key, e.g. ``UXKCGDSYGUUEVQJSYDZH``
            api_secret: Podcast Index API secret
            user_agent: Identifies the calling product, e.g. ``SuperPodcastPlayer/1.3``
            base_url: Base URL for the API, override for proxies or local test servers
            session: Optional requests session, e.g. for custom TLS or adapters
            proxy: Proxy URL (e.g. "http://proxy.example.com:8080" or "socks5://proxy.example.com:1080")
            timeout: Default timeout in seconds for every request

        """
        self.logger = logging.getLogger(__name__)
        self._session = session or requests.Session()

        # Configure proxy if provided
        if proxy:
            self._session.proxies = {"http": proxy, "https": proxy}

        self.api = PodcastIndexAPI(
            api_key=api_key,
            api_secret=api_secret,
            user_agent=user_agent,
            base_url=base_url,
            session=self._session,
            timeout=timeout,
        )

    def __enter__(self) -> "PodcastIndexClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()

    # --- podcasts ---

    def _lookup_podcast(self, endpoint: str, query: Query, timeout: float | None) -> Podcast | None:
        podcast = self.api.get(endpoint, query, decode_feed_response, timeout)
        if podcast is None:
            self.logger.info("No podcast found at %s for %s", endpoint, query)
        return podcast

    def get_podcast_by_feed_id(self, feed_id: int, *, timeout: float | None = None) -> Podcast | None:
        """Look up a podcast by its Podcast Index feed ID.

        Args:
            feed_id: The internal Podcast Index feed ID
            timeout: Optional timeout in seconds for this request

        Returns:
            The podcast, or None if not found

        Raises:
            PodcastIndexError: If the request fails or the response cannot be decoded

        """
        return self._lookup_podcast("podcasts/byfeedid", [("id", str(feed_id))], timeout)

    def get_podcast_by_guid(self, guid: str, *, timeout: float | None = None) -> Podcast | None:
        """Look up a podcast by the GUID from its ``podcast:guid`` tag."""
        return self._lookup_podcast("podcasts/byguid", [("guid", guid)], timeout)

    def get_podcast_by_itunes_id(self, itunes_id: ITunesID | str | int, *, timeout: float | None = None) -> Podcast | None:
        """Look up a podcast by its iTunes ID.

        Args:
            itunes_id: The iTunes ID, with or without the ``id`` prefix
            timeout: Optional timeout in seconds for this request

        Returns:
            The podcast, or None if not found

        Raises:
            FieldParseError: If the iTunes ID is not numeric
            PodcastIndexError: If the request fails or the response cannot be decoded

        """
        numeric_id = ITunesID(str(itunes_id)).to_int()
        return self._lookup_podcast("podcasts/byitunesid", [("id", str(numeric_id))], timeout)

    def get_podcast_by_url(self, feed_url: str, *, timeout: float | None = None) -> Podcast | None:
        """Look up a podcast by its feed URL."""
        return self._lookup_podcast("podcasts/byfeedurl", [("url", feed_url)], timeout)

    # --- episodes ---

    def get_episodes_by_feed_id(
        self,
        feed_id: int,
        params: EpisodesParams | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Episode]:
        """Get the episodes of a feed, newest first.

        Args:
            feed_id: The internal Podcast Index feed ID
            params: Optional ``max`` and ``fulltext`` options
            timeout: Optional timeout in seconds for this request

        Returns:
            List of episodes, empty if the feed has none

        """
        query: Query = [("id", str(feed_id))]
        if params is not None:
            params.apply(query)
        return self.api.get("episodes/byfeedid", query, decode_items_response, timeout)

    def get_episodes(
        self,
        podcast: Podcast,
        params: EpisodesParams | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Episode]:
        """Get the episodes of a podcast returned by another call."""
        return self.get_episodes_by_feed_id(podcast.id, params, timeout=timeout)

    def get_episode_by_id(
        self,
        episode_id: int,
        params: EpisodesParams | None = None,
        *,
        timeout: float | None = None,
    ) -> Episode | None:
        """Get a single episode by its Podcast Index episode ID.

        Only the ``fulltext`` option applies to this endpoint.

        Returns:
            The episode, or None if not found

        """
        query: Query = [("id", str(episode_id))]
        if params is not None and params.fulltext:
            query.append(("fulltext", ""))
        return self.api.get("episodes/byid", query, decode_episode_response, timeout)

    def get_live_episodes(
        self,
        params: LiveEpisodesParams | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Episode]:
        """Get episodes found in ``podcast:liveItem`` tags across all feeds."""
        query: Query = []
        if params is not None:
            params.apply(query)
        return self.api.get("episodes/live", query, decode_items_response, timeout)

    # --- search ---

    def search_podcasts_by_title(
        self,
        title: str,
        params: SearchByTitleParams | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Podcast]:
        """Search for podcasts whose title matches ``title``."""
        return self.api.get("search/bytitle", search_query(title, params), decode_feeds_response, timeout)

    def search_podcasts_by_term(
        self,
        term: str,
        params: SearchByTermParams | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Podcast]:
        """Search for podcasts matching ``term`` in their title, author or owner fields."""
        return self.api.get("search/byterm", search_query(term, params), decode_feeds_response, timeout)

    def search_podcasts_by_person(
        self,
        person: str,
        params: SearchByPersonParams | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Podcast]:
        """Search for podcasts mentioning ``person`` in their person tags, title, author or owner."""
        return self.api.get("search/byperson", search_query(person, params), decode_feeds_response, timeout)

    def search_music_podcasts_by_term(
        self,
        term: str,
        params: SearchMusicByTermParams | None = None,
        *,
        timeout: float | None = None,
    ) -> list[Podcast]:
        """Search for music podcasts (``podcast:medium`` music) matching ``term``."""
        return self.api.get("search/music/byterm", search_query(term, params), decode_feeds_response, timeout)

    # --- categories ---

    def categories(self, *, timeout: float | None = None) -> list[Category]:
        """Get every category supported by the index."""
        return self.api.get("categories/list", None, decode_category_list_response, timeout)
