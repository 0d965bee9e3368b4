"""Optional parameters accepted by the endpoint methods of PodcastIndexClient."""

from dataclasses import dataclass

from .utils import DEFAULT_SEARCH_MAX, clamp_max

Query = list[tuple[str, str]]


def _set_max(query: Query, max_results: int) -> None:
    """Replace any ``max`` entry; values of 100 or more are sent as 99."""
    query[:] = [pair for pair in query if pair[0] != "max"]
    query.append(("max", str(clamp_max(max_results))))


def _add_flag(query: Query, name: str, enabled: bool) -> None:
    if enabled:
        query.append((name, ""))


@dataclass
class EpisodesParams:
    """Options for ``episodes/byfeedid`` and ``episodes/byid``.

    Attributes:
        max: Maximum number of episodes to return, 0 for the API default
        fulltext: Return full text fields instead of truncating them to 100 words

    """

    max: int = 0
    fulltext: bool = False

    def apply(self, query: Query) -> Query:
        if self.max:
            _set_max(query, self.max)
        _add_flag(query, "fulltext", self.fulltext)
        return query


@dataclass
class LiveEpisodesParams:
    """Options for ``episodes/live``."""

    max: int = 0

    def apply(self, query: Query) -> Query:
        if self.max:
            _set_max(query, self.max)
        return query


@dataclass
class SearchByTitleParams:
    """Options for ``search/bytitle``.

    Attributes:
        max: Maximum number of podcasts to return, defaults to 10
        clean: Only return non-explicit feeds
        fulltext: Return full text fields instead of truncating them to 100 words
        similar: Include similar matches in the response
        value: Only return feeds with a value block of this type (see ``PAYMENT_*``)

    """

    max: int = 0
    clean: bool = False
    fulltext: bool = False
    similar: bool = False
    value: str = ""

    def apply(self, query: Query) -> Query:
        if self.max:
            _set_max(query, self.max)
        _add_flag(query, "clean", self.clean)
        _add_flag(query, "fulltext", self.fulltext)
        _add_flag(query, "similar", self.similar)
        if self.value:
            query.append(("val", self.value))
        return query


@dataclass
class SearchByTermParams(SearchByTitleParams):
    """Options for ``search/byterm``; ``aponly`` restricts results to Apple Podcasts feeds."""

    aponly: bool = False

    def apply(self, query: Query) -> Query:
        super().apply(query)
        if self.aponly:
            query.append(("aponly", "true"))
        return query


@dataclass
class SearchByPersonParams:
    """Options for ``search/byperson``."""

    max: int = 0
    fulltext: bool = False

    def apply(self, query: Query) -> Query:
        if self.max:
            _set_max(query, self.max)
        _add_flag(query, "fulltext", self.fulltext)
        return query


@dataclass
class SearchMusicByTermParams:
    """Options for ``search/music/byterm``."""

    max: int = 0
    clean: bool = False
    fulltext: bool = False
    aponly: bool = False
    value: str = ""

    def apply(self, query: Query) -> Query:
        if self.max:
            _set_max(query, self.max)
        _add_flag(query, "clean", self.clean)
        _add_flag(query, "fulltext", self.fulltext)
        if self.aponly:
            query.append(("aponly", "true"))
        if self.value:
            query.append(("val", self.value))
        return query


def search_query(text: str, params: SearchByTitleParams | SearchByPersonParams | SearchMusicByTermParams | None) -> Query:
    """Build the query for a search endpoint, starting from ``q`` and the default ``max``."""
    query: Query = [("q", text), ("max", str(DEFAULT_SEARCH_MAX))]
    if params is not None:
        params.apply(query)
    return query
