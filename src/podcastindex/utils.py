from collections.abc import Iterable, Mapping
from urllib.parse import urlencode

REQUEST_TIMEOUT = 30
DEFAULT_BASE_URL = "https://api.podcastindex.org/api/1.0/"
DEFAULT_USER_AGENT = "podcastindex-python/1.0.0"
MAX_RESULTS_CAP = 99
DEFAULT_SEARCH_MAX = 10

QueryParams = Iterable[tuple[str, str]] | Mapping[str, str]


def join_url(base_url: str, endpoint: str) -> str:
    """Join an endpoint path onto the base URL.

    Args:
        base_url: The configured API base URL, with or without a trailing slash
        endpoint: The endpoint path, with or without a leading slash

    Returns:
        The absolute URL of the endpoint

    """
    return base_url.rstrip("/") + "/" + endpoint.lstrip("/")


def encode_query(params: QueryParams | None) -> str:
    """Percent-encode query parameters with keys sorted lexicographically.

    Repeated keys keep their relative order. Empty values are kept so that
    flags such as ``fulltext`` are sent as ``fulltext=``.

    Args:
        params: Ordered (key, value) pairs, or a mapping

    Returns:
        The encoded query string without a leading ``?``

    """
    if not params:
        return ""
    pairs = list(params.items()) if isinstance(params, Mapping) else list(params)
    # sorted() is stable, so values under one key keep their order
    pairs.sort(key=lambda pair: pair[0])
    return urlencode(pairs)


def clamp_max(value: int) -> int:
    """Clamp a ``max`` parameter to the largest value the API accepts."""
    return min(value, MAX_RESULTS_CAP)


def bool_to_int(value: bool) -> int:
    return 1 if value else 0
