"""Request signing for the Podcast Index API."""

import hashlib
import time


def build_auth_headers(
    user_agent: str,
    api_key: str,
    api_secret: str,
    unix_time: int | None = None,
) -> dict[str, str]:
    """Generate authentication headers for a single request.

    The ``Authorization`` value is a SHA-1 hash of the API key, the API secret
    and the ``X-Auth-Date`` value concatenated as a string, encoded as lower
    case hexadecimal.

    Args:
        user_agent: Identifies the calling product, e.g. ``SuperPodcastPlayer/1.3``
        api_key: Podcast Index API key
        api_secret: Podcast Index API secret
        unix_time: Request time in Unix seconds, defaults to now

    Returns:
        Header name to value mapping

    """
    if unix_time is None:
        unix_time = int(time.time())
    auth_date = str(unix_time)
    auth_hash = hashlib.sha1((api_key + api_secret + auth_date).encode()).hexdigest()

    return {
        "User-Agent": user_agent,
        "X-Auth-Key": api_key,
        "X-Auth-Date": auth_date,
        "Authorization": auth_hash,
    }
