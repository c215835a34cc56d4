"""Trailer link extraction."""

from typing import Optional

from kinometa.models.canonical import MediaUrl
from kinometa.models.raw import RawVideoResponse


def normalize_trailers(response: Optional[RawVideoResponse]) -> Optional[list[MediaUrl]]:
    """Trailer links of a video response.

    Returns None, not an empty list, when the response has no trailers.
    """
    if response is None or not response.trailers:
        return None

    return [
        MediaUrl(name=trailer.name, url=trailer.url)
        for trailer in response.trailers
        if trailer is not None
    ]
