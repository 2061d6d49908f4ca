"""Codec preference by payload-type reordering."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .media import MediaDescription


def prefer_video_codec(media: MediaDescription, codec_name: str) -> None:
    """Move the payload type of *codec_name* to the front of ``media.payloads``.

    Modifies *media* in place.  When several payload types map to the same
    codec (e.g. multiple H264 profiles) the first ``rtp`` entry wins.  The
    codec name is matched case-sensitively; no match leaves *media* as is.
    Callers sharing one media description across threads must serialize
    calls themselves.
    """
    payload_type: int | None = None
    for rtp in media.rtp:
        if rtp.codec == codec_name:
            payload_type = rtp.payload
            break
    if payload_type is None:
        return

    payload_types = [int(p) for p in media.payloads.split()]
    if payload_type in payload_types:
        payload_types.remove(payload_type)
    payload_types.insert(0, payload_type)
    media.payloads = " ".join(str(p) for p in payload_types)
