"""Structured media-section shape shared by the SSRC and codec-preference helpers.

The dataclasses mirror what an SDP document parser hands to the negotiation
layer for one ``m=`` section.  :func:`media_from_block` assembles that shape
from a single media-section text block; it does not parse whole documents.
"""

from __future__ import annotations

import contextlib
from dataclasses import dataclass, field

from .lines import MLINE, RTPMAP, parse_mline, parse_rtpmap
from .search import find_line, find_lines
from .ssrc import SSRC, SSRC_GROUP, split_ssrc_line


@dataclass
class RtpEntry:
    """One ``a=rtpmap:`` mapping of a payload type to a codec."""

    payload: int = 0
    codec: str = ""
    rate: str = ""
    channels: str = "1"


@dataclass
class SsrcLine:
    """One ``a=ssrc:<id> <attribute>:<value>`` line."""

    id: int = 0
    attribute: str = ""
    value: str = ""


@dataclass
class SsrcGroup:
    """``a=ssrc-group:`` line; ``ssrcs`` is the space-joined member list."""

    semantics: str = ""
    ssrcs: str = ""


@dataclass
class MediaDescription:
    """A media section as seen by the negotiation layer.

    ``payloads`` is the space-joined payload type list from the ``m=`` line
    and is the only field this package ever mutates (see
    :func:`sdpline.preference.prefer_video_codec`).
    """

    type: str = ""
    port: int = 0
    protocol: str = ""
    payloads: str = ""
    rtp: list[RtpEntry] = field(default_factory=list)
    ssrcs: list[SsrcLine] = field(default_factory=list)
    ssrc_groups: list[SsrcGroup] = field(default_factory=list)


@dataclass
class SessionDescription:
    """The media sections of a session description, in document order."""

    media: list[MediaDescription] = field(default_factory=list)


def get_media(session: SessionDescription, kind: str) -> MediaDescription | None:
    """First media section of the given type (``"audio"``, ``"video"``, ...), or ``None``."""
    for media in session.media:
        if media.type == kind:
            return media
    return None


def media_from_block(block: str) -> MediaDescription:
    """Build a :class:`MediaDescription` from one ``\\r\\n``-joined media section.

    Lines that cannot be decoded (non-numeric payload types or SSRC ids)
    are skipped.
    """
    media = MediaDescription()

    mline = find_line(block, MLINE)
    if mline is not None:
        parsed = parse_mline(mline)
        media.type = parsed.media
        with contextlib.suppress(ValueError):
            media.port = int(parsed.port)
        media.protocol = parsed.proto
        media.payloads = " ".join(parsed.fmt)

    for line in find_lines(block, RTPMAP):
        rtpmap = parse_rtpmap(line)
        try:
            payload = int(rtpmap.id)
        except ValueError:
            continue
        media.rtp.append(
            RtpEntry(
                payload=payload,
                codec=rtpmap.name,
                rate=rtpmap.clockrate,
                channels=rtpmap.channels,
            )
        )

    for line in find_lines(block, SSRC):
        ssrc_id, attribute, value = split_ssrc_line(line)
        try:
            media.ssrcs.append(SsrcLine(id=int(ssrc_id), attribute=attribute, value=value))
        except ValueError:
            continue

    for line in find_lines(block, SSRC_GROUP):
        semantics, _, ssrcs = line[len(SSRC_GROUP) :].partition(" ")
        media.ssrc_groups.append(SsrcGroup(semantics=semantics, ssrcs=ssrcs))

    return media
