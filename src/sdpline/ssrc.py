"""SSRC helpers: ``a=ssrc:`` mapping, group parsing, and primary video SSRC inference.

Simulcast (``SIM``) and retransmission (``FID``, RFC 5576 §4) groups are the
only signals used to pick the primary stream of a video media section.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .utils import random_int

if TYPE_CHECKING:
    from .media import MediaDescription, SsrcGroup

SSRC = "a=ssrc:"
SSRC_GROUP = "a=ssrc-group:"

MAX_SSRC = 0xFFFFFFFF


class SsrcResolution(enum.Enum):
    """Outcome of :func:`parse_primary_video_ssrc`."""

    FOUND = "found"
    INDETERMINATE = "indeterminate"
    ABSENT = "absent"


@dataclass
class SsrcInference:
    """Tagged primary SSRC result; ``ssrc`` is set only when ``FOUND``."""

    resolution: SsrcResolution
    ssrc: int | None = None

    @property
    def found(self) -> bool:
        return self.resolution is SsrcResolution.FOUND


_ABSENT = SsrcResolution.ABSENT
_INDETERMINATE = SsrcResolution.INDETERMINATE


def generate_ssrc() -> int:
    """Generate a random SSRC in ``[1, 0xFFFFFFFF]``.  Uniqueness is not checked."""
    return random_int(1, MAX_SSRC)


# --- a=ssrc lines ---


def split_ssrc_line(line: str) -> tuple[str, str, str]:
    """Split ``a=ssrc:<id> <attribute>:<value>`` into its three parts.

    The value keeps any further colons.  A line without a space yields an
    empty id and treats the whole line as ``attribute:value``.
    """
    idx = line.find(" ")
    ssrc_id = line[len(SSRC) : idx] if idx != -1 else ""
    attribute, _, value = line[idx + 1 :].partition(":")
    return ssrc_id, attribute, value


def parse_ssrc(block: str) -> dict[str, str]:
    """Map attribute names to values over every ``a=ssrc:`` line of *block*.

    SSRC ids are not part of the key, so when several SSRCs share an
    attribute name the last line wins.  Use :func:`parse_ssrc_by_id` to keep
    them apart.
    """
    data: dict[str, str] = {}
    for line in block.split("\r\n"):
        if line.startswith(SSRC):
            _, attribute, value = split_ssrc_line(line)
            data[attribute] = value
    return data


def parse_ssrc_by_id(block: str) -> dict[str, dict[str, str]]:
    """Like :func:`parse_ssrc` but keyed by SSRC id first."""
    data: dict[str, dict[str, str]] = {}
    for line in block.split("\r\n"):
        if line.startswith(SSRC):
            ssrc_id, attribute, value = split_ssrc_line(line)
            data.setdefault(ssrc_id, {})[attribute] = value
    return data


# --- Structured media sections ---


def parse_group_ssrcs(group: SsrcGroup) -> list[int]:
    """Return the group members as integers in the order listed.

    The order ranks simulcast layers, so it is never sorted.  Non-numeric
    tokens are skipped.
    """
    ssrcs: list[int] = []
    for token in group.ssrcs.split():
        try:
            ssrcs.append(int(token))
        except ValueError:
            continue
    return ssrcs


def get_ssrc_attribute(media: MediaDescription, ssrc: int, attribute: str) -> str | None:
    """Value of *attribute* for *ssrc* in *media*, or ``None``."""
    for line in media.ssrcs:
        if line.id == ssrc and line.attribute == attribute:
            return line.value
    return None


def _first_member(media: MediaDescription, semantics: str) -> SsrcInference:
    for group in media.ssrc_groups:
        if group.semantics == semantics:
            members = parse_group_ssrcs(group)
            if members:
                return SsrcInference(SsrcResolution.FOUND, members[0])
            break
    return SsrcInference(_INDETERMINATE)


def parse_primary_video_ssrc(media: MediaDescription) -> SsrcInference:
    """Infer the primary SSRC of a video media section.

    * one distinct SSRC: that SSRC;
    * two: the first member of the ``FID`` group;
    * three or more: the first member of the ``SIM`` group;
    * several SSRCs with no group, or no matching group: indeterminate;
    * no SSRC at all: absent.
    """
    distinct = list(dict.fromkeys(line.id for line in media.ssrcs))
    num_ssrcs = len(distinct)
    num_groups = len(media.ssrc_groups)

    if num_ssrcs == 0:
        return SsrcInference(_ABSENT)
    if num_groups == 0 and num_ssrcs > 1:
        # Ambiguous, can't figure out the primary
        return SsrcInference(_INDETERMINATE)
    if num_ssrcs == 1:
        return SsrcInference(SsrcResolution.FOUND, media.ssrcs[0].id)
    if num_ssrcs == 2:
        return _first_member(media, "FID")
    return _first_member(media, "SIM")
