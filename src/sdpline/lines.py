"""Line-level SDP attribute codecs (RFC 4566, RFC 4572, RFC 4568, RFC 5285).

Every ``parse_*`` function takes one line that the caller already located by
its fixed prefix (see :mod:`sdpline.search`) and decodes it positionally.
Parsing is permissive: a malformed line yields a record full of empty or
meaningless fields instead of an exception.  Callers that need strict input
should run :func:`check_line` first.

Every ``build_*`` function is the inverse of the matching ``parse_*`` for
well-formed input, so ``parse_x(build_x(r)) == r``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import NamedTuple

from .search import find_line

# --- Attribute prefixes (their lengths are part of each grammar) ---

ICE_UFRAG = "a=ice-ufrag:"
ICE_PWD = "a=ice-pwd:"
MID = "a=mid:"
MLINE = "m="
RTPMAP = "a=rtpmap:"
SCTPMAP = "a=sctpmap:"
CRYPTO = "a=crypto:"
FINGERPRINT = "a=fingerprint:"
FMTP = "a=fmtp:"
RTCP_FB = "a=rtcp-fb:"
EXTMAP = "a=extmap:"

_SPECIAL_CHARS = re.compile(r"[\\/{,}+]")


class SdpLineError(ValueError):
    """Raised by :func:`check_line` when a line does not carry the expected prefix."""


# --- Dataclasses ---


@dataclass
class IceCredentials:
    """ICE username fragment and password (RFC 8839 §5.4)."""

    ufrag: str = ""
    pwd: str = ""


@dataclass
class MediaLine:
    """SDP ``m=`` line with formats kept in wire order."""

    media: str = ""
    port: str = ""
    proto: str = ""
    fmt: list[str] = field(default_factory=list)


@dataclass
class RtpMap:
    """``a=rtpmap:`` attribute.  Mono when the channel count is omitted."""

    id: str = ""
    name: str = ""
    clockrate: str = ""
    channels: str = "1"


class SctpMap(NamedTuple):
    """``a=sctpmap:`` attribute; the stream count is optional."""

    port: str
    protocol: str
    stream_count: str | None = None


@dataclass
class CryptoAttr:
    """``a=crypto:`` attribute (RFC 4568 §9.1)."""

    tag: str = ""
    crypto_suite: str = ""
    key_params: str = ""
    session_params: str | None = None


@dataclass
class Fingerprint:
    """``a=fingerprint:`` attribute (RFC 4572 §5)."""

    hash: str = ""
    fingerprint: str = ""


@dataclass
class FmtpParam:
    """One ``name=value`` entry of an ``a=fmtp:`` line.

    Bare tokens such as the RFC 4733 event range ``0-15`` have an empty name.
    """

    name: str = ""
    value: str = ""


@dataclass
class RtcpFb:
    """``a=rtcp-fb:`` attribute (RFC 4585 §4.2)."""

    pt: str = ""
    type: str = ""
    params: list[str] = field(default_factory=list)


@dataclass
class ExtMap:
    """``a=extmap:`` attribute (RFC 5285 §5)."""

    value: str = ""
    direction: str = "both"
    uri: str = ""
    params: list[str] = field(default_factory=list)


# --- Helpers ---


def _shift(parts: list[str]) -> str:
    """Pop the leading token, or return ``""`` when none is left."""
    return parts.pop(0) if parts else ""


def check_line(line: str, prefix: str) -> None:
    """Raise :class:`SdpLineError` unless *line* starts with *prefix*."""
    if not line.startswith(prefix):
        raise SdpLineError(f"Expected a line starting with {prefix!r}, got {line!r}")


def filter_special_chars(text: str | None) -> str | None:
    """Strip ``\\ / { , } +`` from free text before it is put on an SDP line.

    Falsy values are returned unchanged.
    """
    return _SPECIAL_CHARS.sub("", text) if text else text


# --- ICE credentials and mid ---


def iceparams(media_block: str, session_block: str | None = None) -> IceCredentials | None:
    """Extract ICE credentials from a media section, falling back to the session.

    Returns ``None`` unless both ``a=ice-ufrag`` and ``a=ice-pwd`` are found.
    """
    ufrag = find_line(media_block, ICE_UFRAG, session_block)
    if ufrag is None:
        return None
    pwd = find_line(media_block, ICE_PWD, session_block)
    if pwd is None:
        return None
    return IceCredentials(ufrag=parse_iceufrag(ufrag), pwd=parse_icepwd(pwd))


def parse_iceufrag(line: str) -> str:
    return line[len(ICE_UFRAG) :]


def build_iceufrag(ufrag: str) -> str:
    return f"{ICE_UFRAG}{ufrag}"


def parse_icepwd(line: str) -> str:
    return line[len(ICE_PWD) :]


def build_icepwd(pwd: str) -> str:
    return f"{ICE_PWD}{pwd}"


def parse_mid(line: str) -> str:
    return line[len(MID) :]


def build_mid(mid: str) -> str:
    return f"{MID}{mid}"


# --- m= line ---


def parse_mline(line: str) -> MediaLine:
    """Parse ``m=<media> <port> <proto> <fmt> ...``."""
    parts = line[len(MLINE) :].split(" ")
    media = _shift(parts)
    port = _shift(parts)
    proto = _shift(parts)
    # trailing whitespace
    if parts and parts[-1] == "":
        parts.pop()
    return MediaLine(media=media, port=port, proto=proto, fmt=parts)


def build_mline(mline: MediaLine) -> str:
    return f"{MLINE}{mline.media} {mline.port} {mline.proto} {' '.join(mline.fmt)}"


# --- Codec maps ---


def parse_rtpmap(line: str) -> RtpMap:
    """Parse ``a=rtpmap:<pt> <name>/<clockrate>[/<channels>]``."""
    parts = line[len(RTPMAP) :].split(" ")
    pt = _shift(parts)
    encoding = _shift(parts).split("/")
    name = _shift(encoding)
    clockrate = _shift(encoding)
    channels = _shift(encoding) if encoding else "1"
    return RtpMap(id=pt, name=name, clockrate=clockrate, channels=channels)


def build_rtpmap(rtpmap: RtpMap) -> str:
    """Serialize an :class:`RtpMap`, omitting the channel count for mono."""
    line = f"{RTPMAP}{rtpmap.id} {rtpmap.name}/{rtpmap.clockrate}"
    if rtpmap.channels and rtpmap.channels != "1":
        line += f"/{rtpmap.channels}"
    return line


def parse_sctpmap(line: str) -> SctpMap:
    """Parse ``a=sctpmap:<port> <protocol> [<streams>]``."""
    parts = line[len(SCTPMAP) :].split(" ")
    port = _shift(parts)
    protocol = _shift(parts)
    stream_count = parts[0] if parts else None
    return SctpMap(port, protocol, stream_count)


def build_sctpmap(sctpmap: SctpMap) -> str:
    line = f"{SCTPMAP}{sctpmap.port} {sctpmap.protocol}"
    if sctpmap.stream_count is not None:
        line += f" {sctpmap.stream_count}"
    return line


# --- Security ---


def parse_crypto(line: str) -> CryptoAttr:
    """Parse ``a=crypto:<tag> <suite> <key-params> [<session-params> ...]``."""
    parts = line[len(CRYPTO) :].split(" ")
    crypto = CryptoAttr(
        tag=_shift(parts),
        crypto_suite=_shift(parts),
        key_params=_shift(parts),
    )
    if parts:
        crypto.session_params = " ".join(parts)
    return crypto


def build_crypto(crypto: CryptoAttr) -> str:
    line = f"{CRYPTO}{crypto.tag} {crypto.crypto_suite} {crypto.key_params}"
    if crypto.session_params is not None:
        line += f" {crypto.session_params}"
    return line


def parse_fingerprint(line: str) -> Fingerprint:
    """Parse ``a=fingerprint:<hash-func> <fingerprint>``.

    The fingerprint itself is not checked against the ``2UHEX *(":" 2UHEX)``
    grammar.
    """
    parts = line[len(FINGERPRINT) :].split(" ")
    return Fingerprint(hash=_shift(parts), fingerprint=_shift(parts))


def build_fingerprint(fingerprint: Fingerprint) -> str:
    return f"{FINGERPRINT}{fingerprint.hash} {fingerprint.fingerprint}"


# --- Format parameters and feedback ---


def parse_fmtp(line: str) -> list[FmtpParam]:
    """Parse the parameter list of ``a=fmtp:<pt> <params>``.

    The payload type is not part of the result.  Parameters are separated by
    ``;``; a token without a value is kept as ``FmtpParam("", token)``.
    """
    params: list[FmtpParam] = []
    for part in " ".join(line.split(" ")[1:]).split(";"):
        key, _, value = part.partition("=")
        key = key.lstrip(" ")
        if key and value:
            params.append(FmtpParam(name=key, value=value))
        elif key:
            # RFC 4733 (DTMF) style
            params.append(FmtpParam(name="", value=key))
    return params


def build_fmtp(pt: str, params: list[FmtpParam]) -> str:
    """Serialize format parameters for payload type *pt*."""
    tokens = [f"{p.name}={p.value}" if p.name else p.value for p in params]
    return f"{FMTP}{pt} {';'.join(tokens)}"


def parse_rtcpfb(line: str) -> RtcpFb:
    """Parse ``a=rtcp-fb:<pt> <type> [<param> ...]``."""
    parts = line[len(RTCP_FB) :].split(" ")
    pt = _shift(parts)
    fb_type = _shift(parts)
    return RtcpFb(pt=pt, type=fb_type, params=parts)


def build_rtcpfb(rtcpfb: RtcpFb) -> str:
    return f"{RTCP_FB}{' '.join([rtcpfb.pt, rtcpfb.type, *rtcpfb.params])}"


def parse_extmap(line: str) -> ExtMap:
    """Parse ``a=extmap:<value>[/<direction>] <uri> [<params> ...]``."""
    parts = line[len(EXTMAP) :].split(" ")
    value = _shift(parts)
    direction = "both"
    if "/" in value:
        value, _, direction = value.partition("/")
    uri = _shift(parts)
    return ExtMap(value=value, direction=direction, uri=uri, params=parts)


def build_extmap(extmap: ExtMap) -> str:
    value = extmap.value
    if extmap.direction != "both":
        value += f"/{extmap.direction}"
    return f"{EXTMAP}{' '.join([value, extmap.uri, *extmap.params])}"
