"""sdpline: SDP line codecs for WebRTC/Jingle signaling."""

from __future__ import annotations

__version__ = "0.1.0"

from .candidate import (
    CandidateSource,
    IceCandidate,
    MappingCandidateSource,
    build_icecandidate,
    candidate_from_jingle,
    candidate_to_jingle,
    keep_protocol,
    parse_icecandidate,
    protocol_normalizer,
    ssltcp_as_tcp,
)
from .lines import (
    CryptoAttr,
    ExtMap,
    Fingerprint,
    FmtpParam,
    IceCredentials,
    MediaLine,
    RtcpFb,
    RtpMap,
    SctpMap,
    SdpLineError,
    build_crypto,
    build_extmap,
    build_fingerprint,
    build_fmtp,
    build_icepwd,
    build_iceufrag,
    build_mid,
    build_mline,
    build_rtcpfb,
    build_rtpmap,
    build_sctpmap,
    check_line,
    filter_special_chars,
    iceparams,
    parse_crypto,
    parse_extmap,
    parse_fingerprint,
    parse_fmtp,
    parse_icepwd,
    parse_iceufrag,
    parse_mid,
    parse_mline,
    parse_rtcpfb,
    parse_rtpmap,
    parse_sctpmap,
)
from .media import (
    MediaDescription,
    RtpEntry,
    SessionDescription,
    SsrcGroup,
    SsrcLine,
    get_media,
    media_from_block,
)
from .preference import prefer_video_codec
from .search import find_line, find_lines
from .ssrc import (
    SsrcInference,
    SsrcResolution,
    generate_ssrc,
    get_ssrc_attribute,
    parse_group_ssrcs,
    parse_primary_video_ssrc,
    parse_ssrc,
    parse_ssrc_by_id,
)

__all__ = [
    "CandidateSource",
    "CryptoAttr",
    "ExtMap",
    "Fingerprint",
    "FmtpParam",
    "IceCandidate",
    "IceCredentials",
    "MappingCandidateSource",
    "MediaDescription",
    "MediaLine",
    "RtcpFb",
    "RtpEntry",
    "RtpMap",
    "SctpMap",
    "SdpLineError",
    "SessionDescription",
    "SsrcGroup",
    "SsrcInference",
    "SsrcLine",
    "SsrcResolution",
    "build_crypto",
    "build_extmap",
    "build_fingerprint",
    "build_fmtp",
    "build_icecandidate",
    "build_icepwd",
    "build_iceufrag",
    "build_mid",
    "build_mline",
    "build_rtcpfb",
    "build_rtpmap",
    "build_sctpmap",
    "candidate_from_jingle",
    "candidate_to_jingle",
    "check_line",
    "filter_special_chars",
    "find_line",
    "find_lines",
    "generate_ssrc",
    "get_media",
    "get_ssrc_attribute",
    "iceparams",
    "keep_protocol",
    "media_from_block",
    "parse_crypto",
    "parse_extmap",
    "parse_fingerprint",
    "parse_fmtp",
    "parse_group_ssrcs",
    "parse_icecandidate",
    "parse_icepwd",
    "parse_iceufrag",
    "parse_mid",
    "parse_mline",
    "parse_primary_video_ssrc",
    "parse_rtcpfb",
    "parse_rtpmap",
    "parse_sctpmap",
    "parse_ssrc",
    "parse_ssrc_by_id",
    "prefer_video_codec",
    "protocol_normalizer",
    "ssltcp_as_tcp",
]
