"""ICE candidate line codec (RFC 8839 §5.1) for Jingle-style signaling.

Converts ``a=candidate:`` lines to :class:`IceCandidate` records and back.
A line such as::

    a=candidate:2979166662 1 udp 2113937151 192.168.2.100 57698 typ host generation 0

becomes a record with ``foundation``, ``component``, ``protocol`` and so on.
Candidates arriving from a signaling peer as attribute bags (anything with a
``get(name)`` method, see :class:`CandidateSource`) are serialized with
:func:`candidate_from_jingle`, which also applies a pluggable protocol
normalization for browsers that do not understand every transport name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from .utils import generate_candidate_id

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

CANDIDATE = "a=candidate:"

# Candidate types that carry a related address (RFC 8445 §5.1.1)
RELATED_ADDRESS_TYPES: frozenset[str] = frozenset({"srflx", "prflx", "relay"})

# Wire extension key -> IceCandidate attribute
_EXTENSION_KEYS: dict[str, str] = {
    "raddr": "rel_addr",
    "rport": "rel_port",
    "generation": "generation",
    "tcptype": "tcptype",
}


class CandidateSource(Protocol):
    """Read-only view of a candidate keyed by wire attribute name.

    Names are ``foundation``, ``component``, ``protocol``, ``priority``,
    ``ip``, ``port``, ``type``, ``generation``, ``rel-addr``, ``rel-port``
    and ``tcptype``.  Missing attributes return ``None``.
    """

    def get(self, name: str) -> str | None: ...


@dataclass
class IceCandidate:
    """A decoded ICE candidate.

    ``network`` is always ``"1"`` and ``id`` is a random local token; neither
    is carried on the wire.
    """

    foundation: str = ""
    component: str = ""
    protocol: str = ""
    priority: str = ""
    ip: str = ""
    port: str = ""
    type: str = ""
    generation: str = "0"
    rel_addr: str | None = None
    rel_port: str | None = None
    tcptype: str | None = None
    network: str = "1"
    id: str = field(default_factory=generate_candidate_id)

    def get(self, name: str) -> str | None:
        """Return an attribute by its wire name (``rel-addr``, ``tcptype``, ...)."""
        value = getattr(self, name.replace("-", "_"), None)
        return value if isinstance(value, str) else None


class MappingCandidateSource:
    """Adapt a plain ``{name: value}`` mapping to :class:`CandidateSource`."""

    def __init__(self, attributes: Mapping[str, str]) -> None:
        self._attributes = attributes

    def get(self, name: str) -> str | None:
        return self._attributes.get(name)


# --- Protocol normalization ---


def keep_protocol(protocol: str) -> str:
    """Identity normalizer: emit the protocol as recorded."""
    return protocol


def ssltcp_as_tcp(protocol: str) -> str:
    """Rewrite the ``ssltcp`` pseudo-protocol to ``tcp``."""
    return "tcp" if protocol.lower() == "ssltcp" else protocol


def protocol_normalizer(predicate: Callable[[], bool]) -> Callable[[str], str]:
    """Build a normalizer that maps ``ssltcp`` to ``tcp`` while *predicate* holds.

    *predicate* is a browser-capability check (for example "the peer is
    Firefox") evaluated on every call.
    """

    def normalize(protocol: str) -> str:
        return ssltcp_as_tcp(protocol) if predicate() else protocol

    return normalize


# --- Parsing ---


def _token(elems: list[str], index: int) -> str:
    return elems[index] if index < len(elems) else ""


def _decode(elems: list[str]) -> IceCandidate:
    candidate = IceCandidate(
        foundation=_token(elems, 0)[len(CANDIDATE) :],
        component=_token(elems, 1),
        protocol=_token(elems, 2).lower(),
        priority=_token(elems, 3),
        ip=_token(elems, 4),
        port=_token(elems, 5),
        # elems[6] is "typ"
        type=_token(elems, 7),
    )
    for i in range(8, len(elems), 2):
        key = elems[i]
        if i + 1 >= len(elems):
            logger.debug("Candidate extension %r has no value", key)
            break
        value = elems[i + 1]
        attr = _EXTENSION_KEYS.get(key)
        if attr is None:
            logger.debug("Not translating candidate extension %r = %r", key, value)
            continue
        setattr(candidate, attr, value)
    return candidate


def parse_icecandidate(line: str) -> IceCandidate:
    """Decode an ``a=candidate:`` line without checking its shape."""
    return _decode(line.split(" "))


def candidate_to_jingle(line: str) -> IceCandidate | None:
    """Decode a candidate line, returning ``None`` if it is not one.

    Accepts both ``candidate:...`` and ``a=candidate:...`` forms and a
    trailing CRLF.  Lines with a different prefix, or without the ``typ``
    token in its fixed position, are logged and rejected.
    """
    if line.startswith("candidate:"):
        line = f"a={line}"
    elif not line.startswith(CANDIDATE):
        logger.warning("Called with a line that is not a candidate line: %r", line)
        return None
    if line.endswith("\r\n"):
        line = line[:-2]

    elems = line.split(" ")
    if _token(elems, 6) != "typ":
        logger.warning("Did not find typ in the right place: %r", line)
        return None
    return _decode(elems)


# --- Serialization ---


def _encode(source: CandidateSource, protocol: str) -> str:
    parts = [
        f"{CANDIDATE}{source.get('foundation') or ''}",
        source.get("component"),
        protocol,
        source.get("priority"),
        source.get("ip"),
        source.get("port"),
        "typ",
        source.get("type"),
    ]
    rel_addr = source.get("rel-addr")
    rel_port = source.get("rel-port")
    if source.get("type") in RELATED_ADDRESS_TYPES and rel_addr and rel_port:
        parts += ["raddr", rel_addr, "rport", rel_port]
    tcptype = source.get("tcptype")
    if tcptype:
        parts += ["tcptype", tcptype]
    parts += ["generation", source.get("generation") or "0"]
    return " ".join(part or "" for part in parts)


def build_icecandidate(candidate: IceCandidate) -> str:
    """Serialize an :class:`IceCandidate` to an ``a=candidate:`` line."""
    return _encode(candidate, candidate.protocol)


def candidate_from_jingle(
    source: CandidateSource,
    normalize_protocol: Callable[[str], str] | None = None,
) -> str:
    """Serialize a Jingle candidate to a CRLF-terminated ``a=candidate:`` line.

    Args:
        source: Any object answering ``get(name)`` for wire attribute names.
        normalize_protocol: Applied to the protocol before it is emitted; the
            source itself is left untouched.  Defaults to :func:`keep_protocol`.
    """
    normalize = normalize_protocol or keep_protocol
    protocol = normalize(source.get("protocol") or "")
    return f"{_encode(source, protocol)}\r\n"
