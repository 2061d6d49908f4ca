"""Translate ICE candidates between SDP and Jingle attribute bags.

Decodes the candidates of an SDP media section, prints their Jingle
attributes, then re-encodes them for a Firefox peer (which needs ``ssltcp``
rewritten to ``tcp``).

Usage::

    python examples/jingle_candidates.py
"""

from __future__ import annotations

import logging

from sdpline import (
    candidate_from_jingle,
    candidate_to_jingle,
    find_lines,
    iceparams,
    protocol_normalizer,
)

MEDIA = (
    "m=audio 9 UDP/TLS/RTP/SAVPF 111\r\n"
    "a=ice-ufrag:F7gI\r\n"
    "a=ice-pwd:x9cml/YzichV2+XlhiMu8g\r\n"
    "a=candidate:2979166662 1 udp 2113937151 192.168.2.100 57698 typ host generation 0\r\n"
    "a=candidate:4233069003 1 ssltcp 1518280447 192.168.2.100 443 typ host tcptype passive\r\n"
    "a=candidate:1 1 udp 1 10.0.0.1 5000 host-without-typ"
)

PEER_IS_FIREFOX = True


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    creds = iceparams(MEDIA)
    if creds is not None:
        print(f"ufrag={creds.ufrag} pwd={creds.pwd}")

    normalize = protocol_normalizer(lambda: PEER_IS_FIREFOX)
    for line in find_lines(MEDIA, "a=candidate:"):
        candidate = candidate_to_jingle(line)
        if candidate is None:
            continue
        print(f"<candidate id={candidate.id} type={candidate.type} protocol={candidate.protocol}>")
        print(candidate_from_jingle(candidate, normalize), end="")


if __name__ == "__main__":
    main()
