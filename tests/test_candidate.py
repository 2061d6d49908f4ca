"""Tests for sdpline.candidate."""

from __future__ import annotations

import logging

from sdpline.candidate import (
    IceCandidate,
    MappingCandidateSource,
    build_icecandidate,
    candidate_from_jingle,
    candidate_to_jingle,
    parse_icecandidate,
    protocol_normalizer,
    ssltcp_as_tcp,
)

HOST = "a=candidate:2979166662 1 udp 2113937151 192.168.2.100 57698 typ host generation 0"
SRFLX = (
    "a=candidate:1467250027 1 udp 1845501695 203.0.113.7 61665 typ srflx "
    "raddr 192.168.2.100 rport 57698 generation 1"
)
TCP = (
    "a=candidate:4233069003 1 TCP 1518280447 192.168.2.100 9 typ host "
    "tcptype active generation 0"
)


class TestParseIceCandidate:
    def test_host(self) -> None:
        cand = parse_icecandidate(HOST)
        assert cand.foundation == "2979166662"
        assert cand.component == "1"
        assert cand.protocol == "udp"
        assert cand.priority == "2113937151"
        assert cand.ip == "192.168.2.100"
        assert cand.port == "57698"
        assert cand.type == "host"
        assert cand.generation == "0"
        assert cand.rel_addr is None
        assert cand.rel_port is None
        assert cand.tcptype is None

    def test_network_fixed(self) -> None:
        assert parse_icecandidate(HOST).network == "1"

    def test_related_address(self) -> None:
        cand = parse_icecandidate(SRFLX)
        assert cand.rel_addr == "192.168.2.100"
        assert cand.rel_port == "57698"
        assert cand.generation == "1"

    def test_protocol_lowercased(self) -> None:
        cand = parse_icecandidate(TCP)
        assert cand.protocol == "tcp"
        assert cand.tcptype == "active"

    def test_generation_default(self) -> None:
        cand = parse_icecandidate("a=candidate:1 1 udp 1 10.0.0.1 5000 typ host")
        assert cand.generation == "0"

    def test_trailing_key_without_value_keeps_default(self) -> None:
        line = "a=candidate:1 1 udp 1 1.2.3.4 5 typ host generation"
        cand = parse_icecandidate(line)
        assert cand.generation == "0"
        again = parse_icecandidate(build_icecandidate(cand))
        assert again.generation == cand.generation

    def test_trailing_tcptype_without_value(self) -> None:
        cand = parse_icecandidate("a=candidate:1 1 tcp 1 1.2.3.4 9 typ host tcptype")
        assert cand.tcptype is None

    def test_id_generated(self) -> None:
        a = parse_icecandidate(HOST)
        b = parse_icecandidate(HOST)
        assert len(a.id) == 10
        assert a.id != b.id

    def test_unknown_keys_logged_and_dropped(self, caplog) -> None:
        line = f"{HOST} network-id 3 network-cost 10"
        with caplog.at_level(logging.DEBUG, logger="sdpline.candidate"):
            cand = parse_icecandidate(line)
        assert "network-id" in caplog.text
        assert "network-cost" in caplog.text
        assert not hasattr(cand, "network_id")
        assert cand.generation == "0"

    def test_does_not_check_typ(self) -> None:
        cand = parse_icecandidate("a=candidate:1 1 udp 1 10.0.0.1 5000 xxx host")
        assert cand.type == "host"


class TestCandidateToJingle:
    def test_full_line(self) -> None:
        cand = candidate_to_jingle(HOST)
        assert cand is not None
        assert cand.foundation == "2979166662"

    def test_without_a_prefix(self) -> None:
        cand = candidate_to_jingle(HOST[2:])
        assert cand is not None
        assert cand.foundation == "2979166662"
        assert cand.ip == "192.168.2.100"

    def test_chomps_crlf(self) -> None:
        cand = candidate_to_jingle(SRFLX + "\r\n")
        assert cand is not None
        assert cand.generation == "1"

    def test_not_a_candidate_line(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="sdpline.candidate"):
            assert candidate_to_jingle("a=mid:audio") is None
        assert "not a candidate line" in caplog.text

    def test_missing_typ(self, caplog) -> None:
        line = "a=candidate:2979166662 1 udp 2113937151 192.168.2.100 57698 host"
        with caplog.at_level(logging.WARNING, logger="sdpline.candidate"):
            assert candidate_to_jingle(line) is None
        assert "typ" in caplog.text

    def test_truncated_line(self) -> None:
        assert candidate_to_jingle("a=candidate:1 1 udp") is None


class TestBuildIceCandidate:
    def test_host(self) -> None:
        assert build_icecandidate(parse_icecandidate(HOST)) == HOST

    def test_srflx(self) -> None:
        assert build_icecandidate(parse_icecandidate(SRFLX)) == SRFLX

    def test_related_address_only_for_srflx_prflx_relay(self) -> None:
        cand = IceCandidate(
            foundation="1",
            component="1",
            protocol="udp",
            priority="1",
            ip="10.0.0.1",
            port="5000",
            type="host",
            rel_addr="10.0.0.2",
            rel_port="6000",
        )
        assert "raddr" not in build_icecandidate(cand)

    def test_related_address_needs_both(self) -> None:
        cand = IceCandidate(
            foundation="1",
            component="1",
            protocol="udp",
            priority="1",
            ip="198.51.100.1",
            port="5000",
            type="relay",
            rel_addr="10.0.0.2",
        )
        assert "raddr" not in build_icecandidate(cand)

    def test_relay(self) -> None:
        cand = IceCandidate(
            foundation="3",
            component="1",
            protocol="udp",
            priority="41885439",
            ip="198.51.100.1",
            port="50000",
            type="relay",
            rel_addr="203.0.113.7",
            rel_port="61665",
        )
        assert build_icecandidate(cand) == (
            "a=candidate:3 1 udp 41885439 198.51.100.1 50000 typ relay "
            "raddr 203.0.113.7 rport 61665 generation 0"
        )

    def test_tcptype(self) -> None:
        line = build_icecandidate(parse_icecandidate(TCP))
        assert line == (
            "a=candidate:4233069003 1 tcp 1518280447 192.168.2.100 9 typ host "
            "tcptype active generation 0"
        )


class TestCandidateFromJingle:
    ATTRS = {
        "foundation": "1467250027",
        "component": "1",
        "protocol": "ssltcp",
        "priority": "1845501695",
        "ip": "203.0.113.7",
        "port": "443",
        "type": "srflx",
        "rel-addr": "192.168.2.100",
        "rel-port": "57698",
        "tcptype": "passive",
    }

    def test_mapping_source(self) -> None:
        line = candidate_from_jingle(MappingCandidateSource(self.ATTRS))
        assert line == (
            "a=candidate:1467250027 1 ssltcp 1845501695 203.0.113.7 443 typ srflx "
            "raddr 192.168.2.100 rport 57698 tcptype passive generation 0\r\n"
        )

    def test_normalizer_applied(self) -> None:
        source = MappingCandidateSource(self.ATTRS)
        line = candidate_from_jingle(source, ssltcp_as_tcp)
        assert " tcp 1845501695 " in line
        assert source.get("protocol") == "ssltcp"

    def test_predicate_normalizer(self) -> None:
        source = MappingCandidateSource(self.ATTRS)
        firefox = protocol_normalizer(lambda: True)
        chrome = protocol_normalizer(lambda: False)
        assert " tcp " in candidate_from_jingle(source, firefox)
        assert " ssltcp " in candidate_from_jingle(source, chrome)

    def test_record_keeps_protocol(self) -> None:
        cand = parse_icecandidate("a=candidate:1 1 ssltcp 1 10.0.0.1 443 typ host")
        line = candidate_from_jingle(cand, ssltcp_as_tcp)
        assert line.startswith("a=candidate:1 1 tcp ")
        assert cand.protocol == "ssltcp"

    def test_generation_from_source(self) -> None:
        attrs = dict(self.ATTRS, generation="2")
        line = candidate_from_jingle(MappingCandidateSource(attrs))
        assert line.endswith("generation 2\r\n")

    def test_roundtrip_through_jingle(self) -> None:
        cand = candidate_to_jingle(SRFLX)
        assert cand is not None
        again = candidate_to_jingle(candidate_from_jingle(cand))
        assert again is not None
        assert again.foundation == cand.foundation
        assert again.rel_addr == cand.rel_addr
        assert again.rel_port == cand.rel_port
        assert again.generation == cand.generation
