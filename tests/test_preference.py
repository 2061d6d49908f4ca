"""Tests for sdpline.preference."""

from sdpline.media import MediaDescription, RtpEntry
from sdpline.preference import prefer_video_codec


def _video() -> MediaDescription:
    return MediaDescription(
        type="video",
        payloads="96 97",
        rtp=[RtpEntry(payload=96, codec="VP8"), RtpEntry(payload=97, codec="VP9")],
    )


class TestPreferVideoCodec:
    def test_moves_to_front(self) -> None:
        media = _video()
        prefer_video_codec(media, "VP9")
        assert media.payloads == "97 96"

    def test_absent_codec_is_noop(self) -> None:
        media = _video()
        prefer_video_codec(media, "VP9")
        prefer_video_codec(media, "AV1")
        assert media.payloads == "97 96"

    def test_already_first(self) -> None:
        media = _video()
        prefer_video_codec(media, "VP8")
        assert media.payloads == "96 97"

    def test_case_sensitive(self) -> None:
        media = _video()
        prefer_video_codec(media, "vp9")
        assert media.payloads == "96 97"

    def test_relative_order_kept(self) -> None:
        media = MediaDescription(
            payloads="100 101 107 116 117 96",
            rtp=[
                RtpEntry(payload=100, codec="VP8"),
                RtpEntry(payload=101, codec="VP9"),
                RtpEntry(payload=107, codec="H264"),
                RtpEntry(payload=116, codec="red"),
                RtpEntry(payload=117, codec="ulpfec"),
                RtpEntry(payload=96, codec="rtx"),
            ],
        )
        prefer_video_codec(media, "H264")
        assert media.payloads == "107 100 101 116 117 96"

    def test_first_profile_wins(self) -> None:
        media = MediaDescription(
            payloads="96 98 100",
            rtp=[
                RtpEntry(payload=96, codec="VP8"),
                RtpEntry(payload=100, codec="H264"),
                RtpEntry(payload=98, codec="H264"),
            ],
        )
        prefer_video_codec(media, "H264")
        assert media.payloads == "100 96 98"

    def test_payload_type_zero(self) -> None:
        media = MediaDescription(
            payloads="8 0",
            rtp=[RtpEntry(payload=8, codec="PCMA"), RtpEntry(payload=0, codec="PCMU")],
        )
        prefer_video_codec(media, "PCMU")
        assert media.payloads == "0 8"
