"""Tests for Pydantic models and enum definitions."""

import pytest
from pydantic import ValidationError

from ytresolve.models.enums import ClientName, Host, LinkType, SessionPolicy
from ytresolve.models.innertube import (
    CaptionTrack,
    ClientProfile,
    Format,
    PlayerResponse,
    SessionConfig,
)
from ytresolve.models.request import ResolveRequest
from ytresolve.models.response import ErrorResponse, ExtractorLink, ResolveResponse, SubtitleFile


# ── Enum completeness ────────────────────────────────────────────────
class TestEnums:
    def test_link_types(self):
        assert {t.value for t in LinkType} == {"hls", "progressive"}

    def test_client_names(self):
        assert {c.value for c in ClientName} == {"WEB", "ANDROID"}

    def test_session_policies(self):
        assert {p.value for p in SessionPolicy} == {"defaults", "abort"}

    def test_hosts(self):
        assert {h.value for h in Host} == {"www", "short_link", "mobile", "no_cookie"}


# ── ResolveRequest ───────────────────────────────────────────────────
class TestResolveRequest:
    def test_minimal(self):
        req = ResolveRequest(url="https://youtu.be/abc123")
        assert req.client is None
        assert req.host is None
        assert req.timeout is None

    def test_full(self):
        req = ResolveRequest(
            url="https://m.youtube.com/watch?v=abc123",
            client="android",
            host="mobile",
            timeout=12.5,
        )
        assert req.host == Host.MOBILE
        assert req.timeout == 12.5

    def test_invalid_host_rejected(self):
        with pytest.raises(ValidationError):
            ResolveRequest(url="https://youtu.be/abc", host="vimeo")

    @pytest.mark.parametrize("timeout", [0, -1, 301])
    def test_timeout_bounds(self, timeout):
        with pytest.raises(ValidationError):
            ResolveRequest(url="https://youtu.be/abc", timeout=timeout)

    def test_url_too_long(self):
        with pytest.raises(ValidationError):
            ResolveRequest(url="https://youtu.be/" + "a" * 5000)


# ── Response models ──────────────────────────────────────────────────
class TestResponses:
    def test_extractor_link_defaults(self):
        link = ExtractorLink(source="YouTube", name="YouTube", url="https://a/1.m3u8", type="hls")
        assert link.type == LinkType.HLS
        assert link.quality == 0
        assert link.referer == ""
        assert link.headers == {}

    def test_subtitle_file(self):
        sub = SubtitleFile(lang="English", url="https://a/tt?v=1&fmt=ttml")
        assert sub.headers == {}

    def test_resolve_response_serialization(self):
        resp = ResolveResponse(
            id="abc123",
            client="android",
            links=[
                ExtractorLink(
                    source="YouTube",
                    name="YouTube 720p",
                    url="https://a/720.mp4",
                    type=LinkType.PROGRESSIVE,
                    quality=720,
                )
            ],
        )
        data = resp.model_dump(mode="json")
        assert data["success"] is True
        assert data["links"][0]["type"] == "progressive"
        assert data["subtitles"] == []

    def test_error_response(self):
        err = ErrorResponse(error="boom", error_code="youtube.player_api")
        assert err.success is False


# ── InnerTube models ─────────────────────────────────────────────────
class TestClientProfile:
    def test_headers_include_user_agent(self):
        profile = ClientProfile(
            key="test",
            client_name=ClientName.ANDROID,
            client_version="1.0",
            context_client_name=3,
            user_agent="UA/1.0",
            extra_headers={"Accept-Language": "en"},
        )
        assert profile.headers == {"User-Agent": "UA/1.0", "Accept-Language": "en"}
        assert profile.requires_session_config is False
        assert profile.on_missing_config == SessionPolicy.ABORT

    def test_frozen(self):
        profile = ClientProfile(
            key="test",
            client_name=ClientName.WEB,
            client_version="1.0",
            context_client_name=1,
            user_agent="UA",
        )
        with pytest.raises(ValidationError):
            profile.key = "other"


class TestSessionConfig:
    def test_from_ytcfg_keys(self):
        config = SessionConfig.model_validate(
            {
                "INNERTUBE_API_KEY": "KEY",
                "INNERTUBE_CLIENT_VERSION": "2.2024",
                "VISITOR_DATA": "CgtWaXM",
                "HL": "en",
            }
        )
        assert config.api_key == "KEY"
        assert config.client_version == "2.2024"
        assert config.visitor_data == "CgtWaXM"

    def test_null_visitor_data(self):
        config = SessionConfig.model_validate({"INNERTUBE_API_KEY": "KEY", "VISITOR_DATA": None})
        assert config.visitor_data == ""

    def test_by_field_name(self):
        config = SessionConfig(api_key="KEY")
        assert config.client_version is None
        assert config.visitor_data == ""

    def test_missing_key_rejected(self):
        with pytest.raises(ValidationError):
            SessionConfig.model_validate({"INNERTUBE_CLIENT_VERSION": "2.2024"})

    def test_empty_key_rejected(self):
        with pytest.raises(ValidationError):
            SessionConfig.model_validate({"INNERTUBE_API_KEY": ""})


class TestCaptionTrack:
    def test_simple_text_label(self):
        track = CaptionTrack.from_api(
            {"baseUrl": "https://a/tt?v=1", "name": {"simpleText": "English"}, "languageCode": "en"}
        )
        assert track.language_label == "English"
        assert track.language_code == "en"

    def test_runs_label(self):
        track = CaptionTrack.from_api(
            {"baseUrl": "https://a/tt", "name": {"runs": [{"text": "Deutsch"}]}}
        )
        assert track.language_label == "Deutsch"

    def test_falls_back_to_language_code(self):
        track = CaptionTrack.from_api({"baseUrl": "https://a/tt", "languageCode": "fr"})
        assert track.language_label == "fr"

    def test_unknown_label(self):
        track = CaptionTrack.from_api({"baseUrl": "https://a/tt"})
        assert track.language_label == "Unknown"

    def test_no_base_url(self):
        assert CaptionTrack.from_api({"name": {"simpleText": "English"}}) is None


class TestFormat:
    def test_from_api(self):
        fmt = Format.from_api(
            {
                "itag": 22,
                "url": "https://a/22.mp4",
                "height": 720,
                "qualityLabel": "720p",
                "mimeType": 'video/mp4; codecs="avc1.64001F, mp4a.40.2"',
            }
        )
        assert fmt.url == "https://a/22.mp4"
        assert fmt.height == 720
        assert fmt.quality_label == "720p"
        assert fmt.mime_type.startswith("video/mp4")

    def test_ciphered_format_has_no_url(self):
        fmt = Format.from_api({"signatureCipher": "s=...", "mimeType": "video/mp4"})
        assert fmt.url is None


class TestPlayerResponse:
    def test_manifest_and_captions(self):
        data = {
            "playabilityStatus": {"status": "OK"},
            "streamingData": {"hlsManifestUrl": "https://manifest/master.m3u8"},
            "captions": {
                "playerCaptionsTracklistRenderer": {
                    "captionTracks": [
                        {"baseUrl": "https://a/en", "name": {"simpleText": "English"}},
                        {"baseUrl": "https://a/de", "name": {"simpleText": "German"}},
                    ]
                }
            },
        }
        resp = PlayerResponse.from_api(data)
        assert resp.streaming_data.has_manifest
        assert [t.language_label for t in resp.caption_tracks] == ["English", "German"]
        assert resp.playability_status == "OK"

    def test_formats_only(self):
        data = {"streamingData": {"formats": [{"url": "https://a/18.mp4", "mimeType": "video/mp4"}]}}
        resp = PlayerResponse.from_api(data)
        assert not resp.streaming_data.has_manifest
        assert len(resp.streaming_data.formats) == 1
        assert resp.caption_tracks == []

    def test_missing_streaming_data(self):
        assert PlayerResponse.from_api({"playabilityStatus": {"status": "LOGIN_REQUIRED"}}) is None

    def test_empty_streaming_data(self):
        assert PlayerResponse.from_api({"streamingData": {"formats": []}}) is None

    def test_streaming_data_not_object(self):
        assert PlayerResponse.from_api({"streamingData": "nope"}) is None

    def test_tracks_without_url_dropped(self):
        data = {
            "streamingData": {"hlsManifestUrl": "https://m"},
            "captions": {
                "playerCaptionsTracklistRenderer": {
                    "captionTracks": [{"name": {"simpleText": "Broken"}}, {"baseUrl": "https://a/en"}]
                }
            },
        }
        resp = PlayerResponse.from_api(data)
        assert [t.base_url for t in resp.caption_tracks] == ["https://a/en"]

    def test_malformed_items_skipped(self):
        data = {
            "streamingData": {
                "formats": [
                    {"url": "https://a/bad", "mimeType": ["video/mp4"]},
                    {"url": "https://a/18", "mimeType": "video/mp4"},
                    "not an object",
                ]
            },
            "captions": {
                "playerCaptionsTracklistRenderer": {
                    "captionTracks": [{"baseUrl": "https://a/x", "name": {"runs": [{"text": 7}]}}]
                }
            },
        }
        resp = PlayerResponse.from_api(data)
        assert [f.url for f in resp.streaming_data.formats] == ["https://a/18"]
        assert resp.caption_tracks == []

    def test_captions_not_a_list(self):
        data = {
            "streamingData": {"hlsManifestUrl": "https://m"},
            "captions": {"playerCaptionsTracklistRenderer": {"captionTracks": "none"}},
        }
        assert PlayerResponse.from_api(data).caption_tracks == []
