"""Tests for the HeaderInfo model, header presets and the custom header builder."""

import orjson
import pytest
from pydantic import ValidationError

from models.errors import InvalidHeaderData
from models.flags import CachePreset, CORSPreset, Method
from models.header_model import CacheControl, CORSPolicy, HeaderInfo
from models.roles import BLACKLIST_ROLE, PUBLIC_ROLE, role_to_hex
from permissions.headers import (
    DEFAULT_HEADER,
    DEFAULT_HEADERS,
    PUBLIC_HEADER,
    READ_ONLY_PUBLIC_HEADER,
    create_custom_header,
)
from permissions.methods import ALL_METHODS_BITMASK, READ_ONLY_METHODS_BITMASK, methods_to_bitmask
from permissions.origins import ORIGINS_PRESETS, ORIGINS_READ_PUBLIC_WRITE_ADMIN, create_origins_array


class TestHeaderInfoModel:
    def test_rejects_wrong_origins_length(self):
        with pytest.raises(ValidationError):
            CORSPolicy(methods=0, origins=(PUBLIC_ROLE,) * 8)

    def test_rejects_wrong_role_width(self):
        with pytest.raises(ValidationError):
            CORSPolicy(methods=0, origins=(b"\x01",) * 9)

    def test_accepts_hex_roles(self):
        policy = CORSPolicy(methods=0, origins=[role_to_hex(PUBLIC_ROLE)] * 9)
        assert policy.origins == create_origins_array(PUBLIC_ROLE)

    def test_is_frozen(self):
        with pytest.raises(ValidationError):
            PUBLIC_HEADER.cache = CacheControl()  # type: ignore[misc]

    def test_copy_with_update_leaves_original(self):
        updated = PUBLIC_HEADER.model_copy(update={"cache": CacheControl(preset=CachePreset.LONG)})
        assert updated.cache.preset is CachePreset.LONG
        assert PUBLIC_HEADER.cache.preset is CachePreset.DEFAULT

    def test_json_round_trip(self):
        for header in DEFAULT_HEADERS.values():
            assert HeaderInfo.from_json(header.as_bytes()) == header

    def test_json_uses_hex_roles(self):
        payload = orjson.loads(PUBLIC_HEADER.as_bytes())
        assert payload["cors"]["origins"] == [role_to_hex(PUBLIC_ROLE)] * 9
        assert payload["cache"]["preset"] == 2
        assert payload["cors"]["methods"] == ALL_METHODS_BITMASK

    @pytest.mark.parametrize("data", [b"not json", b"[1, 2]", b'{"cache": {}, "cors": {"methods": 1, "origins": []}}'])
    def test_from_json_rejects_invalid(self, data):
        with pytest.raises(InvalidHeaderData):
            HeaderInfo.from_json(data)

    def test_as_struct(self):
        assert PUBLIC_HEADER.as_struct() == (
            (False, 2, ""),
            (ALL_METHODS_BITMASK, [PUBLIC_ROLE] * 9, 1, ""),
            (0, ""),
        )


class TestPresets:
    @pytest.mark.parametrize(
        "name, cache_preset, immutable, methods, origins, cors_preset",
        [
            ("PUBLIC", CachePreset.DEFAULT, False, ALL_METHODS_BITMASK, "PUBLIC", CORSPreset.PUBLIC),
            ("ADMIN_ONLY", CachePreset.NONE, False, ALL_METHODS_BITMASK, "ADMIN_ONLY", CORSPreset.PRIVATE),
            ("READ_ONLY_PUBLIC", CachePreset.SHORT, False, ALL_METHODS_BITMASK, "READ_PUBLIC_WRITE_ADMIN", CORSPreset.MIXED_ACCESS),
            ("API", CachePreset.NO_CACHE, False, ALL_METHODS_BITMASK, "API_PATTERN", CORSPreset.API),
            ("INTRA_SITE", CachePreset.NO_CACHE, False, ALL_METHODS_BITMASK, "INTRA_SITE", CORSPreset.PRIVATE),
            ("IMMUTABLE_PUBLIC", CachePreset.PERMANENT, True, ALL_METHODS_BITMASK, "IMMUTABLE_CONTENT", CORSPreset.PUBLIC),
            ("STRICT_READ_ONLY", CachePreset.MEDIUM, False, READ_ONLY_METHODS_BITMASK, "READ_ONLY_PUBLIC", CORSPreset.PUBLIC),
        ],
    )
    def test_preset(self, name, cache_preset, immutable, methods, origins, cors_preset):
        header = DEFAULT_HEADERS[name]
        assert header.cache.preset is cache_preset
        assert header.cache.immutable_flag is immutable
        assert header.cache.custom == ""
        assert header.cors.methods == methods
        assert header.cors.origins == ORIGINS_PRESETS[origins]
        assert header.cors.preset is cors_preset
        assert header.redirect.code == 0
        assert header.redirect.location == ""

    def test_default_header(self):
        assert DEFAULT_HEADER is READ_ONLY_PUBLIC_HEADER
        assert DEFAULT_HEADER in DEFAULT_HEADERS.values()


class TestCreateCustomHeader:
    def test_defaults(self):
        header = create_custom_header({})
        assert header.cors.methods == READ_ONLY_METHODS_BITMASK
        assert len(header.cors.origins) == 9
        assert header.cors.origins == ORIGINS_READ_PUBLIC_WRITE_ADMIN
        assert header.cache.preset is CachePreset.DEFAULT
        assert header.cors.preset is CORSPreset.MIXED_ACCESS
        assert header.cache.immutable_flag is False
        assert header.redirect.code == 0

    def test_no_arguments(self):
        assert create_custom_header() == create_custom_header({})

    def test_all_options(self, custom_role):
        header = create_custom_header(
            methods=[Method.GET, Method.PUT],
            origins=create_origins_array(custom_role),
            cache_preset=CachePreset.LONG,
            cors_preset=CORSPreset.API,
            immutable=True,
            redirect_code=301,
            redirect_location="/new-home",
            custom_cache="max-age=60",
            custom_cors="https://example.org",
        )
        assert header.cors.methods == 10
        assert header.cors.origins == create_origins_array(custom_role)
        assert header.cache == CacheControl(immutable_flag=True, preset=CachePreset.LONG, custom="max-age=60")
        assert header.cors.preset is CORSPreset.API
        assert header.cors.custom == "https://example.org"
        assert (header.redirect.code, header.redirect.location) == (301, "/new-home")

    def test_camel_case_options(self):
        header = create_custom_header({"cachePreset": 6, "corsPreset": 1, "redirectCode": 308, "redirectLocation": "/x"})
        assert header.cache.preset is CachePreset.PERMANENT
        assert header.cors.preset is CORSPreset.PUBLIC
        assert header.redirect.code == 308
        assert header.redirect.location == "/x"

    def test_keywords_override_mapping(self):
        header = create_custom_header({"immutable": False}, immutable=True)
        assert header.cache.immutable_flag is True

    def test_short_origins_broadcast_first_role(self, custom_role):
        header = create_custom_header(origins=[custom_role, PUBLIC_ROLE])
        assert header.cors.origins == create_origins_array(custom_role)

    def test_empty_origins_become_public(self):
        header = create_custom_header(origins=[])
        assert header.cors.origins == create_origins_array(PUBLIC_ROLE)

    def test_hex_origins(self, custom_role):
        header = create_custom_header(origins=[role_to_hex(custom_role)])
        assert header.cors.origins == create_origins_array(custom_role)

    def test_malformed_roles_are_blacklisted(self):
        header = create_custom_header(origins=["0xnothex"] * 9)
        assert header.cors.origins == create_origins_array(BLACKLIST_ROLE)

    def test_method_names_and_bad_methods(self):
        header = create_custom_header(methods=["get", "PUT", 42, None])
        assert header.cors.methods == methods_to_bitmask([Method.GET, Method.PUT])

    def test_empty_methods(self):
        assert create_custom_header(methods=[]).cors.methods == 0

    def test_unusable_values_fall_back(self):
        header = create_custom_header(
            cache_preset=99, cors_preset="open", redirect_code=70000, origins=42, methods=7, colour="blue"
        )
        assert header.cache.preset is CachePreset.DEFAULT
        assert header.cors.preset is CORSPreset.MIXED_ACCESS
        assert header.redirect.code == 0
        assert header.cors.origins == ORIGINS_READ_PUBLIC_WRITE_ADMIN
        assert header.cors.methods == READ_ONLY_METHODS_BITMASK
