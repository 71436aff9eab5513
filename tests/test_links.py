"""Tests pour la construction des liens signés."""

import re

import pytest

from smite_client.auth import make_signature
from smite_client.links import LinkBuilder, build_method_link, build_session_link

BASE = "http://api.smitegame.com/smiteapi.svc"


class TestSessionLink:
    """Tests pour build_session_link."""

    def test_template(self, credentials):
        link = build_session_link(credentials)

        match = re.match(
            rf"^{re.escape(BASE)}/createsessionjson/1234/([0-9a-f]{{32}})/(\d{{14}})$",
            link,
        )
        assert match is not None

    def test_signature_matches_embedded_timestamp(self, credentials, frozen_clock):
        frozen_clock("20230101120030")
        link = build_session_link(credentials)

        expected = make_signature("1234", "createsession", credentials.auth_token, "20230101120030")
        assert link == f"{BASE}/createsessionjson/1234/{expected}/20230101120030"

    def test_custom_base_url_trailing_slash(self, credentials):
        link = build_session_link(credentials, base_url="http://example.test/api/")
        assert link.startswith("http://example.test/api/createsessionjson/1234/")


class TestMethodLink:
    """Tests pour build_method_link."""

    def test_getgods_example(self, credentials, frozen_clock):
        frozen_clock("20230101120030")
        link = build_method_link("getgods", credentials, "SESSIONID", "20230101000000")

        signature = make_signature("1234", "getgods", credentials.auth_token, "20230101120030")
        assert link == f"{BASE}/getgodsjson/1234/{signature}/SESSIONID/20230101000000"

    def test_query_timestamp_is_independent_of_signature_time(self, credentials, frozen_clock):
        frozen_clock("20230101120030")
        link = build_method_link("getgods", credentials, "SESSIONID", "20200101000000")

        assert link.endswith("/SESSIONID/20200101000000")
        assert "20230101120030" not in link

    def test_fresh_signature_per_call(self, credentials, frozen_clock):
        builder = LinkBuilder(credentials)
        frozen_clock("20230101120030")
        first = builder.build_method_link("getgods", "SESSIONID", "20230101000000")
        frozen_clock("20230101120031")
        second = builder.build_method_link("getgods", "SESSIONID", "20230101000000")

        assert first != second

    def test_method_name_is_not_validated(self, credentials):
        link = LinkBuilder(credentials).build_method_link("notamethod", "S", "20230101000000")
        assert "/notamethodjson/1234/" in link

    @pytest.mark.parametrize("method", ["getplayer", "getmatchdetails", "getitems"])
    def test_method_segment(self, credentials, method):
        link = build_method_link(method, credentials, "S", "20230101000000")
        assert link.startswith(f"{BASE}/{method}json/1234/")
