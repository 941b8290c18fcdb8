"""Unit tests for Link-header pagination (parse_rel, iter_pages, load_all)."""

from unittest.mock import Mock

import pytest
import requests

from conftest import make_response
from ghfetch.adapters.base import GitHubError
from ghfetch.adapters.pagination import iter_pages, load_all, parse_rel
from ghfetch.adapters.transport import Transport
from ghfetch.models import Team

BASE = "https://api.github.com/orgs/acme/teams"


def _team(n: int) -> dict:
    return {"id": n, "name": f"team-{n}", "slug": f"team-{n}", "url": f"https://api.github.com/teams/{n}"}


def _link(next_url: str | None = None, prev_url: str | None = None) -> str:
    parts = []
    if prev_url:
        parts.append(f'<{prev_url}>; rel="prev"')
    if next_url:
        parts.append(f'<{next_url}>; rel="next"')
    parts.append(f'<{BASE}?page=9>; rel="last"')
    return ", ".join(parts)


@pytest.fixture
def session() -> Mock:
    return Mock(spec=requests.Session)


@pytest.fixture
def transport(session: Mock) -> Transport:
    return Transport(session=session)


class TestParseRel:
    """parse_rel extracts one relation from a Link header."""

    def test_next_after_prev(self) -> None:
        link = '<https://x/?page=1>; rel="prev", <https://x/?page=3>; rel="next"'
        assert parse_rel(link, "next") == "https://x/?page=3"

    def test_next_before_prev(self) -> None:
        link = '<https://x/?page=3>; rel="next", <https://x/?page=1>; rel="prev"'
        assert parse_rel(link, "next") == "https://x/?page=3"

    def test_other_relation(self) -> None:
        link = '<https://x/?page=3>; rel="next", <https://x/?page=7>; rel="last"'
        assert parse_rel(link, "last") == "https://x/?page=7"

    def test_empty_header(self) -> None:
        assert parse_rel("", "next") == ""

    def test_no_next_entry(self) -> None:
        link = '<https://x/?page=1>; rel="first", <https://x/?page=1>; rel="prev"'
        assert parse_rel(link) == ""

    def test_url_with_query_string(self) -> None:
        link = '<https://api.github.com/repos/o/r/issues?state=all&page=2>; rel="next"'
        assert parse_rel(link) == "https://api.github.com/repos/o/r/issues?state=all&page=2"


class TestLoadAll:
    """load_all concatenates pages in order and stops on first failure."""

    def test_single_page_without_next(self, transport: Transport, session: Mock) -> None:
        """Without rel="next" exactly one request is made."""
        session.request.return_value = make_response(json_data=[_team(1), _team(2)])

        teams = load_all(transport, BASE, Team)

        assert [t.id for t in teams] == [1, 2]
        assert all(isinstance(t, Team) for t in teams)
        session.request.assert_called_once()

    def test_empty_collection(self, transport: Transport, session: Mock) -> None:
        session.request.return_value = make_response(json_data=[])

        teams = load_all(transport, BASE, Team)

        assert teams == []

    def test_three_pages_concatenated_in_order(self, transport: Transport, session: Mock) -> None:
        session.request.side_effect = [
            make_response(json_data=[_team(1), _team(2)], link=_link(f"{BASE}?page=2")),
            make_response(json_data=[_team(3)], link=_link(f"{BASE}?page=3", f"{BASE}?page=1")),
            make_response(json_data=[_team(4), _team(5)], link=_link(prev_url=f"{BASE}?page=2")),
        ]

        teams = load_all(transport, BASE, Team)

        assert [t.id for t in teams] == [1, 2, 3, 4, 5]
        urls = [c.args[1] for c in session.request.call_args_list]
        assert urls == [BASE, f"{BASE}?page=2", f"{BASE}?page=3"]

    def test_empty_middle_page_is_followed(self, transport: Transport, session: Mock) -> None:
        session.request.side_effect = [
            make_response(json_data=[_team(1)], link=_link(f"{BASE}?page=2")),
            make_response(json_data=[], link=_link(f"{BASE}?page=3")),
            make_response(json_data=[_team(2)]),
        ]

        teams = load_all(transport, BASE, Team)

        assert [t.id for t in teams] == [1, 2]

    def test_404_on_second_of_three_pages(self, transport: Transport, session: Mock) -> None:
        """A failing page stops the fetch; partial holds page 1 only."""
        session.request.side_effect = [
            make_response(json_data=[_team(1), _team(2)], link=_link(f"{BASE}?page=2")),
            make_response(status=404, reason="Not Found", body=b'{"message": "Not Found"}'),
            make_response(json_data=[_team(3)]),
        ]

        with pytest.raises(GitHubError) as exc_info:
            load_all(transport, BASE, Team)

        err = exc_info.value
        assert err.status_code == 404
        assert "404" in str(err)
        assert [t.id for t in err.partial] == [1, 2]
        assert session.request.call_count == 2

    def test_malformed_json_leaves_accumulator_unchanged(self, transport: Transport, session: Mock) -> None:
        bad = make_response(
            json_error=requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0),
            link=_link(f"{BASE}?page=3"),
        )
        session.request.side_effect = [
            make_response(json_data=[_team(1)], link=_link(f"{BASE}?page=2")),
            bad,
        ]

        with pytest.raises(GitHubError) as exc_info:
            load_all(transport, BASE, Team)

        assert "decode" in str(exc_info.value)
        assert exc_info.value.status_code is None
        assert [t.id for t in exc_info.value.partial] == [1]
        bad.close.assert_called_once()
        assert session.request.call_count == 2

    def test_shape_mismatch_is_decode_error(self, transport: Transport, session: Mock) -> None:
        """A JSON object where a list of teams is expected fails decoding."""
        session.request.return_value = make_response(json_data={"message": "not a list"})

        with pytest.raises(GitHubError) as exc_info:
            load_all(transport, BASE, Team)

        assert "decode" in str(exc_info.value)
        assert exc_info.value.partial == []

    def test_network_error_on_first_page(self, transport: Transport, session: Mock) -> None:
        session.request.side_effect = requests.ConnectionError("Name or service not known")

        with pytest.raises(GitHubError) as exc_info:
            load_all(transport, BASE, Team)

        assert "Name or service not known" in str(exc_info.value)
        assert exc_info.value.partial == []
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    def test_max_pages_stops_early(self, transport: Transport, session: Mock) -> None:
        session.request.side_effect = [
            make_response(json_data=[_team(1)], link=_link(f"{BASE}?page=2")),
            make_response(json_data=[_team(2)], link=_link(f"{BASE}?page=3")),
            make_response(json_data=[_team(3)]),
        ]

        teams = load_all(transport, BASE, Team, max_pages=2)

        assert [t.id for t in teams] == [1, 2]
        assert session.request.call_count == 2

    def test_every_page_is_closed(self, transport: Transport, session: Mock) -> None:
        pages = [
            make_response(json_data=[_team(1)], link=_link(f"{BASE}?page=2")),
            make_response(json_data=[_team(2)]),
        ]
        session.request.side_effect = pages

        load_all(transport, BASE, Team)

        for page in pages:
            page.close.assert_called_once()


class TestIterPages:
    """iter_pages fetches lazily, one page per step."""

    def test_pages_fetched_on_demand(self, transport: Transport, session: Mock) -> None:
        session.request.side_effect = [
            make_response(json_data=[_team(1)], link=_link(f"{BASE}?page=2")),
            make_response(json_data=[_team(2)]),
        ]

        pages = iter_pages(transport, BASE, Team)
        first = next(pages)

        assert [t.id for t in first] == [1]
        assert session.request.call_count == 1
        assert [[t.id for t in p] for p in pages] == [[2]]
        assert session.request.call_count == 2
