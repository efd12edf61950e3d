import io

import pytest
import requests
import responses

from codekata.linkcheck import (
    check_link,
    check_links,
    check_links_sequential,
    dump_response,
    main,
    watch_links,
)

UP = "https://example.com/up"
ALSO_UP = "https://example.com/also-up"
DOWN = "https://example.com/down"


def test_check_link_up(capsys):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, UP, body="ok")
        assert check_link(UP) is True
    assert f"Link {UP} is OK" in capsys.readouterr().out


def test_check_link_server_error_still_counts_as_up():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, UP, status=500)
        assert check_link(UP, requests.Session()) is True


def test_check_link_connection_error(capsys):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, DOWN, body=requests.ConnectionError("refused"))
        assert check_link(DOWN) is False
    assert f"Link {DOWN} might be down!" in capsys.readouterr().out


def test_check_link_invalid_url_is_down():
    with responses.RequestsMock(assert_all_requests_are_fired=False):
        assert check_link("aaa") is False


def test_check_links_sequential_keeps_order():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, UP)
        rsps.add(responses.GET, DOWN, body=requests.ConnectionError("refused"))
        result = check_links_sequential([DOWN, "aaa", UP])
    assert list(result.items()) == [(DOWN, False), ("aaa", False), (UP, True)]


def test_check_links_concurrent():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, UP)
        rsps.add(responses.GET, ALSO_UP)
        rsps.add(responses.GET, DOWN, body=requests.ConnectionError("refused"))
        result = check_links([UP, ALSO_UP, DOWN, "aaa"], requests.Session())
    assert result == {UP: True, ALSO_UP: True, DOWN: False, "aaa": False}


def test_check_links_empty():
    assert check_links([]) == {}


def test_watch_links_repeats_until_limit():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, UP)
        rsps.add(responses.GET, DOWN, body=requests.ConnectionError("refused"))
        seen = list(watch_links([UP, DOWN], interval=0, max_checks=5))
        calls = len(rsps.calls)
    assert len(seen) == 5
    assert calls == 5
    assert {link for link, _ in seen} == {UP, DOWN}
    assert all(up == (link == UP) for link, up in seen)


def test_watch_links_limit_below_link_count():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        rsps.add(responses.GET, UP)
        rsps.add(responses.GET, ALSO_UP)
        seen = list(watch_links([UP, ALSO_UP], interval=0, max_checks=1))
        calls = len(rsps.calls)
    assert seen == [(UP, True)]
    assert calls == 1


def test_watch_links_zero_checks():
    assert list(watch_links([UP], max_checks=0)) == []


def test_watch_links_rejects_negative_interval():
    with pytest.raises(ValueError):
        list(watch_links([UP], interval=-1, max_checks=1))


def test_dump_response_writes_body_and_counts():
    body = b"hello world"
    out = io.StringIO()
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, UP, body=body)
        written = dump_response(UP, out)
    assert written == len(body)
    text = out.getvalue()
    assert "hello world" in text
    assert f"Just wrote this many bytes: {len(body)}" in text


def test_dump_response_raises_on_failure():
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, DOWN, body=requests.ConnectionError("refused"))
        with pytest.raises(requests.ConnectionError):
            dump_response(DOWN, io.StringIO())


def test_main_dump_failure_returns_one(capsys):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, DOWN, body=requests.ConnectionError("refused"))
        assert main(["dump", DOWN]) == 1
    assert "Error:" in capsys.readouterr().out


def test_main_concurrent_prints_statuses(capsys):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, UP)
        assert main(["concurrent", UP, "aaa"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sorted(line for line in lines if line in ("up", "down")) == ["down", "up"]


def test_main_sequential(capsys):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, UP)
        assert main(["sequential", UP]) == 0
    assert capsys.readouterr().out.strip() == f"Link {UP} is OK"