import pytest
import semver

from bbimager.updater import UpdateError, check_update, latest_version, parse_release_name

URL = "https://api.example.com/releases/latest"


def _fetcher(payload, calls=None):
    def fetch(url):
        if calls is not None:
            calls.append(url)
        return payload

    return fetch


def test_parse_release_name():
    assert parse_release_name("v1.2.3") == semver.Version(1, 2, 3)


@pytest.mark.parametrize("name", ["1.2.3", "vabc", "v1.2", ""])
def test_parse_release_name_rejects(name):
    with pytest.raises(UpdateError):
        parse_release_name(name)


def test_update_error_is_os_error():
    with pytest.raises(OSError):
        parse_release_name("release")


def test_latest_version_uses_url():
    calls = []
    assert latest_version(_fetcher({"name": "v0.0.16"}, calls), URL) == semver.Version(0, 0, 16)
    assert calls == [URL]


@pytest.mark.parametrize("payload", [{}, {"name": 3}, ["v1.0.0"]])
def test_latest_version_bad_payload(payload):
    with pytest.raises(UpdateError):
        latest_version(_fetcher(payload), URL)


def test_check_update_newer():
    result = check_update(_fetcher({"name": "v0.0.17"}), URL, "0.0.16")
    assert result == semver.Version.parse("0.0.17")


@pytest.mark.parametrize("current", ["0.0.16", "0.1.0", semver.Version(0, 0, 16)])
def test_check_update_not_newer(current):
    assert check_update(_fetcher({"name": "v0.0.16"}), URL, current) is None


def test_fetch_errors_propagate():
    def fetch(url):
        raise ConnectionError("offline")

    with pytest.raises(ConnectionError):
        check_update(fetch, URL, "0.0.16")