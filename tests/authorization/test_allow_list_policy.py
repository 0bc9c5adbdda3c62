"""Unit tests for the allow-list policy."""

from unittest.mock import patch

import pytest

from foldertree.authorization.allow_list_policy import DEFAULT_POSIX_PREFIXES, AllowListPolicy, Platform


@pytest.fixture
def posix_policy():
    return AllowListPolicy(Platform.POSIX)


@pytest.fixture
def windows_policy():
    return AllowListPolicy(Platform.WINDOWS)


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/srv/app", True),
        ("/srv/app/src/lib", True),
        ("/tmp", True),
        ("/tmp/build", True),
        ("/home/alice/code", True),
        ("/Users/bob", True),
        ("/var/tmp/cache", True),
        ("/etc", False),
        ("/", False),
        ("/var", False),
        ("/srv", False),
        ("/srv/application", False),
        ("/tmpfoo", False),
        ("/homework", False),
    ],
)
def test_posix_policy(posix_policy, path, expected):
    assert posix_policy.allows(path, working_directory="/srv/app") is expected


def test_posix_root_working_directory_allows_everything(posix_policy):
    assert posix_policy.allows("/etc", working_directory="/")


def test_posix_custom_prefixes():
    policy = AllowListPolicy(Platform.POSIX, prefixes=["/data"])
    assert policy.allows("/data/sets", working_directory="/srv/app")
    assert not policy.allows("/tmp/x", working_directory="/srv/app")


def test_default_prefixes():
    assert DEFAULT_POSIX_PREFIXES == ("/tmp", "/home", "/Users", "/var/tmp")


@pytest.mark.parametrize(
    "path,expected",
    [
        ("C:\\", True),
        ("C:\\Users\\me", True),
        ("d:\\data", True),
        ("A:\\", True),
        ("Z:\\archive", True),
        ("\\\\server\\share\\folder", False),
        ("\\rooted\\no\\drive", False),
        ("relative\\path", False),
    ],
)
def test_windows_policy_accepts_any_drive(windows_policy, path, expected):
    assert windows_policy.allows(path, working_directory="C:\\work") is expected


def test_platform_flavour():
    import ntpath
    import posixpath

    assert Platform.POSIX.flavour is posixpath
    assert Platform.WINDOWS.flavour is ntpath


def test_platform_defaults_to_host():
    with patch("foldertree.authorization.allow_list_policy.os.name", "nt"):
        assert AllowListPolicy().platform is Platform.WINDOWS
    with patch("foldertree.authorization.allow_list_policy.os.name", "posix"):
        assert AllowListPolicy().platform is Platform.POSIX


def test_platform_accepts_string_value():
    assert AllowListPolicy("windows").platform is Platform.WINDOWS
