import dataclasses

import pytest
from matrix_sdk import request
from matrix_sdk.request import Method, Request

BASE_URL = "https://matrix.org"


@pytest.mark.parametrize(
    "builder,method,path",
    [
        (request.spec_versions, Method.GET, "/_matrix/client/versions"),
        (request.server_discovery, Method.GET, "/.well-known/matrix/client"),
        (request.login, Method.GET, "/_matrix/client/r0/login"),
        (request.register_guest, Method.POST, "/_matrix/client/r0/register?kind=guest"),
        (request.room_discovery, Method.GET, "/_matrix/client/r0/publicRooms"),
    ],
)
def test_base_url_only_builders(builder, method, path):
    req = builder(BASE_URL)
    assert req.method == method
    assert req.base_url == BASE_URL
    assert req.path == path
    assert req.headers == ()
    assert req.body == {}


@pytest.mark.parametrize("base_url", ["https://matrix.org", "http://localhost:8008", ""])
def test_spec_versions_for_any_base_url(base_url):
    req = request.spec_versions(base_url)
    assert req.path == "/_matrix/client/versions"
    assert req.method == Method.GET
    assert req.body == {}
    assert req.base_url == base_url


def test_login_with_password():
    req = request.login_with_password(BASE_URL, "alice", "secret")
    assert req.method == Method.POST
    assert req.path == "/_matrix/client/r0/login"
    assert req.headers == ()
    assert req.body == {"type": "m.login.password", "user": "alice", "password": "secret"}


def test_logout_sets_bearer_header():
    req = request.logout(BASE_URL, "tok123")
    assert req.method == Method.POST
    assert req.path == "/_matrix/client/r0/logout"
    assert req.headers == (("Authorization", "Bearer tok123"),)
    assert req.body == {}


def test_register_user():
    req = request.register_user(BASE_URL, "bob", "pw")
    assert req.method == Method.POST
    assert req.path == "/_matrix/client/r0/register"
    assert req.body == {"auth": {"type": "m.login.dummy"}, "username": "bob", "password": "pw"}


def test_register_guest_has_no_body():
    req = request.register_guest(BASE_URL)
    assert req.path == "/_matrix/client/r0/register?kind=guest"
    assert req.body == {}


def test_paths_share_api_prefix():
    assert request.login(BASE_URL).path.startswith(request.MATRIX_API_PATH)
    assert request.room_discovery(BASE_URL).path.startswith(request.MATRIX_API_PATH)


ALL_BUILDERS = [
    (request.spec_versions, ()),
    (request.server_discovery, ()),
    (request.login, ()),
    (request.login_with_password, ("alice", "secret")),
    (request.logout, ("tok123",)),
    (request.register_guest, ()),
    (request.register_user, ("bob", "pw")),
    (request.room_discovery, ()),
]


@pytest.mark.parametrize("builder,args", ALL_BUILDERS)
def test_repeated_calls_are_equal_but_not_shared(builder, args):
    first = builder(BASE_URL, *args)
    second = builder(BASE_URL, *args)
    assert first == second
    assert first is not second
    assert first.body is not second.body

    first.body["extra"] = "changed"
    assert "extra" not in second.body


@pytest.mark.parametrize("builder,args", ALL_BUILDERS)
def test_descriptors_are_hashable(builder, args):
    first = builder(BASE_URL, *args)
    second = builder(BASE_URL, *args)
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
    assert {first: "cached"}[second] == "cached"


def test_hash_distinguishes_headers():
    assert len({request.logout(BASE_URL, "a"), request.logout(BASE_URL, "b")}) == 2


def test_default_body_is_fresh_per_instance():
    assert request.login(BASE_URL).body is not request.login(BASE_URL).body


def test_descriptor_is_frozen():
    req = request.login(BASE_URL)
    with pytest.raises(dataclasses.FrozenInstanceError):
        req.path = "/other"
    with pytest.raises(dataclasses.FrozenInstanceError):
        req.method = Method.POST


def test_different_arguments_differ():
    assert request.logout(BASE_URL, "a") != request.logout(BASE_URL, "b")
    assert request.login(BASE_URL) != request.login("https://example.org")


def test_method_compares_to_plain_string():
    assert Method.GET == "GET"
    assert Method.POST.value == "POST"


def test_url_concatenates_base_and_path():
    assert request.register_guest(BASE_URL).url == (
        "https://matrix.org/_matrix/client/r0/register?kind=guest"
    )
    assert request.spec_versions("").url == "/_matrix/client/versions"


def test_to_dict():
    req = request.logout(BASE_URL, "tok123")
    assert req.to_dict() == {
        "method": "POST",
        "base_url": BASE_URL,
        "path": "/_matrix/client/r0/logout",
        "headers": [["Authorization", "Bearer tok123"]],
        "body": {},
    }


def test_request_constructed_directly_uses_defaults():
    req = Request(Method.PUT, BASE_URL, "/custom")
    assert req.headers == ()
    assert req.body == {}
