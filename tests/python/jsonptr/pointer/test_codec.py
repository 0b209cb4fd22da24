import pytest

from jsonptr.pointer.codec import escape, from_uri_fragment, join_tokens, split_pointer, to_uri_fragment, unescape
from jsonptr.pointer.errors import JSONPointerSyntaxError


@pytest.mark.parametrize("token", ["", "abc", "a b", "0", "-", "%", "ěščř", "a.b_c-d"])
def test_escape_safe_token_unchanged(token: str):
    assert escape(token) is token


@pytest.mark.parametrize(
    "token,escaped",
    [
        ("a/b", "a~1b"),
        ("a/~b", "a~1~0b"),
        ("ab~", "ab~0"),
        ("~1", "~01"),
        ("//", "~1~1"),
    ],
)
def test_escape(token: str, escaped: str):
    assert escape(token) == escaped
    assert unescape(escaped) == token


@pytest.mark.parametrize("segment", ["~", "a~", "~2", "a~b", "~~0", "~/"])
def test_unescape_invalid(segment: str):
    with pytest.raises(JSONPointerSyntaxError) as error:
        unescape(segment)
    assert error.value.source == segment
    assert error.value.pointer is None


def test_unescape_single_pass():
    # '~01' is '~' followed by '1', not '/'
    assert unescape("~01") == "~1"
    assert unescape("~10") == "/0"


@pytest.mark.parametrize(
    "pointer,tokens",
    [
        ("", ()),
        ("/", ("",)),
        ("//", ("", "")),
        ("/foo", ("foo",)),
        ("/foo/0", ("foo", "0")),
        ("/a~1b", ("a/b",)),
        ("/m~0n", ("m~n",)),
        ("/ ", (" ",)),
    ],
)
def test_split_and_join(pointer: str, tokens: tuple):
    assert split_pointer(pointer) == tokens
    assert join_tokens(tokens) == pointer


@pytest.mark.parametrize("pointer", ["foo", "#/foo", " /foo", "/a~2"])
def test_split_invalid(pointer: str):
    with pytest.raises(JSONPointerSyntaxError):
        split_pointer(pointer)


def test_join_partial():
    assert join_tokens(("a", "b/c", "d"), 2) == "/a/b~1c"
    assert join_tokens(("a", "b"), 0) == ""


@pytest.mark.parametrize(
    "tokens,fragment",
    [
        ((), ""),
        (("foo",), "/foo"),
        (("foo", "0"), "/foo/0"),
        (("",), "/"),
        (("a/b",), "/a~1b"),
        (("c%d",), "/c%25d"),
        (("e^f",), "/e%5Ef"),
        (("g|h",), "/g%7Ch"),
        (("i\\j",), "/i%5Cj"),
        (('k"l',), "/k%22l"),
        ((" ",), "/%20"),
        (("m~n",), "/m~0n"),
        (("o*p",), "/o%2Ap"),
        (("q+r",), "/q%2Br"),
        (("é",), "/%C3%A9"),
    ],
)
def test_uri_fragment(tokens: tuple, fragment: str):
    assert to_uri_fragment(tokens) == fragment
    assert from_uri_fragment(fragment) == tokens


def test_uri_fragment_leading_hash():
    assert from_uri_fragment("#/foo/%20") == ("foo", " ")
    assert from_uri_fragment("#") == ()


@pytest.mark.parametrize("fragment", ["/%", "/%2", "/%zz", "/a%C3", "/%FF", "foo"])
def test_uri_fragment_invalid(fragment: str):
    with pytest.raises(JSONPointerSyntaxError):
        from_uri_fragment(fragment)


def test_uri_fragment_invalid_utf8_cause():
    with pytest.raises(JSONPointerSyntaxError) as error:
        from_uri_fragment("/%FF")
    assert isinstance(error.value.cause, UnicodeDecodeError)
