"""Request body decoding tests."""

from submissions.payload import parse_payload


def test_json_object():
    assert parse_payload(b'{"type": "contact", "name": "Eve"}') == {"type": "contact", "name": "Eve"}


def test_form_encoded_fallback():
    assert parse_payload(b"type=signup&email=a%40b.com&password=p%26w") == {
        "type": "signup",
        "email": "a@b.com",
        "password": "p&w",
    }


def test_repeated_form_keys_become_lists():
    assert parse_payload(b"type=contact&name=a&name=b") == {"type": "contact", "name": ["a", "b"]}


def test_blank_form_values_are_kept():
    assert parse_payload(b"type=signup&username=") == {"type": "signup", "username": ""}


def test_non_object_json_is_empty():
    assert parse_payload(b"[1, 2, 3]") == {}
    assert parse_payload(b"null") == {}


def test_empty_body():
    assert parse_payload(b"") == {}
