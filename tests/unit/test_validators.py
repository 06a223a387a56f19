import pytest

from utils.error_handling import ValidationError
from utils.validators import parse_limit, split_image_payload


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("data:image/png;base64,AAAA", ("image/png", "AAAA")),
        ("data:image/jpeg;base64,BBBB", ("image/jpeg", "BBBB")),
        ("data:image/jpg;base64,CCCC", ("image/jpeg", "CCCC")),
        ("data:image/webp;base64,DDDD", ("image/webp", "DDDD")),
        ("EEEE", ("image/png", "EEEE")),
    ],
)
def test_split_image_payload(raw, expected):
    assert split_image_payload(raw) == expected


def test_unknown_prefix_is_left_alone():
    media_type, data = split_image_payload("data:image/gif;base64,R0lG")
    assert media_type == "image/png"
    assert data == "data:image/gif;base64,R0lG"


def test_parse_limit():
    assert parse_limit(None, 12) == 12
    assert parse_limit("5", 12) == 5
    assert parse_limit("0", 12) == 1
    assert parse_limit("500", 12) == 100
    with pytest.raises(ValidationError):
        parse_limit("many", 12)
