from urllib.parse import unquote

import pytest

from navigator_handoff.errors import EncodingError
from navigator_handoff.manager.base import (
    Callback,
    Location,
    LocationType,
    NavigatorStop,
    StopType,
    encode_query_argument,
)


def test_spaces_and_ampersand_are_escaped():
    assert encode_query_argument("A & B") == "A%20%26%20B"


def test_query_safe_characters_pass_through():
    assert encode_query_argument("myapp://done?x=1") == "myapp://done?x=1"
    assert encode_query_argument("a-b_c.d~e") == "a-b_c.d~e"


def test_reserved_fragment_and_percent_are_escaped():
    assert encode_query_argument("#1 100%") == "%231%20100%25"


@pytest.mark.parametrize(
    "text",
    ["Home", "1 Main St, Springfield", "Café & Bar", "東京駅", "tab\there", "50% off #2", ""],
)
def test_unquote_recovers_original_text(text):
    encoded = encode_query_argument(text)
    assert "&" not in encoded
    assert unquote(encoded) == text


def test_lone_surrogate_raises_encoding_error():
    with pytest.raises(EncodingError) as exc:
        encode_query_argument("bad \ud800 text")
    assert exc.value.offending_text == "bad \ud800 text"


def test_non_text_raises_encoding_error():
    with pytest.raises(EncodingError):
        encode_query_argument(b"bytes")


def test_coordinate_query_argument_uses_lat_then_lon():
    assert Location.wgs84(34.0, -118.0).query_argument() == "34.0,-118.0"
    assert Location.wgs84(45.123456789, -77).query_argument() == "45.123456789,-77.0"


def test_address_query_argument_is_encoded():
    assert Location.address("1 Main St").query_argument() == "1%20Main%20St"


def test_address_query_argument_propagates_failure():
    with pytest.raises(EncodingError):
        Location.address("\udfff").query_argument()


def test_location_rejects_mismatched_payload():
    with pytest.raises(ValueError):
        Location(LocationType.WGS84, text="1 Main St")
    with pytest.raises(ValueError):
        Location(LocationType.ADDRESS, latitude=1.0, longitude=2.0)


def test_stop_without_name_has_no_name_parameter(main_street):
    stop = NavigatorStop(main_street, stop_type=StopType.STOP)
    assert stop.encode_stop() == "&stop=1%20Main%20St"


def test_start_with_name(home):
    stop = NavigatorStop(home, name="Home", stop_type=StopType.START)
    assert stop.encode_stop() == "&start=34.0,-118.0&startname=Home"


def test_empty_name_is_still_emitted(home):
    stop = NavigatorStop(home, name="", stop_type=StopType.STOP)
    assert stop.encode_stop() == "&stop=34.0,-118.0&stopname="


def test_stop_name_failure_fails_whole_stop(home):
    stop = NavigatorStop(home, name="\ud800", stop_type=StopType.STOP)
    with pytest.raises(EncodingError) as exc:
        stop.encode_stop()
    assert exc.value.offending_text == "\ud800"


def test_callback_with_and_without_prompt():
    assert Callback("myapp://").encoded_argument_string() == "&callback=myapp://"
    assert (
        Callback("myapp://", "Back to app?").encoded_argument_string()
        == "&callback=myapp://&callbackprompt=Back%20to%20app?"
    )


def test_callback_prompt_failure_fails_whole_callback():
    with pytest.raises(EncodingError) as exc:
        Callback("myapp://", "\ud800").encoded_argument_string()
    assert exc.value.offending_text == "\ud800"


def test_unencodable_name_reported_before_unencodable_address():
    stop = NavigatorStop(Location.address("addr \ud800"), name="name \udfff", stop_type=StopType.STOP)
    with pytest.raises(EncodingError) as exc:
        stop.encode_stop()
    assert exc.value.offending_text == "name \udfff"


def test_callback_scheme_failure_fails_whole_callback():
    with pytest.raises(EncodingError) as exc:
        Callback("bad\ud800", "ok").encoded_argument_string()
    assert exc.value.offending_text == "bad\ud800"
