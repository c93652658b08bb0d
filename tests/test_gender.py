import pytest

from unidb.gender import Gender, text_to_gender, translate_gender


@pytest.mark.parametrize(
    "text, gender",
    [("Male", Gender.MALE), ("Female", Gender.FEMALE), ("Undefined", Gender.UNDEFINED)],
)
def test_text_to_gender_known_names(text, gender):
    assert text_to_gender(text) is gender


@pytest.mark.parametrize("text", ["", "male", "FEMALE", "Other", " Male"])
def test_text_to_gender_unknown_is_undefined(text):
    assert text_to_gender(text) is Gender.UNDEFINED


@pytest.mark.parametrize("gender", list(Gender))
def test_round_trip(gender):
    assert text_to_gender(translate_gender(gender)) is gender


def test_translate_gender_values():
    assert translate_gender(Gender.MALE) == "Male"
    assert translate_gender(Gender.FEMALE) == "Female"
    assert translate_gender(Gender.UNDEFINED) == "Undefined"


def test_translate_gender_rejects_unknown_value():
    with pytest.raises(ValueError):
        translate_gender("Unknown")