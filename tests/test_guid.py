import pytest

from kbase.guid import generate_guid, is_guid_valid


def test_generated_guid_is_valid_in_strict_mode():
    for _ in range(50):
        guid = generate_guid()
        assert len(guid) == 36
        assert is_guid_valid(guid, True)


def test_generated_guid_version_and_variant():
    for _ in range(50):
        guid = generate_guid()
        assert guid[14] == "4"
        assert guid[19] in "89ab"
        assert [i for i, ch in enumerate(guid) if ch == "-"] == [8, 13, 18, 23]


def test_generated_guids_differ():
    guids = {generate_guid() for _ in range(100)}
    assert len(guids) == 100


def test_uppercase_only_valid_when_not_strict():
    guid = "6B29FC40-CA47-1067-B31D-00DC010E7238"
    assert is_guid_valid(guid) is True
    assert is_guid_valid(guid, True) is False
    assert is_guid_valid(guid.lower(), True) is True


@pytest.mark.parametrize("guid", [
    "",
    "6b29fc40-ca47-1067-b31d-00dc010e723",
    "6b29fc40-ca47-1067-b31d-00dc010e72388",
    "6b29fc40ca47-1067-b31d-00dc010e7238-",
    "6b29fc40-ca47-1067-b31d-00dc010e723g",
    "6b29fc40-ca47-1067-b31d 00dc010e7238",
])
def test_invalid_guids(guid):
    assert is_guid_valid(guid) is False


def test_dashes_are_optional_at_their_positions():
    assert is_guid_valid("a" * 36, True) is True