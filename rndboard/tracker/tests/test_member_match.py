from types import SimpleNamespace

from tracker.services.member_service import is_known_member, match_members

DIRECTORY = [SimpleNamespace(name="Ann Lee"), SimpleNamespace(name="Ben Ng")]


def names(members):
    return [m.name for m in members]


def test_substring_match_any_case():
    assert names(match_members("an", DIRECTORY)) == ["Ann Lee"]
    assert names(match_members("AN", DIRECTORY)) == ["Ann Lee"]
    assert names(match_members("e", DIRECTORY)) == ["Ann Lee", "Ben Ng"]


def test_blank_input_lists_whole_directory():
    assert names(match_members("", DIRECTORY)) == ["Ann Lee", "Ben Ng"]
    assert names(match_members("   ", DIRECTORY)) == ["Ann Lee", "Ben Ng"]


def test_no_match():
    assert match_members("zed", DIRECTORY) == []


def test_exact_name_is_valid_member_case_insensitive():
    assert is_known_member("Ann Lee", DIRECTORY)
    assert is_known_member("ann lee", DIRECTORY)
    assert not is_known_member("Ann", DIRECTORY)
    assert not is_known_member("", DIRECTORY)


def test_empty_name_only_valid_when_member_has_empty_name():
    assert is_known_member("", DIRECTORY + [SimpleNamespace(name="")])
