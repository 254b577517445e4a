import pytest

from core import (
    DuplicateTagError,
    FieldValidationError,
    InvalidTagIndexError,
    NoTagPresentError,
    TagEdit,
    resolve_tags,
)


def test_no_instruction_passes_tags_through():
    tags = ["friend", "manager"]
    assert resolve_tags(tags, None) == tags
    assert TagEdit.none().apply(tags) == tags
    assert TagEdit.none().is_none


@pytest.mark.parametrize("tags", [[], ["a"], ["a", "b", "c"]])
def test_clear_sentinel_always_yields_empty_list(tags):
    edit = TagEdit.from_index(-1)
    assert edit.kind == "clear"
    assert edit.apply(tags) == []


def test_set_at_replaces_only_target_position():
    tags = ["alpha", "beta", "gamma"]
    assert TagEdit.set_at(2, "delta").apply(tags) == ["alpha", "delta", "gamma"]
    assert TagEdit.set_at(1, "delta").apply(tags) == ["delta", "beta", "gamma"]
    assert TagEdit.set_at(3, "delta").apply(tags) == ["alpha", "beta", "delta"]
    # input list is untouched
    assert tags == ["alpha", "beta", "gamma"]


@pytest.mark.parametrize("index", [4, 5, 100])
def test_index_past_end_is_invalid(index):
    with pytest.raises(InvalidTagIndexError):
        TagEdit.set_at(index, "x").apply(["a", "b", "c"])


def test_index_zero_on_nonempty_list_is_invalid():
    with pytest.raises(InvalidTagIndexError):
        TagEdit.set_at(0, "x").apply(["a"])


def test_index_zero_on_empty_list_reports_no_tag():
    with pytest.raises(NoTagPresentError):
        TagEdit.set_at(0, "x").apply([])


def test_index_one_on_empty_list_is_out_of_range():
    with pytest.raises(InvalidTagIndexError):
        TagEdit.set_at(1, "friend").apply([])


def test_negative_index_other_than_clear_is_invalid():
    with pytest.raises(InvalidTagIndexError):
        TagEdit.set_at(-2, "x").apply(["a", "b"])


@pytest.mark.parametrize("index", [1, 2])
def test_duplicate_tag_rejected_and_list_unchanged(index):
    tags = ["friend", "colleague"]
    with pytest.raises(DuplicateTagError):
        TagEdit.set_at(index, "colleague").apply(tags)
    assert tags == ["friend", "colleague"]


def test_replacing_tag_with_itself_is_duplicate():
    with pytest.raises(DuplicateTagError):
        TagEdit.set_at(1, "friend").apply(["friend"])


def test_new_tag_text_is_validated():
    with pytest.raises(FieldValidationError):
        TagEdit.set_at(1, "not valid!")
    with pytest.raises(FieldValidationError):
        TagEdit.from_index(1, None)


def test_describe():
    assert TagEdit.none().describe() == "-"
    assert TagEdit.clear_all().describe() == "clear all"
    assert TagEdit.set_at(2, "x").describe() == "2 -> x"
