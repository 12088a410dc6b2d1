"""Tests for deriving enum types from existing ones."""

import pytest

from enu.core.errors import DuplicateNameError, DuplicateValueError, ReservedNameError
from enu.core.registry import EnumType, define_enum


@pytest.fixture
def base() -> EnumType:
    return define_enum("Base", ["draft", "published"])


class TestDerive:
    def test_child_starts_with_parent_options(self, base: EnumType) -> None:
        child = base.derive("Child")
        assert dict(child.options()) == {"draft": 0, "published": 1}
        assert child.parent is base

    def test_child_inherits_accessors(self, base: EnumType) -> None:
        child = base.derive("Child")
        assert child.published == "published"
        assert child.published_value == 1

    def test_child_continues_auto_increment(self, post_status: EnumType) -> None:
        child = post_status.derive("Archived")
        child.add_option("archived")
        assert child.archived_value == 12

    def test_child_options_are_superset(self, base: EnumType) -> None:
        child = define_enum("Child", ["archived"], extends=base)
        parent_items = set(base.options().items())
        assert parent_items <= set(child.options().items())

    def test_parent_unaffected_by_child(self, base: EnumType) -> None:
        child = base.derive("Child")
        child.add_option("archived")
        assert base.keys() == ("draft", "published")
        assert not hasattr(base, "archived")

    def test_child_unaffected_by_later_parent_options(self, base: EnumType) -> None:
        child = base.derive("Child")
        base.add_option("deleted")
        assert child.keys() == ("draft", "published")
        assert not hasattr(child, "deleted")

    def test_parent_and_child_may_add_same_name_independently(self, base: EnumType) -> None:
        child = base.derive("Child")
        base.add_option("archived")
        child.add_option("archived", 50)
        assert base.archived_value == 2
        assert child.archived_value == 50

    def test_inherited_name_is_duplicate(self, base: EnumType) -> None:
        child = base.derive("Child")
        with pytest.raises(DuplicateNameError):
            child.add_option("draft")

    def test_inherited_value_is_duplicate(self, base: EnumType) -> None:
        child = base.derive("Child")
        with pytest.raises(DuplicateValueError):
            child.add_option("archived", 0)

    def test_inherited_value_accessor_is_reserved(self, base: EnumType) -> None:
        child = base.derive("Child")
        with pytest.raises(ReservedNameError):
            child.add_option("draft_value")

    def test_default_is_inherited(self, base: EnumType) -> None:
        child = define_enum("Child", ["archived"], extends=base)
        assert child.default() == "draft"

    def test_multi_level_derivation(self, base: EnumType) -> None:
        child = define_enum("Child", ["archived"], extends=base)
        grandchild = define_enum("Grandchild", ["purged"], extends=child)
        assert dict(grandchild.options()) == {
            "draft": 0,
            "published": 1,
            "archived": 2,
            "purged": 3,
        }
        assert grandchild.parent is child
        assert grandchild.to_spec().parent == "Child"

    def test_derive_from_empty(self) -> None:
        child = EnumType("Empty").derive("Child")
        child.add_option("first")
        assert child.first_value == 0

    def test_derived_title(self, base: EnumType) -> None:
        child = base.derive("Child", title="Child Status")
        assert child.title == "Child Status"
        assert base.title is None
