# tests/test_accessors.py
"""Tests for generated accessors and the user-defined method escape hatch."""

import pytest

from tinyclass import TinyObject, declare, get_all_attributes_for, new
from tinyclass.core import AccessorFactory, fields_of, make_accessor

pytestmark = pytest.mark.tier1


def test_getter_setter_round_trip(registry):
    declare("Point", attributes=["x", "y"], registry=registry)
    point = new("Point", registry, x=1)

    assert point.x() == 1
    assert point.y() is None
    assert point.y(5) == 5
    assert point.y() == 5
    assert fields_of(point) == {"x": 1, "y": 5}


def test_setter_performs_no_coercion(registry):
    declare("Box", attributes=["content"], registry=registry)
    box = new("Box", registry)
    payload = ["anything", {"goes": True}]

    assert box.content(payload) is payload
    assert box.content() is payload


def test_accessor_rejects_extra_arguments(registry):
    declare("Point", attributes=["x"], registry=registry)
    point = new("Point", registry)

    with pytest.raises(TypeError):
        point.x(1, 2)


def test_make_accessor_is_named_after_attribute():
    accessor = make_accessor("colour")

    assert accessor.__name__ == "colour"
    assert "colour" in accessor.__doc__


def test_user_method_is_not_overwritten(registry):
    def name(self, *value):
        return "custom"

    declare("Named", attributes=["name"], methods={"name": name}, registry=registry)
    named = new("Named", registry, name="ignored")

    assert named.name() == "custom"
    assert fields_of(named)["name"] == "ignored"
    assert "name" in registry.all_attributes_for("Named")


def test_install_accessors_reports_what_it_installed(registry):
    registry.declare("Thing", attributes=["a", "b"], methods={"b": lambda self: "mine"})
    factory = AccessorFactory(registry)

    assert factory.install_accessors("Thing", ["a", "b"]) == ["a"]
    # already installed: nothing left to generate
    assert factory.install_accessors("Thing", ["a", "b"]) == []


def test_python_class_keeps_its_own_method():
    class Account(TinyObject, attributes=("owner", "balance")):
        def balance(self):
            return 100

    account = Account(owner="Ada", balance=5)

    assert account.balance() == 100
    assert account.owner() == "Ada"
    assert "balance" in get_all_attributes_for(Account)


def test_property_counts_as_user_defined():
    class Temperature(TinyObject, attributes=("celsius",)):
        @property
        def celsius(self):
            return 21

    assert Temperature().celsius == 21


def test_inherited_method_is_replaced_by_accessor():
    """Only the class's own namespace protects a name."""

    class Base(TinyObject):
        def label(self):
            return "base"

    class Labelled(Base, attributes=("label",)):
        pass

    assert Labelled(label="mine").label() == "mine"
    assert Base().label() == "base"


def test_stored_value_never_shadows_accessor():
    class Pet(TinyObject, attributes=("name",)):
        pass

    pet = Pet(name="Rex")

    assert callable(pet.name)
    assert pet.name() == "Rex"
    assert "name" not in vars(pet)
