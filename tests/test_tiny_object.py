# tests/test_tiny_object.py
"""
Tests for TinyObject, the Python class host.

Classes are defined inside each test so every test gets fresh class objects.
"""

import gc

import pytest

import tinyclass
from tinyclass import (
    DEFAULT_REGISTRY,
    AttributeRegistry,
    ConstructorArgumentError,
    InvalidNameError,
    ObjectConstructor,
    TinyObject,
    UnknownAttributeError,
    UnknownClassError,
    get_all_attributes_for,
)

pytestmark = pytest.mark.tier1


@pytest.fixture
def employee_classes():
    class Person(TinyObject, attributes=("name",)):
        pass

    class Employee(Person, attributes=("ssn",)):
        pass

    return Person, Employee


def test_construct_with_keywords(employee_classes):
    _, Employee = employee_classes
    larry = Employee(name="Larry", ssn="111-22-3333")

    assert isinstance(larry, Employee)
    assert larry.name() == "Larry"
    assert larry.ssn() == "111-22-3333"


def test_construct_with_mapping_or_pairs(employee_classes):
    _, Employee = employee_classes

    assert Employee({"name": "Larry"}).name() == "Larry"
    assert Employee("name", "Larry", "ssn", "1").ssn() == "1"


def test_bad_constructor_arguments(employee_classes):
    _, Employee = employee_classes

    with pytest.raises(ConstructorArgumentError):
        Employee(42)
    with pytest.raises(ConstructorArgumentError):
        Employee("name", "Larry", "ssn")


def test_unknown_attributes_are_fatal(employee_classes):
    _, Employee = employee_classes

    with pytest.raises(UnknownAttributeError) as exc_info:
        Employee(name="Larry", OS="Linux")

    assert exc_info.value.attributes == ["OS"]
    assert "Invalid attributes for" in str(exc_info.value)


def test_get_all_attributes_for(employee_classes):
    Person, Employee = employee_classes

    assert get_all_attributes_for(Person) == {"name"}
    assert get_all_attributes_for(Employee) == {"name", "ssn"}
    assert tinyclass.get_all_attributes_for(Employee) == {"name", "ssn"}


def test_invalid_attribute_name_fails_class_creation():
    with pytest.raises(InvalidNameError):

        class Broken(TinyObject, attributes=("1bad",)):
            pass


def test_single_string_attribute():
    class Single(TinyObject, attributes="only"):
        pass

    assert get_all_attributes_for(Single) == {"only"}


def test_linearization_matches_python_mro():
    class A(TinyObject):
        pass

    class B(A):
        pass

    class C(A):
        pass

    class D(B, C):
        pass

    assert DEFAULT_REGISTRY.linearize(D) == D.__mro__[:-1]
    assert DEFAULT_REGISTRY.linearize(D)[-1] is TinyObject


def test_build_and_demolish_order(call_log):
    class A(TinyObject):
        def BUILD(self, args):
            call_log.append("build A")

        def DEMOLISH(self, in_global_destruction):
            call_log.append("demolish A")

    class B(A):
        def BUILD(self, args):
            call_log.append("build B")

        def DEMOLISH(self, in_global_destruction):
            call_log.append("demolish B")

    obj = B()
    obj.destroy()

    assert call_log == ["build A", "build B", "demolish B", "demolish A"]


def test_subclass_without_hooks_does_not_rerun_parent_hooks(call_log):
    class A(TinyObject):
        def BUILD(self, args):
            call_log.append("A")

    class B(A):
        pass

    B()

    assert call_log == ["A"]


def test_plain_mixin_hooks_take_part(call_log):
    class Audited:
        def BUILD(self, args):
            call_log.append("Audited")

    class Base(TinyObject):
        def BUILD(self, args):
            call_log.append("Base")

    class Record(Audited, Base):
        def BUILD(self, args):
            call_log.append("Record")

    Record()

    assert DEFAULT_REGISTRY.linearize(Record) == Record.__mro__[:-1]
    assert call_log == ["Base", "Audited", "Record"]


def test_with_block_tears_down_on_exit(call_log):
    class Resource(TinyObject, attributes=("path",)):
        def DEMOLISH(self, in_global_destruction):
            call_log.append(("closed", self.path(), in_global_destruction))

    with Resource(path="/tmp/x") as resource:
        assert resource.path() == "/tmp/x"
        assert call_log == []

    assert call_log == [("closed", "/tmp/x", False)]


def test_finalization_tears_down(call_log):
    class Temp(TinyObject):
        def DEMOLISH(self, in_global_destruction):
            call_log.append("gone")

    obj = Temp()
    del obj
    gc.collect()

    assert call_log == ["gone"]


def test_teardown_runs_once_despite_finalization(call_log):
    class Temp(TinyObject):
        def DEMOLISH(self, in_global_destruction):
            call_log.append("gone")

    obj = Temp()
    obj.destroy()
    del obj
    gc.collect()

    assert call_log == ["gone"]


def test_failed_construction_is_torn_down_once_released(call_log):
    class Base(TinyObject):
        def BUILD(self, args):
            call_log.append("acquire")

        def DEMOLISH(self, in_global_destruction):
            call_log.append("release")

    class Fragile(Base, attributes=("value",)):
        def BUILD(self, args):
            if self.value() is None:
                raise ValueError("value is required")

        def DEMOLISH(self, in_global_destruction):
            call_log.append("demolished")

    with pytest.raises(ValueError):
        Fragile()
    gc.collect()

    assert call_log == ["acquire", "demolished", "release"]
    assert Fragile(value=1).value() == 1


def test_custom_registry_is_inherited():
    registry = AttributeRegistry()

    class Isolated(TinyObject, registry=registry, attributes=("a",)):
        pass

    class Child(Isolated, attributes=("b",)):
        pass

    assert registry.is_declared(Isolated)
    assert registry.is_declared(Child)
    assert not DEFAULT_REGISTRY.is_declared(Child)
    assert get_all_attributes_for(Child) == {"a", "b"}
    assert Child(a=1, b=2).b() == 2


def test_repr_shows_fields(employee_classes):
    _, Employee = employee_classes

    assert repr(Employee(name="Larry", ssn="1")) == "Employee(name='Larry', ssn='1')"


def test_parameter_names_are_usable_as_attributes():
    class Odd(TinyObject, attributes=("cls", "self", "args", "kwargs")):
        pass

    odd = Odd(cls=1, self=2, args=3, kwargs=4)

    assert (odd.cls(), odd.self(), odd.args(), odd.kwargs()) == (1, 2, 3, 4)


def test_dunder_attribute_is_rejected():
    with pytest.raises(InvalidNameError) as exc_info:

        class Broken(TinyObject, attributes=("__new__",)):
            pass

    assert "reserved" in str(exc_info.value)


def test_class_from_another_registry_is_unknown_to_the_default_one():
    class Elsewhere(TinyObject, registry=AttributeRegistry()):
        pass

    with pytest.raises(UnknownClassError):
        ObjectConstructor(DEFAULT_REGISTRY).new(Elsewhere)
