# examples/01_quickstart.py
"""
Quickstart - declare classes, construct, tear down.

Run:
    python examples/01_quickstart.py
"""

from tinyclass import TinyObject, UnknownAttributeError, get_all_attributes_for

# =============================================================================
# Step 1: Declare classes
# =============================================================================


class Person(TinyObject, attributes=("name",)):
    def BUILD(self, args):
        print(f"  Person.BUILD({args})")

    def DEMOLISH(self, in_global_destruction):
        print("  Person.DEMOLISH")


class Employee(Person, attributes=("ssn",)):
    def BUILD(self, args):
        print("  Employee.BUILD")
        if self.ssn() is None:
            self.ssn("000-00-0000")

    def DEMOLISH(self, in_global_destruction):
        print("  Employee.DEMOLISH")


print(f"Employee accepts: {sorted(get_all_attributes_for(Employee))}\n")

# =============================================================================
# Step 2: Construct (BUILD runs parent to child)
# =============================================================================

print("Constructing:")
with Employee(name="Larry") as larry:
    print(f"  -> {larry!r}\n")
    print("Leaving the with block:")

# =============================================================================
# Step 3: Unknown attributes are fatal
# =============================================================================

try:
    Employee(name="Larry", OS="Linux")
except UnknownAttributeError as e:
    print(f"\nError creating Employee: {e}")
