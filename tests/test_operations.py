import pytest

from funpy import _
from funpy.curry import CurriedFunction
from funpy.errors import UnknownOperationError
from funpy.operations import OperationTable


@pytest.fixture
def table():
    ops = OperationTable("sample")

    @ops.implements("sub")
    def _sub(a, b):
        return a - b

    return ops


def test_curried_applies_the_registered_implementation(table):
    assert table.curried("sub", 5, 3) == 2
    assert table.curried("sub", _, 3)(5) == 2
    assert isinstance(table.curried("sub", _, _), CurriedFunction)


def test_unknown_operation(table):
    with pytest.raises(UnknownOperationError):
        table.curried("mul", 1, 2)


def test_names_and_membership(table):
    assert table.names() == ["sub"]
    assert "sub" in table
    assert "mul" not in table
