import pytest

from funpy.container import Container
from funpy.container.mixin import Mixin
from funpy.errors import KeyNotFoundError


@pytest.fixture
def populated(container):
    container.define("app.math.sum", lambda: lambda x, y: x + y)
    container.define("app.strings.upper", lambda: str.upper)
    container.define("plain", lambda: "plain")
    return container


def test_capability_resolves_through_its_aliases(populated):
    class Calculator(Mixin.build(aliases=[{"app.math": "m"}], container=populated)):
        def add(self, x, y):
            return self.f("m.sum")(x, y)

    assert Calculator().add(2, 3) == 5
    assert Calculator().f("plain") == "plain"


def test_several_capabilities_side_by_side(populated):
    Math = Mixin.build(aliases=[{"app.math": "m"}], container=populated)
    Strings = Mixin.build(aliases=[{"app.strings": "s"}], container=populated)

    class Report(Math, Strings):
        pass

    report = Report()
    assert report.f("m.sum")(1, 2) == 3
    assert report.f("s.upper")("x") == "X"
    with pytest.raises(KeyNotFoundError) as exc:
        report.f("q.missing")
    assert exc.value.key == "q.missing"


def test_capabilities_over_different_containers(populated):
    other = Container()
    other.define("lib.answer", lambda: 42)

    class Both(Mixin.build(["app.math"], container=populated), Mixin.build(["lib"], container=other)):
        pass

    assert Both().f("answer") == 42
    assert Both().f("sum")(1, 1) == 2


def test_container_mixin_classmethod(populated):
    class Calculator(Container.mixin("app.math", container=populated)):
        pass

    assert Calculator().f("sum")(4, 5) == 9
