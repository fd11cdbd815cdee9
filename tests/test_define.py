import pytest

from funpy import curry
from funpy.container import Container
from funpy.container.define import Define
from funpy.errors import DuplicateKeyError, KeyNotFoundError

function1 = lambda x, y: x + y
function2 = lambda x, y: x * y


@pytest.fixture
def define(container):
    return Define.build(container=container)


def test_defines_top_level_functions(container, define):
    def block(d):
        d.f("fun1", lambda: function1)
        d.f("fun2", lambda: function2)

    define(block)
    assert container.fetch("fun1") is function1
    assert container.fetch("fun2") is function2


def test_defines_under_single_namespace(container, define):
    define(lambda d: d.namespace("math", lambda m: (
        m.f("fun1", lambda: function1),
        m.f("fun2", lambda: function2),
    )))
    assert container.fetch("math.fun1") is function1
    assert container.fetch("math.fun2") is function2


def test_defines_under_nested_namespaces(container, define):
    with define.namespace("app") as app:
        with app.namespace("math") as math:
            math.function("fun1", lambda: function1)
            math.function("fun2", lambda: function2)
    assert container.fetch("app.math.fun1") is function1
    assert container.fetch("app.math.fun2") is function2


def test_sibling_namespaces_are_independent(container, define):
    def block(d):
        with d.namespace("app") as app, app.namespace("math") as math:
            math.f("fun1", lambda: function1)
        with d.namespace("lib") as lib, lib.namespace("math") as math:
            math.f("fun2", lambda: function2)

    define(block)
    assert container.fetch("app.math.fun1") is function1
    assert container.fetch("lib.math.fun2") is function2
    assert "app.math.fun2" not in container


def test_reference_to_a_function_defined_later(container, define):
    def block(d):
        with d.namespace("app") as app, app.namespace("math") as math:
            math.f("fun1", lambda: math.f("lib.math.fun2"))
        with d.namespace("lib") as lib, lib.namespace("math") as lib_math:
            lib_math.f("fun2", lambda: function1)

    define(block)
    assert container.fetch("app.math.fun1") is function1
    assert container.fetch("lib.math.fun2") is function1


def test_forward_reference_in_the_same_block(container, define):
    def block(d):
        d.f("a", lambda: d.f("b"))
        d.f("b", lambda: 42)

    define(block)
    assert container.fetch("a") == 42


def test_short_reference_to_a_sibling(container, define):
    def block(d):
        with d.namespace("app") as app, app.namespace("math") as math:
            math.f("fun1", lambda: math.f("fun2"))
            math.f("fun2", lambda: function1)

    define(block)
    assert container.fetch("app.math.fun1") is function1


def test_short_reference_to_a_parent_namespace(container, define):
    def block(d):
        with d.namespace("app") as app:
            app.f("fun1", lambda: function1)
            with app.namespace("math") as math:
                math.f("fun2", lambda: math.f("fun1"))

    define(block)
    assert container.fetch("app.math.fun2") is function1


def test_inner_namespace_shadows_outer(container, define):
    def block(d):
        with d.namespace("app") as app:
            app.f("name", lambda: "outer")
            with app.namespace("math") as math:
                math.f("name", lambda: "inner")
                math.f("probe", lambda: math.f("name"))
            app.f("probe", lambda: app.f("name"))

    define(block)
    assert container.fetch("app.math.probe") == "inner"
    assert container.fetch("app.probe") == "outer"


def test_lookup_without_definition(container, define):
    container.define("app.math.sum", lambda: function1)
    math = define.namespace("app").namespace("math")
    assert math.f("sum") is function1
    with pytest.raises(KeyNotFoundError):
        math.f("missing")


def test_scenario_curried_sum(container, define):
    def block(d):
        with d.namespace("app") as app, app.namespace("math") as math:
            math.f("sum", lambda: curry(lambda x, y: x + y))
            math.f("inc", lambda: math.f("sum")(1))

    define(block)
    assert container.fetch("app.math.sum")(2, 3) == 5
    assert container.fetch("app.math.sum")(2)(3) == 5
    assert container.fetch("app.math.inc")(41) == 42


def test_register_decorator(container, define):
    app = define.namespace("app")

    @app.register("answer")
    def answer():
        return 42

    assert container.fetch("app.answer") == 42


def test_duplicates_are_reported(define):
    define.f("k", lambda: 1)
    with pytest.raises(DuplicateKeyError):
        define.f("k", lambda: 2)


def test_build_validates_arguments(container):
    with pytest.raises(TypeError):
        Define.build(container=object())
    with pytest.raises(TypeError):
        Define.build(container=container, namespaces="app")


def test_path_and_key(define):
    math = define.namespace("app").namespace("math")
    assert math.path == "app.math"
    assert math.namespaces == ["app", "math"]
    assert math.key("sum") == "app.math.sum"
    assert define.key("sum") == "sum"


def test_builds_on_default_container():
    from funpy.runtime import get_runtime

    Define.build().f("k", lambda: 1)
    assert get_runtime().container.fetch("k") == 1


def test_namespace_names_are_strings(container):
    Define.build(container=container, namespaces=[1]).f(2, lambda: "x")
    assert container.fetch("1.2") == "x"
