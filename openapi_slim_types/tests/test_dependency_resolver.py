import logging

import pytest

from openapi_slim_types.errors import DanglingReferenceError, UnsatisfiedDependencyError
from openapi_slim_types.pipeline import FilterConfig
from openapi_slim_types.pipeline.analyzer import DecisionKind, DependencyResolver, FilterEngine, ReferenceResolver

from .builders import components, obj, ref


def resolve(graph, **config):
    config = FilterConfig.from_dict(config)
    engine = FilterEngine(graph, config)
    return DependencyResolver(ReferenceResolver(graph), engine, config).resolve(engine.classify_all())


@pytest.fixture
def chain(parse):
    # A -> B -> C, D stands alone
    return parse(
        components(
            A=obj(b=ref("B"), note={"type": "string"}),
            B=obj(c={"type": "array", "items": ref("C")}),
            C={"type": "string"},
            D={"type": "integer"},
        )
    )


def test_default_mode_is_closed(chain):
    assert resolve(chain).generated() == ["A", "B", "C", "D"]


def test_allow_list_without_auto_include(chain):
    with pytest.raises(UnsatisfiedDependencyError) as exc_info:
        resolve(chain, include={"A": "*"})
    assert exc_info.value.from_schema == "A"
    assert exc_info.value.missing == "B"
    assert "auto_include_dependencies" in str(exc_info.value)


def test_auto_include_is_transitive(chain, caplog):
    with caplog.at_level(logging.INFO):
        state = resolve(chain, include={"A": "*"}, auto_include_dependencies=True)
    assert state.generated() == ["A", "B", "C"]
    assert state["D"].kind is DecisionKind.UNSPECIFIED
    assert state["B"].fields == ("c",)
    assert "Auto-including schema B" in caplog.text


def test_auto_include_follows_array_items(chain):
    state = resolve(chain, include={"B": "*"}, auto_include_dependencies=True)
    assert state.generated() == ["B", "C"]


def test_dropped_fields_do_not_pull_dependencies(chain):
    state = resolve(chain, include={"A": ["note"]})
    assert state.generated() == ["A"]


def test_explicit_exclusion_wins_over_auto_include(chain):
    with pytest.raises(UnsatisfiedDependencyError, match="explicitly excluded"):
        resolve(chain, include={"A": "*"}, exclude={"B": "*"}, auto_include_dependencies=True)


def test_deny_list_exclusion_of_a_dependency(chain):
    with pytest.raises(UnsatisfiedDependencyError) as exc_info:
        resolve(chain, exclude={"C": "*"})
    assert (exc_info.value.from_schema, exc_info.value.missing) == ("B", "C")


def test_deny_list_field_removal_breaks_the_dependency(chain):
    state = resolve(chain, exclude={"C": "*", "B": ["c"]})
    assert state.generated() == ["A", "B", "D"]


def test_dangling_reference(parse):
    graph = parse(components(A=obj(ghost=ref("Ghost"))))
    with pytest.raises(DanglingReferenceError) as exc_info:
        resolve(graph)
    assert exc_info.value.from_schema == "A"
    assert exc_info.value.target == "Ghost"


def test_dangling_reference_in_dropped_field_is_ignored(parse):
    graph = parse(components(A=obj(ghost=ref("Ghost"), id={"type": "integer"})))
    assert resolve(graph, exclude={"A": ["ghost"]}).generated() == ["A"]


def test_cyclic_references_terminate(parse):
    graph = parse(components(A=obj(b=ref("B")), B=obj(a=ref("A")), C={"type": "string"}))
    state = resolve(graph, include={"A": "*"}, auto_include_dependencies=True)
    assert state.generated() == ["A", "B"]


def test_input_state_is_not_modified(chain):
    config = FilterConfig.from_dict({"include": {"A": "*"}, "auto_include_dependencies": True})
    engine = FilterEngine(chain, config)
    initial = engine.classify_all()
    DependencyResolver(ReferenceResolver(chain), engine, config).resolve(initial)
    assert initial.generated() == ["A"]
