# tests/test_scopes.py

import io
from pseudoc_anasem import Analyzer, ScopeState, GLOBAL_SCOPE


def test_initial_state():
    st = ScopeState(io.StringIO())
    assert st.current == GLOBAL_SCOPE
    assert st.is_global()
    assert st.next_global_address == 1000
    assert st.next_local_offset == 0


def test_global_allocation_is_linear():
    st = ScopeState(io.StringIO())
    assert st.allocate(GLOBAL_SCOPE, 4) == 1000
    assert st.allocate(GLOBAL_SCOPE, 8) == 1004
    assert st.allocate(GLOBAL_SCOPE, 1) == 1012
    assert st.next_global_address == 1013


def test_custom_global_base():
    st = ScopeState(io.StringIO(), global_base=2048)
    assert st.allocate(GLOBAL_SCOPE, 4) == 2048


def test_push_resets_local_offset_but_not_global_cursor():
    st = ScopeState(io.StringIO())
    st.allocate(GLOBAL_SCOPE, 4)
    st.push_scope("f")
    assert st.allocate("f", 8) == 0
    assert st.allocate("f", 4) == 8
    st.push_scope("g")
    assert st.current == "g"
    assert st.allocate("g", 1) == 0
    assert st.next_global_address == 1004


def test_pop_returns_to_global():
    out = io.StringIO()
    st = ScopeState(out)
    st.push_scope("f")
    st.pop_scope()
    assert st.current == GLOBAL_SCOPE
    assert "Popping Scope: 'f'" in out.getvalue()


def test_pop_in_global_is_noop():
    out = io.StringIO()
    st = ScopeState(out)
    st.pop_scope()
    assert st.current == GLOBAL_SCOPE
    assert out.getvalue() == ""


def test_local_offset_is_zero_after_every_open_scope():
    an = Analyzer(out=io.StringIO())
    for stmt in [
        ("OPEN_SCOPE", "f"), ("DECLARE", "float", "a"), ("DECLARE", "int", "b"),
        ("CLOSE_SCOPE",),
        ("OPEN_SCOPE", "g"), ("DECLARE", "char", "c"),
    ]:
        an.visit(stmt)
    locations = {e["name"]: e["location"] for e in an.table.entries()}
    assert locations == {"a": 0, "b": 8, "c": 0}


def test_global_addresses_strictly_increase_across_scope_changes():
    an = Analyzer(out=io.StringIO())
    for stmt in [
        ("DECLARE", "int", "x"),
        ("OPEN_SCOPE", "f"), ("DECLARE", "float", "y"), ("CLOSE_SCOPE",),
        ("DECLARE", "float", "z"),
        ("OPEN_SCOPE", "g"), ("CLOSE_SCOPE",),
        ("DECLARE", "char", "w"),
    ]:
        an.visit(stmt)
    globals_ = [e for e in an.table.entries() if e["scope"] == GLOBAL_SCOPE]
    assert [e["location"] for e in globals_] == [1000, 1004, 1012]
    for prev, nxt in zip(globals_, globals_[1:]):
        assert nxt["location"] >= prev["location"] + prev["size"]


def test_reopening_a_scope_name_keeps_its_entries():
    an = Analyzer(out=io.StringIO())
    for stmt in [
        ("OPEN_SCOPE", "f"), ("DECLARE", "int", "a"), ("CLOSE_SCOPE",),
        ("OPEN_SCOPE", "f"), ("DECLARE", "int", "a"), ("CLOSE_SCOPE",),
    ]:
        an.visit(stmt)
    # entries are never removed, so 'a' already exists in scope 'f'
    assert len(an.table) == 1
    assert an.error_count() == 1
