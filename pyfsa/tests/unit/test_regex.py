from __future__ import annotations

import pytest

from pyfsa.core.errors import ErrorCode, FSAError
from pyfsa.core.nfa import NFA
from pyfsa.core.types import Alphabet
from pyfsa.regex.compiler import compile_regex


def _triples(nfa: NFA) -> set[tuple[str, str, str]]:
    return {(t.origin.name, t.dest.name, t.input) for t in nfa.transitions}


def test_compile_star_literal_star_structure() -> None:
    nfa = compile_regex("0%s10%s", Alphabet("01"))

    assert sorted(state.name for state in nfa.states) == ["q0", "q1", "q2", "q3", "q4", "q5", "q6"]
    assert nfa.alphabet.sigma == ("0", "1", "")
    assert nfa.start.name == "q0"
    assert [state.name for state in nfa.accepts] == ["q6"]
    assert _triples(nfa) == {
        ("q1", "q2", "0"),
        ("q1", "q2", ""),
        ("q2", "q1", ""),
        ("q3", "q4", "1"),
        ("q2", "q3", ""),
        ("q5", "q6", "0"),
        ("q5", "q6", ""),
        ("q6", "q5", ""),
        ("q4", "q5", ""),
        ("q0", "q1", ""),
    }
    assert nfa.kind == "NFA"


def test_compile_plus_structure() -> None:
    nfa = compile_regex("0%p", Alphabet("01"))

    assert [state.name for state in nfa.accepts] == ["q3"]
    assert _triples(nfa) == {
        ("q1", "q2", "0"),
        ("q2", "q3", "0"),
        ("q2", "q3", ""),
        ("q3", "q2", ""),
        ("q0", "q1", ""),
    }


def test_compile_union_links_start_to_each_branch() -> None:
    nfa = compile_regex("01%u0%s", Alphabet("01"))

    assert sorted(state.name for state in nfa.accepts) == ["q4", "q6"]
    start_edges = {(t.dest.name, t.input) for t in nfa.transitions if t.origin is nfa.start}
    assert start_edges == {("q1", ""), ("q5", "")}


def test_compile_empty_pattern() -> None:
    nfa = compile_regex("", Alphabet("01"))

    assert len(nfa.states) == 1
    assert nfa.accepts == {nfa.start}
    assert nfa.transitions == ()


def test_compile_does_not_change_alphabet() -> None:
    alphabet = Alphabet("01")
    compile_regex("1%s", alphabet)
    assert alphabet.sigma == ("0", "1")


def test_compile_invalid_types() -> None:
    for pattern in (None, 0, ["0"], lambda: None):
        with pytest.raises(TypeError):
            compile_regex(pattern, Alphabet("01"))
    for alphabet in (None, 0, "01", lambda: None):
        with pytest.raises(TypeError):
            compile_regex("0%s", alphabet)


def test_compile_reserved_symbol_in_alphabet() -> None:
    with pytest.raises(FSAError) as excinfo:
        compile_regex("0%s", Alphabet(["0", "1", "%"]))
    assert excinfo.value.code is ErrorCode.INVALID_INPUT_CHAR


@pytest.mark.parametrize("pattern", ["%10", "01%", "01%u", "01y0", "01%r0", "0%s%s0"])
def test_compile_invalid_syntax(pattern: str) -> None:
    with pytest.raises(FSAError) as excinfo:
        compile_regex(pattern, Alphabet("01"))
    assert excinfo.value.code is ErrorCode.INVALID_REGEX_SYNTAX


def test_compile_state_order_follows_construction() -> None:
    nfa = compile_regex("0%s10%s", Alphabet("01"))
    assert [state.name for state in nfa.state_order()] == ["q0", "q1", "q2", "q3", "q4", "q5", "q6"]
