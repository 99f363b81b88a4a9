"""Unit tests for merging and removing task specs."""

from __future__ import annotations

import pytest

from hookx.spec import (
    DetailedSpec,
    SequenceSpec,
    SingleSpec,
    TaskSpec,
    flatten_spec,
    merge_specs,
    remove_task_from_spec,
)

A = SingleSpec("a")
B = SingleSpec("b")
C = SingleSpec("c")


def test_merge_two_singles() -> None:
    assert merge_specs(A, B, replace=False) == SequenceSpec((A, B))


def test_merge_without_existing_returns_incoming() -> None:
    assert merge_specs(None, B, replace=False) == B


def test_merge_replace_discards_existing() -> None:
    assert merge_specs(SequenceSpec((A, B)), C, replace=True) == C


def test_merge_flattens_both_sides() -> None:
    merged = merge_specs(SequenceSpec((A, B)), SequenceSpec((C, A)), replace=False)
    assert merged == SequenceSpec((A, B, C, A))


@pytest.mark.parametrize(
    ("existing", "incoming"),
    [
        (A, B),
        (SequenceSpec((A, B)), C),
        (DetailedSpec(command="x"), SequenceSpec((A, B, C))),
        (SequenceSpec(()), A),
    ],
)
def test_merge_length_is_sum_of_flattened(existing: TaskSpec, incoming: TaskSpec) -> None:
    merged = merge_specs(existing, incoming, replace=False)
    assert isinstance(merged, SequenceSpec)
    assert len(merged.items) == len(flatten_spec(existing)) + len(flatten_spec(incoming))


def test_remove_only_match_yields_none() -> None:
    assert remove_task_from_spec(A, A) is None


def test_remove_non_matching_single_is_kept() -> None:
    assert remove_task_from_spec(A, B) == A


def test_remove_from_sequence_unwraps_lone_survivor() -> None:
    assert remove_task_from_spec(SequenceSpec((A, B)), A) == B


def test_remove_all_equal_siblings() -> None:
    assert remove_task_from_spec(SequenceSpec((A, B, A, C)), A) == SequenceSpec((B, C))


def test_remove_everything_yields_none() -> None:
    assert remove_task_from_spec(SequenceSpec((A, A)), A) is None


def test_remove_recurses_into_nested_sequences() -> None:
    nested = SequenceSpec((SequenceSpec((A, B)), C))
    assert remove_task_from_spec(nested, A) == SequenceSpec((B, C))


def test_remove_matches_detailed_structurally() -> None:
    detailed = DetailedSpec(command="x", dependencies=("y",))
    spec = SequenceSpec((detailed, A))
    assert remove_task_from_spec(spec, DetailedSpec(command="x", dependencies=("y",))) == A
    assert remove_task_from_spec(spec, DetailedSpec(command="x")) == spec
