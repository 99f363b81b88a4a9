"""Task specification model."""

from hookx.spec.ops import (
    flatten_spec,
    merge_specs,
    parse_spec_input,
    parse_specs_inputs,
    remove_task_from_spec,
)
from hookx.spec.types import DetailedSpec, SequenceSpec, SingleSpec, TaskSpec

__all__ = [
    "DetailedSpec",
    "SequenceSpec",
    "SingleSpec",
    "TaskSpec",
    "flatten_spec",
    "merge_specs",
    "parse_spec_input",
    "parse_specs_inputs",
    "remove_task_from_spec",
]
