import types
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from component_locator.locator.adapter import TreeAdapter, get_default_adapter

NodePredicate = Callable[[Any], bool]


class CountRange(BaseModel):
	"""Inclusive range of acceptable match counts; ``last=None`` means unbounded."""

	model_config = ConfigDict(frozen=True)

	first: int = Field(default=0, ge=0)
	last: int | None = Field(default=None, ge=0)

	@model_validator(mode='after')
	def _check_bounds(self) -> 'CountRange':
		if self.last is not None and self.last < self.first:
			raise ValueError(f'count range is empty: {self.first}..{self.last}')
		return self

	@classmethod
	def exactly(cls, count: int) -> 'CountRange':
		return cls(first=count, last=count)

	@classmethod
	def at_least(cls, count: int) -> 'CountRange':
		return cls(first=count)

	@classmethod
	def from_range(cls, value: range) -> 'CountRange':
		"""Convert a Python ``range``; ``range(1, 4)`` accepts 1, 2 or 3 matches."""
		if value.step != 1:
			raise ValueError(f'count range must have step 1, got {value!r}')
		return cls(first=value.start, last=value.stop - 1)

	def __contains__(self, count: int) -> bool:
		return count >= self.first and (self.last is None or count <= self.last)

	def __str__(self) -> str:
		return f'{self.first}..{"" if self.last is None else self.last}'


ANY_COUNT = CountRange()
EXACTLY_ONE = CountRange.exactly(1)
NO_MATCHES = CountRange.exactly(0)


@dataclass(frozen=True, slots=True)
class DescribedPredicate:
	"""A custom criterion with a readable description for lookup failure messages.

	Usage::

		is_empty = DescribedPredicate('value is empty', lambda field: not field.value)
		get_one(TextField, caption='Name', predicates=[is_empty])
	"""

	description: str
	test: NodePredicate

	def __call__(self, node: Any) -> bool:
		return bool(self.test(node))

	def __str__(self) -> str:
		return self.description


def describe_predicate(predicate: NodePredicate) -> str:
	"""Functions are described by their name, so every lambda reads as ``<lambda>``.

	Wrap a lambda in ``DescribedPredicate`` to get a useful failure message.
	"""
	if isinstance(predicate, (types.FunctionType, types.MethodType, types.BuiltinFunctionType)):
		return predicate.__name__
	return str(predicate)


class SearchSpec(BaseModel):
	"""Criteria a component must match; every field that is set must match.

	Mutated only while a lookup is being configured, then compiled with
	``to_predicate()``. The compiled predicate copies the criteria, so changing this object
	afterwards does not affect it.
	"""

	model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True, extra='forbid')

	component_type: type[Any]
	id: str | None = None
	caption: str | None = None
	placeholder: str | None = None
	text: str | None = None
	# space-separated, all of them must be present on the component
	styles: str | None = None
	count: CountRange = Field(default_factory=CountRange)
	predicates: list[NodePredicate] = Field(default_factory=list)

	@field_validator('count', mode='before')
	@classmethod
	def _coerce_count(cls, value: Any) -> Any:
		if isinstance(value, range):
			return CountRange.from_range(value)
		if isinstance(value, int) and not isinstance(value, bool):
			return CountRange.exactly(value)
		return value

	@property
	def required_styles(self) -> frozenset[str]:
		return frozenset(self.styles.split()) if self.styles else frozenset()

	def describe(self) -> str:
		parts = [self.component_type.__name__ or self.component_type.__qualname__]
		if self.id is not None:
			parts.append(f"id='{self.id}'")
		if self.caption is not None:
			parts.append(f"caption='{self.caption}'")
		if self.placeholder is not None:
			parts.append(f"placeholder='{self.placeholder}'")
		if self.text is not None:
			parts.append(f"text='{self.text}'")
		if self.required_styles:
			parts.append(f"styles='{self.styles}'")
		if self.count != ANY_COUNT and self.count != EXACTLY_ONE:
			parts.append(f'count={self.count}')
		parts.extend(describe_predicate(predicate) for predicate in self.predicates)
		return ' and '.join(parts)

	def __str__(self) -> str:
		return self.describe()

	def to_predicate(self, adapter: TreeAdapter | None = None) -> NodePredicate:
		"""Compile the criteria into a single predicate over nodes of any type."""
		adapter = adapter or get_default_adapter()
		component_type = self.component_type

		def is_target(node: Any) -> bool:
			return adapter.is_instance(node, component_type)

		checks: list[NodePredicate] = [is_target]
		if self.id is not None:
			expected_id = self.id
			checks.append(lambda node: adapter.id(node) == expected_id)
		if self.caption is not None:
			expected_caption = self.caption
			checks.append(lambda node: adapter.caption(node) == expected_caption)
		if self.placeholder is not None:
			expected_placeholder = self.placeholder
			checks.append(lambda node: adapter.placeholder(node) == expected_placeholder)
		if self.text is not None:
			expected_text = self.text
			checks.append(lambda node: adapter.text(node) == expected_text)
		if self.required_styles:
			required_styles = self.required_styles
			checks.append(lambda node: required_styles <= set(adapter.style_classes(node)))
		checks.extend(_type_guarded(is_target, predicate) for predicate in self.predicates)

		frozen_checks = tuple(checks)
		return lambda node: all(check(node) for check in frozen_checks)


def _type_guarded(is_target: NodePredicate, predicate: NodePredicate) -> NodePredicate:
	# custom predicates are written for the target type and must never see other nodes
	return lambda node: is_target(node) and bool(predicate(node))
