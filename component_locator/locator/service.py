"""
Component lookups over a retained UI component tree.

Finds VISIBLE components matching a ``SearchSpec`` and checks how many matched:

	get_one(Button, caption='Save').click()
	get_one(TextField, lambda spec: setattr(spec, 'placeholder', 'Name')).value = 'Duncan'
	find_all(Text, root=layout)
	expect_none(Dialog)

The given root (the current UI by default) and all of its descendants are searched.
"""

import logging
from collections import deque
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from component_locator.exceptions import (
	ComponentLookupError,
	InternalServerErrorDetected,
	LocatorError,
	NoComponentFoundError,
	SearchSpecMisuseError,
	TooFewComponentsError,
	TooManyComponentsError,
)
from component_locator.locator.adapter import TreeAdapter, get_default_adapter
from component_locator.locator.views import EXACTLY_ONE, NO_MATCHES, CountRange, NodePredicate, SearchSpec

logger = logging.getLogger(__name__)

T = TypeVar('T')

SpecConfigurator = Callable[[SearchSpec], Any]

_CRITERIA = frozenset(name for name in SearchSpec.model_fields if name != 'component_type')


class ComponentLocator:
	"""Searches a component tree through a ``TreeAdapter``.

	Holds no state besides the adapter: every lookup walks the live tree again.
	"""

	def __init__(self, adapter: TreeAdapter | None = None):
		self.adapter = adapter or get_default_adapter()

	# Traversal

	def walk(self, root: Any) -> Iterator[Any]:
		"""Breadth-first iteration over ``root`` and all of its descendants, ``root`` first."""
		queue = deque([root])
		while queue:
			node = queue.popleft()
			queue.extend(self.adapter.children(node))
			yield node

	def is_effectively_visible(self, node: Any) -> bool:
		"""True if the node and all of its ancestors are visible.

		Checked explicitly up the whole parent chain instead of trusting the host to hide
		the descendants of invisible components.
		"""
		current = node
		while current is not None:
			if not self.adapter.is_visible(current):
				return False
			current = self.adapter.parent(current)
		return True

	def cleanup_overlays(self) -> int:
		"""Detach closed overlays left behind as direct children of the current root.

		The host closes dialogs by asking the client to remove them, which never happens
		without a browser. Returns the number of overlays removed.
		"""
		ui = self.adapter.current_root()
		if ui is None:
			return 0
		removed = 0
		for child in list(self.adapter.children(ui)):
			if self.adapter.is_ephemeral_overlay(child) and not self.adapter.is_overlay_open(child):
				self.adapter.detach(child)
				removed += 1
		if removed:
			logger.debug(f'🧹 Removed {removed} closed overlay(s) from {self.adapter.describe(ui)}')
		return removed

	def find(self, root: Any, predicate: NodePredicate) -> list[Any]:
		"""All effectively visible nodes under ``root`` (inclusive) matching ``predicate``, in BFS order."""
		self.cleanup_overlays()
		descendants = []
		for node in self.walk(root):
			if self.adapter.is_unhandled_error(node):
				raise self._internal_server_error(node)
			descendants.append(node)
		return [node for node in descendants if predicate(node) and self.is_effectively_visible(node)]

	# Lookups

	def find_all(
		self,
		component_type: type[T],
		configure: SpecConfigurator | None = None,
		*,
		root: Any = None,
		**criteria: Any,
	) -> list[T]:
		"""Finds VISIBLE components of ``component_type`` matching the criteria.

		Args:
			component_type: matched with ``isinstance``, so subclasses match too
			configure: called with the ``SearchSpec`` after ``criteria`` are applied
			root: searched together with its descendants; defaults to the current UI
			**criteria: ``SearchSpec`` fields, e.g. ``caption='Save'`` or ``count=range(1, 3)``

		Returns:
			Matching components in breadth-first order, possibly empty.

		Raises:
			ComponentLookupError: if the number of matches is outside ``spec.count``
		"""
		spec = self._build_spec(component_type, configure, criteria)
		return self._find_checked(spec, root)

	def get_one(
		self,
		component_type: type[T],
		configure: SpecConfigurator | None = None,
		*,
		root: Any = None,
		**criteria: Any,
	) -> T:
		"""Finds the only VISIBLE component of ``component_type`` matching the criteria.

		Raises:
			NoComponentFoundError: if nothing matched
			TooManyComponentsError: if more than one component matched
			SearchSpecMisuseError: if the criteria tried to change the expected count
		"""
		spec = self._build_spec(component_type, configure, criteria, owned_count=EXACTLY_ONE, caller='get_one')
		(result,) = self._find_checked(spec, root)
		return result

	def expect_none(
		self,
		component_type: type[Any],
		configure: SpecConfigurator | None = None,
		*,
		root: Any = None,
		**criteria: Any,
	) -> None:
		"""Expects that no VISIBLE component of ``component_type`` matches the criteria.

		Raises:
			TooManyComponentsError: if one or more components matched
			SearchSpecMisuseError: if the criteria tried to change the expected count
		"""
		spec = self._build_spec(component_type, configure, criteria, owned_count=NO_MATCHES, caller='expect_none')
		result = self._find_checked(spec, root)
		if result:
			raise LocatorError(f'expect_none found {len(result)} component(s) without failing the count check')

	# Internals

	def _build_spec(
		self,
		component_type: type[Any],
		configure: SpecConfigurator | None,
		criteria: dict[str, Any],
		owned_count: CountRange | None = None,
		caller: str = 'find_all',
	) -> SearchSpec:
		spec = SearchSpec(component_type=component_type)
		if owned_count is not None:
			spec.count = owned_count
		for name, value in criteria.items():
			if name not in _CRITERIA:
				raise TypeError(f'{caller}() got an unknown search criterion {name!r}, expected one of {sorted(_CRITERIA)}')
			setattr(spec, name, value)
		if configure is not None:
			configure(spec)
		if owned_count is not None and spec.count != owned_count:
			raise SearchSpecMisuseError(
				f"You're calling {caller} which expects exactly {owned_count.first} component(s), "
				f'yet you tried to specify the count of {spec.count}'
			)
		return spec

	def _resolve_root(self, root: Any) -> Any:
		if root is not None:
			return root
		root = self.adapter.current_root()
		if root is None:
			raise LocatorError('No root component was given and there is no current UI to search')
		return root

	def _find_checked(self, spec: SearchSpec, root: Any) -> list[Any]:
		root = self._resolve_root(root)
		result = self.find(root, spec.to_predicate(self.adapter))
		if logger.isEnabledFor(logging.DEBUG):
			logger.debug(f'🔍 {len(result)} match(es) for {spec} in {self.adapter.describe(root)}')
		if len(result) not in spec.count:
			raise self._lookup_error(spec, root, result)
		return result

	def _tree_root(self, node: Any) -> Any:
		ui = self.adapter.current_root()
		if ui is not None:
			return ui
		while (parent := self.adapter.parent(node)) is not None:
			node = parent
		return node

	def _location_prefix(self) -> str:
		location = self.adapter.location()
		return f'/{location}: ' if location is not None else ''

	def _lookup_error(self, spec: SearchSpec, root: Any, result: list[Any]) -> ComponentLookupError:
		type_name = spec.component_type.__name__
		if not result:
			error_class: type[ComponentLookupError] = NoComponentFoundError
			headline = f'No visible {type_name}'
		elif len(result) < spec.count.first:
			error_class = TooFewComponentsError
			headline = f'Too few ({len(result)}) visible {type_name}s'
		else:
			error_class = TooManyComponentsError
			headline = f'Too many visible {type_name}s ({len(result)})'
		matches = ', '.join(self.adapter.describe(node) for node in result)
		message = (
			f'{self._location_prefix()}{headline} in {self.adapter.describe(root)} matching {spec}: [{matches}]. '
			f'Component tree:\n{self.adapter.describe_tree(self._tree_root(root))}'
		)
		return error_class(message, spec=spec, matches=result)

	def _internal_server_error(self, node: Any) -> InternalServerErrorDetected:
		error_text = self.adapter.error_text(node)
		message = (
			'An internal server error occurred; check the log for the actual stack-trace. '
			f'Error text: {error_text}\n{self.adapter.describe_tree(self._tree_root(node))}'
		)
		return InternalServerErrorDetected(message, error_text=error_text)


def find_all(
	component_type: type[T],
	configure: SpecConfigurator | None = None,
	*,
	root: Any = None,
	adapter: TreeAdapter | None = None,
	**criteria: Any,
) -> list[T]:
	"""See ``ComponentLocator.find_all``."""
	return ComponentLocator(adapter).find_all(component_type, configure, root=root, **criteria)


def get_one(
	component_type: type[T],
	configure: SpecConfigurator | None = None,
	*,
	root: Any = None,
	adapter: TreeAdapter | None = None,
	**criteria: Any,
) -> T:
	"""See ``ComponentLocator.get_one``."""
	return ComponentLocator(adapter).get_one(component_type, configure, root=root, **criteria)


def expect_none(
	component_type: type[Any],
	configure: SpecConfigurator | None = None,
	*,
	root: Any = None,
	adapter: TreeAdapter | None = None,
	**criteria: Any,
) -> None:
	"""See ``ComponentLocator.expect_none``."""
	ComponentLocator(adapter).expect_none(component_type, configure, root=root, **criteria)
