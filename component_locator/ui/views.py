"""
In-memory server-side component tree.

A small retained UI model used to exercise the locator without a real UI framework:
components know their parent and ordered children, carry a visibility flag, and
expose the id / caption / placeholder / text / style name properties that lookups
match against.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

logger = logging.getLogger(__name__)


class Component:
	"""Base class of every component in the tree."""

	def __init__(
		self,
		*,
		id: str | None = None,
		caption: str | None = None,
		visible: bool = True,
		style_name: str | None = None,
	):
		self.id = id
		self.caption = caption
		self.visible = visible
		self._style_names: list[str] = []
		self._parent: 'HasComponents | None' = None
		if style_name:
			self.add_style_name(style_name)

	@property
	def parent(self) -> 'HasComponents | None':
		return self._parent

	@property
	def children(self) -> list['Component']:
		return []

	@property
	def placeholder(self) -> str | None:
		return None

	@property
	def text(self) -> str:
		return ''

	# Style names

	@property
	def style_name(self) -> str:
		return ' '.join(self._style_names)

	@style_name.setter
	def style_name(self, value: str | None) -> None:
		self._style_names = []
		if value:
			self.add_style_name(value)

	@property
	def style_names(self) -> set[str]:
		return set(self._style_names)

	def add_style_name(self, style: str) -> None:
		for name in style.split():
			if name not in self._style_names:
				self._style_names.append(name)

	def remove_style_name(self, style: str) -> None:
		for name in style.split():
			if name in self._style_names:
				self._style_names.remove(name)

	def has_style_name(self, style: str) -> bool:
		names = style.split()
		return bool(names) and all(name in self._style_names for name in names)

	# Tree wiring

	def remove_from_parent(self) -> None:
		if self._parent is not None:
			self._parent.remove(self)

	@property
	def ui(self) -> 'UI | None':
		node: Component | None = self
		while node is not None and not isinstance(node, UI):
			node = node.parent
		return node

	def is_effectively_visible(self) -> bool:
		node: Component | None = self
		while node is not None:
			if not node.visible:
				return False
			node = node.parent
		return True

	def __repr__(self) -> str:
		from component_locator.ui.pretty import to_pretty_string

		return to_pretty_string(self)


class HasComponents(Component):
	"""A component holding an ordered list of child components."""

	def __init__(self, *components: Component, **kwargs: Any):
		super().__init__(**kwargs)
		self._children: list[Component] = []
		self.add(*components)

	@property
	def children(self) -> list[Component]:
		return list(self._children)

	@property
	def component_count(self) -> int:
		return len(self._children)

	def add(self, *components: Component) -> None:
		for component in components:
			node: Component | None = self
			while node is not None:
				if node is component:
					raise ValueError(f'{component!r} cannot be added to itself or to one of its descendants')
				node = node.parent
			component.remove_from_parent()
			component._parent = self
			self._children.append(component)

	def remove(self, component: Component) -> None:
		if component.parent is not self:
			raise ValueError(f'{component!r} is not a child of {self!r}')
		self._children.remove(component)
		component._parent = None

	def remove_all(self) -> None:
		for component in list(self._children):
			self.remove(component)


class VerticalLayout(HasComponents):
	pass


class HorizontalLayout(HasComponents):
	pass


class Button(Component):
	"""A clickable button; its caption is also its text."""

	def __init__(self, caption: str | None = None, *, enabled: bool = True, **kwargs: Any):
		super().__init__(caption=caption, **kwargs)
		self.enabled = enabled
		self._click_listeners: list[Callable[['Button'], Any]] = []

	@property
	def text(self) -> str:
		return self.caption or ''

	def add_click_listener(self, listener: Callable[['Button'], Any]) -> None:
		self._click_listeners.append(listener)

	def click(self) -> None:
		"""Simulate a user click, which a real user can only do on a visible, enabled button."""
		if not self.is_effectively_visible():
			raise RuntimeError(f'{self!r} is not effectively visible')
		if not self.enabled:
			raise RuntimeError(f'{self!r} is not enabled')
		logger.debug(f'🖱️ Clicking {self!r}')
		for listener in list(self._click_listeners):
			listener(self)


class TextField(Component):
	"""A single-line text input; the caption is its label."""

	def __init__(self, caption: str | None = None, placeholder: str | None = None, *, value: str = '', **kwargs: Any):
		super().__init__(caption=caption, **kwargs)
		self._placeholder = placeholder
		self.value = value

	@property
	def placeholder(self) -> str | None:
		return self._placeholder

	@placeholder.setter
	def placeholder(self, value: str | None) -> None:
		self._placeholder = value


class PasswordField(TextField):
	pass


class ComboBox(Component):
	def __init__(
		self,
		caption: str | None = None,
		items: Iterable[Any] = (),
		*,
		placeholder: str | None = None,
		**kwargs: Any,
	):
		super().__init__(caption=caption, **kwargs)
		self.items = list(items)
		self._placeholder = placeholder
		self._value: Any = None

	@property
	def placeholder(self) -> str | None:
		return self._placeholder

	@placeholder.setter
	def placeholder(self, value: str | None) -> None:
		self._placeholder = value

	@property
	def value(self) -> Any:
		return self._value

	@value.setter
	def value(self, value: Any) -> None:
		if value is not None and value not in self.items:
			raise ValueError(f'{value!r} is not one of the items of {self!r}')
		self._value = value


class Text(Component):
	"""A plain text leaf."""

	def __init__(self, text: str = '', **kwargs: Any):
		super().__init__(**kwargs)
		self._text = text

	@property
	def text(self) -> str:
		return self._text

	@text.setter
	def text(self, value: str) -> None:
		self._text = value


class Dialog(HasComponents):
	"""A modal overlay attached to the UI while open.

	Like a real server-side dialog, ``close()`` only marks it closed: the client is
	expected to detach it afterwards, which never happens without a browser. Lookups
	prune such stale dialogs before searching.
	"""

	def __init__(self, *components: Component, **kwargs: Any):
		super().__init__(*components, **kwargs)
		self.opened = False

	def open(self, ui: 'UI | None' = None) -> None:
		if ui is None:
			from component_locator.ui.service import MockUI

			ui = MockUI.current()
		if ui is None:
			raise RuntimeError('Cannot open a dialog without a UI, call MockUI.setup() first')
		if self.parent is not ui:
			ui.add(self)
		self.opened = True

	def close(self) -> None:
		self.opened = False


class InternalServerError(Component):
	"""Shown by the host in place of a view whose code raised an unhandled exception."""

	def __init__(self, error_text: str = '', **kwargs: Any):
		super().__init__(**kwargs)
		self.error_text = error_text

	@property
	def text(self) -> str:
		return self.error_text


class UI(HasComponents):
	"""The root of a component tree, with the current navigation location."""

	def __init__(self, *components: Component, location: str = '', **kwargs: Any):
		super().__init__(*components, **kwargs)
		self.location = location.strip('/')

	def navigate(self, location: str) -> None:
		self.location = location.strip('/')
		logger.debug(f'🔗 Navigated to /{self.location}')
