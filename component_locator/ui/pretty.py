# @file purpose: Renders components and component trees for lookup failure messages

from component_locator.config import CONFIG
from component_locator.ui.views import Button, ComboBox, Component, Dialog, TextField


def cap_text_length(text: str, max_length: int) -> str:
	"""Cap text length for display."""
	if len(text) <= max_length:
		return text
	return text[:max_length] + '...'


def to_pretty_string(component: Component) -> str:
	"""One-line description, e.g. ``Button[#ok, caption='Save', styles='primary']``."""
	max_length = CONFIG.COMPONENT_LOCATOR_MAX_TEXT_LENGTH
	parts: list[str] = []
	if not component.visible:
		parts.append('INVIS')
	if isinstance(component, Button) and not component.enabled:
		parts.append('DISABLED')
	if isinstance(component, Dialog) and not component.opened:
		parts.append('CLOSED')
	if component.id:
		parts.append(f'#{component.id}')
	if component.caption is not None:
		parts.append(f"caption='{cap_text_length(component.caption, max_length)}'")
	if component.placeholder is not None:
		parts.append(f"placeholder='{cap_text_length(component.placeholder, max_length)}'")
	if isinstance(component, (TextField, ComboBox)) and component.value not in (None, ''):
		parts.append(f"value='{cap_text_length(str(component.value), max_length)}'")
	# the button's text is its caption, already shown
	if component.text and not isinstance(component, Button):
		parts.append(f"text='{cap_text_length(component.text, max_length)}'")
	if component.style_name:
		parts.append(f"styles='{component.style_name}'")
	return f'{type(component).__name__}[{", ".join(parts)}]'


def to_pretty_tree(component: Component) -> str:
	"""Multi-line dump of ``component`` and all of its descendants."""
	lines: list[str] = []

	def render(node: Component, prefix: str, is_last: bool) -> None:
		lines.append(f'{prefix}{"└── " if is_last else "├── "}{to_pretty_string(node)}')
		children = node.children
		child_prefix = prefix + ('    ' if is_last else '│   ')
		for index, child in enumerate(children):
			render(child, child_prefix, index == len(children) - 1)

	render(component, '', True)
	return '\n'.join(lines)
