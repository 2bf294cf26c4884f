"""Errors raised by component lookups."""

from typing import Any


class LocatorError(Exception):
	"""Base class for every error raised by component-locator."""


class ComponentLookupError(LocatorError, AssertionError):
	"""The number of matching components is outside the expected count range.

	The message already contains the search description, the matched components and a
	dump of the whole component tree, so test reports show the full context.
	"""

	def __init__(self, message: str, spec: Any = None, matches: list[Any] | None = None):
		super().__init__(message)
		self.spec = spec
		self.matches = list(matches or [])


class NoComponentFoundError(ComponentLookupError):
	"""No visible component matched."""


class TooFewComponentsError(ComponentLookupError):
	"""Some components matched, but fewer than the count range requires."""


class TooManyComponentsError(ComponentLookupError):
	"""More components matched than the count range allows."""


class SearchSpecMisuseError(LocatorError, RuntimeError):
	"""A configure callback changed a count that the calling lookup owns.

	Deliberately not an ``AssertionError``: this is a bug in the test code and must not be
	mistaken for an expected lookup failure.
	"""


class InternalServerErrorDetected(LocatorError, AssertionError):
	"""The host UI contains an unhandled server error component."""

	def __init__(self, message: str, error_text: str = ''):
		super().__init__(message)
		self.error_text = error_text
