"""Configuration for component-locator, read lazily from the environment."""

import os

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
	return value.strip().lower()[:1] in ('t', 'y', '1')


class Config:
	"""Environment-backed settings.

	Every property re-reads its environment variable, so tests can flip values with
	``monkeypatch.setenv`` without reloading the module.
	"""

	@property
	def COMPONENT_LOCATOR_LOGGING_LEVEL(self) -> str:
		return os.getenv('COMPONENT_LOCATOR_LOGGING_LEVEL', 'info').lower()

	@property
	def COMPONENT_LOCATOR_SETUP_LOGGING(self) -> bool:
		return _as_bool(os.getenv('COMPONENT_LOCATOR_SETUP_LOGGING', 'true'))

	@property
	def COMPONENT_LOCATOR_MAX_TEXT_LENGTH(self) -> int:
		raw = os.getenv('COMPONENT_LOCATOR_MAX_TEXT_LENGTH', '100')
		try:
			value = int(raw)
		except ValueError:
			raise ValueError(f'COMPONENT_LOCATOR_MAX_TEXT_LENGTH must be an integer, got {raw!r}')
		return max(value, 1)


CONFIG = Config()
