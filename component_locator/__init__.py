from component_locator.config import CONFIG
from component_locator.logging_config import setup_logging

if CONFIG.COMPONENT_LOCATOR_SETUP_LOGGING:
	setup_logging()

from component_locator.exceptions import (  # noqa: E402
	ComponentLookupError,
	InternalServerErrorDetected,
	LocatorError,
	NoComponentFoundError,
	SearchSpecMisuseError,
	TooFewComponentsError,
	TooManyComponentsError,
)
from component_locator.locator import (  # noqa: E402
	ComponentLocator,
	CountRange,
	DescribedPredicate,
	SearchSpec,
	TreeAdapter,
	expect_none,
	find_all,
	get_one,
	set_default_adapter,
)

__all__ = [
	'ComponentLocator',
	'ComponentLookupError',
	'CountRange',
	'DescribedPredicate',
	'InternalServerErrorDetected',
	'LocatorError',
	'NoComponentFoundError',
	'SearchSpec',
	'SearchSpecMisuseError',
	'TooFewComponentsError',
	'TooManyComponentsError',
	'TreeAdapter',
	'expect_none',
	'find_all',
	'get_one',
	'set_default_adapter',
]
