from component_locator.locator.adapter import TreeAdapter, get_default_adapter, set_default_adapter
from component_locator.locator.service import ComponentLocator, expect_none, find_all, get_one
from component_locator.locator.views import CountRange, DescribedPredicate, SearchSpec

__all__ = [
	'ComponentLocator',
	'CountRange',
	'DescribedPredicate',
	'SearchSpec',
	'TreeAdapter',
	'expect_none',
	'find_all',
	'get_default_adapter',
	'get_one',
	'set_default_adapter',
]
