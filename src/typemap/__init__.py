"""
Portable column type registry for schema comparison and DDL tooling.

All lookups can be called either as:
- Module functions: typemap.code_for_name('varchar')
- TypeRegistry methods: typemap.get_type_registry().code_for_name('varchar')

The module functions are facades over the process-wide registry.
"""
__version__ = '0.1.0'

from collections.abc import Iterable

from typemap import codes, names
from typemap.exceptions import TypeMapError, ValidationError
from typemap.options import RegistryOptions
from typemap.registry import TypeCategory, TypeEntry, TypeRegistry
from typemap.registry import build_registry, get_type_registry


def code_for_name(name: str) -> int | None:
    """Return the type code for a type name, or None if it is unknown.

    Raises ValidationError if name is empty.
    """
    return get_type_registry().code_for_name(name)


def name_for_code(code: int) -> str:
    """Return the type name for a code, or the code itself as a string.
    """
    return get_type_registry().name_for_code(code)


def describe_codes(type_codes: Iterable[int]) -> str:
    """Return the type names of the codes joined with ', '.
    """
    return get_type_registry().describe_codes(type_codes)


def is_numeric(code: int) -> bool:
    return get_type_registry().is_numeric(code)


def is_datetime(code: int) -> bool:
    return get_type_registry().is_datetime(code)


def is_text(code: int) -> bool:
    return get_type_registry().is_text(code)


def is_binary(code: int) -> bool:
    return get_type_registry().is_binary(code)


def is_special(code: int) -> bool:
    return get_type_registry().is_special(code)


def category_for_code(code: int) -> TypeCategory | None:
    """Return the category of a code, or None for unclassified codes.
    """
    return get_type_registry().category_for_code(code)


__all__ = [
    'codes',
    'names',
    'code_for_name',
    'name_for_code',
    'describe_codes',
    'is_numeric',
    'is_datetime',
    'is_text',
    'is_binary',
    'is_special',
    'category_for_code',
    'build_registry',
    'get_type_registry',
    'RegistryOptions',
    'TypeCategory',
    'TypeEntry',
    'TypeRegistry',
    'TypeMapError',
    'ValidationError',
]
