"""
Registry of portable column types.

This module maps column type names (``VARCHAR``, ``TIMESTAMP``) to the
JDBC-style integer type codes drivers report, and back, and sorts each code
into one of a few coarse categories:

1. NUMERIC - integers, fixed and floating point, bit and boolean
2. TEXTUAL - character and character large object types
3. BINARY - byte strings and binary large objects
4. DATETIME - dates, times and timestamps
5. SPECIAL - everything structural (arrays, refs, objects, NULL)

Schema comparison and DDL tooling use it to reason about column types without
hard-coding per-engine logic. The registry is built once from a fixed table
and never changes afterwards, so reads need no locking.
"""
import logging
import threading
from collections.abc import Iterable
from dataclasses import fields
from enum import Enum
from types import MappingProxyType
from typing import Any, NamedTuple

from typemap import codes, names
from typemap.exceptions import ValidationError
from typemap.options import RegistryOptions

from libb import load_options

logger = logging.getLogger(__name__)

__all__ = [
    'TypeCategory',
    'TypeEntry',
    'TypeRegistry',
    'build_registry',
    'get_type_registry',
]


class TypeCategory(Enum):
    """Coarse semantic grouping of type codes.
    """
    NUMERIC = 'numeric'
    TEXTUAL = 'textual'
    BINARY = 'binary'
    DATETIME = 'datetime'
    SPECIAL = 'special'


class TypeEntry(NamedTuple):
    """A registered type: code, canonical name and category.
    """
    code: int
    name: str
    category: TypeCategory


STANDARD_TYPES: tuple[TypeEntry, ...] = (
    TypeEntry(codes.ARRAY, names.ARRAY, TypeCategory.SPECIAL),
    TypeEntry(codes.BIGINT, names.BIGINT, TypeCategory.NUMERIC),
    TypeEntry(codes.BINARY, names.BINARY, TypeCategory.BINARY),
    TypeEntry(codes.BIT, names.BIT, TypeCategory.NUMERIC),
    TypeEntry(codes.BLOB, names.BLOB, TypeCategory.BINARY),
    TypeEntry(codes.CHAR, names.CHAR, TypeCategory.TEXTUAL),
    TypeEntry(codes.CLOB, names.CLOB, TypeCategory.TEXTUAL),
    TypeEntry(codes.DATE, names.DATE, TypeCategory.DATETIME),
    TypeEntry(codes.DECIMAL, names.DECIMAL, TypeCategory.NUMERIC),
    TypeEntry(codes.DISTINCT, names.DISTINCT, TypeCategory.SPECIAL),
    TypeEntry(codes.DOUBLE, names.DOUBLE, TypeCategory.NUMERIC),
    TypeEntry(codes.FLOAT, names.FLOAT, TypeCategory.NUMERIC),
    TypeEntry(codes.INTEGER, names.INTEGER, TypeCategory.NUMERIC),
    TypeEntry(codes.JAVA_OBJECT, names.JAVA_OBJECT, TypeCategory.SPECIAL),
    TypeEntry(codes.LONGVARBINARY, names.LONGVARBINARY, TypeCategory.BINARY),
    TypeEntry(codes.LONGVARCHAR, names.LONGVARCHAR, TypeCategory.TEXTUAL),
    TypeEntry(codes.NULL, names.NULL, TypeCategory.SPECIAL),
    TypeEntry(codes.NUMERIC, names.NUMERIC, TypeCategory.NUMERIC),
    TypeEntry(codes.OTHER, names.OTHER, TypeCategory.SPECIAL),
    TypeEntry(codes.REAL, names.REAL, TypeCategory.NUMERIC),
    TypeEntry(codes.REF, names.REF, TypeCategory.SPECIAL),
    TypeEntry(codes.SMALLINT, names.SMALLINT, TypeCategory.NUMERIC),
    TypeEntry(codes.STRUCT, names.STRUCT, TypeCategory.SPECIAL),
    TypeEntry(codes.TIME, names.TIME, TypeCategory.DATETIME),
    TypeEntry(codes.TIMESTAMP, names.TIMESTAMP, TypeCategory.DATETIME),
    TypeEntry(codes.TINYINT, names.TINYINT, TypeCategory.NUMERIC),
    TypeEntry(codes.VARBINARY, names.VARBINARY, TypeCategory.BINARY),
    TypeEntry(codes.VARCHAR, names.VARCHAR, TypeCategory.TEXTUAL),
    TypeEntry(codes.ORACLE_TIMESTAMPTZ, names.TIMESTAMPTZ, TypeCategory.DATETIME),
    TypeEntry(codes.ORACLE_TIMESTAMPLTZ, names.TIMESTAMPLTZ, TypeCategory.DATETIME),
    )

# Torque/Turbine extensions, only seen when reading XML schema files
LEGACY_ALIASES: tuple[tuple[str, int], ...] = (
    (names.BOOLEANINT, codes.TINYINT),
    (names.BOOLEANCHAR, codes.CHAR),
    )

NATIONAL_TYPES: tuple[TypeEntry, ...] = (
    TypeEntry(codes.SQLXML, names.SQLXML, TypeCategory.TEXTUAL),
    TypeEntry(codes.NCHAR, names.NCHAR, TypeCategory.TEXTUAL),
    TypeEntry(codes.NCLOB, names.NCLOB, TypeCategory.TEXTUAL),
    TypeEntry(codes.NVARCHAR, names.NVARCHAR, TypeCategory.TEXTUAL),
    TypeEntry(codes.LONGNVARCHAR, names.LONGNVARCHAR, TypeCategory.TEXTUAL),
    )


class _RegistryBuilder:
    """Collects registrations, then freezes them into a TypeRegistry.
    """

    def __init__(self) -> None:
        self._name_to_code: dict[str, int] = {}
        self._code_to_name: dict[int, str] = {}
        self._category_to_codes: dict[TypeCategory, set[int]] = {}
        self._code_to_category: dict[int, TypeCategory] = {}

    def register(self, code: int, name: str, category: TypeCategory) -> None:
        """Register a type code under a name and category.

        Later registrations overwrite earlier ones for the same name or code.
        A code re-registered under another category leaves its old category.
        """
        type_name = name.upper()

        if type_name in self._name_to_code and self._name_to_code[type_name] != code:
            logger.debug(f'Type name {type_name} moved from {self._name_to_code[type_name]} to {code}')
        if code in self._code_to_name and self._code_to_name[code] != type_name:
            logger.debug(f'Type code {code} renamed from {self._code_to_name[code]} to {type_name}')

        self._name_to_code[type_name] = code
        self._code_to_name[code] = type_name

        previous = self._code_to_category.get(code)
        if previous is not None and previous is not category:
            self._category_to_codes[previous].discard(code)
            if not self._category_to_codes[previous]:
                del self._category_to_codes[previous]

        self._category_to_codes.setdefault(category, set()).add(code)
        self._code_to_category[code] = category

    def alias(self, name: str, code: int) -> None:
        """Register a name for lookup only, without reverse mapping or category.
        """
        self._name_to_code[name.upper()] = code

    def build(self) -> 'TypeRegistry':
        entries = tuple(
            TypeEntry(code, type_name, self._code_to_category[code])
            for code, type_name in self._code_to_name.items()
            )
        return TypeRegistry(
            self._name_to_code,
            self._code_to_name,
            {category: frozenset(members) for category, members in self._category_to_codes.items()},
            entries,
            )


def _build(options: RegistryOptions) -> 'TypeRegistry':
    """Populate a registry from the built-in tables.
    """
    builder = _RegistryBuilder()

    for entry in STANDARD_TYPES:
        builder.register(*entry)

    if options.include_jdbc3_types:
        builder.register(options.boolean_type_code, names.BOOLEAN, TypeCategory.NUMERIC)
        builder.register(options.datalink_type_code, names.DATALINK, TypeCategory.SPECIAL)

    if options.include_legacy_aliases:
        for name, code in LEGACY_ALIASES:
            builder.alias(name, code)

    if options.include_national_types:
        for entry in NATIONAL_TYPES:
            builder.register(*entry)

    registry = builder.build()
    logger.debug(f'Built type registry with {len(registry._name_to_code)} names '
                 f'and {len(registry)} type codes')
    return registry


class TypeRegistry:
    """Bidirectional, category-aware map of column type names and codes.

    Instances are read-only. Use ``TypeRegistry.get_instance()`` for the
    process-wide registry of built-in types, or ``build_registry`` for one
    built with non-default options.
    """

    _instance = None
    _lock = threading.RLock()

    def __init__(self, name_to_code: dict[str, int], code_to_name: dict[int, str],
                 category_to_codes: dict[TypeCategory, frozenset[int]],
                 entries: tuple[TypeEntry, ...]) -> None:
        self._name_to_code = MappingProxyType(dict(name_to_code))
        self._code_to_name = MappingProxyType(dict(code_to_name))
        self._category_to_codes = MappingProxyType(dict(category_to_codes))
        self._entries = entries

    @classmethod
    def get_instance(cls) -> 'TypeRegistry':
        """Get singleton instance."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = _build(RegistryOptions())
        return cls._instance

    def __len__(self) -> int:
        return len(self._code_to_name)

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, str):
            return item.upper() in self._name_to_code
        if isinstance(item, int):
            return item in self._code_to_name
        return False

    def __repr__(self) -> str:
        return f'<TypeRegistry names={len(self._name_to_code)} codes={len(self)}>'

    def code_for_name(self, name: str) -> int | None:
        """Return the type code for a type name.

        Args:
            name: Type name, case is ignored

        Returns
            The type code, or None if the name is unknown

        Raises
            ValidationError: if name is empty or not a string
        """
        if not isinstance(name, str) or not name:
            raise ValidationError(f'Type name must be a non-empty string, got {name!r}')
        return self._name_to_code.get(name.upper())

    def name_for_code(self, code: int) -> str:
        """Return the canonical type name for a type code.

        Unknown codes come back as their decimal string, so this never fails
        for codes contributed by drivers that are not registered here.
        """
        return self._code_to_name.get(code) or str(code)

    def describe_codes(self, type_codes: Iterable[int]) -> str:
        """Comma separated type names for the codes, in the given order.
        """
        return ', '.join(self.name_for_code(code) for code in type_codes)

    def _in_category(self, code: int, category: TypeCategory) -> bool:
        return code in self._category_to_codes.get(category, ())

    def is_numeric(self, code: int) -> bool:
        return self._in_category(code, TypeCategory.NUMERIC)

    def is_datetime(self, code: int) -> bool:
        return self._in_category(code, TypeCategory.DATETIME)

    def is_text(self, code: int) -> bool:
        return self._in_category(code, TypeCategory.TEXTUAL)

    def is_binary(self, code: int) -> bool:
        return self._in_category(code, TypeCategory.BINARY)

    def is_special(self, code: int) -> bool:
        return self._in_category(code, TypeCategory.SPECIAL)

    def category_for_code(self, code: int) -> TypeCategory | None:
        """Return the category of a type code, or None if unclassified.
        """
        for category, members in self._category_to_codes.items():
            if code in members:
                return category
        return None

    def codes_for_category(self, category: TypeCategory) -> frozenset[int]:
        return self._category_to_codes.get(category, frozenset())

    def entries(self) -> tuple[TypeEntry, ...]:
        """Canonical entries in registration order, aliases excluded.
        """
        return self._entries


@load_options(cls=RegistryOptions)
def build_registry(options: RegistryOptions | dict[str, Any] | str,
                   config: Any | None = None, **kw: Any) -> TypeRegistry:
    """Build a standalone registry, for injection where the built-in one won't do.

    Args:
        options: Can be:
                - RegistryOptions object
                - String name of a setting on config
                - Dictionary of options
                - Options specified as keyword arguments
        config: Configuration object (for loading from config files)
        **kw: Additional keyword arguments to override options

    Returns
        A new TypeRegistry, independent of the process-wide one
    """
    if isinstance(options, RegistryOptions):
        for field in fields(options):
            kw.pop(field.name, None)
    else:
        options_func = load_options(cls=RegistryOptions)(lambda o, c: o)
        options = options_func(options, config, **kw)

    return _build(options)


def get_type_registry() -> TypeRegistry:
    """Get the process-wide type registry."""
    return TypeRegistry.get_instance()
