import config
import pytest
from typemap import codes, names
from typemap.options import RegistryOptions
from typemap.registry import TypeCategory, TypeRegistry, build_registry


def test_init_defaults():
    """Test default initialization"""
    options = RegistryOptions()

    assert options.include_jdbc3_types is True
    assert options.boolean_type_code == codes.BOOLEAN
    assert options.datalink_type_code == codes.DATALINK
    assert options.include_legacy_aliases is True
    assert options.include_national_types is True


def test_validation():
    """Test validation rules"""
    with pytest.raises(ValueError):
        RegistryOptions(boolean_type_code='16')

    with pytest.raises(ValueError):
        RegistryOptions(datalink_type_code=None)

    with pytest.raises(ValueError):
        RegistryOptions(boolean_type_code=True)


def test_build_registry_defaults_match_singleton():
    """Test a registry built with default options matches the built-in one"""
    registry = build_registry(RegistryOptions())
    builtin = TypeRegistry.get_instance()

    assert registry is not builtin
    assert registry.entries() == builtin.entries()
    assert registry.code_for_name(names.BOOLEANINT) == codes.TINYINT


def test_build_registry_from_dict():
    """Test options given as a dictionary"""
    registry = build_registry({'include_legacy_aliases': False})

    assert registry.code_for_name(names.BOOLEANINT) is None
    assert registry.code_for_name(names.BOOLEANCHAR) is None
    assert registry.code_for_name(names.TINYINT) == codes.TINYINT

    # The process-wide registry is unaffected
    assert TypeRegistry.get_instance().code_for_name(names.BOOLEANINT) == codes.TINYINT


def test_build_registry_from_config():
    """Test options loaded by name from a config module"""
    registry = build_registry('legacy', config=config)

    assert registry.code_for_name(names.BOOLEAN) is None
    assert registry.code_for_name(names.DATALINK) is None
    assert registry.code_for_name(names.NVARCHAR) is None
    assert registry.name_for_code(codes.BOOLEAN) == '16'
    assert not registry.is_text(codes.SQLXML)

    # Aliases and standard types are still there
    assert registry.code_for_name(names.BOOLEANCHAR) == codes.CHAR
    assert registry.code_for_name(names.TIMESTAMPTZ) == codes.ORACLE_TIMESTAMPTZ
    assert len(registry) == 30


def test_build_registry_boolean_code_override():
    """Test BOOLEAN registered under a driver-specific code replaces the old name"""
    registry = build_registry('oldboolean', config=config)

    assert registry.code_for_name(names.BOOLEAN) == codes.BIT
    assert registry.name_for_code(codes.BIT) == names.BOOLEAN

    # BIT still resolves forward, and the code stays in one category
    assert registry.code_for_name(names.BIT) == codes.BIT
    assert registry.category_for_code(codes.BIT) is TypeCategory.NUMERIC
    assert registry.name_for_code(codes.BOOLEAN) == '16'
    assert not registry.is_numeric(codes.BOOLEAN)


def test_build_registry_category_move():
    """Test a code re-registered under another category leaves its old one"""
    registry = build_registry(RegistryOptions(datalink_type_code=codes.VARCHAR))

    assert registry.name_for_code(codes.VARCHAR) == names.DATALINK
    assert registry.is_special(codes.VARCHAR)
    assert not registry.is_text(codes.VARCHAR)
    assert registry.code_for_name(names.VARCHAR) == codes.VARCHAR
