from dataclasses import dataclass

from typemap import codes

from libb import ConfigOptions

__all__ = ['RegistryOptions']


@dataclass
class RegistryOptions(ConfigOptions):
    """Options

    Controls which groups of built-in types a registry is built with. The
    defaults reproduce the standard built-in table.

    - include_jdbc3_types: Register BOOLEAN and DATALINK (default: True)
    - boolean_type_code: Code BOOLEAN is registered under (default: 16)
    - datalink_type_code: Code DATALINK is registered under (default: 70)
    - include_legacy_aliases: Register BOOLEANINT/BOOLEANCHAR (default: True)
    - include_national_types: Register SQLXML, NCHAR, NCLOB, NVARCHAR and
      LONGNVARCHAR (default: True)
    """
    include_jdbc3_types: bool = True
    boolean_type_code: int = codes.BOOLEAN
    datalink_type_code: int = codes.DATALINK
    include_legacy_aliases: bool = True
    include_national_types: bool = True

    def __post_init__(self):
        for name in ('boolean_type_code', 'datalink_type_code'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f'{name} must be an integer type code, got {value!r}')
