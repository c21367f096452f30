"""
Symbolic names of the built-in column types.

Use these instead of raw literals when talking to the registry. Names below
the registered block are used by DDL tooling for engine-specific types that
have no type code of their own.
"""

ARRAY = 'ARRAY'
BIGINT = 'BIGINT'
BINARY = 'BINARY'
BIT = 'BIT'
BLOB = 'BLOB'
BOOLEAN = 'BOOLEAN'
CHAR = 'CHAR'
CLOB = 'CLOB'
DATALINK = 'DATALINK'
DATE = 'DATE'
DECIMAL = 'DECIMAL'
DISTINCT = 'DISTINCT'
DOUBLE = 'DOUBLE'
FLOAT = 'FLOAT'
INTEGER = 'INTEGER'
JAVA_OBJECT = 'JAVA_OBJECT'
LONGVARBINARY = 'LONGVARBINARY'
LONGVARCHAR = 'LONGVARCHAR'
NULL = 'NULL'
NUMERIC = 'NUMERIC'
OTHER = 'OTHER'
REAL = 'REAL'
REF = 'REF'
SMALLINT = 'SMALLINT'
STRUCT = 'STRUCT'
TIME = 'TIME'
TIMESTAMP = 'TIMESTAMP'
TIMESTAMPTZ = 'TIMESTAMPTZ'
TIMESTAMPLTZ = 'TIMESTAMPLTZ'
TINYINT = 'TINYINT'
VARBINARY = 'VARBINARY'
VARCHAR = 'VARCHAR'
SQLXML = 'SQLXML'
NCHAR = 'NCHAR'
NVARCHAR = 'NVARCHAR'
LONGNVARCHAR = 'LONGNVARCHAR'
NCLOB = 'NCLOB'

# Torque/Turbine schema aliases, name lookup only
BOOLEANINT = 'BOOLEANINT'
BOOLEANCHAR = 'BOOLEANCHAR'

# Not registered
GEOMETRY = 'GEOMETRY'
GEOGRAPHY = 'GEOGRAPHY'
POINT = 'POINT'
LINESTRING = 'LINESTRING'
POLYGON = 'POLYGON'
UUID = 'UUID'
VARBIT = 'VARBIT'
INTERVAL = 'INTERVAL'
IMAGE = 'IMAGE'
DATETIME2 = 'DATETIME2'
TSVECTOR = 'TSVECTOR'
