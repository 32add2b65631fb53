"""Core enumerations shared across rmlkit.

Key Components:
    - BaseEnum: Base class for string-based enumerations with flexible membership testing
    - SerializationFormat: RDF output formats a quad store can be asked for

Example:
    >>> "nquads" in SerializationFormat  # True
    >>> "rdfxml" in SerializationFormat  # False
"""

from enum import EnumMeta

from strenum import StrEnum


class MetaEnum(EnumMeta):
    """Metaclass allowing ``value in MyEnum`` checks on raw values.

    Example:
        >>> class MyEnum(BaseEnum):
        ...     VALUE = "value"
        >>> "value" in MyEnum  # True
        >>> "invalid" in MyEnum  # False
    """

    def __contains__(self, member: object) -> bool:
        if isinstance(member, self):
            return True
        try:
            self(member)
            return True
        except ValueError:
            return False


class BaseEnum(StrEnum, metaclass=MetaEnum):
    """Base class for string-based enumerations."""

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value


def _register_yaml_representer():
    """Serialize BaseEnum members (and subclasses) as plain YAML strings."""
    import yaml

    def base_enum_representer(dumper, data):
        return dumper.represent_scalar("tag:yaml.org,2002:str", str(data.value))

    yaml.add_representer(BaseEnum, base_enum_representer)
    yaml.add_multi_representer(BaseEnum, base_enum_representer)
    yaml.add_multi_representer(
        BaseEnum, base_enum_representer, Dumper=yaml.SafeDumper
    )


_register_yaml_representer()


class SerializationFormat(BaseEnum):
    """RDF serialization formats known to quad stores.

    Attributes:
        NQUADS: Line-based N-Quads
        TURTLE: Turtle
        JSONLD: JSON-LD
        TRIX: TriX (XML)
        TRIG: TriG
    """

    NQUADS = "nquads"
    TURTLE = "turtle"
    JSONLD = "jsonld"
    TRIX = "trix"
    TRIG = "trig"
