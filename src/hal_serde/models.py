"""
Classes in :py:mod:`hal_serde.models` are the validated form of schema registrations.
"""

import dataclasses
import typing

from .casing import CaseStyle
from .options import EMPTY, OptionSpec

DEFAULT_SCHEMA = "default"


@dataclasses.dataclass(frozen=True)
class EmbeddedSpec:
    """
    :py:class:`EmbeddedSpec` describes a relationship of a resource type.
    """

    type: str
    """
    The registered resource type of the related resources.
    """

    schema: str = DEFAULT_SCHEMA
    """
    The schema of ``type`` the related resources are rendered with.
    """

    links: OptionSpec = EMPTY
    """
    Links contributed to the parent resource for every related value, populated or not.
    """


@dataclasses.dataclass(frozen=True)
class Schema:
    """
    :py:class:`Schema` describes how a resource type is rendered under a schema name.
    """

    blacklist: typing.FrozenSet[str] = frozenset()
    whitelist: typing.Tuple[str, ...] = ()
    links: OptionSpec = EMPTY
    top_level_links: OptionSpec = EMPTY
    top_level_meta: OptionSpec = EMPTY
    embedded: typing.Mapping[str, EmbeddedSpec] = dataclasses.field(default_factory=dict)
    convert_case: typing.Optional[CaseStyle] = None

    def is_relationship(self, name: str) -> bool:
        return name in self.embedded
