import typing

from .casing import convert_keys
from .models import Schema


def project_attributes(
    resource: typing.Mapping[str, typing.Any], schema: Schema
) -> typing.Dict[str, typing.Any]:
    """
    Picks the attributes of ``resource`` that are rendered as its own properties.

    The whitelist narrows the keys first; relationship keys and blacklisted keys are then
    removed, and the remaining keys are case-converted last.

    :param Mapping[str, Any] resource: the resource.
    :param Schema schema: the schema of the resource.
    :return: a new dictionary.
    """
    if schema.whitelist:
        keys: typing.Iterable[str] = (k for k in resource if k in schema.whitelist)
    else:
        keys = resource.keys()

    attributes = {
        k: resource[k]
        for k in keys
        if not schema.is_relationship(k) and k not in schema.blacklist
    }

    if schema.convert_case is not None:
        attributes = convert_keys(attributes, schema.convert_case)
    return attributes
