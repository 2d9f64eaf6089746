import typing

import sqlalchemy as sa  # type: ignore
from sqlalchemy import orm  # type: ignore
from sqlalchemy.orm.state import InstanceState  # type: ignore

from ...adapters import DefaultResourceAdapter
from ...interfaces import Shape


def is_alien_clause(sa_mapper: orm.Mapper, expression: sa.sql.ClauseElement) -> bool:
    if not isinstance(expression, sa.Column):
        return True
    if expression.table is None:
        return True
    return expression.table not in sa_mapper.tables


def foreign_identity(
    sa_mapper: orm.Mapper,
    property: orm.RelationshipProperty,
    loaded: typing.Mapping[str, typing.Any],
) -> typing.Optional[str]:
    """
    Builds the identifier of the object a many-to-one relationship refers to from the
    foreign key values held by the referring object.  Returns :py:const:`None` unless every
    foreign key value is loaded and not null.
    """
    values = []
    for local, _ in property.local_remote_pairs:
        if is_alien_clause(sa_mapper, local):
            return None
        try:
            prop = sa_mapper.get_property_by_column(local)
        except orm.exc.UnmappedColumnError:
            return None
        value = loaded.get(prop.key)
        if value is None:
            return None
        values.append(str(value))
    return "-".join(values) if values else None


class SQLAResourceAdapter(DefaultResourceAdapter):
    """
    Lets the serializer render SQLAlchemy mapped instances.

    Only the loaded state of an instance is read, so that rendering never emits SQL:
    unloaded column attributes and to-many relationships are left out, and an unloaded
    many-to-one relationship is given as the identifier found in its foreign key columns.
    """

    def _instance_state(self, value: typing.Any) -> typing.Optional[InstanceState]:
        if isinstance(value, type):
            return None
        state = sa.inspect(value, raiseerr=False)
        return state if isinstance(state, InstanceState) else None

    def classify(self, value: typing.Any) -> Shape:
        if value is not None and self._instance_state(value) is not None:
            return Shape.COMPOSITE
        return super().classify(value)

    def to_mapping(self, value: typing.Any) -> typing.Mapping[str, typing.Any]:
        state = self._instance_state(value)
        if state is None:
            return super().to_mapping(value)

        sa_mapper = state.mapper
        loaded = state.dict
        result: typing.Dict[str, typing.Any] = {}
        for column_prop in sa_mapper.column_attrs:
            if column_prop.key in loaded:
                result[column_prop.key] = loaded[column_prop.key]
        for rel_prop in sa_mapper.relationships:
            if rel_prop.key in loaded:
                result[rel_prop.key] = loaded[rel_prop.key]
            elif rel_prop.direction is orm.interfaces.MANYTOONE:
                id_ = foreign_identity(sa_mapper, rel_prop, loaded)
                if id_ is not None:
                    result[rel_prop.key] = id_
        return result
