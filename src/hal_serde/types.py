import typing

JSONObject = typing.Mapping[str, typing.Any]
MutableJSONObject = typing.MutableMapping[str, typing.Any]

Link = JSONObject
Links = typing.MutableMapping[str, typing.Union[Link, typing.List[Link]]]
