import typing as t

Options = t.Mapping[str, t.Any]
Transform = t.Union[
    t.Callable[[t.Any, t.Any], t.Any],
    t.Callable[[t.Any, t.Any, Options], t.Any],
]
Reader = t.Callable[[t.Any], t.Any]
