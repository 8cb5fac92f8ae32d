from __future__ import annotations

import pytest
from flagbind.core.common.exceptions import EmptyInputError
from flagbind.core.config.binding_config import BindingConfig
from flagbind.core.services.argument_mapper import ArgumentMapper, map_arguments


class TestArgumentMapper:
    @pytest.fixture
    def mapper(self) -> ArgumentMapper:
        return ArgumentMapper()

    @pytest.mark.parametrize(
        "args, expected",
        [
            (
                ["alice", "1", "bob", "2", "charlie", "3"],
                {"alice": "1", "bob": "2", "charlie": "3"},
            ),
            (
                ["alice", "1", "bob", "2", "charlie"],
                {"alice": "1", "bob": "2", "charlie": ""},
            ),
            (
                ["-alice", "1", "bob", "2", "-charlie"],
                {"alice": "1", "bob": "2", "charlie": ""},
            ),
            (["-alice", "1", "bob"], {"alice": "1", "bob": ""}),
            (["--name", "John", "-age", "30"], {"name": "John", "age": "30"}),
            (["solo"], {"solo": ""}),
        ],
    )
    def test_parse_various_inputs(
        self,
        mapper: ArgumentMapper,
        args: list[str],
        expected: dict[str, str],
    ) -> None:
        assert mapper.parse(args) == expected

    def test_even_length_yields_half_as_many_entries(
        self, mapper: ArgumentMapper
    ) -> None:
        args = ["-a", "1", "b", "2", "-c", "3", "d", "4"]
        result = mapper.parse(args)
        assert len(result) == len(args) // 2
        assert list(result) == ["a", "b", "c", "d"]

    def test_later_duplicate_overwrites_earlier(self, mapper: ArgumentMapper) -> None:
        assert mapper.parse(["-size", "1", "size", "2"]) == {"size": "2"}

    def test_values_keep_their_dashes(self, mapper: ArgumentMapper) -> None:
        assert mapper.parse(["-offset", "-5"]) == {"offset": "-5"}

    def test_empty_input_raises_sentinel(self, mapper: ArgumentMapper) -> None:
        with pytest.raises(EmptyInputError) as exc_info:
            mapper.parse([])
        assert exc_info.value.mapping == {}

    def test_accepts_tuples(self, mapper: ArgumentMapper) -> None:
        assert mapper.parse(("x", "y")) == {"x": "y"}

    def test_does_not_mutate_input(self, mapper: ArgumentMapper) -> None:
        args = ["a", "1", "b"]
        mapper.parse(args)
        assert args == ["a", "1", "b"]

    def test_custom_prefix(self) -> None:
        mapper = ArgumentMapper(flag_prefix="/")
        assert mapper.parse(["/out", "a.txt", "-v", "1"]) == {"out": "a.txt", "-v": "1"}

    def test_multi_character_prefix_is_stripped_repeatedly(self) -> None:
        mapper = ArgumentMapper(flag_prefix="--")
        assert mapper.parse(["----deep", "1", "-shallow", "2"]) == {
            "deep": "1",
            "-shallow": "2",
        }

    def test_empty_prefix_rejected(self) -> None:
        with pytest.raises(ValueError):
            ArgumentMapper(flag_prefix="")

    def test_non_string_prefix_rejected(self) -> None:
        with pytest.raises(TypeError):
            ArgumentMapper(flag_prefix=None)  # type: ignore[arg-type]

    def test_from_config_uses_prefix(self) -> None:
        mapper = ArgumentMapper.from_config(BindingConfig(flag_prefix="+"))
        assert mapper.flag_prefix == "+"
        assert mapper.parse(["+key", "value"]) == {"key": "value"}


def test_map_arguments_function() -> None:
    assert map_arguments(["-alice", "1", "bob"]) == {"alice": "1", "bob": ""}


def test_map_arguments_empty() -> None:
    with pytest.raises(EmptyInputError):
        map_arguments([])
