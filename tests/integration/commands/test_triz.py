"""Integration tests for the triz reference commands."""

from collections.abc import Callable
from typing import Any

import pytest


class TestTrizParams:
    def test_lists_every_parameter(
        self, ipramp_cli: Callable[..., None], read_json: Callable[[], Any]
    ) -> None:
        ipramp_cli("triz", "params", "-f", "json")

        params = read_json()
        assert [p["id"] for p in params] == list(range(1, 36))

    def test_category_filter(
        self, ipramp_cli: Callable[..., None], read_json: Callable[[], Any]
    ) -> None:
        ipramp_cli("triz", "params", "--category", "performance", "-f", "json")

        params = read_json()
        assert params
        assert {p["category"] for p in params} == {"performance"}


class TestTrizPrinciples:
    def test_shows_one_principle(
        self, ipramp_cli: Callable[..., None], read_json: Callable[[], Any]
    ) -> None:
        ipramp_cli("triz", "principles", "5", "-f", "json")

        assert read_json()["name"] == "Inversion / Edge Push"

    def test_unknown_principle_exits_not_found(
        self, ipramp_cli_with_exit_code: Callable[..., int]
    ) -> None:
        assert ipramp_cli_with_exit_code("triz", "principles", "999") == 3


class TestTrizLookup:
    def test_pair_returns_curated_order(
        self, ipramp_cli: Callable[..., None], read_json: Callable[[], Any]
    ) -> None:
        ipramp_cli("triz", "lookup", "1", "2", "-f", "json")

        assert [p["id"] for p in read_json()] == [4, 3, 9]

    def test_pair_is_directional(
        self, ipramp_cli: Callable[..., None], read_json: Callable[[], Any]
    ) -> None:
        ipramp_cli("triz", "lookup", "2", "1", "-f", "json")

        assert [p["id"] for p in read_json()] == [3, 12, 14]

    def test_uncurated_pair_is_empty(
        self,
        ipramp_cli: Callable[..., None],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        ipramp_cli("triz", "lookup", "1", "1")

        assert "No curated principles for this pair." in capsys.readouterr().out

    def test_improving_only_lists_pairings(
        self, ipramp_cli: Callable[..., None], read_json: Callable[[], Any]
    ) -> None:
        ipramp_cli("triz", "lookup", "1", "-f", "json")

        entries = read_json()
        assert entries[0] == {
            "improving": 1,
            "worsening": 2,
            "suggested_principles": [4, 3, 9],
        }
        assert {e["improving"] for e in entries} == {1}

    @pytest.mark.parametrize("args", [("0",), ("1", "99")])
    def test_unknown_parameter_exits_not_found(
        self, ipramp_cli_with_exit_code: Callable[..., int], args: tuple[str, ...]
    ) -> None:
        assert ipramp_cli_with_exit_code("triz", "lookup", *args) == 3
