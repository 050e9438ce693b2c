"""Tests for MongoGateway against an in-memory mongomock database."""

import pytest

from sudoku_profiles.errors import InvalidRequestError
from sudoku_profiles.helpers.database_helpers import (
    USER_ACTIVE_GAMES,
    ModelKind,
    match_any,
)


class TestMatchAny:
    """Tests for combining clauses into one query."""

    @pytest.mark.unit
    def test_single_clause_is_used_directly(self):
        assert match_any([{"userID": "u"}]) == {"userID": "u"}

    @pytest.mark.unit
    def test_several_clauses_are_or_ed(self):
        assert match_any([{"a": 1}, {"b": 2}]) == {"$or": [{"a": 1}, {"b": 2}]}

    @pytest.mark.unit
    def test_no_clause_raises(self):
        with pytest.raises(ValueError):
            match_any([])


class TestCreate:
    """Tests for MongoGateway.create."""

    @pytest.mark.unit
    @pytest.mark.anyio
    async def test_inserts_list(self, gateway, collection, active_games):
        result = await gateway.create(active_games, USER_ACTIVE_GAMES)

        assert result["inserted_count"] == 2
        assert len(result["inserted_ids"]) == 2
        assert all(isinstance(i, str) for i in result["inserted_ids"])
        assert collection.count_documents({}) == 2

    @pytest.mark.unit
    @pytest.mark.anyio
    async def test_inserts_single_mapping_without_mutating_it(
        self, gateway, collection
    ):
        doc = {"userID": "user-3"}

        result = await gateway.create(doc, USER_ACTIVE_GAMES)

        assert result["inserted_count"] == 1
        assert doc == {"userID": "user-3"}
        assert collection.find_one({"userID": "user-3"}) is not None

    @pytest.mark.unit
    @pytest.mark.anyio
    async def test_empty_list_raises(self, gateway):
        with pytest.raises(InvalidRequestError):
            await gateway.create([], USER_ACTIVE_GAMES)

    @pytest.mark.unit
    @pytest.mark.anyio
    async def test_uses_model_collection(self, gateway, db):
        other = ModelKind(name="Other", collection="other")

        await gateway.create({"x": 1}, other)

        assert db.sync["other"].count_documents({}) == 1
        assert db.sync[USER_ACTIVE_GAMES.collection].count_documents({}) == 0


class TestSearch:
    """Tests for MongoGateway.search_matching_any."""

    @pytest.mark.unit
    @pytest.mark.anyio
    async def test_catch_all_returns_everything(self, gateway, seeded):
        docs = await gateway.search_matching_any([{}], USER_ACTIVE_GAMES)

        assert sorted(d["userID"] for d in docs) == ["user-1", "user-2"]
        assert all("_id" not in d and isinstance(d["id"], str) for d in docs)

    @pytest.mark.unit
    @pytest.mark.anyio
    async def test_elem_match_needs_both_states_in_one_move(self, gateway, seeded):
        clause = {
            "moves": {
                "$elemMatch": {
                    "puzzleCurrentState": "S1",
                    "puzzleCurrentNotesState": "N1",
                }
            }
        }

        docs = await gateway.search_matching_any([clause], USER_ACTIVE_GAMES)

        assert [d["userID"] for d in docs] == ["user-1"]

    @pytest.mark.unit
    @pytest.mark.anyio
    async def test_dot_path_matches_one_counter(self, gateway, seeded):
        clause = {"numWrongCellsPlayedPerStrategy.HIDDEN_SINGLE": 3}

        docs = await gateway.search_matching_any([clause], USER_ACTIVE_GAMES)

        assert [d["userID"] for d in docs] == ["user-2"]

    @pytest.mark.unit
    @pytest.mark.anyio
    async def test_any_clause_may_match(self, gateway, seeded):
        clauses = [{"userID": "user-1"}, {"currentTime": 45}]

        docs = await gateway.search_matching_any(clauses, USER_ACTIVE_GAMES)

        assert sorted(d["userID"] for d in docs) == ["user-1", "user-2"]

    @pytest.mark.unit
    @pytest.mark.anyio
    async def test_no_match_returns_empty_list(self, gateway, seeded):
        docs = await gateway.search_matching_any(
            [{"userID": "nobody"}], USER_ACTIVE_GAMES
        )

        assert docs == []


class TestUpdate:
    """Tests for MongoGateway.update_matching_any."""

    @pytest.mark.unit
    @pytest.mark.anyio
    async def test_sets_fields_on_matches(self, gateway, seeded):
        result = await gateway.update_matching_any(
            [{"userID": "user-2"}], {"currentTime": 60}, USER_ACTIVE_GAMES
        )

        assert result == {"matched_count": 1, "modified_count": 1}
        assert seeded.find_one({"userID": "user-2"})["currentTime"] == 60
        assert seeded.find_one({"userID": "user-1"})["currentTime"] == 120

    @pytest.mark.unit
    @pytest.mark.anyio
    async def test_zero_matches_is_not_an_error(self, gateway, seeded):
        result = await gateway.update_matching_any(
            [{"userID": "nobody"}], {"currentTime": 1}, USER_ACTIVE_GAMES
        )

        assert result == {"matched_count": 0, "modified_count": 0}

    @pytest.mark.unit
    @pytest.mark.anyio
    async def test_empty_patch_raises(self, gateway, seeded):
        with pytest.raises(InvalidRequestError):
            await gateway.update_matching_any([{}], {}, USER_ACTIVE_GAMES)


class TestDelete:
    """Tests for MongoGateway.delete_matching_any."""

    @pytest.mark.unit
    @pytest.mark.anyio
    async def test_deletes_matches(self, gateway, seeded):
        result = await gateway.delete_matching_any(
            [{"userID": "user-1"}], USER_ACTIVE_GAMES
        )

        assert result == {"deleted_count": 1}
        assert seeded.count_documents({}) == 1

    @pytest.mark.unit
    @pytest.mark.anyio
    async def test_zero_matches_is_not_an_error(self, gateway, seeded):
        result = await gateway.delete_matching_any(
            [{"userID": "nobody"}], USER_ACTIVE_GAMES
        )

        assert result == {"deleted_count": 0}
        assert seeded.count_documents({}) == 2
