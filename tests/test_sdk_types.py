"""Unit tests for mongo_data_api.types: SDK response types."""

import pytest

from mongo_data_api.exceptions import DataAPIError
from mongo_data_api.types import DataAPIResponse, UpdateResponse


class TestDataAPIResponse:
    def test_success(self) -> None:
        response = DataAPIResponse(data={"deletedCount": 1})
        assert response.is_ok is True
        assert response.is_error is False
        assert response.error is None

    def test_error(self) -> None:
        response: DataAPIResponse[None] = DataAPIResponse(error=DataAPIError("Bad Request", 400))
        assert response.is_ok is False
        assert response.is_error is True
        assert response.data is None

    def test_empty_is_success(self) -> None:
        # find_one with no match
        response: DataAPIResponse[None] = DataAPIResponse()
        assert response.is_ok is True
        assert response.data is None

    def test_falsy_data_is_kept(self) -> None:
        assert DataAPIResponse(data=[]).data == []
        assert DataAPIResponse(data=0).data == 0

    def test_data_and_error_exclusive(self) -> None:
        with pytest.raises(ValueError):
            DataAPIResponse(data={"x": 1}, error=DataAPIError("boom", 500))

    def test_frozen(self) -> None:
        response = DataAPIResponse(data=1)
        with pytest.raises(AttributeError):
            response.data = 2  # type: ignore[misc]

    def test_unwrap_returns_data(self) -> None:
        assert DataAPIResponse(data=[1, 2]).unwrap() == [1, 2]

    def test_unwrap_raises_error(self) -> None:
        error = DataAPIError("Unauthorized", 401)
        with pytest.raises(DataAPIError) as exc_info:
            DataAPIResponse(error=error).unwrap()
        assert exc_info.value is error

    def test_equality(self) -> None:
        assert DataAPIResponse(error=DataAPIError("x", 1)) == DataAPIResponse(error=DataAPIError("x", 1))
        assert DataAPIResponse(data={"a": 1}) == DataAPIResponse(data={"a": 1})


class TestPayloadTypes:
    def test_update_response_upserted_id_optional(self) -> None:
        plain: UpdateResponse = {"matchedCount": 1, "modifiedCount": 1}
        upserted: UpdateResponse = {"matchedCount": 0, "modifiedCount": 0, "upsertedId": "abc"}
        assert "upsertedId" not in plain
        assert upserted["upsertedId"] == "abc"
