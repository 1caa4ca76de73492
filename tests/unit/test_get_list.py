"""
Unit tests for Bitrix24 get/list method
"""

from types import SimpleNamespace
from typing import List

import pytest
from pydantic import BaseModel

from crm_integrations.src.exceptions import InvalidPayloadError, ResourceFetchError
from crm_integrations.src.methods.get_list import GetListMethod, handle_get_list_payload
from shared.models.bitrix import LISTABLE_METHODS, ListPayload, Method


class Deal(BaseModel):
    ID: str
    TITLE: str


class TestHandleGetListPayload:
    """Tests for list response validation"""

    def test_error_raises_resource_fetch_error(self):
        """Test that error field fails the call"""
        payload = ListPayload.model_validate({
            "error": "not found",
            "error_description": "Not found"
        })

        with pytest.raises(ResourceFetchError) as exc_info:
            handle_get_list_payload(payload)

        assert "not found" in str(exc_info.value)
        assert exc_info.value.error == "not found"
        assert exc_info.value.description == "Not found"

    def test_empty_error_is_ignored(self):
        """Test that falsy error is treated as success"""
        payload = ListPayload.model_validate({"result": [], "error": ""})

        assert handle_get_list_payload(payload) is payload

    def test_result_returned_unchanged(self):
        """Test successful payload is returned as is"""
        payload = ListPayload.model_validate({"result": [{"ID": "1"}], "total": 1})

        assert handle_get_list_payload(payload) is payload
        assert payload.total == 1


class TestGetListMethod:
    """Tests for list execution"""

    @pytest.mark.asyncio
    async def test_success(self, mock_get):
        """Test payload without error resolves"""
        mock_get.return_value = SimpleNamespace(body={
            "result": [{"ID": "1", "TITLE": "Deal"}],
            "total": 1,
            "time": {"start": 1.0}
        })
        get_list = GetListMethod(mock_get)

        payload = await get_list(Method.LIST_DEALS)

        mock_get.assert_awaited_once_with("crm.deal.list", query=None)
        assert payload.result == [{"ID": "1", "TITLE": "Deal"}]
        assert payload.error is None

    @pytest.mark.asyncio
    async def test_error(self, mock_get):
        """Test payload with error rejects"""
        mock_get.return_value = SimpleNamespace(body={"error": "not found"})
        get_list = GetListMethod(mock_get)

        with pytest.raises(ResourceFetchError, match="not found"):
            await get_list(Method.GET_DEAL, {"ID": 999})

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", [
        {"filter": {"STAGE_ID": "NEW"}, "start": 50},
        "filter[STAGE_ID]=NEW&start=50",
    ])
    async def test_query_passed_through(self, mock_get, query):
        """Test mapping and pre-encoded queries reach the transport unchanged"""
        mock_get.return_value = SimpleNamespace(body={"result": []})
        get_list = GetListMethod(mock_get)

        await get_list("crm.deal.list", query)

        mock_get.assert_awaited_once_with("crm.deal.list", query=query)

    @pytest.mark.asyncio
    async def test_result_type(self, mock_get):
        """Test result is validated into the requested type"""
        mock_get.return_value = SimpleNamespace(body={
            "result": [{"ID": "1", "TITLE": "First"}, {"ID": "2", "TITLE": "Second"}],
            "next": 2,
            "total": 10
        })
        get_list = GetListMethod(mock_get)

        payload = await get_list(Method.LIST_DEALS, result_type=List[Deal])

        assert [deal.TITLE for deal in payload.result] == ["First", "Second"]
        assert payload.next == 2

    @pytest.mark.asyncio
    async def test_invalid_body(self, mock_get):
        """Test non-object body is rejected"""
        mock_get.return_value = SimpleNamespace(body=["not", "an", "object"])
        get_list = GetListMethod(mock_get)

        with pytest.raises(InvalidPayloadError):
            await get_list(Method.LIST_DEALS)

    @pytest.mark.asyncio
    async def test_transport_errors_propagate(self, mock_get):
        """Test HTTP capability errors are not wrapped"""
        mock_get.side_effect = TimeoutError()
        get_list = GetListMethod(mock_get)

        with pytest.raises(TimeoutError):
            await get_list(Method.LIST_DEALS)


class TestListableMethods:
    """Tests for method catalog"""

    def test_list_methods_are_listable(self):
        """Test *.list methods are in LISTABLE_METHODS"""
        assert Method.LIST_DEALS in LISTABLE_METHODS
        assert Method.LIST_LEADS in LISTABLE_METHODS
        assert Method.BATCH not in LISTABLE_METHODS

    def test_method_values(self):
        """Test enum values match API names"""
        assert Method.BATCH.value == "batch"
        assert Method.GET_LEAD.value == "crm.lead.get"
