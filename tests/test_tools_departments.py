import json

import pytest

from fakturownia_mcp.errors import InvalidParamsError
from fakturownia_mcp.tools import NOT_HANDLED
from fakturownia_mcp.tools.departments import handle_departments_methods


@pytest.mark.asyncio
async def test_department_crud_paths(api, transport):
    await handle_departments_methods("fakt_get_departments", {}, api)
    assert transport.last.url.path == "/departments.json"
    assert dict(transport.last.url.params) == {"api_token": "tok"}

    await handle_departments_methods("fakt_get_department", {"departmentId": 4}, api)
    assert transport.last.url.path == "/departments/4.json"

    await handle_departments_methods("fakt_create_department", {"departmentData": {"name": "Oddział"}}, api)
    assert json.loads(transport.last.content) == {"api_token": "tok", "department": {"name": "Oddział"}}

    await handle_departments_methods(
        "fakt_update_department", {"departmentId": 4, "departmentData": {"shortcut": "OD"}}, api
    )
    assert transport.last.method == "PUT"

    await handle_departments_methods("fakt_delete_department", {"departmentId": 4}, api)
    assert transport.last.method == "DELETE"
    assert len(transport.requests) == 5


@pytest.mark.asyncio
async def test_department_required_fields(api):
    with pytest.raises(InvalidParamsError, match="Department data is required for updating a department"):
        await handle_departments_methods("fakt_update_department", {"departmentId": 4}, api)
    with pytest.raises(InvalidParamsError, match="Department ID is required for deleting a department"):
        await handle_departments_methods("fakt_delete_department", {}, api)


@pytest.mark.asyncio
async def test_department_handler_ignores_unknown(api):
    assert await handle_departments_methods("tools/call", {}, api) is NOT_HANDLED
