from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..schema import ErrorResponse, ToolCallResponse, ToolListResponse
from ...errors import ErrorKind
from ...tools.dispatcher import ToolDispatcher
from ...tools.schema import CallToolRequest, ToolName, ToolResult
from ...utils.logging import get_logger

logger = get_logger("newsagent.api.news")

router = APIRouter(tags=["news"])
mcp_router = APIRouter(prefix="/tools", tags=["mcp"])

SEARCH_EXAMPLE = "/mcp/search_news?searchTerm=technology&pageSize=15"


def get_dispatcher(request: Request) -> ToolDispatcher:
    return request.app.state.dispatcher


def render(result: ToolResult, failure: str) -> JSONResponse:
    if result.success:
        return JSONResponse(result.to_payload())
    kind = result.error.kind if result.error else ErrorKind.upstream_failure
    message = result.error.message if result.error else None
    status_code = 400 if kind is ErrorKind.invalid_argument else 500
    body = ErrorResponse(error=failure, message=message)
    return JSONResponse(body.model_dump(exclude_none=True), status_code=status_code)


@router.get("/search_news", responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def search_news(
    searchTerm: Optional[str] = None,
    pageSize: Optional[str] = None,
    dispatcher: ToolDispatcher = Depends(get_dispatcher),
) -> JSONResponse:
    logger.info("🔧 GET /search_news")
    if not (searchTerm or "").strip():
        body = ErrorResponse(error="Missing searchTerm parameter", example=SEARCH_EXAMPLE)
        return JSONResponse(body.model_dump(exclude_none=True), status_code=400)

    result = await dispatcher.invoke(
        ToolName.search_news.value, {"searchTerm": searchTerm, "pageSize": pageSize}
    )
    return render(result, "Failed to search news")


@router.get("/get_news", responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def get_news(
    topic: Optional[str] = None,
    pageSize: Optional[str] = None,
    dispatcher: ToolDispatcher = Depends(get_dispatcher),
) -> JSONResponse:
    logger.info("🔧 GET /get_news")
    result = await dispatcher.invoke(
        ToolName.get_news.value, {"topic": topic, "pageSize": pageSize}
    )
    return render(result, "Failed to fetch news")


@mcp_router.get("", response_model=ToolListResponse)
async def list_tools(dispatcher: ToolDispatcher = Depends(get_dispatcher)) -> ToolListResponse:
    return ToolListResponse(tools=dispatcher.list_tools())


@mcp_router.post("/call", response_model=ToolCallResponse)
async def call_tool(
    request: CallToolRequest,
    dispatcher: ToolDispatcher = Depends(get_dispatcher),
) -> ToolCallResponse:
    envelope = await dispatcher.call_tool(request.name, request.arguments)
    return ToolCallResponse(**envelope)
