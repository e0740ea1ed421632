# shop_admin/core/responses.py

"""
상점 관리 API 전반에서 사용하는 공통 JSON 응답 봉투(envelope)를 정의합니다.

    { "success": bool, "data": T, "count": int, "message": str, "error": str }

오류는 ApiException으로 발생시키며, main.py에 등록된 핸들러가
같은 봉투 형식({"success": false, "error": ...})으로 변환합니다.
"""

from typing import Any, Generic, List, Optional, TypeVar

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

DataT = TypeVar("DataT")
ItemT = TypeVar("ItemT")


class ApiResponse(BaseModel, Generic[DataT]):
    """공통 응답 봉투"""
    success: bool = True
    data: Optional[DataT] = None
    count: Optional[int] = None
    message: Optional[str] = None
    error: Optional[str] = None


class StagingBulkSave(BaseModel, Generic[ItemT]):
    """
    스테이징 일괄 저장 요청 본문.
    items는 활성 상태로, removed는 삭제 예정 상태로 저장됩니다.
    """
    items: List[ItemT] = []
    removed: List[ItemT] = []


class StagingBulkResult(BaseModel):
    saved: int
    removed: int


class ApiException(HTTPException):
    """봉투 형식으로 응답되는 HTTP 예외"""

    def __init__(self, status_code: int, message: str):
        super().__init__(status_code=status_code, detail=message)
        self.message = message


def success_response(data: Any = None, *, message: Optional[str] = None, count: Optional[int] = None) -> dict:
    return {"success": True, "data": data, "count": count, "message": message}


async def api_exception_handler(request: Request, exc: ApiException) -> JSONResponse:
    """ApiException -> {"success": false, "error": message}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": exc.message},
    )
