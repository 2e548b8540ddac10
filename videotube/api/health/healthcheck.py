import logging
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from videotube.db.dependency import get_db

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/health",
    tags=["Health"]
)


@router.get(
    "/alive",
    summary="Liveness Check",
    description="Return whether the video service process is accepting requests",
    responses={
        200: {
            "description": "When server is alive",
            "content": {
                "application/json": {
                    "example": {"message": "yes"}
                }
            }
        }
    }
)
async def healthcheck():
    return {"message": "yes"}


@router.get(
    "/ready",
    summary="Readiness Check",
    description="Return whether the database answers a trivial query",
    responses={
        503: {"description": "When the database cannot be reached"}
    }
)
async def readiness(db: AsyncSession = Depends(get_db)):
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database readiness check failed")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"message": "database unavailable"}
        )
    return {"message": "yes", "database": "ok"}
