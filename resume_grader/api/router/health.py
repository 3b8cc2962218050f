from fastapi import APIRouter, status

health_check = APIRouter()


@health_check.get("/health", tags=["health"], status_code=status.HTTP_200_OK)
async def ping():
    return {"status": "ok"}
