from fastapi import FastAPI
from app.api.v1 import api_router
from app.config import settings

app = FastAPI(
    title=settings.app_name,
    description="CRUD API over student records",
    version="1.0.0",
    debug=settings.debug
)

app.include_router(api_router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    return {
        "message": f"Welcome to {settings.app_name}",
        "description": "Create, read, update and delete student records"
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
