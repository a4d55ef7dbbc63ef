from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from commission_hub.config import APP_NAME, APP_VERSION, env_config
from commission_hub.database import engine, init_db, SessionLocal
from commission_hub.fixtures.demo_data import load_demo_data
from commission_hub.routes import personnel, commission_profile, sales, report
from commission_hub.utils.logger import app_logger
from commission_hub.utils.responses import api_error


@asynccontextmanager
async def lifespan(app: FastAPI):
    app_logger.info(f"Starting {APP_NAME} {APP_VERSION} in '{env_config['name']}' environment")

    if env_config.get('create_tables'):
        await init_db()

    if env_config.get('load_demo_data'):
        async with SessionLocal() as session:
            await load_demo_data(session)

    yield

    app_logger.info("Disposing database engine")
    await engine.dispose()


app = FastAPI(title=APP_NAME, version=APP_VERSION, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=env_config.get('cors_origins', ["*"]),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(personnel.router, prefix="/api/personnel", tags=["personnel"])
app.include_router(commission_profile.router, prefix="/api/commissionprofile", tags=["commission profile"])
app.include_router(sales.router, prefix="/api/sales", tags=["sales"])
app.include_router(report.router, prefix="/api/reports", tags=["reports"])


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies and query strings answer 400 with one message per field"""
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
        errors.append(f"{location}: {error.get('msg')}" if location else error.get('msg'))
    app_logger.warning(f"Request validation failed on {request.url.path}: {errors}")
    return api_error("Validation failed", errors)


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat()
    }


if __name__ == "__main__":
    import uvicorn

    server = env_config.get('server', {})
    uvicorn.run(app, host=server.get('host', "127.0.0.1"), port=server.get('port', 8002), log_level="info")
