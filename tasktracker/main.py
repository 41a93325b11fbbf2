import fastapi
from fastapi import FastAPI, HTTPException
from tasktracker.config import LOG_LEVEL
from tasktracker.database import Base, engine
from tasktracker.logging_setup import setup_logging
from tasktracker.models import task, user  # noqa: F401  (register tables)
from tasktracker.routers import tasks, users

setup_logging(LOG_LEVEL)

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Task Tracker")

app.include_router(users.router)
app.include_router(tasks.router)

# Generic error handler to return JSON errors for unexpected exceptions
@app.exception_handler(Exception)
async def generic_exception_handler(request, exc):
    # Keep HTTPException behavior
    if isinstance(exc, HTTPException):
        raise exc
    return fastapi.responses.JSONResponse(status_code=500, content={"detail": "Internal server error"})
