from fastapi import FastAPI
from videotube.lifespan import lifespan
from videotube.middleware.cors import add_cors
from videotube.middleware.errors import add_exception_handlers
from videotube.api.router import add_router

application = FastAPI(
    title="VideoTube FastAPI Service",
    description="Video hosting backend API documentation: videos, comments and views",
    version="1.0.0",
    lifespan=lifespan
)

add_cors(application)
add_exception_handlers(application)
add_router(application)
