import logging

from fastapi import FastAPI, APIRouter
from bitsquat.api.bitsquat_routes import router as bitsquat_router
from bitsquat.config.bconfig import LOG_LEVEL, PROGRAM_NAME, VERSION
from fastapi.middleware.cors import CORSMiddleware

logging.basicConfig(level=LOG_LEVEL)

# Create FastAPI application instance
app = FastAPI(title=PROGRAM_NAME, version=VERSION)

# Enable CORS middleware to allow frontend/backend communication
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allow all HTTP methods
    allow_headers=["*"],  # Allow all headers
)

# Create a top-level APIRouter
router = APIRouter()

# Include the bitsquat router under the '/bitsquat' path
router.include_router(bitsquat_router, prefix="/bitsquat")

# Include the top-level router into the main FastAPI app with a global '/api' prefix
app.include_router(router, prefix="/api")
