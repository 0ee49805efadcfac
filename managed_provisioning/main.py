"""
FastAPI application exposing device-admin resolution.
"""

import logging

from fastapi import FastAPI

from managed_provisioning.api.routers import router as api_router
from managed_provisioning.config.settings import settings

# Create FastAPI app
app = FastAPI(title="Managed Provisioning API")
app.include_router(api_router)

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
