"""
Tailwind Theme Converter MCP Server - FastAPI implementation
Provides endpoints for converting theme variables between Tailwind v3 and v4
"""

import logging
import os

from fastapi import FastAPI
import uvicorn
from fastapi_mcp import FastApiMCP

# Routers and shared state
from routers import themeTools_router

HOST = os.getenv("THEME_CONVERTER_HOST", "0.0.0.0")
PORT = int(os.getenv("THEME_CONVERTER_PORT", "8973"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Tailwind Theme Converter MCP Server",
    description="A FastAPI server for converting Tailwind theme variables between v3 (HSL) and v4 (OKLCH)",
    version="1.0.0"
)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}

# Mount routers (paths unchanged)
app.include_router(themeTools_router)

def run():
    """Mount the MCP bridge and serve."""
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    mcp = FastApiMCP(app, exclude_operations=[])
    mcp.mount_http()
    logger.info("Serving on %s:%d", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT)

if __name__ == "__main__":
    run()
