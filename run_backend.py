#!/usr/bin/env python3
"""Start the room reconstruction API server."""

import logging
import os

import uvicorn

if __name__ == "__main__":
    logging.basicConfig(
        level=os.getenv("ROOMSCAN_LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "roomscan.api.main:app",
        host=os.getenv("ROOMSCAN_HOST", "0.0.0.0"),
        port=int(os.getenv("ROOMSCAN_PORT", "8000")),
        reload=True,
        reload_dirs=["roomscan"],
    )
