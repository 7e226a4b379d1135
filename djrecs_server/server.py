#!/usr/bin/env python3
"""
DJ Session Recommendations Server — entrypoint for `python -m djrecs_server.server`.
"""

import uvicorn

from .app import app
from .config import get_config

if __name__ == "__main__":
    config = get_config()
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())
