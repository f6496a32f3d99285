"""Convenience runner for the identicon service.

Reads HOST/PORT (and a .env file) through the service settings.
Use:  PORT=8000 python run_server.py
"""
import uvicorn

from identicon_server.core.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("identicon_server.main:app", host=settings.host, port=settings.port, log_level=settings.log_level)
