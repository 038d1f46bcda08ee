"""Run the toolshed FastAPI app with uvicorn."""
from __future__ import annotations
import os

import uvicorn

def main() -> None:
    host = os.getenv("TOOLSHED_HOST", "127.0.0.1")
    port = int(os.getenv("TOOLSHED_PORT", "8000"))
    uvicorn.run("toolshed.serve.app:app", host=host, port=port)

if __name__ == "__main__":
    main()
