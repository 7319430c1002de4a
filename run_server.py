#!/usr/bin/env python3
"""
Development server launcher for the Seedance relay.

For production, deploy the ASGI app ``seedance_relay.api.main:app`` behind a
proper server.
"""

import uvicorn
import sys
from pathlib import Path

# Add src to Python path so the package imports without installation
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

if __name__ == "__main__":
    print("Starting Seedance Relay Development Server")
    print(f"Project root: {project_root}")
    print("Server will be available at: http://localhost:8000")
    print("API documentation at: http://localhost:8000/docs")
    print("\n" + "="*50 + "\n")

    uvicorn.run(
        "seedance_relay.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,     # development only
        reload_dirs=[str(src_path)],
        log_level="info"
    )
