#!/usr/bin/env python3
"""
MedInfer — Run the API server

Usage:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --assets models --config configs/medinfer.yaml
"""

import os
import sys
import argparse
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import uvicorn


def main():
    parser = argparse.ArgumentParser(description="MedInfer API Server")
    parser.add_argument("--host", default="0.0.0.0", help="Host (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=5000, help="Port (default: 5000)")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--workers", type=int, default=1, help="Number of workers")
    parser.add_argument("--assets", help="Model assets directory")
    parser.add_argument("--config", help="MedInfer YAML config")

    args = parser.parse_args()

    # The app reads its settings from the environment (APIConfig.from_env)
    os.environ["API_HOST"] = args.host
    os.environ["API_PORT"] = str(args.port)
    if args.assets:
        os.environ["MODEL_ASSETS_DIR"] = args.assets
    if args.config:
        os.environ["MEDINFER_CONFIG"] = args.config

    print("=" * 60)
    print("MedInfer — API Server")
    print("=" * 60)
    print(f"   Host:   {args.host}")
    print(f"   Port:   {args.port}")
    print(f"   Assets: {args.assets or 'models'}")
    print(f"   Reload: {args.reload}")
    print("=" * 60)

    uvicorn.run(
        "medinfer.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
        log_level="info",
    )


if __name__ == "__main__":
    main()
