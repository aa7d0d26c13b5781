#!/usr/bin/env python3
"""
Entry point for running the Finance Tracker server.

Usage:
    python run.py [--port PORT] [--host HOST] [--no-browser]
"""

import argparse
import webbrowser
import qrcode
import uvicorn

from finance_tracker.config import load_settings


def print_qr_code(url: str) -> None:
    """Print a QR code to the terminal."""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=1,
        border=1,
    )
    qr.add_data(url)
    qr.make(fit=True)

    # Print QR code using ASCII
    qr.print_ascii(invert=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Finance Tracker")
    parser.add_argument("--port", type=int, default=8000, help="Port to run on")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--no-browser", action="store_true", help="Don't open browser")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    return parser


def main():
    args = build_parser().parse_args()
    settings = load_settings()

    url = f"http://{args.host}:{args.port}"

    print("\n" + "=" * 50)
    print("  Finance Tracker")
    print("=" * 50)
    print(f"\n  URL:      {url}")
    print(f"  Database: {settings.db_path}\n")

    try:
        print_qr_code(url)
    except OSError:
        pass  # QR code is optional

    print("\n  Press Ctrl+C to stop the server\n")
    print("=" * 50 + "\n")

    if not args.no_browser:
        webbrowser.open(f"{url}/docs")

    uvicorn.run(
        "finance_tracker.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
