"""Helper script for exercising the upload endpoint."""

import argparse
import base64
import json
import mimetypes
import sys
import urllib.error
import urllib.parse
import urllib.request
from pathlib import Path


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Upload an image and save its binary and hex pixel text."
    )
    parser.add_argument(
        "input_image",
        type=Path,
        help="Path to the image to encode.",
    )
    parser.add_argument(
        "--binary-output",
        type=Path,
        default=Path("binary.txt"),
        help="Where to write the binary text (default: %(default)s).",
    )
    parser.add_argument(
        "--hex-output",
        type=Path,
        default=Path("hex.txt"),
        help="Where to write the hex text (default: %(default)s).",
    )
    parser.add_argument(
        "--url",
        default="http://localhost:8080/upload",
        help="Endpoint URL or base (host:port) for the running service.",
    )
    return parser


def resolve_endpoint(url: str) -> str:
    parsed = urllib.parse.urlparse(url)
    if parsed.path in ("", "/"):
        parsed = parsed._replace(path="/upload")
    return urllib.parse.urlunparse(parsed)


def build_payload(image_path: Path) -> bytes:
    """JSON body for ``POST /upload`` carrying the file at ``image_path``."""
    filetype, _ = mimetypes.guess_type(image_path.name)
    return json.dumps({
        "file": {
            "filetype": filetype or "application/octet-stream",
            "contents": base64.b64encode(image_path.read_bytes()).decode("ascii"),
        },
    }).encode("utf-8")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    request = urllib.request.Request(
        resolve_endpoint(args.url),
        data=build_payload(args.input_image),
        headers={"Content-Type": "application/json"},
    )

    try:
        with urllib.request.urlopen(request) as response:
            body = response.read().decode("utf-8")
    except urllib.error.HTTPError as exc:
        sys.stderr.write(f"Request failed ({exc.code}): {exc.read().decode('utf-8')}\n")
        return 1

    data = json.loads(body)
    args.binary_output.write_text(data["binary"], encoding="ascii")
    args.hex_output.write_text(data["hex"], encoding="ascii")
    print(f"Saved binary text to {args.binary_output} and hex text to {args.hex_output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
