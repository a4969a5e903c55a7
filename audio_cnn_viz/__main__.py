"""
Command Line Interface
======================
Render a saved classifier response, classify a WAV file, or serve the page.

    python -m audio_cnn_viz render response.json --html out.html --png out.png
    python -m audio_cnn_viz classify dog.wav --html out.html
    python -m audio_cnn_viz serve --port 8002
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from audio_cnn_viz import config
from audio_cnn_viz.client import InferenceClient
from audio_cnn_viz.export import save_report
from audio_cnn_viz.schemas import ApiResponse
from audio_cnn_viz.session import ClassificationSession, RequestState, SessionSnapshot
from audio_cnn_viz.view import VisualizationView


logger = logging.getLogger("audio_cnn_viz.cli")


def _write_outputs(snapshot: SessionSnapshot, html_path: str | None, png_path: str | None) -> None:
    if html_path:
        out = Path(html_path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(VisualizationView().render_page(snapshot), encoding="utf-8")
        logger.info("Saved page: %s", out)
    if png_path and snapshot.result is not None:
        save_report(snapshot.result, Path(png_path))


def cmd_render(args: argparse.Namespace) -> int:
    try:
        data = json.loads(Path(args.response).read_text(encoding="utf-8"))
        response = ApiResponse.model_validate(data)
    except (OSError, ValueError, ValidationError) as exc:
        logger.error("Cannot load response %s: %s", args.response, exc)
        return 1

    snapshot = SessionSnapshot(state=RequestState.RESOLVED, result=response)
    _write_outputs(snapshot, args.html, args.png)
    return 0


def cmd_classify(args: argparse.Namespace) -> int:
    wav = Path(args.wav)
    try:
        audio_bytes = wav.read_bytes()
    except OSError as exc:
        logger.error("Cannot read %s: %s", wav, exc)
        return 1

    client = InferenceClient(url=args.url, timeout=args.timeout)
    try:
        snapshot = ClassificationSession().submit(wav.name, audio_bytes, client.classify)
    finally:
        client.close()

    _write_outputs(snapshot, args.html, args.png)
    if snapshot.state is not RequestState.RESOLVED:
        logger.error("Classification failed: %s", snapshot.error)
        return 1

    for pred in snapshot.result.top_predictions(config.TOP_K_PREDICTIONS):
        print(f"{pred.display_name:<24} {pred.percent:5.1f}%")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run("audio_cnn_viz.app:app", host=args.host, port=args.port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="audio_cnn_viz",
        description="Visualize audio classifier predictions and layer outputs",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a saved ApiResponse JSON file")
    render.add_argument("response", help="Path to the response JSON")
    render.add_argument("--html", default=None, help="Write the HTML page here")
    render.add_argument("--png", default=None, help="Write a static report image here")
    render.set_defaults(func=cmd_render)

    classify = sub.add_parser("classify", help="Send a WAV file to the classifier")
    classify.add_argument("wav", help="Path to the WAV file")
    classify.add_argument("--url", default=config.INFERENCE_URL, help="Inference endpoint")
    classify.add_argument(
        "--timeout", type=float, default=config.INFERENCE_TIMEOUT, help="Seconds to wait"
    )
    classify.add_argument("--html", default=None, help="Write the HTML page here")
    classify.add_argument("--png", default=None, help="Write a static report image here")
    classify.set_defaults(func=cmd_classify)

    serve = sub.add_parser("serve", help="Run the web page with uvicorn")
    serve.add_argument("--host", default=config.HOST)
    serve.add_argument("--port", type=int, default=config.PORT)
    serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
