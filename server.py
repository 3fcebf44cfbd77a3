"""
HTTP front end for the logistic map spectrum service.

Endpoints:
  - GET /       JSON {"time": [...], "frequency": [...]}
  - GET /chart  HTML page with the time and frequency charts

Both accept an optional ?rate=<float> (default 3.5). Any other method
gets 405 with "Allow: GET".

Usage:
    python server.py                  # runs on http://localhost:3030
    python server.py --port 8080      # custom port
"""

import argparse
import logging
import math
import re

from flask import Flask, Response, abort, render_template, request
from markupsafe import Markup

import config
from charts import render_charts
from logistic_map import logistic_map
from spectrum import frequency_axis, frequency_transform, time_axis

app = Flask(__name__, template_folder=str(config.TEMPLATES_DIR))

logger = logging.getLogger(__name__)

# Loaded once before any request is served; a missing or broken template
# fails here rather than on the first /chart hit.
CHART_TEMPLATE = app.jinja_env.get_template(config.TEMPLATE_NAME)


DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
HEX_LITERAL = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?\d+", re.ASCII
)


class InvalidRateError(ValueError):
    """The rate query parameter is not a finite floating-point literal."""


# ── Helpers ──

def get_rate(args) -> float:
    """
    Resolve the growth rate from request query arguments.

    An absent or empty "rate" falls back to config.DEFAULT_RATE.
    Accepts decimal literals ("3.5", ".5", "4e-1") and hexadecimal ones with
    a binary exponent ("0x1.cp1"). No whitespace, no digit separators.
    Raises InvalidRateError for anything else, or for values that are not
    finite (including decimal literals too large for a double).
    """
    raw = args.get("rate") or config.DEFAULT_RATE
    try:
        if DECIMAL_LITERAL.fullmatch(raw):
            rate = float(raw)
        elif HEX_LITERAL.fullmatch(raw):
            rate = float.fromhex(raw)
        else:
            raise ValueError(raw)
    except (ValueError, OverflowError):
        raise InvalidRateError(f"rate is not a number: {raw!r}") from None

    if not math.isfinite(rate):
        raise InvalidRateError(f"rate is not finite: {raw!r}")
    return rate


def _empty(status: int, mimetype: str) -> Response:
    return Response(status=status, mimetype=mimetype)


# ── Request Hooks ──

@app.before_request
def only_get():
    """Reject HEAD (added implicitly to GET rules) and anything else but GET."""
    if request.url_rule is not None and request.method != "GET":
        abort(405)


# ── Error Handlers ──

@app.errorhandler(405)
def method_not_allowed(e):
    """Every endpoint only serves GET."""
    return Response(status=405, headers={"Allow": "GET"})


# ── Routes ──

@app.route("/", methods=["GET"], provide_automatic_options=False)
def index():
    """Time and frequency series as JSON."""
    try:
        rate = get_rate(request.args)
    except InvalidRateError as e:
        logger.debug(f"Rejected request: {e}")
        return _empty(400, "application/json")

    time_series = logistic_map(rate)
    frequency_series = frequency_transform(time_series)

    try:
        # Diverged sequences hold inf/nan, which are not valid JSON
        body = app.json.dumps({
            "time": time_series.tolist(),
            "frequency": frequency_series.tolist(),
        }, allow_nan=False)
    except (TypeError, ValueError) as e:
        logger.error(f"JSON serialization failed for rate={rate}: {e}")
        return _empty(500, "application/json")

    return Response(body, status=200, mimetype="application/json")


@app.route("/chart", methods=["GET"], provide_automatic_options=False)
def chart():
    """HTML page embedding the time-domain and frequency-domain charts."""
    try:
        rate = get_rate(request.args)
    except InvalidRateError as e:
        logger.debug(f"Rejected request: {e}")
        return _empty(400, "text/html")

    time_series = logistic_map(rate)
    frequency_series = frequency_transform(time_series)

    try:
        svg = render_charts(
            time_axis(len(time_series)), time_series,
            frequency_axis(len(frequency_series)), frequency_series,
        )
        html = render_template(
            CHART_TEMPLATE,
            rate=config.RATE_FORMAT % rate,
            body=Markup(svg),
        )
    except Exception as e:
        logger.error(f"Chart rendering failed for rate={rate}: {e}")
        return _empty(500, "text/html")

    return Response(html, status=200, mimetype="text/html")


# ── Entry Point ──

def setup_logging():
    """Configure console logging with timestamps."""
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Logistic map time series and spectrum over HTTP"
    )
    parser.add_argument("--host", default=config.HOST)
    parser.add_argument("--port", type=int, default=config.PORT)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args(argv)

    setup_logging()
    logger.info(f"Serving logistic map spectrum on http://{args.host}:{args.port}")

    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
