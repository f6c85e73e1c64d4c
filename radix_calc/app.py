import logging
from typing import Optional

from flask import Flask, Response, current_app, json, jsonify, request

from . import settings
from .chart import CHART_KINDS, render_frequency_chart
from .dispatcher import calculate, parse_request
from .exceptions import CalculatorError, InputDecodeError
from .usage_log import UsageLog

logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)


def _plain_error(message: str, status: int) -> Response:
    return Response(message + "\n", status=status, mimetype="text/plain")


def handle_calculator_error(e: CalculatorError):
    if e.status_code >= 500:
        logging.error(f"{request.method} {request.path} failed: {e.message}", exc_info=True)
    else:
        logging.warning(f"{request.method} {request.path} rejected: {e.message}")
    return _plain_error(e.message, e.status_code)


def operation_endpoint(operation: str):
    # ValueError also covers bodies that are not valid UTF-8
    try:
        payload = json.loads(request.get_data())
    except ValueError as e:
        raise InputDecodeError(f"Failed to decode JSON object: {e}")
    op_request = parse_request(payload)
    usage_log = current_app.extensions["usage_log"]
    result = calculate(operation, op_request, record=usage_log.record)
    return jsonify(result.to_dict())


def chart_endpoint():
    kind = request.args.get("kind", current_app.config["CHART_KIND"])
    if kind not in CHART_KINDS:
        return _plain_error(f"invalid chart kind '{kind}'", 400)
    usage_log = current_app.extensions["usage_log"]
    png = render_frequency_chart(usage_log.frequency(), kind=kind)
    return Response(png, mimetype="image/png")


def create_app(usage_log: Optional[UsageLog] = None, config: Optional[dict] = None) -> Flask:
    """Build the calculator app around a usage log.

    Args:
        usage_log: Log shared by the calculation and chart endpoints; a fresh
            empty one is created when omitted
        config: Overrides applied on top of the values from settings

    Raises:
        ValueError: If the configured CHART_KIND is not a known chart kind
    """
    app = Flask(__name__)
    app.config.from_object(settings)
    if config:
        app.config.update(config)
    if app.config["CHART_KIND"] not in CHART_KINDS:
        raise ValueError(
            f"CHART_KIND must be one of {list(CHART_KINDS)}, got '{app.config['CHART_KIND']}'"
        )
    app.extensions["usage_log"] = usage_log if usage_log is not None else UsageLog()

    app.register_error_handler(CalculatorError, handle_calculator_error)
    app.add_url_rule("/chart", "chart", chart_endpoint, methods=["GET", "POST"])
    app.add_url_rule("/<operation>", "operation", operation_endpoint, methods=["GET", "POST"])
    return app


app = create_app()


def main():
    logging.info(f"Listening on port {settings.PORT}...")
    app.run(host=settings.HOST, port=settings.PORT, debug=settings.DEBUG)


if __name__ == "__main__":
    main()
