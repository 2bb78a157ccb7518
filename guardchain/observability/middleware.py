"""
Observability Middleware

Flask instrumentation and request logging for apps serving guarded views.
Each completed request on a guarded view is tagged with whether the guards
let it through or one of them answered it.
"""

import time
import logging
from typing import Optional
from flask import Flask, request, g
from opentelemetry import trace
from opentelemetry.instrumentation.flask import FlaskInstrumentor


def guard_outcome() -> Optional[str]:
    """
    Describe what the guards decided for the current request.

    Returns:
        "passed" when the handler was reached, "short_circuit" when a guard
        answered, None for views not built with ``guarded``
    """
    if not g.get('guarded'):
        return None
    return "passed" if g.get('guards_passed') else "short_circuit"


def add_observability_middleware(app: Flask):
    """Add OpenTelemetry instrumentation and request logging to Flask app."""

    FlaskInstrumentor().instrument_app(app)

    logger = logging.getLogger(__name__)

    @app.before_request
    def before_request():
        g.start_time = time.time()

    @app.after_request
    def after_request(response):
        duration_ms = (time.time() - g.get('start_time', time.time())) * 1000
        outcome = guard_outcome()

        span = trace.get_current_span()
        if span.is_recording():
            span.set_attributes({
                "http.status_code": response.status_code,
                "http.duration_ms": round(duration_ms, 2)
            })
            if outcome:
                span.set_attribute("guard.result", outcome)

        fields = {
            "method": request.method,
            "path": request.path,
            "status_code": response.status_code,
            "duration_ms": round(duration_ms, 2)
        }
        if outcome:
            fields["guard_result"] = outcome

        if outcome == "short_circuit":
            logger.info(
                f"Request answered by guard with status {response.status_code}",
                extra={"extra_fields": fields}
            )
        else:
            logger.info("HTTP request completed", extra={"extra_fields": fields})

        return response

    return app
