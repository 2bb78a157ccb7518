"""
OpenTelemetry Configuration

Sets up tracing and logging for applications using guardchain guards. Guard
spans are created through the OpenTelemetry API and are no-ops until a tracer
provider is installed here or by the host application.
"""

import os
import logging
from typing import Optional
from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

SAMPLING_RATIOS = {
    'production': 0.1,
    'staging': 0.5,
}


def setup_observability(service_name: str = 'guardchain') -> Optional[TracerProvider]:
    """
    Initialize OpenTelemetry tracing based on environment configuration.

    Args:
        service_name: Reported service.name resource attribute

    Returns:
        The installed tracer provider, or None when OTEL_ENABLED is false
    """
    environment = os.getenv('ENVIRONMENT', 'development')
    otel_enabled = os.getenv('OTEL_ENABLED', 'true').lower() == 'true'
    service_version = os.getenv('SERVICE_VERSION', '1.0.0')

    if not otel_enabled:
        return None

    # Environment-specific sampling
    sampler = TraceIdRatioBased(SAMPLING_RATIOS.get(environment, 1.0))

    resource = Resource.create({
        "service.name": service_name,
        "service.version": service_version,
        "deployment.environment": environment
    })

    tracer_provider = TracerProvider(
        sampler=sampler,
        resource=resource
    )

    otlp_endpoint = os.getenv('OTEL_EXPORTER_OTLP_ENDPOINT')
    if otlp_endpoint:
        otlp_exporter = OTLPSpanExporter(endpoint=otlp_endpoint)
        tracer_provider.add_span_processor(
            BatchSpanProcessor(otlp_exporter, max_export_batch_size=512)
        )

    if environment == 'development':
        tracer_provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(tracer_provider)

    setup_structured_logging(environment)

    return tracer_provider


def setup_structured_logging(environment: str):
    """Configure root logging by environment."""
    log_level = {
        'production': logging.WARNING,
        'staging': logging.INFO,
        'development': logging.INFO
    }.get(environment, logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s %(levelname)s %(name)s %(message)s',
        handlers=[logging.StreamHandler()]
    )

    if environment == 'development':
        # Guard decisions are logged at DEBUG
        logging.getLogger('guardchain').setLevel(logging.DEBUG)
    elif environment == 'production':
        logging.getLogger('urllib3').setLevel(logging.WARNING)
