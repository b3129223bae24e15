"""OpenTelemetry and structlog configuration for the notes service."""

import logging
import os

import structlog
from opentelemetry import metrics, trace
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import ConsoleMetricExporter, PeriodicExportingMetricReader
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

# Service identification
SERVICE_NAME_VALUE = os.getenv("OTEL_SERVICE_NAME", "empnotes-api")
SERVICE_VERSION_VALUE = os.getenv("OTEL_SERVICE_VERSION", "0.1.0")
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")


def get_resource() -> Resource:
    """Create OpenTelemetry resource with service attributes."""
    return Resource.create(
        {
            SERVICE_NAME: SERVICE_NAME_VALUE,
            SERVICE_VERSION: SERVICE_VERSION_VALUE,
            "deployment.environment": ENVIRONMENT,
        }
    )


def _exporter_type(signal: str) -> str | None:
    """
    Resolve the exporter for a signal ("traces" or "metrics").

    Returns "otlp", "console", or None when export is disabled.
    """
    enabled = os.getenv(f"OTEL_ENABLE_{signal.upper()}", "true").lower() == "true"
    if not enabled:
        print(f"[OTEL] {signal.capitalize()} disabled via OTEL_ENABLE_{signal.upper()}=false")
        return None

    exporter_type = os.getenv(f"OTEL_{signal.upper()}_EXPORTER", "console")
    if exporter_type == "otlp":
        if not os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT"):
            print(f"[OTEL] OTLP endpoint not configured, {signal} disabled")
            return None
        return "otlp"
    if exporter_type == "console":
        return "console"

    # 'none' or any other value disables export
    print(f"[OTEL] {signal.capitalize()} export disabled")
    return None


def configure_tracing() -> TracerProvider:
    """Configure OpenTelemetry tracing."""
    provider = TracerProvider(resource=get_resource())

    exporter_type = _exporter_type("traces")
    if exporter_type == "otlp":
        endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
        provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint)))
        print(f"[OTEL] Using OTLP span exporter: {endpoint}")
    elif exporter_type == "console":
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
        print("[OTEL] Using console span exporter for development")

    trace.set_tracer_provider(provider)
    return provider


def configure_metrics() -> MeterProvider:
    """Configure OpenTelemetry metrics."""
    metric_readers = []

    exporter_type = _exporter_type("metrics")
    if exporter_type is not None:
        if exporter_type == "otlp":
            endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
            exporter = OTLPMetricExporter(endpoint=endpoint)
            print(f"[OTEL] Using OTLP metric exporter: {endpoint}")
        else:
            exporter = ConsoleMetricExporter()
            print("[OTEL] Using console metric exporter for development")

        metric_readers.append(
            PeriodicExportingMetricReader(
                exporter,
                export_interval_millis=int(os.getenv("OTEL_METRIC_EXPORT_INTERVAL", "60000")),
            )
        )

    provider = MeterProvider(resource=get_resource(), metric_readers=metric_readers)
    metrics.set_meter_provider(provider)
    return provider


def add_otel_context(logger, method_name, event_dict):
    """Add OpenTelemetry trace context to log events."""
    span = trace.get_current_span()
    if span and span.is_recording():
        ctx = span.get_span_context()
        event_dict["trace_id"] = format(ctx.trace_id, "032x")
        event_dict["span_id"] = format(ctx.span_id, "016x")
    else:
        event_dict["trace_id"] = "0" * 32
        event_dict["span_id"] = "0" * 16
    return event_dict


def configure_logging():
    """Configure structlog with OpenTelemetry integration."""
    log_level = os.getenv("OTEL_LOG_LEVEL", "INFO").upper()
    log_format = os.getenv("LOG_FORMAT", "json").lower()  # json or console

    logging.basicConfig(format="%(message)s", level=getattr(logging, log_level))

    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_otel_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    if log_format == "json":
        renderers = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        renderers = [structlog.processors.ExceptionRenderer(), structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=shared_processors + renderers,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.get_logger().info("logging_configured", log_level=log_level, log_format=log_format)


def initialize_observability():
    """Initialize logging, tracing and metrics."""
    configure_logging()

    logger = structlog.get_logger()
    logger.info("initializing_observability")

    tracer_provider = configure_tracing()
    meter_provider = configure_metrics()

    logger.info(
        "observability_initialized",
        service_name=SERVICE_NAME_VALUE,
        service_version=SERVICE_VERSION_VALUE,
        environment=ENVIRONMENT,
    )

    return tracer_provider, meter_provider


def get_tracer(name: str = __name__) -> trace.Tracer:
    """Get a tracer instance for creating spans."""
    return trace.get_tracer(name, SERVICE_VERSION_VALUE)


def get_meter(name: str = __name__) -> metrics.Meter:
    """Get a meter instance for creating metrics."""
    return metrics.get_meter(name, SERVICE_VERSION_VALUE)


class AppMetrics:
    """Notes service metrics."""

    def __init__(self):
        meter = get_meter("empnotes.metrics")

        self.notes_fetched = meter.create_counter(
            name="notes.fetched", description="Backend rows accepted by validation", unit="1"
        )
        self.notes_rejected = meter.create_counter(
            name="notes.rejected", description="Backend rows dropped by validation", unit="1"
        )
        self.notes_fetch_failures = meter.create_counter(
            name="notes.fetch_failures", description="Failed note list fetches", unit="1"
        )
        self.topics_hidden = meter.create_counter(
            name="topics.hidden", description="Topics hidden by release schedules", unit="1"
        )

        self.db_query_duration = meter.create_histogram(
            name="db.query.duration",
            description="Database query duration in milliseconds",
            unit="ms",
        )


# Global metrics instance
app_metrics: AppMetrics | None = None


def get_app_metrics() -> AppMetrics:
    """Get the global application metrics instance."""
    global app_metrics
    if app_metrics is None:
        app_metrics = AppMetrics()
    return app_metrics
