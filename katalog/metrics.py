"""Business metrics for the catalog engine."""

from opentelemetry import metrics

# Get meter for creating instruments
meter = metrics.get_meter(__name__)

# Catalog Metrics
products_created_total = meter.create_counter(
    name="products_created_total",
    description="Total number of products created",
)

products_updated_total = meter.create_counter(
    name="products_updated_total",
    description="Total number of products updated",
)

products_deleted_total = meter.create_counter(
    name="products_deleted_total",
    description="Total number of products deleted",
)

# Form Metrics
validation_failures_total = meter.create_counter(
    name="validation_failures_total",
    description="Total number of rejected form submissions",
)

# Storage Metrics
persistence_fallbacks_total = meter.create_counter(
    name="persistence_fallbacks_total",
    description="Total number of loads that fell back to the seed catalog",
)

persistence_write_failures_total = meter.create_counter(
    name="persistence_write_failures_total",
    description="Total number of failed catalog writes",
)
