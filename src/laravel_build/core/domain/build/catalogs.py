"""Static catalogs of what a generated Laravel environment may contain.

The tuples keep the display order used in user-facing messages; membership
checks go through the frozensets.
"""

SUPPORTED_SERVICES: tuple[str, ...] = (
    "mysql",
    "pgsql",
    "mariadb",
    "redis",
    "memcached",
    "meilisearch",
    "typesense",
    "minio",
    "mailpit",
    "selenium",
    "soketi",
)

SUPPORTED_PHP_VERSIONS: tuple[str, ...] = ("74", "80", "81", "82", "83")

# Only meaningful as the single requested service.
NO_SERVICES = "none"

SERVICE_CATALOG: frozenset[str] = frozenset(SUPPORTED_SERVICES)
PHP_VERSION_CATALOG: frozenset[str] = frozenset(SUPPORTED_PHP_VERSIONS)
