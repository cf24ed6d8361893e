"""Environment catalog loading.

The catalog is a YAML (or JSON) mapping of short environment codes to the
environment names created in GitHub, e.g.::

    dev: development
    stg: staging
    prod: production
"""

import logging
from pathlib import Path

import yaml

from .exceptions import ConfigurationError
from .models import EnvironmentCatalog, EnvironmentEntry

logger = logging.getLogger(__name__)


class CatalogLoader(yaml.SafeLoader):
    """SafeLoader that keeps yes/no/on/off as plain strings."""


CatalogLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:bool"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_catalog(path: Path | str) -> EnvironmentCatalog:
    """Load the environment catalog, preserving document order.

    Args:
        path: Path to the catalog document.

    Returns:
        Tuple of EnvironmentEntry in the order they appear in the document.

    Raises:
        ConfigurationError: If the file is missing, unparsable, or not a
            non-empty mapping of strings to strings.
    """
    catalog_path = Path(path)

    if not catalog_path.is_file():
        raise ConfigurationError(
            f"Environment catalog not found: {catalog_path}", path=str(catalog_path)
        )

    try:
        # Binary mode: undecodable bytes surface as yaml.reader.ReaderError
        with open(catalog_path, "rb") as f:
            data = yaml.load(f, Loader=CatalogLoader)
    except (yaml.YAMLError, OSError) as e:
        raise ConfigurationError(
            f"Invalid environment catalog {catalog_path}: {e}", path=str(catalog_path)
        ) from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Environment catalog {catalog_path} must contain a mapping "
            f"(got {type(data).__name__})",
            path=str(catalog_path),
        )

    if not data:
        raise ConfigurationError(
            f"Environment catalog {catalog_path} is empty", path=str(catalog_path)
        )

    entries = []
    for abbreviation, name in data.items():
        if not isinstance(abbreviation, str) or not abbreviation.strip():
            raise ConfigurationError(
                f"Invalid environment code {abbreviation!r} in {catalog_path}",
                path=str(catalog_path),
            )
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError(
                f"Environment '{abbreviation}' in {catalog_path} must map to a "
                f"non-empty name (got {name!r})",
                path=str(catalog_path),
            )
        entries.append(EnvironmentEntry(abbreviation=abbreviation, name=name.strip()))

    logger.debug(f"Loaded {len(entries)} environment(s) from {catalog_path}")
    return tuple(entries)
