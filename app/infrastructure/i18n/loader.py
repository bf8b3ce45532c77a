"""Resource loading interface and implementations.

Defines the contract for loading resource bundles and provides a loader that
reads one bundle file per locale from a directory.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, List, Tuple, Union

import yaml

import structlog
from infrastructure.i18n.errors import ConfigurationError

logger = structlog.get_logger()

DEFAULT_RESOURCE_EXTENSION = ".json"
YAML_EXTENSIONS = (".yml", ".yaml")


class BundleLoader(ABC):
    """Abstract base for resource bundle loaders.

    Implementations must define how to discover and parse bundles. Loading
    happens once, at startup; any failure is fatal.
    """

    @abstractmethod
    def load_bundles(self) -> List[Tuple[str, Any]]:
        """Load every available bundle.

        Returns:
            List of (locale key, content tree) pairs.

        Raises:
            ConfigurationError: If bundles cannot be read or parsed.
        """
        pass


class FileBundleLoader(BundleLoader):
    """Loader for one-file-per-locale resource directories.

    The locale key of a bundle is its file name without the resource
    extension ("de-de.json" -> "de-de"). Files with another extension and
    sub-directories are skipped. JSON is the default format; ``.yml`` and
    ``.yaml`` extensions are parsed as YAML.

    Attributes:
        resource_path: Directory containing the bundle files.
        extension: Extension of bundle files, including the leading dot.
    """

    def __init__(
        self,
        resource_path: Union[str, Path],
        extension: str = DEFAULT_RESOURCE_EXTENSION,
    ):
        """Initialize file bundle loader.

        Args:
            resource_path: Directory with the bundle files.
            extension: Bundle file extension (default: ".json").

        Raises:
            ConfigurationError: If resource_path is not a directory.
        """
        self.resource_path = Path(resource_path)
        self.extension = extension if extension.startswith(".") else f".{extension}"

        if not self.resource_path.is_dir():
            raise ConfigurationError(
                f"Resource directory not found: {self.resource_path}"
            )

        logger.info(
            "initialized_bundle_loader",
            resource_path=str(self.resource_path),
            extension=self.extension,
        )

    def load_bundles(self) -> List[Tuple[str, Any]]:
        """Load all bundle files of the resource directory.

        Files are read in sorted name order so duplicate keys resolve the
        same way on every start.

        Returns:
            List of (locale key, content tree) pairs.

        Raises:
            ConfigurationError: If the directory cannot be listed or a bundle
                cannot be read or parsed.
        """
        try:
            entries = sorted(self.resource_path.iterdir())
        except OSError as e:
            logger.error(
                "resource_directory_unreadable",
                resource_path=str(self.resource_path),
                error=str(e),
            )
            raise ConfigurationError(
                f"Failed to read resource directory {self.resource_path}: {e}"
            ) from e

        bundles: List[Tuple[str, Any]] = []
        for entry in entries:
            if not entry.is_file() or not entry.name.endswith(self.extension):
                logger.debug("skipped_resource_entry", entry=entry.name)
                continue

            locale = entry.name[: -len(self.extension)]
            bundles.append((locale, self._parse(entry)))
            logger.info("resource_bundle_loaded", locale=locale, file=entry.name)

        logger.info(
            "loaded_resource_bundles",
            resource_path=str(self.resource_path),
            bundle_count=len(bundles),
        )
        return bundles

    def _parse(self, bundle_file: Path) -> Any:
        """Parse one bundle file into its content tree.

        Args:
            bundle_file: File to parse.

        Returns:
            Parsed content.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        try:
            with open(bundle_file, "r", encoding="utf-8") as f:
                if self.extension.lower() in YAML_EXTENSIONS:
                    return yaml.safe_load(f)
                return json.load(f)
        except OSError as e:
            logger.error("resource_file_unreadable", file=str(bundle_file), error=str(e))
            raise ConfigurationError(f"Failed to read {bundle_file}: {e}") from e
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            logger.error("resource_parse_error", file=str(bundle_file), error=str(e))
            raise ConfigurationError(f"Failed to parse {bundle_file}: {e}") from e
