"""Local template store.

Store layout:
    ~/.config/gostrap/templates/
    ├── figo-templates/          (repository root was itself a Go module)
    │   ├── go.mod
    │   └── gostrap.json         (optional)
    └── figo-templates-fiber/    (one entry per module subdirectory)
        └── go.mod

Every immediate subdirectory is one template; its name is the directory name.
"""

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator

from .errors import MetadataError, ScaffoldError, TemplateNotFoundError
from .metadata import METADATA_FILE_NAME, TemplateMetadata, read_metadata

logger = logging.getLogger(__name__)

MARKER_FILE_NAME = "go.mod"


def is_valid_template_root(directory: Path, marker: str = MARKER_FILE_NAME) -> bool:
    """Check whether a directory is an independent template root.

    Only existence of the marker directly inside ``directory`` counts; its
    content is never read. Stat failures (e.g. permission denied) count as
    "not a template" so a scan never aborts here.
    """
    try:
        return (Path(directory) / marker).is_file()
    except OSError:
        return False


@dataclass
class TemplateEntry:
    """One installed template."""

    name: str
    root: Path
    metadata: TemplateMetadata | None = None

    @property
    def description(self) -> str:
        return self.metadata.description if self.metadata else ""

    @property
    def author(self) -> str:
        return self.metadata.author if self.metadata else ""


class TemplateStore:
    """The directory holding installed templates.

    Only the catalog code writes here; callers go through these methods.

    Usage:
        store = TemplateStore(Path("~/.config/gostrap/templates").expanduser())
        for name in store.list_templates():
            print(name)
    """

    def __init__(self, root: Path, metadata_file: str = METADATA_FILE_NAME):
        """Initialize the store.

        Args:
            root: Store directory (need not exist yet)
            metadata_file: Descriptor file name inside each template
        """
        self.root = Path(root)
        self.metadata_file = metadata_file

    def path_for(self, name: str) -> Path:
        """Get the directory for a template name.

        The name must denote an immediate child of the store, so "", ".",
        ".." and names containing path separators are rejected.

        Raises:
            TemplateNotFoundError: If the name does not stay inside the store
        """
        path = self.root / name
        if not name or path.resolve().parent != self.root.resolve():
            raise TemplateNotFoundError(f"Invalid template name: {name!r}")
        return path

    def exists(self, name: str) -> bool:
        try:
            return self.path_for(name).is_dir()
        except TemplateNotFoundError:
            return False

    def list_templates(self, populate: Callable[[], object] | None = None) -> list[str]:
        """List installed template names.

        If the store does not exist yet it is created and ``populate`` is
        called to fill it before listing, so the first run heals itself. When
        ``populate`` fails the new store is removed again, so the next call
        retries.

        Args:
            populate: Called once when the store is missing

        Returns:
            Template names in directory order (possibly empty)

        Raises:
            ScaffoldError: If the store cannot be created or read
        """
        if not self.root.exists():
            logger.info("Template store %s does not exist, creating it", self.root)
            try:
                self.root.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ScaffoldError(f"Cannot create templates directory {self.root}: {e}") from e
            if populate is not None:
                try:
                    populate()
                except BaseException:
                    logger.info("Populating %s failed, removing it", self.root)
                    shutil.rmtree(self.root, ignore_errors=True)
                    raise

        try:
            children = list(self.root.iterdir())
        except OSError as e:
            raise ScaffoldError(f"Cannot read templates directory {self.root}: {e}") from e

        return [
            child.name
            for child in children
            if child.is_dir() and not child.name.startswith(".")
        ]

    def get(self, name: str) -> TemplateEntry:
        """Load one template entry.

        Raises:
            TemplateNotFoundError: If no template has this name
            MetadataError: If its descriptor is malformed
        """
        root = self.path_for(name)
        if not root.is_dir():
            raise TemplateNotFoundError(f"Template '{name}' not found")
        return TemplateEntry(
            name=name,
            root=root.resolve(),
            metadata=read_metadata(root, self.metadata_file),
        )

    def entries(self, names: list[str] | None = None) -> Iterator[TemplateEntry]:
        """Yield entries for display, tolerating broken descriptors."""
        for name in names if names is not None else self.list_templates():
            root = self.path_for(name)
            try:
                metadata = read_metadata(root, self.metadata_file)
            except MetadataError as e:
                logger.warning("%s", e)
                metadata = None
            yield TemplateEntry(name=name, root=root.resolve(), metadata=metadata)

    def remove(self, name: str) -> None:
        """Delete one template.

        Raises:
            TemplateNotFoundError: If no template has this name
            ScaffoldError: If the directory cannot be removed
        """
        template_dir = self.path_for(name)
        if not template_dir.is_dir():
            raise TemplateNotFoundError(f"Template '{name}' not found")

        try:
            shutil.rmtree(template_dir)
        except OSError as e:
            raise ScaffoldError(f"Cannot delete template '{name}': {e}") from e
        logger.info("Removed template %s", name)

    def remove_all(self) -> None:
        """Delete the whole store.

        Raises:
            TemplateNotFoundError: If the store does not exist
            ScaffoldError: If the store cannot be removed
        """
        if not self.root.exists():
            raise TemplateNotFoundError(f"Templates directory {self.root} does not exist")

        try:
            shutil.rmtree(self.root)
        except OSError as e:
            raise ScaffoldError(f"Cannot delete templates directory {self.root}: {e}") from e
        logger.info("Removed template store %s", self.root)
