"""Template extraction from a cloned repository.

A repository contributes one template per Go module it contains: the
repository root (if it has a go.mod) and each immediate subdirectory that
has one. Root templates are named after the repository; subdirectory
templates are namespaced under it, e.g. ``figo-templates-fiber``.
"""

import logging
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol
from urllib.parse import urlparse

from .config import Config, TemplatesConfig
from .copier import copy_tree
from .errors import CopyError, InvalidURLError, MetadataError, ScaffoldError
from .filters import PathFilter
from .metadata import read_metadata
from .templates import TemplateStore, is_valid_template_root

logger = logging.getLogger(__name__)


class Cloner(Protocol):
    """Anything that can clone a repository (GitTool in production)."""

    def clone(self, url: str, destination: Path | str) -> object: ...


def repo_name_from_url(url: str) -> str:
    """Derive a repository's logical name from its URL.

    Examples:
        https://example.com/org/proj.git  -> proj
        https://example.com/org/proj/     -> proj
        git@github.com:org/proj.git       -> proj

    Raises:
        InvalidURLError: If the URL has no usable path segment
    """
    url = url.strip()
    parsed = urlparse(url)
    path = parsed.path

    # scp-style "user@host:org/repo.git" has no scheme
    if not parsed.scheme and not parsed.netloc and ":" in url and "@" in url.split(":", 1)[0]:
        path = url.split(":", 1)[1]

    path = path.rstrip("/")
    if path.endswith(".git"):
        path = path[: -len(".git")]

    segments = [segment for segment in path.split("/") if segment]
    if not segments or segments[-1] in (".", ".."):
        raise InvalidURLError(f"Unable to determine repository name from URL: {url}")
    return segments[-1]


@dataclass
class ExtractionReport:
    """Outcome of one extraction run, per template."""

    source: str
    extracted: list[str] = field(default_factory=list)
    skipped: dict[str, str] = field(default_factory=dict)
    failed: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failed


class TemplateExtractor:
    """Materializes templates from a source tree into the store.

    Usage:
        extractor = TemplateExtractor(store, GitTool(), config.templates)
        report = extractor.download("https://github.com/org/go-templates")
    """

    def __init__(
        self,
        store: TemplateStore,
        cloner: Cloner,
        settings: TemplatesConfig | None = None,
    ):
        """Initialize the extractor.

        Args:
            store: Destination template store
            cloner: Clones remote repositories
            settings: Marker, separator, filter and default URL settings
        """
        self.store = store
        self.cloner = cloner
        self.settings = settings or TemplatesConfig()
        self.path_filter = PathFilter.from_lists(
            self.settings.excluded_dirs,
            self.settings.excluded_files,
        )

    @classmethod
    def from_config(cls, config: Config, cloner: Cloner) -> "TemplateExtractor":
        store = TemplateStore(config.templates.store_path, config.templates.metadata_file)
        return cls(store, cloner, config.templates)

    def find_candidates(self, source_root: Path, logical_name: str) -> list[tuple[str, Path]]:
        """List (template name, directory) pairs that qualify as templates.

        Raises:
            CopyError: If the source root cannot be listed
        """
        marker = self.settings.marker_file
        candidates: list[tuple[str, Path]] = []

        if is_valid_template_root(source_root, marker):
            candidates.append((logical_name, source_root))

        try:
            children = sorted(source_root.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise CopyError(source_root, f"cannot read repository directory: {e}") from e

        for child in children:
            if child.is_symlink() or not child.is_dir() or self.path_filter.skip_dir(child.name):
                continue
            if not is_valid_template_root(child, marker):
                continue
            name = f"{logical_name}{self.settings.name_separator}{child.name}"
            candidates.append((name, child))

        return candidates

    def extract_all(self, source_root: Path, logical_name: str) -> ExtractionReport:
        """Copy every qualifying module under ``source_root`` into the store.

        Existing templates with the same name are replaced, not merged. One
        template failing does not stop the others.

        Args:
            source_root: Root of the cloned repository
            logical_name: Repository name used to name the templates

        Returns:
            ExtractionReport listing each template's outcome

        Raises:
            CopyError: If ``source_root`` itself cannot be listed
        """
        source_root = Path(source_root)
        report = ExtractionReport(source=str(source_root))

        for name, directory in self.find_candidates(source_root, logical_name):
            try:
                read_metadata(directory, self.settings.metadata_file)
            except MetadataError as e:
                logger.warning("Skipping template '%s': %s", name, e)
                report.skipped[name] = e.reason
                continue

            try:
                self._install(name, directory)
            except (ScaffoldError, OSError) as e:
                logger.error("Failed to extract template '%s': %s", name, e)
                report.failed[name] = str(e)
                continue

            logger.info("Template '%s' extracted", name)
            report.extracted.append(name)

        return report

    def _install(self, name: str, directory: Path) -> None:
        target = self.store.path_for(name)
        if target.exists():
            logger.info("Template '%s' already exists, replacing it", name)
            shutil.rmtree(target)
        copy_tree(directory, target, self.path_filter)

    def download(self, url: str | None = None) -> ExtractionReport:
        """Clone a repository and extract its templates.

        The clone lives in a temporary directory that is removed whether or
        not extraction succeeds.

        Args:
            url: Repository URL (default: configured default repository)

        Returns:
            ExtractionReport for the run

        Raises:
            InvalidURLError: If no name can be derived from the URL
            ExternalToolError: If the clone fails
            CopyError: If the clone cannot be listed or the store cannot be created
        """
        if not url:
            url = self.settings.default_repo_url
            logger.info("No URL specified, using default repository: %s", url)

        logical_name = repo_name_from_url(url)

        with tempfile.TemporaryDirectory(prefix="gostrap-") as tmp_dir:
            clone_dir = Path(tmp_dir) / logical_name
            logger.info("Cloning %s into %s", url, clone_dir)
            self.cloner.clone(url, clone_dir)
            try:
                self.store.root.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise CopyError(self.store.root, f"cannot create templates directory: {e}") from e
            report = self.extract_all(clone_dir, logical_name)

        report.source = url
        return report
