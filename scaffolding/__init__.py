"""Template catalog and project scaffolding for gostrap.

Covers:
- Template store (list, inspect, delete)
- Extraction of templates from a cloned git repository
- Tree copy with excluded paths
- Interactive template selection
- Project generation (copy, git init, go get, go mod tidy)
"""

from .errors import (
    ScaffoldError,
    TemplateNotFoundError,
    MetadataError,
    CopyError,
    SelectionCancelled,
    ExternalToolError,
    InvalidURLError,
    InvalidProjectNameError,
)
from .filters import PathFilter, is_excluded_dir, is_excluded_file
from .metadata import TemplateMetadata, read_metadata
from .templates import TemplateEntry, TemplateStore, is_valid_template_root
from .copier import copy_tree
from .extractor import ExtractionReport, TemplateExtractor, repo_name_from_url
from .selector import Key, SelectorState, TemplateSelector
from .generator import ProjectGenerator, validate_project_name

__all__ = [
    # Errors
    "ScaffoldError",
    "TemplateNotFoundError",
    "MetadataError",
    "CopyError",
    "SelectionCancelled",
    "ExternalToolError",
    "InvalidURLError",
    "InvalidProjectNameError",
    # Catalog
    "PathFilter",
    "is_excluded_dir",
    "is_excluded_file",
    "TemplateMetadata",
    "read_metadata",
    "TemplateEntry",
    "TemplateStore",
    "is_valid_template_root",
    "copy_tree",
    "ExtractionReport",
    "TemplateExtractor",
    "repo_name_from_url",
    # Selection
    "Key",
    "SelectorState",
    "TemplateSelector",
    # Generator
    "ProjectGenerator",
    "validate_project_name",
]
