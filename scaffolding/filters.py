"""Names excluded from every template copy and scan."""

from dataclasses import dataclass, field

# Version control and CI metadata never belongs in a generated project
DEFAULT_EXCLUDED_DIRS: frozenset[str] = frozenset({".git", ".github"})

# Empty for now, kept so config can add entries
DEFAULT_EXCLUDED_FILES: frozenset[str] = frozenset()


def is_excluded_dir(name: str, excluded_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS) -> bool:
    """Check whether a directory (and everything below it) is skipped."""
    return name in excluded_dirs


def is_excluded_file(name: str, excluded_files: frozenset[str] = DEFAULT_EXCLUDED_FILES) -> bool:
    """Check whether a file is skipped."""
    return name in excluded_files


@dataclass(frozen=True)
class PathFilter:
    """Excluded directory and file names for one copy or scan."""

    excluded_dirs: frozenset[str] = DEFAULT_EXCLUDED_DIRS
    excluded_files: frozenset[str] = DEFAULT_EXCLUDED_FILES

    @classmethod
    def from_lists(
        cls,
        excluded_dirs: list[str] | None = None,
        excluded_files: list[str] | None = None,
    ) -> "PathFilter":
        """Build a filter from config lists, falling back to the defaults."""
        return cls(
            excluded_dirs=frozenset(excluded_dirs) if excluded_dirs is not None else DEFAULT_EXCLUDED_DIRS,
            excluded_files=frozenset(excluded_files) if excluded_files is not None else DEFAULT_EXCLUDED_FILES,
        )

    def skip_dir(self, name: str) -> bool:
        return is_excluded_dir(name, self.excluded_dirs)

    def skip_file(self, name: str) -> bool:
        return is_excluded_file(name, self.excluded_files)


DEFAULT_FILTER = PathFilter()
