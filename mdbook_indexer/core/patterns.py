"""Glob matching for files skipped while loading a book directory."""

import fnmatch


def matches_exclude_pattern(path: str, exclude_patterns: list[str]) -> bool:
    """Check if a chapter path matches any of the exclude patterns.

    Args:
        path: Path relative to the chapter directory, forward slashes
        exclude_patterns: Glob patterns (e.g., ["**/book/**", "drafts/*.md"])

    Returns:
        True if the file should be skipped
    """
    normalized_path = path.replace('\\', '/')

    for pattern in exclude_patterns:
        normalized_pattern = pattern.replace('\\', '/')

        # **/ prefix matches at any depth, including the top level
        if normalized_pattern.startswith('**/'):
            pattern_suffix = normalized_pattern[3:]
            parts = normalized_path.split('/')
            for i in range(len(parts)):
                if fnmatch.fnmatch('/'.join(parts[i:]), pattern_suffix):
                    return True
        # /** suffix matches a directory and everything under it
        elif normalized_pattern.endswith('/**'):
            dir_pattern = normalized_pattern[:-3]
            if normalized_path.startswith(dir_pattern + '/') or normalized_path == dir_pattern:
                return True
        elif fnmatch.fnmatch(normalized_path, normalized_pattern):
            return True

    return False
