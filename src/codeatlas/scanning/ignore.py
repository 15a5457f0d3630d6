"""Static ignore policy for file discovery.

Folder names, file names and extension suffixes that never take part in a
scan, plus the allow-list of text extensions worth reading.
"""

from __future__ import annotations

IGNORE_FOLDERS = frozenset(
    {
        "node_modules",
        ".git",
        ".svn",
        ".hg",
        "dist",
        "build",
        "out",
        ".next",
        ".nuxt",
        ".output",
        ".cache",
        ".parcel-cache",
        "coverage",
        ".nyc_output",
        "__pycache__",
        ".pytest_cache",
        "venv",
        "env",
        ".venv",
        "vendor",
        "bower_components",
        ".idea",
        ".vscode",
        ".vs",
    }
)

IGNORE_FILES = frozenset(
    {
        "package-lock.json",
        "yarn.lock",
        "pnpm-lock.yaml",
        "composer.lock",
        "Gemfile.lock",
        ".DS_Store",
        "Thumbs.db",
        ".env",
        ".env.local",
        ".env.production",
        ".env.development",
    }
)

# Suffixes rather than extensions: ".min.js" must match "app.min.js"
IGNORE_EXTENSIONS = (
    ".min.js",
    ".min.css",
    ".bundle.js",
    ".chunk.js",
    ".map",
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".svg",
    ".ico",
    ".webp",
    ".mp3",
    ".mp4",
    ".wav",
    ".avi",
    ".mov",
    ".pdf",
    ".doc",
    ".docx",
    ".xls",
    ".xlsx",
    ".zip",
    ".tar",
    ".gz",
    ".rar",
    ".7z",
    ".exe",
    ".dll",
    ".so",
    ".dylib",
    ".woff",
    ".woff2",
    ".ttf",
    ".eot",
    ".otf",
)

ALLOWED_TEXT_EXTENSIONS = frozenset(
    {
        ".js",
        ".jsx",
        ".ts",
        ".tsx",
        ".mjs",
        ".cjs",
        ".json",
        ".html",
        ".htm",
        ".css",
        ".scss",
        ".sass",
        ".less",
        ".md",
        ".mdx",
        ".yml",
        ".yaml",
        ".toml",
        ".xml",
        ".graphql",
        ".gql",
        ".env",
        ".example",
        ".sql",
        ".txt",
    }
)

BINARY_EXTENSIONS = frozenset(
    {
        ".png",
        ".jpg",
        ".jpeg",
        ".gif",
        ".ico",
        ".bmp",
        ".webp",
        ".zip",
        ".tar",
        ".gz",
        ".mp4",
        ".mp3",
        ".exe",
        ".dll",
    }
)


def get_file_extension(file_path: str) -> str:
    """Return the last extension of a path, including the dot.

    Dotfiles without a further extension (".gitignore") have no extension.
    """
    file_name = file_path.replace("\\", "/").rsplit("/", 1)[-1]
    dot_index = file_name.rfind(".")
    return file_name[dot_index:] if dot_index > 0 else ""


def should_ignore_path(file_path: str) -> bool:
    """Check whether a relative path falls under the ignore policy."""
    parts = file_path.replace("\\", "/").split("/")
    file_name = parts[-1]

    if any(part in IGNORE_FOLDERS for part in parts):
        return True

    if file_name in IGNORE_FILES:
        return True

    return file_name.endswith(IGNORE_EXTENSIONS)


def is_allowed_file(file_path: str) -> bool:
    """Check whether a file is worth reading as text."""
    ext = get_file_extension(file_path)
    if ext in ALLOWED_TEXT_EXTENSIONS:
        return True
    return ext not in BINARY_EXTENSIONS
