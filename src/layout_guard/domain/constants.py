"""Shared constants for the layout rules and the CLI."""

LAYOUT_GUARD_PREFIX = "layout-guard"

LAYOUT_GUARD_BANNER = "[LAYOUT-GUARD] Continuation & indentation audit"

# Indentation units
TAB_UNIT = "\t"
SPACE_UNIT = "    "
SPACES_PER_UNIT = 4

INDENT_STYLES: dict[str, str] = {
    "tab": TAB_UNIT,
    "space": SPACE_UNIT,
}

DEFAULT_INDENT_STYLE = "tab"

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    ".ts",
    ".tsx",
    ".mts",
    ".cts",
    ".js",
    ".jsx",
    ".mjs",
    ".cjs",
)

# Extensions parsed with the TSX grammar; everything else uses the TypeScript grammar.
TSX_EXTENSIONS: frozenset[str] = frozenset({".tsx", ".jsx"})

DEFAULT_EXCLUDES: tuple[str, ...] = ("node_modules", "dist", ".git")

DEFAULT_MAX_FIX_PASSES = 10

DEFAULT_LAMBDA_MAX_LENGTH = 40

# Identifiers shorter than this stay on the same line as '='.
SIMPLE_IDENTIFIER_MAX_LENGTH = 20

BACKUP_SUFFIX = ".bak"
