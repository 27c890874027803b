"""Help text rendering.

Pure transforms from command metadata to plain text blocks.  The caller
decides where the text goes and how it is styled.
"""

from __future__ import annotations

from collections.abc import Sequence

from kli.core.command import CommandSpec
from kli.core.models import AppConfig

_MIN_LABEL_WIDTH: int = 15

BUILTIN_FLAGS: tuple[tuple[str, str], ...] = (
    ("--help, -h", "Show command help"),
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _label_width(labels: Sequence[str]) -> int:
    return max([_MIN_LABEL_WIDTH, *(len(label) for label in labels)])


def _section(title: str, rows: Sequence[tuple[str, str]], width: int) -> list[str]:
    """Render ``Title:`` followed by indented, padded rows."""
    lines = [f"{title}:"]
    for label, description in rows:
        lines.append(f"  {label:<{width}}  {description}".rstrip())
    return lines


def _usage_line(spec: CommandSpec) -> str:
    parts = [spec.name]
    parts.extend(f"<{arg.name}>" for arg in spec.arguments)
    parts.append("[options]")
    return "Usage: " + " ".join(parts)


# ---------------------------------------------------------------------------
# Per-command help
# ---------------------------------------------------------------------------

def render_command_help(spec: CommandSpec) -> str:
    """Render help for a single command.

    Order: usage line, blank line, description (if any), arguments (if
    any), flags (if any), then the built-in flags, always last.
    """
    argument_rows = [(arg.name, arg.description) for arg in spec.arguments]
    flag_rows = [(flag.label, flag.description) for flag in spec.flags]
    width = _label_width(
        [label for label, _ in (*argument_rows, *flag_rows, *BUILTIN_FLAGS)]
    )

    blocks: list[list[str]] = [[_usage_line(spec)]]
    if spec.description.strip():
        blocks.append([spec.description])
    if argument_rows:
        blocks.append(_section("Arguments", argument_rows, width))
    if flag_rows:
        blocks.append(_section("Flags", flag_rows, width))
    blocks.append(_section("Built-in flags", BUILTIN_FLAGS, width))

    return "\n\n".join("\n".join(block) for block in blocks)


# ---------------------------------------------------------------------------
# Global help
# ---------------------------------------------------------------------------

def render_command_listing(commands: Sequence[CommandSpec]) -> str:
    """Short listing shown by the interactive ``help`` sentinel."""
    lines = ["Available commands:"]
    if not commands:
        lines.append("  (none registered)")
    for spec in commands:
        lines.append(f"  {spec.name:<{_MIN_LABEL_WIDTH}} {spec.description}".rstrip())
    lines.extend(
        (
            "",
            "You can also:",
            "  - Start commands with parameters directly",
            "  - Use flags like --help or --version",
        )
    )
    return "\n".join(lines)


def render_global_help(config: AppConfig, commands: Sequence[CommandSpec]) -> str:
    """Full application help: header, usage, then the command listing."""
    header = config.name
    if config.description:
        header = f"{config.name} - {config.description}"
    return "\n".join(
        (
            header,
            "Usage:",
            "  <command> [arguments] [options]",
            "",
            render_command_listing(commands),
        )
    )


def render_version(config: AppConfig) -> str:
    return f"{config.name} version {config.version}"
