"""Output formatting utilities for placegen."""

import json
import os
import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from tabulate import tabulate


class OutputFormatter:
    """Handles formatting and display of output data."""

    SUPPORTED_FORMATS = ['json', 'yaml', 'table', 'plain']

    def __init__(self, format_type: str = 'table', indent: int = 2):
        """Initialize output formatter.

        Args:
            format_type: Output format (json, yaml, table, plain)
            indent: Indentation level for structured formats
        """
        if format_type not in self.SUPPORTED_FORMATS:
            raise ValueError(f"Unsupported format: {format_type}. Supported: {self.SUPPORTED_FORMATS}")

        self.format_type = format_type
        self.indent = indent

    def format_data(self, data: Any, **kwargs) -> str:
        """Format data according to the specified format.

        Args:
            data: Data to format
            **kwargs: Additional formatting options

        Returns:
            Formatted string
        """
        if self.format_type == 'json':
            return self._format_json(data, **kwargs)
        elif self.format_type == 'yaml':
            return self._format_yaml(data, **kwargs)
        elif self.format_type == 'table':
            return self._format_table(data, **kwargs)
        else:
            return self._format_plain(data, **kwargs)

    def _format_json(self, data: Any, **kwargs) -> str:
        return json.dumps(
            data,
            indent=self.indent,
            ensure_ascii=False,
            default=self._json_serializer,
            **kwargs
        )

    def _format_yaml(self, data: Any, **kwargs) -> str:
        # Round-trip through JSON so enums, paths and datetimes become plain scalars
        plain = json.loads(json.dumps(data, default=self._json_serializer))
        return yaml.safe_dump(
            plain,
            default_flow_style=False,
            allow_unicode=True,
            indent=self.indent,
            sort_keys=False,
            **kwargs
        )

    def _format_table(self, data: Any, **kwargs) -> str:
        """Format data as a table."""
        if isinstance(data, dict):
            table_data = [[k, self._cell(v)] for k, v in data.items()]
            headers = ['Field', 'Value']
        elif isinstance(data, list) and data:
            if isinstance(data[0], dict):
                # List of dicts - use dict keys as headers
                headers = list(data[0].keys())
                table_data = [[self._cell(item.get(h, '')) for h in headers] for item in data]
            else:
                headers = ['Value']
                table_data = [[item] for item in data]
        else:
            headers = ['Value']
            table_data = [[data]]

        return tabulate(
            table_data,
            headers=headers,
            tablefmt=kwargs.get('tablefmt', 'grid'),
            **{k: v for k, v in kwargs.items() if k != 'tablefmt'}
        )

    def _format_plain(self, data: Any, **kwargs) -> str:
        """Format data as plain text."""
        if isinstance(data, dict):
            lines = []
            for key, value in data.items():
                if isinstance(value, (dict, list)):
                    lines.append(f"{key}:")
                    lines.append(self._indent_text(self._format_plain(value), 2))
                else:
                    lines.append(f"{key}: {value}")
            return '\n'.join(lines)
        elif isinstance(data, list):
            return '\n'.join(self._format_plain(item) for item in data)
        else:
            return str(data)

    def _cell(self, value: Any) -> Any:
        """Render nested values compactly inside a table cell."""
        if isinstance(value, dict):
            return ', '.join(f"{k}={v}" for k, v in value.items())
        if isinstance(value, list):
            return ', '.join(str(v) for v in value)
        if value is None:
            return '-'
        return value

    def _indent_text(self, text: str, spaces: int) -> str:
        """Indent text by specified number of spaces."""
        indent = ' ' * spaces
        return '\n'.join(indent + line for line in text.split('\n'))

    def _json_serializer(self, obj: Any) -> Any:
        """Custom JSON serializer for non-standard types."""
        if isinstance(obj, datetime):
            return obj.isoformat()
        elif isinstance(obj, Path):
            return str(obj)
        elif isinstance(obj, Enum):
            return obj.value
        elif hasattr(obj, 'to_dict'):
            return obj.to_dict()
        else:
            return str(obj)

    def print_data(self, data: Any, file=None, **kwargs) -> None:
        """Print formatted data to file or stdout.

        Args:
            data: Data to print
            file: File object to write to (default: stdout)
            **kwargs: Additional formatting options
        """
        formatted = self.format_data(data, **kwargs)
        print(formatted, file=file or sys.stdout)


class ProgressDisplay:
    """Display a progress bar on the terminal."""

    def __init__(self, total: int, description: str = "Processing", width: int = 40, stream=None):
        """Initialize progress display.

        Args:
            total: Total number of items
            description: Description of the operation
            width: Width of progress bar
            stream: Output stream (default: stderr)
        """
        self.total = total
        self.current = 0
        self.description = description
        self.width = width
        self.stream = stream or sys.stderr
        self.start_time = datetime.now()

    def update(self, current: int) -> None:
        """Redraw the bar for ``current`` completed items."""
        self.current = current
        self._display_progress()

    def _display_progress(self) -> None:
        if self.total == 0:
            return

        percent = (self.current / self.total) * 100
        filled = int(self.width * self.current // self.total)
        bar = '█' * filled + '░' * (self.width - filled)

        elapsed = (datetime.now() - self.start_time).total_seconds()

        progress_line = (
            f"\r{self.description}: {bar} "
            f"{self.current}/{self.total} ({percent:.1f}%) "
            f"[{format_duration(elapsed)}]"
        )

        print(progress_line, end='', flush=True, file=self.stream)

        if self.current >= self.total:
            print(file=self.stream)

    def finish(self) -> None:
        """Terminate the progress line without forcing it to 100%."""
        if self.current < self.total:
            print(file=self.stream)


class ColorFormatter:
    """Add color formatting to text output."""

    # ANSI color codes
    COLORS = {
        'reset': '\033[0m',
        'bold': '\033[1m',
        'dim': '\033[2m',
        'bright_red': '\033[91m',
        'bright_green': '\033[92m',
        'bright_yellow': '\033[93m',
        'bright_blue': '\033[94m',
        'bright_cyan': '\033[96m',
    }

    def __init__(self, enabled: bool = True):
        self.enabled = enabled and self._supports_color()

    def _supports_color(self) -> bool:
        """Check if the terminal supports color output."""
        return (
            hasattr(sys.stdout, 'isatty') and sys.stdout.isatty() and
            os.environ.get('TERM') != 'dumb' and
            'NO_COLOR' not in os.environ
        )

    def colorize(self, text: str, color: str) -> str:
        if not self.enabled or color not in self.COLORS:
            return text

        return f"{self.COLORS[color]}{text}{self.COLORS['reset']}"

    def success(self, text: str) -> str:
        return self.colorize(text, 'bright_green')

    def error(self, text: str) -> str:
        return self.colorize(text, 'bright_red')

    def warning(self, text: str) -> str:
        return self.colorize(text, 'bright_yellow')


# Global formatter instance
_color_formatter = ColorFormatter()


def get_color_formatter() -> ColorFormatter:
    """Get global color formatter instance."""
    return _color_formatter


def format_file_size(size_bytes: int) -> str:
    """Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted size string
    """
    if size_bytes == 0:
        return "0 B"

    units = ['B', 'KB', 'MB', 'GB', 'TB', 'PB']
    unit_index = 0
    size = float(size_bytes)

    while size >= 1024 and unit_index < len(units) - 1:
        size /= 1024
        unit_index += 1

    if unit_index == 0:
        return f"{int(size)} {units[unit_index]}"
    else:
        return f"{size:.1f} {units[unit_index]}"


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        minutes = int(seconds // 60)
        secs = int(seconds % 60)
        return f"{minutes}m {secs}s"
    else:
        hours = int(seconds // 3600)
        minutes = int((seconds % 3600) // 60)
        secs = int(seconds % 60)
        return f"{hours}h {minutes}m {secs}s"
