from __future__ import annotations

"""
Log Line Formatting Helpers.

Stateless building blocks shared by every sink: timestamp rendering,
message interpolation, level token coloring and assembly of the final
pipe-separated log line.
"""

import time
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from plainlog.domain.constants import COLOR_RESET

# -----------------------------------------------------------------------------
# TIME
# -----------------------------------------------------------------------------

def format_timestamp(date_format: str, now: Optional[datetime] = None) -> str:
    """
    Render the local wall-clock time with a strftime pattern.

    Args:
        date_format: strftime-compatible pattern.
        now: Moment to render. Defaults to the current local time.

    Returns:
        str: The formatted timestamp.
    """
    moment = now if now is not None else datetime.now()
    return moment.strftime(date_format)


def epoch_millis() -> int:
    """Milliseconds elapsed since the Unix epoch."""
    return time.time_ns() // 1_000_000


# -----------------------------------------------------------------------------
# MESSAGE
# -----------------------------------------------------------------------------

def format_message(message: str, args: Tuple[Any, ...], kwargs: Dict[str, Any]) -> str:
    """
    Interpolate call arguments into a message.

    Without arguments the message is returned verbatim, so literal braces
    never need escaping. With arguments it is rendered through str.format.

    Args:
        message: Message text or str.format template.
        args: Positional interpolation values.
        kwargs: Keyword interpolation values.

    Returns:
        str: The final message text.
    """
    if not args and not kwargs:
        return str(message)
    return str(message).format(*args, **kwargs)


def colorize(token: str, color: Optional[str]) -> str:
    """Wrap a token in an ANSI color sequence followed by a reset."""
    if not color:
        return token
    return f"{color}{token}{COLOR_RESET}"


# -----------------------------------------------------------------------------
# LINE ASSEMBLY
# -----------------------------------------------------------------------------

def build_line(
        timestamp: str,
        level_token: str,
        prefix: str,
        message: str,
        thread_id: Optional[int] = None,
        process_id: Optional[int] = None,
) -> str:
    """
    Assemble a single log line (without trailing newline).

    Layout:
    <timestamp> | <LEVEL> <prefix>[ | Thread ID: <id>][ | Process ID: <pid>] | <message>

    Args:
        timestamp: Rendered timestamp.
        level_token: Level name, possibly wrapped in color codes.
        prefix: Free-text prefix placed after the level token.
        message: Interpolated message.
        thread_id: Calling thread identifier, omitted when None.
        process_id: Current process identifier, omitted when None.

    Returns:
        str: The assembled line.
    """
    parts = [f"{timestamp} | {level_token} {prefix}"]
    if thread_id is not None:
        parts.append(f" | Thread ID: {thread_id}")
    if process_id is not None:
        parts.append(f" | Process ID: {process_id}")
    parts.append(f" | {message}")
    return "".join(parts)
