"""
Formatting helpers for selection summaries.
"""


def format_size(size_bytes: int) -> str:
    """Format bytes into a human-readable size string."""
    size = float(size_bytes)
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} PB"


def format_torrent_info(file_count: int, total_bytes: int) -> str:
    """Summary line shown above a new torrent, e.g. '3 files, 1.50 KB'."""
    noun = "file" if file_count == 1 else "files"
    return f"{file_count} {noun}, {format_size(total_bytes)}"


def truncate_listing(entries: list[str], limit: int) -> list[str]:
    """Keep the first `limit` entries and add a '+ N more' line for the rest."""
    if len(entries) <= limit:
        return list(entries)
    return entries[:limit] + [f"+ {len(entries) - limit} more"]
