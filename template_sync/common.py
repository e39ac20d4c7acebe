"""
Common utilities for template-sync.

Formatting of the summary printed after a sync run.
"""

from typing import Dict

ACTIONS = {
    'commit': 'Committed',
    'pull': 'Pulled',
}


def calculate_total_changes(summary: Dict) -> int:
    """
    Calculate the number of files written by a sync run.

    Args:
        summary: Dict returned by SyncEngine.run

    Returns:
        Merged plus copied file count
    """
    return len(summary.get('merged_files', [])) + len(summary.get('copied_files', []))


def format_sync_summary(summary: Dict) -> str:
    """
    Format a sync summary message.

    Args:
        summary: Dict returned by SyncEngine.run

    Returns:
        Formatted summary string
    """
    action = ACTIONS.get(summary.get('command'), 'Synchronized')
    total = calculate_total_changes(summary)
    return (f"{action} {total} files "
            f"({len(summary.get('merged_files', []))} merged, "
            f"{len(summary.get('copied_files', []))} copied)")
