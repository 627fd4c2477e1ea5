"""Report builder: text and JSON output for material-colors commands."""

import json
from typing import Any

from material_colors.core.types import Report


def _entry_line(entry: dict[str, Any]) -> str:
    """One line per entry. Tiles, hues and plain values each have a layout."""
    if 'hex_label' in entry:
        parts = [entry['hex_label']]
        if entry.get('value_label'):
            parts.append(entry['value_label'])
        if entry.get('hue_label'):
            parts.append(entry['hue_label'])
        if entry.get('alpha_label'):
            parts.append(entry['alpha_label'])
        if entry.get('distance') is not None:
            parts.append(f'Δ={entry["distance"]}')
        if entry.get('copy'):
            parts.append(f'→ {entry["copy"]}')
        return '  '.join(parts)
    if 'label' in entry and 'selector' in entry:
        sep = '── ' if entry.get('start_group') else ''
        return f'{sep}{entry["label"]:<18} {entry["selector"] or "-"}  ({entry["count"]} colours)'
    if 'text' in entry:
        return entry['text']
    return ', '.join(f'{k}={v}' for k, v in entry.items())


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    if report.title:
        lines.append(report.title)
        lines.append('')

    for section, entries in report.sections.items():
        if report.heading(section):
            lines.append(f'── {report.heading(section)}')
        for entry in entries:
            lines.append(f'  {_entry_line(entry)}')
        lines.append('')

    for note in report.notes:
        lines.append(note)
    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'command': report.command,
        'title': report.title,
        'sections': [
            {'name': name, 'heading': report.heading(name), 'entries': entries}
            for name, entries in report.sections.items()
        ],
        'notes': report.notes,
        'ok': not report.failed,
    }
    return json.dumps(obj, indent=2, ensure_ascii=False)
