"""
Scope Guardrail Tests - the demo stays single-threaded and UI-agnostic

Scans stackqueue/ source for surfaces the demo must not grow:
- Concurrency (threads, asyncio, sleeps) in the core
- Persistence of container contents (pickle/shelve/sqlite)
- UI writing to containers outside controller.dispatch()

Also verifies at runtime that controllers share no module-level state.
"""
import re
from pathlib import Path

import pytest

from stackqueue.queue_controller import QueueController
from stackqueue.stack_controller import StackController


CONCURRENCY_PATTERNS = [
    r'^\s*import\s+threading',
    r'^\s*from\s+threading\s+import',
    r'^\s*import\s+asyncio',
    r'^\s*from\s+asyncio\s+import',
    r'time\.sleep\s*\(',
]

PERSISTENCE_PATTERNS = [
    r'^\s*import\s+(pickle|shelve|sqlite3)',
    r'^\s*from\s+(pickle|shelve|sqlite3)\s+import',
]

# Direct container mutation from the front-end
UI_BYPASS_PATTERNS = [
    r'\.(stack|queue)\.(push|pop|enqueue|dequeue|clear|set_capacity)\s*\(',
    r'(stack|queue)_controller\.(?!dispatch\b)\w+\s*\(',
]

EXCLUDE_PATTERNS = [
    r'.*/__pycache__/.*',
    r'.*/\..*',
]


def should_scan_file(filepath: Path) -> bool:
    if filepath.suffix != '.py':
        return False

    filepath_str = str(filepath.as_posix())
    for pattern in EXCLUDE_PATTERNS:
        if re.search(pattern, filepath_str):
            return False

    return True


def scan_file_for_patterns(filepath: Path, patterns: list[str]) -> list[tuple[int, str, str]]:
    """
    Scan a file for forbidden patterns.

    Returns:
        List of (line_number, line_content, matched_pattern) tuples
    """
    violations = []

    with open(filepath, 'r', encoding='utf-8') as f:
        for line_num, line in enumerate(f, start=1):
            # Comments may mention forbidden APIs
            if line.strip().startswith('#'):
                continue

            for pattern in patterns:
                if re.search(pattern, line):
                    violations.append((line_num, line.strip(), pattern))

    return violations


def collect_violations(patterns: list[str], files=None) -> list[str]:
    project_root = Path(__file__).parent.parent
    src_dir = project_root / 'stackqueue'

    all_violations = []
    for filepath in files or sorted(src_dir.rglob('*.py')):
        if not should_scan_file(filepath):
            continue

        for line_num, line_content, pattern in scan_file_for_patterns(filepath, patterns):
            all_violations.append(
                f"{filepath.relative_to(project_root)}:{line_num}: "
                f"pattern '{pattern}' matched: {line_content}"
            )

    return all_violations


def test_no_concurrency_surface():
    """Core modules run on the caller's thread only."""
    violations = collect_violations(CONCURRENCY_PATTERNS)
    if violations:
        pytest.fail("Concurrency surface detected:\n" + "\n".join(violations))


def test_no_persistence_surface():
    """Container contents are never persisted."""
    violations = collect_violations(PERSISTENCE_PATTERNS)
    if violations:
        pytest.fail("Persistence surface detected:\n" + "\n".join(violations))


def test_ui_writes_only_through_dispatch():
    """The CLI never mutates containers directly."""
    ui_file = Path(__file__).parent.parent / 'stackqueue' / 'ui.py'
    violations = collect_violations(UI_BYPASS_PATTERNS, files=[ui_file])
    if violations:
        pytest.fail("UI bypasses controller.dispatch():\n" + "\n".join(violations))


def test_controllers_do_not_share_state():
    """Two controllers of the same kind are fully independent."""
    first = StackController(capacity=2)
    second = StackController(capacity=2)
    first.push("A")

    assert second.view_state.is_empty
    assert first.stack is not second.stack

    q1 = QueueController(capacity=2)
    q2 = QueueController(capacity=2)
    q1.enqueue("X")

    assert q2.view_state.is_empty
