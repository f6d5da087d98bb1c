"""
Feedback JSONL Validator

Validates:
- Each complete line is valid JSON
- schema_version == "feedback.v1"
- Required fields are present and kind is a known FeedbackKind
- Tolerates truncated last line (crash tolerance)

Usage:
    from stackqueue.feedback_validator import validate_feedback_file

    result = validate_feedback_file("logs/feedback_2024-01-15_abc123.jsonl")
    print(f"Valid records: {result.valid_count}")
"""
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from stackqueue.feedback import FeedbackKind
from stackqueue.feedback_logger import SCHEMA_VERSION


REQUIRED_FIELDS = ["session_id", "container", "operation", "kind", "severity", "message", "ts_unix_ms"]
KNOWN_KINDS = {kind.value for kind in FeedbackKind}


@dataclass
class ValidationResult:
    """Result of feedback JSONL validation."""
    valid_count: int
    has_truncated_line: bool
    truncated_line_content: Optional[str]
    errors: list[str]
    success: bool


def validate_feedback_file(filepath: str | Path) -> ValidationResult:
    """
    Validate a feedback JSONL file.

    Args:
        filepath: Path to JSONL file

    Returns:
        ValidationResult with counts and error details
    """
    filepath = Path(filepath)

    if not filepath.exists():
        return ValidationResult(
            valid_count=0,
            has_truncated_line=False,
            truncated_line_content=None,
            errors=[f"File not found: {filepath}"],
            success=False,
        )

    valid_count = 0
    has_truncated_line = False
    truncated_line_content = None
    errors = []

    with open(filepath, "r", encoding="utf-8") as f:
        lines = f.readlines()

    for i, line in enumerate(lines, start=1):
        line = line.strip()
        if not line:
            continue

        try:
            record = json.loads(line)
        except json.JSONDecodeError as e:
            # Last line truncated is expected after crash
            if i == len(lines):
                has_truncated_line = True
                truncated_line_content = line
            else:
                errors.append(f"Line {i}: JSON decode error: {e}")
            continue

        if record.get("schema_version") != SCHEMA_VERSION:
            errors.append(
                f"Line {i}: Invalid schema_version {record.get('schema_version')!r} "
                f"(expected '{SCHEMA_VERSION}')"
            )
            continue

        missing_fields = [name for name in REQUIRED_FIELDS if name not in record]
        if missing_fields:
            errors.append(f"Line {i}: Missing required fields: {missing_fields}")
            continue

        if record["kind"] not in KNOWN_KINDS:
            errors.append(f"Line {i}: Unknown kind '{record['kind']}'")
            continue

        valid_count += 1

    return ValidationResult(
        valid_count=valid_count,
        has_truncated_line=has_truncated_line,
        truncated_line_content=truncated_line_content,
        errors=errors,
        success=len(errors) == 0,
    )


def validate_and_report(filepath: str | Path) -> None:
    """Validate and print a report to stdout."""
    result = validate_feedback_file(filepath)

    print("\n" + "=" * 80)
    print("FEEDBACK JSONL VALIDATION REPORT")
    print("=" * 80)
    print(f"File: {filepath}")
    print(f"Valid records: {result.valid_count}")
    print(f"Truncated last line: {'Yes' if result.has_truncated_line else 'No'}")

    if result.errors:
        print(f"\nErrors: {len(result.errors)}")
        for error in result.errors:
            print(f"  - {error}")

    print(f"\nValidation: {'PASSED' if result.success else 'FAILED'}")
    print("=" * 80 + "\n")


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python -m stackqueue.feedback_validator <filepath>")
        sys.exit(1)

    validate_and_report(sys.argv[1])
