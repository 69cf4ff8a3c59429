from __future__ import annotations

DISCLAIMER = "There may be errors in my responses; always refer to the course web page: "


def compose_response(generated: str, syllabus_link: str) -> str:
    return f"{generated}\n\n{DISCLAIMER}{syllabus_link}"


def annotate(composed: str, telemetry_status: str) -> str:
    # Diagnostic only; clients render text/plain and ignore the comment.
    return f"{composed}\n<!-- {telemetry_status} -->"
