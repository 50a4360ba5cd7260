# core/formatters.py

# all pure utilities & number helpers
# must never import from models!

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


# === number formatters ===


def format_grade(grade: float | None) -> str:
    return "[NO GRADE]" if grade is None else f"{grade}"
