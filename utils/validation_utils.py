def format_amount(cents: int) -> str:
    """Formats an integer in cents as '$1,234.56'."""
    return f"${cents / 100:,.2f}"


def compare_totals(footer_total: int, processed_total: int) -> str:
    """Compares the footer total with the sum of the decoded transactions (in cents)."""
    if footer_total == processed_total:
        return "Validation OK, totals are consistent."
    diff = processed_total - footer_total
    direction = "over" if diff > 0 else "under"
    return f"Total mismatch: {format_amount(abs(diff))} ({direction})."


def describe_mismatches(mismatches: dict) -> str:
    """One line per footer field: {field: (footer, computed)} as returned by EftFile.footer_mismatches()."""
    parts = []
    for field, (footer_value, computed) in sorted(mismatches.items()):
        if field.startswith("total_value_"):
            parts.append(f"{field}: {compare_totals(footer_value, computed)}")
        else:
            parts.append(f"{field}: footer {footer_value}, counted {computed}")
    return "; ".join(parts)
