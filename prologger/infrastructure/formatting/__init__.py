from .date_mask import format_date

__all__ = ["format_date"]
