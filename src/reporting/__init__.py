from src.reporting.report_exporter import ReportExporter, ReportExportError
from src.reporting.summary import format_results_table, rating_band

__all__ = [
    "ReportExportError",
    "ReportExporter",
    "format_results_table",
    "rating_band",
]
