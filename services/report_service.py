from typing import List
from models.csv_model import Statistics

FIELDS = [
    ("Mean", "mean"),
    ("Median", "median"),
    ("Std Dev", "std_dev"),
    ("Min", "min"),
    ("Max", "max"),
]


class ReportService:

    @staticmethod
    def label_for(headers: List[str], index: int) -> str:
        # Encabezado vacío o solo espacios -> "Column N" (base 1)
        if index < len(headers) and headers[index].strip():
            return headers[index]
        return f"Column {index + 1}"

    @staticmethod
    def format_column(label: str, stats: Statistics) -> List[str]:
        lines = [f"{label}:"]
        for title, attr in FIELDS:
            lines.append(f"  {title} = {getattr(stats, attr):.4f}")
        return lines

    @staticmethod
    def format_report(headers: List[str], stats_list: List[Statistics]) -> str:
        lines = []
        for i, stats in enumerate(stats_list):
            lines.extend(ReportService.format_column(ReportService.label_for(headers, i), stats))
        return "\n".join(lines)
