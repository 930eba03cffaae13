from services.csv_service import CSVService, LoadError
from services.report_service import ReportService
from services.stats_service import StatsService
from models.csv_model import CSVData, Statistics
from typing import List


class StatsContext:
    def __init__(self):
        self.data: CSVData = CSVData()
        self.analysis_cache: List[Statistics] | None = None

    def clear(self):
        self.data = CSVData()
        self.analysis_cache = None


class StatsController:
    """
    Analizador reutilizable: cada carga reemplaza por completo los datos
    anteriores. Pensado para un solo hilo, una llamada a la vez.
    """
    def __init__(self):
        self.context = StatsContext()

    @property
    def headers(self) -> List[str]:
        return self.context.data.headers

    @property
    def columns(self) -> List[List[float]]:
        return self.context.data.columns

    # --- LECTURA ---
    def load_csv(self, path: str) -> CSVData:
        ctx = self.context
        ctx.clear()
        try:
            ctx.data = CSVService.read_csv(path)
        except LoadError: raise
        except Exception as e: raise LoadError(f"Error inesperado al leer CSV: {e}") from e
        return ctx.data

    # --- ESTADÍSTICAS ---
    def analyze(self) -> List[Statistics]:
        ctx = self.context
        if ctx.analysis_cache is None:
            ctx.analysis_cache = [StatsService.compute_stats(col) for col in ctx.data.columns]
        return list(ctx.analysis_cache)

    def column_label(self, index: int) -> str:
        return ReportService.label_for(self.headers, index)

    def get_report(self) -> str:
        return ReportService.format_report(self.headers, self.analyze())
