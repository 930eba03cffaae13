from typing import Sequence
import pandas as pd
from models.csv_model import Statistics


class StatsService:
    """
    Estadística descriptiva por columna.
    - Trabaja sobre una copia ordenada: la columna original no se toca.
    - Desviación estándar poblacional (divide por n), vale 0 con un solo valor.
    """

    @staticmethod
    def compute_stats(values: Sequence[float]) -> Statistics:
        if len(values) == 0:
            return Statistics()

        series = pd.Series(list(values), dtype="float64")
        ordered = series.sort_values(ignore_index=True)
        n = len(ordered)

        mean = float(series.sum() / n)
        if n % 2 == 0:
            median = float((ordered.iloc[n // 2 - 1] + ordered.iloc[n // 2]) / 2.0)
        else:
            median = float(ordered.iloc[n // 2])
        std_dev = float(series.std(ddof=0))

        return Statistics(
            mean=mean,
            median=median,
            std_dev=std_dev,
            min=float(ordered.iloc[0]),
            max=float(ordered.iloc[-1]),
        )
