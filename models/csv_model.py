class CSVData:
    """
    Representa el CSV en memoria por columnas:
      - headers: lista de strings (primera línea, tal cual)
      - columns: lista de listas de float (una por encabezado)
    """
    def __init__(self, headers=None, columns=None):
        self.headers = headers or []
        self.columns = columns or []


class Statistics:
    """Resumen de una columna. Los campos valen NaN si la columna está vacía."""
    def __init__(self, mean=float("nan"), median=float("nan"), std_dev=float("nan"),
                 min=float("nan"), max=float("nan")):
        self.mean = mean
        self.median = median
        self.std_dev = std_dev
        self.min = min
        self.max = max

    def as_tuple(self):
        return (self.mean, self.median, self.std_dev, self.min, self.max)

    def __repr__(self):
        return (f"Statistics(mean={self.mean}, median={self.median}, std_dev={self.std_dev}, "
                f"min={self.min}, max={self.max})")
