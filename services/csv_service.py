import math
import re
from typing import List, Tuple
from models.csv_model import CSVData

DELIMITER = ','
ENCODINGS = ['utf-8-sig', 'cp1252', 'latin-1']

# Signo opcional, dígitos con punto decimal opcional, exponente opcional.
# Sin separador de miles ni coma decimal.
_NUMBER_RE = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)


class LoadError(Exception):
    EMPTY_INPUT = "empty input"
    READ_ERROR = "read error"

    def __init__(self, message: str, kind: str = READ_ERROR):
        super().__init__(message)
        self.kind = kind


def parse_number(field: str) -> Tuple[bool, float]:
    """Devuelve (True, valor) si el campo es un número finito, (False, nan) si no."""
    token = field.strip()
    if not _NUMBER_RE.fullmatch(token):
        return False, float("nan")
    value = float(token)
    # 1e999 -> inf
    if not math.isfinite(value):
        return False, float("nan")
    return True, value


class CSVService:
    """
    Cargador de CSVs numéricos.
    - Soporta múltiples codificaciones (UTF-8 con o sin BOM, CP1252, Latin-1).
    - Separa siempre por coma, sin comillas: una coma dentro de un texto
      entrecomillado parte el campo.
    - Los campos que no son números se descartan sin error.
    """

    @staticmethod
    def read_lines(path: str) -> List[str]:
        for enc in ENCODINGS:
            try:
                # newline=None: \n, \r\n y \r terminan la línea
                with open(path, "r", encoding=enc) as f:
                    return [line.rstrip("\n") for line in f]
            except UnicodeDecodeError:
                continue
            except OSError as e:
                raise LoadError(f"Error de lectura: {e}", LoadError.READ_ERROR) from e
        raise LoadError(f"No se pudo decodificar el archivo: {path}", LoadError.READ_ERROR)

    @staticmethod
    def read_csv(path: str) -> CSVData:
        lines = CSVService.read_lines(path)
        if not lines:
            raise LoadError("El CSV está vacío.", LoadError.EMPTY_INPUT)

        # 1. Encabezado: fija el número de columnas
        headers = lines[0].split(DELIMITER)
        columns: List[List[float]] = [[] for _ in headers]
        expected_cols = len(headers)

        # 2. Filas de datos. Los campos sobrantes se ignoran y los que faltan no aportan nada.
        for line in lines[1:]:
            row = line.split(DELIMITER)
            for i, cell in enumerate(row[:expected_cols]):
                ok, value = parse_number(cell)
                if ok:
                    columns[i].append(value)

        return CSVData(headers=headers, columns=columns)
