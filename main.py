import argparse
import os
import sys
from controllers.stats_controller import StatsController
from services.csv_service import LoadError

USAGE = "Usage: csv-stats <csv_file_path>"


def parse_options(argv=None):
    parser = argparse.ArgumentParser(
                    prog='csv-stats',
                    description='Estadística descriptiva por columna de un CSV numérico')
    parser.add_argument('csv_file', nargs='?')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='resumen de la carga por stderr')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    options = parse_options(argv)
    if options.csv_file is None:
        print(USAGE)
        return 0

    path = options.csv_file
    if not os.path.isfile(path):
        print(f"File not found: {path}")
        return 0

    controller = StatsController()
    try:
        data = controller.load_csv(path)
    except LoadError as e:
        print(f"Error ({e.kind}): {e}", file=sys.stderr)
        return 1

    if options.verbose:
        print(f"--- {path}: {len(data.headers)} columnas ---", file=sys.stderr)
        for i, col in enumerate(data.columns):
            print(f"  {controller.column_label(i)}: {len(col)} valores", file=sys.stderr)

    report = controller.get_report()
    if report:
        print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
