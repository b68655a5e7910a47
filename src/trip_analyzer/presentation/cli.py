import argparse
import os
import sys
from dotenv import load_dotenv

from ..config import build_config
from ..domain.types import SUPPORTED_EXPORT_FORMATS
from ..infrastructure.logging_config import configure_logging, get_layer_logger
from ..infrastructure.file_source import TextFileLineSource
from ..infrastructure.file_writer import RankingFileWriter
from ..application.use_cases import TripAnalysisService
from ..application.errors import InvalidInputError, ExportError
from .controllers import TripAnalysisController


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trip_analyzer",
        description="Classifica delle zone e delle fasce orarie più frequentate da un file di viaggi CSV."
    )
    parser.add_argument("input", help="File CSV dei viaggi (3 o 6 colonne)")
    parser.add_argument("--top-zones", type=int, default=None, metavar="K", help="Numero di zone in classifica")
    parser.add_argument("--top-slots", type=int, default=None, metavar="K", help="Numero di fasce (zona, ora) in classifica")
    parser.add_argument("--output-dir", default=None, help="Directory in cui esportare le classifiche")
    parser.add_argument("--format", dest="export_format", choices=SUPPORTED_EXPORT_FORMATS, default=None, help="Formato di esportazione")
    parser.add_argument("--verbose", action="store_true", help="Log di debug (righe scartate)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    configure_logging(verbose=args.verbose)

    cli_logger = get_layer_logger("CLI", "Presentation")
    app_logger = get_layer_logger("TripAnalysisService", "Application")
    infra_writer_logger = get_layer_logger("RankingFileWriter", "Infrastructure")

    if os.environ.get("TESTING_MODE") != "1":
        load_dotenv()

    try:
        config = build_config(
            input_path=args.input,
            top_zones_k=args.top_zones,
            top_slots_k=args.top_slots,
            output_directory=args.output_dir,
            export_format=args.export_format,
        )
        cli_logger.info(f"Configurazione caricata: {config}")

        writer = None
        if config.export_enabled:
            writer = RankingFileWriter(config.output_directory, logger=infra_writer_logger)

        service = TripAnalysisService(line_source=TextFileLineSource(), logger=app_logger)
        controller = TripAnalysisController(service, cli_logger, writer=writer)
        controller.run_analysis(config)

    except InvalidInputError as e:
        cli_logger.error(f"ERRORE DI INPUT: {e}")
        sys.exit(1)

    except ExportError as e:
        cli_logger.error(f"ERRORE DI ESPORTAZIONE: {e}")
        sys.exit(1)

    except Exception as e:
        cli_logger.critical(f"Errore fatale imprevisto: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
