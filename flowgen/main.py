"""Пайплайн генерации реестра flow-функций."""

import os
import sys
import logging
import argparse
from pathlib import Path

from flowgen.config import FlowConfig, load_config
from flowgen.constants import DEFAULT_CONFIG_FILE
from flowgen.errors import (
    DirectoryError,
    ExtractError,
    FlowgenError,
    GenerateError,
    ModuleResolutionError,
    OutputError,
    PackageResolutionError,
    ResolveError,
    ScanError,
    format_error_chain,
)
from flowgen.services.registry import (
    DeclarationScanner,
    PathResolver,
    RegistryGenerator,
    ScanConfig,
)
from flowgen.services.registry.models import ImportPath

logging.basicConfig(level=logging.INFO, format="%(message)s")
logger = logging.getLogger(__name__)


class Pipeline:
    """Пайплайн: проверка директории, скан, резолв путей, генерация."""

    def __init__(self, config: FlowConfig, cwd: str | Path | None = None):
        self.config = config
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()

        self.scan_config = ScanConfig(
            exclude=list(config.exclude),
            strict_parse=config.strict_parse,
            out_file=config.out_file,
            out_package=config.out_package,
        )
        self.scanner = DeclarationScanner(self.scan_config)
        self.resolver = PathResolver(self.scan_config, parser=self.scanner.parser)
        self.generator = RegistryGenerator(self.scan_config)

    def run(self) -> Path:
        """
        Запустить все шаги по порядку.

        Returns:
            Путь к сгенерированному файлу

        Raises:
            FlowgenError: любой шаг завершился ошибкой
        """
        source_dir = self._resolve(self.config.dir_name)
        out_dir = self._resolve(self.config.out_dir)

        self.validate_dir(source_dir)
        logger.info(f"[1/5] Source directory: {source_dir}")

        func_map = self.extract_functions(source_dir)
        logger.info(f"[2/5] Functions extracted: {len(func_map)}")

        package_name = self.get_package_name(source_dir)
        logger.info(f"[3/5] Package name: {package_name}")

        base_path = self.get_base_path()
        logger.info(f"[4/5] Module base path: {base_path}")

        import_path = ImportPath(base_path=base_path, package_name=package_name)
        out_file = self.create_output_file(out_dir, source_dir, func_map, import_path)
        logger.info(f"[5/5] Registry written: {out_file}")

        return out_file

    def validate_dir(self, source_dir: Path) -> None:
        if not source_dir.exists():
            raise DirectoryError(f"directory '{self.config.dir_name}' does not exist")
        if not source_dir.is_dir():
            raise DirectoryError(f"'{self.config.dir_name}' is not a directory")

    def extract_functions(self, source_dir: Path) -> dict[str, str]:
        try:
            return self.scanner.scan(str(source_dir))
        except ScanError as e:
            raise ExtractError(f"error extracting functions: {e}") from e

    def get_package_name(self, source_dir: Path) -> str:
        try:
            return self.resolver.resolve_package_name(str(source_dir))
        except ResolveError as e:
            raise PackageResolutionError(f"error extracting package name: {e}") from e

    def get_base_path(self) -> str:
        try:
            return self.resolver.resolve_module_base_path(self.cwd)
        except ResolveError as e:
            raise ModuleResolutionError(f"error extracting base path: {e}") from e

    def create_output_file(
        self,
        out_dir: Path,
        source_dir: Path,
        func_map: dict[str, str],
        import_path: ImportPath,
    ) -> Path:
        try:
            return self.generator.generate(
                out_dir, source_dir.name, func_map, import_path
            )
        except GenerateError as e:
            raise OutputError(f"error creating output file: {e}") from e

    def _resolve(self, path: str) -> Path:
        """Относительные пути считаем от рабочей директории."""
        return Path(os.path.abspath(self.cwd / path))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="flowgen",
        description="Generate a Go registry of flow handler functions.",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"path to the JSON config (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = load_config(args.config)
        Pipeline(config).run()
    except FlowgenError as e:
        logger.error(f"Error: {format_error_chain(e)}")
        return 1

    logger.info("flowgen executed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
