"""CLI adapter exporting and importing ZenWallet backups."""

import argparse
from pathlib import Path
import sys

from zenwallet.application.use_cases.backup import (
    ExportBackupUseCase,
    ImportBackupUseCase,
)
from zenwallet.domain.errors import InvalidBackupFileError
from zenwallet.infrastructure.container import (
    build_backup_file,
    build_settings,
    build_state_store,
)
from zenwallet.infrastructure.logging.logger import get_app_logger


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the backup commands."""
    parser = argparse.ArgumentParser(
        prog="zenwallet-backup",
        description="Export or import a ZenWallet JSON backup.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    export_parser = commands.add_parser("export", help="write a backup file")
    export_parser.add_argument(
        "--dir",
        type=Path,
        default=None,
        help="target directory (defaults to ZENWALLET_BACKUP_DIR)",
    )

    import_parser = commands.add_parser("import", help="merge a backup file")
    import_parser.add_argument("file", type=Path, help="backup file to import")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the requested backup command.

    Args:
        argv: Command-line arguments; defaults to sys.argv.

    Returns:
        int: Process exit status.
    """
    args = build_parser().parse_args(argv)
    logger = get_app_logger()
    settings = build_settings()
    state_store = build_state_store(settings)
    backup_file = build_backup_file()

    if args.command == "export":
        use_case = ExportBackupUseCase(state_store, backup_file, logger=logger)
        path = use_case.execute(args.dir or settings.backup_dir)
        print(f"Backup written to {path}")
        return 0

    use_case = ImportBackupUseCase(state_store, backup_file, logger=logger)
    try:
        state = use_case.execute(args.file)
    except InvalidBackupFileError as exc:
        logger.error(str(exc))
        print(f"Import failed: {exc}", file=sys.stderr)
        return 1
    print(
        f"Imported {len(state.wallets)} wallets and "
        f"{len(state.transactions)} transactions."
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
