"""Tab-separated store holding the trades and stocks files."""

from collections.abc import Callable
from pathlib import Path
import shutil

from lupo.application.ports.record_store import RecordStorePort
from lupo.application.use_cases.check_store import (
    CheckStoreResult,
    CheckStoreUseCase,
)
from lupo.application.use_cases.list_trades import ListTradesUseCase
from lupo.domain.constants import STOCKS_FILE, TRADES_FILE
from lupo.domain.errors import (
    DirectoryCreateError,
    DirectoryDeleteError,
    DirectoryNotFoundError,
    FileCreateError,
)
from lupo.domain.models import DecodedRows, Stock, Trade, header_line
from lupo.domain.models.schema import RecordT
from lupo.infrastructure.logging.logger import get_app_logger
from lupo.infrastructure.tsv_decoder import decode_file


class TsvStore(RecordStorePort):
    """Accessor over a data directory holding ``trades.tsv`` and ``stocks.tsv``.

    The store keeps no state besides the directory path: every load re-opens
    and re-reads the underlying file.
    """

    SCHEMAS: dict[str, type] = {
        TRADES_FILE: Trade,
        STOCKS_FILE: Stock,
    }

    def __init__(
        self,
        home_dir: Path | str,
        logger=None,
        display: Callable[[str], None] | None = None,
    ) -> None:
        """Initialize the store without touching the filesystem.

        Args:
            home_dir: Data directory.
            logger: Optional logger compatible with logging.Logger-like API.
            display: Optional sink for user-facing output lines.
        """
        self._home_dir = Path(home_dir)
        self._logger = logger or get_app_logger()
        self._display = display

    @property
    def home_dir(self) -> Path:
        """Return the data directory of the store."""
        return self._home_dir

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._home_dir)!r})"

    @classmethod
    def open(
        cls,
        home_dir: Path | str,
        logger=None,
        display: Callable[[str], None] | None = None,
    ) -> "TsvStore":
        """Attach to an existing data directory.

        Raises:
            DirectoryNotFoundError: If ``home_dir`` is not a directory.
        """
        path = Path(home_dir)
        if not path.is_dir():
            raise DirectoryNotFoundError(path)
        return cls(path, logger=logger, display=display)

    @classmethod
    def new(
        cls,
        home_dir: Path | str,
        force: bool = False,
        logger=None,
        display: Callable[[str], None] | None = None,
    ) -> "TsvStore":
        """Initialize a data directory and its files.

        Existing files are left untouched unless ``force`` is set, in which
        case the whole directory is removed first.

        Args:
            home_dir: Data directory to initialize.
            force: Remove an existing directory before initializing.
            logger: Optional logger compatible with logging.Logger-like API.
            display: Optional sink for user-facing output lines.

        Returns:
            TsvStore: Store attached to the initialized directory.

        Raises:
            DirectoryDeleteError: If ``force`` is set and removal fails.
            DirectoryCreateError: If the directory cannot be created.
            FileCreateError: If a data file cannot be written.
        """
        store = cls(home_dir, logger=logger, display=display)
        path = store.home_dir
        if force and path.exists():
            store._remove_home_dir()
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DirectoryCreateError(path) from exc
        for file_name, schema in cls.SCHEMAS.items():
            store._create_data_file(
                path / file_name,
                header_line(schema.COLUMNS),
            )
        store._logger.info(f"Data directory initialized: {path}")
        return store

    def _remove_home_dir(self) -> None:
        try:
            shutil.rmtree(self._home_dir)
        except OSError as exc:
            raise DirectoryDeleteError(self._home_dir) from exc
        self._logger.info(f"Removed data directory {self._home_dir}")

    def _create_data_file(self, path: Path, header: str) -> None:
        """Write ``header`` to a new file, keeping any existing file.

        Args:
            path: Data file to create.
            header: Tab-separated header line.
        """
        try:
            with open(path, "x", encoding="utf-8", newline="") as handle:
                handle.write(header + "\n")
        except FileExistsError:
            self._logger.warning(f"File {path} already exists, left untouched")
            return
        except OSError as exc:
            raise FileCreateError(path) from exc
        self._logger.info(f"Created {path}")

    def _load(
        self,
        file_name: str,
        schema: type[RecordT],
    ) -> DecodedRows[RecordT]:
        return decode_file(
            self._home_dir / file_name,
            schema,
            logger=self._logger,
        )

    def load_trades(self) -> DecodedRows[Trade]:
        """Return the decoded rows of ``trades.tsv``.

        Raises:
            FileOpenError: If the file cannot be opened.
        """
        return self._load(TRADES_FILE, Trade)

    def load_stocks(self) -> DecodedRows[Stock]:
        """Return the decoded rows of ``stocks.tsv``.

        Raises:
            FileOpenError: If the file cannot be opened.
        """
        return self._load(STOCKS_FILE, Stock)

    def trades(self, name_substring: str | None = None) -> int:
        """Display the trades whose stock contains ``name_substring``.

        Returns:
            int: Number of trades displayed.

        Raises:
            FileOpenError: If the trades file cannot be opened.
            RowDecodeError: On the first invalid row.
        """
        use_case = ListTradesUseCase(self, display=self._display)
        return use_case.execute(name_substring)

    def check(self) -> CheckStoreResult:
        """Validate every record and display the per-file counts.

        Raises:
            FileOpenError: If a data file cannot be opened.
            RowDecodeError: On the first invalid row of either file.
        """
        return CheckStoreUseCase(self, display=self._display).execute()


__all__ = ["TsvStore"]
