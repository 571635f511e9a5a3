from typing import Any, Callable, Dict, Protocol

from models import ImageFile, ScorecardData


class ScorecardExtractor(Protocol):
    """Turns a scorecard image into ScorecardData.

    Raises llm.ExtractionError subclasses on failure.
    """

    async def extract(self, image: ImageFile) -> ScorecardData:
        ...


class SheetSyncClient(Protocol):
    """Sign-in and append capability for an external spreadsheet.

    GoogleSheetsClient and NullSheetSyncClient both satisfy this protocol.
    """

    async def initialize(self, on_status_change: Callable[[bool], None]) -> None:
        ...

    async def authenticate(self) -> None:
        ...

    async def sign_out(self) -> None:
        ...

    async def append(self, data: ScorecardData) -> Dict[str, Any]:
        ...


class PreviewStore(Protocol):
    """Hands out preview references for selected images.

    Every reference returned by ``create`` must be passed to ``release``
    exactly once.
    """

    def create(self, image: ImageFile) -> str:
        ...

    def release(self, ref: str) -> None:
        ...
