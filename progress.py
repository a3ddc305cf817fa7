"""Console progress display for a translation run."""
from typing import Optional

from tqdm import tqdm

BAR_FORMAT = "{l_bar}{bar:40}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}]"


class ProgressReporter:
    """
    Progress bar over translated chunks.

    Diagnostic lines are written above the bar so it keeps redrawing cleanly.
    """

    def __init__(self, disable: bool = False):
        self.disable = disable
        self._bar: Optional[tqdm] = None

    def start(self, total: int) -> None:
        self._bar = tqdm(
            total=total,
            desc="Translating",
            unit="chunk",
            bar_format=BAR_FORMAT,
            disable=self.disable,
        )

    def advance(self, count: int = 1) -> None:
        if self._bar is not None:
            self._bar.update(count)

    def println(self, message: str) -> None:
        tqdm.write(message)

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None

    def finish(self, message: str) -> None:
        self.close()
        tqdm.write(message)
