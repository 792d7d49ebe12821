from typing import Optional, Protocol

class AppHooks(Protocol):
    """
    Protocol for application hooks to follow enrichment progress.
    This can be implemented by the main application to show progress
    while records are enriched.

    Methods:
        report_step(info, target, reset_counter, plus_step) -> None:
            Report a progress step.
    """
    def report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 1) -> None:
        """
        Report progress messages from the enrichment process.

        Args:
            info (str): Progress message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        pass
