from typing import Optional, Protocol


class AppHooks(Protocol):
    """
    Protocol for application hooks used while collecting statistics.
    This can be implemented by the calling application (dashboard, script)
    to surface progress of a statistics run.

    Methods:
        report_step(info, target, reset_counter, plus_step) -> None:
            Report progress of the collector pipeline.
    """
    def report_step(self, info: str = "", target: Optional[int] = None, reset_counter: bool = False, plus_step: int = 1) -> None:
        """
        Report progress messages from the statistics pipeline.

        Args:
            info (str): Progress message.
            target (int): Target count for progress.
            reset_counter (bool): Whether to reset the counter.
            plus_step (int): Incremental step count.
        """
        pass
