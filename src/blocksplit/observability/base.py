from typing import Protocol


class MetricsHook(Protocol):
    """Receives parser and file processing metrics.

    Emitted by blocksplit:
    - parser_lines_total: one increment per consumed line, no labels
    - parser_blocks_flushed_total: one increment per handler call,
      labelled block="pre" | "central" | "post"; discarded blocks are not counted
    - file_processing_duration: milliseconds per successful process_file call
    - file_processing_errors_total: one increment per failed process_file call,
      whether the file could not be read or a handler raised
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    """Default hook used when no backend is configured."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass
