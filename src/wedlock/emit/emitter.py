"""Per-function emission and output stream lifecycle."""

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path
from typing import Any, Callable, Iterable, TextIO

from wedlock.analysis.mangling import demangle, is_itanium_encoding
from wedlock.config.models import WedlockConfig
from wedlock.emit.record import assemble_record, serialize_record
from wedlock.errors import StreamOpenError
from wedlock.extraction.block_walker import walk_blocks
from wedlock.extraction.machine_function import MachineFunction
from wedlock.extraction.printer import InstrPrinter, text_printer
from wedlock.utils.logging import diagnostic_logger, get_logger

log = get_logger(__name__)

Demangler = Callable[[str], str]


def emit_function(
    function: MachineFunction,
    output: TextIO,
    diagnostics: Any,
    *,
    printer: InstrPrinter | None = None,
    demangler: Demangler = demangle,
) -> bool:
    """Write one JSON line for ``function``; return False if it was skipped.

    The record is fully built before anything is written, so a skipped
    function never leaves a partial line behind.
    """
    module = function.module
    if not function.has_instr_info or module is None:
        diagnostics.warning(
            "No TargetInstrInfo or Module for this machine function; skipping",
            function=function.name,
        )
        return False

    bbs = walk_blocks(function, diagnostics, printer)
    record = assemble_record(
        function,
        module,
        bbs,
        is_mangled=is_itanium_encoding(function.name),
        demangled_name=demangler(function.name),
    )
    output.write(serialize_record(record) + "\n")
    return True


def _open_stream(path: Path) -> TextIO:
    try:
        return open(path, "w", encoding="utf-8")
    except OSError as exc:
        raise StreamOpenError(path, exc.strerror or str(exc)) from exc


class WedlockEmitter:
    """Owns the primary and diagnostic streams for one run.

    Use as a context manager: streams are opened on entry (before any
    function is processed) and closed on exit, including on errors. A
    disabled emitter opens nothing and ignores every function.
    """

    def __init__(
        self,
        config: WedlockConfig,
        *,
        printer: InstrPrinter | None = None,
        demangler: Demangler = demangle,
    ) -> None:
        self.config = config
        self._printer = (printer or text_printer) if config.pretty_print else None
        self._demangler = demangler
        self._stack: ExitStack | None = None
        self._output: TextIO | None = None
        self._diagnostics: Any = diagnostic_logger(None)
        self.emitted = 0
        self.skipped = 0

    def __enter__(self) -> WedlockEmitter:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def open(self) -> None:
        if not self.config.enabled or self._stack is not None:
            return

        with ExitStack() as stack:
            diagnostic_stream = None
            if self.config.diagnostic_path is not None:
                diagnostic_stream = stack.enter_context(_open_stream(self.config.diagnostic_path))
            self._output = stack.enter_context(_open_stream(self.config.output_path))
            self._stack = stack.pop_all()

        self._diagnostics = diagnostic_logger(diagnostic_stream)
        log.info(
            "streams_opened",
            output=str(self.config.output_path),
            diagnostics=str(self.config.diagnostic_path) if diagnostic_stream else None,
        )

    def run_on_function(self, function: MachineFunction) -> bool:
        if not self.config.enabled:
            return False
        if self._output is None:
            raise RuntimeError("WedlockEmitter.run_on_function called before open()")

        written = emit_function(
            function,
            self._output,
            self._diagnostics,
            printer=self._printer,
            demangler=self._demangler,
        )
        if written:
            self.emitted += 1
        else:
            self.skipped += 1
        log.debug("function_processed", function=function.name, written=written)
        return written

    def run(self, functions: Iterable[MachineFunction]) -> int:
        """Process ``functions`` in order and return how many were written."""
        before = self.emitted
        for function in functions:
            self.run_on_function(function)
        return self.emitted - before

    def close(self) -> None:
        if self._stack is None:
            return
        self._stack.close()
        self._stack = None
        self._output = None
        self._diagnostics = diagnostic_logger(None)
        log.info("streams_closed", emitted=self.emitted, skipped=self.skipped)
