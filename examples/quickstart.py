"""Wedlock Quickstart — emit records for a sample dump and summarize them."""

from pathlib import Path

from wedlock.analysis.summary import iter_records, summarize_records
from wedlock.config.loader import load_config
from wedlock.emit.emitter import WedlockEmitter
from wedlock.extraction.mir_loader import load_dump
from wedlock.extraction.printer import CapstonePrinter


def main():
    # 1. Load configuration and switch the facility on
    config = load_config().model_copy(
        update={
            "enabled": True,
            "pretty_print": True,
            "output_path": Path("wedlock.jsonl"),
            "diagnostic_path": Path("wedlock.diag.log"),
        }
    )

    # 2. Load the machine functions
    functions = load_dump(Path(__file__).with_name("sample_module.yaml"))

    # 3. Emit one JSON line per function
    with WedlockEmitter(config, printer=CapstonePrinter()) as emitter:
        emitter.run(functions)
    print(f"Wrote {emitter.emitted} records, skipped {emitter.skipped}")

    # 4. Summarize
    for row in summarize_records(iter_records(config.output_path)):
        print(
            f"  {row['function']}: {row['blocks']} blocks, "
            f"prologue blocks={row['prologue_blocks']}, "
            f"epilogue blocks={row['epilogue_blocks']}, "
            f"shrink-wrapped={row['shrink_wrapped']}"
        )


if __name__ == "__main__":
    main()
