"""Stream one file through the XOR transform."""

from ...constants import DEFAULT_CHUNK_SIZE
from ...utils.logger import get_logger
from ..progress.ProgressReporter import ProgressReporter
from ..transform.xor_transform import xor_transform
from .FileTask import FileTask
from .ProcessError import ProcessError

logger = get_logger("stream")


def process_file(
    task: FileTask,
    key: bytes,
    reporter: ProgressReporter,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Transform ``task.input_path`` into ``task.output_path`` chunk by chunk.

    Memory use is one reused ``chunk_size`` buffer regardless of file size.
    The output's parent directories are created as needed and an existing
    output file is truncated. The key phase runs continuously across chunks.

    Args:
        task: Input/output paths and expected size
        key: Transform key
        reporter: Progress reporter for this file
        chunk_size: Bytes per read

    Returns:
        Number of bytes processed

    Raises:
        ProcessError: On the first I/O failure, naming the path involved
    """
    input_path = task.input_path
    output_path = task.output_path
    total = task.total_size

    try:
        src = input_path.open("rb")
    except OSError as e:
        raise ProcessError(input_path, e, "open") from e

    with src:
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ProcessError(output_path.parent, e, "create directory") from e

        try:
            dst = output_path.open("wb")
        except OSError as e:
            raise ProcessError(output_path, e, "create output file") from e

        with dst:
            buffer = bytearray(chunk_size)
            view = memoryview(buffer)
            processed = 0
            while True:
                try:
                    count = src.readinto(buffer)
                except OSError as e:
                    raise ProcessError(input_path, e, "read") from e
                if not count:
                    break

                chunk = view[:count]
                xor_transform(chunk, key, offset=processed)
                try:
                    dst.write(chunk)
                except OSError as e:
                    raise ProcessError(output_path, e, "write") from e

                processed += count
                reporter.update(processed, total)

            try:
                dst.flush()
            except OSError as e:
                raise ProcessError(output_path, e, "flush") from e

    reporter.complete(processed)
    logger.info(f"Transformed {input_path} -> {output_path} ({processed} bytes)")
    return processed
