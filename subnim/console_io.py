import logging
from typing import TextIO

from subnim.errors import InvalidCharacter, Overflow
from subnim.parsing import parse_decimal

logger = logging.getLogger("subnim")

# Longest line accepted by the integer prompt, newline excluded.
MAX_INPUT_CHARS = 32


class ConsoleIO:
    """Line-oriented console over a pair of text streams."""

    def __init__(self, reader: TextIO, writer: TextIO):
        self.reader = reader
        self.writer = writer

    def write(self, text: str) -> None:
        self.writer.write(text)
        self.writer.flush()

    def read_line(self) -> str:
        """Read one line without its line ending.

        Raises:
            EOFError: If the input stream is exhausted
        """
        line = self.reader.readline()
        if line == "":
            raise EOFError("End of input")
        return line.rstrip("\r\n")

    def wait_for_enter(self) -> None:
        # End of input counts as enter.
        self.reader.readline()

    def prompt_int_in_range(self, prompt: str, min_num: int, max_num: int) -> int:
        """Prompt until the user enters an integer in ``[min_num, max_num]``.

        The prompt is printed followed by the inclusive range of acceptable
        values. Malformed or out-of-range input is explained and asked again.

        Raises:
            EOFError: If the input stream ends before a valid number is read
            ValueError: If the range is empty
        """
        if min_num > max_num:
            raise ValueError(f"Empty range [{min_num}, {max_num}]")

        while True:
            self.write(f"{prompt}[{min_num}, {max_num}]: ")
            line = self.read_line()

            if len(line) > MAX_INPUT_CHARS:
                self.write("not a valid integer in the given range.\n")
                continue

            try:
                parsed = parse_decimal(line)
            except Overflow:
                self.write("number got too large before reaching the end.\n")
                continue
            except InvalidCharacter:
                self.write("there is a non-digit symbol (0-9) in the number.\n")
                continue

            if parsed < min_num or parsed > max_num:
                self.write(f"number outside of range [{min_num}, {max_num}].\n")
                continue

            logger.debug(f"Read {parsed} for prompt {prompt!r}")
            return parsed
