"""Basic example of getting temporary paths with tempy."""

import logging

from tempy import (
    InvalidOptionsError,
    root_temporary_directory,
    temporary_directory,
    temporary_file,
    temporary_write_sync,
)


def main() -> None:
    """Run basic examples."""
    logging.basicConfig(level=logging.DEBUG)

    print(f"Root temporary directory: {root_temporary_directory}\n")

    print(f"Plain path:     {temporary_file()}")
    print(f"With extension: {temporary_file(extension='png')}")
    print(f"With name:      {temporary_file(name='unicorn.png')}")
    print(f"Directory:      {temporary_directory(prefix='example_')}")
    print(f"Written file:   {temporary_write_sync('unicorn', extension='txt')}")

    try:
        temporary_file(name="unicorn.png", extension="png")
    except InvalidOptionsError as e:
        print(f"\nRejected options {e.options}: {e}")


if __name__ == "__main__":
    main()
