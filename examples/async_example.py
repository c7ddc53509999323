"""Async example of using tempy scoped tasks."""

import asyncio
import os

from tempy import temporary_directory_task, temporary_file_task, temporary_write_task


async def main() -> None:
    """Run async examples."""
    # Example 1: Scoped file
    print("Example 1: Scoped File")
    print("-" * 50)

    async def count_bytes(path: str) -> int:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write("unicorn")
        return os.path.getsize(path)

    size = await temporary_file_task(count_bytes, extension="txt")
    print(f"Wrote {size} bytes, file already removed\n")

    # Example 2: Scoped directory used by a subprocess
    print("Example 2: Subprocess in a Scoped Directory")
    print("-" * 50)

    async def list_directory(directory: str) -> str:
        open(os.path.join(directory, "a.txt"), "w").close()
        process = await asyncio.create_subprocess_exec(
            "ls", directory, stdout=asyncio.subprocess.PIPE
        )
        stdout, _ = await process.communicate()
        return stdout.decode().strip()

    listing = await temporary_directory_task(list_directory, prefix="example_")
    print(f"Directory contained: {listing}\n")

    # Example 3: Concurrent write tasks
    print("Example 3: Concurrent Write Tasks")
    print("-" * 50)

    contents = ["one", "two", "three"]
    paths = await asyncio.gather(
        *[temporary_write_task(content, lambda path: path) for content in contents]
    )
    for content, path in zip(contents, paths, strict=False):
        print(f"{content!r} -> {os.path.basename(path)[:16]}... (exists: {os.path.exists(path)})")


if __name__ == "__main__":
    asyncio.run(main())
